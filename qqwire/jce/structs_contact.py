"""JCE structures for friend, group and profile-card services."""

from __future__ import annotations

from dataclasses import dataclass, field

from qqwire.jce.reader import JceReader
from qqwire.jce.structs_core import JceStruct
from qqwire.jce.writer import JceWriter


@dataclass
class FriendListRequest:
    """Request for a page of the friend list and, optionally, friend groups."""

    reqtype: int = 0
    if_reflush: int = 0
    uin: int = 0
    start_index: int = 0
    friend_count: int = 0
    group_id: int = 0
    if_get_group_info: int = 0
    group_start_index: int = 0
    group_count: int = 0
    if_get_msf_group: int = 0
    if_show_term_type: int = 0
    version: int = 0
    uin_list: list[int] = field(default_factory=list)
    app_type: int = 0
    if_get_dov_id: int = 0
    if_get_both_flag: int = 0
    d50: bytes = b""
    d6b: bytes = b""
    sns_type_list: list[int] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int32(self.reqtype, 0)
            .write_byte(self.if_reflush, 1)
            .write_int64(self.uin, 2)
            .write_int16(self.start_index, 3)
            .write_int16(self.friend_count, 4)
            .write_byte(self.group_id, 5)
            .write_byte(self.if_get_group_info, 6)
            .write_byte(self.group_start_index, 7)
            .write_byte(self.group_count, 8)
            .write_byte(self.if_get_msf_group, 9)
            .write_byte(self.if_show_term_type, 10)
            .write_int64(self.version, 11)
            .write_int64_slice(self.uin_list, 12)
            .write_int32(self.app_type, 13)
            .write_byte(self.if_get_dov_id, 14)
            .write_byte(self.if_get_both_flag, 15)
            .write_bytes(self.d50, 16)
            .write_bytes(self.d6b, 17)
            .write_int64_slice(self.sns_type_list, 18)
            .getvalue()
        )


@dataclass
class FriendInfo(JceStruct):
    """One entry of the friend list."""

    friend_uin: int = 0
    group_id: int = 0
    face_id: int = 0
    remark: str = ""
    qq_type: int = 0
    status: int = 0
    member_level: int = 0
    is_mqq_online: int = 0
    qq_online_state: int = 0
    is_iphone_online: int = 0
    detail_status_flag: int = 0
    qq_online_state_v2: int = 0
    show_name: str = ""
    is_remark: int = 0
    nick: str = ""
    special_flag: int = 0
    im_group_id: bytes = b""
    msf_group_id: bytes = b""
    term_type: int = 0
    network: int = 0
    ring: bytes = b""
    abi_flag: int = 0
    face_addon_id: int = 0
    network_type: int = 0
    vip_font: int = 0
    icon_type: int = 0
    term_desc: str = ""
    color_ring: int = 0
    apollo_flag: int = 0
    apollo_timestamp: int = 0
    sex: int = 0
    founder_font: int = 0
    eim_id: str = ""
    eim_mobile: str = ""
    olympic_torch: int = 0
    apollo_sign_time: int = 0
    lavi_uin: int = 0
    tag_update_time: int = 0
    game_last_login_time: int = 0
    game_app_id: int = 0
    card_id: bytes = b""
    bit_set: int = 0
    king_of_glory_flag: int = 0
    king_of_glory_rank: int = 0
    master_uin: str = ""
    last_medal_update_time: int = 0
    face_store_id: int = 0
    font_effect: int = 0
    dov_id: str = ""
    both_flag: int = 0
    centi_show_3d_flag: int = 0
    intimate_info: bytes = b""
    show_nameplate: int = 0
    new_lover_diamond_flag: int = 0
    ext_sns_frd_data: bytes = b""
    mutual_mark_data: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.friend_uin, 0)
            .write_byte(self.group_id, 1)
            .write_int16(self.face_id, 2)
            .write_string(self.remark, 3)
            .write_byte(self.qq_type, 4)
            .write_byte(self.status, 5)
            .write_byte(self.member_level, 6)
            .write_byte(self.is_mqq_online, 7)
            .write_byte(self.qq_online_state, 8)
            .write_byte(self.is_iphone_online, 9)
            .write_byte(self.detail_status_flag, 10)
            .write_byte(self.qq_online_state_v2, 11)
            .write_string(self.show_name, 12)
            .write_byte(self.is_remark, 13)
            .write_string(self.nick, 14)
            .write_byte(self.special_flag, 15)
            .write_bytes(self.im_group_id, 16)
            .write_bytes(self.msf_group_id, 17)
            .write_int32(self.term_type, 18)
            .write_byte(self.network, 20)
            .write_bytes(self.ring, 21)
            .write_int64(self.abi_flag, 22)
            .write_int64(self.face_addon_id, 23)
            .write_int32(self.network_type, 24)
            .write_int64(self.vip_font, 25)
            .write_int32(self.icon_type, 26)
            .write_string(self.term_desc, 27)
            .write_int64(self.color_ring, 28)
            .write_byte(self.apollo_flag, 29)
            .write_int64(self.apollo_timestamp, 30)
            .write_byte(self.sex, 31)
            .write_int64(self.founder_font, 32)
            .write_string(self.eim_id, 33)
            .write_string(self.eim_mobile, 34)
            .write_byte(self.olympic_torch, 35)
            .write_int64(self.apollo_sign_time, 36)
            .write_int64(self.lavi_uin, 37)
            .write_int64(self.tag_update_time, 38)
            .write_int64(self.game_last_login_time, 39)
            .write_int64(self.game_app_id, 40)
            .write_bytes(self.card_id, 41)
            .write_int64(self.bit_set, 42)
            .write_byte(self.king_of_glory_flag, 43)
            .write_int64(self.king_of_glory_rank, 44)
            .write_string(self.master_uin, 45)
            .write_int64(self.last_medal_update_time, 46)
            .write_int64(self.face_store_id, 47)
            .write_int64(self.font_effect, 48)
            .write_string(self.dov_id, 49)
            .write_int64(self.both_flag, 50)
            .write_byte(self.centi_show_3d_flag, 51)
            .write_bytes(self.intimate_info, 52)
            .write_byte(self.show_nameplate, 53)
            .write_byte(self.new_lover_diamond_flag, 54)
            .write_bytes(self.ext_sns_frd_data, 55)
            .write_bytes(self.mutual_mark_data, 56)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read the fields the client uses; the rest keep their values."""
        self.friend_uin = reader.read_int64(0)
        self.group_id = reader.read_byte(1)
        self.face_id = reader.read_int16(2)
        self.remark = reader.read_string(3)
        self.status = reader.read_byte(5)
        self.member_level = reader.read_byte(6)
        self.nick = reader.read_string(14)
        self.network = reader.read_byte(20)
        self.network_type = reader.read_int32(24)
        self.card_id = reader.read_bytes(41)


@dataclass
class TroopListRequest:
    """Request for the list of joined groups."""

    uin: int = 0
    get_msf_msg_flag: int = 0
    cookies: bytes = b""
    group_info: list[int] = field(default_factory=list)
    group_flag_ext: int = 0
    version: int = 0
    company_id: int = 0
    version_num: int = 0
    get_long_group_name: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_byte(self.get_msf_msg_flag, 1)
            .write_bytes(self.cookies, 2)
            .write_int64_slice(self.group_info, 3)
            .write_byte(self.group_flag_ext, 4)
            .write_int32(self.version, 5)
            .write_int64(self.company_id, 6)
            .write_int64(self.version_num, 7)
            .write_byte(self.get_long_group_name, 8)
            .getvalue()
        )


@dataclass
class TroopNumber(JceStruct):
    """One entry of the group list."""

    group_uin: int = 0
    group_code: int = 0
    flag: int = 0
    group_info_seq: int = 0
    group_name: str = ""
    group_memo: str = ""
    group_flag_ext: int = 0
    group_rank_seq: int = 0
    certification_type: int = 0
    shut_up_timestamp: int = 0
    my_shut_up_timestamp: int = 0
    cmd_uin_uin_flag: int = 0
    additional_flag: int = 0
    group_type_flag: int = 0
    group_sec_type: int = 0
    group_sec_type_info: int = 0
    group_class_ext: int = 0
    app_privilege_flag: int = 0
    subscription_uin: int = 0
    member_num: int = 0
    member_num_seq: int = 0
    member_card_seq: int = 0
    group_flag_ext3: int = 0
    group_owner_uin: int = 0
    is_conf_group: int = 0
    is_modify_conf_group_face: int = 0
    is_modify_conf_group_name: int = 0
    cmd_uin_join_time: int = 0
    company_id: int = 0
    max_group_member_num: int = 0
    cmd_uin_group_mask: int = 0
    guild_app_id: int = 0
    guild_sub_type: int = 0
    cmd_uin_ringtone_id: int = 0
    cmd_uin_flag_ex2: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.group_uin, 0)
            .write_int64(self.group_code, 1)
            .write_byte(self.flag, 2)
            .write_int64(self.group_info_seq, 3)
            .write_string(self.group_name, 4)
            .write_string(self.group_memo, 5)
            .write_int64(self.group_flag_ext, 6)
            .write_int64(self.group_rank_seq, 7)
            .write_int64(self.certification_type, 8)
            .write_int64(self.shut_up_timestamp, 9)
            .write_int64(self.my_shut_up_timestamp, 10)
            .write_int64(self.cmd_uin_uin_flag, 11)
            .write_int64(self.additional_flag, 12)
            .write_int64(self.group_type_flag, 13)
            .write_int64(self.group_sec_type, 14)
            .write_int64(self.group_sec_type_info, 15)
            .write_int64(self.group_class_ext, 16)
            .write_int64(self.app_privilege_flag, 17)
            .write_int64(self.subscription_uin, 18)
            .write_int64(self.member_num, 19)
            .write_int64(self.member_num_seq, 20)
            .write_int64(self.member_card_seq, 21)
            .write_int64(self.group_flag_ext3, 22)
            .write_int64(self.group_owner_uin, 23)
            .write_byte(self.is_conf_group, 24)
            .write_byte(self.is_modify_conf_group_face, 25)
            .write_byte(self.is_modify_conf_group_name, 26)
            .write_int64(self.cmd_uin_join_time, 27)
            .write_int64(self.company_id, 28)
            .write_int64(self.max_group_member_num, 29)
            .write_int64(self.cmd_uin_group_mask, 30)
            .write_int64(self.guild_app_id, 31)
            .write_int64(self.guild_sub_type, 32)
            .write_int64(self.cmd_uin_ringtone_id, 33)
            .write_int64(self.cmd_uin_flag_ex2, 34)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read the fields the client uses; the rest keep their values."""
        self.group_uin = reader.read_int64(0)
        self.group_code = reader.read_int64(1)
        self.group_name = reader.read_string(4)
        self.group_memo = reader.read_string(5)
        self.member_num = reader.read_int64(19)
        self.group_owner_uin = reader.read_int64(23)
        self.max_group_member_num = reader.read_int64(29)


@dataclass
class TroopMemberListRequest:
    """Request for a page of a group's member list."""

    uin: int = 0
    group_code: int = 0
    next_uin: int = 0
    group_uin: int = 0
    version: int = 0
    req_type: int = 0
    get_list_appoint_time: int = 0
    rich_card_name_ver: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int64(self.group_code, 1)
            .write_int64(self.next_uin, 2)
            .write_int64(self.group_uin, 3)
            .write_int64(self.version, 4)
            .write_int64(self.req_type, 5)
            .write_int64(self.get_list_appoint_time, 6)
            .write_byte(self.rich_card_name_ver, 7)
            .getvalue()
        )


@dataclass
class TroopMemberInfo(JceStruct):
    """One member of a group."""

    member_uin: int = 0
    face_id: int = 0
    age: int = 0
    gender: int = 0
    nick: str = ""
    status: int = 0
    show_name: str = ""
    name: str = ""
    memo: str = ""
    auto_remark: str = ""
    member_level: int = 0
    join_time: int = 0
    last_speak_time: int = 0
    credit_level: int = 0
    flag: int = 0
    flag_ext: int = 0
    point: int = 0
    concerned: int = 0
    shielded: int = 0
    special_title: str = ""
    special_title_expire_time: int = 0
    job: str = ""
    apollo_flag: int = 0
    apollo_timestamp: int = 0
    global_group_level: int = 0
    title_id: int = 0
    shut_up_timestamp: int = 0
    global_group_point: int = 0
    rich_card_name_ver: int = 0
    vip_type: int = 0
    vip_level: int = 0
    big_club_level: int = 0
    big_club_flag: int = 0
    nameplate: int = 0
    group_honor: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.member_uin, 0)
            .write_int16(self.face_id, 1)
            .write_byte(self.age, 2)
            .write_byte(self.gender, 3)
            .write_string(self.nick, 4)
            .write_byte(self.status, 5)
            .write_string(self.show_name, 6)
            .write_string(self.name, 8)
            .write_string(self.memo, 12)
            .write_string(self.auto_remark, 13)
            .write_int64(self.member_level, 14)
            .write_int64(self.join_time, 15)
            .write_int64(self.last_speak_time, 16)
            .write_int64(self.credit_level, 17)
            .write_int64(self.flag, 18)
            .write_int64(self.flag_ext, 19)
            .write_int64(self.point, 20)
            .write_byte(self.concerned, 21)
            .write_byte(self.shielded, 22)
            .write_string(self.special_title, 23)
            .write_int64(self.special_title_expire_time, 24)
            .write_string(self.job, 25)
            .write_byte(self.apollo_flag, 26)
            .write_int64(self.apollo_timestamp, 27)
            .write_int64(self.global_group_level, 28)
            .write_int64(self.title_id, 29)
            .write_int64(self.shut_up_timestamp, 30)
            .write_int64(self.global_group_point, 31)
            .write_byte(self.rich_card_name_ver, 33)
            .write_int64(self.vip_type, 34)
            .write_int64(self.vip_level, 35)
            .write_int64(self.big_club_level, 36)
            .write_int64(self.big_club_flag, 37)
            .write_int64(self.nameplate, 38)
            .write_bytes(self.group_honor, 39)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read the fields the client uses; the rest keep their values."""
        self.member_uin = reader.read_int64(0)
        self.face_id = reader.read_int16(1)
        self.gender = reader.read_byte(3)
        self.nick = reader.read_string(4)
        self.show_name = reader.read_string(6)
        self.name = reader.read_string(8)
        self.auto_remark = reader.read_string(13)
        self.member_level = reader.read_int64(14)
        self.join_time = reader.read_int64(15)
        self.last_speak_time = reader.read_int64(16)
        self.flag = reader.read_int64(18)
        self.special_title = reader.read_string(23)
        self.special_title_expire_time = reader.read_int64(24)
        self.shut_up_timestamp = reader.read_int64(30)


@dataclass
class UinInfo:
    """A member's card details used when editing a group card."""

    uin: int = 0
    flag: int = 0
    name: str = ""
    gender: int = 0
    phone: str = ""
    email: str = ""
    remark: str = ""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int64(self.flag, 1)
            .write_string(self.name, 2)
            .write_byte(self.gender, 3)
            .write_string(self.phone, 4)
            .write_string(self.email, 5)
            .write_string(self.remark, 6)
            .getvalue()
        )


@dataclass
class ModifyGroupCardRequest:
    """Request to change members' group cards."""

    zero: int = 0
    group_code: int = 0
    new_seq: int = 0
    uin_info: list[UinInfo] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.zero, 0)
            .write_int64(self.group_code, 1)
            .write_int64(self.new_seq, 2)
            .write_struct_slice(self.uin_info, 3)
            .getvalue()
        )


@dataclass
class SummaryCardReq:
    """Request for a user's profile summary card."""

    uin: int = 0
    come_from: int = 0
    qzone_feed_timestamp: int = 0
    is_friend: int = 0
    group_code: int = 0
    group_uin: int = 0
    get_control: int = 0
    add_friend_source: int = 0
    secure_sig: bytes = b""
    req_services: list[bytes] = field(default_factory=list)
    tiny_id: int = 0
    like_source: int = 0
    req_medal_wall_info: int = 0
    req_0x5eb_field_id: list[int] = field(default_factory=list)
    req_nearby_god_info: int = 0
    req_extend_card: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int32(self.come_from, 1)
            .write_int64(self.qzone_feed_timestamp, 2)
            .write_byte(self.is_friend, 3)
            .write_int64(self.group_code, 4)
            .write_int64(self.group_uin, 5)
            .write_int64(self.get_control, 8)
            .write_int32(self.add_friend_source, 9)
            .write_bytes(self.secure_sig, 10)
            .write_bytes_slice(self.req_services, 14)
            .write_int64(self.tiny_id, 15)
            .write_int64(self.like_source, 16)
            .write_byte(self.req_medal_wall_info, 18)
            .write_int64_slice(self.req_0x5eb_field_id, 19)
            .write_byte(self.req_nearby_god_info, 20)
            .write_byte(self.req_extend_card, 22)
            .getvalue()
        )


@dataclass
class SummaryCardReqSearch:
    """Search request for summary cards by keyword."""

    keyword: str = ""
    country_code: str = ""
    version: int = 0
    req_services: list[bytes] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_string(self.keyword, 0)
            .write_string(self.country_code, 1)
            .write_int32(self.version, 2)
            .write_bytes_slice(self.req_services, 3)
            .getvalue()
        )


@dataclass
class DelFriendReq:
    """Request to delete a friend."""

    uin: int = 0
    del_uin: int = 0
    del_type: int = 0
    version: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int64(self.del_uin, 1)
            .write_byte(self.del_type, 2)
            .write_int32(self.version, 3)
            .getvalue()
        )


@dataclass
class Setting:
    """A single path/value profile setting."""

    path: str = ""
    value: str = ""

    def to_bytes(self) -> bytes:
        return JceWriter().write_string(self.path, 0).write_string(self.value, 1).getvalue()