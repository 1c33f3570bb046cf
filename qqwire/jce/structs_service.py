"""JCE structures for login registration, message sync and push services."""

from __future__ import annotations

from dataclasses import dataclass, field

from qqwire.jce.reader import JceReader
from qqwire.jce.structs_core import JceStruct
from qqwire.jce.writer import JceWriter


@dataclass
class SvcReqRegister:
    """Client registration request sent to the push service."""

    uin: int = 0
    bid: int = 0
    conn_type: int = 0
    other: str = ""
    status: int = 0
    online_push: int = 0
    is_online: int = 0
    is_show_online: int = 0
    kick_pc: int = 0
    kick_weak: int = 0
    timestamp: int = 0
    ios_version: int = 0
    net_type: int = 0
    build_ver: str = ""
    reg_type: int = 0
    dev_param: bytes = b""
    guid: bytes = b""
    locale_id: int = 0
    silent_push: int = 0
    dev_name: str = ""
    dev_type: str = ""
    os_ver: str = ""
    open_push: int = 0
    large_seq: int = 0
    last_watch_start_time: int = 0
    old_sso_ip: int = 0
    new_sso_ip: int = 0
    channel_no: str = ""
    cpid: int = 0
    vendor_name: str = ""
    vendor_os_name: str = ""
    ios_idfa: str = ""
    b769: bytes = b""
    is_set_status: int = 0
    server_buf: bytes = b""
    set_mute: int = 0
    ext_online_status: int = 0
    battery_status: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int64(self.bid, 1)
            .write_byte(self.conn_type, 2)
            .write_string(self.other, 3)
            .write_int32(self.status, 4)
            .write_byte(self.online_push, 5)
            .write_byte(self.is_online, 6)
            .write_byte(self.is_show_online, 7)
            .write_byte(self.kick_pc, 8)
            .write_byte(self.kick_weak, 9)
            .write_int64(self.timestamp, 10)
            .write_int64(self.ios_version, 11)
            .write_byte(self.net_type, 12)
            .write_string(self.build_ver, 13)
            .write_byte(self.reg_type, 14)
            .write_bytes(self.dev_param, 15)
            .write_bytes(self.guid, 16)
            .write_int32(self.locale_id, 17)
            .write_byte(self.silent_push, 18)
            .write_string(self.dev_name, 19)
            .write_string(self.dev_type, 20)
            .write_string(self.os_ver, 21)
            .write_byte(self.open_push, 22)
            .write_int64(self.large_seq, 23)
            .write_int64(self.last_watch_start_time, 24)
            .write_int64(self.old_sso_ip, 26)
            .write_int64(self.new_sso_ip, 27)
            .write_string(self.channel_no, 28)
            .write_int64(self.cpid, 29)
            .write_string(self.vendor_name, 30)
            .write_string(self.vendor_os_name, 31)
            .write_string(self.ios_idfa, 32)
            .write_bytes(self.b769, 33)
            .write_byte(self.is_set_status, 34)
            .write_bytes(self.server_buf, 35)
            .write_byte(self.set_mute, 36)
            .write_int64(self.ext_online_status, 38)
            .write_int32(self.battery_status, 39)
            .getvalue()
        )


@dataclass
class SvcRespRegister(JceStruct):
    """Server reply to a registration request."""

    uin: int = 0
    bid: int = 0
    reply_code: int = 0
    result: str = ""
    server_time: int = 0
    log_qq: int = 0
    need_kik: int = 0
    update_flag: int = 0
    timestamp: int = 0
    crash_flag: int = 0
    client_ip: str = ""
    client_port: int = 0
    hello_interval: int = 0
    large_seq: int = 0
    large_seq_update: int = 0
    d769_rsp_body: bytes = b""
    status: int = 0
    ext_online_status: int = 0
    client_battery_get_interval: int = 0
    client_auto_status_interval: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int64(self.bid, 1)
            .write_byte(self.reply_code, 2)
            .write_string(self.result, 3)
            .write_int64(self.server_time, 4)
            .write_byte(self.log_qq, 5)
            .write_byte(self.need_kik, 6)
            .write_byte(self.update_flag, 7)
            .write_int64(self.timestamp, 8)
            .write_byte(self.crash_flag, 9)
            .write_string(self.client_ip, 10)
            .write_int32(self.client_port, 11)
            .write_int32(self.hello_interval, 12)
            .write_int32(self.large_seq, 13)
            .write_byte(self.large_seq_update, 14)
            .write_bytes(self.d769_rsp_body, 15)
            .write_int32(self.status, 16)
            .write_int64(self.ext_online_status, 17)
            .write_int64(self.client_battery_get_interval, 18)
            .write_int64(self.client_auto_status_interval, 19)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read tags 0 to 17; the two interval fields are not decoded."""
        self.uin = reader.read_int64(0)
        self.bid = reader.read_int64(1)
        self.reply_code = reader.read_byte(2)
        self.result = reader.read_string(3)
        self.server_time = reader.read_int64(4)
        self.log_qq = reader.read_byte(5)
        self.need_kik = reader.read_byte(6)
        self.update_flag = reader.read_byte(7)
        self.timestamp = reader.read_int64(8)
        self.crash_flag = reader.read_byte(9)
        self.client_ip = reader.read_string(10)
        self.client_port = reader.read_int32(11)
        self.hello_interval = reader.read_int32(12)
        self.large_seq = reader.read_int32(13)
        self.large_seq_update = reader.read_byte(14)
        self.d769_rsp_body = reader.read_bytes(15)
        self.status = reader.read_int32(16)
        self.ext_online_status = reader.read_int64(17)


@dataclass
class SvcReqGetMsgV2:
    uin: int = 0
    date_time: int = 0
    recive_pic: int = 0
    ability: int = 0
    channel: int = 0
    inst: int = 0
    channel_ex: int = 0
    sync_cookie: bytes = b""
    sync_flag: int = 0
    ramble_flag: int = 0
    general_abi: int = 0
    pub_account_cookie: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_int32(self.date_time, 1)
            .write_byte(self.recive_pic, 4)
            .write_int16(self.ability, 6)
            .write_byte(self.channel, 9)
            .write_byte(self.inst, 16)
            .write_byte(self.channel_ex, 17)
            .write_bytes(self.sync_cookie, 18)
            .write_int64(self.sync_flag, 19)
            .write_byte(self.ramble_flag, 20)
            .write_int64(self.general_abi, 26)
            .write_bytes(self.pub_account_cookie, 27)
            .getvalue()
        )


@dataclass
class PullGroupSeqParam:
    group_code: int = 0
    last_seq_id: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.group_code, 0)
            .write_int64(self.last_seq_id, 1)
            .getvalue()
        )


@dataclass
class SvcReqPullGroupMsgSeq:
    group_info: list[PullGroupSeqParam] = field(default_factory=list)
    verify_type: int = 0
    filter: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_struct_slice(self.group_info, 0)
            .write_byte(self.verify_type, 1)
            .write_int32(self.filter, 2)
            .getvalue()
        )


@dataclass
class SvcReqRegisterNew:
    request_optional: int = 0
    c2c_msg: SvcReqGetMsgV2 = field(default_factory=SvcReqGetMsgV2)
    group_msg: SvcReqPullGroupMsgSeq = field(default_factory=SvcReqPullGroupMsgSeq)
    dis_group_msg_filter: int = 0
    group_mask: int = 0
    end_seq: int = 0
    o769_body: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.request_optional, 0)
            .write_struct(self.c2c_msg, 1)
            .write_struct(self.group_msg, 2)
            .write_byte(self.dis_group_msg_filter, 14)
            .write_byte(self.group_mask, 15)
            .write_int64(self.end_seq, 16)
            .write_bytes(self.o769_body, 20)
            .getvalue()
        )


@dataclass
class OnlineInfo(JceStruct):
    instance_id: int = 0
    client_type: int = 0
    online_status: int = 0
    platform_id: int = 0
    sub_platform: str = ""
    u_client_type: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int32(self.instance_id, 0)
            .write_int32(self.client_type, 1)
            .write_int32(self.online_status, 2)
            .write_int32(self.platform_id, 3)
            .write_string(self.sub_platform, 4)
            .write_int64(self.u_client_type, 5)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read the fields; the sub-platform is expected as a byte array."""
        self.instance_id = reader.read_int32(0)
        self.client_type = reader.read_int32(1)
        self.online_status = reader.read_int32(2)
        self.platform_id = reader.read_int32(3)
        self.sub_platform = reader.read_bytes(4).decode("utf-8", errors="replace")
        self.u_client_type = reader.read_int64(5)


@dataclass
class SvcRespParam(JceStruct):
    pc_stat: int = 0
    is_support_c2c_roam_msg: int = 0
    is_support_data_line: int = 0
    is_support_printable: int = 0
    is_support_view_pc_file: int = 0
    pc_version: int = 0
    roam_flag: int = 0
    online_infos: list[OnlineInfo] = field(default_factory=list)
    pc_client_type: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int32(self.pc_stat, 0)
            .write_int32(self.is_support_c2c_roam_msg, 1)
            .write_int32(self.is_support_data_line, 2)
            .write_int32(self.is_support_printable, 3)
            .write_int32(self.is_support_view_pc_file, 4)
            .write_int32(self.pc_version, 5)
            .write_int64(self.roam_flag, 6)
            .write_struct_slice(self.online_infos, 7)
            .write_int32(self.pc_client_type, 8)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.pc_stat = reader.read_int32(0)
        self.is_support_c2c_roam_msg = reader.read_int32(1)
        self.is_support_data_line = reader.read_int32(2)
        self.is_support_printable = reader.read_int32(3)
        self.is_support_view_pc_file = reader.read_int32(4)
        self.pc_version = reader.read_int32(5)
        self.roam_flag = reader.read_int64(6)
        self.online_infos = reader.read_struct_list(OnlineInfo, 7)
        self.pc_client_type = reader.read_int32(8)


@dataclass
class RequestPushNotify(JceStruct):
    uin: int = 0
    type: int = 0
    service: str = ""
    cmd: str = ""
    notify_cookie: bytes = b""
    msg_type: int = 0
    user_active: int = 0
    general_flag: int = 0
    binded_uin: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_byte(self.type, 1)
            .write_string(self.service, 2)
            .write_string(self.cmd, 3)
            .write_bytes(self.notify_cookie, 4)
            .write_int32(self.msg_type, 5)
            .write_int32(self.user_active, 6)
            .write_int32(self.general_flag, 7)
            .write_int64(self.binded_uin, 8)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.uin = reader.read_int64(0)
        self.type = reader.read_byte(1)
        self.service = reader.read_string(2)
        self.cmd = reader.read_string(3)
        self.notify_cookie = reader.read_bytes(4)
        self.msg_type = reader.read_int32(5)
        self.user_active = reader.read_int32(6)
        self.general_flag = reader.read_int32(7)
        self.binded_uin = reader.read_int64(8)


@dataclass
class InstanceInfo(JceStruct):
    app_id: int = 0
    tablet: int = 0
    platform: int = 0
    product_type: int = 0
    client_type: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int32(self.app_id, 0)
            .write_byte(self.tablet, 1)
            .write_int64(self.platform, 2)
            .write_int64(self.product_type, 3)
            .write_int64(self.client_type, 4)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.app_id = reader.read_int32(0)
        self.tablet = reader.read_byte(1)
        self.platform = reader.read_int64(2)
        self.product_type = reader.read_int64(3)
        self.client_type = reader.read_int64(4)


@dataclass
class SvcReqMSFLoginNotify(JceStruct):
    app_id: int = 0
    status: int = 0
    tablet: int = 0
    platform: int = 0
    title: str = ""
    info: str = ""
    product_type: int = 0
    client_type: int = 0
    instance_list: list[InstanceInfo] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.app_id, 0)
            .write_byte(self.status, 1)
            .write_byte(self.tablet, 2)
            .write_int64(self.platform, 3)
            .write_string(self.title, 4)
            .write_string(self.info, 5)
            .write_int64(self.product_type, 6)
            .write_int64(self.client_type, 7)
            .write_struct_slice(self.instance_list, 8)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.app_id = reader.read_int64(0)
        self.status = reader.read_byte(1)
        self.tablet = reader.read_byte(2)
        self.platform = reader.read_int64(3)
        self.title = reader.read_string(4)
        self.info = reader.read_string(5)
        self.product_type = reader.read_int64(6)
        self.client_type = reader.read_int64(7)
        self.instance_list = reader.read_struct_list(InstanceInfo, 8)


@dataclass
class PushMessageInfo(JceStruct):
    from_uin: int = 0
    msg_time: int = 0
    msg_type: int = 0
    msg_seq: int = 0
    msg: str = ""
    real_msg_time: int = 0
    v_msg: bytes = b""
    app_share_id: int = 0
    msg_cookies: bytes = b""
    app_share_cookie: bytes = b""
    msg_uid: int = 0
    last_change_time: int = 0
    from_inst_id: int = 0
    remark_of_sender: bytes = b""
    from_mobile: str = ""
    from_name: str = ""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.from_uin, 0)
            .write_int64(self.msg_time, 1)
            .write_int16(self.msg_type, 2)
            .write_int16(self.msg_seq, 3)
            .write_string(self.msg, 4)
            .write_int32(self.real_msg_time, 5)
            .write_bytes(self.v_msg, 6)
            .write_int64(self.app_share_id, 7)
            .write_bytes(self.msg_cookies, 8)
            .write_bytes(self.app_share_cookie, 9)
            .write_int64(self.msg_uid, 10)
            .write_int64(self.last_change_time, 11)
            .write_int64(self.from_inst_id, 14)
            .write_bytes(self.remark_of_sender, 15)
            .write_string(self.from_mobile, 16)
            .write_string(self.from_name, 17)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        """Read the message fields the client uses; the rest keep their values."""
        self.from_uin = reader.read_int64(0)
        self.msg_time = reader.read_int64(1)
        self.msg_type = reader.read_int16(2)
        self.msg_seq = reader.read_int16(3)
        self.msg = reader.read_string(4)
        self.v_msg = reader.read_bytes(6)
        self.msg_cookies = reader.read_bytes(8)
        self.msg_uid = reader.read_int64(10)
        self.from_mobile = reader.read_string(16)
        self.from_name = reader.read_string(17)


@dataclass
class DelMsgInfo:
    from_uin: int = 0
    msg_time: int = 0
    msg_seq: int = 0
    msg_cookies: bytes = b""
    cmd: int = 0
    msg_type: int = 0
    app_id: int = 0
    send_time: int = 0
    sso_seq: int = 0
    sso_ip: int = 0
    client_ip: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.from_uin, 0)
            .write_int64(self.msg_time, 1)
            .write_int16(self.msg_seq, 2)
            .write_bytes(self.msg_cookies, 3)
            .write_int16(self.cmd, 4)
            .write_int64(self.msg_type, 5)
            .write_int64(self.app_id, 6)
            .write_int64(self.send_time, 7)
            .write_int32(self.sso_seq, 8)
            .write_int32(self.sso_ip, 9)
            .write_int32(self.client_ip, 10)
            .getvalue()
        )


@dataclass
class SvcRespPushMsg:
    uin: int = 0
    del_infos: list[DelMsgInfo] = field(default_factory=list)
    svrip: int = 0
    push_token: bytes = b""
    service_type: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.uin, 0)
            .write_struct_slice(self.del_infos, 1)
            .write_int32(self.svrip, 2)
            .write_bytes(self.push_token, 3)
            .write_int32(self.service_type, 4)
            .getvalue()
        )


@dataclass
class SvcReqGetDevLoginInfo:
    """Request for logged-in devices.

    ``get_dev_list_type``: 1 login devices, 2 recent logins, 4 authorised devices.
    """

    guid: bytes = b""
    app_name: str = ""
    login_type: int = 0
    timestamp: int = 0
    next_item_index: int = 0
    require_max: int = 0
    get_dev_list_type: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_bytes(self.guid, 0)
            .write_string(self.app_name, 1)
            .write_int64(self.login_type, 2)
            .write_int64(self.timestamp, 3)
            .write_int64(self.next_item_index, 4)
            .write_int64(self.require_max, 5)
            .write_int64(self.get_dev_list_type, 6)
            .getvalue()
        )


@dataclass
class SvcDevLoginInfo:
    app_id: int = 0
    guid: bytes = b""
    login_time: int = 0
    login_platform: int = 0
    login_location: str = ""
    device_name: str = ""
    device_type_info: str = ""
    ter_type: int = 0
    product_type: int = 0
    can_be_kicked: int = 0

    def read_from(self, reader: JceReader) -> None:
        self.app_id = reader.read_int64(0)
        self.guid = reader.read_bytes(1)
        self.login_time = reader.read_int64(2)
        self.login_platform = reader.read_int64(3)
        self.login_location = reader.read_string(4)
        self.device_name = reader.read_string(5)
        self.device_type_info = reader.read_string(6)
        self.ter_type = reader.read_int64(8)
        self.product_type = reader.read_int64(9)
        self.can_be_kicked = reader.read_int64(10)