from qqwire.jce.reader import JceReader
from qqwire.jce.structs_contact import (
    DelFriendReq,
    FriendInfo,
    FriendListRequest,
    ModifyGroupCardRequest,
    Setting,
    SummaryCardReq,
    SummaryCardReqSearch,
    TroopListRequest,
    TroopMemberInfo,
    TroopMemberListRequest,
    TroopNumber,
    UinInfo,
)


def test_del_friend_req_wire_bytes():
    req = DelFriendReq(uin=1, del_uin=2, del_type=2, version=1)
    assert req.to_bytes() == b"\x00\x01\x10\x02\x20\x02\x30\x01"


def test_del_friend_req_zero_fields_use_zero_type():
    assert DelFriendReq().to_bytes() == b"\x0c\x1c\x2c\x3c"


def test_setting_wire_bytes():
    assert Setting(path="a", value="b").to_bytes() == b"\x06\x01a\x16\x01b"


def test_setting_decodes_back():
    data = Setting(path="message.group.policy.123", value="1").to_bytes()
    reader = JceReader(data)
    assert reader.read_string(0) == "message.group.policy.123"
    assert reader.read_string(1) == "1"


def test_friend_info_round_trip_of_read_fields():
    original = FriendInfo(
        friend_uin=123456789,
        group_id=3,
        face_id=300,
        remark="remark",
        status=10,
        member_level=7,
        nick="nick",
        network=2,
        network_type=40000,
        card_id=b"\x01\x02\x03",
    )
    decoded = FriendInfo()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded == original


def test_friend_info_unread_fields_keep_defaults():
    original = FriendInfo(friend_uin=42, qq_type=5, show_name="shown", sex=1)
    decoded = FriendInfo()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded.friend_uin == 42
    assert decoded.qq_type == 0
    assert decoded.show_name == ""
    assert decoded.sex == 0


def test_troop_number_round_trip_of_read_fields():
    original = TroopNumber(
        group_uin=2_100_000_000,
        group_code=987654321,
        group_name="group",
        group_memo="memo",
        member_num=200,
        group_owner_uin=123456,
        max_group_member_num=500,
    )
    decoded = TroopNumber()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded == original


def test_troop_number_large_uin_round_trip():
    original = TroopNumber(group_uin=5_000_000_000, group_code=6_000_000_000)
    decoded = TroopNumber()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded.group_uin == 5_000_000_000
    assert decoded.group_code == 6_000_000_000


def test_troop_member_info_round_trip_of_read_fields():
    original = TroopMemberInfo(
        member_uin=11111,
        face_id=5,
        gender=1,
        nick="nick",
        show_name="show",
        name="card",
        auto_remark="auto",
        member_level=3,
        join_time=1_600_000_000,
        last_speak_time=1_600_000_100,
        flag=1,
        special_title="title",
        special_title_expire_time=1_700_000_000,
        shut_up_timestamp=1_650_000_000,
    )
    decoded = TroopMemberInfo()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded == original


def test_troop_member_info_skips_unread_fields():
    original = TroopMemberInfo(member_uin=7, age=30, memo="memo", job="job", group_honor=b"xy")
    decoded = TroopMemberInfo()
    decoded.read_from(JceReader(original.to_bytes()))
    assert decoded.member_uin == 7
    assert decoded.age == 0
    assert decoded.memo == ""
    assert decoded.group_honor == b""


def test_friend_list_request_fields_decode():
    req = FriendListRequest(
        reqtype=3,
        if_reflush=1,
        uin=123456789,
        start_index=150,
        friend_count=150,
        version=27,
        d50=b"d50-payload",
        sns_type_list=[13580, 13581, 13582],
    )
    reader = JceReader(req.to_bytes())
    assert reader.read_int32(0) == 3
    assert reader.read_byte(1) == 1
    assert reader.read_int64(2) == 123456789
    assert reader.read_int16(3) == 150
    assert reader.read_int64(11) == 27
    assert reader.read_bytes(16) == b"d50-payload"
    assert reader.read_bytes(17) == b""


def test_troop_list_request_fields_decode():
    req = TroopListRequest(
        uin=123456789,
        get_msf_msg_flag=1,
        cookies=b"cookie-bytes",
        group_flag_ext=1,
        version=7,
        version_num=1,
        get_long_group_name=1,
    )
    reader = JceReader(req.to_bytes())
    assert reader.read_int64(0) == 123456789
    assert reader.read_bytes(2) == b"cookie-bytes"
    assert reader.read_int32(5) == 7
    assert reader.read_byte(8) == 1


def test_troop_member_list_request_fields_decode():
    req = TroopMemberListRequest(uin=1001, group_code=2002, next_uin=3003, group_uin=4004, version=2)
    reader = JceReader(req.to_bytes())
    assert reader.read_int64(0) == 1001
    assert reader.read_int64(1) == 2002
    assert reader.read_int64(2) == 3003
    assert reader.read_int64(3) == 4004
    assert reader.read_int64(4) == 2
    assert reader.read_byte(7) == 0


def test_modify_group_card_request_embeds_uin_info():
    info = UinInfo(uin=55555, flag=31, name="new tag")
    req = ModifyGroupCardRequest(group_code=98765, uin_info=[info])
    data = req.to_bytes()
    assert info.to_bytes() in data
    reader = JceReader(data)
    assert reader.read_int64(1) == 98765


def test_uin_info_fields_decode():
    reader = JceReader(UinInfo(uin=55555, flag=31, name="tag", email="user@example.com").to_bytes())
    assert reader.read_int64(0) == 55555
    assert reader.read_int64(1) == 31
    assert reader.read_string(2) == "tag"
    assert reader.read_string(5) == "user@example.com"


def test_summary_card_req_fields_decode():
    services = [b"service-one", b"service-two"]
    req = SummaryCardReq(
        uin=123456,
        come_from=31,
        get_control=69181,
        add_friend_source=3001,
        secure_sig=b"\x00",
        req_services=services,
        req_0x5eb_field_id=[27225, 27224, 42122],
        req_nearby_god_info=1,
        req_extend_card=1,
    )
    reader = JceReader(req.to_bytes())
    assert reader.read_int64(0) == 123456
    assert reader.read_int32(1) == 31
    assert reader.read_int64(8) == 69181
    assert reader.read_int32(9) == 3001
    assert reader.read_bytes(10) == b"\x00"
    assert reader.read_byte_arr_arr(14) == services
    assert reader.read_byte(20) == 1
    assert reader.read_byte(22) == 1


def test_summary_card_req_search_fields_decode():
    services = [b"busi"]
    req = SummaryCardReqSearch(keyword="keyword", country_code="+86", version=3, req_services=services)
    reader = JceReader(req.to_bytes())
    assert reader.read_string(0) == "keyword"
    assert reader.read_string(1) == "+86"
    assert reader.read_int32(2) == 3
    assert reader.read_byte_arr_arr(3) == services


def test_summary_card_req_search_empty_services():
    reader = JceReader(SummaryCardReqSearch(keyword="k").to_bytes())
    assert reader.read_string(0) == "k"
    assert reader.read_byte_arr_arr(3) == []