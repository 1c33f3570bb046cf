import struct

import pytest

from qqwire.jce.writer import JceWriter


def out(fn):
    w = JceWriter()
    fn(w)
    return w.getvalue()


class Blob:
    def __init__(self, data):
        self.data = data

    def to_bytes(self):
        return self.data


def test_zero_byte_is_zero_type():
    assert JceWriter().write_byte(0, 0).getvalue() == b"\x0c"


def test_byte_head_layout():
    data = JceWriter().write_byte(5, 3).getvalue()
    assert data[0] >> 4 == 3
    assert data[0] & 0x0F == 0
    assert data[1:] == bytes([5])


def test_large_tag_uses_second_byte():
    data = JceWriter().write_byte(7, 20).getvalue()
    assert data[0] == 0xF0
    assert data[1] == 20
    assert data[2] == 7


def test_tag_out_of_range():
    with pytest.raises(ValueError):
        JceWriter().write_byte(1, 256)


def test_bool_matches_byte():
    assert JceWriter().write_bool(True, 2).getvalue() == JceWriter().write_byte(1, 2).getvalue()
    assert JceWriter().write_bool(False, 2).getvalue() == JceWriter().write_byte(0, 2).getvalue()


@pytest.mark.parametrize("value", [0, 1, -1, 127, -128])
def test_small_ints_collapse_to_byte(value):
    expected = JceWriter().write_byte(value, 1).getvalue()
    assert JceWriter().write_int16(value, 1).getvalue() == expected
    assert JceWriter().write_int32(value, 1).getvalue() == expected
    assert JceWriter().write_int64(value, 1).getvalue() == expected


def test_negative_one_as_signed_byte():
    data = JceWriter().write_int32(-1, 0).getvalue()
    assert struct.unpack(">b", data[1:])[0] == -1


@pytest.mark.parametrize("value", [128, -200, 32767, -32768])
def test_int16_range(value):
    data = JceWriter().write_int64(value, 0).getvalue()
    assert data[0] & 0x0F == 1
    assert struct.unpack(">h", data[1:])[0] == value
    assert JceWriter().write_int16(value, 0).getvalue() == data


@pytest.mark.parametrize("value", [32768, -32769, 2**31 - 1, -(2**31)])
def test_int32_range(value):
    data = JceWriter().write_int64(value, 0).getvalue()
    assert data[0] & 0x0F == 2
    assert struct.unpack(">i", data[1:])[0] == value
    assert JceWriter().write_int32(value, 0).getvalue() == data


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1, 2**63 - 1])
def test_int64_range(value):
    data = JceWriter().write_int64(value, 4).getvalue()
    assert data[0] >> 4 == 4
    assert data[0] & 0x0F == 3
    assert struct.unpack(">q", data[1:])[0] == value


def test_floats():
    f = JceWriter().write_float32(1.5, 0).getvalue()
    d = JceWriter().write_float64(2.25, 0).getvalue()
    assert f[0] & 0x0F == 4 and struct.unpack(">f", f[1:])[0] == 1.5
    assert d[0] & 0x0F == 5 and struct.unpack(">d", d[1:])[0] == 2.25


def test_short_string():
    data = JceWriter().write_string("田所", 5).getvalue()
    encoded = "田所".encode()
    assert data[0] == (5 << 4) | 6
    assert data[1] == len(encoded)
    assert data[2:] == encoded


def test_long_string():
    text = "x" * 300
    data = JceWriter().write_string(text, 1).getvalue()
    assert data[0] & 0x0F == 7
    assert struct.unpack(">I", data[1:5])[0] == 300
    assert data[5:] == text.encode()


def test_bytes_layout():
    payload = bytes(range(200))
    data = JceWriter().write_bytes(payload, 7).getvalue()
    assert data[0] == (7 << 4) | 13
    assert data[1] == 0
    assert data[2:-len(payload)] == JceWriter().write_int32(len(payload), 0).getvalue()
    assert data.endswith(payload)


def test_none_bytes_same_as_empty():
    assert JceWriter().write_bytes(None, 1).getvalue() == JceWriter().write_bytes(b"", 1).getvalue()


def test_int64_slice():
    values = [1, 300, 2**40]
    data = JceWriter().write_int64_slice(values, 2).getvalue()
    body = out(lambda w: [w.write_int64(v, 0) for v in values])
    assert data[0] == (2 << 4) | 9
    assert data[1:-len(body)] == JceWriter().write_int32(3, 0).getvalue()
    assert data.endswith(body)


def test_empty_slices_mark_zero_count():
    a = JceWriter().write_int64_slice([], 3).getvalue()
    b = JceWriter().write_bytes_slice(None, 3).getvalue()
    c = JceWriter().write_struct_slice([], 3).getvalue()
    assert a == b == c
    assert a[1:] == JceWriter().write_int32(0, 0).getvalue()


def test_bytes_slice():
    items = [b"a", b"bc"]
    data = JceWriter().write_bytes_slice(items, 0).getvalue()
    body = out(lambda w: [w.write_bytes(v, 0) for v in items])
    assert data.endswith(body)
    assert data[:-len(body)] == out(lambda w: (w._write_head(9, 0), w.write_int32(2, 0)))


def test_nil_map_equals_empty_map():
    assert JceWriter().write_map_str_str(None, 9).getvalue() == JceWriter().write_map_str_str({}, 9).getvalue()
    assert JceWriter().write_map_str_bytes(None, 0).getvalue() == JceWriter().write_map_str_bytes({}, 0).getvalue()


def test_map_str_str_layout():
    data = JceWriter().write_map_str_str({"114": "514"}, 9).getvalue()
    body = JceWriter().write_string("114", 0).write_string("514", 1).getvalue()
    assert data[0] == (9 << 4) | 8
    assert data.endswith(body)
    assert data[1:-len(body)] == JceWriter().write_int32(1, 0).getvalue()


def test_nested_map():
    inner = {"123": b"123"}
    data = JceWriter().write_map_str_map_str_bytes({"1": inner}, 0).getvalue()
    body = JceWriter().write_string("1", 0).write_map_str_bytes(inner, 1).getvalue()
    assert data.endswith(body)


def test_struct_wrapping():
    data = JceWriter().write_struct(Blob(b"\x10\x01"), 5).getvalue()
    assert data[0] == (5 << 4) | 10
    assert data[1:3] == b"\x10\x01"
    assert data[3] == 11


def test_struct_slice():
    items = [Blob(b"\x0c"), Blob(b"\x1c")]
    data = JceWriter().write_struct_slice(items, 1).getvalue()
    body = out(lambda w: [w.write_struct(i, 0) for i in items])
    assert data.endswith(body)
    assert data[0] == (1 << 4) | 9


def test_chaining_accumulates():
    w = JceWriter()
    w.write_byte(1, 0).write_string("a", 1)
    assert w.getvalue() == JceWriter().write_byte(1, 0).getvalue() + JceWriter().write_string("a", 1).getvalue()