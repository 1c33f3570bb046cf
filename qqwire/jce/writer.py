"""Encoder for the tagged JCE serialisation format."""

from __future__ import annotations

import struct
from typing import Iterable, Mapping, Protocol


class _Encodable(Protocol):
    def to_bytes(self) -> bytes: ...


TYPE_INT8 = 0
TYPE_INT16 = 1
TYPE_INT32 = 2
TYPE_INT64 = 3
TYPE_FLOAT = 4
TYPE_DOUBLE = 5
TYPE_STRING1 = 6
TYPE_STRING4 = 7
TYPE_MAP = 8
TYPE_LIST = 9
TYPE_STRUCT_BEGIN = 10
TYPE_STRUCT_END = 11
TYPE_ZERO = 12
TYPE_SIMPLE_LIST = 13


class JceWriter:
    """Accumulates JCE-encoded fields; every write method returns the writer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def _write_head(self, type_id: int, tag: int) -> None:
        if not 0 <= tag <= 0xFF:
            raise ValueError(f"tag out of range: {tag}")
        if tag < 0xF:
            self._buf.append((tag << 4) | type_id)
        else:
            self._buf.append(0xF0 | type_id)
            self._buf.append(tag)

    def write_byte(self, value: int, tag: int) -> JceWriter:
        value &= 0xFF
        if value == 0:
            self._write_head(TYPE_ZERO, tag)
        else:
            self._write_head(TYPE_INT8, tag)
            self._buf.append(value)
        return self

    def write_bool(self, value: bool, tag: int) -> JceWriter:
        return self.write_byte(1 if value else 0, tag)

    def _put_int16(self, value: int, tag: int) -> None:
        self._write_head(TYPE_INT16, tag)
        self._buf += struct.pack(">H", value & 0xFFFF)

    def _put_int32(self, value: int, tag: int) -> None:
        self._write_head(TYPE_INT32, tag)
        self._buf += struct.pack(">I", value & 0xFFFFFFFF)

    def _put_int64(self, value: int, tag: int) -> None:
        self._write_head(TYPE_INT64, tag)
        self._buf += struct.pack(">Q", value & 0xFFFFFFFFFFFFFFFF)

    def write_int16(self, value: int, tag: int) -> JceWriter:
        if -128 <= value <= 127:
            return self.write_byte(value, tag)
        self._put_int16(value, tag)
        return self

    def write_int32(self, value: int, tag: int) -> JceWriter:
        if -128 <= value <= 127:
            return self.write_byte(value, tag)
        if -32768 <= value <= 32767:
            self._put_int16(value, tag)
        else:
            self._put_int32(value, tag)
        return self

    def write_int64(self, value: int, tag: int) -> JceWriter:
        if -128 <= value <= 127:
            return self.write_byte(value, tag)
        if -32768 <= value <= 32767:
            self._put_int16(value, tag)
        elif -(2**31) <= value <= 2**31 - 1:
            self._put_int32(value, tag)
        else:
            self._put_int64(value, tag)
        return self

    def write_float32(self, value: float, tag: int) -> JceWriter:
        self._write_head(TYPE_FLOAT, tag)
        self._buf += struct.pack(">f", value)
        return self

    def write_float64(self, value: float, tag: int) -> JceWriter:
        self._write_head(TYPE_DOUBLE, tag)
        self._buf += struct.pack(">d", value)
        return self

    def write_string(self, value: str | bytes, tag: int) -> JceWriter:
        """Write a string; over 255 bytes it takes a four-byte length."""
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        if len(data) > 255:
            self._write_head(TYPE_STRING4, tag)
            self._buf += struct.pack(">I", len(data))
        else:
            self._write_head(TYPE_STRING1, tag)
            self._buf.append(len(data))
        self._buf += data
        return self

    def write_bytes(self, data: bytes | None, tag: int) -> JceWriter:
        """Write a byte array as a simple list."""
        data = bytes(data or b"")
        self._write_head(TYPE_SIMPLE_LIST, tag)
        self._buf.append(0)
        self.write_int32(len(data), 0)
        self._buf += data
        return self

    def _write_list_length(self, count: int, tag: int) -> None:
        self._write_head(TYPE_LIST, tag)
        if count == 0:
            self._write_head(TYPE_ZERO, 0)
        else:
            self.write_int32(count, 0)

    def write_int64_slice(self, values: Iterable[int] | None, tag: int) -> JceWriter:
        items = list(values or ())
        self._write_list_length(len(items), tag)
        for value in items:
            self.write_int64(value, 0)
        return self

    def write_bytes_slice(self, values: Iterable[bytes] | None, tag: int) -> JceWriter:
        items = list(values or ())
        self._write_list_length(len(items), tag)
        for value in items:
            self.write_bytes(value, 0)
        return self

    def _write_map_length(self, mapping: Mapping | None, tag: int) -> None:
        self._write_head(TYPE_MAP, tag)
        if not mapping:
            self._write_head(TYPE_ZERO, 0)
        else:
            self.write_int32(len(mapping), 0)

    def write_map_str_str(self, mapping: Mapping[str, str] | None, tag: int) -> JceWriter:
        self._write_map_length(mapping, tag)
        for key, value in (mapping or {}).items():
            self.write_string(key, 0)
            self.write_string(value, 1)
        return self

    def write_map_str_bytes(self, mapping: Mapping[str, bytes] | None, tag: int) -> JceWriter:
        self._write_map_length(mapping, tag)
        for key, value in (mapping or {}).items():
            self.write_string(key, 0)
            self.write_bytes(value, 1)
        return self

    def write_map_str_map_str_bytes(
        self, mapping: Mapping[str, Mapping[str, bytes]] | None, tag: int
    ) -> JceWriter:
        self._write_map_length(mapping, tag)
        for key, value in (mapping or {}).items():
            self.write_string(key, 0)
            self.write_map_str_bytes(value, 1)
        return self

    def write_struct(self, obj: _Encodable, tag: int) -> JceWriter:
        """Write a nested structure between begin and end markers."""
        self._write_head(TYPE_STRUCT_BEGIN, tag)
        self._buf += obj.to_bytes()
        self._write_head(TYPE_STRUCT_END, 0)
        return self

    def write_struct_slice(self, items: Iterable[_Encodable] | None, tag: int) -> JceWriter:
        entries = list(items or ())
        self._write_list_length(len(entries), tag)
        for item in entries:
            self.write_struct(item, 0)
        return self