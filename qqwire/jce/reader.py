"""Decoder for the tagged JCE serialisation format."""

from __future__ import annotations

import struct
from typing import Callable, NamedTuple, Protocol, TypeVar

from qqwire.jce.writer import (
    TYPE_DOUBLE,
    TYPE_FLOAT,
    TYPE_INT8,
    TYPE_INT16,
    TYPE_INT32,
    TYPE_INT64,
    TYPE_LIST,
    TYPE_MAP,
    TYPE_SIMPLE_LIST,
    TYPE_STRING1,
    TYPE_STRING4,
    TYPE_STRUCT_BEGIN,
    TYPE_STRUCT_END,
    TYPE_ZERO,
)


class JceDecodeError(ValueError):
    """Raised when JCE data is truncated or malformed."""


class _Decodable(Protocol):
    def read_from(self, reader: JceReader) -> None: ...


T = TypeVar("T", bound=_Decodable)


class _Head(NamedTuple):
    type: int
    tag: int
    length: int


_FIXED_SIZES = {
    TYPE_INT8: 1,
    TYPE_INT16: 2,
    TYPE_INT32: 4,
    TYPE_FLOAT: 4,
    TYPE_INT64: 8,
    TYPE_DOUBLE: 8,
}


class JceReader:
    """Reads JCE fields by tag from a byte string.

    Fields must be read in ascending tag order; a field that is absent reads
    as the type's zero value. Reaching the end of the data while looking for
    a tag counts as the field being absent; running out of data inside a
    field raises :class:`JceDecodeError`.
    """

    def __init__(self, data: bytes) -> None:
        self._buf = bytes(data)
        self._off = 0

    # --- low level ---

    def _peek_head(self) -> _Head | None:
        if self._off >= len(self._buf):
            return None
        b = self._buf[self._off]
        type_id, tag, length = b & 0xF, b >> 4, 1
        if tag == 0xF:
            if self._off + 1 >= len(self._buf):
                raise JceDecodeError("truncated field head")
            tag = self._buf[self._off + 1]
            length = 2
        return _Head(type_id, tag, length)

    def _read_head(self) -> _Head:
        head = self._peek_head()
        if head is None:
            raise JceDecodeError("unexpected end of data reading field head")
        self._off += head.length
        return head

    def _skip_head(self) -> None:
        if self._off >= len(self._buf):
            raise JceDecodeError("unexpected end of data skipping field head")
        self._skip_bytes(2 if self._buf[self._off] >> 4 == 0xF else 1)

    def _raw_bytes(self, n: int) -> bytes:
        if n < 0 or self._off + n > len(self._buf):
            raise JceDecodeError(f"cannot read {n} bytes at offset {self._off}")
        chunk = self._buf[self._off:self._off + n]
        self._off += n
        return chunk

    def _skip_bytes(self, n: int) -> None:
        if n < 0 or self._off + n > len(self._buf):
            raise JceDecodeError(f"cannot skip {n} bytes at offset {self._off}")
        self._off += n

    def _raw_byte(self) -> int:
        if self._off >= len(self._buf):
            raise JceDecodeError("unexpected end of data reading byte")
        value = self._buf[self._off]
        self._off += 1
        return value

    def _raw_uint16(self) -> int:
        return struct.unpack(">H", self._raw_bytes(2))[0]

    def _raw_uint32(self) -> int:
        return struct.unpack(">I", self._raw_bytes(4))[0]

    def _raw_int64(self) -> int:
        return struct.unpack(">q", self._raw_bytes(8))[0]

    def _skip_field(self, type_id: int) -> None:
        if type_id in _FIXED_SIZES:
            self._skip_bytes(_FIXED_SIZES[type_id])
        elif type_id == TYPE_STRING1:
            self._skip_bytes(self._raw_byte())
        elif type_id == TYPE_STRING4:
            self._skip_bytes(self._raw_uint32())
        elif type_id == TYPE_MAP:
            self.skip_fields(self.read_int32(0) * 2)
        elif type_id == TYPE_LIST:
            self.skip_fields(self.read_int32(0))
        elif type_id == TYPE_SIMPLE_LIST:
            self._skip_head()
            self._skip_bytes(self.read_int32(0))
        elif type_id == TYPE_STRUCT_BEGIN:
            self._skip_to_struct_end()
        elif type_id in (TYPE_STRUCT_END, TYPE_ZERO):
            pass
        else:
            raise JceDecodeError(f"unknown field type {type_id}")

    def _skip_next_field(self) -> None:
        self._skip_field(self._read_head().type)

    def _skip_to_tag(self, tag: int) -> bool:
        head = self._peek_head()
        while head is not None and tag > head.tag and head.type != TYPE_STRUCT_END:
            self._off += head.length
            self._skip_field(head.type)
            head = self._peek_head()
        return head is not None and head.tag == tag

    def _skip_to_struct_end(self) -> None:
        head = self._read_head()
        while head.type != TYPE_STRUCT_END:
            self._skip_field(head.type)
            head = self._read_head()

    # --- public API ---

    def skip_fields(self, count: int) -> None:
        """Skip the next ``count`` fields whatever their tags."""
        for _ in range(count):
            self._skip_next_field()

    def read_byte(self, tag: int) -> int:
        if not self._skip_to_tag(tag):
            return 0
        head = self._read_head()
        if head.type == TYPE_INT8:
            return self._raw_byte()
        return 0

    def read_bool(self, tag: int) -> bool:
        return self.read_byte(tag) != 0

    def read_int16(self, tag: int) -> int:
        if not self._skip_to_tag(tag):
            return 0
        head = self._read_head()
        if head.type == TYPE_INT8:
            return self._raw_byte()
        if head.type == TYPE_INT16:
            return struct.unpack(">h", self._raw_bytes(2))[0]
        return 0

    def read_int32(self, tag: int) -> int:
        if not self._skip_to_tag(tag):
            return 0
        head = self._read_head()
        if head.type == TYPE_INT8:
            return self._raw_byte()
        if head.type == TYPE_INT16:
            return self._raw_uint16()
        if head.type == TYPE_INT32:
            return struct.unpack(">i", self._raw_bytes(4))[0]
        return 0

    def read_int64(self, tag: int) -> int:
        if not self._skip_to_tag(tag):
            return 0
        head = self._read_head()
        if head.type == TYPE_INT8:
            return self._raw_byte()
        if head.type == TYPE_INT16:
            return struct.unpack(">h", self._raw_bytes(2))[0]
        if head.type == TYPE_INT32:
            return self._raw_uint32()
        if head.type == TYPE_INT64:
            return self._raw_int64()
        return 0

    def read_float32(self, tag: int) -> float:
        if not self._skip_to_tag(tag):
            return 0.0
        head = self._read_head()
        if head.type == TYPE_FLOAT:
            return struct.unpack(">f", self._raw_bytes(4))[0]
        return 0.0

    def read_float64(self, tag: int) -> float:
        if not self._skip_to_tag(tag):
            return 0.0
        head = self._read_head()
        if head.type == TYPE_FLOAT:
            return struct.unpack(">f", self._raw_bytes(4))[0]
        if head.type == TYPE_DOUBLE:
            return struct.unpack(">d", self._raw_bytes(8))[0]
        return 0.0

    def read_string(self, tag: int) -> str:
        if not self._skip_to_tag(tag):
            return ""
        head = self._read_head()
        if head.type == TYPE_STRING1:
            data = self._raw_bytes(self._raw_byte())
        elif head.type == TYPE_STRING4:
            data = self._raw_bytes(self._raw_uint32())
        else:
            return ""
        return data.decode("utf-8", errors="replace")

    def read_bytes(self, tag: int) -> bytes:
        if not self._skip_to_tag(tag):
            return b""
        head = self._read_head()
        if head.type == TYPE_LIST:
            count = self.read_int32(0)
            return bytes(self.read_byte(0) for _ in range(count))
        if head.type == TYPE_SIMPLE_LIST:
            self._skip_head()
            return self._raw_bytes(self.read_int32(0))
        return b""

    def read_byte_arr_arr(self, tag: int) -> list[bytes]:
        if not self._skip_to_tag(tag):
            return []
        head = self._read_head()
        if head.type != TYPE_LIST:
            return []
        return [self.read_bytes(0) for _ in range(self.read_int32(0))]

    def read_jce_struct(self, obj: T, tag: int) -> T:
        """Fill ``obj`` from the nested structure at ``tag`` and return it."""
        if not self._skip_to_tag(tag):
            return obj
        head = self._read_head()
        if head.type != TYPE_STRUCT_BEGIN:
            return obj
        obj.read_from(self)
        self._skip_to_struct_end()
        return obj

    def read_map_str_str(self, tag: int) -> dict[str, str]:
        if not self._skip_to_tag(tag):
            return {}
        head = self._read_head()
        if head.type != TYPE_MAP:
            return {}
        result: dict[str, str] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_string(1)
        return result

    def read_map_str_byte(self, tag: int) -> dict[str, bytes]:
        if not self._skip_to_tag(tag):
            return {}
        head = self._read_head()
        if head.type != TYPE_MAP:
            return {}
        result: dict[str, bytes] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_bytes(1)
        return result

    def read_map_str_map_str_byte(self, tag: int) -> dict[str, dict[str, bytes]]:
        if not self._skip_to_tag(tag):
            return {}
        head = self._read_head()
        if head.type != TYPE_MAP:
            return {}
        result: dict[str, dict[str, bytes]] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_map_str_byte(1)
        return result

    def read_struct_list(self, factory: Callable[[], T], tag: int) -> list[T]:
        """Read a list of nested structures, each built by ``factory``."""
        if not self._skip_to_tag(tag):
            return []
        head = self._read_head()
        if head.type != TYPE_LIST:
            return []
        items: list[T] = []
        for _ in range(self.read_int32(0)):
            self._skip_head()
            obj = factory()
            obj.read_from(self)
            self._skip_to_struct_end()
            items.append(obj)
        return items