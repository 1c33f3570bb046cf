"""Big-endian byte writer used to assemble protocol packets."""

from __future__ import annotations

import struct
from typing import Callable

from qqwire.tea import new_tea_cipher


class Writer:
    """An append-only big-endian byte buffer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        return bytes(self._buf)

    def reset(self) -> None:
        """Discard the buffered bytes."""
        self._buf.clear()

    def fill_uint16(self) -> int:
        """Reserve two zero bytes and return their position."""
        pos = len(self._buf)
        self._buf += b"\x00\x00"
        return pos

    def write_uint16_at(self, pos: int, value: int) -> None:
        struct.pack_into(">H", self._buf, pos, value & 0xFFFF)

    def fill_uint32(self) -> int:
        """Reserve four zero bytes and return their position."""
        pos = len(self._buf)
        self._buf += b"\x00\x00\x00\x00"
        return pos

    def write_uint32_at(self, pos: int, value: int) -> None:
        struct.pack_into(">I", self._buf, pos, value & 0xFFFFFFFF)

    def write(self, data: bytes) -> None:
        self._buf += data

    def write_hex(self, text: str) -> None:
        self._buf += bytes.fromhex(text)

    def write_byte(self, value: int) -> None:
        self._buf.append(value & 0xFF)

    def write_uint16(self, value: int) -> None:
        self._buf += struct.pack(">H", value & 0xFFFF)

    def write_uint32(self, value: int) -> None:
        self._buf += struct.pack(">I", value & 0xFFFFFFFF)

    def write_uint64(self, value: int) -> None:
        self._buf += struct.pack(">Q", value & 0xFFFFFFFFFFFFFFFF)

    @staticmethod
    def _as_bytes(value: str | bytes) -> bytes:
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def write_string(self, value: str | bytes) -> None:
        """Write a string prefixed by a uint32 of its length plus four."""
        data = self._as_bytes(value)
        self.write_uint32(len(data) + 4)
        self._buf += data

    def write_string_short(self, value: str | bytes) -> None:
        """Write a string prefixed by a uint16 of its length."""
        data = self._as_bytes(value)
        self.write_uint16(len(data))
        self._buf += data

    def write_bool(self, value: bool) -> None:
        self.write_byte(1 if value else 0)

    def encrypt_and_write(self, key: bytes, data: bytes) -> None:
        self._buf += new_tea_cipher(key).encrypt(data)

    def write_int_lv_packet(self, offset: int, fn: Callable[[Writer], None]) -> None:
        """Write what ``fn`` produces behind a uint32 length adjusted by ``offset``."""
        pos = self.fill_uint32()
        fn(self)
        self.write_uint32_at(pos, len(self._buf) + offset - pos - 4)

    def write_bytes_short(self, data: bytes) -> None:
        self.write_uint16(len(data))
        self._buf += data

    def write_tlv_limited_size(self, data: bytes, limit: int) -> None:
        self.write_bytes_short(data[:limit])


def new_writer_f(fn: Callable[[Writer], None]) -> bytes:
    """Run ``fn`` on a fresh writer and return the bytes it wrote."""
    writer = Writer()
    fn(writer)
    return writer.getvalue()