"""Big-endian readers for byte strings and network connections."""

from __future__ import annotations

import struct
from typing import Protocol


class Reader:
    """Sequential big-endian reader over an in-memory byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise EOFError("no byte left to read")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"negative length {length}")
        if length == 0:
            return b""
        if self._pos >= len(self._data):
            raise EOFError("no data left to read")
        end = self._pos + length
        if end > len(self._data):
            raise EOFError(f"wanted {length} bytes, only {len(self)} left")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_bytes_short(self) -> bytes:
        return self.read_bytes(self.read_uint16())

    def read_uint16(self) -> int:
        return struct.unpack(">H", self.read_bytes(2))[0]

    def read_int32(self) -> int:
        return struct.unpack(">i", self.read_bytes(4))[0]

    def read_int64(self) -> int:
        return struct.unpack(">q", self.read_bytes(8))[0]

    @staticmethod
    def _text(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    def read_string(self) -> str:
        """Read a string whose int32 prefix counts itself (length plus four)."""
        return self._text(self.read_int32_bytes())

    def read_int32_bytes(self) -> bytes:
        return self.read_bytes(self.read_int32() - 4)

    def read_string_short(self) -> str:
        return self._text(self.read_bytes(self.read_uint16()))

    def read_string_limit(self, limit: int) -> str:
        return self._text(self.read_bytes(limit))

    def read_available(self) -> bytes:
        return self.read_bytes(len(self))

    def read_tlv_map(self, tag_size: int) -> dict[int, bytes]:
        """Read tag/length/value entries until the data ends or tag 255 appears.

        A truncated entry ends the map; what was read before it is returned.
        """
        readers = {1: self.read_byte, 2: self.read_uint16, 4: self.read_int32}
        if tag_size not in readers:
            raise ValueError(f"unsupported tag size {tag_size}")
        read_tag = readers[tag_size]
        result: dict[int, bytes] = {}
        try:
            while len(self) >= tag_size:
                key = read_tag() & 0xFFFF
                if key == 255:
                    break
                result[key] = self.read_bytes(self.read_uint16())
        except EOFError:
            pass
        return result


class _Receiver(Protocol):
    def recv(self, bufsize: int) -> bytes: ...


class NetworkReader:
    """Reads exact amounts of data from a socket-like connection."""

    def __init__(self, conn: _Receiver) -> None:
        self._conn = conn

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` bytes; raises EOFError if the peer closes first."""
        parts = bytearray()
        while len(parts) < length:
            chunk = self._conn.recv(length - len(parts))
            if not chunk:
                raise EOFError(f"connection closed after {len(parts)} of {length} bytes")
            parts += chunk
        return bytes(parts)

    def read_int32(self) -> int:
        return struct.unpack(">i", self.read_bytes(4))[0]