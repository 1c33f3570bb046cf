"""TEA block cipher in the 16-round, CBC-like mode used by the QQ protocol."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_DELTA = 0x9E3779B9
_ROUND_SUMS = tuple((_DELTA * i) & _MASK32 for i in range(1, 17))


@dataclass(frozen=True)
class Tea:
    """A TEA cipher keyed by four big-endian 32-bit words."""

    key: tuple[int, int, int, int] = (0, 0, 0, 0)

    def _encode(self, block: int) -> int:
        v0, v1 = block >> 32, block & _MASK32
        t0, t1, t2, t3 = self.key
        for s in _ROUND_SUMS:
            v0 = (v0 + ((v1 + s) ^ ((v1 << 4) + t0) ^ ((v1 >> 5) + t1))) & _MASK32
            v1 = (v1 + ((v0 + s) ^ ((v0 << 4) + t2) ^ ((v0 >> 5) + t3))) & _MASK32
        return (v0 << 32) | v1

    def _decode(self, block: int) -> int:
        v0, v1 = block >> 32, block & _MASK32
        t0, t1, t2, t3 = self.key
        for s in reversed(_ROUND_SUMS):
            v1 = (v1 - ((v0 + s) ^ ((v0 << 4) + t2) ^ ((v0 >> 5) + t3))) & _MASK32
            v0 = (v0 - ((v1 + s) ^ ((v1 << 4) + t0) ^ ((v1 >> 5) + t1))) & _MASK32
        return (v0 << 32) | v1

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt ``data`` with random padding; the result is a multiple of 8 bytes."""
        data = bytes(data)
        fill = 10 - (len(data) + 1) % 8
        buf = bytearray(fill + len(data) + 7)
        buf[:12] = os.urandom(12)
        buf[0] = ((fill - 3) | 0xF8) & 0xFF
        buf[fill:fill + len(data)] = data

        out = []
        iv1 = iv2 = 0
        for (block,) in struct.iter_unpack(">Q", buf):
            holder = block ^ iv1
            iv1 = self._encode(holder) ^ iv2
            iv2 = holder
            out.append(iv1)
        return struct.pack(f">{len(out)}Q", *out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ``data``; raises ValueError if it is not a valid ciphertext length."""
        data = bytes(data)
        if len(data) < 16 or len(data) % 8 != 0:
            raise ValueError(
                f"ciphertext length must be a multiple of 8 and at least 16, got {len(data)}"
            )
        out = []
        iv2 = holder = 0
        for (iv1,) in struct.iter_unpack(">Q", data):
            iv2 = self._decode(iv2 ^ iv1)
            out.append(iv2 ^ holder)
            holder = iv1
        plain = struct.pack(f">{len(out)}Q", *out)
        return plain[(plain[0] & 7) + 3:len(data) - 7]


def new_tea_cipher(key: bytes) -> Tea:
    """Build a cipher from a 16-byte key; any other length gives the all-zero key."""
    if len(key) != 16:
        return Tea()
    return Tea(struct.unpack(">4I", bytes(key)))