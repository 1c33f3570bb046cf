"""Compression, identifier and address helpers for protocol payloads."""

from __future__ import annotations

import gzip
import io
import ipaddress
import struct
import zlib
from typing import Iterator


class GzipWriter:
    """Streams data into an in-memory gzip member."""

    def __init__(self) -> None:
        self._buf = io.BytesIO()
        self._gz = gzip.GzipFile(fileobj=self._buf, mode="wb", mtime=0)

    def __enter__(self) -> GzipWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def write(self, data: bytes) -> int:
        """Compress ``data`` into the stream and return how many bytes were taken."""
        return self._gz.write(data)

    def close(self) -> None:
        """Flush the stream and write the gzip trailer."""
        self._gz.close()

    def getvalue(self) -> bytes:
        """Return the compressed bytes produced so far."""
        return self._buf.getvalue()


def zlib_compress(data: bytes) -> bytes:
    return zlib.compress(bytes(data))


def zlib_uncompress(data: bytes) -> bytes:
    """Inflate a zlib stream; raises zlib.error on malformed input."""
    return zlib.decompress(bytes(data))


def gzip_compress(data: bytes) -> bytes:
    with GzipWriter() as writer:
        writer.write(bytes(data))
    return writer.getvalue()


def gzip_uncompress(data: bytes) -> bytes:
    """Inflate a gzip stream; raises on malformed input."""
    return gzip.decompress(bytes(data))


def gen_uuid(uuid: bytes) -> str:
    """Format the first 16 bytes of ``uuid`` as a lower-case dashed UUID."""
    raw = bytes(uuid)
    if len(raw) < 16:
        raise ValueError(f"uuid needs 16 bytes, got {len(raw)}")
    text = raw[:16].hex()
    return f"{text[:8]}-{text[8:12]}-{text[12:16]}-{text[16:20]}-{text[20:32]}"


def calculate_image_resource_id(md5: bytes) -> str:
    """Return the image resource id derived from an MD5 digest."""
    return ("{" + gen_uuid(md5) + "}.png").upper()


def to_ipv4_address(data: bytes) -> str:
    """Render a 4- or 16-byte address the way the protocol logs it."""
    raw = bytes(data)
    if not raw:
        return "<nil>"
    if len(raw) == 4:
        return str(ipaddress.IPv4Address(raw))
    if len(raw) == 16:
        addr = ipaddress.IPv6Address(raw)
        if addr.ipv4_mapped is not None:
            return str(addr.ipv4_mapped)
        return str(addr)
    return "?" + raw.hex()


def uint32_to_ipv4_address(value: int) -> str:
    """Render an IPv4 address stored as a little-endian uint32."""
    return to_ipv4_address(struct.pack("<I", value & 0xFFFFFFFF))


def to_chunked_bytes(data: bytes, size: int) -> Iterator[bytes]:
    """Yield ``data`` in pieces of ``size`` bytes; the last may be shorter."""
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    raw = bytes(data)
    for start in range(0, len(raw), size):
        yield raw[start:start + size]