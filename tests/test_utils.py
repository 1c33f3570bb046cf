import gzip
import ipaddress
import struct
import uuid
import zlib

import pytest

from qqwire.utils import (
    GzipWriter,
    calculate_image_resource_id,
    gen_uuid,
    gzip_compress,
    gzip_uncompress,
    to_chunked_bytes,
    to_ipv4_address,
    uint32_to_ipv4_address,
    zlib_compress,
    zlib_uncompress,
)

SAMPLE = b"MiraiGO Here " * 50


def test_zlib_round_trip():
    packed = zlib_compress(SAMPLE)
    assert zlib.decompress(packed) == SAMPLE
    assert zlib_uncompress(packed) == SAMPLE


def test_zlib_uncompress_rejects_garbage():
    with pytest.raises(zlib.error):
        zlib_uncompress(b"not zlib at all")


def test_gzip_round_trip():
    packed = gzip_compress(SAMPLE)
    assert packed[:2] == b"\x1f\x8b"
    assert gzip.decompress(packed) == SAMPLE
    assert gzip_uncompress(packed) == SAMPLE


def test_gzip_uncompress_rejects_garbage():
    with pytest.raises(OSError):
        gzip_uncompress(b"definitely not gzip")


def test_gzip_writer_streams():
    writer = GzipWriter()
    assert writer.write(b"abc") == 3
    writer.write(b"def")
    writer.close()
    assert gzip.decompress(writer.getvalue()) == b"abcdef"


def test_gzip_writer_context_manager():
    with GzipWriter() as writer:
        writer.write(SAMPLE)
    assert gzip_uncompress(writer.getvalue()) == SAMPLE


def test_gen_uuid_matches_standard_format():
    raw = bytes(range(16))
    assert gen_uuid(raw) == str(uuid.UUID(bytes=raw))


def test_gen_uuid_uses_first_sixteen_bytes():
    raw = bytes(range(20))
    assert gen_uuid(raw) == gen_uuid(raw[:16])


def test_gen_uuid_too_short():
    with pytest.raises(ValueError):
        gen_uuid(b"\x00" * 15)


def test_image_resource_id():
    assert calculate_image_resource_id(bytes(range(16))) == "{00010203-0405-0607-0809-0A0B0C0D0E0F}.PNG"


def test_image_resource_id_shape():
    md5 = bytes.fromhex("ffeeddccbbaa99887766554433221100")
    rid = calculate_image_resource_id(md5)
    assert rid == "{" + gen_uuid(md5).upper() + "}.PNG"
    assert rid == rid.upper()


def test_ipv4_address():
    assert to_ipv4_address(bytes([127, 0, 0, 1])) == "127.0.0.1"


def test_ipv6_address():
    raw = ipaddress.IPv6Address("2001:db8::1").packed
    assert to_ipv4_address(raw) == str(ipaddress.IPv6Address(raw))


def test_ipv4_mapped_in_ipv6():
    raw = ipaddress.IPv6Address("::ffff:10.1.2.3").packed
    assert to_ipv4_address(raw) == to_ipv4_address(bytes([10, 1, 2, 3]))


def test_odd_length_address():
    assert to_ipv4_address(b"\x01\x02\x03") == "?" + b"\x01\x02\x03".hex()


@pytest.mark.parametrize("value", [0, 1, 0x0100007F, 0xFFFFFFFF, 0x12345678])
def test_uint32_address_is_little_endian(value):
    assert uint32_to_ipv4_address(value) == to_ipv4_address(struct.pack("<I", value))


@pytest.mark.parametrize("size", [1, 3, 7, 8, 100])
def test_chunked_bytes(size):
    data = bytes(range(50))
    chunks = list(to_chunked_bytes(data, size))
    assert b"".join(chunks) == data
    assert all(len(c) == size for c in chunks[:-1])
    assert 0 < len(chunks[-1]) <= size


def test_chunked_empty():
    assert list(to_chunked_bytes(b"", 4)) == []


def test_chunked_bad_size():
    with pytest.raises(ValueError):
        list(to_chunked_bytes(b"abc", 0))