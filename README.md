# qqwire

Low-level building blocks for the byte formats of the QQ mobile client protocol. The package uses only the standard library.

## What is in it

- `qqwire.tea`: `Tea`, a 16-round TEA cipher in the protocol's chained mode, and `new_tea_cipher(key)`. `Tea.encrypt` adds random padding, so equal inputs give different ciphertexts. `Tea.decrypt` raises `ValueError` when the data is shorter than 16 bytes or not a multiple of 8. A key that is not 16 bytes long gives the all-zero key.
- `qqwire.writer`: `Writer`, an append-only big-endian buffer. It writes integers, `write_string` (uint32 length plus four in front), `write_string_short` (uint16 length in front), `write_bytes_short`, `write_tlv_limited_size`, `write_hex` and `write_bool`. `fill_uint16`/`fill_uint32` reserve a field that `write_uint16_at`/`write_uint32_at` fill in later. `write_int_lv_packet` writes a length-prefixed block, and `encrypt_and_write` writes TEA-encrypted data. `new_writer_f(fn)` runs `fn` on a fresh writer and returns the bytes.
- `qqwire.reader`: `Reader` reads big-endian values from bytes and raises `EOFError` when the data runs out. `read_tlv_map(tag_size)` reads tag/length/value entries with 1-, 2- or 4-byte tags and stops at the end of the data or at tag 255. `NetworkReader` reads exact byte counts from any object with a `recv` method.
- `qqwire.utils`: `zlib_compress`/`zlib_uncompress`, `gzip_compress`/`gzip_uncompress` and a streaming `GzipWriter`. It also has `gen_uuid`, `calculate_image_resource_id` (`{UUID}.PNG` from an MD5 digest), `to_ipv4_address` and `uint32_to_ipv4_address` (little-endian), and the generator `to_chunked_bytes(data, size)`.
- `qqwire.jce.writer` / `qqwire.jce.reader`: `JceWriter` and `JceReader` handle the tagged JCE (Tars) format. Writer methods return the writer, so calls chain. Reader methods take a tag, must be called in ascending tag order, and return the type's zero value for an absent field. Truncated or malformed data raises `JceDecodeError`.
- `qqwire.jce.structs_core`: the `JceStruct` base class, `RequestPacket`, `RequestDataVersion3`, `RequestDataVersion2`, `SsoServerInfo`, and the file-storage server structures (`FileStorageServerInfo`, `BigDataIPInfo`, `BigDataIPList`, `BigDataChannel`, `FileStoragePushFSSvcList`).
- `qqwire.jce.structs_service`: registration, message-sync and push structures such as `SvcReqRegister`, `SvcRespRegister`, `SvcReqRegisterNew`, `PushMessageInfo`, `SvcRespPushMsg` and `SvcDevLoginInfo`.
- `qqwire.jce.structs_contact`: friend, group and profile-card structures such as `FriendListRequest`, `FriendInfo`, `TroopNumber`, `TroopMemberInfo`, `ModifyGroupCardRequest`, `SummaryCardReq`, `DelFriendReq` and `Setting`.

Every structure is a dataclass with `to_bytes()`. Only the structures the server sends back also have `read_from(reader)`. Some `read_from` methods decode just the fields a client needs and leave the other fields as they were.

## Installation

```
pip install .
```

## Examples

TEA round trip:

```python
from qqwire.tea import new_tea_cipher

key = bytes(16)
tea = new_tea_cipher(key)
cipher_text = tea.encrypt(b"hello")
assert tea.decrypt(cipher_text) == b"hello"
```

A packet with a back-patched length, read back again:

```python
from qqwire.reader import Reader
from qqwire.writer import new_writer_f

def body(w):
    pos = w.fill_uint16()
    w.write_string_short("payload")
    w.write_uint16_at(pos, len(w))

packet = new_writer_f(body)

r = Reader(packet)
assert r.read_uint16() == len(packet)
assert r.read_string_short() == "payload"
```

A JCE round trip:

```python
from qqwire.jce.reader import JceReader
from qqwire.jce.structs_core import RequestPacket

pkt = RequestPacket(i_version=3, s_servant_name="PushService", s_func_name="SvcReqRegister")
decoded = RequestPacket()
decoded.read_from(JceReader(pkt.to_bytes()))
assert decoded == pkt
```

## What it does not do

This package only encodes, decodes, encrypts and compresses bytes. It has no client. It does not open connections, log in, keep a session, build login TLVs, or handle protobuf messages. `NetworkReader` only reads from a connection you supply.

## Running the tests

```
pip install ".[test]"
pytest
```