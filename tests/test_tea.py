import os

import pytest

from qqwire.tea import Tea, new_tea_cipher

SAMPLES = [
    ("0123456789ABCDEF", "MiraiGO Here", "b7b2e52af7f5b1fbf37fc3d5546ac7569aecd01bbacf09bf"),
    ("0123456789ABCDEF", "LXY Testing~", "9d0ab85aa14f5434ee83cd2a6b28bf306263cdf88e01264c"),
    ("0123456789ABCDEF", "s", "528e8b5c48300b548e94262736ebb8b7"),
    (
        "0123456789ABCDEF",
        "long long long long long long long",
        "95715fab6efbd0fd4b76dbc80bd633ebe805849dbc242053b06557f87e748effd9f613f782749fb9fdfa3f45c0c26161",
    ),
    ("LXY1226    Mrs4s", "LXY Testing~", "ab20caa63f3a6503a84f3cb28f9e26b6c18c051e995d1721"),
]


@pytest.mark.parametrize("key,plain,cipher_hex", SAMPLES)
def test_decrypt_known_vectors(key, plain, cipher_hex):
    tea = new_tea_cipher(key.encode())
    assert tea.decrypt(bytes.fromhex(cipher_hex)) == plain.encode()


@pytest.mark.parametrize("key,plain,cipher_hex", SAMPLES)
def test_self_round_trip(key, plain, cipher_hex):
    tea = new_tea_cipher(key.encode())
    enc = tea.encrypt(plain.encode())
    assert len(enc) == len(bytes.fromhex(cipher_hex))
    assert tea.decrypt(enc) == plain.encode()


def test_random_round_trips():
    for size in range(1, 0xFF):
        tea = new_tea_cipher(os.urandom(16))
        data = os.urandom(size)
        enc = tea.encrypt(data)
        assert len(enc) % 8 == 0
        assert tea.decrypt(enc) == data


def test_empty_plaintext_round_trip():
    tea = new_tea_cipher(b"0123456789ABCDEF")
    enc = tea.encrypt(b"")
    assert len(enc) == 16
    assert tea.decrypt(enc) == b""


def test_wrong_key_length_gives_zero_key():
    assert new_tea_cipher(b"short") == Tea((0, 0, 0, 0))
    assert new_tea_cipher(b"short").decrypt(Tea().encrypt(b"abc")) == b"abc"


@pytest.mark.parametrize("bad", [b"", b"\x00" * 8, b"\x00" * 17, b"\x00" * 23])
def test_decrypt_rejects_bad_lengths(bad):
    with pytest.raises(ValueError):
        new_tea_cipher(b"0123456789ABCDEF").decrypt(bad)