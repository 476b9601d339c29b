import hashlib

import pytest

from smthash.core.encoding import ABSENT, Digest, HexText, RawBytes, UnsignedInteger, Utf8Text, hex_to_bytes
from smthash.core.hashing import digest_to_hex, sha256_hex, smthash
from smthash.exceptions import InvalidEncodingError, InvalidInputError


def test_determinism():
    assert smthash(7, "x", b"\x01") == smthash(7, "x", b"\x01")


def test_small_difference_changes_hash():
    assert smthash("a", 1) != smthash("a", 2)


# -------------------------
# Known vectors
# -------------------------
def test_text_abc_vector():
    d = smthash("abc")
    assert d.hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    assert d.raw == hashlib.sha256(b"abc").digest()


def test_integer_one_is_single_byte():
    assert smthash(1).raw == hashlib.sha256(b"\x01").digest()


def test_zero_and_absent_collide():
    expected = hashlib.sha256(b"\x00").digest()
    assert smthash(0).raw == expected
    assert smthash(None).raw == expected
    assert smthash(ABSENT) == smthash(UnsignedInteger(0))


def test_no_inputs_hash_empty_buffer():
    assert smthash().hex() == sha256_hex(b"")


# -------------------------
# Concatenation semantics
# -------------------------
def test_concatenation_is_byte_level():
    assert smthash(hex_to_bytes("ab"), hex_to_bytes("cd")) == smthash(hex_to_bytes("abcd"))


def test_order_matters():
    assert smthash("a", 256) != smthash(256, "a")


def test_mixed_inputs_match_manual_buffer():
    buf = b"\x01\x00" + "héllo".encode("utf-8") + b"\xde\xad" + b"\x00" + b"raw"
    assert smthash(256, "héllo", HexText("DEad"), None, b"raw").raw == hashlib.sha256(buf).digest()


def test_empty_string_contributes_nothing():
    assert smthash("", "abc") == smthash("abc")


def test_digest_feeds_back_as_raw_bytes():
    inner = smthash("abc")
    assert smthash(inner) == smthash(inner.raw)


def test_bytearray_and_memoryview_accepted():
    assert smthash(bytearray(b"ab")) == smthash(memoryview(b"ab")) == smthash(b"ab")


# -------------------------
# Digest views
# -------------------------
def test_digest_views():
    d = smthash("abc")
    assert isinstance(d, Digest)
    assert len(d) == 32
    assert bytes(d) == d.raw
    assert str(d) == d.hex() == digest_to_hex(d)
    assert d.hex() == d.hex().lower()


def test_digest_hex_round_trip():
    d = smthash(12345, "field")
    assert hex_to_bytes(digest_to_hex(d)) == d.raw


def test_digest_to_hex_rejects_non_bytes():
    with pytest.raises(InvalidInputError):
        digest_to_hex("abc")


# -------------------------
# Failures abort before hashing
# -------------------------
@pytest.mark.parametrize("bad", [1.5, True, [1], {"a": 1}, object()])
def test_unsupported_input_rejected(bad):
    with pytest.raises(InvalidInputError) as exc:
        smthash("ok", bad)
    assert exc.value.position == 1


def test_negative_integer_rejected():
    with pytest.raises(InvalidInputError) as exc:
        smthash(-1)
    assert exc.value.position == 0


def test_bad_hex_argument_rejected():
    with pytest.raises(InvalidEncodingError):
        smthash(1, HexText("xyz"))


# -------------------------
# Malformed typed inputs
# -------------------------
@pytest.mark.parametrize("build", [
    lambda: Utf8Text(5),
    lambda: Utf8Text(None),
    lambda: HexText(b"ab"),
    lambda: RawBytes("abc"),
    lambda: RawBytes(None),
])
def test_malformed_variant_rejected(build):
    with pytest.raises(InvalidInputError):
        smthash("ok", build())


def test_raw_bytes_owns_a_copy():
    buf = bytearray(b"ab")
    raw = RawBytes(buf)
    expected = smthash(raw)
    buf[0] = 0
    assert raw.data == b"ab"
    assert smthash(raw) == expected


@pytest.mark.parametrize("bad", ["\ud800", Utf8Text("a\udfffb")])
def test_unencodable_text_rejected_with_position(bad):
    with pytest.raises(InvalidInputError) as exc:
        smthash(1, bad)
    assert exc.value.position == 1
    assert "UTF-8" in str(exc.value)
