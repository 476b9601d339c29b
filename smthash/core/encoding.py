"""
Canonical byte encodings for typed hash inputs.

Every value fed to the combinator is first reduced to bytes here:

  - UnsignedInteger: minimal big-endian bytes, zero is a single 0x00 byte
  - Utf8Text:        UTF-8 bytes, unmodified
  - HexText:         literal bytes of the hex digit pairs
  - Absent:          same bytes as UnsignedInteger(0)
  - RawBytes:        passed through unchanged

No type tag is written, so the same bytes can be produced by different
variants (Absent and 0 always collide, "" contributes nothing). Callers keep
the typing of each field position consistent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from smthash.exceptions import InvalidEncodingError, InvalidInputError

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class UnsignedInteger:
    magnitude: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a magnitude
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidInputError(self.magnitude)
        if self.magnitude < 0:
            raise InvalidInputError(self.magnitude)


@dataclass(frozen=True)
class Utf8Text:
    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise InvalidInputError(self.content)


@dataclass(frozen=True)
class HexText:
    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise InvalidInputError(self.content)


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class RawBytes:
    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise InvalidInputError(self.data)
        # own a copy, never the caller's mutable buffer
        object.__setattr__(self, "data", bytes(self.data))


ABSENT = Absent()

TypedInput = Union[UnsignedInteger, Utf8Text, HexText, Absent, RawBytes]

DIGEST_SIZE = 32


@dataclass(frozen=True)
class Digest:
    """SHA-256 output (DIGEST_SIZE bytes) with raw and hex views."""
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes) or len(self.raw) != DIGEST_SIZE:
            raise InvalidInputError(self.raw)

    def hex(self) -> str:
        return self.raw.hex()

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return len(self.raw)

    def __str__(self) -> str:
        return self.hex()


# ------------------------
# Predicates
# ------------------------

def is_hex_string(s: Any) -> bool:
    """True for non-empty strings made only of hex digits (any case)."""
    return isinstance(s, str) and _HEX_RE.fullmatch(s) is not None


def is_canonical_bytes(x: Any) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview, Digest))


# ------------------------
# Per-variant encoders
# ------------------------

def encode_integer(magnitude: int) -> bytes:
    """
    Minimal big-endian encoding of a non-negative integer.
    The hex rendering is left-padded to an even digit count, so 0 -> b"\\x00".
    """
    value = UnsignedInteger(magnitude).magnitude
    digits = format(value, "x")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def encode_text(content: str) -> bytes:
    """UTF-8 bytes of `content`; lone surrogates raise InvalidInputError."""
    if not isinstance(content, str):
        raise InvalidInputError(content)
    try:
        return content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(content, reason="text is not encodable as UTF-8") from e


def encode_hex(content: str) -> bytes:
    """
    Decode hex digit pairs into bytes.
    Raises InvalidEncodingError on a non-hex character or an odd digit count.
    """
    if not is_hex_string(content) or len(content) % 2:
        raise InvalidEncodingError(content)
    return bytes.fromhex(content)


def encode_absent() -> bytes:
    return encode_integer(0)


hex_to_bytes = encode_hex


def bytes_to_hex(data) -> str:
    return bytes(data).hex()


def text_to_hex(s: str) -> str:
    """UTF-8 encode then render as lowercase hex."""
    return bytes_to_hex(encode_text(s))


# ------------------------
# Dispatch
# ------------------------

def to_typed(value: Any) -> TypedInput:
    """Map a plain Python value onto its typed input variant."""
    if isinstance(value, (UnsignedInteger, Utf8Text, HexText, Absent, RawBytes)):
        return value
    if value is None:
        return ABSENT
    if isinstance(value, Digest):
        return RawBytes(value.raw)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawBytes(bytes(value))
    if isinstance(value, bool):
        raise InvalidInputError(value)
    if isinstance(value, int):
        return UnsignedInteger(value)
    if isinstance(value, str):
        return Utf8Text(value)
    raise InvalidInputError(value)


def encode(value: TypedInput) -> bytes:
    match value:
        case RawBytes(data=data):
            return bytes(data)
        case UnsignedInteger(magnitude=magnitude):
            return encode_integer(magnitude)
        case Utf8Text(content=content):
            return encode_text(content)
        case HexText(content=content):
            return encode_hex(content)
        case Absent():
            return encode_absent()
    raise InvalidInputError(value)
