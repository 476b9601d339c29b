from smthash.core.encoding import (
    ABSENT,
    Absent,
    Digest,
    HexText,
    RawBytes,
    UnsignedInteger,
    Utf8Text,
    bytes_to_hex,
    encode_integer,
    encode_text,
    hex_to_bytes,
    is_canonical_bytes,
    is_hex_string,
    text_to_hex,
)
from smthash.core.hashing import digest_to_hex, smthash
from smthash.core.normalize import normalize_object, normalized_input
from smthash.exceptions import (
    HashingError,
    InvalidEncodingError,
    InvalidInputError,
    NormalizationError,
)

__all__ = [
    "smthash",
    "digest_to_hex",
    "hex_to_bytes",
    "is_hex_string",
    "is_canonical_bytes",
    "text_to_hex",
    "encode_integer",
    "encode_text",
    "bytes_to_hex",
    "normalize_object",
    "normalized_input",
    "ABSENT",
    "Absent",
    "Digest",
    "HexText",
    "RawBytes",
    "UnsignedInteger",
    "Utf8Text",
    "HashingError",
    "InvalidEncodingError",
    "InvalidInputError",
    "NormalizationError",
]
