from __future__ import annotations

import hashlib
import logging
from typing import Any

from smthash.core.encoding import Digest, encode, is_canonical_bytes, to_typed
from smthash.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def sha256_hex(data: bytes) -> str:
    """Return SHA-256 hex digest of bytes."""
    return hashlib.sha256(data).hexdigest()


def smthash(*inputs: Any) -> Digest:
    """
    Hash an ordered list of mixed-type inputs.

    Each input is canonicalized on its own (see smthash.core.encoding), the
    results are concatenated left to right and the buffer is hashed once
    with SHA-256. Every input is encoded before any hashing happens, so a bad
    argument never yields a partial digest.

    Supported: int >= 0, str (UTF-8), None, bytes-like, Digest and the typed
    variants (HexText for hex data).
    """
    buf = bytearray()
    for position, value in enumerate(inputs):
        try:
            buf += encode(to_typed(value))
        except InvalidInputError as e:
            if e.position is not None:
                raise
            raise InvalidInputError(value, position, e.reason) from e

    digest = Digest(hashlib.sha256(buf).digest())
    logger.debug("hashed %d inputs (%d bytes) -> %s", len(inputs), len(buf), digest.hex())
    return digest


def digest_to_hex(d: Any) -> str:
    """Lowercase hex form of a Digest or any bytes-like value."""
    if not is_canonical_bytes(d):
        raise InvalidInputError(d)
    return bytes(d).hex()


if __name__ == "__main__":
    print(smthash("abc").hex())
