from __future__ import annotations

import logging
from typing import Any

from smthash.core.canonical import canonical_serialize
from smthash.core.encoding import HexText, bytes_to_hex, text_to_hex
from smthash.exceptions import InvalidInputError, NormalizationError

logger = logging.getLogger(__name__)


def normalize_object(obj: Any, fmt: str = "json") -> str:
    """
    Return the canonical serialization of `obj` as lowercase hex.

    The hex string is the serialization itself, not a hash of it. Pass it to
    smthash() wrapped in HexText so it is hashed as one field.
    Raises NormalizationError for values the canonical form cannot carry.
    """
    serialized = canonical_serialize(obj, fmt)
    if isinstance(serialized, str):
        try:
            out = text_to_hex(serialized)
        except InvalidInputError as e:
            raise NormalizationError(e.reason) from e
    else:
        out = bytes_to_hex(serialized)
    logger.debug("normalized object (%s, %d hex chars)", fmt, len(out))
    return out


def normalized_input(obj: Any, fmt: str = "json") -> HexText:
    return HexText(normalize_object(obj, fmt))
