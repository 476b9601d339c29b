from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from smthash.core.canonical import CANONICAL_FORMATS


@dataclass
class Config:
    canonical_format: str
    log_level: str

    @classmethod
    def load(cls) -> "Config":
        fmt = os.environ.get("SMTHASH_CANONICAL_FORMAT", "json")
        level = os.environ.get("SMTHASH_LOG_LEVEL", "WARNING")
        return cls(fmt.lower(), level.upper())

    def validate(self) -> None:
        if self.canonical_format not in CANONICAL_FORMATS:
            raise ValueError(
                f"canonical_format must be one of {CANONICAL_FORMATS}, "
                f"got {self.canonical_format!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")
