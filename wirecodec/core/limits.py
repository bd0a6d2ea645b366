# wirecodec/core/limits.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional

from .errors import ConfigError

UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class CodecLimits:
    max_length: int = 16 * 1024 * 1024   # payload bytes per string / nested buffer
    max_set_size: int = 1024 * 1024      # elements per resource set
    # sha256 of the config file these limits came from; None for built-in defaults
    source_sha256: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "source_sha256":
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")
            if not 1 <= value <= UINT32_MAX:
                raise ConfigError(
                    f"{f.name}={value} outside [1, {UINT32_MAX}]",
                    details={"field": f.name, "value": value},
                )


DEFAULT_LIMITS = CodecLimits()
