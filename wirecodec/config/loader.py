# wirecodec/config/loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from wirecodec.core.errors import ConfigError
from wirecodec.core.limits import CodecLimits
from wirecodec.utils.hashing import sha256_file

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "codec.yml"


class LimitsLoader:
    """Load codec limits from a YAML file + keep its SHA256 hash."""

    KNOWN_KEYS = ("max_length", "max_set_size")

    def __init__(self, path: Path, logger: Optional[logging.Logger] = None):
        self.path = Path(path)
        self._log = logger or logging.getLogger(__name__)

        # Full document
        self.doc: Dict[str, Any] = {}
        # Extracted 'limits' mapping
        self.limits: Dict[str, Any] = {}
        self.file_hash: Optional[str] = None

    def load(self) -> CodecLimits:
        if not self.path.exists():
            raise FileNotFoundError(f"Codec config file not found: {self.path}")

        self.file_hash = sha256_file(self.path)
        with open(self.path, "r", encoding="utf-8") as f:
            self.doc = yaml.safe_load(f) or {}

        if not isinstance(self.doc, dict):
            raise ConfigError(f"{self.path.name} must be a mapping")

        self.limits = self.doc.get("limits", {}) or {}
        if not isinstance(self.limits, dict):
            raise ConfigError(f"{self.path.name} must contain 'limits' mapping")

        unknown = set(self.limits) - set(self.KNOWN_KEYS)
        if unknown:
            raise ConfigError(
                f"Unknown limits in {self.path.name}: {', '.join(sorted(map(str, unknown)))}",
                hint=f"expected any of: {', '.join(self.KNOWN_KEYS)}",
            )

        limits = CodecLimits(**self.limits, source_sha256=self.file_hash)
        self._log.debug("Loaded codec limits from %s sha256=%s: %s", self.path, self.file_hash, limits)
        return limits


def load_limits(path: Optional[Path] = None) -> CodecLimits:
    """Load limits from `path`, or from the packaged codec.yml when omitted."""
    return LimitsLoader(path if path is not None else DEFAULT_CONFIG_PATH).load()
