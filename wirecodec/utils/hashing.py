# wirecodec/utils/hashing.py
from __future__ import annotations

import hashlib
from pathlib import Path

_CHUNK_SIZE = 64 * 1024


def sha256_file(path: Path, *, chunk_size: int = _CHUNK_SIZE) -> str:
    """
    SHA256 of a config file, read in chunks.
    Returns lowercase hex digest; used to fingerprint the limits a codec was built with.
    """
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()
