# config/__init__.py

from wirecodec.core.limits import CodecLimits, DEFAULT_LIMITS
from .loader import LimitsLoader, load_limits

__all__ = [
    "CodecLimits", "DEFAULT_LIMITS",
    "LimitsLoader", "load_limits",
]
