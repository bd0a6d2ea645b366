# core/__init__.py

from .bitmap import Bitmap
from .buffer import ByteBuffer
from .errors import (
    BitIndexOutOfRange,
    BufferTooShort,
    BufferUnderrun,
    ConfigError,
    EmptyPoolError,
    IntegerOverflow,
    InvalidPosition,
    InvalidWidth,
    ValueOutOfRange,
    WireCodecError,
)
from .limits import CodecLimits, DEFAULT_LIMITS
from .resource import RESOURCE_INVALID, ResourceId, ResourceSet, resources_for

__all__ = [
    "ByteBuffer", "Bitmap",
    "CodecLimits", "DEFAULT_LIMITS",
    "RESOURCE_INVALID", "ResourceId", "ResourceSet", "resources_for",
    "WireCodecError", "BufferTooShort", "BufferUnderrun", "InvalidPosition",
    "IntegerOverflow", "ValueOutOfRange", "BitIndexOutOfRange", "InvalidWidth",
    "EmptyPoolError", "ConfigError",
]
