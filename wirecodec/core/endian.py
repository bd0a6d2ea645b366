# wirecodec/core/endian.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
import struct

from .errors import BufferTooShort, ValueOutOfRange


@dataclass(frozen=True)
class EndianCodec:
    fmt: str  # big-endian struct format
    size: int

    @property
    def packer(self) -> struct.Struct:
        return _STRUCTS[self.size]

    @property
    def max_value(self) -> int:
        return (1 << (8 * self.size)) - 1


CODECS: Dict[int, EndianCodec] = {
    16: EndianCodec(fmt=">H", size=2),
    32: EndianCodec(fmt=">I", size=4),
    64: EndianCodec(fmt=">Q", size=8),
}

_STRUCTS: Dict[int, struct.Struct] = {c.size: struct.Struct(c.fmt) for c in CODECS.values()}

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def _require_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueOutOfRange(
            f"Expected an int, got {type(value).__name__} {value!r}",
            details={"value": value},
        )
    return value


def _check_value(codec: EndianCodec, value: int) -> int:
    value = _require_int(value)
    if not 0 <= value <= codec.max_value:
        raise ValueOutOfRange(
            f"Value {value} does not fit in {codec.size * 8} unsigned bits",
            details={"value": value, "bits": codec.size * 8},
        )
    return value


def _check_room(codec: EndianCodec, available: int, offset: int) -> None:
    if offset < 0 or available - offset < codec.size:
        raise BufferTooShort(
            f"Need {codec.size} bytes at offset {offset}, buffer holds {available}",
            details={"needed": codec.size, "offset": offset, "available": available},
        )


def encode(bits: int, value: int, out, offset: int = 0) -> None:
    """Write `value` big-endian into the writable buffer `out` at `offset`."""
    codec = CODECS[bits]
    value = _check_value(codec, value)
    _check_room(codec, len(out), offset)
    codec.packer.pack_into(out, offset, value)


def decode(bits: int, data, offset: int = 0) -> int:
    """Read an unsigned big-endian integer of `bits` width from `data` at `offset`."""
    codec = CODECS[bits]
    _check_room(codec, len(data), offset)
    return codec.packer.unpack_from(data, offset)[0]


def encode16(value: int, out, offset: int = 0) -> None:
    encode(16, value, out, offset)


def encode32(value: int, out, offset: int = 0) -> None:
    encode(32, value, out, offset)


def encode64(value: int, out, offset: int = 0) -> None:
    encode(64, value, out, offset)


def decode16(data, offset: int = 0) -> int:
    return decode(16, data, offset)


def decode32(data, offset: int = 0) -> int:
    return decode(32, data, offset)


def decode64(data, offset: int = 0) -> int:
    return decode(64, data, offset)


def pack16(value: int) -> bytes:
    codec = CODECS[16]
    return codec.packer.pack(_check_value(codec, value))


def pack32(value: int) -> bytes:
    codec = CODECS[32]
    return codec.packer.pack(_check_value(codec, value))


def pack64(value: int) -> bytes:
    codec = CODECS[64]
    return codec.packer.pack(_check_value(codec, value))


def to_signed32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as two's-complement."""
    value = _check_value(CODECS[32], value)
    return value - (1 << 32) if value & 0x80000000 else value


def from_signed32(value: int) -> int:
    """Reinterpret a signed 32-bit value as its unsigned two's-complement bit pattern."""
    value = _require_int(value)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueOutOfRange(
            f"Value {value} does not fit in a signed 32-bit integer",
            details={"value": value, "bits": 32},
        )
    return value & 0xFFFFFFFF
