# wirecodec/core/bitmap.py
from __future__ import annotations

from typing import Tuple

from .errors import BitIndexOutOfRange, InvalidWidth, ValueOutOfRange

MAX_WIDTH = 64


class Bitmap:
    """
    Fixed-width flag set over a single 64-bit word.

    Only the low `width` bits are meaningful; bits at or above the width are
    never set, so is_full() is an exact comparison against the mask.
    """

    __slots__ = ("_width", "_mask", "_flags")

    def __init__(self, width: int = MAX_WIDTH):
        if isinstance(width, bool) or not isinstance(width, int) or not 1 <= width <= MAX_WIDTH:
            raise InvalidWidth(
                f"Bitmap width must be in [1, {MAX_WIDTH}], got {width!r}",
                details={"width": width},
            )
        self._width = width
        self._mask = (1 << width) - 1
        self._flags = 0

    @classmethod
    def from_flags(cls, flags: int, width: int = MAX_WIDTH) -> "Bitmap":
        """Rebuild a bitmap from a flag word, e.g. one read with ByteBuffer.read_u64()."""
        bm = cls(width)
        if isinstance(flags, bool) or not isinstance(flags, int):
            raise ValueOutOfRange(
                f"Flags must be an int, got {type(flags).__name__} {flags!r}",
                details={"flags": flags, "width": width},
            )
        if flags < 0 or flags & ~bm._mask:
            raise BitIndexOutOfRange(
                f"Flags 0x{flags:X} have bits outside width {width}",
                details={"flags": flags, "width": width},
            )
        bm._flags = flags
        return bm

    # --- state ---
    @property
    def width(self) -> int:
        return self._width

    @property
    def mask(self) -> int:
        return self._mask

    def get_flags(self) -> int:
        return self._flags

    def is_set(self, bit: int) -> bool:
        return bool(self._flags & self._bit(bit))

    def is_empty(self) -> bool:
        return self._flags == 0

    def is_full(self) -> bool:
        return self._flags == self._mask

    def set_bits(self) -> Tuple[int, ...]:
        return tuple(i for i in range(self._width) if self._flags >> i & 1)

    # --- mutation ---
    def set(self, bit: int) -> None:
        self._flags |= self._bit(bit)

    def unset(self, bit: int) -> None:
        self._flags &= self._mask ^ self._bit(bit)

    def clear(self) -> None:
        self._flags = 0

    # --- helpers ---
    def _bit(self, bit: int) -> int:
        if isinstance(bit, bool) or not isinstance(bit, int) or not 0 <= bit < self._width:
            raise BitIndexOutOfRange(
                f"Bit index {bit!r} outside [0, {self._width})",
                details={"bit": bit, "width": self._width},
            )
        return 1 << bit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._width == other._width and self._flags == other._flags

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Bitmap(width={self._width}, flags=0x{self._flags:X})"
