# wirecodec/core/errors.py
from __future__ import annotations


class WireCodecError(Exception):
    """
    Base class for all expected codec errors.
    """

    #: Stable machine-readable identifier (for callers mapping errors to replies, exit codes, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Endian / buffer errors
# ---------------------------------------------------------------------------

class BufferTooShort(WireCodecError, ValueError):
    """
    A fixed-width encode/decode was handed fewer bytes than the width needs.

    Examples:
      - decode32 on a 3-byte slice
      - encode64 into a 4-byte bytearray
    """
    code = "buffer_too_short"


class BufferUnderrun(WireCodecError):
    """
    A read needs more bytes than remain between the cursor and the end of storage.

    Examples:
      - read_uint on an empty buffer
      - a string whose length prefix announces more bytes than were received
    """
    code = "buffer_underrun"


class InvalidPosition(WireCodecError, ValueError):
    """
    Cursor moved outside the stored bytes (set_pos < 0 or > size).
    """
    code = "invalid_position"


class IntegerOverflow(WireCodecError):
    """
    A length or count prefix is larger than the configured limit or the uint32 range.

    Examples:
      - string length prefix 0xFFFFFFFF
      - resource set count above max_set_size
    """
    code = "integer_overflow"


class ValueOutOfRange(WireCodecError, ValueError):
    """
    An integer does not fit the width of the field it is written to.
    """
    code = "value_out_of_range"


# ---------------------------------------------------------------------------
# Bitmap errors
# ---------------------------------------------------------------------------

class BitIndexOutOfRange(WireCodecError, IndexError):
    """
    Bitmap operation given a bit index < 0 or >= the bitmap width.
    """
    code = "bit_index_out_of_range"


class InvalidWidth(WireCodecError, ValueError):
    """
    Bitmap width outside 1..64.
    """
    code = "invalid_width"


# ---------------------------------------------------------------------------
# Utility / configuration errors
# ---------------------------------------------------------------------------

class EmptyPoolError(WireCodecError, LookupError):
    """
    A generator was asked for an element but its pool is empty or exhausted.
    """
    code = "empty_pool"


class ConfigError(WireCodecError, ValueError):
    """
    Codec limits configuration is invalid.

    Examples:
      - limits file without a 'limits' mapping
      - negative or non-integer max_length
    """
    code = "config_error"
