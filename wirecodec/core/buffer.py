# wirecodec/core/buffer.py
from __future__ import annotations

import logging
from typing import Iterable, Optional, Set, Union

from .endian import (
    CODECS,
    decode,
    from_signed32,
    pack16,
    pack32,
    pack64,
    to_signed32,
)
from .errors import BufferUnderrun, IntegerOverflow, InvalidPosition
from .limits import DEFAULT_LIMITS, UINT32_MAX, CodecLimits
from .resource import ResourceId, ordered

BytesLike = Union[bytes, bytearray, memoryview]

PREFIX_SIZE = CODECS[32].size  # every length/count prefix is an unsigned 32-bit int
RSET_ELEM_SIZE = CODECS[32].size


class ByteBuffer:
    """
    Append-only byte storage with a single read/write cursor.

    Writes append at the end and advance the cursor past the written bytes.
    Reads decode at the cursor and advance it by the field width; a failed
    read raises and leaves the cursor where it was.

    Field order is the caller's protocol: write a whole message, set_pos(0),
    then read the fields back in the same order.
    """

    def __init__(
        self,
        data: Optional[BytesLike] = None,
        *,
        limits: Optional[CodecLimits] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._buf = bytearray()
        self._pos = 0
        self.limits = limits or DEFAULT_LIMITS
        self._log = logger or logging.getLogger(__name__)
        if data is not None:
            self.load(data)

    # ---------------- State ----------------
    @property
    def data(self) -> bytes:
        """Immutable copy of the stored bytes."""
        return bytes(self._buf)

    @property
    def size(self) -> int:
        return len(self._buf)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._pos

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __repr__(self) -> str:
        return f"ByteBuffer(size={len(self._buf)}, pos={self._pos})"

    def get_pos(self) -> int:
        return self._pos

    def set_pos(self, pos: int) -> None:
        """Move the cursor; positions outside 0..size are rejected, not clamped."""
        if isinstance(pos, bool) or not isinstance(pos, int) or not 0 <= pos <= len(self._buf):
            raise InvalidPosition(
                f"Position {pos!r} outside [0, {len(self._buf)}]",
                details={"pos": pos, "size": len(self._buf)},
            )
        self._pos = pos

    # ---------------- Bulk ----------------
    def clear(self) -> None:
        self._buf.clear()
        self._pos = 0
        self._log.debug("Buffer cleared")

    def load(self, data: BytesLike) -> None:
        """Replace all content with `data` and rewind the cursor."""
        self._buf = bytearray(_as_bytes(data))
        self._pos = 0
        self._log.debug("Buffer loaded %d bytes", len(self._buf))

    def concat(self, data: BytesLike) -> None:
        """Append raw bytes and advance the cursor by their length."""
        raw = _as_bytes(data)
        self._append(raw)
        self._log.debug("Buffer concat %d bytes, size=%d", len(raw), len(self._buf))

    # ---------------- Integers ----------------
    def write_u64(self, value: int) -> None:
        self._append(pack64(value))

    def read_u64(self) -> int:
        return self._read_fixed(64, "u64")

    def write_uint(self, value: int) -> None:
        self._append(pack32(value))

    def read_uint(self) -> int:
        return self._read_fixed(32, "uint")

    def write_int(self, value: int) -> None:
        self._append(pack32(from_signed32(value)))

    def read_int(self) -> int:
        return to_signed32(self._read_fixed(32, "int"))

    def write_u16(self, value: int) -> None:
        self._append(pack16(value))

    def read_u16(self) -> int:
        return self._read_fixed(16, "u16")

    # ---------------- Booleans ----------------
    def write_bool(self, value: bool) -> None:
        self._append(b"\x01" if value else b"\x00")

    def read_bool(self) -> bool:
        # Any nonzero byte is true; other producers may not emit exactly 0x01.
        self._require(1, "bool")
        value = self._buf[self._pos] != 0
        self._pos += 1
        return value

    # ---------------- Strings ----------------
    def write_string(self, value: Union[str, BytesLike]) -> None:
        raw = value.encode("utf-8") if isinstance(value, str) else _as_bytes(value)
        self._write_prefixed(raw, "string")

    def write_cstring(self, value: Union[str, BytesLike]) -> None:
        """Write a NUL-terminated string; bytes from the first NUL on are dropped."""
        raw = value.encode("utf-8") if isinstance(value, str) else _as_bytes(value)
        nul = raw.find(b"\x00")
        if nul >= 0:
            raw = raw[:nul]
        self._write_prefixed(raw, "string")

    def read_string(self) -> bytes:
        return self._read_prefixed("string")

    def read_text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        start = self._pos
        raw = self._read_prefixed("string")
        try:
            return raw.decode(encoding, errors)
        except (UnicodeDecodeError, LookupError):
            self._pos = start
            raise

    # ---------------- Resource sets ----------------
    def write_rset(self, rset: Iterable[ResourceId]) -> None:
        ids = ordered(rset)
        self._check_limit(len(ids), self.limits.max_set_size, "resource set")
        parts = [pack32(len(ids))]
        parts.extend(pack32(from_signed32(r)) for r in ids)
        self._append(b"".join(parts))

    def read_rset(self) -> Set[ResourceId]:
        count = self._peek_prefix("resource set")
        self._check_limit(count, self.limits.max_set_size, "resource set")
        self._require(PREFIX_SIZE + count * RSET_ELEM_SIZE, "resource set")

        start = self._pos + PREFIX_SIZE
        out: Set[ResourceId] = set()
        for i in range(count):
            out.add(to_signed32(decode(32, self._buf, start + i * RSET_ELEM_SIZE)))
        self._pos = start + count * RSET_ELEM_SIZE
        return out

    # ---------------- Nested buffers ----------------
    def write_buffer(self, other: "ByteBuffer") -> None:
        self._write_prefixed(other.data, "buffer")

    def read_buffer(self, into: Optional["ByteBuffer"] = None) -> "ByteBuffer":
        """
        Read a nested buffer into `into` (replacing its content) or into a new
        ByteBuffer sharing this buffer's limits and logger. The returned buffer
        has its cursor at 0.
        """
        payload = self._read_prefixed("buffer")
        target = into if into is not None else ByteBuffer(limits=self.limits, logger=self._log)
        target.load(payload)
        return target

    # ---------------- Helpers ----------------
    def _append(self, raw: bytes) -> None:
        self._buf.extend(raw)
        self._pos += len(raw)

    def _require(self, n: int, field: str) -> None:
        available = len(self._buf) - self._pos
        if n > available:
            self._log.debug(
                "Buffer underrun reading %s: need %d bytes at pos=%d, %d available",
                field,
                n,
                self._pos,
                available,
            )
            raise BufferUnderrun(
                f"Cannot read {field}: need {n} bytes at position {self._pos}, {available} available",
                details={"field": field, "needed": n, "pos": self._pos, "available": available},
            )

    def _read_fixed(self, bits: int, field: str) -> int:
        size = CODECS[bits].size
        self._require(size, field)
        value = decode(bits, self._buf, self._pos)
        self._pos += size
        return value

    def _peek_prefix(self, field: str) -> int:
        self._require(PREFIX_SIZE, f"{field} length prefix")
        return decode(32, self._buf, self._pos)

    def _check_limit(self, n: int, limit: int, field: str) -> None:
        limit = min(limit, UINT32_MAX)
        if n > limit:
            self._log.warning("Rejected %s length %d (max=%d)", field, n, limit)
            raise IntegerOverflow(
                f"{field} length {n} exceeds limit {limit}",
                hint="raise CodecLimits if the peer legitimately sends larger fields",
                details={"field": field, "length": n, "limit": limit},
            )

    def _write_prefixed(self, raw: bytes, field: str) -> None:
        self._check_limit(len(raw), self.limits.max_length, field)
        self._append(pack32(len(raw)) + raw)

    def _read_prefixed(self, field: str) -> bytes:
        n = self._peek_prefix(field)
        self._check_limit(n, self.limits.max_length, field)
        self._require(PREFIX_SIZE + n, field)

        start = self._pos + PREFIX_SIZE
        payload = bytes(self._buf[start: start + n])
        self._pos = start + n
        return payload


def _as_bytes(data: BytesLike) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)
