from __future__ import annotations

import pytest

from wirecodec.core.bitmap import Bitmap
from wirecodec.core.errors import BitIndexOutOfRange, InvalidWidth, ValueOutOfRange


def test_new_bitmap_is_empty_not_full():
    bm = Bitmap(8)
    assert bm.is_empty()
    assert not bm.is_full()
    assert bm.get_flags() == 0
    assert bm.mask == 0xFF


def test_set_and_unset_flags():
    bm = Bitmap(width=8)
    for b in (0, 3, 7):
        bm.set(b)
    assert bm.get_flags() == 0b10001001 == 0x89
    assert bm.is_set(0) and bm.is_set(3) and bm.is_set(7)
    assert not bm.is_set(1)
    assert not bm.is_empty()

    bm.unset(3)
    assert bm.get_flags() == 0b10000001
    assert not bm.is_set(3)


def test_unset_of_clear_bit_is_noop():
    bm = Bitmap(8)
    bm.set(1)
    bm.unset(2)
    assert bm.get_flags() == 0b10


@pytest.mark.parametrize("width", [1, 7, 8, 32, 63, 64])
def test_full_after_setting_every_bit(width):
    bm = Bitmap(width)
    for b in range(width):
        bm.set(b)
    assert bm.is_full()
    assert bm.get_flags() == 2**width - 1

    bm.clear()
    assert bm.is_empty()
    assert not any(bm.is_set(b) for b in range(width))


def test_default_width_is_64():
    bm = Bitmap()
    assert bm.width == 64
    bm.set(63)
    assert bm.get_flags() == 1 << 63


@pytest.mark.parametrize("bit", [-1, 8, 64, 100])
def test_out_of_range_index_raises(bit):
    bm = Bitmap(8)
    with pytest.raises(BitIndexOutOfRange):
        bm.set(bit)
    with pytest.raises(BitIndexOutOfRange):
        bm.unset(bit)
    with pytest.raises(BitIndexOutOfRange):
        bm.is_set(bit)
    assert bm.is_empty()


@pytest.mark.parametrize("width", [0, 65, -3])
def test_invalid_width_raises(width):
    with pytest.raises(InvalidWidth):
        Bitmap(width)


def test_from_flags_and_set_bits():
    bm = Bitmap.from_flags(0x91, width=8)
    assert bm.set_bits() == (0, 4, 7)
    assert bm == Bitmap.from_flags(0x91, width=8)
    assert bm != Bitmap.from_flags(0x91, width=16)


def test_from_flags_rejects_bits_above_width():
    with pytest.raises(BitIndexOutOfRange):
        Bitmap.from_flags(0x100, width=8)


def test_repr_shows_width_and_flags():
    bm = Bitmap(4)
    bm.set(2)
    assert repr(bm) == "Bitmap(width=4, flags=0x4)"


def test_flags_travel_as_u64_through_buffer():
    from wirecodec.core.buffer import ByteBuffer

    bm = Bitmap(64)
    bm.set(0)
    bm.set(63)

    buf = ByteBuffer()
    buf.write_u64(bm.get_flags())
    buf.set_pos(0)
    assert Bitmap.from_flags(buf.read_u64()) == bm


@pytest.mark.parametrize("flags", [1.0, "1", None, True])
def test_from_flags_rejects_non_int(flags):
    with pytest.raises(ValueOutOfRange):
        Bitmap.from_flags(flags, width=8)


def test_from_flags_rejects_bool_width():
    with pytest.raises(InvalidWidth):
        Bitmap.from_flags(1, width=True)
