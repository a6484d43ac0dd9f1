import pytest

from gvncpy.colormap import ColorMap, ColorMapEntry


def test_new_map_entries_are_black():
    cmap = ColorMap(10, 4)
    assert len(cmap) == 4
    assert all(cmap.lookup(i) == ColorMapEntry(0, 0, 0) for i in range(10, 14))


def test_set_then_lookup_round_trip():
    cmap = ColorMap(5, 3)
    cmap.set(6, 100, 200, 300)
    entry = cmap.lookup(6)
    assert (entry.red, entry.green, entry.blue) == (100, 200, 300)
    assert cmap.lookup(5) == ColorMapEntry()


def test_first_and_last_indexes_are_valid():
    cmap = ColorMap(2, 2)
    cmap.set(2, 1, 2, 3)
    cmap.set(3, 4, 5, 6)
    assert cmap.lookup(2) == ColorMapEntry(1, 2, 3)
    assert cmap.lookup(3) == ColorMapEntry(4, 5, 6)


@pytest.mark.parametrize("idx", [1, 4, 100])
def test_out_of_range_index_raises(idx):
    cmap = ColorMap(2, 2)
    with pytest.raises(IndexError):
        cmap.set(idx, 1, 1, 1)
    with pytest.raises(IndexError):
        cmap.lookup(idx)


def test_contains_reflects_range():
    cmap = ColorMap(8, 2)
    assert 8 in cmap and 9 in cmap
    assert 7 not in cmap and 10 not in cmap


def test_copy_is_independent():
    cmap = ColorMap(0, 3)
    cmap.set(1, 7, 8, 9)
    dup = cmap.copy()
    assert dup.lookup(1) == ColorMapEntry(7, 8, 9)
    assert (dup.offset, dup.size) == (cmap.offset, cmap.size)
    dup.set(1, 1, 1, 1)
    assert cmap.lookup(1) == ColorMapEntry(7, 8, 9)


def test_channel_value_out_of_16_bit_range_rejected():
    cmap = ColorMap(0, 1)
    with pytest.raises(ValueError):
        cmap.set(0, 0x10000, 0, 0)
    with pytest.raises(ValueError):
        cmap.set(0, 0, -1, 0)


def test_invalid_construction_rejected():
    with pytest.raises(ValueError):
        ColorMap(-1, 2)
    with pytest.raises(ValueError):
        ColorMap(0, 0x10000)