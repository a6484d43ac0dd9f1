import pytest

from gvncpy.cursor import Cursor


def _rgba(width, height):
    return bytes(range(256)) * ((width * height * 4) // 256) + bytes(
        (width * height * 4) % 256
    )


def test_fields_round_trip():
    data = _rgba(8, 8)
    cur = Cursor(data, 3, 5, 8, 8)
    assert cur.data == data
    assert cur.hotx == 3
    assert cur.hoty == 5
    assert cur.width == 8
    assert cur.height == 8


def test_hotspot_and_size():
    cur = Cursor(_rgba(4, 2), 1, 0, 4, 2)
    assert cur.hotspot == (1, 0)
    assert cur.size == (4, 2)


def test_defaults_are_empty():
    cur = Cursor()
    assert cur.data is None
    assert cur.size == (0, 0)
    assert cur.hotspot == (0, 0)


def test_data_is_copied_to_bytes():
    buf = bytearray(_rgba(2, 2))
    cur = Cursor(buf, 0, 0, 2, 2)
    original = bytes(buf)
    buf[0] ^= 0xFF
    assert cur.data == original
    assert isinstance(cur.data, bytes)


def test_upper_bound_accepted():
    limit = 1 << 15
    cur = Cursor(None, limit, limit, limit, limit)
    assert cur.size == (limit, limit)
    assert cur.hotspot == (limit, limit)


@pytest.mark.parametrize("field", ["hotx", "hoty", "width", "height"])
def test_above_range_rejected(field):
    kwargs = {"hotx": 0, "hoty": 0, "width": 0, "height": 0}
    kwargs[field] = (1 << 15) + 1
    with pytest.raises(ValueError):
        Cursor(None, **kwargs)


@pytest.mark.parametrize("field", ["hotx", "hoty", "width", "height"])
def test_negative_rejected(field):
    kwargs = {"hotx": 0, "hoty": 0, "width": 0, "height": 0}
    kwargs[field] = -1
    with pytest.raises(ValueError):
        Cursor(None, **kwargs)


def test_assignment_is_validated():
    cur = Cursor(None, 0, 0, 1, 1)
    cur.width = 16
    assert cur.width == 16
    with pytest.raises(ValueError):
        cur.height = 1 << 16
    assert cur.height == 1


def test_non_int_dimension_rejected():
    with pytest.raises(TypeError):
        Cursor(None, 0, 0, 1.5, 1)


def test_non_bytes_data_rejected():
    with pytest.raises(TypeError):
        Cursor("pixels", 0, 0, 1, 1)


def test_replacing_data():
    cur = Cursor(_rgba(1, 1), 0, 0, 1, 1)
    new = bytes([1, 2, 3, 4])
    cur.data = new
    assert cur.data == new
    cur.data = None
    assert cur.data is None


def test_equality_of_identical_cursors():
    data = _rgba(2, 2)
    assert Cursor(data, 1, 1, 2, 2) == Cursor(bytearray(data), 1, 1, 2, 2)
    assert not Cursor(data, 1, 1, 2, 2) == Cursor(data, 0, 1, 2, 2)