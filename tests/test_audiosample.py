import pytest

from gvncpy.audiosample import AudioSample


def test_new_sample_is_empty_and_zeroed():
    sample = AudioSample(16)
    assert sample.capacity == 16
    assert sample.length == 0
    assert sample.data == bytearray(16)
    assert sample.payload == b""


def test_payload_follows_length():
    sample = AudioSample(8)
    sample.data[:3] = b"abc"
    sample.length = 3
    assert sample.payload == b"abc"


def test_copy_keeps_used_bytes_only():
    sample = AudioSample(6)
    sample.data[:] = b"abcdef"
    sample.length = 2
    dup = sample.copy()
    assert dup.capacity == sample.capacity
    assert dup.length == 2
    assert dup.payload == b"ab"
    assert dup.data[2:] == bytearray(4)


def test_copy_is_independent():
    sample = AudioSample(4)
    sample.data[:2] = b"xy"
    sample.length = 2
    dup = sample.copy()
    dup.data[0] = 0
    assert sample.payload == b"xy"


def test_length_beyond_capacity_rejected():
    sample = AudioSample(4)
    sample.data[:] = b"wxyz"
    sample.length = 2
    with pytest.raises(ValueError):
        sample.length = 5
    with pytest.raises(ValueError):
        sample.length = -1
    assert sample.length == 2
    assert sample.payload == b"wx"


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        AudioSample(-1)