import pytest

from bitsha1.hashing import IV, compress, rol
from bitsha1.hashing._compress import expand


def test_rol():
    assert rol(1 << 31, 1) == 1
    assert rol(0x80000001, 4) == 0x18
    assert rol(0xdeadbeef, 0) == 0xdeadbeef
    assert rol(0xdeadbeef, 32) == 0xdeadbeef
    assert rol(0xdeadbeef, 33) == rol(0xdeadbeef, 1)


def test_expand_schedule():
    w = expand([0] * 15 + [1])
    assert len(w) == 80
    assert w[:16] == [0] * 15 + [1]
    # w[16] only sees w[0], w[2], w[8], w[13]
    assert w[16] == 0
    # w[18] = rol(w[15] ^ ..., 1)
    assert w[18] == 2


def test_compress_padded_empty_message():
    h = compress(IV, [0x80000000] + [0] * 15)
    assert h == (0xda39a3ee, 0x5e6b4b0d, 0x3255bfef, 0x95601890, 0xafd80709)


def test_compress_padded_abc():
    block = [0x61626380] + [0] * 14 + [24]
    h = compress(IV, block)
    assert '%08x%08x%08x%08x%08x' % h == 'a9993e364706816aba3e25717850c26c9cd0d89d'


def test_compress_does_not_touch_input():
    block = [0x61626380] + [0] * 14 + [24]
    copy = list(block)
    compress(IV, block)
    assert block == copy


def test_compress_requires_full_block():
    with pytest.raises(AssertionError):
        compress(IV, [0] * 15)
