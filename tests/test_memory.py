import pytest

from bunnyquest.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    realloc,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(3) + b"def"


def test_bzero_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == bytearray(b"abc")


def test_bzero_rejects_count_past_end():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_is_zero_filled_with_product_length():
    result = calloc(3, 4)
    assert result == bytearray(3 * 4)


def test_calloc_zero_elements_is_empty():
    assert calloc(0, 5) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_missing_gives_none():
    assert memchr(b"hello", ord("z"), 5) is None


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memchr_uses_low_byte_only():
    data = b"abc"
    assert memchr(data, ord("b") + 256, 3) == memchr(data, ord("b"), 3)


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_only_looks_at_count_bytes():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_zero_count_is_zero():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_ordering_and_antisymmetry():
    less = memcmp(b"abc", b"abd", 3)
    greater = memcmp(b"abd", b"abc", 3)
    assert less < 0
    assert greater > 0
    assert less == -greater


def test_memcmp_rejects_count_past_end():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abcxx")


def test_memcpy_with_missing_buffer_returns_src():
    src = b"abc"
    assert memcpy(None, src, 3) is src
    assert memcpy(bytearray(3), None, 3) is None


def test_memmove_overlap_forward():
    original = bytes(b"123456789")
    buf = bytearray(original)
    result = memmove(buf, 2, 0, 5)
    assert result is buf
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_overlap_backward():
    original = bytes(b"123456789")
    buf = bytearray(original)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_rejects_region_past_end():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcd")
    memset(buf, ord("z"), 2)
    assert buf == bytearray(b"zzcd")


def test_memset_uses_low_byte_only():
    high = memset(bytearray(2), ord("A") + 256, 2)
    low = memset(bytearray(2), ord("A"), 2)
    assert high == low


def test_realloc_grows_with_zero_padding():
    data = b"abc"
    result = realloc(data, 2, 4)
    assert len(result) == 2 * 4
    assert result[: len(data)] == data
    assert result[len(data) :] == bytearray(len(result) - len(data))


def test_realloc_truncates():
    data = b"abcdef"
    assert realloc(data, 1, 2) == bytearray(data[:2])