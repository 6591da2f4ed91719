import pytest

from wireframe.byteops import (
    compare_bytes,
    copy_bytes,
    fill,
    find_byte,
    move_bytes,
    zero,
    zeroed,
)


def test_zeroed_size_and_contents():
    buffer = zeroed(3, 4)
    assert len(buffer) == 12
    assert all(b == 0 for b in buffer)


def test_zeroed_is_mutable():
    buffer = zeroed(2, 2)
    buffer[0] = 7
    assert buffer[0] == 7


def test_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        zeroed(-1, 4)


def test_zero_prefix_only():
    buffer = bytearray(b"abcdef")
    zero(buffer, 3)
    assert buffer == bytearray(b"\0\0\0def")


def test_zero_rejects_overrun():
    with pytest.raises(ValueError):
        zero(bytearray(b"ab"), 3)


def test_fill_uses_low_byte():
    buffer = bytearray(b"xxxx")
    result = fill(buffer, 0x141, 2)
    assert result is buffer
    assert buffer == bytearray(b"AAxx")


def test_fill_zero_count_changes_nothing():
    buffer = bytearray(b"keep")
    fill(buffer, ord("z"), 0)
    assert buffer == bytearray(b"keep")


def test_copy_bytes_round_trip():
    src = b"hello world"
    dest = zeroed(len(src), 1)
    copy_bytes(dest, src, len(src))
    assert bytes(dest) == src


def test_copy_bytes_partial():
    dest = bytearray(b"......")
    copy_bytes(dest, b"abc", 2)
    assert dest == bytearray(b"ab....")


def test_copy_bytes_rejects_short_source():
    with pytest.raises(ValueError):
        copy_bytes(bytearray(10), b"ab", 5)


def test_move_bytes_forward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_move_bytes_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_move_bytes_rejects_overrun():
    with pytest.raises(ValueError):
        move_bytes(bytearray(b"abc"), 2, 0, 2)


def test_find_byte_first_occurrence():
    data = b"banana"
    index = find_byte(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert index == data.index(b"n")


def test_find_byte_respects_limit():
    assert find_byte(b"banana", ord("n"), 2) is None


def test_find_byte_missing():
    assert find_byte(b"abc", ord("z"), 3) is None


def test_compare_bytes_equal():
    assert compare_bytes(b"same", b"same", 4) == 0


def test_compare_bytes_sign_and_antisymmetry():
    low = compare_bytes(b"abc", b"abd", 3)
    high = compare_bytes(b"abd", b"abc", 3)
    assert low < 0
    assert high == -low


def test_compare_bytes_ignores_past_limit():
    assert compare_bytes(b"abX", b"abY", 2) == 0


def test_compare_bytes_unsigned():
    assert compare_bytes(b"\xff", b"\x01", 1) > 0


def test_compare_bytes_rejects_negative():
    with pytest.raises(ValueError):
        compare_bytes(b"a", b"a", -1)