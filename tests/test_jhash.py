import pytest

from netwatch.jhash import JHASH_INITVAL, jhash8, jhash32


def test_empty_bytes_returns_initial_state():
    assert jhash8(b"") == 0xDEADBEEF


def test_empty_words_returns_initial_state():
    assert jhash32([]) == 0xDEADBEEF


def test_empty_key_includes_initval():
    assert jhash8(b"", 7) == JHASH_INITVAL + 7


def test_single_byte_keys_hash_apart():
    hashes = {jhash8(bytes([value]), 3) for value in range(256)}
    assert len(hashes) == 256


@pytest.mark.parametrize("length", [1, 5, 12, 13, 40])
def test_result_fits_32_bits(length):
    h = jhash8(bytes(range(length)), 0xFFFFFFFF)
    assert 0 <= h <= 0xFFFFFFFF


@pytest.mark.parametrize("count", [1, 2, 3])
def test_words_match_little_endian_bytes(count):
    words = [0x01020304, 0xA0B0C0D0, 0xFFFFFFFF][:count]
    data = b"".join(w.to_bytes(4, "little") for w in words)
    assert jhash8(data, 11) == jhash32(words, 11)


def test_initval_changes_hash():
    assert jhash8(b"abcdef", 0) != jhash8(b"abcdef", 1) or jhash8(
        b"abcdef", 1
    ) != jhash8(b"abcdef", 2)


def test_long_key_ignores_non_leading_lane_bytes():
    first = bytearray(13)
    second = bytearray(13)
    second[1] = 0x55
    second[6] = 0x77
    assert jhash8(bytes(first)) == jhash8(bytes(second))


def test_long_key_uses_leading_lane_bytes():
    first = bytearray(13)
    second = bytearray(13)
    second[0] = 0x55
    assert jhash8(bytes(first)) != jhash8(bytes(second))


def test_word_out_of_range_rejected():
    with pytest.raises(ValueError):
        jhash32([1 << 32])
    with pytest.raises(ValueError):
        jhash32([-1])


def test_jhash32_accepts_generator():
    assert jhash32(iter([1, 2, 3, 4])) == jhash32([1, 2, 3, 4])