import pytest

from fuzzycomplete.bitmap import Bitmap


def test_pinned_masks():
    bitmap = Bitmap("abc", {"a", "b", "c"}, 1)
    assert bitmap.extract_bitmask("a", 0, 3) == 0b010
    assert bitmap.extract_bitmask("b", 1, 3) == 0b010
    # Window runs past the end: only two bits are available.
    assert bitmap.extract_bitmask("c", 2, 3) == 0b010


def test_unknown_character_is_zero():
    bitmap = Bitmap("hello", {"h", "e"}, 1)
    assert bitmap.extract_bitmask("z", 0, 3) == 0
    # "l" occurs in the text but is not in the charset.
    assert bitmap.extract_bitmask("l", 2, 3) == 0


def test_low_index_past_end_is_zero():
    bitmap = Bitmap("ab", {"a", "b"}, 1)
    assert bitmap.extract_bitmask("b", 3, 3) == 0
    assert bitmap.extract_bitmask("b", 10, 3) == 0


@pytest.mark.parametrize("offset", [0, 1, 2])
def test_single_bit_windows_reconstruct_text(offset):
    text = "banana"
    charset = set(text)
    bitmap = Bitmap(text, charset, offset)
    rebuilt = "".join(
        next(ch for ch in charset if bitmap.extract_bitmask(ch, i + offset, 1))
        for i in range(len(text))
    )
    assert rebuilt == text


@pytest.mark.parametrize("offset", [0, 1, 2])
def test_offset_slots_never_match(offset):
    text = "aaaa"
    bitmap = Bitmap(text, {"a"}, offset)
    for lo in range(offset):
        assert bitmap.extract_bitmask("a", lo, 1) == 0


def test_full_window_popcount_matches_count():
    text = "mississippi"
    offset = 2
    bitmap = Bitmap(text, set(text), offset)
    for ch in set(text):
        mask = bitmap.extract_bitmask(ch, 0, len(text) + offset)
        assert bin(mask).count("1") == text.count(ch)


def test_mask_fits_width():
    text = "abracadabra"
    bitmap = Bitmap(text, set(text), 1)
    for ch in set(text):
        for lo in range(len(text) + 2):
            assert 0 <= bitmap.extract_bitmask(ch, lo, 3) < 8