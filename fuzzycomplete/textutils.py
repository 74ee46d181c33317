"""Text helpers: byte-level accent folding, normalisation and splitting."""

from __future__ import annotations

_LEAD_BYTE = 0xC3

_FOLD_RANGES: dict[str, tuple[range, ...]] = {
    "a": (range(0xA0, 0xA5), range(0x80, 0x85)),
    "e": (range(0xA8, 0xAC), range(0x88, 0x8C)),
    "i": (range(0xAC, 0xB0), range(0x8C, 0x90)),
    "o": (range(0xB2, 0xB7), range(0x92, 0x97)),
    "u": (range(0xB9, 0xBD), range(0x99, 0x9D)),
    "c": (range(0xA7, 0xA8), range(0x87, 0x88)),
    "n": (range(0xB1, 0xB2), range(0x91, 0x92)),
}

_FOLD_TABLE: dict[int, str] = {
    byte: letter
    for letter, ranges in _FOLD_RANGES.items()
    for byte_range in ranges
    for byte in byte_range
}


def ascii_fold(byte: int) -> str:
    """Map the trailing byte of a two-byte Latin-1 UTF-8 sequence to a base letter.

    Signed byte values (-128..-1) are accepted as well as unsigned ones.
    Anything not in the table folds to ``"?"``.
    """
    return _FOLD_TABLE.get(byte & 0xFF, "?")


def normalize(data: str | bytes) -> str:
    """Lower-case ASCII and fold accented Latin letters to their base letter."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    folded = []
    for byte in raw:
        if byte == _LEAD_BYTE:
            continue
        folded.append(ascii_fold(byte) if byte >= 0x80 else chr(byte).lower())
    return "".join(folded)


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty tokens."""
    return [token for token in text.split(delim) if token]