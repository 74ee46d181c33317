"""Per-character match bitmaps over a query string."""

from __future__ import annotations

from collections.abc import Iterable


class Bitmap:
    """Records, for every character of a charset, where it occurs in a text.

    Positions are shifted right by ``offset`` so that the first ``offset``
    slots never match.
    """

    def __init__(self, text: str, charset: Iterable[str], offset: int) -> None:
        length = len(text) + offset
        self._map: dict[str, list[bool]] = {ch: [False] * length for ch in charset}
        for position, ch in enumerate(text, start=offset):
            bits = self._map.get(ch)
            if bits is not None:
                bits[position] = True

    def extract_bitmask(self, ch: str, lo: int, width: int) -> int:
        """Pack ``width`` bits of ``ch``'s bitmap starting at ``lo``, most significant first."""
        bits = self._map.get(ch)
        if bits is None or lo >= len(bits):
            return 0
        bitmask = 0
        for bit_idx, present in zip(range(width - 1, -1, -1), bits[lo:lo + width]):
            if present:
                bitmask |= 1 << bit_idx
        return bitmask