"""Edit vector automaton for bounded edit-distance matching."""

from __future__ import annotations

from collections import deque

from .vectrie import VectorTrie

DEAD_STATE = 0
INITIAL_STATE = 1


class EditVectorAutomaton:
    """Deterministic automaton over banded edit vectors.

    Each state stands for an edit vector of length ``2 * threshold + 1`` whose
    entries are capped at ``threshold + 1``. Transitions are taken on the
    match bitmask of the next character.
    """

    def __init__(self, threshold: int) -> None:
        if threshold < 0:
            raise ValueError("threshold must not be negative")
        self.threshold = threshold
        self.editvec_length = 2 * threshold + 1
        tau = threshold + 1

        terminal = tuple([tau] * self.editvec_length)
        initial = tuple(abs(i - threshold) for i in range(self.editvec_length))

        self._editvecs: list[tuple[int, ...]] = [terminal, initial]
        self._transitions: dict[tuple[int, int], int] = {}

        index = VectorTrie(tau + 1)
        index.insert(terminal, DEAD_STATE)
        index.insert(initial, INITIAL_STATE)

        pending = deque([INITIAL_STATE])
        while pending:
            state = pending.popleft()
            if state == DEAD_STATE:
                continue
            editvec = self._editvecs[state]
            for bitmask in range(1 << self.editvec_length):
                following = self._step(editvec, bitmask)
                next_state = index.get(following)
                if next_state is None:
                    next_state = len(self._editvecs)
                    self._editvecs.append(following)
                    pending.append(next_state)
                    index.insert(following, next_state)
                self._transitions[state, bitmask] = next_state

    def _step(self, editvec: tuple[int, ...], bitmask: int) -> tuple[int, ...]:
        tau = self.threshold + 1
        last = len(editvec) - 1
        following: list[int] = []
        for i, substitution in enumerate(editvec):
            if (bitmask >> (last - i)) & 1:
                value = substitution
            else:
                deletion = following[i - 1] if i > 0 else tau
                insertion = editvec[i + 1] if i < last else tau
                value = min(deletion, insertion, substitution) + 1
            following.append(min(value, tau))
        return tuple(following)

    def next_state(self, state: int, bitmask: int) -> int:
        """Return the state reached from ``state`` on ``bitmask``."""
        try:
            return self._transitions[state, bitmask]
        except KeyError:
            raise KeyError(
                f"no transition for state {state} and bitmask {bitmask}"
            ) from None

    def editvec(self, state: int) -> tuple[int, ...]:
        """Return the edit vector that ``state`` stands for."""
        if not 0 <= state < len(self._editvecs):
            raise IndexError(f"state {state} out of range")
        return self._editvecs[state]

    def describe(self) -> str:
        """Return a listing of every transition."""
        lines = ["Transitions: "]
        for (state, bitmask), next_state in self._transitions.items():
            lines.append(
                f"State: {state} {list(self.editvec(state))} "
                f"Bitmask: {bitmask:0{self.editvec_length}b} "
                f"-> Next State: {list(self.editvec(next_state))}"
            )
        return "\n".join(lines)