"""Deterministic random sources for connector planning tests."""

from __future__ import annotations

from typing import Sequence


class ConstantRandom:
    """Returns the same value on every draw."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandom:
    """Returns values from a fixed sequence, cycling when exhausted."""

    def __init__(self, values: Sequence[float]) -> None:
        if not values:
            raise ValueError("SequenceRandom needs at least one value")
        self._values = list(values)
        self._index = 0

    def __call__(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value
