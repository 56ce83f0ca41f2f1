"""
Random number sources for the engine.

Every random decision of the engine goes through a single injectable source,
so that encounters can be replayed from a seed and tests can script the exact
rolls they need.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from random import Random
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Interface of the random source consumed by the engine."""

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that a <= N <= b."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return an element of a non-empty sequence."""
        ...


class SeededRandom:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def random(self) -> float:
        return self._random.random()

    def randint(self, a: int, b: int) -> int:
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)


class ScriptedRandom:
    """
    Replays a fixed sequence of floats.

    Integer draws and choices are derived from the next float, so a script
    fully determines every decision. Once the script is exhausted the
    fallback value is returned forever.
    """

    def __init__(self, values: Iterable[float], fallback: float = 0.5) -> None:
        self._values = [float(v) for v in values]
        self._index = 0
        self._fallback = fallback
        for value in self._values + [fallback]:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted values must be in [0, 1), got {value}.")

    @property
    def consumed(self) -> int:
        """Number of values drawn so far."""
        return self._index

    def random(self) -> float:
        if self._index < len(self._values):
            value = self._values[self._index]
        else:
            value = self._fallback
        self._index += 1
        return value

    def randint(self, a: int, b: int) -> int:
        if b < a:
            raise ValueError(f"Empty range for randint({a}, {b}).")
        return a + int(self.random() * (b - a + 1))

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[int(self.random() * len(seq))]
