"""Sampling strategies that supply carrier elements to the verifier."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Protocol, TypeVar

from idemring.kernel.ring import Ring

T = TypeVar("T")


class SampleStrategy(Protocol):
    """Protocol for element sources."""

    def sample(self, ring: Ring[Any]) -> tuple[Any, ...]:
        """Return distinct carrier elements, in a deterministic order."""
        ...

    def describe(self) -> str:
        ...


def distinct(ring: Ring[T], elements: Iterable[T]) -> tuple[T, ...]:
    """Drop elements equal (under the ring's equality) to an earlier one."""
    kept: list[T] = []
    for element in elements:
        if not any(ring.eq(element, seen) for seen in kept):
            kept.append(element)
    return tuple(kept)


@dataclass(frozen=True)
class Enumerate:
    """A fixed, caller-supplied list of elements."""

    elements: tuple[Any, ...]

    def __init__(self, elements: Iterable[Any]) -> None:
        object.__setattr__(self, "elements", tuple(elements))

    def sample(self, ring: Ring[Any]) -> tuple[Any, ...]:
        return distinct(ring, self.elements)

    def describe(self) -> str:
        return f"Enumerate({len(self.elements)} elements)"


@dataclass(frozen=True)
class Exhaustive:
    """Every element of a finite ring, optionally truncated to ``limit``."""

    limit: int | None = None

    def sample(self, ring: Ring[Any]) -> tuple[Any, ...]:
        elements = getattr(ring, "elements", None)
        if elements is None:
            raise TypeError(f"{ring.name} does not support enumeration")
        return distinct(ring, islice(elements(), self.limit))

    def describe(self) -> str:
        return "Exhaustive" if self.limit is None else f"Exhaustive(limit={self.limit})"


@dataclass(frozen=True)
class RandomSample:
    """
    ``count`` draws from a seeded generator.

    ``draw`` defaults to the ring's own ``random_element`` method. The same
    seed always yields the same sample.
    """

    count: int
    seed: int = 0
    draw: Callable[[random.Random], Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("count must be positive")

    def sample(self, ring: Ring[Any]) -> tuple[Any, ...]:
        draw = self.draw or getattr(ring, "random_element", None)
        if draw is None:
            raise TypeError(f"{ring.name} has no random_element; pass draw explicitly")
        rng = random.Random(self.seed)
        return distinct(ring, (draw(rng) for _ in range(self.count)))

    def describe(self) -> str:
        return f"RandomSample(count={self.count}, seed={self.seed})"
