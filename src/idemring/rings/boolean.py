"""Boolean ring of subsets - the standard characteristic-2 example."""

from __future__ import annotations

import random
from collections.abc import Iterable
from itertools import combinations

from idemring.kernel.capability import COMMUTATIVE_RING
from idemring.kernel.ring import FiniteRing


class BooleanRing(FiniteRing[frozenset[int]]):
    """
    Subsets of {0, ..., bits-1} under symmetric difference and intersection.

    Every element is idempotent and x + x = 0, so every pair anticommutes
    while e*f is generally nonzero. The ring has 2-torsion and therefore
    never declares TORSION_FREE.
    """

    capabilities = COMMUTATIVE_RING

    def __init__(self, bits: int = 2) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self.name = f"Bool^{bits}"
        self._universe = frozenset(range(bits))

    def add(self, a: frozenset[int], b: frozenset[int]) -> frozenset[int]:
        return a ^ b

    def mul(self, a: frozenset[int], b: frozenset[int]) -> frozenset[int]:
        return a & b

    def neg(self, a: frozenset[int]) -> frozenset[int]:
        return a

    def zero(self) -> frozenset[int]:
        return frozenset()

    def one(self) -> frozenset[int]:
        return self._universe

    def weight(self, a: frozenset[int]) -> int:
        return len(a)

    def elements(self) -> Iterable[frozenset[int]]:
        for size in range(self.bits + 1):
            for subset in combinations(range(self.bits), size):
                yield frozenset(subset)

    def random_element(self, rng: random.Random) -> frozenset[int]:
        return frozenset(i for i in range(self.bits) if rng.random() < 0.5)
