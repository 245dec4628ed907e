"""Integer-based rings: Z, N and Z/nZ."""

from __future__ import annotations

import random
from collections.abc import Iterable

from idemring.kernel.capability import COMMUTATIVE_RING, SEMIRING, Capability
from idemring.kernel.ring import FiniteRing, Ring


class Integers(Ring[int]):
    """The integers. Random draws stay within [-bound, bound]."""

    name = "Z"
    capabilities = COMMUTATIVE_RING | Capability.TORSION_FREE

    def __init__(self, bound: int = 16) -> None:
        if bound <= 0:
            raise ValueError("bound must be positive")
        self.bound = bound

    def add(self, a: int, b: int) -> int:
        return a + b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def neg(self, a: int) -> int:
        return -a

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def weight(self, a: int) -> int:
        return abs(a)

    def random_element(self, rng: random.Random) -> int:
        return rng.randint(-self.bound, self.bound)


class NaturalNumbers(Ring[int]):
    """The natural numbers: a commutative semiring without negation."""

    name = "N"
    capabilities = SEMIRING | Capability.COMMUTATIVE | Capability.TORSION_FREE

    def __init__(self, bound: int = 16) -> None:
        if bound <= 0:
            raise ValueError("bound must be positive")
        self.bound = bound

    def add(self, a: int, b: int) -> int:
        return a + b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def weight(self, a: int) -> int:
        return a

    def random_element(self, rng: random.Random) -> int:
        return rng.randint(0, self.bound)


class IntegersMod(FiniteRing[int]):
    """Z/nZ with canonical representatives 0..n-1.

    Never torsion-free: n•x = 0 for every x.
    """

    capabilities = COMMUTATIVE_RING

    def __init__(self, modulus: int) -> None:
        if modulus < 1:
            raise ValueError("modulus must be at least 1")
        self.modulus = modulus
        self.name = f"Z/{modulus}"

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def neg(self, a: int) -> int:
        return (-a) % self.modulus

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1 % self.modulus

    def eq(self, a: int, b: int) -> bool:
        return (a - b) % self.modulus == 0

    def canonical(self, a: int) -> int:
        return a % self.modulus

    def weight(self, a: int) -> int:
        return a % self.modulus

    def elements(self) -> Iterable[int]:
        return range(self.modulus)

    def random_element(self, rng: random.Random) -> int:
        return rng.randrange(self.modulus)
