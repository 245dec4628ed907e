"""Ring capability contract - the only external collaborator of the library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from idemring.kernel.capability import Capability
from idemring.kernel.errors import CapabilityMismatch

T = TypeVar("T")


class Ring(ABC, Generic[T]):
    """
    Bundle of pure operations over a fixed carrier type.

    Subclasses implement add, mul and zero, and whichever of neg and one
    their declared capabilities promise. Every operation must be
    referentially transparent and must never mutate its arguments.
    The axioms implied by ``capabilities`` are assumed, not checked.
    """

    name: str = "ring"
    capabilities: Capability = Capability.DISTRIBUTIVE

    @abstractmethod
    def add(self, a: T, b: T) -> T:
        """Return a + b."""

    @abstractmethod
    def mul(self, a: T, b: T) -> T:
        """Return a * b."""

    @abstractmethod
    def zero(self) -> T:
        """Return the additive identity."""

    def one(self) -> T:
        """Return the multiplicative identity (UNITAL rings only)."""
        raise CapabilityMismatch("one", Capability.UNITAL, self.capabilities)

    def neg(self, a: T) -> T:
        """Return the additive inverse of a (NEGATION rings only)."""
        raise CapabilityMismatch("neg", Capability.NEGATION, self.capabilities)

    def sub(self, a: T, b: T) -> T:
        return self.add(a, self.neg(b))

    def eq(self, a: T, b: T) -> bool:
        return a == b

    def canonical(self, a: T) -> T:
        """Hashable representative of a; rings whose eq is coarser than == override it."""
        return a

    def is_zero(self, a: T) -> bool:
        return self.eq(a, self.zero())

    def nsmul(self, n: int, a: T) -> T:
        """Return a added to itself n times (n >= 0)."""
        if n < 0:
            raise ValueError("nsmul expects a non-negative count")
        total = self.zero()
        for _ in range(n):
            total = self.add(total, a)
        return total

    def weight(self, a: T) -> int:
        """Size measure used to rank counterexamples; smaller is simpler."""
        return len(repr(a))

    def has(self, needed: Capability) -> bool:
        return (needed & ~self.capabilities) == Capability.NONE

    def require(self, needed: Capability, identity: str) -> None:
        """Raise CapabilityMismatch unless every flag in ``needed`` is declared."""
        if not self.has(needed):
            raise CapabilityMismatch(identity, needed, self.capabilities)

    def describe(self) -> str:
        return f"{self.name} [{self.capabilities.describe()}]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class FiniteRing(Ring[T]):
    """A ring whose carrier can be enumerated exhaustively."""

    @abstractmethod
    def elements(self) -> Iterable[T]:
        """Yield every element of the carrier exactly once."""


def commutes(ring: Ring[T], a: T, b: T) -> bool:
    """Witness that a*b = b*a."""
    return ring.eq(ring.mul(a, b), ring.mul(b, a))


def anticommutes(ring: Ring[T], a: T, b: T) -> bool:
    """Witness that a*b + b*a = 0."""
    return ring.is_zero(ring.add(ring.mul(a, b), ring.mul(b, a)))
