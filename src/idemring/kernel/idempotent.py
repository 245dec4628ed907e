"""Idempotent elements and the complement operator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from idemring.kernel.capability import RING, Capability
from idemring.kernel.errors import PreconditionViolation
from idemring.kernel.ring import Ring

T = TypeVar("T")


def is_idempotent(ring: Ring[T], a: T) -> bool:
    """Return True when a*a = a under the ring's equality."""
    return ring.eq(ring.mul(a, a), a)


@dataclass(frozen=True, eq=False)
class Idempotent(Generic[T]):
    """
    A ring element known to satisfy a*a = a.

    Build one with make_idempotent. Values are immutable; complement and the
    catalogue operations always return new instances. Equality is value
    equality in the underlying ring.

    Attributes:
        ring: The ring the value lives in
        value: The wrapped element, returned unchanged
    """

    ring: Ring[T]
    value: T

    def complement(self) -> Idempotent[T]:
        return complement(self.ring, self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Idempotent):
            return NotImplemented
        return self.ring is other.ring and self.ring.eq(self.value, other.value)

    def __hash__(self) -> int:
        return hash((id(self.ring), self.ring.canonical(self.value)))

    def __repr__(self) -> str:
        return f"Idempotent({self.value!r})"


def make_idempotent(ring: Ring[T], a: T) -> Idempotent[T]:
    """Wrap ``a`` after checking that it is idempotent.

    Raises:
        PreconditionViolation: If a*a != a
    """
    if not is_idempotent(ring, a):
        raise PreconditionViolation("make_idempotent", (a,), "element is not idempotent")
    return Idempotent(ring, a)


def derived_idempotent(ring: Ring[T], a: T) -> Idempotent[T]:
    """Wrap a value whose idempotence follows from an algebraic law.

    Used by the catalogue, which derives rather than re-checks. Whether the
    law really holds for a given ring is what the verifier tests.
    """
    return Idempotent(ring, a)


def complement(ring: Ring[T], e: Idempotent[T]) -> Idempotent[T]:
    """Return 1 - e, which is idempotent whenever e is.

    Raises:
        CapabilityMismatch: If the ring is not a RING
        PreconditionViolation: If e was wrapped by another ring instance
    """
    ring.require(RING, "complement")
    if e.ring is not ring:
        raise PreconditionViolation("complement", (e,), "idempotent belongs to a different ring")
    return Idempotent(ring, ring.sub(ring.one(), e.value))


def zero_idempotent(ring: Ring[T]) -> Idempotent[T]:
    return Idempotent(ring, ring.zero())


def one_idempotent(ring: Ring[T]) -> Idempotent[T]:
    ring.require(Capability.UNITAL, "one_idempotent")
    return Idempotent(ring, ring.one())


def orthogonal(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> bool:
    """Return True when e*f = 0 and f*e = 0."""
    return ring.is_zero(ring.mul(e.value, f.value)) and ring.is_zero(ring.mul(f.value, e.value))
