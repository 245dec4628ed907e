"""Identity catalogue - derived facts about idempotent elements.

Every callable checks, in order:
1. the ring declares the capabilities the fact needs (CapabilityMismatch)
2. the relational witness holds for the operands (PreconditionViolation)

and only then evaluates. Idempotents produced by a law are wrapped with
derived_idempotent, not re-checked; runtime.verifier is what confirms that a
concrete ring actually obeys the law.
"""

from __future__ import annotations

from typing import TypeVar

from idemring.kernel.capability import (
    COMMUTATIVE_RING,
    NON_UNITAL_SEMIRING,
    RING,
    SEMIRING,
    Capability,
)
from idemring.kernel.errors import PreconditionViolation
from idemring.kernel.idempotent import (
    Idempotent,
    complement,
    derived_idempotent,
    one_idempotent,
    orthogonal,
    zero_idempotent,
)
from idemring.kernel.ring import Ring, anticommutes, commutes

T = TypeVar("T")

TORSION_FREE_SEMIRING = NON_UNITAL_SEMIRING | Capability.TORSION_FREE
ASSOCIATIVE_DISTRIBUTIVE = Capability.DISTRIBUTIVE | Capability.ASSOCIATIVE


def _own(ring: Ring[T], identity: str, *idempotents: Idempotent[T]) -> None:
    for e in idempotents:
        if e.ring is not ring:
            raise PreconditionViolation(identity, (e,), "idempotent belongs to a different ring")


def _one_minus(ring: Ring[T], a: T) -> T:
    return ring.sub(ring.one(), a)


# Complement


def double_complement(ring: Ring[T], e: Idempotent[T]) -> Idempotent[T]:
    """Return complement(complement(e)), which equals e."""
    ring.require(RING, "double_complement")
    _own(ring, "double_complement", e)
    return complement(ring, complement(ring, e))


def complement_of_zero(ring: Ring[T]) -> Idempotent[T]:
    """The complement of the zero idempotent is one."""
    ring.require(RING, "complement_of_zero")
    return complement(ring, zero_idempotent(ring))


def complement_of_one(ring: Ring[T]) -> Idempotent[T]:
    """The complement of the one idempotent is zero."""
    ring.require(RING, "complement_of_one")
    return complement(ring, one_idempotent(ring))


def annihilate_complement(ring: Ring[T], e: Idempotent[T]) -> tuple[T, T]:
    """Return (e*(1-e), (1-e)*e); both are zero."""
    ring.require(RING, "annihilate_complement")
    _own(ring, "annihilate_complement", e)
    rest = complement(ring, e).value
    return ring.mul(e.value, rest), ring.mul(rest, e.value)


def left_annihilation_criterion(ring: Ring[T], a: T) -> bool:
    """a*(1-a) = 0, which holds exactly when a is idempotent."""
    ring.require(RING, "left_annihilation_criterion")
    return ring.is_zero(ring.mul(a, _one_minus(ring, a)))


def right_annihilation_criterion(ring: Ring[T], a: T) -> bool:
    """(1-a)*a = 0, which holds exactly when a is idempotent."""
    ring.require(RING, "right_annihilation_criterion")
    return ring.is_zero(ring.mul(_one_minus(ring, a), a))


# Decomposition


def orthogonal_decomposition(ring: Ring[T], a: T, b: T) -> tuple[Idempotent[T], Idempotent[T]]:
    """If a*b = 0 and a+b = 1 then a and b are both idempotent.

    a = a*1 = a*(a+b) = a*a, and b = 1*b = (a+b)*b = b*b.

    Raises:
        PreconditionViolation: If a*b != 0 or a+b != 1
    """
    ring.require(SEMIRING, "orthogonal_decomposition")
    if not ring.is_zero(ring.mul(a, b)):
        raise PreconditionViolation("orthogonal_decomposition", (a, b), "a*b is not zero")
    if not ring.eq(ring.add(a, b), ring.one()):
        raise PreconditionViolation("orthogonal_decomposition", (a, b), "a+b is not one")
    return derived_idempotent(ring, a), derived_idempotent(ring, b)


def corner_split(ring: Ring[T], e: Idempotent[T]) -> tuple[Idempotent[T], Idempotent[T]]:
    """Split unity as e + (1-e), an orthogonal decomposition."""
    ring.require(RING, "corner_split")
    _own(ring, "corner_split", e)
    return orthogonal_decomposition(ring, e.value, complement(ring, e).value)


# Recombination


def commuting_combination(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> Idempotent[T]:
    """For commuting idempotents e and f, e + f - e*f is idempotent.

    Raises:
        PreconditionViolation: If e*f != f*e
    """
    ring.require(RING, "commuting_combination")
    _own(ring, "commuting_combination", e, f)
    if not commutes(ring, e.value, f.value):
        raise PreconditionViolation("commuting_combination", (e.value, f.value), "operands do not commute")
    return derived_idempotent(ring, _join(ring, e.value, f.value))


def commutative_combination(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> Idempotent[T]:
    """In a commutative ring, e + f - e*f is idempotent for any idempotents e and f."""
    ring.require(COMMUTATIVE_RING, "commutative_combination")
    _own(ring, "commutative_combination", e, f)
    return derived_idempotent(ring, _join(ring, e.value, f.value))


def _join(ring: Ring[T], a: T, b: T) -> T:
    return ring.sub(ring.add(a, b), ring.mul(a, b))


def commuting_product(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> Idempotent[T]:
    """For commuting idempotents e and f, e*f is idempotent."""
    ring.require(ASSOCIATIVE_DISTRIBUTIVE, "commuting_product")
    _own(ring, "commuting_product", e, f)
    if not commutes(ring, e.value, f.value):
        raise PreconditionViolation("commuting_product", (e.value, f.value), "operands do not commute")
    return derived_idempotent(ring, ring.mul(e.value, f.value))


def orthogonal_sum(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> Idempotent[T]:
    """For orthogonal idempotents (e*f = 0 = f*e), e + f is idempotent."""
    ring.require(Capability.DISTRIBUTIVE, "orthogonal_sum")
    _own(ring, "orthogonal_sum", e, f)
    if not orthogonal(ring, e, f):
        raise PreconditionViolation("orthogonal_sum", (e.value, f.value), "operands are not orthogonal")
    return derived_idempotent(ring, ring.add(e.value, f.value))


# Anticommutation


def anticommuting_sum(ring: Ring[T], e: Idempotent[T], f: Idempotent[T]) -> Idempotent[T]:
    """For anticommuting idempotents, e + f is idempotent.

    (e+f)*(e+f) = e*e + e*f + f*e + f*f = e + f. Only distributivity is
    used, so neither a unit nor associativity is needed.

    Raises:
        PreconditionViolation: If e*f + f*e != 0
    """
    ring.require(Capability.DISTRIBUTIVE, "anticommuting_sum")
    _own(ring, "anticommuting_sum", e, f)
    if not anticommutes(ring, e.value, f.value):
        raise PreconditionViolation("anticommuting_sum", (e.value, f.value), "operands do not anticommute")
    return derived_idempotent(ring, ring.add(e.value, f.value))


def anticommuting_product(ring: Ring[T], e: Idempotent[T], b: T) -> T:
    """If e is idempotent and e*b + b*e = 0 then e*b = 0.

    Multiplying the relation by e on the left and on the right gives
    e*b + e*b*e = 0 and e*b*e + b*e = 0. Adding both and subtracting the
    relation leaves 2*(e*b*e) = 0, so e*b*e = 0 only when the ring has no
    2-torsion, and then e*b = 0. Characteristic-2 rings have anticommuting
    pairs with e*b != 0, hence TORSION_FREE is required.

    Returns:
        The product e*b, which is the zero element

    Raises:
        CapabilityMismatch: If the ring is not associative and torsion-free
        PreconditionViolation: If e*b + b*e != 0
    """
    ring.require(TORSION_FREE_SEMIRING, "anticommuting_product")
    _own(ring, "anticommuting_product", e)
    if not anticommutes(ring, e.value, b):
        raise PreconditionViolation("anticommuting_product", (e.value, b), "operands do not anticommute")
    return ring.mul(e.value, b)


def anticommutation_commutes(ring: Ring[T], e: Idempotent[T], b: T) -> tuple[T, T]:
    """If e is idempotent and anticommutes with b, then e and b commute.

    Goes through anticommuting_product: once e*b = 0 the relation leaves
    b*e = 0 as well, so both products agree.

    Returns:
        The pair (e*b, b*e)
    """
    ring.require(TORSION_FREE_SEMIRING, "anticommutation_commutes")
    product = anticommuting_product(ring, e, b)
    return product, ring.mul(b, e.value)
