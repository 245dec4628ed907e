"""Default identity catalogue, one entry per law."""

from __future__ import annotations

from typing import Any

from idemring.catalogue import laws
from idemring.catalogue.types import Equation, Identity, IdentityRegistry
from idemring.kernel.capability import COMMUTATIVE_RING, RING, SEMIRING, Capability
from idemring.kernel.idempotent import Idempotent, is_idempotent, orthogonal
from idemring.kernel.ring import Ring, anticommutes, commutes


def _stable(ring: Ring[Any], derived: Idempotent[Any]) -> Equation:
    """A derived idempotent must square to itself."""
    return Equation.single(ring.mul(derived.value, derived.value), derived.value)


def _commute(ring: Ring[Any], e: Idempotent[Any], f: Idempotent[Any]) -> bool:
    return commutes(ring, e.value, f.value)


def _anticommute_pair(ring: Ring[Any], e: Idempotent[Any], f: Idempotent[Any]) -> bool:
    return anticommutes(ring, e.value, f.value)


def _anticommute_with(ring: Ring[Any], e: Idempotent[Any], b: Any) -> bool:
    return anticommutes(ring, e.value, b)


def _decomposes_unity(ring: Ring[Any], a: Any, b: Any) -> bool:
    return ring.is_zero(ring.mul(a, b)) and ring.eq(ring.add(a, b), ring.one())


def _decomposition_sides(ring: Ring[Any], a: Any, b: Any) -> Equation:
    left, right = laws.orthogonal_decomposition(ring, a, b)
    return Equation.pairwise(
        (ring.mul(left.value, left.value), ring.mul(right.value, right.value)),
        (left.value, right.value),
    )


def _corner_sides(ring: Ring[Any], e: Idempotent[Any]) -> Equation:
    left, right = laws.corner_split(ring, e)
    return Equation.pairwise(
        (ring.mul(left.value, right.value), ring.add(left.value, right.value), ring.mul(right.value, right.value)),
        (ring.zero(), ring.one(), right.value),
    )


CATALOGUE: list[Identity] = [
    Identity(
        name="complement_involution",
        statement="complement(complement(e)) = e",
        requires=RING,
        operands=("idempotent",),
        sides=lambda ring, e: Equation.single(laws.double_complement(ring, e).value, e.value),
    ),
    Identity(
        name="complement_of_zero",
        statement="complement(0) = 1",
        requires=RING,
        operands=(),
        sides=lambda ring: Equation.single(laws.complement_of_zero(ring).value, ring.one()),
    ),
    Identity(
        name="complement_of_one",
        statement="complement(1) = 0",
        requires=RING,
        operands=(),
        sides=lambda ring: Equation.single(laws.complement_of_one(ring).value, ring.zero()),
    ),
    Identity(
        name="complement_is_idempotent",
        statement="(1-e)*(1-e) = 1-e",
        requires=RING,
        operands=("idempotent",),
        sides=lambda ring, e: _stable(ring, e.complement()),
    ),
    Identity(
        name="annihilation_with_complement",
        statement="e*(1-e) = 0 and (1-e)*e = 0",
        requires=RING,
        operands=("idempotent",),
        sides=lambda ring, e: Equation.pairwise(laws.annihilate_complement(ring, e), (ring.zero(), ring.zero())),
    ),
    Identity(
        name="left_annihilation_criterion",
        statement="a*a = a <=> a*(1-a) = 0",
        requires=RING,
        operands=("element",),
        sides=lambda ring, a: Equation.fact(laws.left_annihilation_criterion(ring, a), is_idempotent(ring, a)),
    ),
    Identity(
        name="right_annihilation_criterion",
        statement="a*a = a <=> (1-a)*a = 0",
        requires=RING,
        operands=("element",),
        sides=lambda ring, a: Equation.fact(laws.right_annihilation_criterion(ring, a), is_idempotent(ring, a)),
    ),
    Identity(
        name="orthogonal_decomposition",
        statement="a*b = 0 and a+b = 1 => a*a = a and b*b = b",
        requires=SEMIRING,
        operands=("element", "element"),
        sides=_decomposition_sides,
        applies=_decomposes_unity,
    ),
    Identity(
        name="corner_split",
        statement="e*(1-e) = 0, e + (1-e) = 1, (1-e) idempotent",
        requires=RING,
        operands=("idempotent",),
        sides=_corner_sides,
    ),
    Identity(
        name="commuting_combination",
        statement="e*f = f*e => (e+f-e*f) is idempotent",
        requires=RING,
        operands=("idempotent", "idempotent"),
        sides=lambda ring, e, f: _stable(ring, laws.commuting_combination(ring, e, f)),
        applies=_commute,
    ),
    Identity(
        name="commutative_combination",
        statement="(e+f-e*f) is idempotent in a commutative ring",
        requires=COMMUTATIVE_RING,
        operands=("idempotent", "idempotent"),
        sides=lambda ring, e, f: _stable(ring, laws.commutative_combination(ring, e, f)),
    ),
    Identity(
        name="commuting_product",
        statement="e*f = f*e => e*f is idempotent",
        requires=laws.ASSOCIATIVE_DISTRIBUTIVE,
        operands=("idempotent", "idempotent"),
        sides=lambda ring, e, f: _stable(ring, laws.commuting_product(ring, e, f)),
        applies=_commute,
    ),
    Identity(
        name="orthogonal_sum",
        statement="e*f = 0 = f*e => e+f is idempotent",
        requires=Capability.DISTRIBUTIVE,
        operands=("idempotent", "idempotent"),
        sides=lambda ring, e, f: _stable(ring, laws.orthogonal_sum(ring, e, f)),
        applies=orthogonal,
    ),
    Identity(
        name="anticommuting_sum",
        statement="e*f + f*e = 0 => e+f is idempotent",
        requires=Capability.DISTRIBUTIVE,
        operands=("idempotent", "idempotent"),
        sides=lambda ring, e, f: _stable(ring, laws.anticommuting_sum(ring, e, f)),
        applies=_anticommute_pair,
    ),
    Identity(
        name="anticommuting_product",
        statement="e*b + b*e = 0 => e*b = 0",
        requires=laws.TORSION_FREE_SEMIRING,
        operands=("idempotent", "element"),
        sides=lambda ring, e, b: Equation.single(laws.anticommuting_product(ring, e, b), ring.zero()),
        applies=_anticommute_with,
    ),
    Identity(
        name="anticommutation_commutes",
        statement="e*b + b*e = 0 => e*b = b*e",
        requires=laws.TORSION_FREE_SEMIRING,
        operands=("idempotent", "element"),
        sides=lambda ring, e, b: Equation.single(*laws.anticommutation_commutes(ring, e, b)),
        applies=_anticommute_with,
    ),
]


def default_catalogue() -> IdentityRegistry:
    """Create a registry holding every catalogue identity."""
    return IdentityRegistry(list(CATALOGUE))
