"""Sample-based audit of the axioms a ring declares.

The catalogue assumes the declared capabilities. This audit lets a caller
spot a ring whose tags overstate what its operations satisfy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from idemring.catalogue.types import Equation, Identity, IdentityRegistry
from idemring.kernel.capability import Capability
from idemring.kernel.ring import Ring
from idemring.runtime.checker import check_identity
from idemring.runtime.report import IdentityOutcome
from idemring.runtime.trace import Trace

_DIST = Capability.DISTRIBUTIVE


def _torsion(order: int) -> Identity:
    return Identity(
        name=f"axiom:torsion_free_{order}",
        statement=f"{order}•a = 0 => a = 0",
        requires=Capability.TORSION_FREE,
        operands=("element",),
        sides=lambda ring, a: Equation.fact(ring.is_zero(ring.nsmul(order, a)), ring.is_zero(a)),
    )


AXIOMS: list[Identity] = [
    Identity(
        name="axiom:add_associative",
        statement="(a+b)+c = a+(b+c)",
        requires=_DIST,
        operands=("element", "element", "element"),
        sides=lambda ring, a, b, c: Equation.single(ring.add(ring.add(a, b), c), ring.add(a, ring.add(b, c))),
    ),
    Identity(
        name="axiom:add_commutative",
        statement="a+b = b+a",
        requires=_DIST,
        operands=("element", "element"),
        sides=lambda ring, a, b: Equation.single(ring.add(a, b), ring.add(b, a)),
    ),
    Identity(
        name="axiom:zero_identity",
        statement="a+0 = a and a*0 = 0 = 0*a",
        requires=_DIST,
        operands=("element",),
        sides=lambda ring, a: Equation.pairwise(
            (ring.add(a, ring.zero()), ring.mul(a, ring.zero()), ring.mul(ring.zero(), a)),
            (a, ring.zero(), ring.zero()),
        ),
    ),
    Identity(
        name="axiom:distributive",
        statement="a*(b+c) = a*b+a*c and (a+b)*c = a*c+b*c",
        requires=_DIST,
        operands=("element", "element", "element"),
        sides=lambda ring, a, b, c: Equation.pairwise(
            (ring.mul(a, ring.add(b, c)), ring.mul(ring.add(a, b), c)),
            (ring.add(ring.mul(a, b), ring.mul(a, c)), ring.add(ring.mul(a, c), ring.mul(b, c))),
        ),
    ),
    Identity(
        name="axiom:one_identity",
        statement="a*1 = a = 1*a",
        requires=Capability.UNITAL,
        operands=("element",),
        sides=lambda ring, a: Equation.pairwise((ring.mul(a, ring.one()), ring.mul(ring.one(), a)), (a, a)),
    ),
    Identity(
        name="axiom:mul_associative",
        statement="(a*b)*c = a*(b*c)",
        requires=Capability.ASSOCIATIVE,
        operands=("element", "element", "element"),
        sides=lambda ring, a, b, c: Equation.single(ring.mul(ring.mul(a, b), c), ring.mul(a, ring.mul(b, c))),
    ),
    Identity(
        name="axiom:additive_inverse",
        statement="a + (-a) = 0",
        requires=Capability.NEGATION,
        operands=("element",),
        sides=lambda ring, a: Equation.single(ring.add(a, ring.neg(a)), ring.zero()),
    ),
    Identity(
        name="axiom:mul_commutative",
        statement="a*b = b*a",
        requires=Capability.COMMUTATIVE,
        operands=("element", "element"),
        sides=lambda ring, a, b: Equation.single(ring.mul(a, b), ring.mul(b, a)),
    ),
    _torsion(2),
    _torsion(3),
]


def axiom_registry() -> IdentityRegistry:
    return IdentityRegistry(list(AXIOMS))


def audit_axioms(
    ring: Ring[Any],
    samples: Sequence[Any],
    limit: int = 20_000,
    trace: Trace | None = None,
) -> list[IdentityOutcome]:
    """Check the declared axioms on ``samples``; undeclared axioms are skipped."""
    return [check_identity(ring, axiom, samples, (), limit, trace) for axiom in AXIOMS]
