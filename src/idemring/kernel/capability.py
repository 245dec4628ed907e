"""Capability flags describing which ring axioms a carrier satisfies."""

from __future__ import annotations

from enum import Flag, auto


class Capability(Flag):
    """
    Axiom tags declared by a ring supplier.

    Flags:
    - DISTRIBUTIVE: addition is a commutative monoid with zero, multiplication
      distributes over it and zero annihilates
    - UNITAL: one is a two-sided multiplicative identity
    - ASSOCIATIVE: multiplication is associative
    - NEGATION: every element has an additive inverse (subtraction available)
    - COMMUTATIVE: multiplication commutes
    - TORSION_FREE: n•x = 0 implies x = 0 for every n >= 1

    The library trusts these tags. Use runtime.axioms.audit_axioms to sample-check them.
    """

    NONE = 0
    DISTRIBUTIVE = auto()
    UNITAL = auto()
    ASSOCIATIVE = auto()
    NEGATION = auto()
    COMMUTATIVE = auto()
    TORSION_FREE = auto()

    def names(self) -> tuple[str, ...]:
        """Individual flag names contained in this set, in declaration order."""
        return tuple(
            member.name
            for member in Capability
            if member.name is not None and member is not Capability.NONE and member in self
        )

    def describe(self) -> str:
        names = self.names()
        return "|".join(names) if names else "NONE"


NON_ASSOCIATIVE_RING = Capability.DISTRIBUTIVE | Capability.UNITAL | Capability.NEGATION
NON_UNITAL_SEMIRING = Capability.DISTRIBUTIVE | Capability.ASSOCIATIVE
SEMIRING = NON_UNITAL_SEMIRING | Capability.UNITAL
RING = SEMIRING | Capability.NEGATION
COMMUTATIVE_RING = RING | Capability.COMMUTATIVE
