"""Catalogue types: identities, equations and the identity registry."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Literal

from idemring.kernel.capability import Capability
from idemring.kernel.ring import Ring

OperandKind = Literal["idempotent", "element"]


@dataclass(frozen=True)
class Equation:
    """Both sides of an instantiated identity.

    Attributes:
        lhs: Values computed directly from the ring operations
        rhs: Values the identity asserts they equal
        in_ring: Compare with the ring's equality (False for boolean facts)
    """

    lhs: tuple[Any, ...]
    rhs: tuple[Any, ...]
    in_ring: bool = True

    @staticmethod
    def single(lhs: Any, rhs: Any) -> Equation:
        return Equation(lhs=(lhs,), rhs=(rhs,))

    @staticmethod
    def pairwise(lhs: tuple[Any, ...], rhs: tuple[Any, ...]) -> Equation:
        if len(lhs) != len(rhs):
            raise ValueError("Equation sides must have the same length")
        return Equation(lhs=tuple(lhs), rhs=tuple(rhs))

    @staticmethod
    def fact(lhs: bool, rhs: bool) -> Equation:
        return Equation(lhs=(lhs,), rhs=(rhs,), in_ring=False)

    def holds(self, ring: Ring[Any]) -> bool:
        if not self.in_ring:
            return self.lhs == self.rhs
        return all(ring.eq(left, right) for left, right in zip(self.lhs, self.rhs, strict=True))


def _always(ring: Ring[Any], *operands: Any) -> bool:
    return True


@dataclass(frozen=True)
class Identity:
    """A named, directly evaluable algebraic fact.

    Attributes:
        name: Identifier used in reports and errors
        statement: Human-readable statement of the fact
        requires: Capabilities the ring must declare
        operands: Kind of each operand slot; idempotent slots receive
            Idempotent wrappers, element slots receive raw elements
        sides: Evaluates both sides for concrete operands
        applies: Relational precondition over the operands
    """

    name: str
    statement: str
    requires: Capability
    operands: tuple[OperandKind, ...]
    sides: Callable[..., Equation]
    applies: Callable[..., bool] = field(default=_always)

    @property
    def arity(self) -> int:
        return len(self.operands)

    def evaluate(self, ring: Ring[Any], *operands: Any) -> Equation:
        if len(operands) != self.arity:
            raise TypeError(f"{self.name} expects {self.arity} operands, got {len(operands)}")
        return self.sides(ring, *operands)

    def check(self, ring: Ring[Any], *operands: Any) -> bool:
        """Evaluate both sides and compare them."""
        return self.evaluate(ring, *operands).holds(ring)


class IdentityRegistry:
    """Registry for looking up identities by name, in registration order."""

    def __init__(self, identities: list[Identity] | None = None) -> None:
        self._identities: dict[str, Identity] = {}
        for identity in identities or []:
            self.register(identity)

    def register(self, identity: Identity) -> None:
        if identity.name in self._identities:
            raise ValueError(f"Identity '{identity.name}' is already registered")
        self._identities[identity.name] = identity

    def get(self, name: str) -> Identity:
        """Get an identity by name."""
        if name not in self._identities:
            raise KeyError(f"Identity '{name}' not found in catalogue")
        return self._identities[name]

    def names(self) -> list[str]:
        return list(self._identities)

    def applicable(self, ring: Ring[Any]) -> list[Identity]:
        """Identities whose required capabilities the ring declares."""
        return [identity for identity in self if ring.has(identity.requires)]

    def select(self, names: list[str]) -> IdentityRegistry:
        return IdentityRegistry([self.get(name) for name in names])

    def __getitem__(self, name: str) -> Identity:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._identities

    def __iter__(self) -> Iterator[Identity]:
        return iter(self._identities.values())

    def __len__(self) -> int:
        return len(self._identities)
