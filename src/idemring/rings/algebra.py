"""Finite-rank algebras defined by structure constants."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import product
from typing import Any

from idemring.kernel.capability import Capability
from idemring.kernel.ring import FiniteRing, Ring

Vector = tuple[Any, ...]


class TableAlgebra(Ring[Vector]):
    """
    Free module of rank n over a commutative base with a bilinear product.

    ``table[i][j]`` holds the coordinates of e_i * e_j. Nothing about the
    table is checked: callers declare associativity, commutativity and a
    unit themselves, which makes it easy to build non-associative or
    non-unital examples.

    Example:
        e1*e1 = e1, e2*e2 = e2, e1*e2 = e1 - e2, e2*e1 = e2 - e1 over Z
        gives two idempotents that anticommute without their product
        vanishing, in a non-associative algebra.
    """

    def __init__(
        self,
        base: Ring[Any],
        table: Sequence[Sequence[Sequence[Any]]],
        unit: Sequence[Any] | None = None,
        associative: bool = False,
        commutative: bool = False,
        name: str | None = None,
    ) -> None:
        base.require(Capability.DISTRIBUTIVE | Capability.COMMUTATIVE, "TableAlgebra")
        rank = len(table)
        if rank == 0:
            raise ValueError("table must describe at least one basis element")
        for row in table:
            if len(row) != rank or any(len(entry) != rank for entry in row):
                raise ValueError(f"table must be {rank}x{rank} with rank-{rank} entries")
        if unit is not None and len(unit) != rank:
            raise ValueError(f"unit must have {rank} coordinates")
        self.base = base
        self.rank = rank
        self.table = tuple(tuple(tuple(entry) for entry in row) for row in table)
        self.unit = tuple(unit) if unit is not None else None
        self.name = name or f"Alg{rank}({base.name})"

        capabilities = Capability.DISTRIBUTIVE
        capabilities |= base.capabilities & (Capability.NEGATION | Capability.TORSION_FREE)
        if self.unit is not None:
            capabilities |= Capability.UNITAL
        if associative:
            capabilities |= Capability.ASSOCIATIVE
        if commutative:
            capabilities |= Capability.COMMUTATIVE
        self.capabilities = capabilities

    def add(self, a: Vector, b: Vector) -> Vector:
        return tuple(self.base.add(x, y) for x, y in zip(a, b, strict=True))

    def mul(self, a: Vector, b: Vector) -> Vector:
        result = list(self.zero())
        for i, j in product(range(self.rank), repeat=2):
            scale = self.base.mul(a[i], b[j])
            if self.base.is_zero(scale):
                continue
            for k, constant in enumerate(self.table[i][j]):
                result[k] = self.base.add(result[k], self.base.mul(scale, constant))
        return tuple(result)

    def neg(self, a: Vector) -> Vector:
        return tuple(self.base.neg(x) for x in a)

    def zero(self) -> Vector:
        return tuple(self.base.zero() for _ in range(self.rank))

    def one(self) -> Vector:
        if self.unit is None:
            return super().one()
        return self.unit

    def eq(self, a: Vector, b: Vector) -> bool:
        return all(self.base.eq(x, y) for x, y in zip(a, b, strict=True))

    def canonical(self, a: Vector) -> Vector:
        return tuple(self.base.canonical(x) for x in a)

    def weight(self, a: Vector) -> int:
        return sum(self.base.weight(x) for x in a)

    def basis(self, index: int) -> Vector:
        """The basis vector e_index (0-based)."""
        if not 0 <= index < self.rank:
            raise IndexError(f"basis index {index} out of range for rank {self.rank}")
        return tuple(self.base.one() if i == index else self.base.zero() for i in range(self.rank))

    def vector(self, *coordinates: Any) -> Vector:
        if len(coordinates) != self.rank:
            raise ValueError(f"expected {self.rank} coordinates, got {len(coordinates)}")
        return tuple(coordinates)

    def elements(self) -> Iterable[Vector]:
        """Enumerate every vector; only available over a finite base."""
        if not isinstance(self.base, FiniteRing):
            raise TypeError(f"{self.name} is infinite: base ring {self.base.name} cannot be enumerated")
        return product(list(self.base.elements()), repeat=self.rank)

    def random_element(self, rng: random.Random) -> Vector:
        draw = self.base.random_element
        return tuple(draw(rng) for _ in range(self.rank))
