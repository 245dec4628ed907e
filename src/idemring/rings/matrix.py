"""Square matrices over a base ring."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import product
from typing import Any

from idemring.kernel.capability import Capability
from idemring.kernel.ring import FiniteRing, Ring

Matrix = tuple[tuple[Any, ...], ...]

_INHERITED = Capability.NEGATION | Capability.TORSION_FREE

class MatrixRing(Ring[Matrix]):
    """
    n x n matrices over ``base``, stored as tuples of row tuples.

    Requires an associative unital base. Inherits NEGATION and TORSION_FREE
    from the base; multiplication commutes only for 1 x 1 matrices over a
    commutative base.
    """

    def __init__(self, base: Ring[Any], size: int = 2) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        base.require(Capability.DISTRIBUTIVE | Capability.ASSOCIATIVE | Capability.UNITAL, "MatrixRing")
        self.base = base
        self.size = size
        self.name = f"M{size}({base.name})"
        capabilities = Capability.DISTRIBUTIVE | Capability.ASSOCIATIVE | Capability.UNITAL
        capabilities |= base.capabilities & _INHERITED
        if size == 1 and base.has(Capability.COMMUTATIVE):
            capabilities |= Capability.COMMUTATIVE
        self.capabilities = capabilities

    def add(self, a: Matrix, b: Matrix) -> Matrix:
        return tuple(
            tuple(self.base.add(x, y) for x, y in zip(row_a, row_b, strict=True))
            for row_a, row_b in zip(a, b, strict=True)
        )

    def mul(self, a: Matrix, b: Matrix) -> Matrix:
        n = self.size
        rows = []
        for i in range(n):
            row = []
            for j in range(n):
                total = self.base.zero()
                for k in range(n):
                    total = self.base.add(total, self.base.mul(a[i][k], b[k][j]))
                row.append(total)
            rows.append(tuple(row))
        return tuple(rows)

    def neg(self, a: Matrix) -> Matrix:
        return tuple(tuple(self.base.neg(x) for x in row) for row in a)

    def zero(self) -> Matrix:
        return self.diag(*([self.base.zero()] * self.size))

    def one(self) -> Matrix:
        return self.diag(*([self.base.one()] * self.size))

    def eq(self, a: Matrix, b: Matrix) -> bool:
        return all(
            self.base.eq(x, y)
            for row_a, row_b in zip(a, b, strict=True)
            for x, y in zip(row_a, row_b, strict=True)
        )

    def canonical(self, a: Matrix) -> Matrix:
        return tuple(tuple(self.base.canonical(x) for x in row) for row in a)

    def weight(self, a: Matrix) -> int:
        return sum(self.base.weight(x) for row in a for x in row)

    def diag(self, *entries: Any) -> Matrix:
        """Diagonal matrix with the given entries."""
        if len(entries) != self.size:
            raise ValueError(f"diag expects {self.size} entries, got {len(entries)}")
        zero = self.base.zero()
        return tuple(
            tuple(entries[i] if i == j else zero for j in range(self.size))
            for i in range(self.size)
        )

    def from_rows(self, rows: Sequence[Sequence[Any]]) -> Matrix:
        matrix = tuple(tuple(row) for row in rows)
        if len(matrix) != self.size or any(len(row) != self.size for row in matrix):
            raise ValueError(f"expected a {self.size}x{self.size} matrix")
        return matrix

    def elements(self) -> Iterable[Matrix]:
        """Enumerate every matrix; only available over a finite base."""
        if not isinstance(self.base, FiniteRing):
            raise TypeError(f"{self.name} is infinite: base ring {self.base.name} cannot be enumerated")
        entries = list(self.base.elements())
        n = self.size
        for flat in product(entries, repeat=n * n):
            yield tuple(tuple(flat[i * n:(i + 1) * n]) for i in range(n))

    def random_element(self, rng: random.Random) -> Matrix:
        draw = self.base.random_element
        return tuple(tuple(draw(rng) for _ in range(self.size)) for _ in range(self.size))
