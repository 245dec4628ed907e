from __future__ import annotations

from idemring import (
    CapabilityMismatch,
    PreconditionViolation,
    anticommuting_product,
    commuting_combination,
    complement,
    make_idempotent,
    orthogonal_decomposition,
)
from idemring.rings import BooleanRing, Integers, IntegersMod, MatrixRing


def modular_demo() -> None:
    z6 = IntegersMod(6)
    three = make_idempotent(z6, 3)
    print(f"complement of {three} in {z6.name}: {complement(z6, three)}")

    left, right = orthogonal_decomposition(z6, 3, 4)
    print(f"3 + 4 = 1 and 3 * 4 = 0 in {z6.name}, so {left} and {right} are idempotent")

    try:
        make_idempotent(z6, 2)
    except PreconditionViolation as exc:
        print(f"rejected: {exc}")


def matrix_demo() -> None:
    m2 = MatrixRing(Integers(), 2)
    e = make_idempotent(m2, m2.diag(1, 0))
    f = make_idempotent(m2, m2.diag(0, 1))
    print(f"e + f - e*f = {commuting_combination(m2, e, f).value}")


def torsion_demo() -> None:
    ring = BooleanRing(2)
    full = make_idempotent(ring, ring.one())
    try:
        anticommuting_product(ring, full, ring.one())
    except CapabilityMismatch as exc:
        print(f"refused in characteristic 2: {exc}")


if __name__ == "__main__":
    modular_demo()
    matrix_demo()
    torsion_demo()
