"""Tests for capability flags and the ring contract."""

import pytest

from idemring import (
    COMMUTATIVE_RING,
    RING,
    SEMIRING,
    Capability,
    CapabilityMismatch,
    anticommutes,
    commutes,
)
from idemring.rings import BooleanRing, Integers, IntegersMod, NaturalNumbers


def test_tiers_are_nested() -> None:
    assert SEMIRING in RING
    assert RING in COMMUTATIVE_RING
    assert Capability.NEGATION not in SEMIRING


def test_describe_lists_flags_in_order() -> None:
    assert RING.describe() == "DISTRIBUTIVE|UNITAL|ASSOCIATIVE|NEGATION"
    assert Capability.NONE.describe() == "NONE"


def test_has_and_require() -> None:
    ring = IntegersMod(6)
    assert ring.has(COMMUTATIVE_RING)
    assert not ring.has(Capability.TORSION_FREE)
    ring.require(RING, "anything")

    with pytest.raises(CapabilityMismatch, match="TORSION_FREE") as exc:
        ring.require(RING | Capability.TORSION_FREE, "needs_torsion")
    assert exc.value.identity == "needs_torsion"
    assert exc.value.missing == Capability.TORSION_FREE


def test_semiring_has_no_negation() -> None:
    ring = NaturalNumbers()
    with pytest.raises(CapabilityMismatch, match="NEGATION"):
        ring.neg(1)
    with pytest.raises(CapabilityMismatch):
        ring.sub(3, 1)


def test_nsmul_repeats_addition() -> None:
    assert Integers().nsmul(3, 5) == 15
    assert IntegersMod(4).nsmul(4, 3) == 0
    assert BooleanRing(2).nsmul(2, frozenset({0})) == frozenset()
    with pytest.raises(ValueError):
        Integers().nsmul(-1, 5)


def test_commutation_witnesses() -> None:
    ring = BooleanRing(2)
    full = ring.one()
    assert commutes(ring, full, frozenset({0}))
    # x + x = 0 in characteristic 2, so every pair anticommutes
    assert anticommutes(ring, full, full)
    assert not anticommutes(Integers(), 1, 1)
