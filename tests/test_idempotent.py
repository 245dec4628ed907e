"""Tests for the idempotent wrapper and the complement operator."""

from dataclasses import FrozenInstanceError

import pytest

from idemring import (
    CapabilityMismatch,
    Idempotent,
    PreconditionViolation,
    complement,
    is_idempotent,
    make_idempotent,
    one_idempotent,
    orthogonal,
    zero_idempotent,
)
from idemring.rings import BooleanRing, Integers, IntegersMod, MatrixRing, NaturalNumbers

from fakes import anticommuting_plane


def test_is_idempotent_mod_6() -> None:
    ring = IntegersMod(6)
    assert [a for a in ring.elements() if is_idempotent(ring, a)] == [0, 1, 3, 4]


def test_make_idempotent_rejects_non_idempotent() -> None:
    ring = IntegersMod(6)
    with pytest.raises(PreconditionViolation, match="make_idempotent") as exc:
        make_idempotent(ring, 2)
    assert exc.value.identity == "make_idempotent"
    assert exc.value.operands == (2,)
    assert "2" in str(exc.value)


def test_round_trip_returns_original_element() -> None:
    ring = BooleanRing(3)
    for a in ring.elements():
        assert make_idempotent(ring, a).value is a


def test_idempotent_is_immutable() -> None:
    e = make_idempotent(IntegersMod(6), 3)
    with pytest.raises(FrozenInstanceError):
        e.value = 4  # type: ignore[misc]


class TestComplement:
    def test_complement_mod_6(self) -> None:
        ring = IntegersMod(6)
        assert complement(ring, make_idempotent(ring, 3)) == make_idempotent(ring, 4)

    def test_involution_on_every_idempotent(self) -> None:
        for ring in (IntegersMod(6), IntegersMod(12), BooleanRing(3)):
            for a in ring.elements():
                if not is_idempotent(ring, a):
                    continue
                e = make_idempotent(ring, a)
                assert complement(ring, complement(ring, e)) == e
                assert e.complement().complement() == e

    def test_complement_is_idempotent(self) -> None:
        ring = MatrixRing(Integers(), 2)
        e = make_idempotent(ring, ring.from_rows([[1, 1], [0, 0]]))
        assert is_idempotent(ring, e.complement().value)

    def test_zero_and_one_swap(self) -> None:
        for ring in (IntegersMod(6), Integers(), BooleanRing(2), MatrixRing(IntegersMod(3), 2)):
            assert complement(ring, zero_idempotent(ring)) == one_idempotent(ring)
            assert complement(ring, one_idempotent(ring)) == zero_idempotent(ring)

    def test_complement_needs_negation(self) -> None:
        ring = NaturalNumbers()
        with pytest.raises(CapabilityMismatch, match="complement"):
            complement(ring, make_idempotent(ring, 1))


def test_one_idempotent_needs_unit() -> None:
    with pytest.raises(CapabilityMismatch, match="UNITAL"):
        one_idempotent(anticommuting_plane())


def test_equality_is_per_ring() -> None:
    first, second = IntegersMod(6), IntegersMod(6)
    assert make_idempotent(first, 3) != make_idempotent(second, 3)
    assert make_idempotent(first, 3) == make_idempotent(first, 9 % 6)
    assert make_idempotent(first, 3) != 3


def test_equality_uses_ring_equality() -> None:
    ring = IntegersMod(6)
    # 9 and 3 are the same residue
    assert Idempotent(ring, 9) == make_idempotent(ring, 3)


def test_equal_idempotents_hash_equal() -> None:
    ring = IntegersMod(6)
    three, nine = make_idempotent(ring, 3), make_idempotent(ring, 9)
    assert three == nine
    assert hash(three) == hash(nine)
    assert len({three, nine}) == 1

    m2 = MatrixRing(ring, 2)
    assert len({make_idempotent(m2, m2.diag(1, 0)), make_idempotent(m2, m2.diag(7, 6))}) == 1


def test_complement_rejects_foreign_idempotent() -> None:
    first, second = IntegersMod(6), IntegersMod(6)
    with pytest.raises(PreconditionViolation, match="different ring") as exc:
        complement(second, make_idempotent(first, 3))
    assert exc.value.identity == "complement"


def test_orthogonal() -> None:
    ring = IntegersMod(6)
    assert orthogonal(ring, make_idempotent(ring, 3), make_idempotent(ring, 4))
    assert not orthogonal(ring, make_idempotent(ring, 3), make_idempotent(ring, 1))
