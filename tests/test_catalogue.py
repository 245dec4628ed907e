"""Tests for catalogue records and the identity registry."""

import pytest

from idemring import Equation, Identity, IdentityRegistry, default_catalogue, make_idempotent
from idemring.kernel import RING
from idemring.rings import BooleanRing, IntegersMod

CORE_IDENTITIES = [
    "complement_involution",
    "complement_of_zero",
    "complement_of_one",
    "annihilation_with_complement",
    "left_annihilation_criterion",
    "right_annihilation_criterion",
    "orthogonal_decomposition",
    "commuting_combination",
    "commutative_combination",
    "anticommuting_sum",
    "anticommuting_product",
    "anticommutation_commutes",
]


def test_default_catalogue_has_every_row() -> None:
    catalogue = default_catalogue()
    for name in CORE_IDENTITIES:
        assert name in catalogue
    assert len(catalogue) == len(set(catalogue.names()))


def test_registry_lookup() -> None:
    catalogue = default_catalogue()
    assert catalogue["anticommuting_sum"].arity == 2
    with pytest.raises(KeyError, match="not found"):
        catalogue.get("no_such_identity")


def test_duplicate_registration_is_rejected() -> None:
    catalogue = default_catalogue()
    with pytest.raises(ValueError, match="already registered"):
        catalogue.register(catalogue["complement_of_zero"])


def test_applicable_respects_capabilities() -> None:
    names = [identity.name for identity in default_catalogue().applicable(BooleanRing(2))]
    assert "anticommuting_sum" in names
    assert "anticommuting_product" not in names
    assert "anticommutation_commutes" not in names


def test_select_keeps_order() -> None:
    subset = default_catalogue().select(["complement_of_one", "complement_of_zero"])
    assert subset.names() == ["complement_of_one", "complement_of_zero"]


def test_identity_check_evaluates_both_sides() -> None:
    ring = IntegersMod(6)
    involution = default_catalogue()["complement_involution"]
    e = make_idempotent(ring, 3)
    equation = involution.evaluate(ring, e)
    assert equation.lhs == (3,)
    assert equation.rhs == (3,)
    assert involution.check(ring, e)


def test_identity_rejects_wrong_arity() -> None:
    with pytest.raises(TypeError, match="expects 1 operands"):
        default_catalogue()["complement_involution"].evaluate(IntegersMod(6))


def test_custom_identity() -> None:
    doubling = Identity(
        name="double_is_zero",
        statement="a + a = 0",
        requires=RING,
        operands=("element",),
        sides=lambda ring, a: Equation.single(ring.add(a, a), ring.zero()),
    )
    registry = IdentityRegistry([doubling])
    assert registry["double_is_zero"].check(BooleanRing(2), frozenset({1}))
    assert not registry["double_is_zero"].check(IntegersMod(6), 1)


def test_equation_helpers() -> None:
    ring = IntegersMod(6)
    assert Equation.single(9, 3).holds(ring)
    assert Equation.pairwise((0, 6), (0, 0)).holds(ring)
    assert not Equation.fact(True, False).holds(ring)
    with pytest.raises(ValueError):
        Equation.pairwise((0,), (0, 0))
