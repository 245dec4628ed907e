"""Property-based tests: the universally quantified laws over generated rings."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from idemring import (
    Exhaustive,
    Idempotent,
    PreconditionViolation,
    RandomSample,
    VerifierConfig,
    annihilate_complement,
    anticommuting_sum,
    commutative_combination,
    commuting_combination,
    commuting_product,
    complement,
    corner_split,
    double_complement,
    is_idempotent,
    left_annihilation_criterion,
    make_idempotent,
    orthogonal_sum,
    right_annihilation_criterion,
    verify,
)

from fakes import WrongUnitMod
from generators import (
    anticommuting_idempotents,
    commuting_matrix_idempotents,
    idempotent_residues,
    idempotents,
    matrices,
    matrix_ring,
    moduli,
    plane,
    plane_vectors,
    residue_idempotents,
    residue_ring,
    residues,
    small_moduli,
)


class TestWrapperProperties:
    @given(residues())
    @settings(max_examples=100)
    def test_make_idempotent_round_trip(self, drawn) -> None:
        ring, a = drawn
        if is_idempotent(ring, a):
            assert make_idempotent(ring, a).value is a
        else:
            with pytest.raises(PreconditionViolation):
                make_idempotent(ring, a)

    @given(residue_idempotents(), st.integers(min_value=-3, max_value=3))
    @settings(max_examples=50)
    def test_equal_residues_hash_equal(self, drawn, shift) -> None:
        ring, e = drawn
        other = Idempotent(ring, e.value + shift * ring.modulus)
        assert other == e
        assert hash(other) == hash(e)

    @given(idempotents())
    @settings(max_examples=50)
    def test_complement_is_an_idempotent_involution(self, drawn) -> None:
        ring, e = drawn
        rest = complement(ring, e)
        assert is_idempotent(ring, rest.value)
        assert complement(ring, rest) == e
        assert double_complement(ring, e) == e

    @given(plane_vectors())
    @settings(max_examples=50)
    def test_plane_idempotents_are_coordinatewise(self, drawn) -> None:
        algebra, (a, b) = drawn
        corners = idempotent_residues(algebra.base.modulus)
        assert is_idempotent(algebra, (a, b)) == (a in corners and b in corners)


class TestCatalogueProperties:
    @given(st.one_of(residues(), matrices()))
    @settings(max_examples=100)
    def test_annihilation_criterion_matches_idempotence(self, drawn) -> None:
        ring, a = drawn
        expected = is_idempotent(ring, a)
        assert left_annihilation_criterion(ring, a) == expected
        assert right_annihilation_criterion(ring, a) == expected

    @given(idempotents())
    @settings(max_examples=50)
    def test_idempotent_annihilates_its_complement(self, drawn) -> None:
        ring, e = drawn
        left, right = annihilate_complement(ring, e)
        assert ring.is_zero(left)
        assert ring.is_zero(right)

    @given(idempotents())
    @settings(max_examples=50)
    def test_corner_split_decomposes_unity(self, drawn) -> None:
        ring, e = drawn
        first, second = corner_split(ring, e)
        assert first == e
        assert ring.eq(ring.add(first.value, second.value), ring.one())
        assert is_idempotent(ring, second.value)

    @given(commuting_matrix_idempotents())
    @settings(max_examples=100)
    def test_commuting_idempotents_combine(self, drawn) -> None:
        ring, e, f = drawn
        assert is_idempotent(ring, commuting_combination(ring, e, f).value)
        assert is_idempotent(ring, commuting_product(ring, e, f).value)

    @given(residue_idempotents(count=2))
    @settings(max_examples=100)
    def test_commutative_combination(self, drawn) -> None:
        ring, e, f = drawn
        joined = commutative_combination(ring, e, f)
        assert is_idempotent(ring, joined.value)
        assert joined == commuting_combination(ring, e, f)

    @given(anticommuting_idempotents())
    @settings(max_examples=100)
    def test_anticommuting_idempotents_sum(self, drawn) -> None:
        algebra, e, f = drawn
        total = anticommuting_sum(algebra, e, f)
        assert is_idempotent(algebra, total.value)
        assert total == anticommuting_sum(algebra, f, e)

    @given(residue_idempotents(count=2))
    @settings(max_examples=100)
    def test_orthogonal_sum(self, drawn) -> None:
        ring, e, f = drawn
        if ring.is_zero(ring.mul(e.value, f.value)):
            assert is_idempotent(ring, orthogonal_sum(ring, e, f).value)
        else:
            with pytest.raises(PreconditionViolation, match="not orthogonal"):
                orthogonal_sum(ring, e, f)


class TestVerifierProperties:
    @given(moduli)
    @settings(max_examples=15, deadline=None)
    def test_residue_rings_pass(self, n) -> None:
        report = verify(residue_ring(n), Exhaustive(), config=VerifierConfig(audit_axioms=True))
        assert report.passed, report.summary()
        assert report.outcome("orthogonal_decomposition").status == "passed"

    @given(small_moduli, st.integers(min_value=0, max_value=2**16))
    @settings(max_examples=10, deadline=None)
    def test_matrix_rings_pass(self, n, seed) -> None:
        report = verify(matrix_ring(n), RandomSample(count=12, seed=seed), config=VerifierConfig(audit_axioms=True))
        assert report.passed, report.summary()
        assert report.outcome("commutative_combination").status == "skipped"

    @given(small_moduli)
    @settings(max_examples=5, deadline=None)
    def test_anticommuting_plane_passes(self, n) -> None:
        report = verify(plane(n), Exhaustive())
        assert report.passed, report.summary()
        assert report.outcome("anticommuting_sum").status == "passed"

    @given(st.integers(min_value=3, max_value=36))
    @settings(max_examples=10, deadline=None)
    def test_wrong_unit_is_caught(self, n) -> None:
        report = verify(WrongUnitMod(n), Exhaustive())
        assert not report.passed
        failure = report.outcome("complement_is_idempotent")
        assert failure.status == "failed"
        assert failure.counterexample is not None
