"""Identity catalogue - named, evaluable facts about idempotents."""

from .laws import (
    annihilate_complement,
    anticommutation_commutes,
    anticommuting_product,
    anticommuting_sum,
    commutative_combination,
    commuting_combination,
    commuting_product,
    complement_of_one,
    complement_of_zero,
    corner_split,
    double_complement,
    left_annihilation_criterion,
    orthogonal_decomposition,
    orthogonal_sum,
    right_annihilation_criterion,
)
from .registry import default_catalogue
from .types import Equation, Identity, IdentityRegistry, OperandKind

__all__ = [
    "Equation",
    "Identity",
    "IdentityRegistry",
    "OperandKind",
    "default_catalogue",
    # Laws
    "double_complement",
    "complement_of_zero",
    "complement_of_one",
    "annihilate_complement",
    "left_annihilation_criterion",
    "right_annihilation_criterion",
    "orthogonal_decomposition",
    "corner_split",
    "commuting_combination",
    "commutative_combination",
    "commuting_product",
    "orthogonal_sum",
    "anticommuting_sum",
    "anticommuting_product",
    "anticommutation_commutes",
]
