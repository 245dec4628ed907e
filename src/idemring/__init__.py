from .catalogue import (
    Equation,
    Identity,
    IdentityRegistry,
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
    default_catalogue,
    double_complement,
    left_annihilation_criterion,
    orthogonal_decomposition,
    orthogonal_sum,
    right_annihilation_criterion,
)
from .kernel import (
    COMMUTATIVE_RING,
    NON_ASSOCIATIVE_RING,
    NON_UNITAL_SEMIRING,
    RING,
    SEMIRING,
    Capability,
    CapabilityMismatch,
    FiniteRing,
    Idempotent,
    IdemringError,
    PreconditionViolation,
    Ring,
    VerificationFailure,
    anticommutes,
    commutes,
    complement,
    is_idempotent,
    make_idempotent,
    one_idempotent,
    orthogonal,
    zero_idempotent,
)
from .runtime import (
    Enumerate,
    Exhaustive,
    IdentityOutcome,
    PropertyVerifier,
    RandomSample,
    VerificationReport,
    VerifierConfig,
    Violation,
    audit_axioms,
    verify,
)

__all__ = [
    # Ring contract
    "Ring",
    "FiniteRing",
    "Capability",
    "NON_ASSOCIATIVE_RING",
    "NON_UNITAL_SEMIRING",
    "SEMIRING",
    "RING",
    "COMMUTATIVE_RING",
    "commutes",
    "anticommutes",
    # Idempotents
    "Idempotent",
    "is_idempotent",
    "make_idempotent",
    "complement",
    "zero_idempotent",
    "one_idempotent",
    "orthogonal",
    # Catalogue
    "Equation",
    "Identity",
    "IdentityRegistry",
    "default_catalogue",
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
    # Verification
    "PropertyVerifier",
    "verify",
    "VerifierConfig",
    "Enumerate",
    "Exhaustive",
    "RandomSample",
    "Violation",
    "IdentityOutcome",
    "VerificationReport",
    "audit_axioms",
    # Errors
    "IdemringError",
    "PreconditionViolation",
    "CapabilityMismatch",
    "VerificationFailure",
]
