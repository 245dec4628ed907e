"""Kernel layer - ring contract, idempotent wrapper and errors."""

from idemring.kernel.capability import (
    COMMUTATIVE_RING,
    NON_ASSOCIATIVE_RING,
    NON_UNITAL_SEMIRING,
    RING,
    SEMIRING,
    Capability,
)
from idemring.kernel.errors import (
    CapabilityMismatch,
    IdemringError,
    PreconditionViolation,
    VerificationFailure,
)
from idemring.kernel.idempotent import (
    Idempotent,
    complement,
    derived_idempotent,
    is_idempotent,
    make_idempotent,
    one_idempotent,
    orthogonal,
    zero_idempotent,
)
from idemring.kernel.ring import FiniteRing, Ring, anticommutes, commutes

__all__ = [
    # Capabilities
    "Capability",
    "NON_ASSOCIATIVE_RING",
    "NON_UNITAL_SEMIRING",
    "SEMIRING",
    "RING",
    "COMMUTATIVE_RING",
    # Ring contract
    "Ring",
    "FiniteRing",
    "commutes",
    "anticommutes",
    # Idempotents
    "Idempotent",
    "is_idempotent",
    "make_idempotent",
    "derived_idempotent",
    "complement",
    "zero_idempotent",
    "one_idempotent",
    "orthogonal",
    # Errors
    "IdemringError",
    "PreconditionViolation",
    "CapabilityMismatch",
    "VerificationFailure",
]
