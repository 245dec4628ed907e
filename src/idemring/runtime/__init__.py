"""Runtime layer - the property verifier and its supporting pieces."""

from idemring.runtime.axioms import AXIOMS, audit_axioms, axiom_registry
from idemring.runtime.checker import check_identity
from idemring.runtime.config import VerifierConfig
from idemring.runtime.report import IdentityOutcome, VerificationReport, Violation
from idemring.runtime.strategy import Enumerate, Exhaustive, RandomSample, SampleStrategy
from idemring.runtime.trace import Evidence, Trace
from idemring.runtime.verifier import PropertyVerifier, verify

__all__ = [
    "PropertyVerifier",
    "verify",
    "VerifierConfig",
    "check_identity",
    # Strategies
    "SampleStrategy",
    "Enumerate",
    "Exhaustive",
    "RandomSample",
    # Reports
    "Violation",
    "IdentityOutcome",
    "VerificationReport",
    # Axioms
    "AXIOMS",
    "audit_axioms",
    "axiom_registry",
    # Tracing
    "Evidence",
    "Trace",
]
