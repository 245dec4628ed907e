"""Verifier configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VerifierConfig:
    """
    Attributes:
        max_operand_tuples: Upper bound on operand tuples tried per identity
        seed_constants: Always include zero (and one, when declared) in the sample
        audit_axioms: Also sample-check the ring's declared axioms
        fail_fast: Stop after the first identity with a violation
        trace: Record a verification trace
    """

    max_operand_tuples: int = 20_000
    seed_constants: bool = True
    audit_axioms: bool = False
    fail_fast: bool = False
    trace: bool = True

    def __post_init__(self) -> None:
        if self.max_operand_tuples <= 0:
            raise ValueError("max_operand_tuples must be positive")
