"""Verification report models."""

from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import BaseModel, Field

from idemring.kernel.errors import VerificationFailure


class Violation(BaseModel):
    """One operand tuple for which an identity did not hold."""

    identity: str
    statement: str
    operands: tuple[str, ...]
    lhs: str
    rhs: str
    weight: int = 0
    error: str | None = None
    raw_operands: tuple[Any, ...] = Field(default=(), exclude=True, repr=False)


class IdentityOutcome(BaseModel):
    identity: str
    status: Literal["passed", "failed", "skipped"]
    checked: int = 0
    violations: int = 0
    counterexample: Violation | None = None
    reason: str | None = None

    @classmethod
    def passed_with(cls, identity: str, checked: int) -> Self:
        return cls(identity=identity, status="passed", checked=checked)

    @classmethod
    def failed_with(cls, identity: str, checked: int, violations: int, counterexample: Violation) -> Self:
        return cls(
            identity=identity,
            status="failed",
            checked=checked,
            violations=violations,
            counterexample=counterexample,
        )

    @classmethod
    def skipped_because(cls, identity: str, reason: str) -> Self:
        return cls(identity=identity, status="skipped", reason=reason)


class VerificationReport(BaseModel):
    """Outcome of one verifier run.

    Attributes:
        ring: Description of the ring under test
        strategy: Description of the sampling strategy
        samples: Number of distinct sampled elements
        idempotents: Number of sampled idempotents
        outcomes: One entry per catalogue identity, in catalogue order
        axiom_outcomes: One entry per audited axiom (empty unless requested)
    """

    ring: str
    strategy: str
    samples: int
    idempotents: int
    outcomes: list[IdentityOutcome] = Field(default_factory=list)
    axiom_outcomes: list[IdentityOutcome] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures()

    def failures(self) -> list[IdentityOutcome]:
        return [o for o in self.outcomes + self.axiom_outcomes if o.status == "failed"]

    def outcome(self, identity: str) -> IdentityOutcome:
        for candidate in self.outcomes + self.axiom_outcomes:
            if candidate.identity == identity:
                return candidate
        raise KeyError(f"No outcome recorded for '{identity}'")

    def counts(self) -> dict[str, int]:
        counts = {"passed": 0, "failed": 0, "skipped": 0}
        for o in self.outcomes + self.axiom_outcomes:
            counts[o.status] += 1
        return counts

    def summary(self) -> str:
        counts = self.counts()
        lines = [
            f"{self.ring}: {self.samples} samples, {self.idempotents} idempotents "
            f"({counts['passed']} passed, {counts['failed']} failed, {counts['skipped']} skipped)"
        ]
        for o in self.failures():
            example = o.counterexample
            if example is None:
                continue
            detail = example.error or f"{example.lhs} != {example.rhs}"
            lines.append(f"  FAIL {o.identity} [{example.statement}] at ({', '.join(example.operands)}): {detail}")
        return "\n".join(lines)

    def raise_for_failures(self) -> None:
        """Raise VerificationFailure carrying the first minimal counterexample."""
        for o in self.failures():
            if o.counterexample is not None:
                raise VerificationFailure(o.counterexample)
