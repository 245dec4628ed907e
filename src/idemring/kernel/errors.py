"""Error types raised at the library boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from idemring.kernel.capability import Capability

if TYPE_CHECKING:
    from idemring.runtime.report import Violation


class IdemringError(Exception):
    """Base class for every error raised by idemring."""


class PreconditionViolation(IdemringError):
    """Error raised when an operand fails an identity's precondition.

    Covers a non-idempotent element passed to make_idempotent and a
    commutation or anticommutation witness that does not hold. The
    operands are preserved so the failure can be reproduced.
    """

    def __init__(self, identity: str, operands: tuple[Any, ...], reason: str) -> None:
        self.identity = identity
        self.operands = operands
        self.reason = reason
        rendered = ", ".join(repr(op) for op in operands)
        super().__init__(f"{identity}: {reason} (operands: {rendered})")

    def __repr__(self) -> str:
        return (
            f"PreconditionViolation(identity={self.identity!r}, "
            f"operands={self.operands!r}, reason={self.reason!r})"
        )


class CapabilityMismatch(IdemringError):
    """Error raised when a ring does not declare the axioms an identity needs."""

    def __init__(self, identity: str, required: Capability, declared: Capability) -> None:
        self.identity = identity
        self.required = required
        self.declared = declared
        self.missing = required & ~declared
        super().__init__(
            f"{identity}: ring declares {declared.describe()}, "
            f"missing {self.missing.describe()}"
        )

    def __repr__(self) -> str:
        return (
            f"CapabilityMismatch(identity={self.identity!r}, "
            f"missing={self.missing.describe()!r})"
        )


class VerificationFailure(IdemringError):
    """A concrete ring and sample violated a catalogue identity.

    This is a finding about the ring under test, not a library fault.
    """

    def __init__(self, violation: Violation) -> None:
        self.violation = violation
        super().__init__(
            f"{violation.identity} violated by operands ({', '.join(violation.operands)}): "
            f"{violation.lhs} != {violation.rhs}"
        )
