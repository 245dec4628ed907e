"""Evaluate one identity over every admissible operand tuple."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import islice, product
from typing import Any

from idemring.catalogue.types import Equation, Identity
from idemring.kernel.idempotent import Idempotent
from idemring.kernel.ring import Ring
from idemring.runtime.report import IdentityOutcome, Violation
from idemring.runtime.trace import Trace

logger = logging.getLogger(__name__)


def _raw(operand: Any) -> Any:
    return operand.value if isinstance(operand, Idempotent) else operand


def _render(values: Sequence[Any]) -> str:
    if len(values) == 1:
        return repr(values[0])
    return "(" + ", ".join(repr(v) for v in values) + ")"


def _violation(
    ring: Ring[Any],
    identity: Identity,
    operands: tuple[Any, ...],
    equation: Equation | None,
    error: Exception | None = None,
) -> Violation:
    raw = tuple(_raw(op) for op in operands)
    return Violation(
        identity=identity.name,
        statement=identity.statement,
        operands=tuple(repr(r) for r in raw),
        lhs=_render(equation.lhs) if equation is not None else "",
        rhs=_render(equation.rhs) if equation is not None else "",
        weight=sum(ring.weight(r) for r in raw),
        error=f"{type(error).__name__}: {error}" if error is not None else None,
        raw_operands=raw,
    )


def check_identity(
    ring: Ring[Any],
    identity: Identity,
    elements: Sequence[Any],
    idempotents: Sequence[Idempotent[Any]],
    limit: int,
    trace: Trace | None = None,
) -> IdentityOutcome:
    """Check ``identity`` on operand tuples drawn from the sample.

    Idempotent slots range over ``idempotents``, element slots over
    ``elements``. At most ``limit`` tuples are tried, admissible or not;
    only admissible ones are counted as checked. The counterexample kept is
    the one with the smallest total operand weight.
    """
    if not ring.has(identity.requires):
        missing = identity.requires & ~ring.capabilities
        reason = f"ring does not declare {missing.describe()}"
        if trace is not None:
            trace.record("skipped", identity=identity.name, detail=reason)
        return IdentityOutcome.skipped_because(identity.name, reason)

    domains = [idempotents if kind == "idempotent" else elements for kind in identity.operands]
    checked = 0
    violations = 0
    minimal: Violation | None = None

    tuples = product(*domains)
    for operands in islice(tuples, limit):
        equation: Equation | None = None
        try:
            if not identity.applies(ring, *operands):
                continue
            equation = identity.evaluate(ring, *operands)
            holds = equation.holds(ring)
            error = None
        except Exception as exc:
            holds = False
            error = exc
        checked += 1
        if holds:
            continue
        violations += 1
        found = _violation(ring, identity, operands, equation, error)
        if trace is not None:
            trace.record("violation", identity=identity.name, operands=found.operands)
        if minimal is None or found.weight < minimal.weight:
            minimal = found

    if minimal is not None:
        logger.warning(
            "%s violated %d time(s) on %s, e.g. operands %s",
            identity.name,
            violations,
            ring.name,
            ", ".join(minimal.operands),
        )
        return IdentityOutcome.failed_with(identity.name, checked, violations, minimal)
    if checked == 0:
        if next(tuples, None) is not None:
            reason = f"operand limit of {limit} reached before any admissible tuple"
        else:
            reason = "no sampled operands satisfy the precondition"
        if trace is not None:
            trace.record("skipped", identity=identity.name, detail=reason)
        return IdentityOutcome.skipped_because(identity.name, reason)
    logger.debug("%s held on %d operand tuple(s)", identity.name, checked)
    return IdentityOutcome.passed_with(identity.name, checked)
