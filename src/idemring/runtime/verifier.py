"""PropertyVerifier - checks the identity catalogue against a concrete ring."""

from __future__ import annotations

import logging
from typing import Any

from idemring.catalogue import IdentityRegistry, default_catalogue
from idemring.kernel.capability import Capability
from idemring.kernel.idempotent import Idempotent, is_idempotent
from idemring.kernel.ring import Ring
from idemring.runtime.axioms import audit_axioms
from idemring.runtime.checker import check_identity
from idemring.runtime.config import VerifierConfig
from idemring.runtime.report import IdentityOutcome, VerificationReport
from idemring.runtime.strategy import SampleStrategy, distinct
from idemring.runtime.trace import Trace

logger = logging.getLogger(__name__)


class PropertyVerifier:
    """
    Drive sampled elements of ``ring`` through every catalogue identity.

    Steps:
    1. draw elements from ``strategy`` (plus zero and one when configured)
    2. keep the idempotent ones as operands for idempotent slots
    3. check each identity whose capabilities the ring declares, on every
       operand tuple satisfying its precondition
    4. optionally audit the ring's declared axioms on the same sample

    Findings are returned in a VerificationReport; nothing is raised unless
    the caller asks via report.raise_for_failures().
    """

    def __init__(
        self,
        ring: Ring[Any],
        strategy: SampleStrategy,
        catalogue: IdentityRegistry | None = None,
        config: VerifierConfig | None = None,
    ) -> None:
        self.ring = ring
        self.strategy = strategy
        self.catalogue = catalogue if catalogue is not None else default_catalogue()
        self.config = config or VerifierConfig()
        self.trace = Trace(enabled=self.config.trace)

    def samples(self) -> tuple[Any, ...]:
        drawn = self.strategy.sample(self.ring)
        if not self.config.seed_constants:
            return drawn
        constants = [self.ring.zero()]
        if self.ring.has(Capability.UNITAL):
            constants.append(self.ring.one())
        return distinct(self.ring, [*constants, *drawn])

    def run(self) -> VerificationReport:
        self.trace.clear()
        elements = self.samples()
        idempotents = [Idempotent(self.ring, a) for a in elements if is_idempotent(self.ring, a)]
        logger.info(
            "Verifying %d identities on %s: %d samples, %d idempotents",
            len(self.catalogue),
            self.ring.describe(),
            len(elements),
            len(idempotents),
        )

        outcomes: list[IdentityOutcome] = []
        axiom_outcomes: list[IdentityOutcome] = []
        detail = f"{self.ring.name}: {len(elements)} samples, {len(idempotents)} idempotents"
        with self.trace.scope("run", detail=detail):
            for identity in self.catalogue:
                with self.trace.scope("identity", identity=identity.name):
                    outcome = check_identity(
                        self.ring,
                        identity,
                        elements,
                        idempotents,
                        self.config.max_operand_tuples,
                        self.trace,
                    )
                outcomes.append(outcome)
                if self.config.fail_fast and outcome.status == "failed":
                    logger.info("Stopping after first failure (%s)", identity.name)
                    break

            if self.config.audit_axioms:
                axiom_outcomes = audit_axioms(self.ring, elements, self.config.max_operand_tuples, self.trace)

        report = VerificationReport(
            ring=self.ring.describe(),
            strategy=self.strategy.describe(),
            samples=len(elements),
            idempotents=len(idempotents),
            outcomes=outcomes,
            axiom_outcomes=axiom_outcomes,
        )
        logger.info(report.summary())
        return report


def verify(
    ring: Ring[Any],
    strategy: SampleStrategy,
    catalogue: IdentityRegistry | None = None,
    config: VerifierConfig | None = None,
) -> VerificationReport:
    """Run a PropertyVerifier once and return its report."""
    return PropertyVerifier(ring, strategy, catalogue, config).run()
