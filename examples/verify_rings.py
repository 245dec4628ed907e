from __future__ import annotations

import argparse
import logging

from idemring import Exhaustive, RandomSample, VerifierConfig, verify
from idemring.kernel import Capability
from idemring.rings import BooleanRing, Integers, IntegersMod, MatrixRing


class TorsionClaimingBooleanRing(BooleanRing):
    """A characteristic-2 ring that wrongly claims to be torsion-free."""

    capabilities = BooleanRing.capabilities | Capability.TORSION_FREE


def main() -> None:
    parser = argparse.ArgumentParser(description="Check the identity catalogue on sample rings")
    parser.add_argument("--audit", action="store_true", help="also audit the declared ring axioms")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = VerifierConfig(audit_axioms=args.audit)

    runs = [
        (IntegersMod(6), Exhaustive()),
        (IntegersMod(12), Exhaustive()),
        (MatrixRing(IntegersMod(2), 2), Exhaustive()),
        (Integers(bound=8), RandomSample(count=50, seed=0)),
        (BooleanRing(3), Exhaustive()),
        (TorsionClaimingBooleanRing(2), Exhaustive()),
    ]
    for ring, strategy in runs:
        print(verify(ring, strategy, config=config).summary())


if __name__ == "__main__":
    main()
