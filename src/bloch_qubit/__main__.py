"""Command-line entry point for the :mod:`bloch_qubit` package."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

from . import config
from .logging_config import setup_logging
from .qubit import sample_counts
from .session import QubitSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Prepare a single qubit from Bloch angles, apply fixed gates, measure it, "
            "and sample Bell pair correlations."
        )
    )
    parser.add_argument("--theta", type=float, default=0.0,
                        help="Polar angle θ in radians (default: 0).")
    parser.add_argument("--phi", type=float, default=0.0,
                        help="Azimuthal angle φ in radians (default: 0).")
    parser.add_argument(
        "--gate",
        action="append",
        default=[],
        metavar="NAME",
        help="Gate to apply, one of I X Y Z H S T or 'reset'. Repeat to apply several in order.",
    )
    parser.add_argument("--measure", action="store_true",
                        help="Measure the final state once and collapse it.")
    parser.add_argument("--shots", type=int, default=0,
                        help="Report outcome counts over this many measurements of the final state "
                             "(taken before --measure collapses it).")
    parser.add_argument("--bell", type=int, default=0, metavar="N",
                        help="Prepare N Bell pairs, measure left then right, report agreement.")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="Seed for the random number generator (default: BLOCH_SEED or None).")
    parser.add_argument("--digits", type=int, default=config.DIGITS,
                        help="Decimal digits in the readout (default: %(default)s).")
    parser.add_argument(
        "--save-plot",
        type=Path,
        default=None,
        metavar="PATH",
        help="Save the Bloch sphere figure to this path.",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help="Logging level (default: %(default)s).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging("bloch_qubit", level=args.log_level)

    rng = np.random.default_rng(args.seed)
    session = QubitSession(rng=rng, digits=args.digits)
    session.set_angles(args.theta, args.phi)

    for name in args.gate:
        try:
            session.apply_gate(name)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    if args.shots < 0:
        print("error: --shots must be ≥ 0", file=sys.stderr)
        return 2
    if args.shots:
        n0, n1 = sample_counts(session.qubit, args.shots, rng)
        print(f"Counts over {args.shots} shots: |0⟩ {n0}  |1⟩ {n1}")

    if args.measure:
        session.measure()

    r = session.readout()
    print("Qubit state")
    print("-----------")
    print(f"θ = {r.theta}   φ = {r.phi}")
    print(f"a = {r.amp_a}")
    print(f"b = {r.amp_b}")
    print(f"p0 = {r.p0}   p1 = {r.p1}")
    print(f"Measurement: {r.measurement}")

    if args.bell > 0:
        agree = 0
        ones = 0
        for _ in range(args.bell):
            session.prepare_bell()
            left = session.measure_left()
            right = session.measure_right()
            agree += left == right
            ones += left
        print(f"Bell pairs: {args.bell}   agreement: {agree}/{args.bell}   left=|1⟩: {ones}")

    if args.save_plot is not None:
        import matplotlib
        matplotlib.use("Agg")
        from .bloch_view import SessionFigure

        figure = SessionFigure(session)
        figure.fig.savefig(args.save_plot, dpi=150, bbox_inches="tight")
        print(f"Saved Bloch sphere to {args.save_plot}")

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
