"""Командная строка polysolve.

    polysolve testcase1.json testcase2.json --strategy robust
    polysolve                   # создать и решить канонические фикстуры

Для каждого файла печатаются свободный член, лучшее подмножество,
проверка согласия по точкам и маска inlier. Ошибка в любом файле →
код возврата 1.
"""

import json
import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from src.core.contracts import ShareSetContractError
from src.core.math.base_decoding import InvalidBase, InvalidDigit
from src.interpolation.errors import ReconstructionError
from src.solver.config import SolverConfig, Strategy
from src.solver.fixtures import DEFAULT_FIXTURES, FileSystemFixtureStore, bootstrap_fixtures, load_share_set
from src.solver.pipeline import PolynomialSolver, SolveReport

logger = logging.getLogger("polysolve")

SEPARATOR_WIDTH = 50

# Ошибки, которые отображаются пользователю без traceback
SOLVE_ERRORS = (
    OSError,
    json.JSONDecodeError,
    ShareSetContractError,
    ValidationError,
    InvalidBase,
    InvalidDigit,
    ReconstructionError,
)


def configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger = logging.getLogger()
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="polysolve",
        description="Reconstruct the constant term of a polynomial from base-encoded points.",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files", nargs="*",
        help="share set JSON files; if omitted, canned test cases are created and solved",
    )
    parser.add_argument(
        "--strategy", choices=[s.value for s in Strategy], default=Strategy.ROBUST.value,
        help="robust consensus over all k-subsets (default) or direct Lagrange on the first k points",
    )
    parser.add_argument(
        "--no-shortcut", action="store_true",
        help="disable the closed-form formula for positions 1..k (direct strategy)",
    )
    parser.add_argument(
        "--fixtures-dir", type=Path, default=Path("."),
        help="directory for files and canned test cases (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def render_report(name: str, report: SolveReport) -> list[str]:
    lines = [f"\nk = {report.k}, inliers = {report.inlier_count}/{report.n}"]
    if report.consensus is not None:
        subset = ", ".join(str(i) for i in report.consensus.subset_indices)
        lines.append(f"Best subset indices (0-based): {subset}")
    lines.append(f"CONSTANT TERM (c) for {name}: {report.constant_term}")
    lines.append("=" * SEPARATOR_WIDTH)

    lines.append("Consensus check (1=inlier, 0=outlier):")
    for check in report.checks:
        status = "OK" if check.is_inlier else "MISMATCH"
        lines.append(
            f"x={check.position}: P(x)={check.model_value} vs y={check.value} => {status}"
        )
    lines.append("Inlier mask: " + " ".join(str(bit) for bit in report.inlier_mask))
    lines.append("=" * SEPARATOR_WIDTH)
    return lines


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    store = FileSystemFixtureStore(args.fixtures_dir)
    names = list(args.files)
    if not names:
        bootstrap_fixtures(store)
        names = list(DEFAULT_FIXTURES)

    solver = PolynomialSolver(
        SolverConfig(
            strategy=Strategy(args.strategy),
            use_consecutive_shortcut=not args.no_shortcut,
        )
    )

    print("POLYNOMIAL SOLVER - FINDING CONSTANT TERM")
    print("=" * 60)

    results: list[tuple[str, Optional[int]]] = []
    for name in names:
        print(f"\n=== SOLVING {name.upper()} ===")
        try:
            report = solver.solve(load_share_set(store, name))
        except SOLVE_ERRORS as e:
            logger.debug("Solving %s failed", name, exc_info=True)
            print(f"Error solving {name}: {e}", file=sys.stderr)
            results.append((name, None))
            continue

        print("\n".join(render_report(name, report)))
        results.append((name, report.constant_term))

    print("\nFINAL RESULTS:")
    for name, constant_term in results:
        shown = "FAILED" if constant_term is None else str(constant_term)
        print(f"{name} - Constant term: {shown}")

    return 1 if any(constant_term is None for _, constant_term in results) else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
