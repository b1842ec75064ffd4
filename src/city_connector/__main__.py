"""Command line entry point for the City Connector library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .kruskal import minimum_cost_kruskal
from .pipeline import ALGORITHMS, PlannerConfig
from .prim import minimum_cost_prim
from .runner import plan_file

DEMO_CITIES = 4
DEMO_CONNECTIONS = [
    (1, 2, 3),
    (2, 3, 4),
    (3, 4, 5),
    (1, 4, 10),
    (2, 4, 6),
]


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the cheapest way to connect every city in a network.")
    parser.add_argument("input", type=Path, nargs="?", help="Path to the input CSV or Excel file")
    parser.add_argument("output", type=Path, nargs="?", help="Path where the cost table will be written")
    parser.add_argument(
        "--source-column",
        default=os.getenv("CITY_CONNECTOR_SOURCE_COLUMN", "city1"),
        help="Column holding the first city of each connection (default: city1)",
    )
    parser.add_argument(
        "--target-column",
        default=os.getenv("CITY_CONNECTOR_TARGET_COLUMN", "city2"),
        help="Column holding the second city of each connection (default: city2)",
    )
    parser.add_argument(
        "--cost-column",
        default=os.getenv("CITY_CONNECTOR_COST_COLUMN", "cost"),
        help="Column holding the connection cost (default: cost)",
    )
    parser.add_argument(
        "--network-column",
        default=os.getenv("CITY_CONNECTOR_NETWORK_COLUMN"),
        help="Column splitting rows into independent networks",
    )
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="kruskal",
        help="Algorithm to use when the cross-check is disabled",
    )
    parser.add_argument(
        "--no-verify",
        dest="verify",
        action="store_false",
        help="Run a single algorithm instead of cross-checking Kruskal against Prim",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Print the Kruskal and Prim costs of a fixed four-city example and exit",
    )
    args = parser.parse_args(argv)
    if not args.demo and (args.input is None or args.output is None):
        parser.error("input and output are required unless --demo is given")
    return args


def run_demo() -> None:
    print(minimum_cost_kruskal(DEMO_CITIES, DEMO_CONNECTIONS))
    print(minimum_cost_prim(DEMO_CITIES, DEMO_CONNECTIONS))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.demo:
        run_demo()
        return 0

    config = PlannerConfig(
        source_column=args.source_column,
        target_column=args.target_column,
        cost_column=args.cost_column,
        network_column=args.network_column,
        verify=args.verify,
        algorithm=args.algorithm,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = plan_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
