"""
Citation Density CLI

Finds the densest clusters in a directed citation graph.

Pipeline:
    1. Load edge list    → one "<citing> <cited>" pair per line
    2. Degree pruning    → drop the 25% of papers citing the fewest others
    3. Components        → forward-reachability labelling (iterative DFS)
    4. Density ranking   → top-k densest components below a size bound
    5. Average density   → mean over all components

Usage:
    analyze-citations Cit-HepTh.txt
    analyze-citations Cit-HepTh.txt --top-k 20 --max-size 100
    analyze-citations Cit-HepTh.txt --external-ids -o output/report.json
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from citegraph.analysis.display import Colors, colored, display_report
from citegraph.analysis.results import CitationAnalysisResult
from citegraph.config.settings import Settings
from citegraph.core.exceptions import CitegraphError
from citegraph.services.analysis_service import AnalysisService


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with clear grouping."""
    parser = argparse.ArgumentParser(
        prog="analyze-citations",
        description="Rank the densest clusters of a directed citation graph.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s Cit-HepTh.txt                      Top 10 components below 50 vertices
  %(prog)s Cit-HepTh.txt -k 20 -m 100         Top 20 components below 100 vertices
  %(prog)s Cit-HepTh.txt --external-ids       Print paper ids instead of vertex indices
  %(prog)s Cit-HepTh.txt -o report.json       Also export results to JSON
""",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Edge-list file (default: $CITEGRAPH_INPUT or Cit-HepTh.txt)",
    )

    # --- Analysis ---
    analysis = parser.add_argument_group("Analysis")
    analysis.add_argument(
        "--top-k", "-k",
        type=_non_negative_int,
        default=None,
        help="Number of components to report (default: 10)",
    )
    analysis.add_argument(
        "--max-size", "-m",
        type=_non_negative_int,
        default=None,
        help="Only rank components with fewer members than this (default: 50)",
    )

    # --- Output ---
    output = parser.add_argument_group("Output")
    output.add_argument(
        "--external-ids",
        action="store_true",
        help="Report node ids from the input file instead of internal vertex indices",
    )
    output.add_argument("--output", "-o", metavar="FILE", help="Export results to JSON file")
    output.add_argument("--json", action="store_true", help="Print results as JSON to stdout")
    output.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    output.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings overridden by command-line flags."""
    settings = Settings.from_env()
    overrides = {}
    if args.input:
        overrides["input_path"] = args.input
    if args.top_k is not None:
        overrides["top_k"] = args.top_k
    if args.max_size is not None:
        overrides["max_component_size"] = args.max_size
    return dataclasses.replace(settings, **overrides)


# ---------------------------------------------------------------------------
# Output Helpers
# ---------------------------------------------------------------------------

def export_json(result: CitationAnalysisResult, path: str) -> None:
    """Write results to a JSON file, creating parent directories as needed."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(result.to_dict(), f, indent=2)


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logging setup
    log_level = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet
        else logging.INFO
    )
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        settings = resolve_settings(args)
        result = AnalysisService(settings).run()

        if args.output:
            export_json(result, args.output)
            logging.getLogger(__name__).info("Results exported to %s", args.output)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            display_report(result, external_ids=args.external_ids)

        return 0

    except (CitegraphError, ValueError, OSError) as exc:
        print(colored(f"Error: {exc}", Colors.RED), file=sys.stderr)
        if args.verbose:
            logging.exception("Analysis failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
