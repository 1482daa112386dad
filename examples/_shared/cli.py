"""
Unified CLI argument parsing for examples.
"""
import argparse
import sys
from typing import Optional, List


def build_parser(description: str) -> argparse.ArgumentParser:
    """Build an ArgumentParser with the study parameters every example shares."""
    parser = argparse.ArgumentParser(description=description)

    parser.add_argument("--seed", type=int, default=0, help="Random seed for reproducibility (default: 0)")
    parser.add_argument("--quick", action="store_true", help="Run with fewer simulated clients")
    parser.add_argument(
        "--outdir",
        type=str,
        default="./_outputs",
        help="Directory to save output files (default: ./_outputs relative to execution)",
    )
    parser.add_argument("--num-bytes", type=int, default=16, help="Report length k in bytes (default: 16)")
    parser.add_argument("--num-hashes", type=int, default=2, help="Hash rounds h per value (default: 2)")
    parser.add_argument("--num-cohorts", type=int, default=8, help="Number of cohorts (default: 8)")
    parser.add_argument("--hash", type=str, default="sha256", help="Registered cohort hash name")

    return parser


def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse arguments for an example script."""
    parser = build_parser(description)
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(argv)
