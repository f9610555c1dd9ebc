"""
Command-line entry point for modfcheck.

Exit status is PASS (0) only if every check succeeds. Bootstrap failures
and failing checks print to stderr and exit with FAIL (1).
"""

import argparse
import sys
from typing import List, Optional

from ._validation import SplitConformanceError
from .harness import BootstrapError, run_conformance

PASS = 0
FAIL = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='modfcheck',
        description="Validate a modf implementation against the reference table",
    )
    parser.add_argument("--backend", default='auto',
                        help="Split implementation to test: auto, math, numpy (default: auto)")
    parser.add_argument("--keep-going", action="store_true",
                        help="Run every check and report all failures instead of stopping at the first")
    parser.add_argument("--no-symmetry", action="store_true",
                        help="Skip the negated copy of each reference vector")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print the outcome table and a summary")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the conformance suite.

    Parameters
    ----------
    argv : list of str, optional
        Arguments without the program name (default: sys.argv[1:]).
        Unrecognized arguments are passed through to the backend bootstrap.

    Returns
    -------
    int
        PASS or FAIL
    """
    args, passthrough = build_parser().parse_known_args(argv)

    try:
        report = run_conformance(
            backend=args.backend,
            argv=passthrough,
            fail_fast=not args.keep_going,
            check_symmetry=not args.no_symmetry,
            verbose=args.verbose,
        )
    except BootstrapError as e:
        print(f"modfcheck: bootstrap failed: {e}", file=sys.stderr)
        return FAIL
    except SplitConformanceError as e:
        print(e, file=sys.stderr)
        return FAIL

    if args.verbose:
        print(report.to_frame().to_string(index=False))

    for message in report.failures:
        print(message, file=sys.stderr)

    return PASS if report.passed else FAIL


if __name__ == "__main__":
    sys.exit(main())
