#!/usr/bin/env python
"""Run the shape-generation validation cases.

Usage:
    python scripts/run_validation.py

Exits with status 1 if any case fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from banjo_shapes.validation import run_tests


def main() -> None:
    """Run the validation cases and print a report."""
    parser = argparse.ArgumentParser(description="Validate banjo shape generation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log failure details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    report = run_tests()
    for result in report.results:
        status = "PASS" if result.passed else "FAIL"
        print(f"[{status}] {result.test_id} {result.description}")
        for error in result.errors:
            print(f"    {error}")

    print(f"\n{report.passed}/{report.total} passed")
    sys.exit(1 if report.failed else 0)


if __name__ == "__main__":
    main()
