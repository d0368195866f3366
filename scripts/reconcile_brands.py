#!/usr/bin/env python
"""Rewrite stock brand/model pairs onto the curated catalog.

Usage:
    python scripts/reconcile_brands.py [--dry-run]
"""

import argparse
import sys

from _bootstrap import connect_or_exit

from dealership.services.reconciliation import reconcile_stock_brands


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dry-run", action="store_true", help="report changes without writing them"
    )
    args = parser.parse_args(argv)

    client = connect_or_exit()

    print("Reconciling stock brands and models...")
    try:
        report = reconcile_stock_brands(client, dry_run=args.dry_run, progress=print)
    except Exception as e:
        print(f"Error: could not read stock: {e}")
        return 1

    if report.attempted == 0:
        print("No vehicles in the database.")
        return 0

    print("\nSummary:")
    print(f"  Vehicles checked: {report.attempted}")
    label = "Would update" if report.dry_run else "Updated"
    print(f"  {label}: {report.changed}")
    print(f"  Already canonical: {report.unchanged}")
    print(f"  Errors: {report.errored}")

    if report.errors:
        print("\nError details:")
        for err in report.errors:
            print(f"  - ID {err.id}: {err.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
