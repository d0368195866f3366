#!/usr/bin/env python
"""Report stock rows whose brand/model is not in the catalog verbatim."""

import sys

from _bootstrap import connect_or_exit

from dealership.data.car_brands import CAR_BRANDS
from dealership.services.reconciliation import audit_stock_brands


def main() -> int:
    client = connect_or_exit()

    print("Checking stock brands...\n")
    try:
        report = audit_stock_brands(client)
    except Exception as e:
        print(f"Error: could not read stock: {e}")
        return 1

    if report.total == 0:
        print("No vehicles in the database.")
        return 0

    print(f"Found {report.total} vehicles.\n")
    print("Vehicles per brand:")
    for brand, count in report.by_brand.items():
        print(f"  {brand}: {count}")

    print(f"\nCompatible: {report.compatible}")
    print(f"Incompatible: {len(report.incompatible)}")
    for row in report.incompatible:
        print(f"  - ID {row.id}: {row.marca} {row.model}")
        if not row.brand_exists:
            print(f'    brand "{row.marca}" is not in the catalog')
        elif not row.model_exists:
            print(f'    model "{row.model}" is not listed for "{row.marca}"')

    print("\nCatalog brands:")
    for index, entry in enumerate(CAR_BRANDS, start=1):
        print(f"  {index}. {entry.brand} ({len(entry.models)} models)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
