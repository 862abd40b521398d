#!/usr/bin/env python
"""
Print a pricing table for a range of sizes.

Usage:
    python scripts/price_table.py 20 300
    python scripts/price_table.py 20 300 --base-table my_prices.csv --output table.csv
"""
import argparse
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from shrimp_pricing.config.settings import get_settings
from shrimp_pricing.data.price_tables import load_base_table, price_range_frame
from shrimp_pricing.engine import PriceResolver
from shrimp_pricing.utils.logger import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print contract prices for a size range.")
    parser.add_argument('start', type=int, help="First size (inclusive)")
    parser.add_argument('end', type=int, help="Last size (inclusive)")
    parser.add_argument('--base-table', type=Path, help="CSV with size,price columns (default: sample table)")
    parser.add_argument('--output', type=Path, help="Also write the table to this CSV file")
    parser.add_argument('--breakdown', action='store_true', help="Print the calculation breakdown per size")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    base_table_path = args.base_table or settings.sample_base_table
    try:
        base_table = load_base_table(base_table_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    resolver = PriceResolver(settings)
    validation = resolver.validate(base_table)
    for warning in validation.warnings:
        print(f"WARNING: {warning}")
    if not validation.is_valid:
        for error in validation.errors:
            print(f"ERROR: {error}")
        return 1

    entries = resolver.resolve_range(args.start, args.end, base_table)

    print("=" * 60)
    print(f"PRICE TABLE: sizes {args.start}-{args.end} ({base_table_path.name})")
    print("=" * 60)
    for entry in entries:
        result = entry.result
        price = "-" if result.is_error else resolver.format(result.price)
        print(f"{entry.size:>6}  {price:>14}  {result.kind.value}")
        if args.breakdown:
            for line in result.breakdown_lines:
                print(f"        {line}")

    if args.output:
        price_range_frame(entries).to_csv(args.output, index=False)
        print(f"\nOutput: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
