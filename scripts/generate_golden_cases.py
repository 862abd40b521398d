#!/usr/bin/env python
"""
Generate golden test cases by running the current resolver on the sample table.
This captures current behavior as a regression baseline.

Usage:
    python scripts/generate_golden_cases.py
"""
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from shrimp_pricing.data.price_tables import price_range_frame, sample_base_table
from shrimp_pricing.engine import resolve_price_range


# Below the floor, every anchor, interpolated sizes and each penalty band
GOLDEN_SIZES = [
    19, 20, 22, 25, 26, 27, 28, 30, 35, 45, 55, 72, 75, 85, 100,
    101, 102, 120, 150, 151, 170, 180, 200, 201, 220, 250,
]


def generate_golden_cases():
    base_table = sample_base_table()

    entries = [
        entry
        for size in GOLDEN_SIZES
        for entry in resolve_price_range(size, size, base_table)
    ]

    df = price_range_frame(entries)[['size', 'kind', 'price']]
    df = df.rename(columns={'kind': 'expected_kind', 'price': 'expected_price'})
    df['expected_price'] = df['expected_price'].fillna(0).astype(int)

    output_path = project_root / 'tests' / 'golden_cases.csv'
    df.to_csv(output_path, index=False)
    print(f"Generated {len(df)} golden test cases")
    print(f"Output: {output_path}")
    print()
    print("Sample cases:")
    print(df.head(10).to_string(index=False))


if __name__ == "__main__":
    generate_golden_cases()
