"""
Golden test cases for price resolver regression testing.
These tests capture the expected behavior of the resolver over the sample
base table and should fail if pricing logic changes unexpectedly.
"""
import csv
import os

import pytest

from shrimp_pricing.data.price_tables import sample_base_table
from shrimp_pricing.engine import CalculationKind, resolve_price


@pytest.fixture(scope="module")
def shipped_table():
    """The sample table shipped with the package."""
    return sample_base_table()


def load_golden_cases():
    """Load golden test cases from CSV."""
    cases_path = os.path.join(os.path.dirname(__file__), 'golden_cases.csv')

    cases = []
    with open(cases_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            cases.append(row)

    return cases


@pytest.mark.parametrize("case", load_golden_cases(), ids=lambda c: f"size{c['size']}-{c['expected_kind']}")
def test_golden_case(shipped_table, case):
    """Test that pricing matches expected golden case."""
    size = int(case['size'])
    expected_kind = CalculationKind(case['expected_kind'])
    expected_price = int(case['expected_price'])

    result = resolve_price(size, shipped_table)

    assert result.kind == expected_kind, \
        f"Kind mismatch for size {size}: expected {expected_kind.value}, got {result.kind.value} ({result.breakdown})"
    assert result.price == expected_price, \
        f"Price mismatch for size {size}: expected {expected_price}, got {result.price}"


def test_shipped_table_matches_business_examples(shipped_table, base_table):
    """The CSV sample and the in-code business table must stay identical."""
    assert shipped_table == base_table


def test_business_example_breakdown(shipped_table):
    """Size 26 breakdown shows the interpolated Rp86,400."""
    result = resolve_price(26, shipped_table)
    assert "86,400" in result.breakdown
