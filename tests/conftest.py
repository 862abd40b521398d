import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from shrimp_pricing.engine import AnchorPoint


# GM base prices used across the business examples
SAMPLE_BASE_PRICES = [
    (20, 88000),
    (25, 88000),
    (30, 80000),
    (40, 77000),
    (50, 70000),
    (55, 67000),
    (60, 64000),
    (70, 59000),
    (75, 54000),
    (80, 48000),
    (90, 48000),
    (100, 48000),
]


@pytest.fixture(scope="module")
def base_table():
    return [AnchorPoint(size=size, price=price) for size, price in SAMPLE_BASE_PRICES]


@pytest.fixture(scope="module")
def base_table_dicts():
    """Same table in the shape form/API layers hand over."""
    return [{"size": size, "price": price} for size, price in SAMPLE_BASE_PRICES]
