import pytest

from shrimp_pricing.engine import AnchorPoint, CalculationKind, resolve_price
from shrimp_pricing.engine.interpolation import find_interpolation_bracket, interpolate_price


LOWER = AnchorPoint(size=25, price=88000)
UPPER = AnchorPoint(size=30, price=80000)


def test_breakdown_steps_in_order():
    result = interpolate_price(26, LOWER, UPPER)

    assert result.kind == CalculationKind.INTERPOLATED
    assert result.price == 86400
    assert result.formula == "Price = 88,000 + ((80,000 - 88,000) ÷ (30 - 25)) × (26 - 25)"
    assert result.breakdown_lines == [
        "Price difference: Rp80,000 - Rp88,000 = Rp-8,000",
        "Size difference: 30 - 25 = 5",
        "Price per size: Rp-8,000 ÷ 5 = Rp-1,600",
        "Size 26 price: Rp88,000 + (Rp-1,600 × 1) = Rp86,400",
    ]


def test_rounds_only_the_final_price():
    # 1000 / 3 per size; per-step rounding would give 333 * 2 = 666
    lower = AnchorPoint(size=30, price=80000)
    upper = AnchorPoint(size=33, price=81000)
    result = interpolate_price(32, lower, upper)

    assert result.price == 80667
    assert "Rp333.333" in result.breakdown_lines[2]
    assert result.breakdown_lines[3].endswith("= Rp80,666.667")


def test_half_rounds_up():
    lower = AnchorPoint(size=20, price=1000)
    upper = AnchorPoint(size=22, price=1001)
    assert interpolate_price(21, lower, upper).price == 1001


def test_flat_segment():
    lower = AnchorPoint(size=80, price=48000)
    upper = AnchorPoint(size=90, price=48000)
    assert interpolate_price(85, lower, upper).price == 48000


def test_price_lies_between_anchors(base_table):
    for lower, upper in zip(base_table, base_table[1:]):
        low, high = sorted((lower.price, upper.price))
        for size in range(lower.size + 1, upper.size):
            result = resolve_price(size, base_table)
            assert result.kind == CalculationKind.INTERPOLATED
            assert low <= result.price <= high


def test_fractional_target(base_table):
    result = resolve_price(25.5, base_table)
    assert result.kind == CalculationKind.INTERPOLATED
    assert result.price == 87200


@pytest.mark.parametrize("target,expected", [
    (26, (25, 30)),
    (99, (90, 100)),
    (21, (20, 25)),
])
def test_find_bracket(base_table, target, expected):
    lower, upper = find_interpolation_bracket(base_table, target)
    assert (lower.size, upper.size) == expected


@pytest.mark.parametrize("target", [20, 100, 10, 150])
def test_no_bracket_on_anchor_or_outside(base_table, target):
    assert find_interpolation_bracket(base_table, target) is None
