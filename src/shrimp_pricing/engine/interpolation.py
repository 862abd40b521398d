"""
Linear interpolation between two bracketing anchors.

Business formula:
    Price Difference = Next Price - Current Price
    Size Difference  = Next Size - Current Size
    Price Per Size   = Price Difference / Size Difference
    Price            = Current Price + Price Per Size * (Target Size - Current Size)

The division stays in floating point and only the final price is rounded.
"""
from typing import Optional

from .formatting import format_amount, round_half_up, rupiah
from .models import AnchorPoint, CalculationKind, CalculationResult


def find_interpolation_bracket(
    table: list[AnchorPoint],
    target_size: float,
) -> Optional[tuple[AnchorPoint, AnchorPoint]]:
    """
    Find the adjacent pair (lower, upper) with lower.size < target < upper.size.

    Returns None when the target sits on an anchor or outside the table.
    """
    for lower, upper in zip(table, table[1:]):
        if lower.size < target_size < upper.size:
            return lower, upper
    return None


def interpolate_price(target_size: float, lower: AnchorPoint, upper: AnchorPoint) -> CalculationResult:
    """Interpolate a price for target_size between two bracketing anchors."""
    price_difference = upper.price - lower.price
    size_difference = upper.size - lower.size
    price_per_size = price_difference / size_difference
    size_offset = target_size - lower.size
    interpolated = lower.price + price_per_size * size_offset

    formula = (
        f"Price = {format_amount(lower.price)} + "
        f"(({format_amount(upper.price)} - {format_amount(lower.price)}) ÷ "
        f"({format_amount(upper.size)} - {format_amount(lower.size)})) × "
        f"({format_amount(target_size)} - {format_amount(lower.size)})"
    )
    breakdown = "\n".join([
        f"Price difference: {rupiah(upper.price)} - {rupiah(lower.price)} = {rupiah(price_difference)}",
        f"Size difference: {format_amount(upper.size)} - {format_amount(lower.size)} = {format_amount(size_difference)}",
        f"Price per size: {rupiah(price_difference)} ÷ {format_amount(size_difference)} = {rupiah(price_per_size)}",
        f"Size {format_amount(target_size)} price: {rupiah(lower.price)} + "
        f"({rupiah(price_per_size)} × {format_amount(size_offset)}) = {rupiah(interpolated)}",
    ])

    return CalculationResult(
        price=round_half_up(interpolated),
        kind=CalculationKind.INTERPOLATED,
        formula=formula,
        breakdown=breakdown,
    )
