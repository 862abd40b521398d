"""
Progressive size penalties above the largest anchor.

With the default tiers and a table ending at size 100:
- Size 101-150: Rp200 less per size
- Size 151-200: Rp400 less per size
- Size 201+:    Rp900 less per size

Bands are measured from the largest anchor size, so the same walk works for a
table that ends at 80 or 120.
"""
import math
from numbers import Real

from .errors import InvalidPenaltyConfigError, SizeTooSmallError
from .formatting import format_amount, round_half_up, rupiah
from .models import (
    AnchorPoint,
    CalculationKind,
    CalculationResult,
    DEFAULT_PENALTY_CONFIG,
    PENALTY_BAND_WIDTH,
    PenaltyTierConfig,
)


PENALTY_FORMULA = "Progressive penalty system: Base price - (range penalties)"


def validate_penalty_config(config: PenaltyTierConfig):
    """Raise InvalidPenaltyConfigError unless every rate is a finite number >= 0."""
    if not isinstance(config, PenaltyTierConfig):
        raise InvalidPenaltyConfigError(
            f"Penalty config must be a PenaltyTierConfig, got {type(config).__name__}"
        )
    for name, rate in zip(("tier1_rate", "tier2_rate", "tier3_rate"), config.rates):
        if isinstance(rate, bool) or not isinstance(rate, Real) or not math.isfinite(rate):
            raise InvalidPenaltyConfigError(f"Penalty {name} must be a number")
        if rate < 0:
            raise InvalidPenaltyConfigError(f"Penalty {name} cannot be negative")


def penalty_bands(config: PenaltyTierConfig) -> list[tuple[float, float, float]]:
    """
    Bands as (start_offset, end_offset, rate) relative to the largest anchor.

    start_offset is exclusive, end_offset inclusive; the last band is open.
    """
    width = PENALTY_BAND_WIDTH
    return [
        (0, width, config.tier1_rate),
        (width, 2 * width, config.tier2_rate),
        (2 * width, math.inf, config.tier3_rate),
    ]


def calculate_penalty_price(
    target_size: float,
    base_anchor: AnchorPoint,
    config: PenaltyTierConfig = DEFAULT_PENALTY_CONFIG,
) -> CalculationResult:
    """
    Price a size above the table by folding deductions over the penalty bands.

    Args:
        target_size: Size to price, must be above base_anchor.size
        base_anchor: Largest-size anchor of the table
        config: Penalty tier rates

    Returns:
        PENALTY result; price is clamped at zero
    """
    if target_size <= base_anchor.size:
        raise SizeTooSmallError(
            f"Penalty pricing only applies to sizes above {format_amount(base_anchor.size)}"
        )

    offset = target_size - base_anchor.size
    calculations = [f"Starting from size {format_amount(base_anchor.size)}: {rupiah(base_anchor.price)}"]
    total_deduction = 0

    for start, end, rate in penalty_bands(config):
        sizes_in_band = min(offset, end) - start
        if sizes_in_band <= 0:
            break
        deduction = sizes_in_band * rate
        total_deduction += deduction
        first_size = base_anchor.size + start + 1
        last_size = base_anchor.size + min(offset, end)
        if first_size > last_size:
            # Less than one whole size into the band
            first_size = base_anchor.size + start
        calculations.append(
            f"Size {format_amount(first_size)} to {format_amount(last_size)}: "
            f"{format_amount(sizes_in_band)} sizes × {rupiah(rate)} = -{rupiah(deduction)}"
        )

    final_price = round_half_up(max(0, base_anchor.price - total_deduction))
    calculations.append(f"Final price: {rupiah(final_price)}")

    return CalculationResult(
        price=final_price,
        kind=CalculationKind.PENALTY,
        formula=PENALTY_FORMULA,
        breakdown="\n".join(calculations),
    )
