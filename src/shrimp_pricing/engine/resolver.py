"""
Price Resolver - maps a shrimp size to a contract price.

Resolution order for every call:
1. Reject targets that are not finite positive numbers
2. Normalize the base table
3. Reject sizes below the global floor of 20
4. Exact match on an anchor
5. Penalty tiers above the largest anchor
6. Linear interpolation between anchors (error below the smallest anchor)

Every expected failure comes back as an ERROR result, never as an exception.
"""
import logging
import math
import operator
from numbers import Real
from typing import TYPE_CHECKING, Iterable, Optional

from .base_table import (
    AnchorLike,
    find_exact_match,
    max_anchor,
    normalize_base_table,
    validate_base_table,
)
from .errors import InvalidTargetTypeError, PricingError, SizeTooSmallError
from .formatting import format_amount, format_price, rupiah
from .interpolation import find_interpolation_bracket, interpolate_price
from .models import (
    AnchorPoint,
    CalculationKind,
    CalculationResult,
    DEFAULT_PENALTY_CONFIG,
    MINIMUM_SUPPORTED_SIZE,
    PenaltyTierConfig,
    RangeEntry,
    ValidationResult,
)
from .penalty import calculate_penalty_price, validate_penalty_config

if TYPE_CHECKING:
    from ..config.settings import Settings

logger = logging.getLogger(__name__)


def _check_target_size(target_size):
    if (
        isinstance(target_size, bool)
        or not isinstance(target_size, Real)
        or not math.isfinite(target_size)
        or target_size <= 0
    ):
        raise InvalidTargetTypeError("Target size must be a positive number")


def _resolve_normalized(
    target_size: float,
    table: list[AnchorPoint],
    penalty_config: PenaltyTierConfig,
) -> CalculationResult:
    """Steps 3-6 against an already normalized table."""
    if target_size < MINIMUM_SUPPORTED_SIZE:
        raise SizeTooSmallError(
            f"Size too small - minimum supported size is {MINIMUM_SUPPORTED_SIZE}",
            formula=f"Size < {MINIMUM_SUPPORTED_SIZE}: Not supported",
        )

    exact = find_exact_match(table, target_size)
    if exact is not None:
        return CalculationResult(
            price=exact.price,
            kind=CalculationKind.EXACT,
            formula=f"Exact match for size {format_amount(target_size)}",
            breakdown=f"Direct lookup: Size {format_amount(target_size)} = {rupiah(exact.price)}",
        )

    base_anchor = max_anchor(table)
    if target_size > base_anchor.size:
        return calculate_penalty_price(target_size, base_anchor, penalty_config)

    bracket = find_interpolation_bracket(table, target_size)
    if bracket is not None:
        return interpolate_price(target_size, *bracket)

    min_size = table[0].size
    raise SizeTooSmallError(
        f"Size {format_amount(target_size)} is below the minimum configured size {format_amount(min_size)}",
        formula=f"Size {format_amount(target_size)} < minimum base size {format_amount(min_size)}",
    )


def _error_result(error: PricingError) -> CalculationResult:
    return CalculationResult.error(error.code, error.formula, error.message)


def _resolve_one(target_size, table, table_error, penalty_config) -> CalculationResult:
    try:
        _check_target_size(target_size)
        if table_error is not None:
            raise table_error
        return _resolve_normalized(target_size, table, penalty_config)
    except PricingError as e:
        logger.debug("Size %r not priced: %s (%s)", target_size, e.message, e.code)
        return _error_result(e)
    except Exception as e:
        logger.exception("Unexpected failure pricing size %r", target_size)
        return CalculationResult.error("CalculationError", "Calculation Error", str(e) or "Unknown error occurred")


def _prepare(base_table, penalty_config):
    """Normalize the table and check the config once; defer any error to each result."""
    try:
        table = normalize_base_table(base_table)
        validate_penalty_config(penalty_config)
        return table, None
    except PricingError as e:
        return None, e
    except Exception as e:
        logger.exception("Unexpected failure preparing base table")
        return None, e


def resolve_price(
    target_size: float,
    base_table: Optional[Iterable[AnchorLike]],
    penalty_config: Optional[PenaltyTierConfig] = None,
) -> CalculationResult:
    """
    Resolve the price for one size.

    Args:
        target_size: Size in pieces per pound
        base_table: GM-entered anchors (AnchorPoint or {"size", "price"} dicts)
        penalty_config: Penalty tier rates, defaults to 200/400/900

    Returns:
        CalculationResult tagged EXACT, INTERPOLATED, PENALTY or ERROR

    Example:
        >>> table = [AnchorPoint(20, 88000), AnchorPoint(30, 80000), AnchorPoint(100, 48000)]
        >>> resolve_price(120, table).price
        44000
    """
    if penalty_config is None:
        penalty_config = DEFAULT_PENALTY_CONFIG
    table, table_error = _prepare(base_table, penalty_config)
    return _resolve_one(target_size, table, table_error, penalty_config)


def resolve_price_range(
    start_size: int,
    end_size: int,
    base_table: Optional[Iterable[AnchorLike]],
    penalty_config: Optional[PenaltyTierConfig] = None,
) -> list[RangeEntry]:
    """
    Resolve every integer size in [start_size, end_size].

    The table is normalized once for the whole range. Returns an empty list
    when start_size > end_size.

    Raises:
        TypeError: if either bound is not an integer
    """
    start = operator.index(start_size)
    end = operator.index(end_size)
    if penalty_config is None:
        penalty_config = DEFAULT_PENALTY_CONFIG
    table, table_error = _prepare(base_table, penalty_config)

    return [
        RangeEntry(size=size, result=_resolve_one(size, table, table_error, penalty_config))
        for size in range(start, end + 1)
    ]


class PriceResolver:
    """
    Resolver bound to application settings.

    Uses the configured penalty tiers and currency formatting so callers
    don't have to thread them through every call.
    """

    def __init__(self, settings: Optional['Settings'] = None):
        from ..config.settings import get_settings
        self.settings = settings or get_settings()
        self.penalty_config = self.settings.penalty_config()

    def resolve(self, target_size: float, base_table: Iterable[AnchorLike]) -> CalculationResult:
        return resolve_price(target_size, base_table, self.penalty_config)

    def resolve_range(self, start_size: int, end_size: int, base_table: Iterable[AnchorLike]) -> list[RangeEntry]:
        return resolve_price_range(start_size, end_size, base_table, self.penalty_config)

    def validate(self, base_table: Iterable[AnchorLike]) -> ValidationResult:
        return validate_base_table(base_table)

    def format(self, price: float, with_currency_symbol: bool = True) -> str:
        """Format a price with the configured symbol and separator."""
        return format_price(
            price,
            with_currency_symbol=with_currency_symbol,
            currency_symbol=self.settings.currency_symbol,
            thousands_separator=self.settings.thousands_separator,
        )
