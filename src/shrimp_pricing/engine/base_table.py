"""
Base table handling - normalization, exact lookup and pre-submission checks.

A base table is the list of GM-entered (size, price) anchors. Smaller sizes
are bigger shrimp, so sorting ascending by size walks from the most expensive
end of the curve.
"""
import math
from numbers import Real
from typing import Iterable, Optional, Union

from .errors import InvalidTableError, PricingError
from .models import AnchorPoint, MINIMUM_SUPPORTED_SIZE, ValidationResult


AnchorLike = Union[AnchorPoint, dict]


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _coerce_anchor(entry: AnchorLike) -> AnchorPoint:
    if isinstance(entry, AnchorPoint):
        return entry
    if isinstance(entry, dict):
        return AnchorPoint.from_dict(entry)
    raise InvalidTableError(
        f"Invalid pricing entry: expected a size/price pair, got {type(entry).__name__}"
    )


def normalize_base_table(entries: Optional[Iterable[AnchorLike]]) -> list[AnchorPoint]:
    """
    Validate a base table and return a new list sorted by size.

    Duplicates are kept; validate_base_table() reports them separately.

    Raises:
        InvalidTableError: empty table, non-numeric field, size <= 0 or price < 0
    """
    if entries is None:
        raise InvalidTableError("Base pricing data is required")

    try:
        raw_entries = list(entries)
    except TypeError:
        raise InvalidTableError("Base pricing data must be a list of size/price entries")

    anchors = [_coerce_anchor(entry) for entry in raw_entries]
    if not anchors:
        raise InvalidTableError("Base pricing data is required")

    for anchor in anchors:
        if not _is_number(anchor.size) or not _is_number(anchor.price):
            raise InvalidTableError("Invalid pricing entry: size and price must be numbers")
        if anchor.size <= 0 or anchor.price < 0:
            raise InvalidTableError(
                "Invalid pricing entry: size must be positive, price cannot be negative"
            )

    return sorted(anchors, key=lambda a: a.size)


def find_exact_match(table: list[AnchorPoint], target_size: float) -> Optional[AnchorPoint]:
    """Return the first anchor whose size equals target_size, if any."""
    for anchor in table:
        if anchor.size == target_size:
            return anchor
    return None


def max_anchor(table: list[AnchorPoint]) -> AnchorPoint:
    """Largest-size anchor of a normalized table (first one on duplicate sizes)."""
    max_size = table[-1].size
    return find_exact_match(table, max_size)


def validate_base_table(entries: Optional[Iterable[AnchorLike]]) -> ValidationResult:
    """
    Pre-submission validation used by contract forms.

    Not called on the resolve path. Sizes below the supported floor only
    produce a warning.
    """
    result = ValidationResult(is_valid=True)

    try:
        table = normalize_base_table(entries)
    except PricingError as e:
        result.add_error(e.message)
        return result

    if table[0].size < MINIMUM_SUPPORTED_SIZE:
        result.add_warning(f"Minimum size should typically be {MINIMUM_SUPPORTED_SIZE} or higher")

    sizes = [anchor.size for anchor in table]
    if len(sizes) != len(set(sizes)):
        result.add_error("Duplicate sizes found in base pricing")

    return result
