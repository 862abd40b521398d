"""Engine subpackage - size to price resolution."""
from .base_table import find_exact_match, normalize_base_table, validate_base_table
from .errors import (
    InvalidPenaltyConfigError,
    InvalidTableError,
    InvalidTargetTypeError,
    PricingError,
    SizeTooSmallError,
)
from .formatting import format_price
from .models import (
    AnchorPoint,
    CalculationKind,
    CalculationResult,
    DEFAULT_PENALTY_CONFIG,
    MINIMUM_SUPPORTED_SIZE,
    PENALTY_BAND_WIDTH,
    PenaltyTierConfig,
    RangeEntry,
    ValidationResult,
)
from .resolver import PriceResolver, resolve_price, resolve_price_range

__all__ = [
    'PriceResolver', 'resolve_price', 'resolve_price_range',
    'validate_base_table', 'normalize_base_table', 'find_exact_match', 'format_price',
    'AnchorPoint', 'PenaltyTierConfig', 'CalculationKind', 'CalculationResult',
    'RangeEntry', 'ValidationResult', 'DEFAULT_PENALTY_CONFIG',
    'MINIMUM_SUPPORTED_SIZE', 'PENALTY_BAND_WIDTH',
    'PricingError', 'InvalidTableError', 'SizeTooSmallError',
    'InvalidTargetTypeError', 'InvalidPenaltyConfigError',
]
