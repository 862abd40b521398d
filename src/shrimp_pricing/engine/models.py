"""
Data models for the price resolver.

Uses frozen dataclasses so every value handed back to a caller is immutable.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Global size floor, applied regardless of the anchor table's minimum
MINIMUM_SUPPORTED_SIZE = 20

# Width of each penalty band above the largest anchor size
PENALTY_BAND_WIDTH = 50

DEFAULT_TIER1_RATE = 200
DEFAULT_TIER2_RATE = 400
DEFAULT_TIER3_RATE = 900


class CalculationKind(str, Enum):
    """How a price was produced."""
    EXACT = "exact"
    INTERPOLATED = "interpolated"
    PENALTY = "penalty"
    ERROR = "error"


@dataclass(frozen=True)
class AnchorPoint:
    """A manager-supplied (size, price) point on the pricing curve."""
    size: float
    price: float

    @classmethod
    def from_dict(cls, row: dict) -> 'AnchorPoint':
        """Create an AnchorPoint from a {"size": ..., "price": ...} mapping."""
        return cls(size=row.get('size'), price=row.get('price'))


@dataclass(frozen=True)
class PenaltyTierConfig:
    """Per-size price reduction for the three bands above the largest anchor."""
    tier1_rate: float = DEFAULT_TIER1_RATE
    tier2_rate: float = DEFAULT_TIER2_RATE
    tier3_rate: float = DEFAULT_TIER3_RATE

    @property
    def rates(self) -> tuple:
        return (self.tier1_rate, self.tier2_rate, self.tier3_rate)


DEFAULT_PENALTY_CONFIG = PenaltyTierConfig()


@dataclass(frozen=True)
class CalculationResult:
    """Tagged outcome of a single price resolution."""
    price: float
    kind: CalculationKind
    formula: str
    breakdown: str
    error_code: Optional[str] = None  # set only when kind is ERROR

    @property
    def is_error(self) -> bool:
        return self.kind is CalculationKind.ERROR

    @property
    def breakdown_lines(self) -> list[str]:
        """Breakdown split into its display lines."""
        return self.breakdown.split("\n")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for JSON consumers."""
        return {
            "price": self.price,
            "type": self.kind.value,
            "formula": self.formula,
            "breakdown": self.breakdown,
            "error_code": self.error_code,
        }

    @classmethod
    def error(cls, code: str, formula: str, breakdown: str) -> 'CalculationResult':
        return cls(
            price=0,
            kind=CalculationKind.ERROR,
            formula=formula,
            breakdown=breakdown,
            error_code=code,
        )


@dataclass(frozen=True)
class RangeEntry:
    """One row of a range evaluation."""
    size: int
    result: CalculationResult


@dataclass
class ValidationResult:
    """Result of pre-submission base table validation."""
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: str):
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        self.warnings.append(warning)
