"""
Pricing error taxonomy.

These are raised inside the engine and converted into ERROR results by the
resolver, so callers only ever branch on CalculationResult.kind.
"""


class PricingError(ValueError):
    """Base class for expected pricing failures."""
    code = "CalculationError"
    formula = "Calculation Error"

    def __init__(self, message: str, formula: str = None):
        super().__init__(message)
        self.message = message
        if formula is not None:
            self.formula = formula


class InvalidTableError(PricingError):
    """The anchor table is empty or has a malformed entry."""
    code = "InvalidTable"
    formula = "Invalid base pricing"


class SizeTooSmallError(PricingError):
    """Target is below the global floor or the table's smallest size."""
    code = "SizeTooSmall"
    formula = "Size too small"


class InvalidTargetTypeError(PricingError):
    """Target size is not a finite positive number."""
    code = "InvalidTargetType"
    formula = "Invalid Input"


class InvalidPenaltyConfigError(PricingError):
    """A penalty tier rate is not a finite non-negative number."""
    code = "InvalidPenaltyConfig"
    formula = "Invalid penalty configuration"
