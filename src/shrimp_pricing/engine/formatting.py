"""
Price formatting helpers.

format_amount() is what the engine uses inside breakdown text; format_price()
is the display helper for callers and groups the Indonesian way (Rp88.000).
"""
import math
from numbers import Real
from typing import Optional


CURRENCY_SYMBOL = "Rp"

# Breakdown amounts show at most this many decimals
MAX_FRACTION_DIGITS = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def format_amount(value: float, thousands_separator: str = ",", decimal_separator: Optional[str] = None) -> str:
    """
    Format a number with thousands grouping.

    Integral values print without decimals; others keep up to three
    fraction digits with trailing zeros removed.
    """
    if decimal_separator is None:
        decimal_separator = "," if thousands_separator == "." else "."

    if float(value).is_integer():
        text = f"{int(value):,}"
    else:
        text = f"{value:,.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"

    if thousands_separator == "," and decimal_separator == ".":
        return text
    # Swap through a placeholder so "," and "." can trade places
    return (
        text.replace(",", "\x00")
        .replace(".", decimal_separator)
        .replace("\x00", thousands_separator)
    )


def format_price(
    price: float,
    with_currency_symbol: bool = True,
    currency_symbol: str = CURRENCY_SYMBOL,
    thousands_separator: str = ".",
) -> str:
    """
    Format a price for display.

    Args:
        price: Price in Rupiah
        with_currency_symbol: Prefix the currency symbol (default: True)
        currency_symbol: Symbol to prefix, "Rp" unless overridden
        thousands_separator: "." (Indonesian, decimals after ",") by default,
            "," for the breakdown-style grouping

    Returns:
        Formatted price string, e.g. "Rp88.000"
    """
    if isinstance(price, bool) or not isinstance(price, Real):
        raise TypeError(f"price must be a number, got {type(price).__name__}")
    if not math.isfinite(price):
        raise ValueError(f"price must be finite, got {price}")

    formatted = format_amount(price, thousands_separator=thousands_separator)
    return f"{currency_symbol}{formatted}" if with_currency_symbol else formatted


def rupiah(value: float) -> str:
    """Breakdown shorthand: "Rp" + grouped amount."""
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"
