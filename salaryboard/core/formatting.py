"""Helper functions for formatting numbers and currency amounts."""

from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

from salaryboard.models.reference import DEFAULT_REFERENCE_DATA

_UNITS = [
    (Decimal("1e12"), "trillion", "T"),
    (Decimal("1e9"), "billion", "B"),
    (Decimal("1e6"), "million", "M"),
    (Decimal("1e3"), "thousand", "k"),
]


def round_half_up(value: int | float | Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""

    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def humanize_number(
    value: int | float | Decimal,
    short: bool = False,
    decimals: int = 1
) -> str:
    """Format a number with human-readable units.

    Args:
        value: The number to format
        short: If True, use short suffixes (k, M, B, T) instead of full words
        decimals: Number of decimal places to show
    """
    d = Decimal(str(value))
    sign = "-" if d < 0 else ""
    d = abs(d)

    def _format_plain_number() -> str:
        if d == d.to_integral():
            whole = format(d, "f")
            if "." in whole:
                whole = whole.rstrip("0").rstrip(".") or "0"
            return f"{sign}{whole}"
        return f"{sign}{d:.{decimals}f}"

    if d < Decimal("1e4"):
        return _format_plain_number()

    for threshold, long_name, short_name in _UNITS:
        if d >= threshold:
            if short:
                return f"{sign}{(d / threshold):.{decimals}f}{short_name}"
            return f"{sign}{(d / threshold):.{decimals}f} {long_name}"

    return _format_plain_number()


def _prefix(code: str, symbols: Mapping[str, str]) -> str:
    symbol = symbols.get(code)
    if not symbol:
        return f"{code} "
    # Letter symbols ("CHF", "Rs") read better separated from the digits.
    return f"{symbol} " if symbol[-1].isalpha() else symbol


def format_currency(
    amount: int | float | Decimal,
    code: str,
    symbols: Mapping[str, str] | None = None,
    *,
    compact: bool = False,
) -> str:
    """Render ``amount`` prefixed by the display symbol of ``code``.

    Unknown codes never raise; the bare code is used as the prefix instead.

    Args:
        amount: The amount to render
        code: ISO-like currency code, e.g. ``"USD"``
        symbols: ``code -> symbol`` table (defaults to the built-in currency table)
        compact: If True, use short units (``$1.2M``) instead of full digit grouping
    """
    table = symbols if symbols is not None else DEFAULT_REFERENCE_DATA.currency_symbols
    prefix = _prefix(code, table)

    if compact:
        rendered = humanize_number(amount, short=True)
    else:
        rendered = f"{abs(round_half_up(amount)):,}"
    if rendered.startswith("-"):
        return f"-{prefix}{rendered[1:]}"
    if not compact and Decimal(str(amount)) < 0 and rendered != "0":
        return f"-{prefix}{rendered}"
    return f"{prefix}{rendered}"
