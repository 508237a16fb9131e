from __future__ import annotations

import re

from .domain import FixedPointAmount

_DECIMAL_PATTERN = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")

# Digits converted per int<->str step; below the interpreter's conversion limit.
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    """Decimal digits of a non-negative integer of any size."""
    chunks = []
    while value >= _CHUNK:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(str(chunk).rjust(_CHUNK_DIGITS, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def scale_to_decimals(value: int, decimals: int, target_decimals: int) -> int:
    """Rescale an integer amount between decimal precisions.

    Args:
        value: Integer amount expressed with ``decimals`` decimal places.
        decimals: Current decimal precision of ``value``.
        target_decimals: Desired decimal precision.

    Returns:
        The amount expressed with ``target_decimals`` decimal places.

    Notes:
        - Scaling up multiplies by 10**(target_decimals - decimals).
        - Scaling down uses integer division (truncates toward zero).
    """
    if decimals == target_decimals:
        return value
    if decimals < target_decimals:
        return value * (10 ** (target_decimals - decimals))
    factor = 10 ** (decimals - target_decimals)
    if value < 0:
        return -(-value // factor)
    return value // factor


def convert_fixed_point(
    value: FixedPointAmount, target_decimals: int
) -> FixedPointAmount:
    """Return ``value`` rescaled to ``target_decimals``."""
    return FixedPointAmount(
        amount=scale_to_decimals(value.amount, value.decimals, target_decimals),
        decimals=target_decimals,
    )


def parse_to_fixed_point(text: str) -> FixedPointAmount | None:
    """Parse a non-negative decimal string at its own natural scale.

    ``"1.50"`` parses to ``FixedPointAmount(150, 2)``. Signs, digit grouping,
    exponents and embedded whitespace are rejected, as is a string without any
    digit. Returns ``None`` when the string is not a well-formed amount.
    """
    match = _DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        return None

    whole = match.group("whole")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        return None

    return FixedPointAmount(
        amount=_digits_to_int(whole + fraction), decimals=len(fraction)
    )


def fixed_point_to_string(
    value: FixedPointAmount, trim_trailing_zeros: bool = True
) -> str:
    """Render a fixed-point amount as an exact decimal string.

    Examples:
        FixedPointAmount(1_230_000, 6) -> "1.23"
        FixedPointAmount(1, 6) -> "0.000001"
        FixedPointAmount(5, 0) -> "5"
    """
    sign = "-" if value.amount < 0 else ""
    digits = _int_to_digits(abs(value.amount)).rjust(value.decimals + 1, "0")

    split = len(digits) - value.decimals
    whole, fraction = digits[:split], digits[split:]
    if trim_trailing_zeros:
        fraction = fraction.rstrip("0")

    if fraction:
        return f"{sign}{whole}.{fraction}"
    return f"{sign}{whole}"
