"""
Parsing of human-readable byte sizes.
"""

import re
from fractions import Fraction

from huby.exceptions import (
    ByteSizeOverflowError,
    InvalidFormatError,
    NoNumberError,
    UnknownUnitError,
)
from huby.units import U64_MAX, find_unit, scale, scale_fraction

# Longest numeric prefix: optional sign, digits, at most one decimal point.
_NUMBER_RE = re.compile(r"(?P<sign>[+-]?)(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")

# U64_MAX has 20 digits.
_MAX_INTEGER_DIGITS = 20
# Half a byte written in PiB takes 51 fractional digits, the longest rounding tie.
_MAX_FRACTION_DIGITS = 64


def parse_bytes(text: str) -> int:
    """
    Parse human-readable byte size (e.g. "42.42 KB", "1GiB", "100") into a number of bytes.

    Unit symbols are matched case-insensitively, whitespace between number and unit is optional,
    missing unit means bytes. Whole numbers are scaled exactly, fractional ones are rounded
    to the nearest byte with ties away from zero.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected string, got {type(text).__name__}")

    value = text.strip()
    if not value:
        raise InvalidFormatError(text, "empty input")

    match = _NUMBER_RE.match(value)
    sign, integer, fraction = match.group("sign", "integer", "fraction")

    if not integer and not fraction:
        if find_unit(value) is not None:
            raise InvalidFormatError(text, "unit without a number")
        if fraction is not None:
            raise InvalidFormatError(text, "malformed number")
        raise NoNumberError(text)

    if sign == "-":
        raise InvalidFormatError(text, "negative sizes are not supported")

    rest = value[match.end() :]
    if rest.startswith("."):
        raise InvalidFormatError(text, "multiple decimal points")

    symbol = rest.strip()
    unit = find_unit(symbol)
    if unit is None:
        raise UnknownUnitError(text, symbol)

    if fraction is None:
        return scale(int(_integer_digits(integer)), unit)

    magnitude = Fraction(int(_integer_digits(integer)))
    fraction = _fraction_digits(fraction)
    if fraction:
        magnitude += Fraction(int(fraction), 10 ** len(fraction))
    return scale_fraction(magnitude, unit)


def _integer_digits(digits: str) -> str:
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        raise ByteSizeOverflowError(
            f"Number with {len(digits)} integer digits exceeds {U64_MAX} bytes"
        )
    return digits


def _fraction_digits(digits: str) -> str:
    digits = digits.rstrip("0")
    if len(digits) > _MAX_FRACTION_DIGITS:
        # Truncated tail is non-zero, keep it as a sticky digit.
        digits = digits[:_MAX_FRACTION_DIGITS] + "1"
    return digits
