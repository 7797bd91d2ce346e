"""
Canonical string representation of byte sizes.
"""

from fractions import Fraction

from huby.exceptions import InvalidValueError
from huby.units import U64_MAX, UnitFamily, check_range, family_units

DEFAULT_PRECISION = 2

_HALF = Fraction(1, 2)


def format_bytes(value: int, binary: bool = False, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a value in bytes into canonical representation (e.g. "1GB", "1.5KiB", "512B").

    The largest unit not exceeding the value is used. Values that are whole multiples of
    KB (KiB for binary units) are written exactly, other ones are rounded to the given
    number of fractional digits. Trailing zeros are trimmed and no space separates
    the number and the unit, so the result is accepted by the parser.
    """
    check_range(value)
    if precision < 0:
        raise InvalidValueError(f"Precision can't be negative: {precision}")

    family = UnitFamily.BINARY if binary else UnitFamily.DECIMAL
    units = family_units(family)
    if value < units[1].multiplier:
        return f"{value}B"

    exact = value % units[1].multiplier == 0
    index = max(i for i, unit in enumerate(units) if unit.multiplier <= value)
    while True:
        unit = units[index]
        quotient = Fraction(value, unit.multiplier)
        if not exact:
            quotient = _round(quotient, precision)
            if quotient * unit.multiplier > U64_MAX:
                # Rounding up must not produce a value that can't be parsed back.
                quotient = _round(Fraction(value, unit.multiplier), precision, down=True)
        # Rounding may reach the next unit, e.g. 999999 bytes -> 1000KB -> 1MB.
        if quotient < family.base or index == len(units) - 1:
            break
        index += 1

    return _to_decimal_str(quotient) + unit.symbol


def _round(value: Fraction, precision: int, down: bool = False) -> Fraction:
    factor = 10**precision
    return Fraction(int(value * factor + (0 if down else _HALF)), factor)


def _to_decimal_str(value: Fraction) -> str:
    """
    Write fraction with a finite decimal expansion in positional notation.
    """
    digits = 0
    while (value * 10**digits).denominator != 1:
        digits += 1

    whole, remainder = divmod((value * 10**digits).numerator, 10**digits)
    fraction = str(remainder).rjust(digits, "0").rstrip("0") if digits else ""
    return f"{whole}.{fraction}" if fraction else str(whole)
