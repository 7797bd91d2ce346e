"""
Unit scale used for parsing and formatting of byte sizes.
"""

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Dict, Optional, Tuple, Union

from huby.exceptions import ByteSizeOverflowError, InvalidValueError, UnknownUnitError

U64_MAX = 2**64 - 1

_HALF = Fraction(1, 2)


class UnitFamily(Enum):
    """
    Unit families.
    """

    DECIMAL = "decimal"
    BINARY = "binary"

    @property
    def base(self) -> int:
        """
        Ratio between adjacent units of the family.
        """
        return 1024 if self is UnitFamily.BINARY else 1000


@dataclass(frozen=True)
class Unit:
    """
    Unit of byte size.
    """

    symbol: str
    multiplier: int
    family: UnitFamily


BYTE = Unit("B", 1, UnitFamily.DECIMAL)

KB = Unit("KB", 1000, UnitFamily.DECIMAL)
MB = Unit("MB", 1000**2, UnitFamily.DECIMAL)
GB = Unit("GB", 1000**3, UnitFamily.DECIMAL)
TB = Unit("TB", 1000**4, UnitFamily.DECIMAL)
PB = Unit("PB", 1000**5, UnitFamily.DECIMAL)

KIB = Unit("KiB", 1024, UnitFamily.BINARY)
MIB = Unit("MiB", 1024**2, UnitFamily.BINARY)
GIB = Unit("GiB", 1024**3, UnitFamily.BINARY)
TIB = Unit("TiB", 1024**4, UnitFamily.BINARY)
PIB = Unit("PiB", 1024**5, UnitFamily.BINARY)

# B is shared by both families.
_FAMILIES: Dict[UnitFamily, Tuple[Unit, ...]] = {
    UnitFamily.DECIMAL: (BYTE, KB, MB, GB, TB, PB),
    UnitFamily.BINARY: (BYTE, KIB, MIB, GIB, TIB, PIB),
}

_UNITS_BY_SYMBOL: Dict[str, Unit] = {
    unit.symbol.lower(): unit for units in _FAMILIES.values() for unit in units
}

UnitLike = Union[Unit, str]


def family_units(family: UnitFamily) -> Tuple[Unit, ...]:
    """
    Return units of the family ordered by multiplier, starting with bytes.
    """
    return _FAMILIES[family]


def find_unit(symbol: str) -> Optional[Unit]:
    """
    Case-insensitive lookup of unit by its symbol. Empty symbol means bytes.
    """
    if not symbol:
        return BYTE
    return _UNITS_BY_SYMBOL.get(symbol.lower())


def get_unit(unit: UnitLike) -> Unit:
    """
    Resolve unit or unit symbol into unit.
    """
    if isinstance(unit, Unit):
        return unit

    result = find_unit(unit)
    if result is None:
        raise UnknownUnitError(unit, unit)
    return result


def check_range(value: int) -> int:
    """
    Validate that the value fits into an unsigned 64-bit byte count.
    """
    if value < 0:
        raise InvalidValueError(f"Byte size can't be negative: {value}")
    if value > U64_MAX:
        raise ByteSizeOverflowError(f"Byte size {value} exceeds {U64_MAX} bytes")
    return value


def scale(magnitude: int, unit: UnitLike) -> int:
    """
    Convert a whole number of units into bytes.
    """
    if isinstance(magnitude, bool) or not isinstance(magnitude, int):
        raise TypeError(f"Expected integer magnitude, got {type(magnitude).__name__}")
    return check_range(magnitude * get_unit(unit).multiplier)


def scale_fraction(magnitude: Union[float, Fraction], unit: UnitLike) -> int:
    """
    Convert a fractional number of units into bytes.

    The exact product is rounded to the nearest byte, ties away from zero.
    """
    if isinstance(magnitude, bool) or not isinstance(magnitude, (int, float, Fraction)):
        raise TypeError(f"Expected numeric magnitude, got {type(magnitude).__name__}")
    if isinstance(magnitude, float) and not math.isfinite(magnitude):
        raise InvalidValueError(f"Magnitude must be finite, got {magnitude}")

    exact = Fraction(magnitude)
    if exact < 0:
        raise InvalidValueError(f"Magnitude can't be negative: {magnitude}")

    return check_range(math.floor(exact * get_unit(unit).multiplier + _HALF))
