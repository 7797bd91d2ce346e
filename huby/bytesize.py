"""
ByteSize value type.
"""

from dataclasses import dataclass
from typing import Any, Union

from huby.exceptions import ByteSizeOverflowError, InvalidValueError, UnderflowError
from huby.formatter import DEFAULT_PRECISION, format_bytes
from huby.parser import parse_bytes
from huby.units import (
    GB,
    GIB,
    KB,
    KIB,
    MB,
    MIB,
    PB,
    PIB,
    TB,
    TIB,
    U64_MAX,
    UnitLike,
    check_range,
    get_unit,
    scale,
    scale_fraction,
)

Number = Union[int, float]


@dataclass(frozen=True, order=True)
class ByteSize:
    """
    Exact non-negative number of bytes that fits into an unsigned 64-bit integer.

    Values are immutable, equality, ordering and hashing are defined by the byte count only.
    Arithmetic never wraps: results outside of the byte range raise an exception.

    Example:
    ```
    >>> ByteSize.parse("42.42 KB") == ByteSize.from_kb_float(42.42)
    True
    >>> str(ByteSize.from_gb(1))
    '1GB'
    >>> ByteSize.from_kib(1) + ByteSize.from_bytes(512)
    ByteSize(value=1536)
    ```
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Byte count must be an integer, got {type(self.value).__name__}"
            )
        check_range(self.value)

    @classmethod
    def from_bytes(cls, value: int) -> "ByteSize":
        """
        Create byte size from a number of bytes.
        """
        return cls(value)

    @classmethod
    def from_bits(cls, value: int) -> "ByteSize":
        """
        Create byte size from a number of bits. Incomplete bytes are dropped.
        """
        if value < 0:
            raise InvalidValueError(f"Number of bits can't be negative: {value}")
        return cls(value // 8)

    @classmethod
    def from_unit(cls, value: int, unit: UnitLike) -> "ByteSize":
        """
        Create byte size from a whole number of units (e.g. `from_unit(3, "MiB")`).
        """
        return cls(scale(value, unit))

    @classmethod
    def from_unit_float(cls, value: Number, unit: UnitLike) -> "ByteSize":
        """
        Create byte size from a fractional number of units.

        The result is rounded to the nearest byte, ties away from zero.
        """
        return cls(scale_fraction(value, unit))

    @classmethod
    def from_kb(cls, value: int) -> "ByteSize":
        """
        Create byte size from a number of kilobytes (1000 bytes).
        """
        return cls.from_unit(value, KB)

    @classmethod
    def from_kb_float(cls, value: Number) -> "ByteSize":
        """
        Create byte size from a fractional number of kilobytes (1000 bytes).
        """
        return cls.from_unit_float(value, KB)

    @classmethod
    def from_mb(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, MB)

    @classmethod
    def from_mb_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, MB)

    @classmethod
    def from_gb(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, GB)

    @classmethod
    def from_gb_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, GB)

    @classmethod
    def from_tb(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, TB)

    @classmethod
    def from_tb_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, TB)

    @classmethod
    def from_pb(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, PB)

    @classmethod
    def from_pb_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, PB)

    @classmethod
    def from_kib(cls, value: int) -> "ByteSize":
        """
        Create byte size from a number of kibibytes (1024 bytes).
        """
        return cls.from_unit(value, KIB)

    @classmethod
    def from_kib_float(cls, value: Number) -> "ByteSize":
        """
        Create byte size from a fractional number of kibibytes (1024 bytes).
        """
        return cls.from_unit_float(value, KIB)

    @classmethod
    def from_mib(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, MIB)

    @classmethod
    def from_mib_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, MIB)

    @classmethod
    def from_gib(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, GIB)

    @classmethod
    def from_gib_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, GIB)

    @classmethod
    def from_tib(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, TIB)

    @classmethod
    def from_tib_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, TIB)

    @classmethod
    def from_pib(cls, value: int) -> "ByteSize":
        return cls.from_unit(value, PIB)

    @classmethod
    def from_pib_float(cls, value: Number) -> "ByteSize":
        return cls.from_unit_float(value, PIB)

    @classmethod
    def parse(cls, text: str) -> "ByteSize":
        """
        Create byte size from its human-readable representation (e.g. "1.5 MB", "10KiB", "100").
        """
        return cls(parse_bytes(text))

    def format(self, binary: bool = False, precision: int = DEFAULT_PRECISION) -> str:
        """
        Return canonical representation of the byte size (e.g. "1GB").
        """
        return format_bytes(self.value, binary=binary, precision=precision)

    def in_bytes(self) -> int:
        """
        Return the value in bytes.
        """
        return self.value

    def in_unit(self, unit: UnitLike) -> float:
        """
        Return the value expressed in the given unit (e.g. 1.5 for 1536 bytes in KiB).
        """
        return self.value / get_unit(unit).multiplier

    def add(self, other: "ByteSize") -> "ByteSize":
        """
        Return the sum of byte sizes.
        """
        total = self.value + other.value
        if total > U64_MAX:
            raise ByteSizeOverflowError(f"Sum of {self} and {other} exceeds {U64_MAX} bytes")
        return ByteSize(total)

    def subtract(self, other: "ByteSize") -> "ByteSize":
        """
        Return the difference of byte sizes.
        """
        if other.value > self.value:
            raise UnderflowError(f"Can't subtract {other} from {self}")
        return ByteSize(self.value - other.value)

    def compare(self, other: "ByteSize") -> int:
        """
        Return -1, 0 or 1 if the byte size is less than, equal to or greater than the other one.
        """
        return (self.value > other.value) - (self.value < other.value)

    def __add__(self, other: Any) -> "ByteSize":
        if not isinstance(other, ByteSize):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "ByteSize":
        # Allows sum() over byte sizes.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Any) -> "ByteSize":
        if not isinstance(other, ByteSize):
            return NotImplemented
        return self.subtract(other)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.format()
