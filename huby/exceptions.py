"""
Errors specific to huby.
"""


class HubyError(Exception):
    """
    Base class for huby related errors.
    """


class ByteSizeParseError(HubyError, ValueError):
    """
    Text can't be converted into a byte size.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f'Invalid byte size "{text}": {reason}')
        self.text = text
        self.reason = reason


class NoNumberError(ByteSizeParseError):
    """
    No numeric literal at the start of the input.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text, "no number found")


class UnknownUnitError(ByteSizeParseError):
    """
    Trailing text doesn't match any known unit symbol.
    """

    def __init__(self, text: str, unit: str) -> None:
        super().__init__(text, f'unknown unit "{unit}"')
        self.unit = unit


class InvalidFormatError(ByteSizeParseError):
    """
    Malformed input (empty string, several decimal points, unit without a number, etc.).
    """


class ByteSizeOverflowError(HubyError, OverflowError):
    """
    Value exceeds the range of an unsigned 64-bit byte count.
    """


class InvalidValueError(HubyError, ValueError):
    """
    Negative or non-finite magnitude.
    """


class UnderflowError(HubyError, ArithmeticError):
    """
    Subtraction would produce a negative byte count.
    """


class SerializationError(HubyError, ValueError):
    """
    Serialized representation of a byte size can't be loaded.
    """


class ConfigurationError(HubyError):
    """
    Configuration errors (e.g. invalid value of configuration parameter).
    """
