"""
Library for handling byte sizes: parsing, formatting, arithmetic and serialization.
"""

from loguru import logger

from .bytesize import ByteSize
from .cli import cli as main
from .exceptions import (
    ByteSizeOverflowError,
    ByteSizeParseError,
    HubyError,
    InvalidFormatError,
    InvalidValueError,
    NoNumberError,
    SerializationError,
    UnderflowError,
    UnknownUnitError,
)
from .units import U64_MAX, Unit, UnitFamily
from .version import __version__

# Library stays silent until logging is configured explicitly (see huby.logging.configure).
logger.disable("huby")
