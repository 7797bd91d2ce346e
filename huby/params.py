"""
ParamType declarations.
"""

import json
import re

from click import ParamType

from huby.bytesize import ByteSize
from huby.exceptions import HubyError
from huby.units import Unit, get_unit


class ByteSizeParamType(ParamType):
    """
    Byte size type for command-line parameters (e.g. "1.5 GB", "512KiB", "100").
    """

    name = "size"

    def convert(self, value, param, ctx):
        """
        Convert input value into byte size.
        """
        if isinstance(value, ByteSize):
            return value
        try:
            return ByteSize.parse(value)
        except HubyError as e:
            self.fail(f'"{value}" is not a valid byte size: {str(e)}', param, ctx)


class UnitParamType(ParamType):
    """
    Unit symbol type for command-line parameters. Symbols are case-insensitive.
    """

    name = "unit"

    def convert(self, value, param, ctx):
        """
        Convert unit symbol into unit.
        """
        if isinstance(value, Unit):
            return value
        try:
            return get_unit(value)
        except HubyError:
            self.fail(f'"{value}" is not a known unit', param, ctx)


class JsonParamType(ParamType):
    """
    JsonParamType type for command-line parameter for JSON value.
    """

    name = "json"

    def convert(self, value, param, ctx):
        try:
            if re.fullmatch(
                r'\s*([\[{"].*|true|false|null|\d+(\.\d+)?)\s*',
                value,
                re.MULTILINE | re.DOTALL,
            ):
                return json.loads(value)
            return value.strip()
        except json.JSONDecodeError:
            self.fail(f'"{value}" is not a valid json value', param, ctx)


BYTE_SIZE = ByteSizeParamType()
UNIT = UnitParamType()
