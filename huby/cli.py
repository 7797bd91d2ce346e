# -*- coding: utf-8 -*-
"""
Command-line interface.
"""
import json
import sys
import typing
from collections import OrderedDict
from functools import wraps
from typing import Iterable, Tuple

from click import Choice, ClickException, IntRange, Path, argument, pass_context
from cloup import Color, Context, HelpFormatter, HelpTheme, Style, group, option
from tabulate import tabulate

from . import logging
from .bytesize import ByteSize
from .config import Config
from .exceptions import ConfigurationError, HubyError
from .formatting import humanize
from .params import BYTE_SIZE, UNIT, JsonParamType
from .units import Unit
from .version import get_version


@group(
    context_settings=Context.settings(
        help_option_names=["-h", "--help"],
        terminal_width=100,
        align_option_groups=False,
        align_sections=True,
        formatter_settings=HelpFormatter.settings(
            row_sep="",  # empty line between definitions
            theme=HelpTheme(
                invoked_command=Style(fg=Color.bright_green),  # type: ignore
                heading=Style(fg=Color.bright_white, bold=True),  # type: ignore
                col1=Style(fg=Color.bright_yellow),  # type: ignore
                section_help=Style(italic=True),  # type: ignore
            ),
        ),
    )
)
@option(
    "-c",
    "--config",
    type=Path(exists=True),
    default=None,
    help="Configuration file path.",
)
@option(
    "--binary/--decimal",
    default=None,
    help="Format sizes with binary (KiB, MiB, ...) or decimal (KB, MB, ...) units.",
)
@option(
    "--precision",
    type=IntRange(min=0),
    help="Number of fractional digits for sizes that are not exact unit multiples.",
)
@option(
    "--config-parameter",
    "config_parameters",
    multiple=True,
    type=(str, JsonParamType()),
    metavar="PATH VALUE",
    help="Paths and values to override huby config values. "
    'Path should contains a string with dot separated keys (e.g. "format.precision"). '
    "Value should be json-serializable string or plain value (string, true/false, number). "
    "Can be specified multiple times to override several settings.",
)
@pass_context
def cli(
    ctx: Context,
    config: str,
    binary: bool,
    precision: int,
    config_parameters: Iterable[Tuple[str, dict]],
) -> None:
    """Tool for parsing and formatting byte sizes."""
    cfg = Config(config)
    if binary is not None:
        cfg["format"]["binary"] = binary
    if precision is not None:
        cfg["format"]["precision"] = precision

    if config_parameters is not None:
        cli_cfg = _build_cli_cfg_from_config_parameters(config_parameters)
        cfg.merge(cli_cfg)

    logging.configure(cfg["loguru"])

    ctx.obj = {"config": cfg}


def command(*args, **kwargs):
    """
    Decorator for huby cli commands.
    """

    def decorator(f):
        @pass_context
        @wraps(f)
        def wrapper(ctx, *args, **kwargs):
            try:
                logging.info(
                    "Executing command '{}', params: {}, args: {}, version: {}",
                    ctx.command.name,
                    {
                        **ctx.parent.params,
                        **ctx.params,
                    },
                    ctx.args,
                    get_version(),
                )
                result = ctx.invoke(f, ctx, ctx.obj["config"], *args, **kwargs)
                logging.info("Command '{}' completed", ctx.command.name)
                return result
            except HubyError as e:
                logging.error("Command '{}' failed: {}", ctx.command.name, e)
                raise ClickException(str(e)) from e
            except Exception:
                logging.exception("Command '{}' failed", ctx.command.name)
                raise

        return cli.command(*args, **kwargs)(wrapper)

    return decorator


@command(name="parse")
@argument("sizes", metavar="SIZE", nargs=-1, required=True)
@option(
    "--format",
    "format_",
    type=Choice(["table", "json"]),
    default="table",
    help='Output format. The default is "table" format.',
)
def parse_command(
    _ctx: Context, config: Config, sizes: typing.List[str], format_: str
) -> None:
    """Parse sizes and show their byte counts and canonical representation."""
    binary, precision = _format_settings(config)

    records = []
    for text in sizes:
        size = ByteSize.parse(text)
        records.append(
            OrderedDict(
                (
                    ("input", text),
                    ("bytes", size.in_bytes()),
                    ("size", size.format(binary=binary, precision=precision)),
                    ("human", humanize(size, binary=binary)),
                )
            )
        )

    if format_ == "json":
        json.dump(records, sys.stdout, indent=2)
        print()
    else:
        print(tabulate(records, headers="keys"))


@command(name="format")
@argument("values", metavar="BYTES", nargs=-1, required=True, type=IntRange(min=0))
def format_command(
    _ctx: Context, config: Config, values: typing.List[int]
) -> None:
    """Format byte counts into canonical representation."""
    binary, precision = _format_settings(config)

    for value in values:
        print(ByteSize.from_bytes(value).format(binary=binary, precision=precision))


@command(name="convert")
@argument("size", type=BYTE_SIZE)
@option("--to", "unit", type=UNIT, required=True, help="Target unit (e.g. MB, GiB).")
def convert_command(_ctx: Context, config: Config, size: ByteSize, unit: Unit) -> None:
    """Express size in the specified unit."""
    _, precision = _format_settings(config)

    value = f"{size.in_unit(unit):.{precision}f}"
    if "." in value:
        value = value.rstrip("0").rstrip(".")
    print(f"{value}{unit.symbol}")


@command(name="sum")
@argument("sizes", metavar="SIZE", nargs=-1, required=True, type=BYTE_SIZE)
def sum_command(_ctx: Context, config: Config, sizes: typing.List[ByteSize]) -> None:
    """Sum sizes up."""
    binary, precision = _format_settings(config)

    total = sum(sizes, ByteSize(0))
    print(total.format(binary=binary, precision=precision))


@command(name="version")
def version_command(_ctx: Context, _config: Config) -> None:
    """Print huby version."""
    print(get_version())


def _format_settings(config: Config) -> Tuple[bool, int]:
    format_config = config["format"]
    if not isinstance(format_config, dict):
        raise ConfigurationError('Config item "format" must be a mapping')

    binary = format_config.get("binary")
    if not isinstance(binary, bool):
        raise ConfigurationError(
            f'Config item "format.binary" must be a boolean, got {binary!r}'
        )

    precision = format_config.get("precision")
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigurationError(
            f'Config item "format.precision" must be a non-negative integer, got {precision!r}'
        )

    return binary, precision


def _build_cli_cfg_from_config_parameters(values: Iterable[Tuple[str, dict]]) -> dict:
    """
    Build config dict from specified keys and values in plain format.
    Duplicate keys are ignored in favor of the last entry.
    """

    def _split_key(key: str) -> typing.List[str]:
        return key.split(".")

    values_by_uniq_key: typing.Dict[str, dict] = {}
    for key, value in values:
        values_by_uniq_key[key] = value

    values_sorted = sorted(
        values_by_uniq_key.items(), key=lambda x: len(_split_key(x[0]))
    )

    result: dict = {}
    for key, value in values_sorted:
        path = _split_key(key)
        if not path:
            continue

        subresult = result
        for i, subkey in enumerate(path):
            if i != len(path) - 1 and not isinstance(subresult, dict):
                continue

            if i == len(path) - 1:
                subresult[subkey] = value
            elif subkey not in subresult:
                subresult[subkey] = {}
            subresult = subresult[subkey]

    return result
