"""
Logging module.
"""

import inspect
import logging
import sys
from typing import Any

from loguru import logger

_STREAM_SINKS = ("stderr", "stdout")


class Filter:
    """
    Filter for loguru handler.
    """

    def __init__(self, name):
        self._name = name

    def __call__(self, record):
        """
        Filter callback to decide for each logged message whether it should be sent to the sink or not.
        """

        return record["extra"].get("logger_name") == self._name


def make_filter(name):
    """
    Factory for filter creation.
    """

    return Filter(name)


class InterceptHandler(logging.Handler):
    """
    Helper class for logging interception.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Intercept all records from the logging module and redirect them into loguru.

        The handler for loguru will be chosen based on module name.
        """

        # Get corresponding Loguru level if it exists.
        level: Any
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def _resolve_sink(sink: Any) -> Any:
    """
    Replace stream names with actual streams. Other values (file paths, callables) are passed as is.
    """
    if isinstance(sink, str) and sink in _STREAM_SINKS:
        # Resolved on every configure() call.
        return getattr(sys, sink)
    return sink


def configure(config_loguru: dict) -> None:
    """
    Configure logger.
    """
    # Configure loguru.
    loguru_handlers = []

    for name, value in config_loguru["handlers"].items():
        handler = {
            "sink": _resolve_sink(value["sink"]),
            "format": config_loguru["formatters"][value["format"]],
            "diagnose": False,
        }
        if "level" in value:
            handler["level"] = value["level"]

        if "filter" in value:
            handler["filter"] = dict(value["filter"])
            # A dict filter maps module names to minimum levels, "" module name sets the default.
            handler["filter"][""] = False
        else:
            handler["filter"] = make_filter(name)
        loguru_handlers.append(handler)

    logger.configure(handlers=loguru_handlers, activation=[("", True)])

    # Configure logging.
    logging.basicConfig(handlers=[InterceptHandler()], level=0)


def error(msg, *args, **kwargs):
    """
    Log a message with severity 'ERROR'.
    """
    _log("ERROR", msg, args, kwargs)


def exception(msg, *args, **kwargs):
    """
    Log a message with severity 'ERROR' with exception information.
    """
    _log("ERROR", msg, args, kwargs, exc_info=True)


def info(msg, *args, **kwargs):
    """
    Log a message with severity 'INFO'.
    """
    _log("INFO", msg, args, kwargs)


def debug(msg, *args, **kwargs):
    """
    Log a message with severity 'DEBUG'.
    """
    _log("DEBUG", msg, args, kwargs)


def _log(level: str, msg: str, args: tuple, kwargs: dict, exc_info: bool = False) -> None:
    with_exception = kwargs.pop("exc_info", exc_info)
    # depth=2 attributes the record to the caller of the public helper.
    getLogger("huby").opt(exception=with_exception, depth=2).log(level, msg, *args, **kwargs)


# pylint: disable=invalid-name
def getLogger(name: str) -> Any:
    """
    Get logger with specific name.
    """

    return logger.bind(logger_name=name)
