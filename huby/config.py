"""
config module defines Config class and default values
"""

import copy
from typing import Any

import yaml
from loguru import logger

from huby.bytesize import ByteSize
from huby.exceptions import ConfigurationError, HubyError

DEFAULT_CONFIG = {
    "format": {
        # Use binary units (KiB, MiB, ...) instead of decimal ones (KB, MB, ...).
        "binary": False,
        # Number of fractional digits kept for values that are not exact unit multiples.
        "precision": 2,
    },
    "loguru": {
        "formatters": {
            "huby": "{time:YYYY-MM-DD H:m:s,SSS} {process.id:5} [{level:8}] {extra[logger_name]}: {message}",
        },
        "handlers": {
            "huby": {
                "sink": "stderr",
                "level": "WARNING",
                "format": "huby",
            },
        },
    },
}


class Config:
    """
    Config for all components
    """

    def __init__(self, config_file: str = None) -> None:
        self._conf = copy.deepcopy(DEFAULT_CONFIG)
        if config_file:
            self._read_config(file_name=config_file)

    def _recursively_update(self, base_dict, update_dict):
        for key, value in update_dict.items():
            if isinstance(value, dict):
                if not isinstance(base_dict.get(key), dict):
                    base_dict[key] = {}
                self._recursively_update(base_dict[key], update_dict[key])
            else:
                base_dict[key] = value

    def merge(self, patch_dict):
        """
        Merge config with the patch.
        """
        self._recursively_update(self._conf, update_dict=patch_dict)
        return self._conf

    def _read_config(self, file_name):
        with open(file_name, "r", encoding="utf-8") as fileobj:
            try:
                custom_config = yaml.safe_load(fileobj)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to load config file: {e}") from e

        if custom_config is None:
            return
        if not isinstance(custom_config, dict):
            raise ConfigurationError(
                f"Config file {file_name} must contain a mapping, got {type(custom_config).__name__}"
            )
        self._recursively_update(self._conf, custom_config)

    def __getitem__(self, item):
        try:
            return self._conf[item]
        except KeyError:
            logger.critical('Config item "{}" was not defined', item)
            raise

    def __setitem__(self, item, value):
        self._conf[item] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Returns value by key or default
        """

        return self._conf.get(key, default)

    def get_size(self, path: str, default: ByteSize = None) -> ByteSize:
        """
        Returns byte size by dot separated path (e.g. "storage.chunk_size").

        Values may be specified as strings ("8 MiB") or as numbers of bytes.
        """
        value: Any = self._conf
        for key in path.split("."):
            if not isinstance(value, dict) or key not in value:
                if default is not None:
                    return default
                raise ConfigurationError(f'Config item "{path}" was not defined')
            value = value[key]

        try:
            if isinstance(value, ByteSize):
                return value
            if isinstance(value, int) and not isinstance(value, bool):
                return ByteSize.from_bytes(value)
            if isinstance(value, str):
                return ByteSize.parse(value)
        except HubyError as e:
            raise ConfigurationError(f'Invalid byte size in config item "{path}": {e}') from e

        raise ConfigurationError(
            f'Config item "{path}" must be a byte size, got {type(value).__name__}'
        )
