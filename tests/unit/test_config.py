"""
Unit tests for config module.
"""

import pytest

from huby.bytesize import ByteSize
from huby.config import DEFAULT_CONFIG, Config
from huby.exceptions import ConfigurationError


class TestConfig:
    """
    Tests for Config class.
    """

    def test_defaults(self):
        config = Config()
        assert config["format"] == {"binary": False, "precision": 2}
        assert config["loguru"]["handlers"]["huby"]["sink"] == "stderr"

    def test_defaults_are_not_modified(self):
        config = Config()
        config["format"]["precision"] = 5
        assert DEFAULT_CONFIG["format"]["precision"] == 2

    def test_read_config(self, tmp_path):
        config_file = tmp_path / "huby.yaml"
        config_file.write_text("format:\n  binary: true\n", encoding="utf-8")

        config = Config(str(config_file))
        assert config["format"] == {"binary": True, "precision": 2}

    def test_empty_config_file(self, tmp_path):
        config_file = tmp_path / "huby.yaml"
        config_file.write_text("", encoding="utf-8")

        assert Config(str(config_file))["format"] == DEFAULT_CONFIG["format"]

    @pytest.mark.parametrize("content", ["format: [\n", "- 1\n- 2\n"])
    def test_invalid_config_file(self, tmp_path, content):
        config_file = tmp_path / "huby.yaml"
        config_file.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Config(str(config_file))

    def test_merge(self):
        config = Config()
        config.merge({"format": {"precision": 3}, "limits": {"max": "1 GB"}})

        assert config["format"] == {"binary": False, "precision": 3}
        assert config.get("limits") == {"max": "1 GB"}
        assert config.get("missing", "default") == "default"

    def test_missing_item(self):
        with pytest.raises(KeyError):
            Config()["missing"]  # pylint: disable=expression-not-assigned


class TestGetSize:
    """
    Tests for Config.get_size() method.
    """

    @pytest.fixture
    def config(self):
        config = Config()
        config.merge(
            {
                "limits": {
                    "text": "1.5 GiB",
                    "raw": 1024,
                    "value": ByteSize.from_kb(2),
                    "unknown_unit": "1 XB",
                    "flag": True,
                    "list": ["1GB"],
                },
            }
        )
        return config

    def test_string(self, config):
        assert config.get_size("limits.text") == ByteSize.from_gib_float(1.5)

    def test_number_of_bytes(self, config):
        assert config.get_size("limits.raw") == ByteSize.from_kib(1)

    def test_byte_size(self, config):
        assert config.get_size("limits.value") == ByteSize.from_kb(2)

    @pytest.mark.parametrize(
        "path", ["limits.unknown_unit", "limits.flag", "limits.list", "limits.missing"]
    )
    def test_invalid(self, config, path):
        with pytest.raises(ConfigurationError):
            config.get_size(path)

    def test_default(self, config):
        default = ByteSize.from_mb(8)
        assert config.get_size("limits.missing", default) == default
        assert config.get_size("format.precision.nested", default) == default
