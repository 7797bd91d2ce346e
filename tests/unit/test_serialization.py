"""
Unit tests for serialization module.
"""

import json
from dataclasses import dataclass
from typing import Optional

import pytest
import yaml

from huby.bytesize import ByteSize
from huby.exceptions import (
    ByteSizeOverflowError,
    InvalidFormatError,
    SerializationError,
    UnknownUnitError,
)
from huby.serialization import (
    ByteSizeDumper,
    ByteSizeJSONEncoder,
    StringAdapter,
    deserialize,
    dump_json,
    dump_record,
    dump_yaml,
    load_json,
    load_record,
    load_yaml,
    register_yaml,
    serialize,
)


@dataclass
class Logger:
    path: str
    max_size: ByteSize


@dataclass
class Limits:
    soft: ByteSize
    hard: Optional[ByteSize] = None


@dataclass
class Storage:
    name: str
    limits: Limits


class TestStringAdapter:
    """
    Tests for string conversion of byte sizes.
    """

    def test_serialize(self):
        assert serialize(ByteSize.from_gb(1)) == "1GB"
        assert serialize(ByteSize.from_kb_float(10.42)) == "10.42KB"

    def test_deserialize(self):
        assert deserialize("1GB") == ByteSize.from_mb(1000)
        assert deserialize("1.5 KiB") == ByteSize.from_bytes(1536)

    @pytest.mark.parametrize(
        "value, cause",
        [
            ("1 XB", UnknownUnitError),
            ("", InvalidFormatError),
            ("100000 PB", ByteSizeOverflowError),
        ],
    )
    def test_deserialize_invalid_string(self, value, cause):
        with pytest.raises(SerializationError) as exc_info:
            deserialize(value)

        assert isinstance(exc_info.value.__cause__, cause)

    @pytest.mark.parametrize("value", [1000, 1.5, None, ["1GB"]])
    def test_numeric_form_is_not_supported(self, value):
        with pytest.raises(SerializationError):
            deserialize(value)

    def test_custom_adapter(self):
        adapter = StringAdapter(binary=True, precision=1)
        assert adapter.serialize(ByteSize.from_kib(4)) == "4KiB"
        assert adapter.serialize(ByteSize.from_bytes(1100)) == "1.1KiB"
        assert adapter.deserialize("4 KiB") == ByteSize.from_kib(4)

    def test_register(self):
        registry = {}
        StringAdapter().register(
            lambda type_, to_str, from_str: registry.update({type_: (to_str, from_str)})
        )

        to_str, from_str = registry[ByteSize]
        assert to_str(ByteSize.from_gb(1)) == "1GB"
        assert from_str("1GB") == ByteSize.from_gb(1)


class TestJson:
    """
    Tests for json serialization.
    """

    def test_dump_record(self):
        logger = Logger(path="some_path", max_size=ByteSize.from_gb(1))
        assert dump_json(logger) == '{"path":"some_path","max_size":"1GB"}'

    def test_load_record(self):
        logger = load_json(Logger, '{"path":"some_path","max_size":"1GB"}')
        assert logger.path == "some_path"
        assert logger.max_size == ByteSize.from_mb(1000)

    def test_fractional_value(self):
        data = dump_json({"a": ByteSize.from_kb_float(10.42)})
        assert data == '{"a":"10.42KB"}'
        assert deserialize(json.loads(data)["a"]) == ByteSize.from_kb_float(10.42)

    def test_encoder(self):
        data = json.dumps([ByteSize.from_kib(1)], cls=ByteSizeJSONEncoder)
        assert data == '["1.02KB"]'

    def test_encoder_with_adapter(self):
        adapter = StringAdapter(binary=True)
        assert dump_json([ByteSize.from_kib(1)], adapter=adapter) == '["1KiB"]'

    def test_unsupported_object(self):
        with pytest.raises(TypeError):
            dump_json({"a": object()})

    def test_numeric_field(self):
        with pytest.raises(SerializationError):
            load_json(Logger, '{"path":"some_path","max_size":1000000000}')


class TestRecords:
    """
    Tests for dataclass records conversion.
    """

    def test_dump_nested(self):
        storage = Storage("s3", Limits(ByteSize.from_mib(512), ByteSize.from_gib(1)))
        assert dump_record(storage) == {
            "name": "s3",
            "limits": {"soft": "536.87MB", "hard": "1.07GB"},
        }
        assert dump_record(storage, StringAdapter(binary=True)) == {
            "name": "s3",
            "limits": {"soft": "512MiB", "hard": "1GiB"},
        }

    def test_load_nested(self):
        storage = load_record(
            Storage,
            {"name": "s3", "limits": {"soft": "512 MiB", "hard": "1GiB"}, "extra": 1},
        )
        assert storage == Storage(
            "s3", Limits(ByteSize.from_mib(512), ByteSize.from_gib(1))
        )

    def test_load_optional(self):
        assert load_record(Limits, {"soft": "1KB"}) == Limits(ByteSize.from_kb(1))
        assert load_record(Limits, {"soft": "1KB", "hard": None}).hard is None

    def test_missing_field(self):
        with pytest.raises(SerializationError):
            load_record(Logger, {"path": "some_path"})

    def test_not_a_mapping(self):
        with pytest.raises(SerializationError):
            load_record(Logger, ["some_path", "1GB"])


class TestYaml:
    """
    Tests for YAML serialization.
    """

    def test_dump_record(self):
        logger = Logger(path="some_path", max_size=ByteSize.from_gb(1))
        assert dump_yaml(logger) == "path: some_path\nmax_size: 1GB\n"

    def test_dump_plain_data(self):
        assert dump_yaml({"limit": ByteSize.from_kb(4)}) == "limit: 4KB\n"

    def test_dump_with_adapter(self):
        adapter = StringAdapter(binary=True)
        assert dump_yaml({"limit": ByteSize.from_kib(4)}, adapter=adapter) == "limit: 4KiB\n"

    def test_load_record(self):
        logger = load_yaml(Logger, "path: some_path\nmax_size: 1.5 GiB\n")
        assert logger.max_size == ByteSize.from_gib_float(1.5)

    def test_numeric_field(self):
        with pytest.raises(SerializationError):
            load_yaml(Logger, "path: some_path\nmax_size: 1024\n")

    def test_register(self):
        class Dumper(yaml.SafeDumper):
            pass

        register_yaml(Dumper)
        assert yaml.dump([ByteSize.from_mb(3)], Dumper=Dumper) == "- 3MB\n"

    def test_safe_dumper_is_not_modified(self):
        assert issubclass(ByteSizeDumper, yaml.SafeDumper)
        with pytest.raises(yaml.representer.RepresenterError):
            yaml.safe_dump(ByteSize.from_gb(1))
