"""
Serialization of byte sizes into structured data.

Byte sizes are always represented as strings in canonical format (e.g. "1GB"), numeric form
is not supported. The module provides a generic string adapter that can be plugged into any
serialization framework and ready-made integrations for json, PyYAML and dataclass records.
"""

import json
import types
from dataclasses import fields as data_fields
from dataclasses import is_dataclass
from typing import Any, Callable, Type, TypeVar, Union, get_args, get_origin, get_type_hints

import yaml

from huby import logging
from huby.bytesize import ByteSize
from huby.exceptions import HubyError, SerializationError
from huby.formatter import DEFAULT_PRECISION

T = TypeVar("T")

# Optional[X] and X | None
_UNION_TYPES = (Union, getattr(types, "UnionType", Union))

Serializer = Callable[[ByteSize], str]
Deserializer = Callable[[Any], ByteSize]


class StringAdapter:
    """
    Converts byte sizes to and from their string representation.
    """

    def __init__(self, binary: bool = False, precision: int = DEFAULT_PRECISION) -> None:
        self.binary = binary
        self.precision = precision

    def serialize(self, value: ByteSize) -> str:
        """
        Convert byte size into string.
        """
        return value.format(binary=self.binary, precision=self.precision)

    def deserialize(self, value: Any) -> ByteSize:
        """
        Convert string into byte size.
        """
        if not isinstance(value, str):
            raise SerializationError(
                f"Expected byte size string, got {type(value).__name__}: {value!r}"
            )
        try:
            return ByteSize.parse(value)
        except HubyError as e:
            logging.debug('Failed to deserialize byte size "{}": {}', value, e)
            raise SerializationError(str(e)) from e

    def register(self, hook: Callable[[type, Serializer, Deserializer], Any]) -> None:
        """
        Register conversion callbacks in a serialization framework.

        The hook receives ByteSize type and the pair of conversion functions.
        """
        hook(ByteSize, self.serialize, self.deserialize)


DEFAULT_ADAPTER = StringAdapter()


def serialize(value: ByteSize) -> str:
    """
    Convert byte size into string using canonical format.
    """
    return DEFAULT_ADAPTER.serialize(value)


def deserialize(value: Any) -> ByteSize:
    """
    Convert string into byte size.
    """
    return DEFAULT_ADAPTER.deserialize(value)


class ByteSizeJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that writes byte sizes as strings.
    """

    def __init__(self, *args: Any, adapter: StringAdapter = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.adapter = adapter or DEFAULT_ADAPTER

    def default(self, o: Any) -> Any:
        if isinstance(o, ByteSize):
            return self.adapter.serialize(o)
        if is_dataclass(o) and not isinstance(o, type):
            return dump_record(o, self.adapter)
        return super().default(o)


class ByteSizeDumper(yaml.SafeDumper):
    """
    YAML dumper that writes byte sizes as plain strings.
    """


def register_yaml(dumper: Type[yaml.BaseDumper], adapter: StringAdapter = None) -> None:
    """
    Register byte size representer in the dumper class.
    """
    adapter = adapter or DEFAULT_ADAPTER

    def represent(dumper_: yaml.BaseDumper, value: ByteSize) -> yaml.Node:
        return dumper_.represent_str(adapter.serialize(value))

    def represent_record(dumper_: yaml.BaseDumper, value: Any) -> yaml.Node:
        return dumper_.represent_dict(dump_record(value, adapter))

    dumper.add_representer(ByteSize, represent)
    dumper.add_multi_representer(object, _record_representer(represent_record))


def _record_representer(represent_record: Callable) -> Callable:
    def represent(dumper: yaml.BaseDumper, value: Any) -> yaml.Node:
        if is_dataclass(value) and not isinstance(value, type):
            return represent_record(dumper, value)
        return dumper.represent_undefined(value)

    return represent


register_yaml(ByteSizeDumper)


def dump_record(record: Any, adapter: StringAdapter = None) -> dict:
    """
    Serialize dataclass instance into dictionary. Byte sizes become strings.
    """
    adapter = adapter or DEFAULT_ADAPTER
    result = {}
    for field in data_fields(record):
        value = getattr(record, field.name)
        if isinstance(value, ByteSize):
            value = adapter.serialize(value)
        elif is_dataclass(value) and not isinstance(value, type):
            value = dump_record(value, adapter)
        result[field.name] = value
    return result


def load_record(type_: Type[T], data: dict, adapter: StringAdapter = None) -> T:
    """
    Create dataclass instance from dictionary.

    Fields annotated as ByteSize (or Optional[ByteSize]) are deserialized from strings,
    nested dataclasses are loaded recursively, extra keys are ignored.
    """
    adapter = adapter or DEFAULT_ADAPTER
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected mapping for {type_.__name__}, got {type(data).__name__}"
        )

    hints = get_type_hints(type_)
    kwargs = {}
    for field in data_fields(type_):  # type: ignore[arg-type]
        if field.name not in data:
            continue
        value = data[field.name]
        hint = hints.get(field.name)
        if _is_byte_size_type(hint):
            if value is not None:
                value = adapter.deserialize(value)
        elif isinstance(value, dict) and is_dataclass(hint):
            value = load_record(hint, value, adapter)
        kwargs[field.name] = value

    try:
        return type_(**kwargs)
    except TypeError as e:
        raise SerializationError(f"Failed to load {type_.__name__}: {e}") from e


def dump_json(obj: Any, adapter: StringAdapter = None) -> str:
    """
    Return compact json representation of the object with byte sizes written as strings.
    """
    return json.dumps(obj, cls=ByteSizeJSONEncoder, adapter=adapter, separators=(",", ":"))


def load_json(type_: Type[T], data: str, adapter: StringAdapter = None) -> T:
    """
    Create dataclass instance from json representation.
    """
    return load_record(type_, json.loads(data), adapter)


def dump_yaml(obj: Any, adapter: StringAdapter = None) -> str:
    """
    Return YAML representation of the object with byte sizes written as strings.
    """
    dumper = ByteSizeDumper
    if adapter is not None:
        dumper = type("ByteSizeDumper", (ByteSizeDumper,), {})
        register_yaml(dumper, adapter)
    return yaml.dump(obj, Dumper=dumper, default_flow_style=False, sort_keys=False)


def load_yaml(type_: Type[T], data: str, adapter: StringAdapter = None) -> T:
    """
    Create dataclass instance from YAML representation.
    """
    return load_record(type_, yaml.safe_load(data), adapter)


def _is_byte_size_type(hint: Any) -> bool:
    if hint is ByteSize:
        return True
    return get_origin(hint) in _UNION_TYPES and ByteSize in get_args(hint)
