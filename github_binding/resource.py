"""Base model and JSON codec shared by every API record.

Records are pydantic models. Optional fields are ``T | None`` defaulting to
None, and json_field() carries the wire name plus whether the field is
dropped from the encoded object when absent.
"""

from enum import Enum
from functools import lru_cache
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializationInfo, TypeAdapter, model_serializer
from pydantic.fields import FieldInfo

from .strings import TYPE_PREFIX, stringify
from .timestamp import Timestamp


def json_field(
    name: str | None = None,
    *,
    omitempty: bool = True,
    default=None,
    default_factory=None,
    label: str | None = None,
    **kwargs,
):
    """Declare a record field.

    name: wire name when it differs from the attribute ("-" never encodes).
    omitempty: drop the key from the encoded object when the value is None.
    label: name shown by stringify() when field_label() would get it wrong.
    Remaining keyword arguments go to pydantic.Field.
    """
    extra = {"omitempty": omitempty}
    if label:
        extra["label"] = label
    kwargs["json_schema_extra"] = extra
    if name == "-":
        kwargs["exclude"] = True
    elif name:
        kwargs["alias"] = name
    if default_factory is not None:
        return Field(default_factory=default_factory, **kwargs)
    return Field(default, **kwargs)


def omitempty(info: FieldInfo) -> bool:
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        return extra.get("omitempty", True)
    return True


class Resource(BaseModel):
    """Base for API records: debug string, dict encoding and decoding."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    _type_prefix: ClassVar[str] = TYPE_PREFIX

    @model_serializer(mode="wrap")
    def _drop_absent(self, handler, info: SerializationInfo):
        data = handler(self)
        for name, f in type(self).model_fields.items():
            if getattr(self, name) is not None or not omitempty(f):
                continue
            key = (f.serialization_alias or name) if info.by_alias else name
            data.pop(key, None)
        return data

    def __str__(self) -> str:
        return stringify(self)

    def to_dict(self) -> dict:
        return encode(self)

    @classmethod
    def from_dict(cls, data: dict):
        return cls.model_validate(data)


def encode(value):
    """Convert a record (or any nested value) into JSON-ready Python data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, Timestamp):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode(v) for v in value]
    if isinstance(value, dict):
        return {k: encode(v) for k, v in value.items()}
    return value


@lru_cache(maxsize=None)
def _adapter(tp) -> TypeAdapter:
    return TypeAdapter(tp)


def decode(tp, raw):
    """Validate decoded JSON data as type tp.

    Unknown object keys are ignored; a missing key leaves the field at its
    default. Raises pydantic.ValidationError when raw does not fit tp.
    """
    return _adapter(tp).validate_python(raw)
