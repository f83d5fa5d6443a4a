"""
Typed records exchanged with the services.

A :class:`Shape` is an immutable value object whose fields carry their wire
name as pydantic alias plus the wire metadata the protocol codecs need
(required flag, list/map element names, flattening). An :class:`Input` is
the mutable request object of one operation.

Both accept the snake_case field names and the wire names, and coerce
nested dicts into nested shapes::

    KeySchemaElement(AttributeName="id", KeyType="HASH")
    KeySchemaElement(attribute_name="id", key_type="HASH")
"""

from __future__ import annotations

import types
from typing import Any, ClassVar, Iterator, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

from cloudwire.base.exceptions import InvalidArgument

SCALAR = "scalar"
LIST = "list"
MAP = "map"
STRUCTURE = "structure"


def member(
    name: str,
    *,
    required: bool = False,
    flattened: bool = False,
    location: str | None = None,
    item: str = "member",
    key: str = "key",
    value: str = "value",
) -> Any:
    """Declare a shape field.

    Args:
        name: Wire name of the member (``StackName``).
        required: Serializing the owning shape fails while the value is None.
        flattened: Query protocol only: list items / map entries are repeated
            directly under the member name instead of being wrapped.
        location: Wire name used in query strings and XML when it differs
            from *name* (SQS ``Attributes`` travel as ``Attribute``).
        item: Element name of list items (``member``).
        key: Element name of map keys.
        value: Element name of map values.
    """
    wire = {
        "required": required,
        "flattened": flattened,
        "location": location or name,
        "item": item,
        "key": key,
        "value": value,
    }
    return Field(default=None, alias=name, json_schema_extra={"wire": wire})


def wire_meta(field: FieldInfo) -> dict[str, Any]:
    extra = field.json_schema_extra
    if isinstance(extra, dict):
        return extra.get("wire", {})  # type: ignore[return-value]
    return {}


def unwrap_optional(tp: Any) -> Any:
    """``X | None`` -> ``X``."""
    if get_origin(tp) in (Union, types.UnionType):
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def classify(tp: Any) -> tuple[str, Any]:
    """Return the wire kind of an annotation and its element type.

    ``list[X]`` -> (LIST, X), ``dict[str, X]`` -> (MAP, X),
    a Shape subclass -> (STRUCTURE, cls), anything else -> (SCALAR, type).
    """
    tp = unwrap_optional(tp)
    origin = get_origin(tp)
    if origin is list:
        return LIST, get_args(tp)[0]
    if origin is dict:
        return MAP, get_args(tp)[1]
    if isinstance(tp, type) and issubclass(tp, Shape):
        return STRUCTURE, tp
    return SCALAR, tp


class Shape(BaseModel):
    """Base class of every value object.

    Unknown members are rejected. The response parsers only hand over the
    members a shape declares, so service-side additions never reach here.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @classmethod
    def wire_fields(cls) -> Iterator[tuple[str, FieldInfo, dict[str, Any]]]:
        """Yield ``(attribute, field, wire metadata)`` for serialized members."""
        for name, field in cls.model_fields.items():
            if field.exclude:
                continue
            yield name, field, wire_meta(field)

    def required_value(self, name: str, field: FieldInfo, meta: dict[str, Any]) -> Any:
        """Return the member value, failing when a required member is None."""
        value = getattr(self, name)
        if value is None and meta.get("required"):
            raise InvalidArgument(
                f'Missing parameter "{field.alias}" for "{type(self).__name__}". '
                "The value cannot be null."
            )
        return value


class Input(Shape):
    """Base class of every operation input.

    Subclasses name their wire operation in ``action`` and implement
    :meth:`request` through a protocol base (query or JSON).
    """

    model_config = ConfigDict(frozen=False, extra="forbid", validate_assignment=True)

    action: ClassVar[str] = ""

    region: str | None = Field(default=None, alias="@region", exclude=True)

    @classmethod
    def create(cls, value: Any = None, **kwargs: Any) -> Any:
        """Return *value* if it already is an instance, otherwise build one.

        *value* may also be a dict keyed by wire or attribute names;
        *kwargs* are merged on top of it and win over members of *value*
        whichever name form either side uses.
        """
        if isinstance(value, cls) and not kwargs:
            return value
        data: dict[str, Any] = {}
        if isinstance(value, BaseModel):
            data.update(value.model_dump(by_alias=True, exclude_none=True))
            if isinstance(value, Input) and value.region:
                data["@region"] = value.region
        elif value is not None:
            data.update(cls._by_alias(value))
        data.update(cls._by_alias(kwargs))
        return cls.model_validate(data)

    @classmethod
    def _by_alias(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Rename attribute-name keys of *data* to their wire names."""
        fields = cls.model_fields
        return {
            fields[k].alias or k if k in fields else k: v
            for k, v in data.items()
        }
