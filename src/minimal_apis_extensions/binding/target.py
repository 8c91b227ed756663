"""BindingTarget — the binding strategy of a target type, resolved once."""

from __future__ import annotations

import dataclasses
import enum
import types
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Generic, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter
from typing_extensions import TypeVar, is_typeddict

from ..ports.binding import SupportsBindAsync
from ..primitives.exceptions import BinderContractError

T = TypeVar("T", default=Any)

_NONE_TYPE = type(None)


class BindingSource(str, enum.Enum):
    """Where the value of a target type comes from."""

    CUSTOM = "custom"
    JSON_BODY = "json_body"


class TargetShape(str, enum.Enum):
    """How a JSON body maps onto the target type."""

    MODEL = "model"
    DATACLASS = "dataclass"
    TYPED_DICT = "typed_dict"
    VALUE = "value"

    @property
    def is_structured(self) -> bool:
        """Bound from a JSON object, field by field."""
        return self is not TargetShape.VALUE


@dataclass(frozen=True)
class BindingTarget(Generic[T]):
    """Static description of the value to bind.

    Built through :meth:`resolve` when a binder is set up, so requests never
    re-inspect the target type.

    ``field_keys`` maps every accepted JSON key (field name or alias) to the
    key the target validates, and ``attributes`` maps those input keys to
    attribute names for building partial values.
    """

    target_type: Any
    source: BindingSource
    optional: bool = True
    name: str | None = None
    shape: TargetShape = TargetShape.VALUE
    field_keys: dict[str, str] = field(default_factory=dict, compare=False)
    folded_field_keys: dict[str, str] = field(default_factory=dict, compare=False)
    attributes: dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def resolve(
        cls,
        target_type: Any,
        *,
        optional: bool | None = None,
        name: str | None = None,
        default_optional: bool = True,
    ) -> BindingTarget[Any]:
        """Resolve the binding strategy for *target_type*.

        ``Model | None`` is unwrapped to ``Model`` and marks the target as
        optional unless *optional* says otherwise.
        """
        if target_type is None:
            raise BinderContractError("target_type is required")

        inner, nullable = _unwrap_optional(target_type)
        if optional is None:
            optional = True if nullable else default_optional

        if _is_plain_class(inner) and isinstance(inner, SupportsBindAsync):
            return cls(inner, BindingSource.CUSTOM, optional, name)

        shape = _shape_of(inner)
        attributes = dict(_input_keys(inner, shape))
        field_keys: dict[str, str] = {}
        for input_key, attribute in attributes.items():
            field_keys.setdefault(attribute, input_key)
            field_keys.setdefault(input_key, input_key)
        folded = {key.casefold(): value for key, value in field_keys.items()}
        return cls(
            inner,
            BindingSource.JSON_BODY,
            optional,
            name,
            shape,
            field_keys,
            folded,
            attributes,
        )

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return getattr(self.target_type, "__name__", repr(self.target_type))

    @cached_property
    def adapter(self) -> TypeAdapter[Any]:
        """Pydantic adapter for non-model targets, built on first use."""
        return TypeAdapter(self.target_type)

    def input_key(self, key: str, *, case_insensitive: bool) -> str | None:
        """Map a JSON key to the key the target accepts, or ``None`` if unknown."""
        matched = self.field_keys.get(key)
        if matched is None and case_insensitive:
            matched = self.folded_field_keys.get(key.casefold())
        return matched

    def validate_input(self, data: dict[str, Any]) -> Any:
        """Build the fully validated value from matched input data.

        Raises pydantic's ``ValidationError`` when the data breaks a
        constraint of the target.
        """
        if self.shape is TargetShape.MODEL:
            return self.target_type.model_validate(data)
        return self.adapter.validate_python(data)

    def construct_partial(self, data: dict[str, Any]) -> Any:
        """Build a value from matched input data without validating it.

        Missing fields keep their defaults when they have one and stay unset
        otherwise.
        """
        if self.shape is TargetShape.MODEL:
            return self.target_type.model_construct(**data)
        if self.shape is TargetShape.TYPED_DICT:
            return dict(data)

        instance = object.__new__(self.target_type)
        assigned: set[str] = set()
        for input_key, value in data.items():
            attribute = self.attributes[input_key]
            object.__setattr__(instance, attribute, value)
            assigned.add(attribute)
        pydantic_fields = getattr(self.target_type, "__pydantic_fields__", None) or {}
        for dc_field in dataclasses.fields(self.target_type):
            if dc_field.name in assigned:
                continue
            info = pydantic_fields.get(dc_field.name)
            if info is not None:
                if not info.is_required():
                    default = info.get_default(call_default_factory=True)
                    object.__setattr__(instance, dc_field.name, default)
            elif dc_field.default is not dataclasses.MISSING:
                object.__setattr__(instance, dc_field.name, dc_field.default)
            elif dc_field.default_factory is not dataclasses.MISSING:
                object.__setattr__(instance, dc_field.name, dc_field.default_factory())
        return instance


def _unwrap_optional(target_type: Any) -> tuple[Any, bool]:
    origin = get_origin(target_type)
    if origin is Union or origin is types.UnionType:
        args = get_args(target_type)
        non_none = [a for a in args if a is not _NONE_TYPE]
        if len(non_none) == 1 and len(non_none) != len(args):
            return non_none[0], True
    return target_type, False


def _is_plain_class(target_type: Any) -> bool:
    return isinstance(target_type, type) and get_origin(target_type) is None


def _shape_of(target_type: Any) -> TargetShape:
    if not _is_plain_class(target_type):
        return TargetShape.VALUE
    if issubclass(target_type, BaseModel):
        return TargetShape.MODEL
    if dataclasses.is_dataclass(target_type):
        return TargetShape.DATACLASS
    if is_typeddict(target_type):
        return TargetShape.TYPED_DICT
    return TargetShape.VALUE


def _input_keys(target_type: Any, shape: TargetShape) -> list[tuple[str, str]]:
    """``(input key, attribute name)`` pairs of a structured target."""
    if shape is TargetShape.MODEL:
        return [
            (info.alias or name, name)
            for name, info in target_type.model_fields.items()
        ]
    if shape is TargetShape.DATACLASS:
        # pydantic dataclasses validate by alias, like models
        pydantic_fields = getattr(target_type, "__pydantic_fields__", None) or {}
        pairs: list[tuple[str, str]] = []
        for dc_field in dataclasses.fields(target_type):
            info = pydantic_fields.get(dc_field.name)
            alias = info.alias if info is not None else None
            pairs.append((alias or dc_field.name, dc_field.name))
        return pairs
    if shape is TargetShape.TYPED_DICT:
        return [(key, key) for key in target_type.__annotations__]
    return []
