"""Per-field type metadata derived from the field tags declared on each model."""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass

from wire_model.core.errors import MetadataMissingError, UnknownNestedTypeError
from wire_model.core.model import IS_SEQUENCE_KEY, RAW, WIRE_TYPE_KEY, Model

SCALAR_TYPE_STRING = "string"
SCALAR_TYPE_BOOL = "bool"
SCALAR_TYPE_INT = "int"
SCALAR_TYPE_FLOAT = "float"

SCALAR_TYPES = frozenset({SCALAR_TYPE_STRING, SCALAR_TYPE_BOOL, SCALAR_TYPE_INT, SCALAR_TYPE_FLOAT})


@dataclass(frozen=True)
class FieldDescriptor:
    attribute_name: str
    wire_type: str
    is_sequence: bool = False

    @property
    def is_nested(self) -> bool:
        return self.wire_type != RAW and not is_scalar(self.wire_type)


def is_scalar(wire_type: str) -> bool:
    return wire_type in SCALAR_TYPES


@functools.cache
def fields_of(model_type: type[Model]) -> dict[str, FieldDescriptor]:
    """Return the descriptors of all instance fields of ``model_type``, in declaration order.

    Untagged fields are described as ``raw``: their values are passed through as decoded.
    """
    if not dataclasses.is_dataclass(model_type):
        raise TypeError(f"{model_type.__qualname__} must be a dataclass to be used as a wire model")
    descriptors: dict[str, FieldDescriptor] = {}
    for f in dataclasses.fields(model_type):
        descriptors[f.name] = FieldDescriptor(
            attribute_name=f.name,
            wire_type=f.metadata.get(WIRE_TYPE_KEY, RAW),
            is_sequence=bool(f.metadata.get(IS_SEQUENCE_KEY, False)),
        )
    return descriptors


def describe(model_type: type[Model], field_name: str) -> FieldDescriptor:
    descriptor = fields_of(model_type).get(field_name)
    if descriptor is None:
        raise MetadataMissingError(model_type.__name__, field_name)
    return descriptor


def resolve_type(model_type: type[Model], descriptor: FieldDescriptor) -> type[Model]:
    """Resolve the nested model class named by ``descriptor`` through the owner's registry."""
    nested = model_type.__wire_registry__.get(descriptor.wire_type)
    if nested is None:
        raise UnknownNestedTypeError(descriptor.wire_type, model_type.__name__, descriptor.attribute_name)
    return nested


def check_schema(model_type: type[Model]) -> list[type[Model]]:
    """Resolve every nested type reachable from ``model_type``.

    Returns the reachable model types (``model_type`` first). Self-referencing and
    mutually recursive types are fine here; the data decides how deep they nest.
    """
    seen: dict[type[Model], None] = {}
    pending = [model_type]
    while pending:
        current = pending.pop()
        if current in seen:
            continue
        seen[current] = None
        for descriptor in fields_of(current).values():
            if descriptor.is_nested:
                pending.append(resolve_type(current, descriptor))
    return list(seen)
