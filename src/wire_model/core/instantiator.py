"""Build typed models out of decoded JSON objects."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from wire_model.config import get_max_depth
from wire_model.core.casing import to_attribute_name
from wire_model.core.errors import MetadataCycleError
from wire_model.core.metadata import FieldDescriptor, fields_of, is_scalar, resolve_type
from wire_model.core.model import RAW, Model

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)


def create_from_object(
    model_type: type[M],
    json_object: Mapping[str, Any] | None,
    wrapper_key: str | None = None,
    *,
    max_depth: int | None = None,
) -> M | None:
    """Decode ``json_object`` into a new ``model_type`` instance.

    With ``wrapper_key`` the object is unwrapped first. A missing or null
    payload yields ``None``; many endpoints answer "not found" that way.
    """
    limit = max_depth if max_depth is not None else get_max_depth()
    return _create(model_type, json_object, wrapper_key, 0, limit)


def create_list_from_array(
    model_type: type[M],
    json_array: Mapping[str, Any] | list[Any] | None,
    wrapper_key: str | None = None,
    *,
    max_depth: int | None = None,
) -> list[M | None]:
    """Decode every element of ``json_array``, keeping input order.

    A JSON object is accepted too; its keys are ignored and its values decoded.
    """
    limit = max_depth if max_depth is not None else get_max_depth()
    return _create_list(model_type, json_array, wrapper_key, 0, limit)


def _create(
    model_type: type[M],
    json_object: Mapping[str, Any] | None,
    wrapper_key: str | None,
    depth: int,
    max_depth: int,
) -> M | None:
    if depth > max_depth:
        raise MetadataCycleError(model_type.__name__, max_depth)

    if json_object is None:
        return None

    if wrapper_key is not None:
        if not isinstance(json_object, Mapping):
            raise TypeError(f"Cannot unwrap {wrapper_key!r} for {model_type.__name__}: expected a JSON object")
        json_object = json_object.get(wrapper_key)
        if json_object is None:
            logger.debug("Wrapper %r of %s is absent or null", wrapper_key, model_type.__name__)
            return None

    if not isinstance(json_object, Mapping):
        raise TypeError(
            f"Cannot decode {type(json_object).__name__} into {model_type.__name__}: expected a JSON object"
        )

    return _populate(model_type, json_object, depth, max_depth)


def _create_list(
    model_type: type[M],
    json_array: Mapping[str, Any] | list[Any] | None,
    wrapper_key: str | None,
    depth: int,
    max_depth: int,
) -> list[M | None]:
    if json_array is None:
        return []
    elements = json_array.values() if isinstance(json_array, Mapping) else json_array
    return [_create(model_type, element, wrapper_key, depth, max_depth) for element in elements]


def _populate(model_type: type[M], json_object: Mapping[str, Any], depth: int, max_depth: int) -> M:
    descriptors = fields_of(model_type)
    overrides_flipped = {wire: derived for derived, wire in model_type.WIRE_NAME_OVERRIDES.items()}
    instance = model_type._empty()

    for field_name_raw, contents in json_object.items():
        attribute_name = to_attribute_name(overrides_flipped.get(field_name_raw, field_name_raw))
        descriptor = descriptors.get(attribute_name)
        if descriptor is None:
            logger.debug("Dropping unknown field %r of %s", field_name_raw, model_type.__name__)
            continue
        instance._assign(attribute_name, _field_contents(model_type, descriptor, contents, depth, max_depth))

    return instance  # type: ignore[return-value]


def _field_contents(
    model_type: type[Model], descriptor: FieldDescriptor, contents: Any, depth: int, max_depth: int
) -> Any:
    if contents is None or descriptor.wire_type == RAW or is_scalar(descriptor.wire_type):
        return contents

    nested_type = resolve_type(model_type, descriptor)
    if descriptor.is_sequence:
        return _create_list(nested_type, contents, None, depth + 1, max_depth)
    return _create(nested_type, contents, None, depth + 1, max_depth)
