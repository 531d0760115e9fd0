"""Turn models back into wire-format mappings and JSON text."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from wire_model.core.casing import to_wire_name
from wire_model.core.errors import MalformedEnvelopeError
from wire_model.core.instantiator import create_from_object
from wire_model.core.metadata import fields_of
from wire_model.core.model import Model

M = TypeVar("M", bound=Model)


def determine_wire_name(model_type: type[Model], attribute_name: str) -> str:
    field_name = to_wire_name(attribute_name)
    return model_type.WIRE_NAME_OVERRIDES.get(field_name, field_name)


def to_wire_object(model: Model) -> dict[str, Any]:
    """Map every instance field of ``model`` to its wire name.

    Values are copied as they are; nested models stay models and are expanded
    by the JSON encoder (see :func:`to_json`).
    """
    model_type = type(model)
    return {
        determine_wire_name(model_type, name): getattr(model, name) for name in fields_of(model_type)
    }


def wire_default(value: Any) -> Any:
    """``json.dumps`` default hook that expands nested models."""
    if isinstance(value, Model):
        return to_wire_object(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(model: Model, **kwargs: Any) -> str:
    """Encode ``model`` as JSON text, expanding nested models recursively."""
    return json.dumps(to_wire_object(model), default=wire_default, **kwargs)


def from_json(model_type: type[M], text: str | bytes, *, max_depth: int | None = None) -> M | None:
    """Decode a bare JSON object (no envelope) into ``model_type``."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedEnvelopeError(f"Body is not valid JSON: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise MalformedEnvelopeError(f"Expected a JSON object, got {type(data).__name__}")
    return create_from_object(model_type, data, max_depth=max_depth)
