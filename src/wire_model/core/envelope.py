"""Decoding of the ``{"Response": [...], "Pagination": {...}}`` envelope wrapping every API payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wire_model.config import get_max_depth
from wire_model.core.casing import to_attribute_name, to_wire_name
from wire_model.core.errors import MalformedEnvelopeError, UnexpectedResultCountError
from wire_model.core.instantiator import create_from_object
from wire_model.core.metadata import fields_of
from wire_model.core.model import Model

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)

FIELD_RESPONSE = "Response"
FIELD_PAGINATION = "Pagination"
FIELD_ID = "Id"
FIELD_UUID = "Uuid"


class RawResponse(BaseModel):
    """Body and headers as handed over by the HTTP transport."""

    model_config = ConfigDict(frozen=True)

    body: str
    headers: dict[str, str] = Field(default_factory=dict)


class ApiResponse(BaseModel):
    """Decoded payload plus the response metadata callers may need."""

    model_config = ConfigDict(frozen=True)

    value: Any
    headers: dict[str, str] = Field(default_factory=dict)
    pagination: dict[str, Any] | None = None


class Envelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    response: list[dict[str, Any]] = Field(alias=FIELD_RESPONSE)
    pagination: dict[str, Any] | None = Field(default=None, alias=FIELD_PAGINATION)


def parse_envelope(body: str | bytes) -> Envelope:
    """Parse and shape-check a response body.

    Raises ``MalformedEnvelopeError`` if the body is not JSON, not an object,
    or has no ``Response`` array of objects.
    """
    try:
        return Envelope.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedEnvelopeError(f"Invalid response envelope: {exc}") from exc


def _unwrap_element(
    model_type: type[Model], element: dict[str, Any], wrapper_key: str | None
) -> Mapping[str, Any] | None:
    if wrapper_key is not None:
        return element.get(wrapper_key)
    if len(element) == 1:
        ((key, inner),) = element.items()
        if _is_declared_field(model_type, key):
            return element
        if inner is None or isinstance(inner, Mapping):
            return inner
    return element


def _is_declared_field(model_type: type[Model], wire_key: str) -> bool:
    overrides_flipped = {wire: derived for derived, wire in model_type.WIRE_NAME_OVERRIDES.items()}
    return to_attribute_name(overrides_flipped.get(wire_key, wire_key)) in fields_of(model_type)


def _decode_elements(
    envelope: Envelope,
    model_type: type[M],
    wrapper_key: str | None,
    max_depth: int | None,
) -> list[M | None]:
    limit = max_depth if max_depth is not None else get_max_depth()
    return [
        create_from_object(model_type, _unwrap_element(model_type, element, wrapper_key), max_depth=limit)
        for element in envelope.response
    ]


def decode_list(
    raw: RawResponse,
    model_type: type[M],
    wrapper_key: str | None = None,
    *,
    max_depth: int | None = None,
) -> ApiResponse:
    """Decode a list endpoint response; ``pagination`` is the raw ``Pagination`` object."""
    envelope = parse_envelope(raw.body)
    values = _decode_elements(envelope, model_type, wrapper_key, max_depth)
    logger.debug("Decoded %d %s element(s)", len(values), model_type.__name__)
    return ApiResponse(value=values, headers=raw.headers, pagination=envelope.pagination)


def decode_single(
    raw: RawResponse,
    model_type: type[M],
    wrapper_key: str | None = None,
    *,
    max_depth: int | None = None,
) -> ApiResponse:
    """Decode a response that must carry exactly one element."""
    envelope = parse_envelope(raw.body)
    values = _decode_elements(envelope, model_type, wrapper_key, max_depth)
    if len(values) != 1:
        raise UnexpectedResultCountError(len(values))
    return ApiResponse(value=values[0], headers=raw.headers)


def decode_scalar_field(raw: RawResponse, field_key: str) -> ApiResponse:
    """Extract ``value`` out of ``{"Response": [{field_key: {snake(field_key): value}}]}``.

    Used by endpoints that answer with nothing more than an id or uuid.
    """
    envelope = parse_envelope(raw.body)
    if len(envelope.response) != 1:
        raise UnexpectedResultCountError(len(envelope.response))

    nested = envelope.response[0].get(field_key)
    if not isinstance(nested, Mapping):
        raise MalformedEnvelopeError(f'Expected an object under "{field_key}" in the response')

    inner_key = to_wire_name(field_key)
    if inner_key not in nested:
        raise MalformedEnvelopeError(f'Missing "{inner_key}" in "{field_key}" object')
    return ApiResponse(value=nested[inner_key], headers=raw.headers)


def decode_id(raw: RawResponse) -> ApiResponse:
    return decode_scalar_field(raw, FIELD_ID)


def decode_uuid(raw: RawResponse) -> ApiResponse:
    return decode_scalar_field(raw, FIELD_UUID)


def decode_merged(
    raw: RawResponse,
    model_type: type[M],
    *,
    max_depth: int | None = None,
) -> ApiResponse:
    """Merge every ``Response`` element into one object and decode it as a single model.

    Composite answers such as ``[{"Id": ...}, {"Token": ...}, {"UserPerson": ...}]``
    become one ``model_type`` with ``id``, ``token`` and ``userPerson`` fields.
    Later elements win on key collisions.
    """
    envelope = parse_envelope(raw.body)
    merged: dict[str, Any] = {}
    for element in envelope.response:
        merged.update(element)
    value = create_from_object(model_type, merged, max_depth=max_depth)
    return ApiResponse(value=value, headers=raw.headers)
