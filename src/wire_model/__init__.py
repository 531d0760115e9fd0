from wire_model.core.casing import to_attribute_name, to_wire_name
from wire_model.core.envelope import (
    ApiResponse,
    RawResponse,
    decode_id,
    decode_list,
    decode_merged,
    decode_scalar_field,
    decode_single,
    decode_uuid,
)
from wire_model.core.errors import (
    MalformedEnvelopeError,
    MetadataCycleError,
    MetadataMissingError,
    UnexpectedResultCountError,
    UnknownNestedTypeError,
    WireModelError,
)
from wire_model.core.instantiator import create_from_object, create_list_from_array
from wire_model.core.metadata import FieldDescriptor, check_schema, describe, fields_of, is_scalar
from wire_model.core.model import Model, ModelRegistry, wire_field
from wire_model.core.serializer import from_json, to_json, to_wire_object

__all__ = [
    "ApiResponse",
    "FieldDescriptor",
    "MalformedEnvelopeError",
    "MetadataCycleError",
    "MetadataMissingError",
    "Model",
    "ModelRegistry",
    "RawResponse",
    "UnexpectedResultCountError",
    "UnknownNestedTypeError",
    "WireModelError",
    "check_schema",
    "create_from_object",
    "create_list_from_array",
    "decode_id",
    "decode_list",
    "decode_merged",
    "decode_scalar_field",
    "decode_single",
    "decode_uuid",
    "describe",
    "fields_of",
    "from_json",
    "is_scalar",
    "to_attribute_name",
    "to_json",
    "to_wire_name",
    "to_wire_object",
    "wire_field",
]
