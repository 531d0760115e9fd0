"""Error taxonomy for envelope decoding and model mapping."""

from __future__ import annotations


class WireModelError(Exception):
    """Base class for every error raised by wire-model."""


class MalformedEnvelopeError(WireModelError, ValueError):
    """Raised when a response body is not a valid ``{"Response": [...]}`` envelope."""


class UnexpectedResultCountError(WireModelError, ValueError):
    """Raised when a single-result decode finds zero or several elements."""

    def __init__(self, count: int, expected: int = 1) -> None:
        super().__init__(f'Unexpected number of results "{count}", expected "{expected}".')
        self.count = count
        self.expected = expected


class UnknownNestedTypeError(WireModelError, LookupError):
    """Raised when a field declares a nested model name that is not registered."""

    def __init__(self, type_name: str, owner: str, field_name: str) -> None:
        super().__init__(f'Nested type "{type_name}" of field "{owner}.{field_name}" is not a registered model.')
        self.type_name = type_name
        self.owner = owner
        self.field_name = field_name


class MetadataCycleError(WireModelError, RecursionError):
    """Raised when decoding nests deeper than the configured ceiling."""

    def __init__(self, type_name: str, max_depth: int) -> None:
        super().__init__(f'Decoding "{type_name}" exceeded the maximum nesting depth of {max_depth}.')
        self.type_name = type_name
        self.max_depth = max_depth


class MetadataMissingError(WireModelError, AttributeError):
    """Raised when metadata is requested for a name that is not a declared field."""

    def __init__(self, owner: str, field_name: str) -> None:
        super().__init__(f'Property "{field_name}" does not exist in "{owner}"')
        self.owner = owner
        self.field_name = field_name
