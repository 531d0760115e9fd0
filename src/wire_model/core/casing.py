"""Conversion between wire field names (snake_case) and model attribute names (camelCase)."""

import re

_UPPER_NOT_FIRST = re.compile(r"(?<!^)([A-Z])")


def to_attribute_name(wire_name: str) -> str:
    """``known_field`` -> ``knownField``; camelCase input is returned unchanged."""
    words = wire_name.split("_")
    joined = "".join(word[:1].upper() + word[1:] for word in words)
    return joined[:1].lower() + joined[1:]


def to_wire_name(attribute_name: str) -> str:
    """``knownField`` -> ``known_field``; snake_case input is returned unchanged.

    Digits do not start a new word: ``addressLine1`` becomes ``address_line1``,
    so ``address_line_1`` does not survive a round trip through ``to_attribute_name``.
    """
    return _UPPER_NOT_FIRST.sub(r"_\1", attribute_name).lower()
