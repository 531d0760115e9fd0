"""Base class and field tags for typed domain models.

Concrete models are dataclasses deriving from :class:`Model`::

    @dataclass(frozen=True)
    class MonetaryAccount(Model):
        WIRE_NAME_OVERRIDES: ClassVar[dict[str, str]] = {"alias": "aliases"}

        id: int | None = wire_field("int")
        balance: Amount | None = wire_field("Amount")
        alias: list[Pointer] | None = wire_field("Pointer", many=True)

Every field needs a default so that the decoder can start from an empty
instance. Class-level attributes (``ClassVar``) are configuration and never
take part in decoding or serialization.
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

WIRE_TYPE_KEY = "wire_type"
IS_SEQUENCE_KEY = "is_sequence"

RAW = "raw"


def wire_field(wire_type: str = RAW, *, many: bool = False, default: Any = None) -> Any:
    """Declare a model field together with its wire type and cardinality."""
    return dataclasses.field(default=default, metadata={WIRE_TYPE_KEY: wire_type, IS_SEQUENCE_KEY: many})


class ModelRegistry:
    """Maps model type names, as used in field tags, to model classes."""

    def __init__(self) -> None:
        self._types: dict[str, type[Model]] = {}

    def register(self, model_type: type[Model]) -> None:
        name = model_type.__name__
        existing = self._types.get(name)
        # dataclass(slots=True) rebuilds the class under the same module and qualname
        if existing is not None and not _same_definition(existing, model_type):
            raise ValueError(
                f'Model name "{name}" is already registered by {existing.__module__}.{existing.__qualname__}'
            )
        self._types[name] = model_type

    def get(self, name: str) -> type[Model] | None:
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


def _same_definition(existing: type, candidate: type) -> bool:
    return existing is candidate or (
        existing.__module__ == candidate.__module__ and existing.__qualname__ == candidate.__qualname__
    )


default_registry = ModelRegistry()


class Model:
    """Base of every domain entity mapped to and from the wire format."""

    WIRE_NAME_OVERRIDES: ClassVar[dict[str, str]] = {}
    __wire_registry__: ClassVar[ModelRegistry] = default_registry

    def __init_subclass__(cls, registry: ModelRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls.__wire_registry__ = registry
        cls.__wire_registry__.register(cls)

    @classmethod
    def _empty(cls) -> Model:
        """Allocate an instance holding only field defaults, bypassing ``__init__``."""
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__qualname__} must be a dataclass to be used as a wire model")
        instance = cls.__new__(cls)
        for f in dataclasses.fields(cls):
            if f.default is not dataclasses.MISSING:
                value = f.default
            elif f.default_factory is not dataclasses.MISSING:
                value = f.default_factory()
            else:
                value = None
            object.__setattr__(instance, f.name, value)
        return instance

    def _assign(self, attribute_name: str, value: Any) -> None:
        # works for frozen dataclasses too; only the decoder populates instances
        object.__setattr__(self, attribute_name, value)
