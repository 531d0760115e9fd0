"""Tests for building models out of decoded JSON objects."""

from dataclasses import dataclass
from typing import Any

import pytest
from sample_models import Amount, Category, Irregular, MonetaryAccountBank, Pointer

from wire_model import Model, ModelRegistry, wire_field
from wire_model.core.errors import MetadataCycleError, UnknownNestedTypeError
from wire_model.core.instantiator import create_from_object, create_list_from_array


def _account_json() -> dict[str, Any]:
    return {
        "id": 42,
        "description": "Main",
        "public_uuid": "a1b2",
        "balance": {"value": "12.50", "currency": "EUR"},
        "daily_limit": None,
        "aliases": [
            {"type": "EMAIL", "value": "a@example.com", "name": "A"},
            {"type": "IBAN", "value": "NL00BUNQ0000000000", "name": "A"},
        ],
        "setting": {"color": "#ff0000", "restriction_chat": "ALLOW"},
        "status": "ACTIVE",
    }


class TestCreateFromObject:
    def test_decodes_scalars_and_nested_models(self) -> None:
        account = create_from_object(MonetaryAccountBank, _account_json())

        assert isinstance(account, MonetaryAccountBank)
        assert account.id == 42
        assert account.description == "Main"
        assert account.publicUuid == "a1b2"
        assert account.balance == Amount(value="12.50", currency="EUR")
        assert isinstance(account.balance, Amount)

    def test_decodes_nested_sequence_in_order(self) -> None:
        account = create_from_object(MonetaryAccountBank, _account_json())

        assert account is not None
        assert account.alias is not None
        assert [p.type for p in account.alias] == ["EMAIL", "IBAN"]
        assert all(isinstance(p, Pointer) for p in account.alias)

    def test_null_nested_value_stays_none(self) -> None:
        account = create_from_object(MonetaryAccountBank, _account_json())
        assert account is not None
        assert account.dailyLimit is None

    def test_raw_field_is_passed_through(self) -> None:
        data = _account_json()
        account = create_from_object(MonetaryAccountBank, data)
        assert account is not None
        assert account.setting == {"color": "#ff0000", "restriction_chat": "ALLOW"}

    def test_scalars_are_not_coerced(self) -> None:
        account = create_from_object(MonetaryAccountBank, {"id": "42"})
        assert account is not None
        assert account.id == "42"

    def test_drops_unknown_fields(self) -> None:
        result = create_from_object(Irregular, {"known_field": 1, "unknown_field": 2})
        assert result == Irregular(knownField=1)

    def test_missing_fields_keep_defaults(self) -> None:
        account = create_from_object(MonetaryAccountBank, {"id": 7})
        assert account == MonetaryAccountBank(id=7)

    def test_override_maps_irregular_wire_name(self) -> None:
        result = create_from_object(Irregular, {"WeirdKey": "x"})
        assert result is not None
        assert result.snakeWeird == "x"

    def test_does_not_run_init(self) -> None:
        registry = ModelRegistry()

        @dataclass(frozen=True)
        class Guarded(Model, registry=registry):
            name: str | None = wire_field("string")

            def __post_init__(self) -> None:
                raise AssertionError("constructor logic must not run")

        result = create_from_object(Guarded, {"name": "ok"})
        assert result is not None
        assert result.name == "ok"

    def test_does_not_mutate_input(self) -> None:
        data = _account_json()
        snapshot = repr(data)
        create_from_object(MonetaryAccountBank, data)
        assert repr(data) == snapshot

    def test_non_object_input_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="Amount"):
            create_from_object(Amount, ["not", "an", "object"])  # type: ignore[arg-type]


class TestWrapper:
    def test_unwraps_before_decoding(self) -> None:
        result = create_from_object(Amount, {"Amount": {"value": "1", "currency": "EUR"}}, "Amount")
        assert result == Amount(value="1", currency="EUR")

    def test_null_wrapper_returns_none(self) -> None:
        assert create_from_object(Amount, {"Wrapper": None}, "Wrapper") is None

    def test_absent_wrapper_returns_none(self) -> None:
        assert create_from_object(Amount, {"Other": {"value": "1"}}, "Wrapper") is None

    def test_null_object_returns_none(self) -> None:
        assert create_from_object(Amount, None) is None


class TestCreateListFromArray:
    def test_preserves_order(self) -> None:
        result = create_list_from_array(Amount, [{"value": "1"}, {"value": "2"}, {"value": "3"}])
        assert [a.value for a in result if a is not None] == ["1", "2", "3"]

    def test_accepts_keyed_object_and_ignores_keys(self) -> None:
        result = create_list_from_array(Amount, {"z": {"value": "1"}, "a": {"value": "2"}})
        assert result == [Amount(value="1"), Amount(value="2")]

    def test_applies_wrapper_per_element(self) -> None:
        result = create_list_from_array(Amount, [{"Amount": {"value": "1"}}, {"Amount": None}], "Amount")
        assert result == [Amount(value="1"), None]

    def test_empty_array(self) -> None:
        assert create_list_from_array(Amount, []) == []


class TestNesting:
    def test_decodes_recursive_type(self) -> None:
        tree = create_from_object(
            Category,
            {"name": "root", "children": [{"name": "leaf", "children": []}, {"name": "other"}]},
        )
        assert tree is not None
        assert tree.children is not None
        assert [c.name for c in tree.children] == ["leaf", "other"]
        assert tree.children[0].children == []
        assert tree.children[1].children is None

    def test_depth_ceiling_raises(self) -> None:
        data: dict[str, Any] = {"name": "leaf"}
        for level in range(5):
            data = {"name": f"level{level}", "children": [data]}

        with pytest.raises(MetadataCycleError) as exc_info:
            create_from_object(Category, data, max_depth=3)
        assert exc_info.value.max_depth == 3

    def test_depth_ceiling_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WIRE_MODEL_MAX_DEPTH", "1")
        data = {"name": "a", "children": [{"name": "b", "children": [{"name": "c"}]}]}

        with pytest.raises(MetadataCycleError):
            create_from_object(Category, data)

    def test_depth_within_ceiling_succeeds(self) -> None:
        data = {"name": "a", "children": [{"name": "b", "children": [{"name": "c"}]}]}
        assert create_from_object(Category, data, max_depth=2) is not None

    def test_unknown_nested_type_raises(self) -> None:
        registry = ModelRegistry()

        @dataclass(frozen=True)
        class Dangling(Model, registry=registry):
            ref: Any = wire_field("Nowhere")

        with pytest.raises(UnknownNestedTypeError, match="Nowhere"):
            create_from_object(Dangling, {"ref": {"a": 1}})

    def test_unknown_nested_type_with_null_value_is_not_resolved(self) -> None:
        registry = ModelRegistry()

        @dataclass(frozen=True)
        class Lazy(Model, registry=registry):
            ref: Any = wire_field("Nowhere")

        assert create_from_object(Lazy, {"ref": None}) == Lazy()
