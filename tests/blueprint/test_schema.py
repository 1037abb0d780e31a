"""Tests for input schema inference."""

from __future__ import annotations

from studio_mcp.blueprint.schema import InputSchema, Property, build_schema
from studio_mcp.blueprint.tokenizer import tokenize


def _schema(*words: str) -> InputSchema:
    return build_schema([tokenize(word) for word in words])


def test_no_fields_produces_empty_object_schema() -> None:
    schema = _schema("status")
    assert schema.to_dict() == {"type": "object", "properties": {}}


def test_required_and_optional_strings() -> None:
    schema = _schema("{{arg1#Custom description}}", "[arg2]")
    assert schema.to_dict() == {
        "type": "object",
        "properties": {
            "arg1": {"type": "string", "description": "Custom description"},
            "arg2": {"type": "string"},
        },
        "required": ["arg1"],
    }


def test_optional_array_is_schema_required_with_default_description() -> None:
    schema = _schema("[args...]")
    assert schema.to_dict() == {
        "type": "object",
        "properties": {
            "args": {
                "type": "array",
                "description": "Additional command line arguments",
                "items": {"type": "string"},
            }
        },
        "required": ["args"],
    }


def test_required_array_keeps_explicit_description() -> None:
    schema = _schema("{{files...#Files to read}}")
    assert schema.properties["files"] == Property(
        name="files", type="array", description="Files to read"
    )
    assert schema.required == ("files",)


def test_boolean_flags_are_never_required() -> None:
    schema = _schema("[-l]", "[--human-readable#Sizes in K/M/G]")
    assert schema.to_dict() == {
        "type": "object",
        "properties": {
            "l": {"type": "boolean", "description": "Enable -l flag"},
            "human_readable": {"type": "boolean", "description": "Sizes in K/M/G"},
        },
    }


def test_first_non_empty_description_wins() -> None:
    schema = _schema("{{text#Explicit}}", "{{text}}")
    assert schema.to_dict()["properties"] == {"text": {"type": "string", "description": "Explicit"}}
    assert schema.required == ("text",)


def test_later_description_fills_missing_one() -> None:
    schema = _schema("{{text}}", "{{text#Later}}", "{{text#Ignored}}")
    assert schema.properties["text"].description == "Later"


def test_later_description_replaces_default_array_description() -> None:
    schema = _schema("[files...]", "[files...#Input files]")
    assert schema.properties["files"].description == "Input files"


def test_required_is_unioned_across_occurrences() -> None:
    schema = _schema("[name]", "--label={{name}}")
    assert schema.required == ("name",)
    assert schema.properties["name"].type == "string"


def test_dashes_are_normalized_in_property_names() -> None:
    schema = _schema("[has-dashes]", "{{my-var}}")
    assert list(schema.properties) == ["has_dashes", "my_var"]
    assert schema.required == ("my_var",)
    assert schema.get("my-var") is schema.properties["my_var"]


def test_first_type_wins_on_conflicting_declarations() -> None:
    schema = _schema("{{target}}", "[target...]")
    assert schema.properties["target"].type == "string"
    assert schema.required == ("target",)


def test_flag_declared_first_is_never_required() -> None:
    schema = _schema("[-v]", "{{v}}")
    assert schema.properties["v"].type == "boolean"
    assert schema.required == ()
    assert "required" not in schema.to_dict()


def test_required_order_follows_declaration_order() -> None:
    schema = _schema("{{b}}", "[a...]", "{{c}}")
    assert schema.required == ("b", "a", "c")
