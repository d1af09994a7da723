"""Avro schema reader tests."""

from __future__ import annotations

import json

from avsc_codegen.codegen.core.schema import (
    NO_DEFAULT,
    AvroType,
    OtherSchema,
    RecordSchema,
    TypeSchema,
    parse_schema,
)
from conftest import record_schema


def _parse(schema) -> RecordSchema | OtherSchema | None:
    return parse_schema(json.dumps(schema))


def test_record_schema_is_read_with_fields_and_defaults() -> None:
    schema = _parse(
        record_schema(
            fields=[
                {"name": "full_name", "type": "string", "doc": "Display name"},
                {"name": "active", "type": ["null", "boolean"], "default": None},
            ],
            doc="A user",
        )
    )

    assert isinstance(schema, RecordSchema)
    assert schema.full_name == "my.app.User"
    assert schema.doc == "A user"
    assert [f.name for f in schema.fields] == ["full_name", "active"]

    full_name, active = schema.fields
    assert full_name.type == TypeSchema(kind=AvroType.STRING)
    assert full_name.default is NO_DEFAULT
    assert not full_name.has_default

    assert active.has_default
    assert active.default is None
    assert active.type.is_nullable_union()
    assert active.type.non_null_member().kind == AvroType.BOOLEAN


def test_dotted_record_name_carries_namespace() -> None:
    schema = _parse({"type": "record", "name": "com.acme.Order", "fields": []})

    assert schema.name == "Order"
    assert schema.namespace == "com.acme"


def test_missing_namespace_is_none() -> None:
    schema = _parse(record_schema(namespace=None))

    assert schema.namespace is None
    assert schema.full_name == "User"


def test_non_record_top_level_schemas() -> None:
    enum_schema = _parse({"type": "enum", "name": "Color", "symbols": ["RED"]})
    primitive = _parse("string")
    union = _parse(["null", "string"])

    assert enum_schema == OtherSchema(type=TypeSchema(kind=AvroType.ENUM, name="Color"))
    assert primitive == OtherSchema(type=TypeSchema(kind=AvroType.STRING))
    assert union.type.kind == AvroType.UNION


def test_unreadable_documents_yield_none() -> None:
    assert parse_schema("{not json") is None
    assert parse_schema("") is None
    assert _parse({"type": "record", "name": "NoFields"}) is None
    assert _parse({"type": "record", "fields": []}) is None
    assert _parse(record_schema(fields=[{"name": "x"}])) is None
    assert _parse(record_schema(fields=[{"type": "string"}])) is None
    assert _parse(42) is None


def test_duplicate_field_names_are_rejected() -> None:
    schema = record_schema(
        fields=[{"name": "a", "type": "string"}, {"name": "a", "type": "boolean"}]
    )

    assert _parse(schema) is None


def test_unions_may_not_nest_or_be_empty() -> None:
    assert _parse(record_schema(fields=[{"name": "x", "type": ["null", ["string"]]}])) is None
    assert _parse(record_schema(fields=[{"name": "x", "type": []}])) is None


def test_type_expressions() -> None:
    schema = _parse(
        record_schema(
            fields=[
                {"name": "id", "type": {"type": "string", "logicalType": "uuid"}},
                {"name": "tags", "type": {"type": "array", "items": "string"}},
                {"name": "other", "type": "com.acme.Other"},
                {"name": "count", "type": "long"},
            ]
        )
    )

    kinds = [f.type.kind for f in schema.fields]
    assert kinds == [AvroType.STRING, AvroType.ARRAY, AvroType.NAMED, AvroType.LONG]
    assert schema.fields[2].type.name == "com.acme.Other"


def test_nullable_union_requires_one_null_and_one_other_member() -> None:
    null = TypeSchema(kind=AvroType.NULL)
    string = TypeSchema(kind=AvroType.STRING)
    boolean = TypeSchema(kind=AvroType.BOOLEAN)

    assert TypeSchema(kind=AvroType.UNION, members=(string, null)).is_nullable_union()
    assert not TypeSchema(kind=AvroType.UNION, members=(null, null)).is_nullable_union()
    assert not TypeSchema(
        kind=AvroType.UNION, members=(null, string, boolean)
    ).is_nullable_union()
    assert not TypeSchema(kind=AvroType.UNION, members=(string,)).is_nullable_union()


def test_describe() -> None:
    union = TypeSchema(
        kind=AvroType.UNION,
        members=(TypeSchema(kind=AvroType.NULL), TypeSchema(kind=AvroType.NAMED, name="X")),
    )

    assert union.describe() == "[null, X]"


def test_deeply_nested_json_yields_none() -> None:
    depth = 200_000

    assert parse_schema("[" * depth + "]" * depth) is None
    assert parse_schema('{"type": ' * depth + '"string"' + "}" * depth) is None


def test_unpaired_surrogate_in_record_name_yields_none() -> None:
    assert _parse(record_schema(name="Us\ud800er")) is None
    assert _parse(record_schema(namespace="my.\udc00app")) is None
