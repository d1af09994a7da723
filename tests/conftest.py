"""Shared fixtures for the test suite."""

from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from avsc_codegen.codegen.core.schema import SchemaDocument


def record_schema(
    name: str = "User",
    namespace: str | None = "my.app",
    fields: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "record", "name": name}
    if namespace is not None:
        schema["namespace"] = namespace
    schema["fields"] = fields if fields is not None else []
    schema.update(extra)
    return schema


@pytest.fixture
def make_document() -> Callable[..., SchemaDocument]:
    """Build a SchemaDocument from a schema dict or raw text."""

    def _make(schema: Any, name: str = "user") -> SchemaDocument:
        content = schema if isinstance(schema, str) else json.dumps(schema)
        return SchemaDocument(name=name, content=content)

    return _make


@pytest.fixture
def user_document(make_document) -> SchemaDocument:
    return make_document(
        record_schema(fields=[{"name": "full_name", "type": "string"}])
    )
