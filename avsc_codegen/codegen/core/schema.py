"""
Core schema representation for code generation.

Reads the JSON form of an Avro schema into a small immutable model
that generators can dispatch on. Only the shape of the schema is
checked here; anything the reader does not recognise makes
:func:`parse_schema` return ``None`` instead of raising.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)

# Unpaired UTF-16 surrogates left behind by JSON escapes such as \ud800
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class AvroType(Enum):
    """Every kind of type an Avro schema can declare."""

    NULL = "null"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BYTES = "bytes"
    STRING = "string"
    RECORD = "record"
    ENUM = "enum"
    ARRAY = "array"
    MAP = "map"
    FIXED = "fixed"
    UNION = "union"
    NAMED = "named"  # Reference to a previously defined named type


PRIMITIVE_TYPES = {
    AvroType.NULL,
    AvroType.BOOLEAN,
    AvroType.INT,
    AvroType.LONG,
    AvroType.FLOAT,
    AvroType.DOUBLE,
    AvroType.BYTES,
    AvroType.STRING,
}

# Record-like kinds spelled "error" in protocols are treated as records
_COMPLEX_TYPE_NAMES = {
    "record": AvroType.RECORD,
    "error": AvroType.RECORD,
    "enum": AvroType.ENUM,
    "array": AvroType.ARRAY,
    "map": AvroType.MAP,
    "fixed": AvroType.FIXED,
}


class _NoDefault:
    """Marker for a field that declares no default value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT = _NoDefault()


@dataclass(frozen=True)
class TypeSchema:
    """A tagged type variant; unions carry their members in order."""

    kind: AvroType
    members: Tuple["TypeSchema", ...] = ()
    name: Optional[str] = None  # Set for named types and references

    def is_nullable_union(self) -> bool:
        """True for a union of exactly one null and one non-null member."""
        if self.kind != AvroType.UNION or len(self.members) != 2:
            return False
        nulls = [m for m in self.members if m.kind == AvroType.NULL]
        return len(nulls) == 1

    def non_null_member(self) -> Optional["TypeSchema"]:
        """Return the concrete member of a nullable union."""
        if not self.is_nullable_union():
            return None
        for member in self.members:
            if member.kind != AvroType.NULL:
                return member
        return None

    def describe(self) -> str:
        """Short human readable form, used in diagnostics."""
        if self.kind == AvroType.UNION:
            return "[" + ", ".join(m.describe() for m in self.members) + "]"
        if self.kind == AvroType.NAMED:
            return self.name or "named"
        return self.kind.value


@dataclass(frozen=True)
class FieldSchema:
    """A single field of a record schema."""

    name: str
    type: TypeSchema
    default: Any = NO_DEFAULT
    doc: Optional[str] = None

    @property
    def has_default(self) -> bool:
        """True when the schema declared a default, including ``null``."""
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class RecordSchema:
    """A parsed record schema."""

    name: str
    namespace: Optional[str] = None
    fields: Tuple[FieldSchema, ...] = ()
    doc: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Namespace-qualified record name."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name


@dataclass(frozen=True)
class OtherSchema:
    """Any top-level schema that is not a record (enum, array, primitive...)."""

    type: TypeSchema


Schema = Union[RecordSchema, OtherSchema]


@dataclass(frozen=True)
class SchemaDocument:
    """Schema text plus the short name identifying where it came from."""

    name: str
    content: str


class SchemaParseError(Exception):
    """Raised internally when schema JSON does not have an Avro shape."""

    pass


def parse_schema(text: str) -> Optional[Schema]:
    """
    Parse Avro schema JSON text.

    Args:
        text: Schema document content

    Returns:
        RecordSchema for record schemas, OtherSchema for any other valid
        top-level schema, None when the text is not a readable Avro schema
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Schema text is not valid JSON: %s", e)
        return None

    try:
        return _read_top_level(data)
    except (SchemaParseError, RecursionError) as e:
        logger.debug("Schema JSON is not an Avro schema: %s", e)
        return None


def _read_top_level(data: Any) -> Schema:
    if isinstance(data, dict) and data.get("type") in ("record", "error"):
        return _read_record(data, enclosing_namespace=None)
    return OtherSchema(type=read_type(data))


def _read_record(data: Dict[str, Any], enclosing_namespace: Optional[str]) -> RecordSchema:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaParseError("record requires a name")

    namespace = data.get("namespace", enclosing_namespace)
    # A dotted name carries its own namespace
    if "." in name:
        namespace, _, name = name.rpartition(".")
    if namespace is not None and not isinstance(namespace, str):
        raise SchemaParseError(f"record {name} has a non-string namespace")
    if LONE_SURROGATE.search(name) or LONE_SURROGATE.search(namespace or ""):
        raise SchemaParseError(f"record {name!r} has an unpaired surrogate in its name")

    raw_fields = data.get("fields")
    if not isinstance(raw_fields, list):
        raise SchemaParseError(f"record {name} requires a list of fields")

    fields: List[FieldSchema] = []
    seen = set()
    for raw_field in raw_fields:
        if not isinstance(raw_field, dict):
            raise SchemaParseError(f"record {name} has a non-object field")
        field_name = raw_field.get("name")
        if not isinstance(field_name, str) or not field_name:
            raise SchemaParseError(f"record {name} has a field without a name")
        if field_name in seen:
            raise SchemaParseError(f"record {name} repeats field {field_name}")
        seen.add(field_name)
        if "type" not in raw_field:
            raise SchemaParseError(f"field {name}.{field_name} has no type")

        fields.append(
            FieldSchema(
                name=field_name,
                type=read_type(raw_field["type"]),
                default=raw_field.get("default", NO_DEFAULT),
                doc=_read_doc(raw_field),
            )
        )

    return RecordSchema(
        name=name,
        namespace=namespace,
        fields=tuple(fields),
        doc=_read_doc(data),
    )


def _read_doc(data: Dict[str, Any]) -> Optional[str]:
    doc = data.get("doc")
    return doc if isinstance(doc, str) else None


def read_type(data: Any) -> TypeSchema:
    """
    Read one Avro type expression.

    Nested named types are classified by kind only; their bodies are not
    translated so they are not read further.
    """
    if isinstance(data, str):
        try:
            kind = AvroType(data)
        except ValueError:
            return TypeSchema(kind=AvroType.NAMED, name=data)
        if kind in PRIMITIVE_TYPES:
            return TypeSchema(kind=kind)
        # "record", "array" etc. are not valid as bare type names
        return TypeSchema(kind=AvroType.NAMED, name=data)

    if isinstance(data, list):
        if not data:
            raise SchemaParseError("union must have at least one member")
        members = tuple(read_type(member) for member in data)
        if any(m.kind == AvroType.UNION for m in members):
            raise SchemaParseError("unions may not immediately contain unions")
        return TypeSchema(kind=AvroType.UNION, members=members)

    if isinstance(data, dict):
        type_name = data.get("type")
        if isinstance(type_name, (dict, list)):
            return read_type(type_name)
        if not isinstance(type_name, str):
            raise SchemaParseError(f"type object without a type: {data!r}")
        if type_name in _COMPLEX_TYPE_NAMES:
            return TypeSchema(kind=_COMPLEX_TYPE_NAMES[type_name], name=data.get("name"))
        # Primitive in object form, possibly with a logicalType
        return read_type(type_name)

    raise SchemaParseError(f"unrecognised type expression: {data!r}")
