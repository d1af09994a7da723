"""
Python-specific configuration and type mappings.

Provides type mapping and literal formatting for frozen
keyword-only dataclass generation.
"""

import json

from ...core.config import ConfigError
from ...core.schema import LONE_SURROGATE, AvroType


# Python type mappings
PYTHON_TYPE_MAP = {
    AvroType.STRING: "str",
    AvroType.BOOLEAN: "bool",
}


class PythonConfig:
    """Python-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Python configuration."""
        # Dataclass-specific options
        self.dataclass_slots = kwargs.get("dataclass_slots", True)

        # Key under which field metadata records the schema field name
        self.metadata_key = kwargs.get("metadata_key", "avro_name")
        if not isinstance(self.metadata_key, str) or not self.metadata_key:
            raise ConfigError(f"Invalid metadata_key: {self.metadata_key!r}")

        self.type_map = PYTHON_TYPE_MAP.copy()

    def get_python_type(self, scalar: AvroType, is_optional: bool = False) -> str:
        """Get Python type string for a scalar."""
        python_type = self.type_map[scalar]
        if is_optional:
            python_type = f"{python_type} | None"
        return python_type

    def get_decorator_arguments(self) -> str:
        """Arguments of the @dataclass decorator."""
        arguments = ["frozen=True", "kw_only=True"]
        if self.dataclass_slots:
            arguments.append("slots=True")
        return ", ".join(arguments)


def python_string_literal(value: str) -> str:
    """Quote a value as a double-quoted Python string literal."""
    literal = json.dumps(value, ensure_ascii=False)
    return LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", literal)


def python_docstring(value: str) -> str:
    """Make text safe to place inside a triple-quoted docstring."""
    value = LONE_SURROGATE.sub("\ufffd", value)
    return value.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
