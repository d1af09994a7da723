"""
Python code generator implementation.

Generates frozen, keyword-only dataclasses. Members without a schema
default have no dataclass default, so constructing an instance without
them raises TypeError. Wire names live in field metadata and in the
class-level ``__avro_name__`` / ``__avro_namespace__`` attributes.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.schema import AvroType
from .config import PythonConfig, python_docstring, python_string_literal
from .naming import GENERATED_MODULE_NAMES, PYTHON_BUILTIN_TYPES, PYTHON_RESERVED_WORDS


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses."""

    reserved_words = PYTHON_RESERVED_WORDS
    builtin_names = PYTHON_BUILTIN_TYPES | GENERATED_MODULE_NAMES

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Python generator with configuration."""
        super().__init__(config)
        self.python_config = PythonConfig(**self.config.language_config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def get_template_filters(self) -> Dict[str, Any]:
        return {
            "python_string": python_string_literal,
            "docstring": python_docstring,
            "field_metadata": self.field_metadata,
        }

    def field_metadata(self, wire_name: str) -> str:
        """Dict literal passed as ``field(metadata=...)``."""
        key = python_string_literal(self.python_config.metadata_key)
        return f"{{{key}: {python_string_literal(wire_name)}}}"

    def map_scalar_type(self, scalar: AvroType, nullable: bool) -> str:
        return self.python_config.get_python_type(scalar, is_optional=nullable)

    def format_string_literal(self, value: str) -> str:
        return python_string_literal(value)

    def format_boolean_literal(self, value: bool) -> str:
        return "True" if value else "False"

    def format_null_literal(self) -> str:
        return "None"

    def template_context(self, record) -> Dict[str, Any]:
        context = super().template_context(record)
        context["python"] = self.python_config
        return context
