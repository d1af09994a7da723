"""
C# code generator implementation.

Generates immutable C# records with DataContract serialization metadata.
Members without a schema default are declared ``required`` so the
compiler rejects object initializers that leave them out.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from ...core.schema import AvroType
from .config import CSharpConfig, csharp_string_literal, csharp_xml_text
from .naming import CSHARP_RESERVED_WORDS, CSHARP_RECORD_MEMBERS


class CSharpGenerator(CodeGenerator):
    """Code generator for C# records."""

    reserved_words = CSHARP_RESERVED_WORDS
    builtin_names = CSHARP_RECORD_MEMBERS

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)
        self.csharp_config = CSharpConfig(**self.config.language_config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def get_template_filters(self) -> Dict[str, Any]:
        return {
            "csharp_string": csharp_string_literal,
            "xml_text": csharp_xml_text,
        }

    def map_scalar_type(self, scalar: AvroType, nullable: bool) -> str:
        return self.csharp_config.get_csharp_type(scalar, is_nullable=nullable)

    def format_string_literal(self, value: str) -> str:
        return csharp_string_literal(value)

    def format_boolean_literal(self, value: bool) -> str:
        return "true" if value else "false"

    def format_null_literal(self) -> str:
        return "null"

    def reserve_names(self, sanitizer: NameSanitizer, type_name: str):
        """Member names may not repeat the enclosing type name."""
        sanitizer.add_used_name(type_name)

    def template_context(self, record) -> Dict[str, Any]:
        context = super().template_context(record)
        context["csharp"] = self.csharp_config
        return context
