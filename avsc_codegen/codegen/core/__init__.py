"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    InvalidDefaultError,
    GenerationResult,
    GeneratedDocument,
    Diagnostic,
    DiagnosticKind,
    FieldClassification,
    classify_field_type,
    generate_code,
)
from .document import DocumentBuilder, MemberDeclaration, RecordDeclaration
from .schema import (
    AvroType,
    TypeSchema,
    FieldSchema,
    RecordSchema,
    OtherSchema,
    SchemaDocument,
    NO_DEFAULT,
    parse_schema,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    normalize_namespace,
    normalize_identifier,
    convert_case,
    convert_namespace,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "InvalidDefaultError",
    "GenerationResult",
    "GeneratedDocument",
    "Diagnostic",
    "DiagnosticKind",
    "FieldClassification",
    "classify_field_type",
    "generate_code",
    # Document assembly
    "DocumentBuilder",
    "MemberDeclaration",
    "RecordDeclaration",
    # Schema system - core data structures
    "AvroType",
    "TypeSchema",
    "FieldSchema",
    "RecordSchema",
    "OtherSchema",
    "SchemaDocument",
    "NO_DEFAULT",
    "parse_schema",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "normalize_namespace",
    "normalize_identifier",
    "convert_case",
    "convert_namespace",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
