"""
Avro schema code generation.

Translates Avro record schemas into immutable types in various languages.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    register_generator,
)
from .core.generator import (
    CodeGenerator,
    Diagnostic,
    DiagnosticKind,
    GeneratedDocument,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import SchemaDocument, RecordSchema, FieldSchema, TypeSchema, AvroType
from .core.naming import normalize_identifier, normalize_namespace
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config

DEFAULT_LANGUAGE = "csharp"

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def translate(
    document: SchemaDocument, language: str = DEFAULT_LANGUAGE, config: ConfigLike = None
) -> Optional[GeneratedDocument]:
    """
    Translate one schema document.

    Args:
        document: Schema document to translate
        language: Target language name or alias
        config: Generator configuration, dict of overrides or config file path

    Returns:
        GeneratedDocument, or None when the schema yields no output
    """
    return get_generator(language, config).translate(document)


def translate_with_diagnostics(
    document: SchemaDocument, language: str = DEFAULT_LANGUAGE, config: ConfigLike = None
) -> GenerationResult:
    """Translate one schema document and report dropped fields and skips."""
    return get_generator(language, config).translate_with_diagnostics(document)


__all__ = [
    "DEFAULT_LANGUAGE",
    "translate",
    "translate_with_diagnostics",
    "GeneratorRegistry",
    "RegistryError",
    "get_generator",
    "get_language_info",
    "get_registry",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "register_generator",
    "CodeGenerator",
    "Diagnostic",
    "DiagnosticKind",
    "GeneratedDocument",
    "GenerationResult",
    "GeneratorError",
    "generate_code",
    "SchemaDocument",
    "RecordSchema",
    "FieldSchema",
    "TypeSchema",
    "AvroType",
    "normalize_identifier",
    "normalize_namespace",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
]
