"""
avsc_codegen - generate immutable types from Avro record schemas.

Each ``.avsc`` document holding a record with a namespace becomes one
source file declaring an immutable type whose members mirror the
record's string and boolean fields.
"""

__version__ = "0.1.0"

from .codegen import (
    DEFAULT_LANGUAGE,
    GeneratedDocument,
    GenerationResult,
    SchemaDocument,
    get_generator,
    list_supported_languages,
    translate,
    translate_with_diagnostics,
)
from .codegen.core.naming import normalize_identifier, normalize_namespace

__all__ = [
    "__version__",
    "DEFAULT_LANGUAGE",
    "GeneratedDocument",
    "GenerationResult",
    "SchemaDocument",
    "get_generator",
    "list_supported_languages",
    "translate",
    "translate_with_diagnostics",
    "normalize_identifier",
    "normalize_namespace",
]
