"""
Python code generator module.

Generates frozen keyword-only dataclasses from Avro record schemas.
"""

from .generator import PythonGenerator
from .config import PythonConfig, python_string_literal
from .naming import PYTHON_RESERVED_WORDS, PYTHON_BUILTIN_TYPES

__all__ = [
    "PythonGenerator",
    "PythonConfig",
    "python_string_literal",
    "PYTHON_RESERVED_WORDS",
    "PYTHON_BUILTIN_TYPES",
]
