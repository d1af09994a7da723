"""
C# code generator module.

Generates C# records with DataContract metadata from Avro record schemas.
"""

from .generator import CSharpGenerator
from .naming import CSHARP_RESERVED_WORDS
from .config import CSharpConfig, csharp_string_literal

__all__ = [
    "CSharpGenerator",
    "CSHARP_RESERVED_WORDS",
    "CSharpConfig",
    "csharp_string_literal",
]
