"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .csharp import CSharpGenerator
from .python import PythonGenerator

__all__ = ["CSharpGenerator", "PythonGenerator"]
