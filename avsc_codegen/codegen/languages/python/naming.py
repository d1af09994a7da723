"""
Python-specific naming rules.

Besides keywords, generated members may not shadow builtins or the
names the generated module imports, since class bodies resolve later
annotations and default expressions through earlier members.
"""

import keyword


# Python reserved keywords
PYTHON_RESERVED_WORDS = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist)

# Python built-in types and functions
PYTHON_BUILTIN_TYPES = frozenset(
    {
        # Types
        "int",
        "float",
        "str",
        "bool",
        "list",
        "dict",
        "set",
        "tuple",
        "bytes",
        "object",
        "type",
        # Special attributes
        "property",
        "staticmethod",
        "classmethod",
        "super",
        # Common functions
        "len",
        "print",
        "id",
        "hash",
        "repr",
        "format",
        "iter",
        "next",
    }
)

# Names imported by every generated module
GENERATED_MODULE_NAMES = frozenset({"dataclass", "field", "ClassVar"})
