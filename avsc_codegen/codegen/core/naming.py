"""
Naming utilities for safe code generation.

Handles namespace and identifier normalization, case conversions,
keyword conflicts and per-record name uniqueness.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


NAMESPACE_DELIMITERS = re.compile(r"([./])")
_SEGMENT_WORD_BREAK = re.compile(r"[_\-\s]+")
_IDENTIFIER_WORD_BREAK = re.compile(r"[\W_]+")
_HAS_WORD_CHARACTER = re.compile(r"[^\W_]")

# Returned when an identifier has no usable characters at all
FALLBACK_IDENTIFIER = "Field"


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def normalize_namespace(raw: str) -> str:
    """
    Convert a dot- or slash-delimited namespace into PascalCase segments.

    Each segment is converted independently and the delimiters are kept
    where they were. Characters that have no case pass through unchanged.

    Args:
        raw: Namespace as written in the schema (may be empty)

    Returns:
        Normalized namespace, empty when the input is empty
    """
    parts = NAMESPACE_DELIMITERS.split(raw or "")
    converted = []
    for part in parts:
        if part in (".", "/"):
            converted.append(part)
        else:
            words = _SEGMENT_WORD_BREAK.split(part)
            converted.append("".join(_capitalize_first(w) for w in words if w))
    return "".join(converted)


def normalize_identifier(raw: str) -> str:
    """
    Convert a record or field name into a PascalCase identifier.

    Non-word characters and underscores are word breaks; the first letter
    of every word is upper-cased and the rest of the word is kept, so the
    function is idempotent. A leading digit gets an underscore prefix.

    Args:
        raw: Identifier as written in the schema

    Returns:
        PascalCase identifier
    """
    words = [w for w in _IDENTIFIER_WORD_BREAK.split(raw or "") if w]
    if not words:
        return FALLBACK_IDENTIFIER

    identifier = "".join(_capitalize_first(w) for w in words)
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Replace hyphens and other non-word characters with underscores
    name = re.sub(r"\W", "_", name)

    # Insert underscore before uppercase letters
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

    # Convert to lowercase and clean up multiple underscores
    name = name.lower()
    name = re.sub(r"_+", "_", name).strip("_")

    if not name:
        return to_snake_case(FALLBACK_IDENTIFIER)
    if name[0].isdigit():
        name = f"_{name}"
    return name


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    pascal = normalize_identifier(name)
    if pascal.startswith("_"):
        return pascal
    return pascal[0].lower() + pascal[1:]


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return to_snake_case(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return to_camel_case(name)
    elif target_case == NamingCase.PASCAL_CASE:
        return normalize_identifier(name)
    elif target_case == NamingCase.KEBAB_CASE:
        return to_snake_case(name).replace("_", "-")
    elif target_case == NamingCase.SCREAMING_SNAKE:
        return to_snake_case(name).upper()
    else:
        return name


def convert_namespace(raw: str, target_case: NamingCase) -> str:
    """
    Convert every namespace segment to the given case.

    PascalCase goes through :func:`normalize_namespace`; other cases
    convert each segment with :func:`convert_case`. Segments without any
    letter or digit pass through unchanged.
    """
    if target_case == NamingCase.PASCAL_CASE:
        return normalize_namespace(raw)

    parts = NAMESPACE_DELIMITERS.split(raw or "")
    return "".join(
        convert_case(part, target_case) if _HAS_WORD_CHARACTER.search(part) else part
        for part in parts
    )


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self, reserved_words: Set[str] = None, builtin_types: Set[str] = None
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.SNAKE_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a name for safe use in target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name, unique among names this sanitizer has handed out
        """
        # Use cache if available
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = self.escape_reserved(
            convert_case(name, target_case), suffix_on_conflict
        )
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        # Cache and track
        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)

        return final_name

    def escape_reserved(self, name: str, suffix: str = "_") -> str:
        """Append the suffix to reserved words and builtin names."""
        if name in self.reserved_words or name in self.builtin_types:
            return f"{name}{suffix}"
        return name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve conflicts with names already handed out."""
        original_name = name

        counter = 1
        while name in self._used_names:
            if suffix == "_":
                name = f"{original_name}{suffix}{counter}"
            else:
                name = f"{original_name}{counter}"
            counter += 1

        return name

    def is_used(self, name: str) -> bool:
        """Check whether a name has already been handed out."""
        return name in self._used_names

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)
