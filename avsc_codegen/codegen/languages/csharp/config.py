"""
C#-specific configuration and literal formatting.
"""

from ...core.config import ConfigError
from ...core.schema import LONE_SURROGATE, AvroType


CSHARP_TYPE_MAP = {
    AvroType.STRING: "string",
    AvroType.BOOLEAN: "bool",
}

VALID_TYPE_KEYWORDS = {"record", "record class", "record struct", "class"}

# Escapes for characters a regular C# string literal may not contain raw
_CSHARP_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

_LINE_BREAKS = {"\u0085", "\u2028", "\u2029"}


class CSharpConfig:
    """C#-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize C# configuration."""
        # Emit "#nullable enable" so that "string?" is a nullable reference
        self.nullable_context = kwargs.get("nullable_context", True)

        # record, record class, record struct or class
        self.type_keyword = kwargs.get("type_keyword", "record")
        if self.type_keyword not in VALID_TYPE_KEYWORDS:
            raise ConfigError(
                f"Invalid type_keyword: {self.type_keyword}. "
                f"Expected one of: {', '.join(sorted(VALID_TYPE_KEYWORDS))}"
            )

        self.type_map = CSHARP_TYPE_MAP.copy()

    def get_csharp_type(self, scalar: AvroType, is_nullable: bool = False) -> str:
        """Get C# type string for a scalar."""
        csharp_type = self.type_map[scalar]
        if is_nullable:
            csharp_type = f"{csharp_type}?"
        return csharp_type


def csharp_string_literal(value: str) -> str:
    """Quote a value as a regular C# string literal."""
    out = []
    for char in value:
        if char in _CSHARP_ESCAPES:
            out.append(_CSHARP_ESCAPES[char])
        elif ord(char) < 0x20 or char in _LINE_BREAKS or LONE_SURROGATE.match(char):
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def csharp_xml_text(value: str) -> str:
    """Escape text for an XML documentation comment."""
    value = LONE_SURROGATE.sub("\ufffd", value)
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
