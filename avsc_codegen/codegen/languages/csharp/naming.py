"""
Names a generated C# member may not use.

Keywords are matched case-sensitively, as the C# compiler does.
"""

# C# reserved keywords
CSHARP_RESERVED_WORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)

# Members a record already declares; a property with these names would clash
CSHARP_RECORD_MEMBERS = frozenset(
    {"EqualityContract", "Equals", "GetHashCode", "ToString", "Deconstruct", "PrintMembers"}
)
