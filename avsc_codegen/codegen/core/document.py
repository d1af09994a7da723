"""
Declarations that make up one generated type.

A :class:`DocumentBuilder` collects member declarations in schema order
and produces an immutable :class:`RecordDeclaration`. Generators render
that declaration through their templates, so header, member and closing
output can be tested separately from schema handling.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class MemberDeclaration:
    """One property/field of the generated type."""

    name: str  # Identifier in the generated code
    wire_name: str  # Field name as written in the schema
    type_name: str  # Host type, already marked optional when nullable
    nullable: bool = False
    default_literal: Optional[str] = None

    @property
    def required(self) -> bool:
        """Members without a default must be supplied at construction."""
        return self.default_literal is None


@dataclass(frozen=True)
class RecordDeclaration:
    """Everything needed to render one type definition."""

    namespace: str  # Normalized namespace
    type_name: str  # Normalized type name
    wire_name: str  # Record name as written in the schema
    wire_namespace: str  # Namespace as written in the schema
    members: Tuple[MemberDeclaration, ...] = ()
    doc: Optional[str] = None

    @property
    def wire_full_name(self) -> str:
        if self.wire_namespace:
            return f"{self.wire_namespace}.{self.wire_name}"
        return self.wire_name


class DocumentBuilder:
    """Collects member declarations for one record."""

    def __init__(
        self,
        namespace: str,
        type_name: str,
        wire_name: str,
        wire_namespace: str,
        doc: Optional[str] = None,
    ):
        self.namespace = namespace
        self.type_name = type_name
        self.wire_name = wire_name
        self.wire_namespace = wire_namespace
        self.doc = doc
        self._members: List[MemberDeclaration] = []

    def add_member(self, member: MemberDeclaration) -> "DocumentBuilder":
        """Append a member; members keep the order they were added in."""
        self._members.append(member)
        return self

    def build(self) -> RecordDeclaration:
        """Freeze the collected declarations."""
        return RecordDeclaration(
            namespace=self.namespace,
            type_name=self.type_name,
            wire_name=self.wire_name,
            wire_namespace=self.wire_namespace,
            members=tuple(self._members),
            doc=self.doc,
        )
