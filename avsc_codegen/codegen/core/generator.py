"""
Base generator interface for all code generation targets.

:class:`CodeGenerator` owns the translation of one schema document into
one type definition. Language generators only supply type names,
literal spelling, naming rules and templates; the gating, field
classification and assembly below are shared.

Translation never raises for bad input. A document that cannot or
should not be generated simply produces no output, and the reason is
kept in the result's diagnostics for callers that want it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .document import DocumentBuilder, MemberDeclaration, RecordDeclaration
from .naming import (
    NameSanitizer,
    NamingCase,
    convert_case,
    convert_namespace,
    normalize_namespace,
)
from .schema import (
    AvroType,
    FieldSchema,
    RecordSchema,
    SchemaDocument,
    TypeSchema,
    parse_schema,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)

# Scalar kinds that become members; everything else is dropped
SUPPORTED_SCALARS = (AvroType.STRING, AvroType.BOOLEAN)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidDefaultError(GeneratorError):
    """A declared default cannot be converted to the field's type."""

    pass


class DiagnosticKind(Enum):
    """Why something was left out of the output."""

    SKIPPED_DOCUMENT = "skipped_document"
    UNSUPPORTED_FIELD = "unsupported_field"
    INVALID_DEFAULT = "invalid_default"
    NAME_COLLISION = "name_collision"
    GENERATION_ERROR = "generation_error"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal note about one document or one of its fields."""

    kind: DiagnosticKind
    document: str
    message: str
    field_name: Optional[str] = None

    def __str__(self) -> str:
        if self.field_name:
            return f"{self.document}: {self.field_name}: {self.message}"
        return f"{self.document}: {self.message}"


@dataclass(frozen=True)
class GeneratedDocument:
    """Generated source text and the name it is emitted under."""

    artifact_name: str
    source_text: str


@dataclass(frozen=True)
class FieldClassification:
    """Outcome of matching a field type against the supported shapes."""

    scalar: Optional[AvroType]
    nullable: bool = False
    reason: Optional[str] = None

    @property
    def supported(self) -> bool:
        return self.scalar is not None


@dataclass(frozen=True)
class GenerationResult:
    """Container for one document's generation result and metadata."""

    document_name: str
    generated: Optional[GeneratedDocument] = None
    diagnostics: Tuple[Diagnostic, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.generated is not None

    def diagnostics_of(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]


def classify_field_type(type_schema: TypeSchema) -> FieldClassification:
    """
    Match a field type against the shapes that produce a member.

    Bare strings and booleans map to themselves. A union of null and
    exactly one other type maps to that type, marked nullable. Every
    other kind is unsupported and carries the reason.
    """
    kind = type_schema.kind

    if kind in SUPPORTED_SCALARS:
        return FieldClassification(scalar=kind)

    if kind == AvroType.UNION:
        if not type_schema.is_nullable_union():
            return FieldClassification(
                scalar=None,
                reason=f"union {type_schema.describe()} is not null plus one type",
            )
        member = type_schema.non_null_member()
        if member.kind in SUPPORTED_SCALARS:
            return FieldClassification(scalar=member.kind, nullable=True)
        return FieldClassification(
            scalar=None,
            reason=f"nullable {member.describe()} fields are not supported",
        )

    if kind == AvroType.NULL:
        return FieldClassification(scalar=None, reason="null fields carry no value")

    if kind == AvroType.NAMED:
        return FieldClassification(
            scalar=None,
            reason=f"named type reference {type_schema.describe()} is not supported",
        )

    return FieldClassification(
        scalar=None, reason=f"{kind.value} fields are not supported"
    )


def _chomp(text: str) -> str:
    """Drop one trailing newline, keeping any deliberate blank line."""
    return text[:-1] if text.endswith("\n") else text


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Reserved words and builtins of the target language
    reserved_words: frozenset = frozenset()
    builtin_names: frozenset = frozenset()

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.get_template_filters()
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs', '.py')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    def get_template_filters(self) -> Dict[str, Any]:
        """Extra Jinja2 filters the language templates rely on."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Type and literal mapping

    @abstractmethod
    def map_scalar_type(self, scalar: AvroType, nullable: bool) -> str:
        """Return the host type for a supported scalar."""
        pass

    @abstractmethod
    def format_string_literal(self, value: str) -> str:
        """Spell a string value as a source literal."""
        pass

    @abstractmethod
    def format_boolean_literal(self, value: bool) -> str:
        """Spell a boolean value as a source literal."""
        pass

    @abstractmethod
    def format_null_literal(self) -> str:
        """Spell the absent value."""
        pass

    def render_default(
        self, field_schema: FieldSchema, scalar: AvroType, nullable: bool
    ) -> Optional[str]:
        """
        Project a field's declared default onto a source literal.

        Returns:
            Literal text, or None when the field declares no default

        Raises:
            InvalidDefaultError: If the default does not fit the field type
        """
        if not field_schema.has_default:
            return None

        value = field_schema.default
        if value is None:
            if nullable:
                return self.format_null_literal()
            raise InvalidDefaultError(
                f"null default for non-nullable {scalar.value} field"
            )

        if scalar == AvroType.STRING and isinstance(value, str):
            return self.format_string_literal(value)
        if scalar == AvroType.BOOLEAN and isinstance(value, bool):
            return self.format_boolean_literal(value)

        raise InvalidDefaultError(
            f"default {value!r} is not a valid {scalar.value} value"
        )

    # Naming

    def _naming_case(self, value: str) -> NamingCase:
        try:
            return NamingCase(value)
        except ValueError:
            raise GeneratorError(f"Unknown naming case: {value}")

    def create_sanitizer(self) -> NameSanitizer:
        """Return a fresh sanitizer; one is used per translated record."""
        return NameSanitizer(set(self.reserved_words), set(self.builtin_names))

    def convert_namespace(self, raw: str) -> str:
        """Namespace as declared in the generated code."""
        return convert_namespace(raw, self._naming_case(self.config.namespace_case))

    def convert_type_name(self, raw: str, sanitizer: NameSanitizer) -> str:
        """Type identifier as declared in the generated code."""
        name = convert_case(raw, self._naming_case(self.config.type_case))
        return sanitizer.escape_reserved(name)

    def reserve_names(self, sanitizer: NameSanitizer, type_name: str):
        """Mark names members may not use. Languages override as needed."""
        pass

    def artifact_name(self, namespace: str, type_name: str) -> str:
        """Deterministic name the generated source is emitted under."""
        marker = self.config.artifact_marker
        if marker:
            return f"{namespace}.{type_name}.{marker}{self.file_extension}"
        return f"{namespace}.{type_name}{self.file_extension}"

    # Translation

    def translate(self, document: SchemaDocument) -> Optional[GeneratedDocument]:
        """
        Translate one schema document.

        Returns:
            The generated document, or None when the schema is not one
            this generator produces output for
        """
        return self.translate_with_diagnostics(document).generated

    def translate_with_diagnostics(self, document: SchemaDocument) -> GenerationResult:
        """Translate one schema document and report what was left out."""
        diagnostics: List[Diagnostic] = []

        schema = parse_schema(document.content)
        if schema is None:
            return self._skipped(document, "not a readable Avro schema")
        if not isinstance(schema, RecordSchema):
            return self._skipped(
                document,
                f"top-level schema is {schema.type.describe()}, not a record",
            )

        if not normalize_namespace(schema.namespace or "").strip():
            return self._skipped(document, f"record {schema.name} has no namespace")
        if not schema.fields:
            return self._skipped(document, f"record {schema.name} has no fields")

        sanitizer = self.create_sanitizer()
        namespace = self.convert_namespace(schema.namespace)
        type_name = self.convert_type_name(schema.name, sanitizer)
        self.reserve_names(sanitizer, type_name)

        builder = DocumentBuilder(
            namespace=namespace,
            type_name=type_name,
            wire_name=schema.name,
            wire_namespace=schema.namespace,
            doc=schema.doc if isinstance(schema.doc, str) else None,
        )

        for field_schema in schema.fields:
            classification = classify_field_type(field_schema.type)
            if not classification.supported:
                logger.debug(
                    "Dropping %s.%s: %s",
                    schema.name,
                    field_schema.name,
                    classification.reason,
                )
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.UNSUPPORTED_FIELD,
                        document=document.name,
                        field_name=field_schema.name,
                        message=classification.reason,
                    )
                )
                continue

            try:
                default_literal = self.render_default(
                    field_schema, classification.scalar, classification.nullable
                )
            except InvalidDefaultError as e:
                logger.debug(
                    "Skipping %s: bad default for %s: %s",
                    document.name,
                    field_schema.name,
                    e,
                )
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.INVALID_DEFAULT,
                        document=document.name,
                        field_name=field_schema.name,
                        message=str(e),
                    )
                )
                return GenerationResult(
                    document_name=document.name, diagnostics=tuple(diagnostics)
                )

            member_name = self._member_name(
                field_schema, sanitizer, document, diagnostics
            )
            builder.add_member(
                MemberDeclaration(
                    name=member_name,
                    wire_name=field_schema.name,
                    type_name=self.map_scalar_type(
                        classification.scalar, classification.nullable
                    ),
                    nullable=classification.nullable,
                    default_literal=default_literal,
                )
            )

        record = builder.build()
        source_text = self.format_code(self.render_document(record))
        generated = GeneratedDocument(
            artifact_name=self.artifact_name(namespace, type_name),
            source_text=source_text,
        )
        logger.debug(
            "Generated %s from %s (%d members)",
            generated.artifact_name,
            document.name,
            len(record.members),
        )

        return GenerationResult(
            document_name=document.name,
            generated=generated,
            diagnostics=tuple(diagnostics),
            metadata={
                "language": self.language_name,
                "file_extension": self.file_extension,
                "record": record.wire_full_name,
                "member_count": len(record.members),
                "dropped_fields": len(schema.fields) - len(record.members),
            },
        )

    def _member_name(
        self,
        field_schema: FieldSchema,
        sanitizer: NameSanitizer,
        document: SchemaDocument,
        diagnostics: List[Diagnostic],
    ) -> str:
        target_case = self._naming_case(self.config.field_case)
        wanted = sanitizer.escape_reserved(convert_case(field_schema.name, target_case))
        collides = sanitizer.is_used(wanted)
        member_name = sanitizer.sanitize_name(field_schema.name, target_case)

        if collides:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.NAME_COLLISION,
                    document=document.name,
                    field_name=field_schema.name,
                    message=f"identifier {wanted} is already taken, using {member_name}",
                )
            )
        return member_name

    def _skipped(self, document: SchemaDocument, reason: str) -> GenerationResult:
        logger.debug("Skipping %s: %s", document.name, reason)
        return GenerationResult(
            document_name=document.name,
            diagnostics=(
                Diagnostic(
                    kind=DiagnosticKind.SKIPPED_DOCUMENT,
                    document=document.name,
                    message=reason,
                ),
            ),
        )

    # Rendering

    def template_name(self, part: str) -> str:
        """Template file for a document part, e.g. ``member.cs.j2``."""
        return f"{part}{self.file_extension}.j2"

    def template_context(self, record: RecordDeclaration) -> Dict[str, Any]:
        """Variables shared by every template of a document."""
        return {
            "record": record,
            "config": self.config,
            "indent": " " * self.config.indent_size,
        }

    def render_document(self, record: RecordDeclaration) -> str:
        """
        Assemble header, members and closing into one document.

        Every member is followed by a blank separator line.
        """
        context = self.template_context(record)
        header = self.render_template(self.template_name("header"), context)
        parts = [_chomp(header)]

        for member in record.members:
            member_text = self.render_template(
                self.template_name("member"), {**context, "member": member}
            )
            parts.append(_chomp(member_text))
            parts.append("")

        footer = self.render_template(self.template_name("footer"), context)
        parts.append(_chomp(footer))
        return "\n".join(parts)

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code ending in a single line ending
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        line_ending = self.config.line_ending
        return line_ending.join(formatted_lines) + line_ending

    # Template helpers

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


def generate_code(generator: CodeGenerator, document: SchemaDocument) -> GenerationResult:
    """
    Translate a document, turning generator failures into a result.

    Template or configuration problems are reported as a
    GENERATION_ERROR diagnostic so that one document cannot abort a
    batch.

    Args:
        generator: Code generator instance
        document: Schema document to translate

    Returns:
        GenerationResult with generated output and diagnostics
    """
    try:
        return generator.translate_with_diagnostics(document)
    except (GeneratorError, TemplateError) as e:
        logger.error("Code generation failed for %s: %s", document.name, e)
        return GenerationResult(
            document_name=document.name,
            diagnostics=(
                Diagnostic(
                    kind=DiagnosticKind.GENERATION_ERROR,
                    document=document.name,
                    message=f"Code generation failed: {str(e)}",
                ),
            ),
        )
