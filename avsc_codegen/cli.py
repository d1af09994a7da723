"""
Command-line interface for Avro schema code generation.

Usage:
  avsc-codegen generate schemas/ -l csharp -o generated/
  avsc-codegen generate user.avsc -l python
  avsc-codegen --list-languages
  avsc-codegen --language-info csharp
"""

import argparse
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    DEFAULT_LANGUAGE,
    ConfigError,
    DiagnosticKind,
    GeneratorConfig,
    GenerationResult,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.schema import SchemaDocument
from .logging_config import get_logger, setup_logging
from .pipeline import GenerationCache, generate_all, write_results
from .utils import SchemaLoaderError, load_schema_documents, load_schema_from_url

logger = get_logger(__name__)

# Lexer names rich/pygments understands for each language
SYNTAX_LEXERS = {"csharp": "csharp", "python": "python"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its generate subcommand."""
    parser = argparse.ArgumentParser(
        prog="avsc-codegen",
        description="Generate immutable types from Avro record schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  avsc-codegen generate schemas/ -l csharp -o generated/
  avsc-codegen generate user.avsc -l python
  avsc-codegen --list-languages
  avsc-codegen --language-info csharp
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    subparsers = parser.add_subparsers(dest="command")
    create_generate_subparser(subparsers)
    return parser


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``generate`` subcommand parser."""
    parser = subparsers.add_parser(
        "generate",
        help="Generate code from Avro schema files",
        description="Translate Avro record schemas into source files",
    )

    parser.add_argument(
        "paths", nargs="*", metavar="PATH", help="Schema files or directories"
    )
    parser.add_argument(
        "--url", action="append", default=[], help="URL to fetch a schema from"
    )
    parser.add_argument(
        "--language",
        "-l",
        default=DEFAULT_LANGUAGE,
        help=f"Target language (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--output-dir", "-o", help="Directory for generated files (default: stdout)"
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")

    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    parser.add_argument(
        "--type-case",
        choices=["pascal", "camel", "snake"],
        help="Naming case for generated types",
    )
    parser.add_argument(
        "--field-case",
        choices=["pascal", "camel", "snake"],
        help="Naming case for members",
    )
    parser.add_argument(
        "--workers", type=int, default=4, help="Number of worker threads (default: 4)"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show dropped fields, skipped documents and debug logging",
    )

    parser.set_defaults(func=_handle_generate_command)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``avsc-codegen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING)

    if args.list_languages:
        return _list_languages()

    if args.language_info:
        return _show_language_info(args.language_info)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    return args.func(args)


def _handle_generate_command(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        if not (args.paths or args.url):
            raise CLIError("Input source required (PATH or --url)")

        if not _validate_language(args.language):
            return 1

        config = _build_config(args)
        documents = _load_documents(args, config)
        if not documents:
            console.print("[yellow]⚠️  No schema documents found[/yellow]")
            return 0

        return _generate_and_output(documents, args, config)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    try:
        language_info = list_all_language_info()
    except RegistryError as e:
        console.print(f"[red]✗ Error listing languages:[/red] {e}")
        return 1

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] avsc-codegen generate [dim]schemas/[/dim] -l [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] avsc-codegen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    try:
        info = get_language_info(language)
    except RegistryError as e:
        console.print(f"[red]✗ Error getting language info:[/red] {e}")
        return 1

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}
[bold]Templates:[/bold] {', '.join(info['templates'])}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    config: GeneratorConfig = info["config"]
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Type Case", config.type_case)
    config_table.add_row("Field Case", config.field_case)
    config_table.add_row("Namespace Case", config.namespace_case)
    config_table.add_row("Artifact Marker", config.artifact_marker)
    config_table.add_row("Indent Size", str(config.indent_size))
    config_table.add_row("Add Comments", str(config.add_comments))
    for key, value in sorted(config.language_config.items()):
        config_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(config_table)

    examples_text = f"""Print generated code:
[cyan]avsc-codegen generate -l {language} user.avsc[/cyan]

Generate a directory of schemas:
[cyan]avsc-codegen generate -l {language} -o generated/ schemas/[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language or alias is supported."""
    if is_language_supported(language):
        return True

    if not silent:
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
    return False


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments and an optional config file."""
    overrides = {}

    if args.no_comments:
        overrides["add_comments"] = False

    if args.type_case:
        overrides["type_case"] = args.type_case

    if args.field_case:
        overrides["field_case"] = args.field_case

    if args.output_dir:
        overrides["output_dir"] = args.output_dir

    try:
        return load_config(
            language=get_registry().resolve(args.language),
            custom_config=overrides,
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_documents(
    args: argparse.Namespace, config: GeneratorConfig
) -> List[SchemaDocument]:
    """Load schema documents from paths and URLs."""
    try:
        documents = load_schema_documents(args.paths, config.schema_suffixes)
        documents.extend(load_schema_from_url(url) for url in args.url)
    except FileNotFoundError as e:
        raise CLIError(str(e)) from e
    except SchemaLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e

    logger.debug("Loaded %d schema documents", len(documents))
    return documents


def _generate_and_output(
    documents: List[SchemaDocument], args: argparse.Namespace, config: GeneratorConfig
) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        generator = get_generator(args.language, config)
    except RegistryError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(
            f"[green]Generating {generator.language_name} code...", total=None
        )
        results = generate_all(
            generator, documents, max_workers=args.workers, cache=GenerationCache()
        )

    generated = [result for result in results if result.success]

    if config.output_dir:
        try:
            written = write_results(generated, config.output_dir)
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {config.output_dir}:[/red] {e}")
            return 1
        for path in written:
            console.print(f"[green]✓[/green] Wrote [cyan]{path}[/cyan]")
    else:
        lexer = SYNTAX_LEXERS.get(generator.language_name, "text")
        for result in generated:
            console.print(f"\n[green]📄 {result.generated.artifact_name}[/green]\n")
            console.print(Syntax(result.generated.source_text, lexer, theme="monokai"))

    if args.verbose:
        _print_diagnostics(results)

    failed = [r for r in results if _has_generation_error(r)]
    console.print(
        f"\n[bold]{len(generated)}[/bold] of [bold]{len(results)}[/bold] "
        f"schema documents generated"
    )
    return 1 if failed else 0


def _has_generation_error(result: GenerationResult) -> bool:
    return bool(result.diagnostics_of(DiagnosticKind.GENERATION_ERROR))


def _print_diagnostics(results: List[GenerationResult]):
    """Print every diagnostic as a table."""
    rows = [d for result in results for d in result.diagnostics]
    if not rows:
        return

    table = Table(
        title="⚠️  Diagnostics",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold yellow",
    )
    table.add_column("Document", style="bold")
    table.add_column("Kind", style="yellow")
    table.add_column("Field", style="cyan")
    table.add_column("Message")

    for diagnostic in rows:
        table.add_row(
            diagnostic.document,
            diagnostic.kind.value,
            diagnostic.field_name or "",
            diagnostic.message,
        )

    console.print()
    console.print(table)
