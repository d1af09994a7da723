"""
Template rendering for generated source files.

Each language keeps its templates in a ``templates/`` directory next to
its generator, one template per document part (``header``, ``member``,
``footer``). Literal and escaping helpers are registered as filters by
the generator that owns the templates.
"""

from typing import Any, Callable, Dict, List, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Jinja2 environment configured for source code output."""

    def __init__(
        self,
        template_dir: Path,
        filters: Optional[Dict[str, Callable[..., Any]]] = None,
    ):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            filters: Extra filters, typically literal formatters
        """
        self.template_dir = template_dir
        if not template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {template_dir}")

        # Generated source is not markup, so nothing is autoescaped
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters.update(filters or {})

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def list_templates(self) -> List[str]:
        """Names of all templates this engine can load."""
        return sorted(self._env.list_templates())


def create_template_engine(
    template_dir: Path,
    filters: Optional[Dict[str, Callable[..., Any]]] = None,
) -> TemplateEngine:
    """Create a template engine over a language's template directory."""
    return TemplateEngine(template_dir, filters)
