"""Sandboxed Jinja2 rendering engine for agent prompts.

Prompts embed issue titles, bodies and plan comments written by users, so
templates are rendered in Jinja2's ``SandboxedEnvironment``: template code
cannot reach unsafe attributes, and a template path cannot escape the
template directory.

Example:
    >>> from leonidas.rendering.engine import PromptTemplateEngine
    >>> engine = PromptTemplateEngine()
    >>> prompt = engine.render("prompts/plan.md.j2", context)
"""

from pathlib import Path
from typing import Any, cast

from jinja2 import (
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2.sandbox import SandboxedEnvironment


class PromptTemplateEngine:
    """Jinja2 engine with a hardened configuration.

    Configuration:
        - Sandboxed environment
        - StrictUndefined: a missing context variable is an error, not an
          empty string
        - Autoescape disabled (markdown output)
        - trim_blocks/lstrip_blocks so block tags leave no blank lines
        - keep_trailing_newline preserves file format

    Attributes:
        template_dir: Resolved path to the template directory.
        env: The SandboxedEnvironment instance.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the engine.

        Args:
            template_dir: Root directory for templates. Defaults to the
                package's ``templates`` directory.

        Raises:
            ValueError: If template_dir doesn't exist or isn't a directory.
        """
        if template_dir is None:
            template_dir = Path(__file__).parent.parent / "templates"

        self.template_dir = template_dir.resolve()

        if not self.template_dir.exists():
            raise ValueError(f"Template directory does not exist: {self.template_dir}")
        if not self.template_dir.is_dir():
            raise ValueError(f"Template path is not a directory: {self.template_dir}")

        self.env = SandboxedEnvironment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def validate_template_path(self, template_path: str) -> Path:
        """Resolve a template path, refusing paths outside ``template_dir``.

        Raises:
            ValueError: If path escapes template directory.
            TemplateNotFound: If the template file doesn't exist.
        """
        requested_path = (self.template_dir / template_path).resolve()

        try:
            requested_path.relative_to(self.template_dir)
        except ValueError as e:
            raise ValueError(f"Template path escapes template directory: {template_path}") from e

        if not requested_path.exists():
            raise TemplateNotFound(template_path)

        return requested_path

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a template with the given context.

        Raises:
            TemplateNotFound: If template doesn't exist.
            jinja2.UndefinedError: If the template uses a variable missing
                from ``context``.
        """
        self.validate_template_path(template_path)

        template = self.env.get_template(template_path)
        return cast(str, template.render(**context))

    def read_static(self, template_path: str) -> str:
        """Return a template file's raw text without rendering it."""
        return self.validate_template_path(template_path).read_text(encoding="utf-8")
