"""Rendering of agent prompts and tracker comments.

Key Exports:
    PromptTemplateEngine: Sandboxed Jinja2 engine over ``leonidas/templates``.
"""

from leonidas.rendering.engine import PromptTemplateEngine

__all__ = ["PromptTemplateEngine"]
