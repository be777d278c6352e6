"""Localized strings for comments posted by leonidas.

Example:
    >>> from leonidas.i18n import t
    >>> t("starting_implementation", "en", 42)
    '⚡ **Leonidas** is starting implementation for issue #42...'
"""

import re
from typing import Any

from leonidas.i18n.translations import (
    LANGUAGE_DISPLAY_NAMES,
    SUPPORTED_LANGUAGES,
    TRANSLATIONS,
)

DEFAULT_LANGUAGE = "en"

_PLACEHOLDER = re.compile(r"%[ds]")


def is_supported_language(lang: Any) -> bool:
    return isinstance(lang, str) and lang in SUPPORTED_LANGUAGES


def resolve_language(lang: Any) -> str:
    """Return ``lang`` if supported, otherwise English."""
    return lang if is_supported_language(lang) else DEFAULT_LANGUAGE


def t(key: str, lang: str = DEFAULT_LANGUAGE, *args: Any) -> str:
    """Look up a translation and fill its placeholders.

    ``%d`` and ``%s`` placeholders are replaced in order by ``args``.
    Placeholders left over once ``args`` are exhausted stay as written.

    Args:
        key: Translation key (e.g. ``"partial_header"``)
        lang: Language code; unsupported codes fall back to English
        *args: Values substituted into the placeholders

    Returns:
        The localized string, or ``[Missing translation: key]``
    """
    template = TRANSLATIONS[resolve_language(lang)].get(key)
    if template is None:
        return f"[Missing translation: {key}]"

    if not args:
        return template

    values = iter(args)

    def _substitute(match: re.Match[str]) -> str:
        try:
            return str(next(values))
        except StopIteration:
            return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_DISPLAY_NAMES",
    "SUPPORTED_LANGUAGES",
    "is_supported_language",
    "resolve_language",
    "t",
]
