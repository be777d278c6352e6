"""Helpers for embedding untrusted issue text in prompts."""

OPEN_TAG = "<user-supplied-content>"
CLOSE_TAG = "</user-supplied-content>"


def wrap_user_content(content: str) -> str:
    """Wrap user-supplied text in delimiter tags.

    Delimiters already present in ``content`` are escaped so the text cannot
    close the block early.

    Example:
        >>> wrap_user_content("Fix the login page")
        '<user-supplied-content>\\nFix the login page\\n</user-supplied-content>'
    """
    escaped = content.replace(OPEN_TAG, "&lt;user-supplied-content&gt;").replace(
        CLOSE_TAG, "&lt;/user-supplied-content&gt;"
    )
    return f"{OPEN_TAG}\n{escaped}\n{CLOSE_TAG}"
