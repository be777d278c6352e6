"""Issue tracker providers."""

from leonidas.providers.base import GitProvider
from leonidas.providers.github_rest import GitHubRestProvider

__all__ = ["GitHubRestProvider", "GitProvider"]
