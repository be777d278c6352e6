"""Shared plumbing for leonidas CLI commands."""

import asyncio
import sys
from collections.abc import AsyncIterator, Coroutine
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import click
import structlog

from leonidas.config.settings import RunSettings
from leonidas.exceptions import ConfigurationError, LeonidasError
from leonidas.providers.github_rest import GitHubRestProvider

log = structlog.get_logger(__name__)

T = TypeVar("T")


@asynccontextmanager
async def github_session(settings: RunSettings) -> AsyncIterator[GitHubRestProvider]:
    """Connected GitHub provider for the repository named in ``settings``."""
    owner, repo = settings.require_repository()
    if not settings.github_token:
        raise ConfigurationError("GitHub token not set (GITHUB_TOKEN or GH_TOKEN)")

    git = GitHubRestProvider(
        token=settings.github_token,
        owner=owner,
        repo=repo,
        base_url=settings.github_api_url,
    )
    await git.connect()
    try:
        yield git
    finally:
        await git.disconnect()


def run_command(coro: Coroutine[Any, Any, T], event: str) -> T:
    """Run ``coro`` to completion and map failures to exit codes.

    Exit codes:
        1: leonidas error (configuration, refusal, tracker failure) or unexpected error
        130: interrupted by the user
    """
    try:
        return asyncio.run(coro)
    except LeonidasError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug(f"{event}_error", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error(f"{event}_unexpected", exc_info=True)
        sys.exit(1)
