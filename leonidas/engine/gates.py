"""
Gates that execute mode must pass before the agent is dispatched.

Authorization is a pure check against the configured allowlist. The
dependency gate reads the state of the issue a sub-issue depends on.
"""

from collections.abc import Collection
from dataclasses import dataclass

import structlog

from leonidas.exceptions import (
    DependencyCheckError,
    DependencyNotFoundError,
    TrackerNotFoundError,
)
from leonidas.models.domain import SubIssueMetadata
from leonidas.providers.base import GitProvider

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GateResult:
    """Outcome of a gate check."""

    allowed: bool
    reason: str = ""
    blocking_issue: int | None = None

    @classmethod
    def allow(cls) -> "GateResult":
        return cls(allowed=True)


def check_authorization(association: str, authorized: Collection[str]) -> GateResult:
    """Check an actor's repository association against the allowlist.

    An empty allowlist authorizes everyone. Configuration validation is what
    keeps ``NONE`` out of a non-empty allowlist.
    """
    if not authorized:
        return GateResult.allow()

    if association in authorized:
        return GateResult.allow()

    return GateResult(
        allowed=False,
        reason=f"Author association {association or 'NONE'} is not one of {', '.join(authorized)}",
    )


class DependencyGate:
    """Blocks a sub-issue until the issue it depends on is closed."""

    def __init__(self, git: GitProvider) -> None:
        self.git = git

    async def check(self, metadata: SubIssueMetadata | None) -> GateResult:
        """Check the dependency declared by ``metadata``.

        No tracker call is made when there is no dependency.

        Raises:
            DependencyNotFoundError: If the dependency issue does not exist
            DependencyCheckError: If its state could not be read
        """
        if metadata is None or metadata.depends_on is None:
            return GateResult.allow()

        depends_on = metadata.depends_on

        try:
            issue = await self.git.get_issue(depends_on)
        except TrackerNotFoundError as e:
            raise DependencyNotFoundError(depends_on, self.git.full_name) from e
        except Exception as e:
            raise DependencyCheckError(depends_on, str(e) or "unknown error") from e

        if issue.is_closed:
            log.info("dependency_satisfied", depends_on=depends_on)
            return GateResult.allow()

        log.info("dependency_open", depends_on=depends_on)
        return GateResult(
            allowed=False,
            reason=f"Dependency #{depends_on} is not yet closed.",
            blocking_issue=depends_on,
        )
