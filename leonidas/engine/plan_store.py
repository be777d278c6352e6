"""
Plan lookup over an issue's comment log.

The plan for an issue is never stored anywhere: it is whichever comment the
lookup rules below select, recomputed on every call. Comments posted by the
automation identity are preferred over anyone else's, and within a tier the
most recent match wins, so a re-plan simply supersedes the old plan.

Lookup order:
    1. Trusted author, contains :data:`PLAN_MARKER`
    2. Trusted author, contains the English plan header (plans written
       before the marker existed)
    3. Any author, contains :data:`PLAN_MARKER`
    4. Any author, contains the English plan header
"""

from collections.abc import Iterable, Sequence

import structlog

from leonidas.config.settings import DEFAULT_TRUSTED_PLAN_AUTHORS
from leonidas.i18n import t
from leonidas.models.domain import Comment, PlanRecord
from leonidas.providers.base import GitProvider

log = structlog.get_logger(__name__)

PLAN_MARKER = "<!-- leonidas-plan -->"
DECOMPOSED_MARKER = "<!-- leonidas-decomposed -->"
LEGACY_PLAN_HEADER = t("plan_header", "en")


def is_decomposed_plan(plan_text: str) -> bool:
    """Return True if the plan text carries the decomposition marker."""
    return DECOMPOSED_MARKER in plan_text


def _last_containing(comments: Sequence[Comment], token: str) -> Comment | None:
    for comment in reversed(comments):
        if token in comment.body:
            return comment
    return None


def derive_plan(comments: Iterable[Comment], trusted_authors: Iterable[str]) -> PlanRecord | None:
    """Select the authoritative plan from a comment log.

    Args:
        comments: The issue's comments, oldest first
        trusted_authors: Logins whose plan comments take precedence

    Returns:
        The selected plan, or None when no comment qualifies
    """
    trusted = set(trusted_authors)
    candidates = [c for c in comments if c.body]
    trusted_candidates = [c for c in candidates if c.author in trusted]

    tiers = (
        (trusted_candidates, PLAN_MARKER, True),
        (trusted_candidates, LEGACY_PLAN_HEADER, True),
        (candidates, PLAN_MARKER, False),
        (candidates, LEGACY_PLAN_HEADER, False),
    )

    for pool, token, is_trusted in tiers:
        match = _last_containing(pool, token)
        if match is None:
            continue
        if not is_trusted:
            log.warning("plan_from_untrusted_author", comment_id=match.id, author=match.author)
        return PlanRecord(raw_text=match.body, is_decomposed=is_decomposed_plan(match.body))

    return None


class PlanCommentStore:
    """Reads plans from the tracker's comment stream."""

    def __init__(
        self,
        git: GitProvider,
        trusted_authors: Iterable[str] = DEFAULT_TRUSTED_PLAN_AUTHORS,
    ) -> None:
        self.git = git
        self.trusted_authors = frozenset(trusted_authors)

    async def find_plan(self, issue_number: int) -> PlanRecord | None:
        """Fetch the issue's full comment log and derive its plan.

        Tracker errors propagate to the caller.
        """
        comments = await self.git.get_comments(issue_number)
        plan = derive_plan(comments, self.trusted_authors)
        log.debug(
            "plan_lookup",
            issue=issue_number,
            comments=len(comments),
            found=plan is not None,
        )
        return plan

    async def find_plan_comment(self, issue_number: int) -> str | None:
        """Return the raw text of the issue's plan, if any."""
        plan = await self.find_plan(issue_number)
        return plan.raw_text if plan else None
