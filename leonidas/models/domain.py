"""
Domain models for leonidas.

These dataclasses are the normalized internal representation of tracker
objects (issues, comments, pull requests) plus the values derived from them
while deciding what an invocation should do. The tracker owns issues and
comments; leonidas only reads them and appends new comments.

Example:
    Building an issue from tracker data::

        issue = Issue(
            number=42,
            title="Add OAuth login",
            body="<!-- leonidas-parent: #40 -->\\n<!-- leonidas-order: 2/3 -->",
            state=IssueState.OPEN,
            labels=["leonidas", "enhancement"],
            author="octocat",
        )
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class IssueState(str, Enum):
    """Normalized issue states."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Issue:
    """An issue as seen by leonidas.

    Read-only: leonidas never edits issue bodies or titles. The body of a
    sub-issue carries its decomposition markers, written once at creation.
    """

    number: int
    """Repository-scoped issue number (e.g., #42)."""

    title: str
    """Issue title."""

    body: str
    """Issue description in markdown. Empty string when the tracker has none."""

    state: IssueState = IssueState.OPEN
    """Current state of the issue."""

    labels: list[str] = field(default_factory=list)
    """Label names attached to the issue."""

    author: str = ""
    """Login of the issue creator."""

    url: str = ""
    """Web URL of the issue."""

    @property
    def is_closed(self) -> bool:
        return self.state == IssueState.CLOSED


@dataclass
class Comment:
    """An issue comment.

    The comment stream is append-only from leonidas' point of view and is
    the only durable state the workflow has.
    """

    id: int
    """Tracker-assigned comment ID."""

    body: str
    """Comment content in markdown."""

    author: str
    """Login of the comment author (e.g., ``github-actions[bot]``)."""

    created_at: datetime | None = None
    """Timestamp when the comment was posted."""


@dataclass
class PullRequest:
    """A pull request found or created for an issue branch."""

    number: int
    title: str
    head: str
    """Source branch, ``{branch_prefix}{issue_number}`` for leonidas PRs."""

    base: str
    url: str
    body: str = ""
    state: str = "open"
    draft: bool = False


@dataclass
class PlanRecord:
    """The authoritative plan for an issue, derived from its comments.

    Never persisted: it is recomputed from the comment log every time it is
    needed, so the most recent matching comment always wins.
    """

    raw_text: str
    is_decomposed: bool = False


@dataclass
class SubIssueMetadata:
    """Decomposition markers parsed from a sub-issue body."""

    parent_issue_number: int
    order: int
    total: int
    depends_on: int | None = None


@dataclass
class TurnBudget:
    """Turn allowance for an execute-mode agent run.

    The agent must have pushed its branch by ``push_deadline`` so the last
    ``reserved_turns`` remain for opening the pull request.
    """

    total_turns: int
    reserved_turns: int = 5

    @property
    def push_deadline(self) -> int:
        return self.total_turns - self.reserved_turns


@dataclass
class LinkResult:
    """Summary of a sub-issue linking batch."""

    linked: int = 0
    failed: int = 0


def branch_name(branch_prefix: str, issue_number: int) -> str:
    """Return the branch that carries the work for an issue.

    This is the only key correlating an issue with its pull request, so the
    same prefix must be used when planning, executing and rescuing.
    """
    return f"{branch_prefix}{issue_number}"
