"""Pytest configuration and shared fixtures."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from leonidas.config.settings import LeonidasConfig
from leonidas.engine.plan_store import DECOMPOSED_MARKER, PLAN_MARKER
from leonidas.models.domain import Comment, Issue, IssueState, PullRequest
from leonidas.providers.base import GitProvider

BOT = "github-actions[bot]"


@pytest.fixture
def mock_git_provider() -> AsyncMock:
    """Tracker mock with an empty comment log and no branches or PRs."""
    git = AsyncMock(spec=GitProvider)
    git.owner = "acme"
    git.repo = "widgets"
    git.full_name = "acme/widgets"
    git.get_comments.return_value = []
    git.get_branch.return_value = None
    git.find_open_pull_request.return_value = None
    git.dispatch_workflow.return_value = True
    git.add_comment.side_effect = lambda number, body: Comment(id=999, body=body, author=BOT)
    return git


@pytest.fixture
def config() -> LeonidasConfig:
    """Default configuration."""
    return LeonidasConfig()


@pytest.fixture
def sample_issue() -> Issue:
    """Plain issue, not part of a decomposition."""
    return Issue(
        number=42,
        title="Add OAuth login",
        body="Users should be able to sign in with GitHub.",
        state=IssueState.OPEN,
        labels=["leonidas", "enhancement"],
        author="octocat",
        url="https://github.com/acme/widgets/issues/42",
    )


@pytest.fixture
def sub_issue() -> Issue:
    """Second of three sub-issues of #10, depending on #41."""
    return Issue(
        number=42,
        title="Wire OAuth callback",
        body=(
            "<!-- leonidas-parent: #10 -->\n"
            "<!-- leonidas-order: 2/3 -->\n"
            "<!-- leonidas-depends: #41 -->\n\n"
            "Handle the OAuth callback route."
        ),
        labels=["leonidas"],
        author="octocat",
    )


@pytest.fixture
def plan_comment() -> Comment:
    """Plan posted by the automation identity."""
    return Comment(
        id=1,
        body=f"## 🏛️ Leonidas Implementation Plan\n{PLAN_MARKER}\n\n### Summary\nAdd OAuth.",
        author=BOT,
        created_at=datetime(2025, 1, 1, 12, 0),
    )


@pytest.fixture
def decomposed_plan_comment() -> Comment:
    """Decomposition posted by the automation identity."""
    return Comment(
        id=2,
        body=(
            f"## 🏛️ Leonidas Implementation Plan\n{PLAN_MARKER}\n{DECOMPOSED_MARKER}\n\n"
            "### Sub-Issues\n- [ ] #11 — Models\n- [ ] #12 — Routes\n- [x] #13 — Docs\n"
        ),
        author=BOT,
    )


@pytest.fixture
def open_pull_request() -> PullRequest:
    return PullRequest(
        number=77,
        title="#42: Add OAuth login",
        head="claude/issue-42",
        base="main",
        url="https://github.com/acme/widgets/pull/77",
    )
