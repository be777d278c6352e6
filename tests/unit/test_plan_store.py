"""Tests for leonidas/engine/plan_store.py - plan lookup over comments."""

import pytest

from leonidas.engine.plan_store import (
    DECOMPOSED_MARKER,
    LEGACY_PLAN_HEADER,
    PLAN_MARKER,
    PlanCommentStore,
    derive_plan,
    is_decomposed_plan,
)
from leonidas.models.domain import Comment

BOT = "github-actions[bot]"
TRUSTED = [BOT]


def _comment(comment_id: int, body: str, author: str = BOT) -> Comment:
    return Comment(id=comment_id, body=body, author=author)


class TestDerivePlan:
    """Tests for the comment selection rules."""

    def test_no_comments(self):
        assert derive_plan([], TRUSTED) is None

    def test_no_matching_comment(self):
        comments = [_comment(1, "Looks good to me"), _comment(2, "/approve", "alice")]

        assert derive_plan(comments, TRUSTED) is None

    def test_trusted_marker_comment(self):
        comments = [_comment(1, f"{PLAN_MARKER}\nplan body")]

        plan = derive_plan(comments, TRUSTED)

        assert plan is not None
        assert plan.raw_text == f"{PLAN_MARKER}\nplan body"
        assert plan.is_decomposed is False

    def test_latest_trusted_plan_wins(self):
        """A re-plan supersedes the previous plan."""
        comments = [
            _comment(1, f"{PLAN_MARKER}\nfirst plan"),
            _comment(2, "discussion", "alice"),
            _comment(3, f"{PLAN_MARKER}\nsecond plan"),
        ]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("second plan")

    def test_trusted_beats_newer_untrusted(self):
        comments = [
            _comment(1, f"{PLAN_MARKER}\nbot plan"),
            _comment(2, f"{PLAN_MARKER}\nspoofed plan", "mallory"),
        ]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("bot plan")

    def test_trusted_marker_beats_trusted_header(self):
        comments = [
            _comment(1, f"{PLAN_MARKER}\nmarked plan"),
            _comment(2, f"{LEGACY_PLAN_HEADER}\nlegacy plan"),
        ]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("marked plan")

    def test_trusted_legacy_header(self):
        comments = [_comment(1, f"{LEGACY_PLAN_HEADER}\nlegacy plan")]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("legacy plan")

    def test_trusted_header_beats_untrusted_marker(self):
        comments = [
            _comment(1, f"{LEGACY_PLAN_HEADER}\nbot legacy plan"),
            _comment(2, f"{PLAN_MARKER}\nhuman plan", "alice"),
        ]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("bot legacy plan")

    def test_untrusted_marker_fallback(self):
        comments = [_comment(1, f"{PLAN_MARKER}\nhuman plan", "alice")]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("human plan")

    def test_untrusted_header_fallback(self):
        comments = [_comment(1, f"{LEGACY_PLAN_HEADER}\nhuman legacy", "alice")]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("human legacy")

    def test_empty_bodies_ignored(self):
        comments = [_comment(1, f"{PLAN_MARKER}\nreal plan"), _comment(2, "")]

        assert derive_plan(comments, TRUSTED).raw_text.endswith("real plan")

    def test_decomposed_flag(self):
        comments = [_comment(1, f"{PLAN_MARKER}\n{DECOMPOSED_MARKER}\n- [ ] #11")]

        assert derive_plan(comments, TRUSTED).is_decomposed is True

    def test_custom_trusted_authors(self):
        comments = [
            _comment(1, f"{PLAN_MARKER}\nfrom custom bot", "leonidas-app[bot]"),
            _comment(2, f"{PLAN_MARKER}\nfrom default bot"),
        ]

        plan = derive_plan(comments, ["leonidas-app[bot]"])

        assert plan.raw_text.endswith("from custom bot")


def test_is_decomposed_plan():
    assert is_decomposed_plan(f"plan\n{DECOMPOSED_MARKER}")
    assert not is_decomposed_plan(f"plan\n{PLAN_MARKER}")


class TestPlanCommentStore:
    """Tests for tracker-backed plan lookup."""

    @pytest.mark.asyncio
    async def test_find_plan(self, mock_git_provider, plan_comment):
        mock_git_provider.get_comments.return_value = [plan_comment]
        store = PlanCommentStore(mock_git_provider)

        plan = await store.find_plan(42)

        mock_git_provider.get_comments.assert_awaited_once_with(42)
        assert plan.raw_text == plan_comment.body

    @pytest.mark.asyncio
    async def test_find_plan_comment_none(self, mock_git_provider):
        store = PlanCommentStore(mock_git_provider)

        assert await store.find_plan_comment(42) is None

    @pytest.mark.asyncio
    async def test_find_plan_comment_text(self, mock_git_provider, plan_comment):
        mock_git_provider.get_comments.return_value = [plan_comment]
        store = PlanCommentStore(mock_git_provider)

        assert await store.find_plan_comment(42) == plan_comment.body

    @pytest.mark.asyncio
    async def test_tracker_errors_propagate(self, mock_git_provider):
        mock_git_provider.get_comments.side_effect = RuntimeError("rate limited")
        store = PlanCommentStore(mock_git_provider)

        with pytest.raises(RuntimeError, match="rate limited"):
            await store.find_plan(42)
