"""Tests for leonidas/engine/event.py - GitHub Actions event payloads."""

import json

import pytest

from leonidas.engine.event import issue_from_event, load_event, trigger_from_event
from leonidas.enums import Mode
from leonidas.exceptions import ConfigurationError
from leonidas.models.domain import IssueState


@pytest.fixture
def issue_comment_event() -> dict:
    return {
        "action": "created",
        "issue": {
            "number": 42,
            "title": "Add OAuth login",
            "body": None,
            "state": "open",
            "labels": [{"name": "leonidas"}, {"name": "enhancement"}],
            "user": {"login": "octocat"},
            "html_url": "https://github.com/acme/widgets/issues/42",
        },
        "comment": {
            "body": "/approve",
            "user": {"login": "maintainer"},
            "author_association": "MEMBER",
        },
        "sender": {"login": "maintainer"},
    }


class TestLoadEvent:
    def test_reads_payload(self, tmp_path, issue_comment_event):
        path = tmp_path / "event.json"
        path.write_text(json.dumps(issue_comment_event), encoding="utf-8")

        assert load_event(path) == issue_comment_event

    def test_unset_path(self):
        with pytest.raises(ConfigurationError, match="GITHUB_EVENT_PATH"):
            load_event(None)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read event payload"):
            load_event(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_event(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            load_event(path)


class TestIssueFromEvent:
    def test_issue_fields(self, issue_comment_event):
        issue = issue_from_event(issue_comment_event)

        assert issue.number == 42
        assert issue.body == ""
        assert issue.labels == ["leonidas", "enhancement"]
        assert issue.author == "octocat"
        assert issue.state is IssueState.OPEN

    def test_closed_issue(self, issue_comment_event):
        issue_comment_event["issue"]["state"] = "closed"

        assert issue_from_event(issue_comment_event).is_closed

    def test_no_issue(self):
        with pytest.raises(ConfigurationError, match="No issue"):
            issue_from_event({"action": "opened"})


class TestTriggerFromEvent:
    def test_comment_actor(self, issue_comment_event):
        trigger = trigger_from_event(issue_comment_event, Mode.EXECUTE)

        assert trigger.mode is Mode.EXECUTE
        assert trigger.actor == "maintainer"
        assert trigger.author_association == "MEMBER"

    def test_labeled_event_uses_sender(self, issue_comment_event):
        del issue_comment_event["comment"]
        issue_comment_event["sender"] = {"login": "labeler"}

        trigger = trigger_from_event(issue_comment_event, Mode.PLAN)

        assert trigger.actor == "labeler"
        assert trigger.author_association == "NONE"
