"""Reading the triggering event from a GitHub Actions payload."""

import json
from pathlib import Path
from typing import Any

from leonidas.engine.phase_controller import TriggerContext
from leonidas.enums import AuthorAssociation, Mode
from leonidas.exceptions import ConfigurationError
from leonidas.models.domain import Issue, IssueState


def load_event(event_path: str | Path | None) -> dict[str, Any]:
    """Load the JSON event payload.

    Raises:
        ConfigurationError: If the path is unset, unreadable or not a JSON object
    """
    if not event_path:
        raise ConfigurationError("GITHUB_EVENT_PATH not set")

    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read event payload: {event_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in event payload {event_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ConfigurationError("Event payload must be a JSON object")
    return payload


def issue_from_event(event: dict[str, Any]) -> Issue:
    data = event.get("issue")
    if not data:
        raise ConfigurationError("No issue found in GitHub event payload")

    return Issue(
        number=int(data["number"]),
        title=data.get("title") or "",
        body=data.get("body") or "",
        state=IssueState.CLOSED if data.get("state") == "closed" else IssueState.OPEN,
        labels=[label["name"] for label in data.get("labels", []) if isinstance(label, dict) and "name" in label],
        author=(data.get("user") or {}).get("login", ""),
        url=data.get("html_url", ""),
    )


def trigger_from_event(event: dict[str, Any], mode: Mode | str) -> TriggerContext:
    """Build the trigger context for ``mode``.

    The actor and association come from the comment when the event has one
    (an ``/approve`` comment), otherwise from the event sender.
    """
    comment = event.get("comment") or {}
    sender = event.get("sender") or {}

    actor = (comment.get("user") or {}).get("login") or sender.get("login", "")
    association = comment.get("author_association") or AuthorAssociation.NONE.value

    return TriggerContext(
        mode=mode,
        issue=issue_from_event(event),
        actor=actor,
        author_association=association,
    )
