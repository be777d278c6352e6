"""Domain models for leonidas."""

from leonidas.models.domain import (
    Comment,
    Issue,
    IssueState,
    LinkResult,
    PlanRecord,
    PullRequest,
    SubIssueMetadata,
    TurnBudget,
    branch_name,
)

__all__ = [
    "Comment",
    "Issue",
    "IssueState",
    "LinkResult",
    "PlanRecord",
    "PullRequest",
    "SubIssueMetadata",
    "TurnBudget",
    "branch_name",
]
