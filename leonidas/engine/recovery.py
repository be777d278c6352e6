"""
Post-execution handling: completion, failure and rescue of partial work.

These steps run after the agent executor has finished or stopped, in a
separate invocation. They correlate an issue with its work only through the
branch name ``{branch_prefix}{issue_number}``.

Rescue outcomes:
    - No branch on the remote: nothing to rescue
    - Branch with an open PR: point the issue at that PR
    - Branch without a PR: open a draft PR so the pushed work is not lost

Draft PR creation, PR labelling and CI dispatch are best-effort: a failure
is logged and the run continues.
"""

from dataclasses import dataclass

import structlog

from leonidas.engine.metadata import extract_parent_issue_number
from leonidas.enums import Mode
from leonidas.i18n import DEFAULT_LANGUAGE
from leonidas.models.domain import PullRequest, branch_name
from leonidas.providers.base import GitProvider
from leonidas.rendering.comments import (
    build_completion_comment,
    build_failure_comment,
    build_partial_progress_comment,
    build_rescue_pr_body,
    build_rescue_pr_title,
)

log = structlog.get_logger(__name__)


@dataclass
class RescueOutcome:
    """What the rescue step found and did."""

    branch_exists: bool
    pr_number: int | None = None
    """Number of the PR that already existed for the branch."""

    draft_pr_url: str | None = None
    """URL of the draft PR opened by the rescue."""

    @property
    def pr_exists(self) -> bool:
        return self.pr_number is not None

    @property
    def pr_created(self) -> bool:
        return self.draft_pr_url is not None


class RecoveryController:
    """Finalizes issue state after an execution attempt."""

    def __init__(self, git: GitProvider, language: str = DEFAULT_LANGUAGE, run_url: str = "") -> None:
        self.git = git
        self.language = language
        self.run_url = run_url

    async def rescue(self, issue_number: int, branch_prefix: str, base_branch: str) -> RescueOutcome:
        """Preserve work pushed by an interrupted execution."""
        branch = branch_name(branch_prefix, issue_number)

        if await self.git.get_branch(branch) is None:
            log.info("rescue_skipped_no_branch", issue=issue_number, branch=branch)
            return RescueOutcome(branch_exists=False)

        existing = await self.git.find_open_pull_request(branch)
        if existing:
            log.info("rescue_found_pull_request", issue=issue_number, pr=existing.number)
            await self.git.add_comment(
                issue_number,
                build_partial_progress_comment(self.language, self.run_url, existing_pr=existing.number),
            )
            return RescueOutcome(branch_exists=True, pr_number=existing.number)

        draft = await self._open_draft_pr(issue_number, branch, base_branch)
        if draft is None:
            return RescueOutcome(branch_exists=True)

        await self.git.add_comment(
            issue_number,
            build_partial_progress_comment(self.language, self.run_url, draft_pr_url=draft.url),
        )
        return RescueOutcome(branch_exists=True, draft_pr_url=draft.url)

    async def _open_draft_pr(self, issue_number: int, branch: str, base_branch: str) -> PullRequest | None:
        issue = await self.git.get_issue(issue_number)
        parent_number = extract_parent_issue_number(issue.body)

        title = build_rescue_pr_title(issue_number, issue.title, parent_number)
        body = build_rescue_pr_body(issue_number, self.language, self.run_url, parent_number)

        try:
            draft = await self.git.create_pull_request(
                title=title,
                body=body,
                head=branch,
                base=base_branch,
                draft=True,
            )
        except Exception as e:
            log.warning("rescue_draft_pr_failed", issue=issue_number, branch=branch, error=str(e))
            return None

        log.info("rescue_draft_pr_created", issue=issue_number, pr=draft.number, url=draft.url)
        return draft

    async def post_completion(self, issue_number: int, branch_prefix: str) -> int | None:
        """Post the completion comment.

        Returns:
            The number of the open PR for the work branch, if any
        """
        pr = await self.git.find_open_pull_request(branch_name(branch_prefix, issue_number))
        pr_number = pr.number if pr else None

        await self.git.add_comment(
            issue_number,
            build_completion_comment(issue_number, pr_number, self.language, self.run_url),
        )
        log.info("completion_posted", issue=issue_number, pr=pr_number)
        return pr_number

    async def post_failure(self, issue_number: int, mode: Mode | str) -> None:
        await self.git.add_comment(issue_number, build_failure_comment(mode, self.language, self.run_url))
        log.info("failure_posted", issue=issue_number, mode=str(mode))

    async def post_process_pr(self, issue_number: int, branch_prefix: str, trigger_label: str = "leonidas") -> None:
        """Copy the issue's labels to its PR and assign the issue author.

        Each step is attempted independently.
        """
        pr = await self.git.find_open_pull_request(branch_name(branch_prefix, issue_number))
        if pr is None:
            log.info("post_process_pr_skipped_no_pr", issue=issue_number)
            return

        issue = await self.git.get_issue(issue_number)

        labels = [label for label in issue.labels if label != trigger_label]
        if labels:
            try:
                await self.git.add_labels_to_pull_request(pr.number, labels)
            except Exception as e:
                log.warning("pr_labels_failed", pr=pr.number, labels=labels, error=str(e))

        if issue.author:
            try:
                await self.git.add_assignees_to_pull_request(pr.number, [issue.author])
            except Exception as e:
                log.warning("pr_assignee_failed", pr=pr.number, assignee=issue.author, error=str(e))

    async def trigger_ci(self, issue_number: int, branch_prefix: str, workflow: str = "ci.yml") -> bool:
        """Dispatch the CI workflow on the work branch.

        Pushes made with the workflow token do not start other workflows on
        their own, so CI is dispatched explicitly.
        """
        branch = branch_name(branch_prefix, issue_number)
        try:
            dispatched = await self.git.dispatch_workflow(workflow, branch)
        except Exception as e:
            log.warning("ci_dispatch_failed", issue=issue_number, workflow=workflow, branch=branch, error=str(e))
            return False

        log.info("ci_dispatched", issue=issue_number, workflow=workflow, branch=branch, accepted=dispatched)
        return dispatched
