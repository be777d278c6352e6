"""GitHub provider implementation using PyGithub and REST API."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

import httpx
import structlog
from github import Github, GithubException  # type: ignore[import-not-found]
from github.Issue import Issue as GHIssue  # type: ignore[import-not-found]
from github.IssueComment import IssueComment as GHComment  # type: ignore[import-not-found]
from github.PullRequest import PullRequest as GHPullRequest  # type: ignore[import-not-found]
from github.Repository import Repository as GHRepository  # type: ignore[import-not-found]

from leonidas.exceptions import ExternalServiceError, TrackerNotFoundError
from leonidas.models.domain import Comment, Issue, IssueState, PullRequest
from leonidas.providers.base import GitProvider

log = structlog.get_logger(__name__)

T = TypeVar("T")

GITHUB_API_VERSION = "2022-11-28"


async def _run_sync(func: Callable[[], T]) -> T:
    """Run a synchronous function in a thread pool.

    This prevents blocking the event loop when calling synchronous
    PyGithub methods.
    """
    return await asyncio.to_thread(func)


class GitHubRestProvider(GitProvider):
    """GitHub implementation using PyGithub library.

    Sub-issue registration has no PyGithub wrapper and goes through
    ``httpx`` against the REST endpoint directly.
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = "https://api.github.com",
    ):
        """Initialize GitHub provider.

        Args:
            token: GitHub token (``GITHUB_TOKEN`` or a personal access token)
            owner: Repository owner (user or organization)
            repo: Repository name
            base_url: GitHub API base URL (for GitHub Enterprise)
        """
        self.token = token.strip() if token else token
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self._client: Github | None = None
        self._repo: GHRepository | None = None

    async def connect(self) -> None:
        """Initialize GitHub client."""

        def _connect() -> tuple[Github, GHRepository]:
            client = Github(self.token, base_url=self.base_url)
            repo = client.get_repo(f"{self.owner}/{self.repo}")
            return client, repo

        self._client, self._repo = await _run_sync(_connect)
        log.info("github_connected", base_url=self.base_url, owner=self.owner, repo=self.repo)

    async def disconnect(self) -> None:
        """Close GitHub client."""
        if self._client:
            await _run_sync(self._client.close)
            self._client = None
            self._repo = None

    async def get_issue(self, issue_number: int) -> Issue:
        """Get single issue by number."""
        log.info("get_issue", number=issue_number)

        try:
            gh_issue = await _run_sync(lambda: self._repo.get_issue(issue_number))
            return self._convert_issue(gh_issue)

        except GithubException as e:
            if e.status == 404:
                raise TrackerNotFoundError(f"Issue #{issue_number} not found in {self.full_name}") from e
            log.error("github_get_issue_failed", number=issue_number, error=str(e))
            raise

    async def get_comments(self, issue_number: int) -> list[Comment]:
        """Retrieve all comments for an issue.

        PyGithub's paginated list is exhausted here, so every page is fetched.
        """
        log.info("get_comments", number=issue_number)

        try:

            def _get_comments() -> list[GHComment]:
                gh_issue = self._repo.get_issue(issue_number)
                return list(gh_issue.get_comments())

            gh_comments = await _run_sync(_get_comments)
            return [self._convert_comment(c) for c in gh_comments]

        except GithubException as e:
            log.error("github_get_comments_failed", number=issue_number, error=str(e))
            raise

    async def add_comment(self, issue_number: int, comment: str) -> Comment:
        """Add comment to issue."""
        log.info("add_comment", number=issue_number)

        try:

            def _add_comment() -> GHComment:
                gh_issue = self._repo.get_issue(issue_number)
                return gh_issue.create_comment(comment)

            gh_comment = await _run_sync(_add_comment)
            return self._convert_comment(gh_comment)

        except GithubException as e:
            log.error("github_add_comment_failed", number=issue_number, error=str(e))
            raise

    async def get_branch(self, branch_name: str) -> str | None:
        """Get branch head SHA."""
        log.info("get_branch", branch=branch_name)

        try:
            gh_branch = await _run_sync(lambda: self._repo.get_branch(branch_name))
            return gh_branch.commit.sha

        except GithubException as e:
            if e.status == 404:
                log.debug("github_branch_not_found", branch=branch_name)
                return None
            log.error("github_get_branch_failed", branch=branch_name, error=str(e))
            raise

    async def find_open_pull_request(self, head_branch: str) -> PullRequest | None:
        """Find the open pull request for a branch of this repository."""
        log.info("find_open_pull_request", head=head_branch)

        try:

            def _find() -> GHPullRequest | None:
                pulls = self._repo.get_pulls(state="open", head=f"{self.owner}:{head_branch}")
                for gh_pr in pulls:
                    return gh_pr
                return None

            gh_pr = await _run_sync(_find)
            return self._convert_pull_request(gh_pr) if gh_pr else None

        except GithubException as e:
            log.error("github_find_pr_failed", head=head_branch, error=str(e))
            raise

    async def create_pull_request(
        self,
        title: str,
        body: str,
        head: str,
        base: str,
        draft: bool = False,
    ) -> PullRequest:
        """Create a pull request."""
        log.info("create_pull_request", title=title, head=head, base=base, draft=draft)

        try:
            gh_pr = await _run_sync(
                lambda: self._repo.create_pull(title=title, body=body, head=head, base=base, draft=draft)
            )
            return self._convert_pull_request(gh_pr)

        except GithubException as e:
            log.error("github_create_pr_failed", head=head, error=str(e))
            raise

    async def add_labels_to_pull_request(self, pr_number: int, labels: list[str]) -> None:
        """Add labels to a pull request (through its issue)."""
        log.info("add_labels_to_pull_request", number=pr_number, labels=labels)

        try:
            await _run_sync(lambda: self._repo.get_issue(pr_number).add_to_labels(*labels))

        except GithubException as e:
            log.error("github_add_labels_failed", number=pr_number, error=str(e))
            raise

    async def add_assignees_to_pull_request(self, pr_number: int, assignees: list[str]) -> None:
        """Assign users to a pull request."""
        log.info("add_assignees_to_pull_request", number=pr_number, assignees=assignees)

        try:
            await _run_sync(lambda: self._repo.get_pull(pr_number).add_to_assignees(*assignees))

        except GithubException as e:
            log.error("github_add_assignees_failed", number=pr_number, error=str(e))
            raise

    async def add_sub_issue(self, parent_number: int, child_number: int) -> None:
        """Link a child issue to its parent via the sub-issues endpoint.

        The endpoint takes the child's global issue ID, not its number.
        """
        log.info("add_sub_issue", parent=parent_number, child=child_number)

        try:
            child_id = await _run_sync(lambda: self._repo.get_issue(child_number).id)
        except GithubException as e:
            if e.status == 404:
                raise TrackerNotFoundError(f"Issue #{child_number} not found in {self.full_name}") from e
            raise

        url = f"{self.base_url}/repos/{self.owner}/{self.repo}/issues/{parent_number}/sub_issues"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.post(url, json={"sub_issue_id": child_id}, headers=headers)

        if response.status_code == 404:
            raise TrackerNotFoundError(f"Issue #{parent_number} not found in {self.full_name}")
        if response.is_error:
            raise ExternalServiceError(
                f"Failed to link #{child_number} to #{parent_number}: {response.text}",
                status_code=response.status_code,
            )

    async def dispatch_workflow(self, workflow: str, ref: str) -> bool:
        """Dispatch a ``workflow_dispatch`` run."""
        log.info("dispatch_workflow", workflow=workflow, ref=ref)

        try:
            return await _run_sync(lambda: self._repo.get_workflow(workflow).create_dispatch(ref=ref))

        except GithubException as e:
            if e.status == 404:
                raise TrackerNotFoundError(f"Workflow {workflow} not found in {self.full_name}") from e
            log.error("github_dispatch_workflow_failed", workflow=workflow, ref=ref, error=str(e))
            raise

    def _convert_issue(self, gh_issue: GHIssue) -> Issue:
        """Convert GitHub Issue to our Issue model."""
        state = IssueState.CLOSED if gh_issue.state == "closed" else IssueState.OPEN

        return Issue(
            number=gh_issue.number,
            title=gh_issue.title,
            body=gh_issue.body or "",
            state=state,
            labels=[label.name for label in gh_issue.labels],
            author=gh_issue.user.login if gh_issue.user else "",
            url=gh_issue.html_url,
        )

    def _convert_comment(self, gh_comment: GHComment) -> Comment:
        """Convert GitHub Comment to our Comment model."""
        return Comment(
            id=gh_comment.id,
            body=gh_comment.body or "",
            author=gh_comment.user.login if gh_comment.user else "",
            created_at=gh_comment.created_at,
        )

    def _convert_pull_request(self, gh_pr: GHPullRequest) -> PullRequest:
        """Convert GitHub PullRequest to our PullRequest model."""
        return PullRequest(
            number=gh_pr.number,
            title=gh_pr.title,
            body=gh_pr.body or "",
            state=gh_pr.state,
            head=gh_pr.head.ref,
            base=gh_pr.base.ref,
            url=gh_pr.html_url,
            draft=bool(gh_pr.draft),
        )
