"""
Abstract base class for issue tracker providers.

The orchestration code talks to the tracker only through this interface:
reading issues and comments, appending comments, probing branches and pull
requests, and the few write operations used after an execution attempt.
"""

from abc import ABC, abstractmethod

from leonidas.models.domain import Comment, Issue, PullRequest


class GitProvider(ABC):
    """Abstract base class for tracker implementations.

    All methods are async. Implementations translate "resource does not
    exist" responses into :class:`~leonidas.exceptions.TrackerNotFoundError`
    unless the method documents a ``None`` return for that case. Other
    transport failures propagate unchanged.
    """

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @abstractmethod
    async def get_issue(self, issue_number: int) -> Issue:
        """Get single issue by number.

        Raises:
            TrackerNotFoundError: If the issue does not exist.
        """

    @abstractmethod
    async def get_comments(self, issue_number: int) -> list[Comment]:
        """Retrieve all comments for an issue, oldest first.

        Implementations must follow pagination to the end: callers rely on
        seeing the complete comment log.
        """

    @abstractmethod
    async def add_comment(self, issue_number: int, comment: str) -> Comment:
        """Append a comment to an issue."""

    @abstractmethod
    async def get_branch(self, branch_name: str) -> str | None:
        """Return the head commit SHA of a branch, or None if it does not exist."""

    @abstractmethod
    async def find_open_pull_request(self, head_branch: str) -> PullRequest | None:
        """Return the open pull request whose head is ``head_branch``, if any."""

    @abstractmethod
    async def create_pull_request(
        self,
        title: str,
        body: str,
        head: str,
        base: str,
        draft: bool = False,
    ) -> PullRequest:
        """Open a pull request from ``head`` into ``base``."""

    @abstractmethod
    async def add_labels_to_pull_request(self, pr_number: int, labels: list[str]) -> None:
        """Add labels to a pull request."""

    @abstractmethod
    async def add_assignees_to_pull_request(self, pr_number: int, assignees: list[str]) -> None:
        """Assign users to a pull request."""

    @abstractmethod
    async def add_sub_issue(self, parent_number: int, child_number: int) -> None:
        """Register ``child_number`` as a native sub-issue of ``parent_number``."""

    @abstractmethod
    async def dispatch_workflow(self, workflow: str, ref: str) -> bool:
        """Trigger a workflow run on ``ref``.

        Returns:
            True if the tracker accepted the dispatch.
        """
