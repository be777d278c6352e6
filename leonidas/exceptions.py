"""Custom exception hierarchy for leonidas.

Exception Hierarchy:
    LeonidasError (base)
    ├── ConfigurationError
    │   └── DependencyNotFoundError
    ├── InvalidModeError
    ├── ExternalServiceError
    │   ├── TrackerNotFoundError
    │   └── DependencyCheckError
    └── WorkflowError
        └── ExecutionRefusedError
            ├── UnauthorizedApproverError
            ├── PlanNotFoundError
            ├── DecomposedParentError
            └── DependencyNotClosedError

Refusals (``ExecutionRefusedError`` subclasses) are expected, policy-driven
outcomes of the phase controller. By the time one is raised, an explanatory
comment has already been posted on the issue; the exception message is the
operator-facing channel.

Example Usage:
    >>> from leonidas.exceptions import ConfigurationError
    >>> try:
    ...     load_config(path)
    ... except OSError as e:
    ...     raise ConfigurationError(f"Config file not readable: {path}") from e
"""


class LeonidasError(Exception):
    """Base exception for all leonidas errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(LeonidasError):
    """Configuration-related errors.

    Examples:
        - max_turns outside the allowed bounds
        - Invalid label format
        - "NONE" listed in authorized_approvers
    """

    pass


class InvalidModeError(LeonidasError):
    """The requested mode is neither ``plan`` nor ``execute``.

    Pure input validation: no comment is posted for this error.
    """

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f'Invalid mode: {mode}. Must be "plan" or "execute".')


class ExternalServiceError(LeonidasError):
    """Issue tracker communication errors.

    Attributes:
        status_code: HTTP status code (if applicable)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
        """
        self.status_code = status_code

        full_message = message
        if status_code:
            full_message = f"{message} (HTTP {status_code})"

        super().__init__(full_message)
        self.message = message


class TrackerNotFoundError(ExternalServiceError):
    """The tracker answered 404 for the requested resource."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class DependencyNotFoundError(ConfigurationError):
    """A sub-issue declares a dependency on an issue that does not exist."""

    def __init__(self, issue_number: int, repository: str) -> None:
        self.issue_number = issue_number
        self.repository = repository
        super().__init__(f"Dependency issue #{issue_number} not found in {repository}.")


class DependencyCheckError(ExternalServiceError):
    """The state of a dependency issue could not be read."""

    def __init__(self, issue_number: int, reason: str) -> None:
        self.issue_number = issue_number
        self.reason = reason
        super().__init__(f"Failed to check issue #{issue_number} status: {reason}")


class WorkflowError(LeonidasError):
    """Workflow execution errors."""

    pass


class ExecutionRefusedError(WorkflowError):
    """Execute mode refused to dispatch the agent.

    Attributes:
        issue_number: Issue the refusal was reported on
    """

    def __init__(self, message: str, issue_number: int) -> None:
        self.issue_number = issue_number
        super().__init__(message)


class UnauthorizedApproverError(ExecutionRefusedError):
    """The triggering actor's association is not in the approver allowlist."""

    def __init__(self, issue_number: int, association: str, required: list[str]) -> None:
        self.association = association
        self.required = required
        super().__init__(
            f"Unauthorized approver: author association {association or 'NONE'} "
            f"is not one of {', '.join(required)}.",
            issue_number,
        )


class PlanNotFoundError(ExecutionRefusedError):
    """No plan comment exists on the issue."""

    def __init__(self, issue_number: int) -> None:
        super().__init__(
            f"No plan comment found on issue #{issue_number}. Run plan mode first.",
            issue_number,
        )


class DecomposedParentError(ExecutionRefusedError):
    """The issue's plan is a decomposition; only its children may execute."""

    def __init__(self, issue_number: int) -> None:
        super().__init__(
            "Cannot execute a decomposed parent issue. Execute sub-issues individually.",
            issue_number,
        )


class DependencyNotClosedError(ExecutionRefusedError):
    """A sub-issue's declared dependency is still open."""

    def __init__(self, issue_number: int, depends_on: int) -> None:
        self.depends_on = depends_on
        super().__init__(f"Dependency #{depends_on} is not yet closed.", issue_number)
