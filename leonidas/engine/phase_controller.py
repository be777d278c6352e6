"""
Phase controller: decides what a single leonidas invocation does.

Plan mode is ungated: any actor may trigger it because its output is only a
proposal. Execute mode passes a fixed sequence of gates and either returns
an :class:`ExecutionRequest` for the agent executor or refuses.

Execute-mode gate order:
    1. Authorization of the triggering actor
    2. A plan comment exists on the issue
    3. The plan is not a decomposition (only sub-issues execute)
    4. The sub-issue's dependency, if any, is closed

Every refusal posts an explanatory comment on the issue first and then
raises a distinct :class:`~leonidas.exceptions.ExecutionRefusedError`
subclass, so the invoking job fails with a specific message.
A dependency that cannot be looked up is reported the same way, but raises
the lookup error itself (not found vs. tracker failure).

Example:
    >>> controller = PhaseController(git, config, system_prompt=system_prompt)
    >>> request = await controller.run(TriggerContext(mode="execute", issue=issue,
    ...                                               author_association="OWNER"))
"""

from dataclasses import dataclass

import structlog

from leonidas.config.settings import LeonidasConfig
from leonidas.engine.budget import compute_turn_budget
from leonidas.engine.gates import DependencyGate, check_authorization
from leonidas.engine.metadata import parse_sub_issue_metadata
from leonidas.engine.plan_store import PlanCommentStore
from leonidas.enums import Mode
from leonidas.exceptions import (
    DecomposedParentError,
    DependencyCheckError,
    DependencyNotClosedError,
    DependencyNotFoundError,
    InvalidModeError,
    PlanNotFoundError,
    UnauthorizedApproverError,
)
from leonidas.i18n import t
from leonidas.models.domain import Issue, TurnBudget
from leonidas.providers.base import GitProvider
from leonidas.rendering import comments
from leonidas.rendering.prompts import (
    build_execute_prompt,
    build_plan_prompt,
    build_sub_issue_plan_prompt,
)

log = structlog.get_logger(__name__)

PLAN_ALLOWED_TOOLS = "Read,Bash(gh issue comment:*),Bash(find:*),Bash(ls:*),Bash(cat:*)"
PLAN_MAX_TURNS = 10


@dataclass
class TriggerContext:
    """The event that invoked leonidas."""

    mode: Mode | str
    """Requested phase; validated by the controller."""

    issue: Issue
    """Snapshot of the issue from the event payload."""

    actor: str = ""
    """Login of the user whose action triggered the run."""

    author_association: str = "NONE"
    """The actor's association with the repository (e.g. ``OWNER``)."""


@dataclass
class ExecutionRequest:
    """Everything the external agent executor needs for one run."""

    mode: Mode
    prompt: str
    allowed_tools: str
    max_turns: int
    model: str
    budget: TurnBudget | None = None

    @property
    def claude_args(self) -> str:
        return f'--model {self.model} --max-turns {self.max_turns} --allowedTools "{self.allowed_tools}"'


class PhaseController:
    """Runs the plan or execute phase for one trigger."""

    def __init__(
        self,
        git: GitProvider,
        config: LeonidasConfig,
        system_prompt: str = "",
        has_rules: bool = False,
        plan_store: PlanCommentStore | None = None,
        dependency_gate: DependencyGate | None = None,
    ) -> None:
        self.git = git
        self.config = config
        self.system_prompt = system_prompt
        self.has_rules = has_rules
        self.plan_store = plan_store or PlanCommentStore(git, config.trusted_plan_authors)
        self.dependency_gate = dependency_gate or DependencyGate(git)

    async def run(self, trigger: TriggerContext) -> ExecutionRequest:
        """Produce the execution request for ``trigger`` or refuse.

        Raises:
            InvalidModeError: If the mode is neither plan nor execute
            ExecutionRefusedError: If an execute-mode gate refuses
            DependencyNotFoundError: If the declared dependency does not exist
            DependencyCheckError: If the dependency state could not be read
        """
        try:
            mode = Mode(trigger.mode)
        except ValueError as e:
            raise InvalidModeError(str(trigger.mode)) from e

        log.info("phase_started", mode=mode.value, issue=trigger.issue.number)

        if mode is Mode.PLAN:
            return self._plan(trigger.issue)
        return await self._execute(trigger)

    def _plan(self, issue: Issue) -> ExecutionRequest:
        metadata = parse_sub_issue_metadata(issue.body)

        if metadata:
            log.info(
                "sub_issue_plan",
                issue=issue.number,
                parent=metadata.parent_issue_number,
                order=metadata.order,
                total=metadata.total,
            )
            prompt = build_sub_issue_plan_prompt(
                issue.title,
                issue.body,
                issue.number,
                self.git.full_name,
                self.system_prompt,
                metadata,
                language=self.config.language,
            )
        else:
            prompt = build_plan_prompt(
                issue.title,
                issue.body,
                issue.number,
                self.git.full_name,
                self.system_prompt,
                label=self.config.label,
                language=self.config.language,
            )

        return ExecutionRequest(
            mode=Mode.PLAN,
            prompt=prompt,
            allowed_tools=PLAN_ALLOWED_TOOLS,
            max_turns=PLAN_MAX_TURNS,
            model=self.config.model,
        )

    async def _execute(self, trigger: TriggerContext) -> ExecutionRequest:
        issue = trigger.issue
        language = self.config.language

        authorization = check_authorization(trigger.author_association, self.config.authorized_approvers)
        if not authorization.allowed:
            log.warning(
                "approval_denied",
                issue=issue.number,
                actor=trigger.actor,
                association=trigger.author_association,
            )
            await self.git.add_comment(
                issue.number,
                comments.build_unauthorized_comment(trigger.actor, self.config.authorized_approvers, language),
            )
            raise UnauthorizedApproverError(
                issue.number, trigger.author_association, list(self.config.authorized_approvers)
            )

        plan = await self.plan_store.find_plan(issue.number)
        if plan is None:
            log.warning("plan_not_found", issue=issue.number)
            await self.git.add_comment(issue.number, comments.build_plan_not_found_comment(issue.number, language))
            raise PlanNotFoundError(issue.number)

        if plan.is_decomposed:
            log.warning("decomposed_parent_execution_refused", issue=issue.number)
            await self.git.add_comment(issue.number, t("decomposed_plan_footer", language))
            raise DecomposedParentError(issue.number)

        metadata = parse_sub_issue_metadata(issue.body)
        try:
            dependency = await self.dependency_gate.check(metadata)
        except DependencyNotFoundError as e:
            log.warning("dependency_not_found", issue=issue.number, depends_on=e.issue_number)
            await self.git.add_comment(
                issue.number, comments.build_dependency_not_found_comment(e.issue_number, language)
            )
            raise
        except DependencyCheckError as e:
            log.error("dependency_check_failed", issue=issue.number, depends_on=e.issue_number, reason=e.reason)
            await self.git.add_comment(
                issue.number,
                comments.build_dependency_check_failed_comment(e.issue_number, e.reason, language),
            )
            raise

        if not dependency.allowed:
            blocking = dependency.blocking_issue
            if blocking is None and metadata is not None:
                blocking = metadata.depends_on
            log.warning("dependency_blocked", issue=issue.number, depends_on=blocking)
            await self.git.add_comment(
                issue.number,
                comments.build_dependency_blocked_comment(blocking or 0, language),
            )
            raise DependencyNotClosedError(issue.number, blocking or 0)

        await self.git.add_comment(issue.number, comments.build_starting_comment(issue.number, language))

        budget = compute_turn_budget(self.config.max_turns)
        prompt = build_execute_prompt(
            issue.title,
            issue.body,
            plan.raw_text,
            issue.number,
            self.config.branch_prefix,
            self.config.base_branch,
            self.system_prompt,
            budget,
            issue_labels=issue.labels,
            trigger_label=self.config.label,
            issue_author=issue.author,
            sub_issue=metadata,
            has_rules=self.has_rules,
        )

        log.info(
            "execution_approved",
            issue=issue.number,
            max_turns=budget.total_turns,
            push_deadline=budget.push_deadline,
        )
        return ExecutionRequest(
            mode=Mode.EXECUTE,
            prompt=prompt,
            allowed_tools=self.config.allowed_tools_arg,
            max_turns=budget.total_turns,
            model=self.config.model,
            budget=budget,
        )
