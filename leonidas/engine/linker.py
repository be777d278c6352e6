"""Registration of decomposed sub-issues as native sub-issues of their parent."""

from collections.abc import Iterable

import structlog

from leonidas.engine.metadata import extract_sub_issue_numbers
from leonidas.engine.plan_store import PlanCommentStore
from leonidas.models.domain import LinkResult
from leonidas.providers.base import GitProvider

log = structlog.get_logger(__name__)


class SubIssueLinker:
    """Links child issues to a parent, one at a time.

    A failed link (already linked, missing issue, permission error) is
    counted and logged; it never stops the rest of the batch.
    """

    def __init__(self, git: GitProvider, plan_store: PlanCommentStore | None = None) -> None:
        self.git = git
        self.plan_store = plan_store or PlanCommentStore(git)

    async def link(self, parent_number: int, child_numbers: Iterable[int]) -> LinkResult:
        result = LinkResult()

        for child in child_numbers:
            try:
                await self.git.add_sub_issue(parent_number, child)
            except Exception as e:
                result.failed += 1
                log.warning("sub_issue_link_failed", parent=parent_number, child=child, error=str(e))
                continue
            result.linked += 1
            log.info("sub_issue_linked", parent=parent_number, child=child)

        return result

    async def link_from_plan(self, parent_number: int) -> LinkResult:
        """Link the sub-issues listed in the parent's decomposed plan.

        Nothing is linked when the parent has no plan or its plan is not a
        decomposition.
        """
        plan = await self.plan_store.find_plan(parent_number)
        if plan is None or not plan.is_decomposed:
            log.info("sub_issue_linking_skipped", parent=parent_number, reason="no decomposed plan")
            return LinkResult()

        children = extract_sub_issue_numbers(plan.raw_text)
        if not children:
            log.info("sub_issue_linking_skipped", parent=parent_number, reason="no checklist items")
            return LinkResult()

        result = await self.link(parent_number, children)
        log.info("sub_issue_linking_complete", parent=parent_number, linked=result.linked, failed=result.failed)
        return result
