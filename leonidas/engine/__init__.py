"""Orchestration core for the plan, approve and execute workflow.

Key Components:
    - PlanCommentStore: derives an issue's plan from its comment log
    - parse_sub_issue_metadata: reads decomposition markers
    - DependencyGate / check_authorization: execute-mode gates
    - compute_turn_budget: push deadline for execute runs
    - PhaseController (``engine.phase_controller``): plan or execute decision
    - RecoveryController (``engine.recovery``): completion, failure and rescue
    - SubIssueLinker (``engine.linker``): native sub-issue registration

The controllers depend on ``leonidas.rendering`` and are imported from their
own modules.
"""

from leonidas.engine.budget import RESERVED_TURNS, compute_turn_budget
from leonidas.engine.gates import DependencyGate, GateResult, check_authorization
from leonidas.engine.metadata import (
    extract_parent_issue_number,
    extract_sub_issue_numbers,
    parse_sub_issue_metadata,
)
from leonidas.engine.plan_store import (
    DECOMPOSED_MARKER,
    PLAN_MARKER,
    PlanCommentStore,
    derive_plan,
    is_decomposed_plan,
)

__all__ = [
    "DECOMPOSED_MARKER",
    "PLAN_MARKER",
    "RESERVED_TURNS",
    "DependencyGate",
    "GateResult",
    "PlanCommentStore",
    "check_authorization",
    "compute_turn_budget",
    "derive_plan",
    "extract_parent_issue_number",
    "extract_sub_issue_numbers",
    "is_decomposed_plan",
    "parse_sub_issue_metadata",
]
