"""Builders for the prompts handed to the agent executor.

Each builder renders one template from ``templates/prompts``. Issue bodies
are wrapped with :func:`~leonidas.utils.sanitize.wrap_user_content` before
rendering.
"""

from functools import lru_cache
from pathlib import Path

import structlog
from jinja2 import TemplateNotFound

from leonidas.engine.plan_store import DECOMPOSED_MARKER, PLAN_MARKER
from leonidas.i18n import DEFAULT_LANGUAGE, LANGUAGE_DISPLAY_NAMES, t
from leonidas.models.domain import SubIssueMetadata, TurnBudget, branch_name
from leonidas.rendering.engine import PromptTemplateEngine
from leonidas.utils.sanitize import wrap_user_content

log = structlog.get_logger(__name__)

FALLBACK_SYSTEM_PROMPT = "You are an automated implementation agent."


@lru_cache(maxsize=1)
def default_engine() -> PromptTemplateEngine:
    return PromptTemplateEngine()


def _language_directive(language: str) -> str:
    if language == DEFAULT_LANGUAGE or language not in LANGUAGE_DISPLAY_NAMES:
        return ""

    name = LANGUAGE_DISPLAY_NAMES[language]
    return (
        "\n\n---\n\n## Language Configuration\n\n"
        f"**IMPORTANT:** All responses, comments, commit messages, and output MUST be in {name}.\n\n"
        f"- Write all plan comments in {name}\n"
        f"- Write all GitHub issue comments in {name}\n"
        f"- Write all status messages in {name}\n"
        f"- Use {name} for all user-facing text\n\n"
        "This is a critical requirement for this execution."
    )


def _rules_section(rules: dict[str, str]) -> str:
    parts = ["\n\n## Project Rules\n\nFollow these repository rules in addition to the instructions above."]
    for name, content in rules.items():
        parts.append(f"### Rule: {name}\n\n{content.strip()}")
    return "\n\n".join(parts)


def build_system_prompt(
    user_override_path: str | Path | None = None,
    language: str = DEFAULT_LANGUAGE,
    rules: dict[str, str] | None = None,
    engine: PromptTemplateEngine | None = None,
) -> str:
    """Assemble the system prompt.

    The packaged default is followed by the repository's own instructions
    (when ``user_override_path`` exists), its project rules, and a language
    directive for non-English runs.
    """
    engine = engine or default_engine()
    try:
        system_prompt = engine.read_static("prompts/system.md").rstrip("\n")
    except (OSError, TemplateNotFound) as e:
        log.warning("default_system_prompt_unavailable", error=str(e))
        system_prompt = FALLBACK_SYSTEM_PROMPT

    if user_override_path:
        override = Path(user_override_path)
        if override.is_file():
            user_prompt = override.read_text(encoding="utf-8")
            system_prompt += f"\n\n## Repository-Specific Instructions\n\n{user_prompt}"
        else:
            log.debug("system_prompt_override_missing", path=str(override))

    if rules:
        system_prompt += _rules_section(rules)

    return system_prompt + _language_directive(language)


def _plan_context(language: str) -> dict[str, str]:
    return {
        "plan_header": t("plan_header", language),
        "plan_footer": t("plan_footer", language),
        "decomposed_plan_footer": t("decomposed_plan_footer", language),
        "plan_marker": PLAN_MARKER,
        "decomposed_marker": DECOMPOSED_MARKER,
    }


def build_plan_prompt(
    issue_title: str,
    issue_body: str,
    issue_number: int,
    repository: str,
    system_prompt: str,
    label: str = "leonidas",
    language: str = DEFAULT_LANGUAGE,
    engine: PromptTemplateEngine | None = None,
) -> str:
    """Render the plan-mode prompt, including decomposition instructions."""
    engine = engine or default_engine()
    return engine.render(
        "prompts/plan.md.j2",
        {
            "system_prompt": system_prompt,
            "repository": repository,
            "issue_number": issue_number,
            "issue_title": issue_title,
            "issue_body": wrap_user_content(issue_body),
            "label": label,
            **_plan_context(language),
        },
    )


def build_sub_issue_plan_prompt(
    issue_title: str,
    issue_body: str,
    issue_number: int,
    repository: str,
    system_prompt: str,
    metadata: SubIssueMetadata,
    language: str = DEFAULT_LANGUAGE,
    engine: PromptTemplateEngine | None = None,
) -> str:
    """Render the plan-mode prompt for a sub-issue; it forbids further decomposition."""
    engine = engine or default_engine()
    return engine.render(
        "prompts/sub_issue_plan.md.j2",
        {
            "system_prompt": system_prompt,
            "repository": repository,
            "issue_number": issue_number,
            "issue_title": issue_title,
            "issue_body": wrap_user_content(issue_body),
            "sub_issue": metadata,
            **_plan_context(language),
        },
    )


def build_execute_prompt(
    issue_title: str,
    issue_body: str,
    plan_comment: str,
    issue_number: int,
    branch_prefix: str,
    base_branch: str,
    system_prompt: str,
    budget: TurnBudget,
    issue_labels: list[str] | None = None,
    trigger_label: str = "leonidas",
    issue_author: str = "",
    sub_issue: SubIssueMetadata | None = None,
    has_rules: bool = False,
    engine: PromptTemplateEngine | None = None,
) -> str:
    """Render the execute-mode prompt.

    Args:
        issue_title: Issue title
        issue_body: Issue body (wrapped as user content)
        plan_comment: Text of the approved plan
        issue_number: Issue being implemented
        branch_prefix: Prefix of the work branch
        base_branch: Branch the pull request targets
        system_prompt: Output of :func:`build_system_prompt`
        budget: Turn budget for the run
        issue_labels: Labels to copy to the pull request; ``trigger_label``
            is left out
        trigger_label: The label that triggers leonidas
        issue_author: Login to assign the pull request to
        sub_issue: Decomposition metadata when the issue is a sub-issue
        has_rules: Whether the system prompt carries project rules
        engine: Template engine override

    Returns:
        The rendered prompt
    """
    engine = engine or default_engine()

    if sub_issue:
        pr_title = f"#{sub_issue.parent_issue_number} [{sub_issue.order}/{sub_issue.total}]: {issue_title}"
        pr_body = f"Part of #{sub_issue.parent_issue_number}\\n\\n<summary>\\n\\nCloses #{issue_number}"
    else:
        pr_title = f"#{issue_number}: {issue_title}"
        pr_body = f"<summary>\\n\\nCloses #{issue_number}"

    pr_labels = [label for label in (issue_labels or []) if label != trigger_label]

    return engine.render(
        "prompts/execute.md.j2",
        {
            "system_prompt": system_prompt,
            "issue_number": issue_number,
            "issue_title": issue_title,
            "issue_body": wrap_user_content(issue_body),
            "plan_comment": plan_comment,
            "sub_issue": sub_issue,
            "has_rules": has_rules,
            "budget": budget,
            "branch": branch_name(branch_prefix, issue_number),
            "base_branch": base_branch,
            "pr_title": pr_title,
            "pr_body": pr_body,
            "pr_labels": pr_labels,
            "issue_author": issue_author,
        },
    )
