"""Builders for the comments and pull request text leonidas posts."""

from leonidas.enums import Mode
from leonidas.i18n import t


def build_completion_comment(issue_number: int, pr_number: int | str | None, language: str, run_url: str) -> str:
    if pr_number:
        return t("completion_with_pr", language, issue_number, pr_number)
    return t("completion_no_pr", language, issue_number, run_url)


def build_partial_progress_comment(
    language: str,
    run_url: str,
    existing_pr: int | str | None = None,
    draft_pr_url: str | None = None,
) -> str:
    """Comment posted when an execution stopped before finishing.

    With neither an existing PR nor a draft PR URL only the header is
    returned.
    """
    header = t("partial_header", language)

    if existing_pr:
        body = t("partial_pr_exists", language, existing_pr, run_url)
    elif draft_pr_url:
        body = t("partial_draft_created", language, draft_pr_url, run_url)
    else:
        return header

    return f"{header}\n\n{body}"


def build_failure_comment(mode: Mode | str, language: str, run_url: str) -> str:
    header = t("failure_header", language)
    key = "failure_plan_body" if Mode(mode) is Mode.PLAN else "failure_execute_body"
    return f"{header}\n\n{t(key, language, run_url)}"


def build_rescue_pr_title(issue_number: int, issue_title: str, parent_number: int | None = None) -> str:
    if parent_number:
        return f"#{parent_number} {issue_title} [partial]"
    return f"#{issue_number}: {issue_title} [partial]"


def build_rescue_pr_body(issue_number: int, language: str, run_url: str, parent_number: int | None = None) -> str:
    """Body of a draft PR opened to preserve partial work.

    It always closes ``issue_number``; for a sub-issue it also references the
    parent.
    """
    header = t("partial_pr_body_header", language)
    content = t("partial_pr_body", language, run_url, issue_number)

    if parent_number:
        return f"Part of #{parent_number}\n\n{header}\n\n{content}"
    return f"{header}\n\n{content}"


def build_unauthorized_comment(actor: str, required: list[str], language: str) -> str:
    return t("unauthorized_approver", language, actor or "unknown", ", ".join(required))


def build_dependency_blocked_comment(depends_on: int, language: str) -> str:
    return t("dependency_blocked", language, depends_on, depends_on)


def build_dependency_not_found_comment(depends_on: int, language: str) -> str:
    return t("dependency_not_found", language, depends_on)


def build_dependency_check_failed_comment(depends_on: int, reason: str, language: str) -> str:
    return t("dependency_check_failed", language, depends_on, reason)


def build_plan_not_found_comment(issue_number: int, language: str) -> str:
    return t("plan_not_found", language, issue_number)


def build_starting_comment(issue_number: int, language: str) -> str:
    return t("starting_implementation", language, issue_number)
