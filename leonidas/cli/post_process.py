"""Post-execution commands run by the workflow after the agent executor stops.

Each command is a separate workflow step and correlates the issue with its
work only through the branch ``{branch_prefix}{issue_number}``.
"""

from typing import Any

import click
import structlog

from leonidas.cli.common import github_session, run_command
from leonidas.config.settings import LeonidasConfig, RunSettings, resolve_config
from leonidas.engine.linker import SubIssueLinker
from leonidas.engine.plan_store import PlanCommentStore
from leonidas.engine.recovery import RecoveryController
from leonidas.enums import Mode
from leonidas.utils.logging_config import bind_issue_context
from leonidas.utils.outputs import write_outputs

log = structlog.get_logger(__name__)

issue_number_option = click.option(
    "--issue-number",
    type=int,
    required=True,
    envvar="ISSUE_NUMBER",
    help="Issue the run was triggered for",
)
config_path_option = click.option(
    "--config-path",
    default="leonidas.config.yml",
    envvar="LEONIDAS_CONFIG_PATH",
    show_default=True,
    help="Path to the YAML configuration file",
)
branch_prefix_option = click.option(
    "--branch-prefix", default=None, envvar="BRANCH_PREFIX", help="Override the work branch prefix"
)
language_option = click.option("--language", default=None, envvar="LANGUAGE", help="Override the comment language")


def _settings(ctx: click.Context) -> RunSettings:
    return ctx.obj["settings"]


def _config(config_path: str, **overrides: Any) -> LeonidasConfig:
    return resolve_config(config_path, overrides)


@click.group(name="post-process")
def post_process_group() -> None:
    """Steps that run after the agent executor."""


@post_process_group.command(name="link-subissues")
@issue_number_option
@config_path_option
@click.pass_context
def link_subissues_command(ctx: click.Context, issue_number: int, config_path: str) -> None:
    """Register the sub-issues of a decomposed plan under their parent."""
    settings = _settings(ctx)

    async def _link() -> None:
        config = _config(config_path)
        bind_issue_context(settings.github_repository, issue_number)
        async with github_session(settings) as git:
            linker = SubIssueLinker(git, PlanCommentStore(git, config.trusted_plan_authors))
            result = await linker.link_from_plan(issue_number)
        click.echo(f"Sub-issue linking complete: {result.linked} linked, {result.failed} skipped/failed.")

    run_command(_link(), "link_subissues")


@post_process_group.command(name="post-completion")
@issue_number_option
@config_path_option
@branch_prefix_option
@language_option
@click.pass_context
def post_completion_command(
    ctx: click.Context,
    issue_number: int,
    config_path: str,
    branch_prefix: str | None,
    language: str | None,
) -> None:
    """Comment that execution finished, linking the PR when one is open."""
    settings = _settings(ctx)

    async def _post() -> None:
        config = _config(config_path, branch_prefix=branch_prefix, language=language)
        bind_issue_context(settings.github_repository, issue_number, Mode.EXECUTE.value)
        async with github_session(settings) as git:
            recovery = RecoveryController(git, config.language, settings.run_url)
            await recovery.post_completion(issue_number, config.branch_prefix)

    run_command(_post(), "post_completion")


@post_process_group.command(name="post-failure")
@issue_number_option
@config_path_option
@language_option
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    required=True,
    envvar="MODE",
    help="Phase that failed",
)
@click.pass_context
def post_failure_command(
    ctx: click.Context,
    issue_number: int,
    config_path: str,
    language: str | None,
    mode: str,
) -> None:
    """Comment that the run failed, linking the run logs."""
    settings = _settings(ctx)

    async def _post() -> None:
        config = _config(config_path, language=language)
        bind_issue_context(settings.github_repository, issue_number, mode)
        async with github_session(settings) as git:
            recovery = RecoveryController(git, config.language, settings.run_url)
            await recovery.post_failure(issue_number, Mode(mode))

    run_command(_post(), "post_failure")


@post_process_group.command(name="rescue")
@issue_number_option
@config_path_option
@branch_prefix_option
@language_option
@click.option("--base-branch", default=None, envvar="BASE_BRANCH", help="Override the PR base branch")
@click.pass_context
def rescue_command(
    ctx: click.Context,
    issue_number: int,
    config_path: str,
    branch_prefix: str | None,
    language: str | None,
    base_branch: str | None,
) -> None:
    """Preserve work pushed by an execution that stopped early.

    Writes the ``branch_exists``, ``pr_exists``, ``pr_number`` and
    ``pr_created`` step outputs.
    """
    settings = _settings(ctx)

    async def _rescue() -> None:
        config = _config(config_path, branch_prefix=branch_prefix, language=language, base_branch=base_branch)
        bind_issue_context(settings.github_repository, issue_number, Mode.EXECUTE.value)
        async with github_session(settings) as git:
            recovery = RecoveryController(git, config.language, settings.run_url)
            outcome = await recovery.rescue(issue_number, config.branch_prefix, config.base_branch)

        write_outputs(
            {
                "branch_exists": str(outcome.branch_exists).lower(),
                "pr_exists": str(outcome.pr_exists).lower(),
                "pr_number": str(outcome.pr_number) if outcome.pr_number is not None else "",
                "pr_created": str(outcome.pr_created).lower(),
            },
            settings.github_output,
        )

    run_command(_rescue(), "rescue")


@post_process_group.command(name="post-process-pr")
@issue_number_option
@config_path_option
@branch_prefix_option
@click.option("--label", default=None, envvar="LEONIDAS_LABEL", help="Trigger label to leave off the PR")
@click.pass_context
def post_process_pr_command(
    ctx: click.Context,
    issue_number: int,
    config_path: str,
    branch_prefix: str | None,
    label: str | None,
) -> None:
    """Copy the issue's labels to its PR and assign the issue author."""
    settings = _settings(ctx)

    async def _post_process() -> None:
        config = _config(config_path, branch_prefix=branch_prefix, label=label)
        bind_issue_context(settings.github_repository, issue_number, Mode.EXECUTE.value)
        async with github_session(settings) as git:
            recovery = RecoveryController(git, config.language, settings.run_url)
            await recovery.post_process_pr(issue_number, config.branch_prefix, config.label)

    run_command(_post_process(), "post_process_pr")


@post_process_group.command(name="trigger-ci")
@issue_number_option
@config_path_option
@branch_prefix_option
@click.option("--workflow", default=None, envvar="CI_WORKFLOW", help="Override the CI workflow file")
@click.pass_context
def trigger_ci_command(
    ctx: click.Context,
    issue_number: int,
    config_path: str,
    branch_prefix: str | None,
    workflow: str | None,
) -> None:
    """Dispatch the CI workflow on the work branch."""
    settings = _settings(ctx)

    async def _trigger() -> None:
        config = _config(config_path, branch_prefix=branch_prefix, ci_workflow=workflow)
        bind_issue_context(settings.github_repository, issue_number, Mode.EXECUTE.value)
        async with github_session(settings) as git:
            recovery = RecoveryController(git, config.language, settings.run_url)
            dispatched = await recovery.trigger_ci(issue_number, config.branch_prefix, config.ci_workflow)
        write_outputs({"ci_dispatched": str(dispatched).lower()}, settings.github_output)

    run_command(_trigger(), "trigger_ci")
