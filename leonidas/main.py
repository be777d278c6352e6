"""CLI entry point for leonidas."""

import sys

import click
import structlog
from pydantic import ValidationError

from leonidas.cli.common import github_session, run_command
from leonidas.cli.post_process import post_process_group
from leonidas.config.settings import RunSettings, load_rules, resolve_config
from leonidas.engine.event import load_event, trigger_from_event
from leonidas.engine.phase_controller import PhaseController, TriggerContext
from leonidas.enums import Mode
from leonidas.exceptions import ConfigurationError, InvalidModeError
from leonidas.models.domain import Issue
from leonidas.rendering.prompts import build_system_prompt
from leonidas.utils.logging_config import bind_issue_context, configure_logging
from leonidas.utils.outputs import write_outputs, write_prompt_file

log = structlog.get_logger(__name__)


@click.group()
@click.option("--log-level", default="INFO", envvar="LEONIDAS_LOG_LEVEL", help="Logging level")
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """leonidas: plan, approve and execute issues with an AI agent."""
    configure_logging(log_level)

    try:
        settings = RunSettings()
    except ValidationError as e:
        click.echo(f"Error: Invalid environment: {e}", err=True)
        sys.exit(1)

    ctx.obj = {"settings": settings}


def _trigger_from_settings(settings: RunSettings, mode: Mode) -> TriggerContext:
    """Trigger built from ``$GITHUB_EVENT_PATH`` or, failing that, the ``LEONIDAS_ISSUE_*`` variables."""
    if settings.github_event_path:
        return trigger_from_event(load_event(settings.github_event_path), mode)

    if settings.issue_number is None:
        raise ConfigurationError("Neither GITHUB_EVENT_PATH nor LEONIDAS_ISSUE_NUMBER is set")

    issue = Issue(
        number=settings.issue_number,
        title=settings.issue_title,
        body=settings.issue_body,
        author=settings.issue_author,
    )
    return TriggerContext(mode=mode, issue=issue)


@cli.command()
@click.option("--mode", required=True, envvar="MODE", help="Phase to run: plan or execute")
@click.option(
    "--config-path",
    default="leonidas.config.yml",
    envvar="LEONIDAS_CONFIG_PATH",
    show_default=True,
    help="Path to the YAML configuration file",
)
@click.option(
    "--system-prompt-path",
    default=".github/leonidas.md",
    envvar="LEONIDAS_SYSTEM_PROMPT_PATH",
    show_default=True,
    help="Repository-specific instructions appended to the system prompt",
)
@click.option("--prompt-dir", default=None, envvar="RUNNER_TEMP", help="Directory for the generated prompt file")
@click.option("--model", default=None, help="Override the executor model")
@click.option("--max-turns", type=int, default=None, help="Override the execute-mode turn allowance")
@click.option("--allowed-tools", default=None, help="Override the allowed tools (comma-separated)")
@click.option("--branch-prefix", default=None, help="Override the work branch prefix")
@click.option("--base-branch", default=None, help="Override the PR base branch")
@click.option("--language", default=None, help="Override the comment language")
@click.option("--rules-path", default=None, help="Override the project rules directory")
@click.pass_context
def run(
    ctx: click.Context,
    mode: str,
    config_path: str,
    system_prompt_path: str,
    prompt_dir: str | None,
    model: str | None,
    max_turns: int | None,
    allowed_tools: str | None,
    branch_prefix: str | None,
    base_branch: str | None,
    language: str | None,
    rules_path: str | None,
) -> None:
    """Prepare a plan or execute run for the agent executor.

    Writes the prompt to a file and emits the ``prompt_file``,
    ``claude_args``, ``model``, ``max_turns`` and ``allowed_tools`` step
    outputs. An execute-mode refusal exits with status 1 after commenting
    on the issue.
    """
    settings: RunSettings = ctx.obj["settings"]

    async def _run() -> None:
        try:
            phase = Mode(mode)
        except ValueError as e:
            raise InvalidModeError(mode) from e

        config = resolve_config(
            config_path,
            {
                "model": model,
                "max_turns": max_turns,
                "allowed_tools": allowed_tools,
                "branch_prefix": branch_prefix,
                "base_branch": base_branch,
                "language": language,
                "rules_path": rules_path,
            },
        )
        rules = load_rules(config.rules_path)
        system_prompt = build_system_prompt(system_prompt_path, config.language, rules)

        trigger = _trigger_from_settings(settings, phase)
        bind_issue_context(settings.github_repository, trigger.issue.number, phase.value)

        async with github_session(settings) as git:
            controller = PhaseController(git, config, system_prompt=system_prompt, has_rules=bool(rules))
            request = await controller.run(trigger)

        prompt_file = write_prompt_file(request.prompt, prompt_dir)
        log.info("prompt_written", path=str(prompt_file), mode=request.mode.value, max_turns=request.max_turns)

        write_outputs(
            {
                "prompt_file": str(prompt_file),
                "claude_args": request.claude_args,
                "model": request.model,
                "max_turns": str(request.max_turns),
                "allowed_tools": request.allowed_tools,
            },
            settings.github_output,
        )

    run_command(_run(), "run")


cli.add_command(post_process_group)


if __name__ == "__main__":
    cli()
