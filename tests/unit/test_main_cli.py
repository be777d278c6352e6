"""Unit tests for the leonidas CLI (leonidas.main and leonidas.cli.post_process).

The tracker is replaced by the shared ``mock_git_provider`` fixture; each
test drives the commands through click's CliRunner with the environment a
GitHub Actions job would provide.
"""

import json
from contextlib import asynccontextmanager
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from leonidas.main import cli
from leonidas.models.domain import Issue


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structured log lines out of the captured CLI output."""
    with patch("leonidas.main.configure_logging"):
        structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
        yield
    structlog.reset_defaults()


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def git(mock_git_provider):
    """Patch the GitHub session used by every command."""

    @asynccontextmanager
    async def _session(settings):
        yield mock_git_provider

    with (
        patch("leonidas.main.github_session", _session),
        patch("leonidas.cli.post_process.github_session", _session),
    ):
        yield mock_git_provider


@pytest.fixture
def workspace(tmp_path):
    """Paths for the event payload, step outputs and prompt files."""
    paths = {
        "event": tmp_path / "event.json",
        "output": tmp_path / "github_output",
        "prompts": tmp_path / "prompts",
        "config": tmp_path / "leonidas.config.yml",
        "system": tmp_path / "leonidas.md",
        "rules": tmp_path / "rules",
    }
    paths["output"].write_text("", encoding="utf-8")
    return paths


def _env(workspace, **extra):
    env = {
        "GITHUB_REPOSITORY": "acme/widgets",
        "GITHUB_TOKEN": "ghs_test",
        "GITHUB_EVENT_PATH": str(workspace["event"]),
        "GITHUB_OUTPUT": str(workspace["output"]),
        "RUNNER_TEMP": str(workspace["prompts"]),
        "RUN_URL": "https://github.com/acme/widgets/actions/runs/1",
        "LEONIDAS_ISSUE_NUMBER": None,
        "MODE": None,
        "ISSUE_NUMBER": None,
        "BRANCH_PREFIX": None,
        "BASE_BRANCH": None,
        "LANGUAGE": None,
    }
    env.update(extra)
    return env


def _write_event(workspace, association="OWNER", body="Sign in with GitHub."):
    workspace["event"].write_text(
        json.dumps(
            {
                "issue": {
                    "number": 42,
                    "title": "Add OAuth login",
                    "body": body,
                    "state": "open",
                    "labels": [{"name": "leonidas"}],
                    "user": {"login": "octocat"},
                },
                "comment": {"user": {"login": "maintainer"}, "author_association": association},
            }
        ),
        encoding="utf-8",
    )


def _run_args(workspace, mode):
    return [
        "run",
        "--mode",
        mode,
        "--config-path",
        str(workspace["config"]),
        "--system-prompt-path",
        str(workspace["system"]),
        "--rules-path",
        str(workspace["rules"]),
    ]


def _outputs(workspace) -> dict[str, str]:
    lines = workspace["output"].read_text(encoding="utf-8").splitlines()
    return dict(line.split("=", 1) for line in lines)


# =============================================================================
# run
# =============================================================================


class TestRunCommand:
    def test_help(self, cli_runner):
        result = cli_runner.invoke(cli, ["run", "--help"])

        assert result.exit_code == 0
        assert "--mode" in result.output

    def test_plan_mode(self, cli_runner, git, workspace):
        _write_event(workspace)

        result = cli_runner.invoke(cli, _run_args(workspace, "plan"), env=_env(workspace))

        assert result.exit_code == 0, result.output
        outputs = _outputs(workspace)
        assert outputs["max_turns"] == "10"
        assert outputs["model"] == "claude-sonnet-4-5-20250929"
        assert outputs["claude_args"].startswith("--model claude-sonnet-4-5-20250929 --max-turns 10")
        prompt_file = workspace["prompts"] / outputs["prompt_file"].rsplit("/", 1)[-1]
        assert "## Issue #42: Add OAuth login" in prompt_file.read_text(encoding="utf-8")
        git.add_comment.assert_not_called()

    def test_execute_mode(self, cli_runner, git, workspace, plan_comment):
        _write_event(workspace)
        git.get_comments.return_value = [plan_comment]
        workspace["config"].write_text("max_turns: 30\n", encoding="utf-8")

        result = cli_runner.invoke(cli, _run_args(workspace, "execute"), env=_env(workspace))

        assert result.exit_code == 0, result.output
        outputs = _outputs(workspace)
        assert outputs["max_turns"] == "30"
        assert outputs["allowed_tools"].startswith("Read,Write,Edit")
        git.add_comment.assert_awaited_once()

    def test_cli_override_beats_config_file(self, cli_runner, git, workspace, plan_comment):
        _write_event(workspace)
        git.get_comments.return_value = [plan_comment]
        workspace["config"].write_text("max_turns: 30\n", encoding="utf-8")

        result = cli_runner.invoke(
            cli, [*_run_args(workspace, "execute"), "--max-turns", "80"], env=_env(workspace)
        )

        assert result.exit_code == 0, result.output
        assert _outputs(workspace)["max_turns"] == "80"

    def test_execute_refused(self, cli_runner, git, workspace):
        _write_event(workspace, association="NONE")

        result = cli_runner.invoke(cli, _run_args(workspace, "execute"), env=_env(workspace))

        assert result.exit_code == 1
        assert "Error: Unauthorized approver" in result.output
        assert workspace["output"].read_text(encoding="utf-8") == ""
        git.add_comment.assert_awaited_once()

    def test_invalid_mode(self, cli_runner, git, workspace):
        _write_event(workspace)

        result = cli_runner.invoke(cli, _run_args(workspace, "deploy"), env=_env(workspace))

        assert result.exit_code == 1
        assert 'Invalid mode: deploy. Must be "plan" or "execute".' in result.output

    def test_invalid_config(self, cli_runner, git, workspace):
        _write_event(workspace)
        workspace["config"].write_text("max_turns: 500\n", encoding="utf-8")

        result = cli_runner.invoke(cli, _run_args(workspace, "plan"), env=_env(workspace))

        assert result.exit_code == 1
        assert "max_turns must be greater than 10 and at most 200, got 500" in result.output

    def test_issue_from_environment(self, cli_runner, git, workspace):
        env = _env(
            workspace,
            GITHUB_EVENT_PATH=None,
            LEONIDAS_ISSUE_NUMBER="7",
            LEONIDAS_ISSUE_TITLE="Fix typo",
            LEONIDAS_ISSUE_BODY="README typo",
        )

        result = cli_runner.invoke(cli, _run_args(workspace, "plan"), env=env)

        assert result.exit_code == 0, result.output
        prompt_path = _outputs(workspace)["prompt_file"]
        with open(prompt_path, encoding="utf-8") as f:
            assert "## Issue #7: Fix typo" in f.read()

    def test_no_issue_source(self, cli_runner, git, workspace):
        env = _env(workspace, GITHUB_EVENT_PATH=None)

        result = cli_runner.invoke(cli, _run_args(workspace, "plan"), env=env)

        assert result.exit_code == 1
        assert "LEONIDAS_ISSUE_NUMBER" in result.output

    def test_unexpected_error(self, cli_runner, git, workspace):
        _write_event(workspace)
        git.get_comments.side_effect = RuntimeError("socket closed")

        result = cli_runner.invoke(cli, _run_args(workspace, "execute"), env=_env(workspace))

        assert result.exit_code == 1
        assert "Unexpected error: socket closed" in result.output


# =============================================================================
# post-process
# =============================================================================


class TestPostProcessCommands:
    def test_group_help(self, cli_runner):
        result = cli_runner.invoke(cli, ["post-process", "--help"])

        assert result.exit_code == 0
        for command in ("link-subissues", "post-completion", "post-failure", "rescue", "post-process-pr", "trigger-ci"):
            assert command in result.output

    def test_link_subissues(self, cli_runner, git, workspace, decomposed_plan_comment):
        git.get_comments.return_value = [decomposed_plan_comment]

        result = cli_runner.invoke(
            cli,
            ["post-process", "link-subissues", "--issue-number", "10", "--config-path", str(workspace["config"])],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        assert "Sub-issue linking complete: 3 linked, 0 skipped/failed." in result.output

    def test_post_completion(self, cli_runner, git, workspace, open_pull_request):
        git.find_open_pull_request.return_value = open_pull_request

        result = cli_runner.invoke(
            cli,
            ["post-process", "post-completion", "--config-path", str(workspace["config"])],
            env=_env(workspace, ISSUE_NUMBER="42", BRANCH_PREFIX="ai/"),
        )

        assert result.exit_code == 0, result.output
        git.find_open_pull_request.assert_awaited_once_with("ai/42")
        assert "#77" in git.add_comment.await_args.args[1]

    def test_post_failure_localized(self, cli_runner, git, workspace):
        result = cli_runner.invoke(
            cli,
            [
                "post-process",
                "post-failure",
                "--issue-number",
                "42",
                "--mode",
                "plan",
                "--language",
                "ko",
                "--config-path",
                str(workspace["config"]),
            ],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        assert "레오니다스" in git.add_comment.await_args.args[1]

    def test_post_failure_rejects_unknown_mode(self, cli_runner, git, workspace):
        result = cli_runner.invoke(
            cli,
            ["post-process", "post-failure", "--issue-number", "42", "--mode", "deploy"],
            env=_env(workspace),
        )

        assert result.exit_code == 2

    def test_rescue_writes_outputs(self, cli_runner, git, workspace, open_pull_request):
        git.get_branch.return_value = "abc123"
        git.find_open_pull_request.return_value = open_pull_request

        result = cli_runner.invoke(
            cli,
            ["post-process", "rescue", "--issue-number", "42", "--config-path", str(workspace["config"])],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        assert _outputs(workspace) == {
            "branch_exists": "true",
            "pr_exists": "true",
            "pr_number": "77",
            "pr_created": "false",
        }

    def test_rescue_without_branch(self, cli_runner, git, workspace):
        result = cli_runner.invoke(
            cli,
            ["post-process", "rescue", "--issue-number", "42", "--config-path", str(workspace["config"])],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        assert _outputs(workspace)["branch_exists"] == "false"
        assert _outputs(workspace)["pr_number"] == ""

    def test_post_process_pr(self, cli_runner, git, workspace, open_pull_request):
        git.find_open_pull_request.return_value = open_pull_request
        git.get_issue.return_value = Issue(
            number=42, title="t", body="", labels=["ai", "bug"], author="octocat"
        )

        result = cli_runner.invoke(
            cli,
            [
                "post-process",
                "post-process-pr",
                "--issue-number",
                "42",
                "--label",
                "ai",
                "--config-path",
                str(workspace["config"]),
            ],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        git.add_labels_to_pull_request.assert_awaited_once_with(77, ["bug"])

    def test_trigger_ci(self, cli_runner, git, workspace):
        workspace["config"].write_text("ci_workflow: test.yml\n", encoding="utf-8")

        result = cli_runner.invoke(
            cli,
            ["post-process", "trigger-ci", "--issue-number", "42", "--config-path", str(workspace["config"])],
            env=_env(workspace),
        )

        assert result.exit_code == 0, result.output
        git.dispatch_workflow.assert_awaited_once_with("test.yml", "claude/issue-42")
        assert _outputs(workspace) == {"ci_dispatched": "true"}

    def test_missing_issue_number(self, cli_runner, workspace):
        result = cli_runner.invoke(cli, ["post-process", "rescue"], env=_env(workspace))

        assert result.exit_code == 2
        assert "--issue-number" in result.output
