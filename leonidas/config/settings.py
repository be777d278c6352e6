"""
Configuration system using Pydantic for type-safe settings management.

Two sources feed a run:

* ``LeonidasConfig`` - repository-level behaviour, read from a YAML file
  (``leonidas.config.yml`` by default) and overridden by workflow inputs.
* ``RunSettings`` - identifiers the CI environment provides (token,
  repository, event payload path, output file), read from environment
  variables.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from leonidas.enums import AuthorAssociation
from leonidas.exceptions import ConfigurationError
from leonidas.i18n import resolve_language

log = structlog.get_logger(__name__)

# Exclusive lower bound: a run must keep a positive push deadline after the
# reserved tail of turns.
MIN_MAX_TURNS = 10
MAX_MAX_TURNS = 200

DEFAULT_ALLOWED_TOOLS: list[str] = [
    "Read",
    "Write",
    "Edit",
    "Bash(npm:*)",
    "Bash(git:*)",
    "Bash(gh:*)",
    "Bash(npx:*)",
    "Bash(node:*)",
    "Bash(ls:*)",
    "Bash(cat:*)",
]

DEFAULT_TRUSTED_PLAN_AUTHORS: list[str] = ["github-actions[bot]"]

_LABEL_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

_STRING_FIELDS = ("label", "model", "branch_prefix", "base_branch", "language", "rules_path", "ci_workflow")
_LIST_FIELDS = ("allowed_tools", "authorized_approvers", "trusted_plan_authors")


class LeonidasConfig(BaseModel):
    """Repository-level leonidas configuration."""

    label: str = Field(default="leonidas", description="Label that triggers plan mode")
    model: str = Field(default="claude-sonnet-4-5-20250929", description="Model passed to the executor")
    branch_prefix: str = Field(default="claude/issue-", description="Prefix of per-issue work branches")
    base_branch: str = Field(default="main", description="Branch pull requests target")
    allowed_tools: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_TOOLS),
        description="Tools the executor may use in execute mode",
    )
    max_turns: int = Field(default=50, description="Turn allowance for execute mode")
    language: str = Field(default="en", description="Language of posted comments")
    rules_path: str = Field(default=".github/leonidas-rules", description="Directory of project rule files")
    authorized_approvers: list[str] = Field(
        default_factory=lambda: [
            AuthorAssociation.OWNER.value,
            AuthorAssociation.MEMBER.value,
            AuthorAssociation.COLLABORATOR.value,
        ],
        description="Author associations allowed to approve execution (empty allows everyone)",
    )
    trusted_plan_authors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRUSTED_PLAN_AUTHORS),
        description="Comment authors whose plan comments are authoritative",
    )
    ci_workflow: str = Field(default="ci.yml", description="Workflow file dispatched on the work branch")

    @field_validator("label")
    @classmethod
    def validate_label(cls, value: str) -> str:
        if not _LABEL_PATTERN.match(value):
            raise ValueError(
                f'Invalid label format: "{value}". Labels must contain only alphanumeric '
                "characters, hyphens, and underscores."
            )
        return value

    @field_validator("max_turns")
    @classmethod
    def validate_max_turns(cls, value: int) -> int:
        if value <= MIN_MAX_TURNS or value > MAX_MAX_TURNS:
            raise ValueError(
                f"max_turns must be greater than {MIN_MAX_TURNS} and at most {MAX_MAX_TURNS}, got {value}"
            )
        return value

    @field_validator("language")
    @classmethod
    def normalize_language(cls, value: str) -> str:
        return resolve_language(value)

    @field_validator("authorized_approvers")
    @classmethod
    def validate_authorized_approvers(cls, value: list[str]) -> list[str]:
        """Reject associations that cannot identify a trusted approver."""
        valid = AuthorAssociation.approver_values()
        for approver in value:
            if approver == AuthorAssociation.NONE.value:
                raise ValueError(
                    'Invalid authorized_approvers value: "NONE" is not allowed as it represents '
                    "unauthenticated users. Use valid associations like OWNER, MEMBER, or "
                    "COLLABORATOR instead."
                )
            if approver not in valid:
                raise ValueError(
                    f'Invalid authorized_approvers value: "{approver}". Must be one of: {", ".join(valid)}'
                )
        return value

    @property
    def allowed_tools_arg(self) -> str:
        return ",".join(self.allowed_tools)


class RunSettings(BaseSettings):
    """Values provided by the CI environment for one invocation."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore", populate_by_name=True)

    github_token: str = Field(
        default="",
        validation_alias=AliasChoices("LEONIDAS_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN"),
    )
    github_repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")
    github_api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")
    github_event_path: str | None = Field(default=None, validation_alias="GITHUB_EVENT_PATH")
    github_output: str | None = Field(default=None, validation_alias="GITHUB_OUTPUT")
    run_url: str = Field(default="", validation_alias=AliasChoices("RUN_URL", "LEONIDAS_RUN_URL"))
    issue_number: int | None = Field(default=None, validation_alias="LEONIDAS_ISSUE_NUMBER")
    issue_title: str = Field(default="", validation_alias="LEONIDAS_ISSUE_TITLE")
    issue_body: str = Field(default="", validation_alias="LEONIDAS_ISSUE_BODY")
    issue_author: str = Field(default="", validation_alias="LEONIDAS_ISSUE_AUTHOR")

    @property
    def owner(self) -> str:
        return self.github_repository.partition("/")[0]

    @property
    def repo(self) -> str:
        return self.github_repository.partition("/")[2]

    def require_repository(self) -> tuple[str, str]:
        """Return ``(owner, repo)`` or fail when the repository is not set."""
        if not self.owner or not self.repo:
            raise ConfigurationError(f"GITHUB_REPOSITORY must be 'owner/repo', got '{self.github_repository}'")
        return self.owner, self.repo


def load_config_file(config_path: str | Path) -> dict[str, Any]:
    """Read a YAML config file.

    A missing file yields an empty mapping. So does a file that cannot be
    read or parsed, after a warning is logged.
    """
    path = Path(config_path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        log.warning("config_file_unreadable", path=str(path), error=str(e))
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        log.warning("config_file_invalid_yaml", path=str(path), error=str(e))
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        log.warning("config_file_not_mapping", path=str(path), type=type(data).__name__)
        return {}
    return data


def _validate_config_types(file_config: dict[str, Any]) -> dict[str, Any]:
    """Drop fields with the wrong type so their defaults apply."""
    validated = dict(file_config)

    for name in _STRING_FIELDS:
        if name in validated and not isinstance(validated[name], str):
            log.warning("config_field_not_string", field=name, type=type(validated[name]).__name__)
            del validated[name]

    if "max_turns" in validated:
        value = validated["max_turns"]
        if isinstance(value, bool) or not isinstance(value, int):
            log.warning("config_field_not_integer", field="max_turns", type=type(value).__name__)
            del validated["max_turns"]

    for name in _LIST_FIELDS:
        if name not in validated:
            continue
        value = validated[name]
        if not isinstance(value, list):
            log.warning("config_field_not_list", field=name, type=type(value).__name__)
            del validated[name]
            continue
        items = []
        for item in value:
            if isinstance(item, str):
                items.append(item)
            else:
                log.warning("config_list_item_dropped", field=name, type=type(item).__name__)
        validated[name] = items

    return validated


def merge_config(file_config: dict[str, Any], overrides: dict[str, Any] | None = None) -> LeonidasConfig:
    """Merge defaults, file values and workflow overrides.

    Overrides that are ``None`` or empty strings are ignored. A comma-separated
    ``allowed_tools`` override is split into a list.

    Raises:
        ConfigurationError: If the merged values fail validation
    """
    merged = _validate_config_types(file_config)

    for key, value in (overrides or {}).items():
        if value is None or value == "":
            continue
        if key == "allowed_tools" and isinstance(value, str):
            value = [tool.strip() for tool in value.split(",") if tool.strip()]
        merged[key] = value

    try:
        return LeonidasConfig(**merged)
    except ValidationError as e:
        messages = "; ".join(_error_message(error) for error in e.errors())
        raise ConfigurationError(messages) from e


def _error_message(error: Any) -> str:
    message = str(error.get("msg", ""))
    return message.removeprefix("Value error, ")


def resolve_config(config_path: str | Path, overrides: dict[str, Any] | None = None) -> LeonidasConfig:
    """Load ``config_path`` and merge it with ``overrides``."""
    config = merge_config(load_config_file(config_path), overrides)
    log.debug("config_resolved", path=str(config_path), label=config.label, max_turns=config.max_turns)
    return config


def load_rules(rules_path: str | Path) -> dict[str, str]:
    """Load project rule files.

    Returns:
        Mapping of rule name (file stem) to content for every ``*.md`` file in
        the directory, in name order. Empty when the directory is missing.
    """
    directory = Path(rules_path)
    if not directory.is_dir():
        return {}

    rules: dict[str, str] = {}
    for rule_file in sorted(directory.glob("*.md")):
        try:
            rules[rule_file.stem] = rule_file.read_text(encoding="utf-8")
        except OSError as e:
            log.warning("rule_file_unreadable", path=str(rule_file), error=str(e))
    return rules
