"""Configuration loading for leonidas."""

from leonidas.config.settings import (
    DEFAULT_ALLOWED_TOOLS,
    DEFAULT_TRUSTED_PLAN_AUTHORS,
    LeonidasConfig,
    RunSettings,
    load_config_file,
    load_rules,
    merge_config,
    resolve_config,
)

__all__ = [
    "DEFAULT_ALLOWED_TOOLS",
    "DEFAULT_TRUSTED_PLAN_AUTHORS",
    "LeonidasConfig",
    "RunSettings",
    "load_config_file",
    "load_rules",
    "merge_config",
    "resolve_config",
]
