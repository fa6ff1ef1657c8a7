"""Configuration loading and override resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from openapi_shapes.config.models import AppConfig
from openapi_shapes.constants import ENV_PREFIX

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Configuration file must deserialize to a mapping")
    return data


def apply_overrides(
    raw_config: dict[str, Any],
    env: Mapping[str, str],
    cli_overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Apply precedence: CLI > env > YAML defaults."""
    merged = dict(raw_config)
    env_version = env.get(f"{ENV_PREFIX}OPENAPI_VERSION")
    if env_version:
        merged["openapi_version"] = env_version
    env_log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if env_log_level:
        merged["log_level"] = env_log_level

    if cli_overrides:
        if cli_overrides.get("openapi_version"):
            merged["openapi_version"] = cli_overrides["openapi_version"]
        if cli_overrides.get("log_level"):
            merged["log_level"] = cli_overrides["log_level"]
        if cli_overrides.get("indent") is not None:
            merged["output"] = dict(merged.get("output") or {})
            merged["output"]["indent"] = cli_overrides["indent"]
    return merged


def load_app_config(
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Load and validate central application config.

    An explicit ``config_path`` must exist; when it is omitted, a missing
    default file falls back to model defaults.
    """
    active_env = os.environ if env is None else env
    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        raw: dict[str, Any] = {}
    else:
        raw = _load_yaml(config_path or DEFAULT_CONFIG_PATH)
    merged = apply_overrides(raw, active_env, cli_overrides)
    return AppConfig.model_validate(merged)
