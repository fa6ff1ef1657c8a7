"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from openapi_shapes.config.loader import load_app_config
from openapi_shapes.schemas.enums import OpenApiVersion


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_cli_overrides_env_and_yaml_defaults(tmp_path: Path) -> None:
    """CLI override should have highest precedence."""
    config_path = _write_config(
        tmp_path,
        """
openapi_version: "3.1.0"
log_level: "info"
""".strip(),
    )

    config = load_app_config(
        config_path,
        env={"OPENAPI_SHAPES_OPENAPI_VERSION": "3.1"},
        cli_overrides={"openapi_version": "3.0"},
    )
    assert config.openapi_version == OpenApiVersion.V3_0
    assert config.log_level == "INFO"


def test_env_overrides_yaml(tmp_path: Path) -> None:
    """Environment values win over the YAML file."""
    config_path = _write_config(tmp_path, 'openapi_version: "3.0.3"\n')
    config = load_app_config(
        config_path,
        env={"OPENAPI_SHAPES_OPENAPI_VERSION": "3.1.0", "OPENAPI_SHAPES_LOG_LEVEL": "debug"},
    )
    assert config.openapi_version == OpenApiVersion.V3_1
    assert config.log_level == "DEBUG"


def test_unquoted_yaml_version_is_normalized(tmp_path: Path) -> None:
    """YAML floats such as 3.0 map onto the canonical version."""
    config_path = _write_config(tmp_path, "openapi_version: 3.0\n")
    config = load_app_config(config_path, env={})
    assert config.openapi_version == OpenApiVersion.V3_0


def test_invalid_settings_are_rejected(tmp_path: Path) -> None:
    """Unknown keys and unsupported versions fail validation."""
    with pytest.raises(ValidationError):
        load_app_config(_write_config(tmp_path, "colour: red\n"), env={})
    with pytest.raises(ValidationError):
        load_app_config(_write_config(tmp_path, 'openapi_version: "2.0"\n'), env={})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    """Config files must deserialize to a mapping."""
    with pytest.raises(ValueError):
        load_app_config(_write_config(tmp_path, "- a\n- b\n"), env={})


def test_missing_explicit_path_fails(tmp_path: Path) -> None:
    """An explicit config path must exist."""
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "absent.yaml", env={})


def test_missing_default_file_uses_defaults(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Without config/settings.yaml the model defaults apply."""
    monkeypatch.chdir(tmp_path)
    config = load_app_config(env={}, cli_overrides={"indent": False})
    assert config.openapi_version == OpenApiVersion.V3_1
    assert config.log_level == "WARNING"
    assert config.output.indent is False
