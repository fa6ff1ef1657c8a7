"""Runtime .env loading tests."""

from __future__ import annotations

import os
from pathlib import Path

from openapi_shapes.runtime_env import dotenv_disabled, load_runtime_env


def _write_env(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def test_load_runtime_env_reads_dotenv(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should populate env vars from .env when present."""
    _write_env(tmp_path / ".env", "OPENAPI_SHAPES_LOG_LEVEL=DEBUG\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENAPI_SHAPES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OPENAPI_SHAPES_DISABLE_DOTENV", raising=False)

    loaded = load_runtime_env()

    assert loaded is True
    assert os.environ["OPENAPI_SHAPES_LOG_LEVEL"] == "DEBUG"
    monkeypatch.delenv("OPENAPI_SHAPES_LOG_LEVEL", raising=False)


def test_load_runtime_env_does_not_override_existing(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should preserve already-exported process env values."""
    _write_env(tmp_path / ".env", "OPENAPI_SHAPES_LOG_LEVEL=DEBUG\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAPI_SHAPES_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("OPENAPI_SHAPES_DISABLE_DOTENV", raising=False)

    loaded = load_runtime_env()

    assert loaded is True
    assert os.environ["OPENAPI_SHAPES_LOG_LEVEL"] == "ERROR"


def test_load_runtime_env_can_be_disabled(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should no-op when explicit disable flag is set."""
    _write_env(tmp_path / ".env", "OPENAPI_SHAPES_LOG_LEVEL=DEBUG\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAPI_SHAPES_DISABLE_DOTENV", "true")
    monkeypatch.delenv("OPENAPI_SHAPES_LOG_LEVEL", raising=False)

    loaded = load_runtime_env()

    assert loaded is False
    assert "OPENAPI_SHAPES_LOG_LEVEL" not in os.environ


def test_dotenv_disabled_reads_flag(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    """Only truthy flag values disable .env loading."""
    monkeypatch.setenv("OPENAPI_SHAPES_DISABLE_DOTENV", "0")
    assert dotenv_disabled() is False
    monkeypatch.setenv("OPENAPI_SHAPES_DISABLE_DOTENV", " YES ")
    assert dotenv_disabled() is True
