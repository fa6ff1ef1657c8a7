"""CLI for openapi-shapes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from openapi_shapes.builder import SchemaNode, build, describe_shapes
from openapi_shapes.config import AppConfig, load_app_config
from openapi_shapes.constants import PACKAGE_VERSION
from openapi_shapes.openapi import to_openapi_schema

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="openapi-shapes: pydantic schema nodes annotated for OpenAPI documentation.",
)
console = Console()


@app.command()
def version() -> None:
    """Print the openapi-shapes version."""
    typer.echo(PACKAGE_VERSION)


@app.command("shapes")
def shapes() -> None:
    """List the supported shapes."""
    table = Table(title="Supported Shapes")
    table.add_column("Shape")
    table.add_column("Kind")
    table.add_column("Format")
    table.add_column("Mandatory")
    for info in describe_shapes():
        table.add_row(
            info.name,
            info.kind.value,
            info.format_hint or "-",
            ", ".join(info.mandatory) or "-",
        )
    console.print(table)


@app.command("schema")
def schema(
    shape: str = typer.Argument(..., help="Shape name, e.g. Uuid or DateTime."),
    options: str | None = typer.Option(
        None, "--options", help="Shape options as a JSON object."
    ),
    openapi_version: str | None = typer.Option(
        None, "--openapi-version", help="Target OpenAPI version (3.0 or 3.1)."
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to settings.yaml override."),
) -> None:
    """Print the OpenAPI schema fragment for a shape."""
    try:
        cfg = _load_config(config, openapi_version=openapi_version)
        node = _build_node(shape, options)
        fragment, components = to_openapi_schema(node, cfg.openapi_version)
        payload: dict[str, Any] = {"schema": fragment}
        if components:
            payload["components"] = {"schemas": components}
        typer.echo(_render_json(payload, cfg))
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Schema export failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command("check")
def check(
    shape: str = typer.Argument(..., help="Shape name, e.g. Email or Integer."),
    value: str = typer.Argument(..., help="JSON-encoded value to validate."),
    options: str | None = typer.Option(
        None, "--options", help="Shape options as a JSON object."
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to settings.yaml override."),
) -> None:
    """Validate a JSON value against a shape."""
    try:
        cfg = _load_config(config)
        node = _build_node(shape, options)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Invalid shape definition:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    try:
        validated = node.validate_json(value)
    except ValidationError as exc:
        _render_errors(exc)
        raise typer.Exit(code=1) from exc

    typer.echo(_render_json(node.dump(validated), cfg))


@app.command("validate-config")
def validate_config(
    config: Path | None = typer.Option(
        None, "--config", help="Path to settings.yaml override."
    ),
) -> None:
    """Validate configuration and print the effective settings."""
    try:
        config_model = load_app_config(config)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Configuration validation failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title="Effective Configuration")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("openapi_version", config_model.openapi_version.value)
    table.add_row("log_level", config_model.log_level)
    table.add_row("output.indent", str(config_model.output.indent))
    table.add_row("output.sort_keys", str(config_model.output.sort_keys))
    console.print(table)


def _load_config(config: Path | None, *, openapi_version: str | None = None) -> AppConfig:
    cfg = load_app_config(config, cli_overrides={"openapi_version": openapi_version})
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("openapi_shapes").setLevel(cfg.log_level)
    return cfg


def _build_node(shape: str, options: str | None) -> SchemaNode:
    raw = orjson.loads(options) if options else {}
    if not isinstance(raw, dict):
        raise typer.BadParameter("--options must be a JSON object.")
    LOGGER.debug("Building shape %s from CLI options", shape)
    return build({**raw, "shape": shape})


def _render_json(payload: Any, cfg: AppConfig) -> str:
    option = 0
    if cfg.output.indent:
        option |= orjson.OPT_INDENT_2
    if cfg.output.sort_keys:
        option |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, option=option).decode("utf-8")


def _render_errors(exc: ValidationError) -> None:
    table = Table(title="Validation Errors")
    table.add_column("Location")
    table.add_column("Type")
    table.add_column("Message")
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "-"
        table.add_row(escape(location), error["type"], escape(error["msg"]))
    console.print(table)
