"""openapi-shapes package entrypoints."""

from openapi_shapes.builder import SchemaNode, Types, build
from openapi_shapes.cli import app
from openapi_shapes.constants import PACKAGE_VERSION
from openapi_shapes.openapi import to_openapi_schema
from openapi_shapes.runtime_env import load_runtime_env

__all__ = ["SchemaNode", "Types", "app", "build", "main", "to_openapi_schema", "__version__"]
__version__ = PACKAGE_VERSION


def main() -> None:
    """Launch the CLI."""
    load_runtime_env()
    app()
