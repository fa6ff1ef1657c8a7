"""Optional ``.env`` support for the openapi-shapes CLI.

Settings such as ``OPENAPI_SHAPES_OPENAPI_VERSION`` can live in a ``.env``
file next to the project; values already exported in the shell win.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

from openapi_shapes.constants import ENV_PREFIX

DISABLE_DOTENV_VAR = f"{ENV_PREFIX}DISABLE_DOTENV"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def dotenv_disabled() -> bool:
    return os.getenv(DISABLE_DOTENV_VAR, "").strip().lower() in _TRUTHY


def load_runtime_env(*, filename: str = ".env") -> bool:
    """Merge the nearest ``filename`` into ``os.environ``.

    The search starts in the working directory and walks up. Returns whether
    a file was found and loaded.
    """
    if dotenv_disabled():
        return False
    dotenv_path = find_dotenv(filename=filename, usecwd=True)
    if not dotenv_path:
        return False
    return bool(load_dotenv(dotenv_path=dotenv_path, override=False))
