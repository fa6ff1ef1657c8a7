"""Configuration exports."""

from openapi_shapes.config.loader import DEFAULT_CONFIG_PATH, load_app_config
from openapi_shapes.config.models import AppConfig, OutputConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "OutputConfig",
    "load_app_config",
]
