"""Package-wide constants."""

from __future__ import annotations

PACKAGE_NAME = "openapi-shapes"
PACKAGE_VERSION = "0.3.0"
ENV_PREFIX = "OPENAPI_SHAPES_"
DEFAULT_OPENAPI_VERSION = "3.1.0"
COMPONENTS_REF_TEMPLATE = "#/components/schemas/{model}"
