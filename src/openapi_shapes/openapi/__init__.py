"""OpenAPI export helpers."""

from openapi_shapes.openapi.export import downgrade_to_openapi_30, to_openapi_schema

__all__ = ["downgrade_to_openapi_30", "to_openapi_schema"]
