"""Pydantic models for OpenAPI document assembly options."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RouteTag(BaseModel):
    """Tag attached to the operation generated for a root field."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: str | None = None


class RouteConfig(BaseModel):
    """Per-field settings, keyed by field name in `AssemblyOptions.route_map`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tags: RouteTag | None = None


class AssemblyOptions(BaseModel):
    """
    Settings for the generated OpenAPI document.

    Field names are accepted both in snake_case and in the camelCase form used
    by JavaScript callers (`serverUrl`, `exampleValues`, `routeMap`). Unknown
    keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    server_url: str = Field(default="/graphql", alias="serverUrl")
    title: str = "GraphQL API"
    openapi: str = "3.0.3"
    version: str = "1.0.0"
    summary: str = "GraphQL Endpoint"
    description: str = "Endpoint for all GraphQL queries and mutations"
    example_values: dict[str, Any] = Field(default_factory=dict, alias="exampleValues")
    route_map: dict[str, RouteConfig] = Field(default_factory=dict, alias="routeMap")
    include_operation_name: bool = Field(default=False, alias="includeOperationName")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None) -> "AssemblyOptions":
        return cls.model_validate(dict(mapping or {}))

    def supports_info_summary(self) -> bool:
        """`info.summary` only exists from OpenAPI 3.1 on."""
        parts = self.openapi.split(".")
        try:
            major = int(parts[0])
            minor = int(parts[1]) if len(parts) > 1 else 0
        except ValueError:
            return False
        return (major, minor) >= (3, 1)
