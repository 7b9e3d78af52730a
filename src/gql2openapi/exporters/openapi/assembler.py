from collections.abc import Mapping
from typing import Any

from gql2openapi import log
from gql2openapi.exporters.openapi.classifier import UNKNOWN_TYPE, classify
from gql2openapi.exporters.openapi.examples import ExampleEntry
from gql2openapi.exporters.openapi.models import AssemblyOptions
from gql2openapi.exporters.openapi.type_ref import ObjectRef

JSON_CONTENT_TYPE = "application/json"
SUCCESS_RESPONSE_DESCRIPTION = "Successful GraphQL response"


def component_name(field_name: str) -> str:
    return f"{field_name}Response"


def component_ref(field_name: str) -> str:
    return f"#/components/schemas/{component_name(field_name)}"


class OpenAPIAssembler:
    """
    Assembler turning per-field examples into an OpenAPI document.

    Every example becomes a `POST /<fieldName>` path plus a reusable
    `<fieldName>Response` component schema. Property types in the component
    come from the declared GraphQL types, not from the mock values.
    """

    def __init__(self, options: AssemblyOptions | None = None):
        self.options = options or AssemblyOptions()

    def assemble(self, examples: Mapping[str, ExampleEntry]) -> dict[str, Any]:
        """
        Assemble the OpenAPI document.

        Args:
            examples: Example entries keyed by field name, in path order

        Returns:
            dict[str, Any]: The OpenAPI document
        """
        log.info(f"Assembling OpenAPI {self.options.openapi} document with {len(examples)} path(s)")

        paths: dict[str, Any] = {}
        schemas: dict[str, Any] = {}
        tags: list[dict[str, Any]] = []

        for field_name, entry in examples.items():
            schemas[component_name(field_name)] = self.build_response_schema(field_name, entry)
            operation = self.build_operation(field_name, entry)

            tag = self.route_tag(field_name)
            if tag is not None:
                operation["tags"] = [tag["name"]]
                if all(existing["name"] != tag["name"] for existing in tags):
                    tags.append(tag)

            paths[f"/{field_name}"] = {"post": operation}
            log.debug(f"Registered path /{field_name}")

        document: dict[str, Any] = {
            "openapi": self.options.openapi,
            "info": self.build_info(),
            "servers": [{"url": self.options.server_url}],
            "paths": paths,
            "components": {"schemas": schemas},
        }
        if tags:
            document["tags"] = tags

        return document

    def build_info(self) -> dict[str, Any]:
        info = {
            "title": self.options.title,
            "version": self.options.version,
            "description": self.options.description,
        }
        if self.options.supports_info_summary():
            info["summary"] = self.options.summary
        return info

    def build_operation(self, field_name: str, entry: ExampleEntry) -> dict[str, Any]:
        """
        Build the POST operation for a field.

        Args:
            field_name: Name of the root field
            entry: The field's example entry

        Returns:
            dict[str, Any]: OpenAPI operation object
        """
        return {
            "summary": entry.summary,
            "description": f"Example for {field_name}",
            "operationId": field_name,
            "requestBody": {
                "required": True,
                "content": {
                    JSON_CONTENT_TYPE: {
                        "schema": self.build_request_schema(entry),
                    }
                },
            },
            "responses": {
                "200": {
                    "description": SUCCESS_RESPONSE_DESCRIPTION,
                    "content": {
                        JSON_CONTENT_TYPE: {
                            "schema": {"$ref": component_ref(field_name)},
                            "example": entry.response,
                        }
                    },
                }
            },
        }

    def build_request_schema(self, entry: ExampleEntry) -> dict[str, Any]:
        """
        Build the request body schema.

        `variables` and `operationName` are only declared when the example
        carries them.
        """
        properties: dict[str, Any] = {
            "query": {
                "type": "string",
                "description": "GraphQL Query or Mutation",
                "example": entry.value["query"],
            }
        }

        variables = entry.value.get("variables")
        if variables:
            properties["variables"] = {
                "type": "object",
                "additionalProperties": True,
                "description": "Variables for the query or mutation",
                "example": variables,
            }

        operation_name = entry.value.get("operationName")
        if operation_name:
            properties["operationName"] = {"type": "string", "example": operation_name}

        return {
            "type": "object",
            "properties": properties,
            "required": ["query"],
        }

    def build_response_schema(self, field_name: str, entry: ExampleEntry) -> dict[str, Any]:
        data = entry.response.get("data") or {}
        data_properties = {key: {"type": self.declared_type(field_name, entry, key)} for key in data}

        return {
            "type": "object",
            "properties": {
                "data": {
                    "type": "object",
                    "properties": data_properties,
                }
            },
        }

    def declared_type(self, field_name: str, entry: ExampleEntry, key: str) -> str:
        """
        Classify the declared GraphQL type behind a key of the mock data.

        Args:
            field_name: Name of the root field
            entry: The field's example entry
            key: A key of `entry.response["data"]`

        Returns:
            str: OpenAPI primitive type name, `unknown` when it cannot be resolved
        """
        return_type = entry.return_type
        if return_type is None:
            return UNKNOWN_TYPE

        if isinstance(return_type, ObjectRef):
            field_type = return_type.field_type(key)
            if field_type is not None:
                return classify(field_type)

        if key == field_name:
            return classify(return_type)

        return UNKNOWN_TYPE

    def route_tag(self, field_name: str) -> dict[str, Any] | None:
        route = self.options.route_map.get(field_name)
        if route is None or route.tags is None:
            return None

        tag: dict[str, Any] = {"name": route.tags.name}
        if route.tags.description:
            tag["description"] = route.tags.description
        return tag


def assemble(
    examples: Mapping[str, ExampleEntry],
    options: AssemblyOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    if not isinstance(options, AssemblyOptions):
        options = AssemblyOptions.from_mapping(options)
    return OpenAPIAssembler(options).assemble(examples)
