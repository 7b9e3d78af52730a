import json
from collections.abc import Iterable, Mapping
from typing import Any

import yaml
from graphql import GraphQLSchema

from gql2openapi import log
from gql2openapi.exporters.openapi.assembler import OpenAPIAssembler
from gql2openapi.exporters.openapi.examples import OperationKind, build_examples
from gql2openapi.exporters.openapi.models import AssemblyOptions
from gql2openapi.exporters.utils.extraction import get_all_named_types

OUTPUT_FORMATS = ("json", "yaml")


def transform(
    graphql_schema: GraphQLSchema,
    options: AssemblyOptions | Mapping[str, Any] | None = None,
    operation_kinds: Iterable[OperationKind | str] | None = None,
) -> dict[str, Any]:
    """
    Transform a GraphQL schema object into an OpenAPI document.

    Args:
        graphql_schema: The GraphQL schema object to transform
        options: Assembly options, as a model or a plain mapping
        operation_kinds: Root types to expose, defaults to query and mutation

    Returns:
        dict[str, Any]: The OpenAPI document
    """
    if not isinstance(options, AssemblyOptions):
        options = AssemblyOptions.from_mapping(options)

    log.info(f"Transforming GraphQL schema to OpenAPI with {len(get_all_named_types(graphql_schema))} types")

    examples = build_examples(
        graphql_schema,
        options.example_values,
        operation_kinds,
        include_operation_name=options.include_operation_name,
    )
    document = OpenAPIAssembler(options).assemble(examples)

    log.info(f"Successfully converted GraphQL schema to OpenAPI with {len(document['paths'])} path(s)")

    return document


def serialize_document(document: dict[str, Any], output_format: str = "json") -> str:
    """
    Serialize an OpenAPI document.

    Args:
        document: The OpenAPI document
        output_format: `json` or `yaml`

    Returns:
        str: The serialized document
    """
    if output_format == "json":
        return json.dumps(document, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format '{output_format}', expected one of: {', '.join(OUTPUT_FORMATS)}")


def translate_to_openapi(
    graphql_schema: GraphQLSchema,
    options: AssemblyOptions | Mapping[str, Any] | None = None,
    output_format: str = "json",
    operation_kinds: Iterable[OperationKind | str] | None = None,
) -> str:
    """
    Translate a GraphQL schema to a serialized OpenAPI document.

    Args:
        graphql_schema: The GraphQL schema object to translate
        options: Assembly options, as a model or a plain mapping
        output_format: `json` or `yaml`
        operation_kinds: Root types to expose, defaults to query and mutation

    Returns:
        str: OpenAPI representation as a string
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format '{output_format}', expected one of: {', '.join(OUTPUT_FORMATS)}")
    return serialize_document(transform(graphql_schema, options, operation_kinds), output_format)


def generate_openapi_schema(graphql_schema: GraphQLSchema, **options: Any) -> dict[str, Any]:
    """Keyword form of `transform`, e.g. `generate_openapi_schema(schema, exampleValues={...})`."""
    return transform(graphql_schema, options)
