from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from graphql import GraphQLError, GraphQLField, GraphQLObjectType, GraphQLSchema

from gql2openapi import log
from gql2openapi.errors import ErrorMessages, InvalidSchemaError, UnknownOperationKindError
from gql2openapi.exporters.openapi.mocks import mock_response
from gql2openapi.exporters.openapi.type_ref import TypeRef, to_type_ref

DEFAULT_VARIABLE_VALUE = "value"


class OperationKind(Enum):
    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class ExampleEntry:
    """Example request and mock response for one root field.

    Args:
        summary: Human readable label, e.g. "Example Query"
        value: Request body example with `query`, `variables` and optionally `operationName`
        response: Mock payload shaped as `{"data": ...}`
        field_name: Name of the root field the example was built for
        operation_kind: Whether the field lives on the Query or the Mutation type
        return_type: Declared output type of the field
    """

    summary: str
    value: dict[str, Any]
    response: dict[str, Any]
    field_name: str = ""
    operation_kind: OperationKind = OperationKind.QUERY
    return_type: TypeRef | None = field(default=None, compare=False)


def parse_operation_kind(kind: OperationKind | str) -> OperationKind:
    """
    Resolve an operation kind given as an enum member or a name.

    Raises:
        UnknownOperationKindError: If the name is not query or mutation
    """
    if isinstance(kind, OperationKind):
        return kind
    try:
        return OperationKind(str(kind).strip().lower())
    except ValueError as e:
        expected = ", ".join(member.value for member in OperationKind)
        raise UnknownOperationKindError(
            ErrorMessages.UNKNOWN_OPERATION_KIND.format(kind=kind, expected=expected)
        ) from e


def get_root_type(schema: GraphQLSchema, kind: OperationKind) -> GraphQLObjectType | None:
    if kind == OperationKind.QUERY:
        return schema.query_type
    return schema.mutation_type


def get_root_fields(root_type: GraphQLObjectType) -> Mapping[str, GraphQLField]:
    """
    Read the field map of a root operation type.

    Raises:
        InvalidSchemaError: If the fields cannot be resolved or are not a mapping
    """
    try:
        fields = root_type.fields
    except (GraphQLError, TypeError) as e:
        raise InvalidSchemaError(
            ErrorMessages.ROOT_FIELDS_UNRESOLVABLE.format(type_name=root_type.name, error=e)
        ) from e

    if not isinstance(fields, Mapping):
        raise InvalidSchemaError(ErrorMessages.ROOT_FIELDS_NOT_MAPPING.format(type_name=root_type.name))

    return fields


def build_operation_document(kind: OperationKind, field_name: str, graphql_field: GraphQLField) -> str:
    """
    Compose the example GraphQL document for a root field.

    Every argument becomes a variable of the same name. Fields without
    arguments get no parenthesis groups at all, e.g. `query hello { hello }`.

    Args:
        kind: Operation keyword to use
        field_name: Name of the root field
        graphql_field: The root field

    Returns:
        str: The GraphQL document text
    """
    variable_definitions = [f"${arg_name}: {arg.type}" for arg_name, arg in graphql_field.args.items()]
    call_arguments = [f"{arg_name}: ${arg_name}" for arg_name in graphql_field.args]

    if not graphql_field.args:
        return f"{kind.value} {field_name} {{ {field_name} }}"

    return (
        f"{kind.value} {field_name}({', '.join(variable_definitions)}) "
        f"{{ {field_name}({', '.join(call_arguments)}) }}"
    )


def build_variables(graphql_field: GraphQLField, overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Map each argument to its override value, or to the default sentinel."""
    return {
        arg_name: overrides[arg_name] if arg_name in overrides else DEFAULT_VARIABLE_VALUE
        for arg_name in graphql_field.args
    }


def build_examples(
    schema: GraphQLSchema,
    overrides: Mapping[str, Any] | None = None,
    operation_kinds: Iterable[OperationKind | str] | None = None,
    include_operation_name: bool = False,
) -> dict[str, ExampleEntry]:
    """
    Build an example request and mock response for every root field.

    Query fields are processed before Mutation fields. When both root types
    declare the same field name the Mutation entry replaces the Query one.

    Args:
        schema: The GraphQL schema
        overrides: Example values keyed by argument name
        operation_kinds: Root types to walk, defaults to query and mutation
        include_operation_name: Set `operationName` on each request example

    Returns:
        dict[str, ExampleEntry]: Entries keyed by field name
    """
    overrides = overrides or {}
    requested = {parse_operation_kind(kind) for kind in (operation_kinds or list(OperationKind))}

    examples: dict[str, ExampleEntry] = {}
    for kind in OperationKind:
        if kind not in requested:
            continue

        root_type = get_root_type(schema, kind)
        if root_type is None:
            log.debug(f"Schema has no {kind.value} root type")
            continue

        root_fields = get_root_fields(root_type)
        log.info(f"Building examples for {len(root_fields)} {root_type.name} field(s)")

        for field_name, graphql_field in root_fields.items():
            if field_name in examples:
                log.debug(f"{root_type.name}.{field_name} replaces the example of the same name")

            return_type = to_type_ref(graphql_field.type)
            value: dict[str, Any] = {
                "query": build_operation_document(kind, field_name, graphql_field),
                "variables": build_variables(graphql_field, overrides),
            }
            if include_operation_name:
                value["operationName"] = field_name

            examples[field_name] = ExampleEntry(
                summary=f"Example {root_type.name}",
                value=value,
                response=mock_response(return_type, field_name),
                field_name=field_name,
                operation_kind=kind,
                return_type=return_type,
            )
            log.debug(f"Example for {field_name}: {value['query']}")

    return examples
