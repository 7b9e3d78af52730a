from graphql import GraphQLNamedType, GraphQLSchema, is_object_type

from gql2openapi.exporters.utils.graphql_type import (
    is_builtin_scalar_type,
    is_introspection_type,
    is_operation_root_type,
)


def get_all_named_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    """
    Extracts all named types from the provided GraphQL schema, skipping introspection types.

    Args:
        schema (GraphQLSchema): The GraphQL schema to extract named types from.
    Returns:
        list[GraphQLNamedType]: A list of all named types in the schema.
    """
    return [type_ for type_ in schema.type_map.values() if not is_introspection_type(type_.name)]


def count_named_types(schema: GraphQLSchema) -> dict[str, int]:
    """Count object types, built-in scalars and every other kind of named type.

    The Query and Mutation root types are not counted.
    """
    counts = {"object": 0, "builtin_scalar": 0, "other": 0}
    for named_type in get_all_named_types(schema):
        if is_operation_root_type(named_type.name):
            continue
        if is_object_type(named_type):
            counts["object"] += 1
        elif is_builtin_scalar_type(named_type.name):
            counts["builtin_scalar"] += 1
        else:
            counts["other"] += 1
    return counts
