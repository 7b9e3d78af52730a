from graphql import GraphQLType

from gql2openapi.exporters.openapi.type_ref import (
    ListRef,
    NonNullRef,
    ScalarRef,
    TypeRef,
    ensure_type_ref,
)

GRAPHQL_SCALAR_TO_OPENAPI = {
    "String": "string",
    "Int": "integer",
    "Float": "number",
    "Boolean": "boolean",
    "ID": "string",
}

UNKNOWN_TYPE = "unknown"
ARRAY_TYPE = "array"


def is_scalar_like(graphql_type: TypeRef | GraphQLType) -> bool:
    """
    Check whether a type is a scalar once NonNull and List wrappers are removed.

    Args:
        graphql_type: A TypeRef or a graphql-core output type

    Returns:
        bool: True for scalars and any wrapping of a scalar
    """
    type_ref = ensure_type_ref(graphql_type)
    if isinstance(type_ref, ScalarRef):
        return True
    if isinstance(type_ref, (NonNullRef, ListRef)):
        return is_scalar_like(type_ref.of_type)
    return False


def classify(graphql_type: TypeRef | GraphQLType) -> str:
    """
    Map a GraphQL output type to an OpenAPI primitive type name.

    Lists classify as `array` without an item schema. Objects, enums,
    interfaces, unions and custom scalars classify as `unknown`.

    Args:
        graphql_type: A TypeRef or a graphql-core output type

    Returns:
        str: One of string, integer, number, boolean, array or unknown
    """
    type_ref = ensure_type_ref(graphql_type)
    if isinstance(type_ref, ScalarRef):
        return GRAPHQL_SCALAR_TO_OPENAPI.get(type_ref.name, UNKNOWN_TYPE)
    if isinstance(type_ref, NonNullRef):
        return classify(type_ref.of_type)
    if isinstance(type_ref, ListRef):
        return ARRAY_TYPE
    return UNKNOWN_TYPE
