"""Fixed example values used to populate response payloads."""

from typing import Any

from graphql import GraphQLType

from gql2openapi.exporters.openapi.classifier import is_scalar_like
from gql2openapi.exporters.openapi.type_ref import (
    ObjectRef,
    TypeRef,
    ensure_type_ref,
    render_type_ref,
)

# Keyed by the rendered type, so wrapped scalars such as `String!` have no entry.
SCALAR_MOCKS: dict[str, Any] = {
    "String": "Sample string",
    "Int": 123,
    "Float": 123.45,
    "Boolean": True,
}


def mock_scalar(graphql_type: TypeRef | GraphQLType) -> Any:
    """
    Return the example value for a scalar-like type.

    Args:
        graphql_type: A TypeRef or a graphql-core output type

    Returns:
        The mock literal, or None for unlisted scalars and non-scalar types
    """
    type_ref = ensure_type_ref(graphql_type)
    if not is_scalar_like(type_ref):
        return None
    return SCALAR_MOCKS.get(render_type_ref(type_ref))


def mock_response(return_type: TypeRef | GraphQLType, field_name: str) -> dict[str, Any]:
    """
    Build the mock response payload for a root field.

    Object return types are mocked one level deep: each of the object's own
    fields gets `mock_scalar` of its declared type, so nested objects are None.

    Args:
        return_type: Declared output type of the field
        field_name: Name of the root field

    Returns:
        dict: `{"data": {...}}`
    """
    type_ref = ensure_type_ref(return_type)

    if is_scalar_like(type_ref):
        return {"data": {field_name: mock_scalar(type_ref)}}

    if isinstance(type_ref, ObjectRef):
        return {"data": {name: mock_scalar(field_type) for name, field_type in type_ref.fields}}

    return {"data": {field_name: {}}}
