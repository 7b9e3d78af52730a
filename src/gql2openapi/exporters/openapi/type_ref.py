"""
Closed representation of GraphQL output types.

graphql-core exposes wrapper and named types as a class hierarchy. The
exporter converts them once into the small set of frozen variants below so
that classification and mocking only ever branch on these five shapes.
"""

from dataclasses import dataclass
from typing import Any, Union, cast

from graphql import (
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLType,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
)


@dataclass(frozen=True)
class ScalarRef:
    name: str


@dataclass(frozen=True)
class NonNullRef:
    of_type: "TypeRef"


@dataclass(frozen=True)
class ListRef:
    of_type: "TypeRef"


@dataclass(frozen=True)
class ObjectRef:
    """An object type with its fields' declared types, one level deep.

    Args:
        name: Name of the object type
        fields: (field name, declared type) pairs in schema order; empty for
            object types reached through another object's fields
    """

    name: str
    fields: tuple[tuple[str, "TypeRef"], ...] = ()

    def field_type(self, field_name: str) -> "TypeRef | None":
        for name, type_ref in self.fields:
            if name == field_name:
                return type_ref
        return None


@dataclass(frozen=True)
class OtherRef:
    """Enums, interfaces, unions, input objects and anything unrecognized."""

    name: str


TypeRef = Union[ScalarRef, NonNullRef, ListRef, ObjectRef, OtherRef]
TYPE_REF_CLASSES = (ScalarRef, NonNullRef, ListRef, ObjectRef, OtherRef)


def to_type_ref(graphql_type: GraphQLType, expand_objects: bool = True) -> TypeRef:
    """
    Adapt a graphql-core output type into a TypeRef.

    Args:
        graphql_type: The (possibly wrapped) GraphQL type
        expand_objects: Whether an object type gets its fields listed. Fields
            of an expanded object are adapted with expansion turned off.

    Returns:
        TypeRef: The adapted type
    """
    if is_non_null_type(graphql_type):
        inner = cast(GraphQLNonNull[Any], graphql_type).of_type
        return NonNullRef(to_type_ref(inner, expand_objects))

    if is_list_type(graphql_type):
        inner = cast(GraphQLList[Any], graphql_type).of_type
        return ListRef(to_type_ref(inner, expand_objects))

    if is_scalar_type(graphql_type):
        return ScalarRef(cast(GraphQLScalarType, graphql_type).name)

    if is_object_type(graphql_type):
        object_type = cast(GraphQLObjectType, graphql_type)
        if not expand_objects:
            return ObjectRef(object_type.name)
        fields = tuple(
            (field_name, to_type_ref(field.type, expand_objects=False))
            for field_name, field in object_type.fields.items()
        )
        return ObjectRef(object_type.name, fields)

    return OtherRef(str(getattr(graphql_type, "name", graphql_type)))


def ensure_type_ref(type_or_ref: "TypeRef | GraphQLType") -> TypeRef:
    if isinstance(type_or_ref, TYPE_REF_CLASSES):
        return type_or_ref
    return to_type_ref(cast(GraphQLType, type_or_ref))


def render_type_ref(type_ref: TypeRef) -> str:
    """Render a TypeRef in GraphQL type syntax, e.g. `[String!]!`."""
    if isinstance(type_ref, NonNullRef):
        return f"{render_type_ref(type_ref.of_type)}!"
    if isinstance(type_ref, ListRef):
        return f"[{render_type_ref(type_ref.of_type)}]"
    return type_ref.name
