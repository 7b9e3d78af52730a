"""Tests for the GraphQL output type classifier."""

import pytest
from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    GraphQLType,
)

from gql2openapi.exporters.openapi.classifier import classify, is_scalar_like
from gql2openapi.exporters.openapi.type_ref import (
    ListRef,
    NonNullRef,
    ObjectRef,
    OtherRef,
    ScalarRef,
    render_type_ref,
    to_type_ref,
)

DATE_TIME = GraphQLScalarType("DateTime")
COLOR = GraphQLEnumType("Color", {"RED": 0, "GREEN": 1})
VEHICLE = GraphQLObjectType("Vehicle", {"make": GraphQLField(GraphQLString)})


class TestClassify:
    @pytest.mark.parametrize(
        "graphql_type,expected",
        [
            (GraphQLString, "string"),
            (GraphQLInt, "integer"),
            (GraphQLFloat, "number"),
            (GraphQLBoolean, "boolean"),
            (GraphQLID, "string"),
            (DATE_TIME, "unknown"),
            (COLOR, "unknown"),
            (VEHICLE, "unknown"),
        ],
    )
    def test_named_types(self, graphql_type: GraphQLType, expected: str) -> None:
        assert classify(graphql_type) == expected

    def test_non_null_is_transparent(self) -> None:
        assert classify(GraphQLNonNull(GraphQLString)) == "string"
        assert classify(GraphQLNonNull(GraphQLInt)) == "integer"

    def test_lists_are_arrays_whatever_the_wrapping(self) -> None:
        nested = GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLString)))
        assert classify(nested) == classify(GraphQLList(GraphQLString)) == "array"
        assert classify(GraphQLList(VEHICLE)) == "array"

    def test_accepts_type_refs(self) -> None:
        assert classify(NonNullRef(ScalarRef("Float"))) == "number"
        assert classify(ObjectRef("Vehicle")) == "unknown"
        assert classify(OtherRef("Color")) == "unknown"


class TestIsScalarLike:
    def test_scalars_and_wrapped_scalars(self) -> None:
        assert is_scalar_like(GraphQLString)
        assert is_scalar_like(DATE_TIME)
        assert is_scalar_like(GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLInt))))

    def test_non_scalars(self) -> None:
        assert not is_scalar_like(VEHICLE)
        assert not is_scalar_like(COLOR)
        assert not is_scalar_like(GraphQLList(VEHICLE))
        assert not is_scalar_like(GraphQLNonNull(VEHICLE))


class TestTypeRef:
    def test_wrappers_are_preserved(self) -> None:
        type_ref = to_type_ref(GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLString))))
        assert type_ref == NonNullRef(ListRef(NonNullRef(ScalarRef("String"))))
        assert render_type_ref(type_ref) == "[String!]!"

    def test_object_fields_expand_one_level(self) -> None:
        person = GraphQLObjectType(
            "Person",
            lambda: {"name": GraphQLField(GraphQLString), "friend": GraphQLField(person)},
        )
        type_ref = to_type_ref(person)

        assert isinstance(type_ref, ObjectRef)
        assert type_ref.fields == (("name", ScalarRef("String")), ("friend", ObjectRef("Person")))
        assert type_ref.field_type("friend") == ObjectRef("Person")
        assert type_ref.field_type("missing") is None

    def test_other_named_types(self) -> None:
        assert to_type_ref(COLOR) == OtherRef("Color")
