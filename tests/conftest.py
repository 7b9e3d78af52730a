from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from faker import Faker
from graphql import GraphQLSchema, build_schema
from hypothesis import strategies as st
from hypothesis.strategies import composite

SCALAR_TYPES = ["String", "Int", "Float", "Boolean", "ID"]

HELLO_SCHEMA_STR = """
    type Query {
        hello: String
    }

    type Mutation {
        updateMessage(message: String!): String
    }
"""

VEHICLE_SCHEMA_STR = """
    enum Status { ON OFF }

    type Person {
        name: String
        vehicle: Vehicle
    }

    type Vehicle {
        id: ID!
        make: String
        year: Int
        weight: Float
        electric: Boolean
        owner: Person
        aliases: [String]
    }

    type Query {
        vehicle(id: ID!): Vehicle
        requiredVehicle(id: ID!, make: String): Vehicle!
        vehicles: [Vehicle]
        count: Int!
        tags: [String]
        status: Status
    }
"""


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    HELLO: Path = TESTS_DATA_DIR / "hello.graphql"
    VEHICLE_DIR: Path = TESTS_DATA_DIR / "vehicle"
    MUTATION_ONLY: Path = TESTS_DATA_DIR / "mutation_only.graphql"
    CONFIG: Path = TESTS_DATA_DIR / "openapi_config.yaml"
    EXAMPLE_VALUES: Path = TESTS_DATA_DIR / "example_values.json"


@pytest.fixture
def hello_schema() -> GraphQLSchema:
    return build_schema(HELLO_SCHEMA_STR)


@pytest.fixture
def vehicle_schema() -> GraphQLSchema:
    return build_schema(VEHICLE_SCHEMA_STR)


@dataclass
class MockRootField:
    name: str
    return_type: str
    args: list[tuple[str, str]] = field(default_factory=list)

    def to_field_str(self) -> str:
        if not self.args:
            return f"{self.name}: {self.return_type}"
        args_str = ", ".join(f"{arg_name}: {arg_type}" for arg_name, arg_type in self.args)
        return f"{self.name}({args_str}): {self.return_type}"


@dataclass
class MockSchemaData:
    query_fields: list[MockRootField]
    mutation_fields: list[MockRootField]

    @property
    def field_names(self) -> set[str]:
        return {f.name for f in self.query_fields} | {f.name for f in self.mutation_fields}

    @property
    def schema_str(self) -> str:
        schema_str = f"type Query {{ {' '.join(f.to_field_str() for f in self.query_fields)} }}"
        if self.mutation_fields:
            schema_str += f"\ntype Mutation {{ {' '.join(f.to_field_str() for f in self.mutation_fields)} }}"
        return schema_str


@composite
def mock_root_field_strategy(draw: Callable[[st.SearchStrategy[Any]], Any], faker: Faker) -> MockRootField:
    """Generate a root field with a random scalar return type and up to three arguments
    e.g.
    vehicle(speed: Int!, label: String): Float
    """
    name = faker.unique.word().lower()
    return_type = draw(st.sampled_from(SCALAR_TYPES))
    num_args = draw(st.integers(min_value=0, max_value=3))
    args = []
    for _ in range(num_args):
        arg_type = draw(st.sampled_from(SCALAR_TYPES))
        if draw(st.booleans()):
            arg_type += "!"
        args.append((faker.unique.word().lower(), arg_type))
    return MockRootField(name, return_type, args)


@composite
def mock_graphql_schema_strategy(
    draw: Callable[[st.SearchStrategy[Any]], Any],
) -> tuple[GraphQLSchema, MockSchemaData]:
    """Generate a random schema with a Query type and an optional Mutation type."""
    faker = Faker()

    num_query_fields = draw(st.integers(min_value=1, max_value=4))
    num_mutation_fields = draw(st.integers(min_value=0, max_value=3))
    data = MockSchemaData(
        query_fields=[draw(mock_root_field_strategy(faker)) for _ in range(num_query_fields)],
        mutation_fields=[draw(mock_root_field_strategy(faker)) for _ in range(num_mutation_fields)],
    )

    return build_schema(data.schema_str), data
