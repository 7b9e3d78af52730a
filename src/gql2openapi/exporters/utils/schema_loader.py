from pathlib import Path

from ariadne import load_schema_from_path
from graphql import GraphQLSchema, build_schema, print_schema, validate_schema

from gql2openapi import log


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths, sorted
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob("*.graphql"):
                resolved_files.add(file)

    return sorted(resolved_files)


def build_schema_str(graphql_schema_paths: list[Path]) -> str:
    """Join the SDL of every given file into one schema string."""
    schema_str = ""
    for graphql_file in graphql_schema_paths:
        schema_str += load_schema_from_path(graphql_file) + "\n"
    return schema_str


def load_schema(graphql_schema_paths: Path | list[Path]) -> GraphQLSchema:
    """Load and build a GraphQL schema from files or folders.

    Unlike an executable schema, a schema without a Query type is accepted
    here; `check_correct_schema` reports it.
    """
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    schema = build_schema(build_schema_str(resolve_graphql_files(graphql_schema_paths)))
    log.info("Successfully built the given GraphQL schema string.")
    log.debug(f"Read schema: \n{print_schema(schema)}")
    return schema


def check_correct_schema(schema: GraphQLSchema) -> list[str]:
    """Check that the schema passes graphql-core validation and exposes operations.

    Args:
        schema: The GraphQL schema to validate

    Returns:
        list[str]: List of error messages, empty when the schema is valid
    """
    all_errors = [f"  - {spec_error.message}" for spec_error in validate_schema(schema)]

    if schema.query_type is None and schema.mutation_type is None:
        all_errors.append("  - Schema defines neither a Query nor a Mutation type.")

    return all_errors
