import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError, GraphQLSchema
from rich.markup import escape
from rich.traceback import install

from gql2openapi import __version__, log
from gql2openapi.exporters.openapi import AssemblyOptions, OperationKind, build_examples, transform
from gql2openapi.exporters.openapi.openapi import serialize_document
from gql2openapi.exporters.utils.extraction import count_named_types
from gql2openapi.exporters.utils.options_file import load_mapping_file
from gql2openapi.exporters.utils.schema_loader import check_correct_schema, load_schema, resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(set(value)))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    required=True,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    help="Output file",
)


operation_option = click.option(
    "--operation",
    "-p",
    "operations",
    type=click.Choice([kind.value for kind in OperationKind], case_sensitive=False),
    multiple=True,
    help="Root operation type to expose. Can be specified multiple times. Defaults to query and mutation.",
)


def assert_correct_schema(schema: GraphQLSchema) -> None:
    schema_errors = check_correct_schema(schema)
    if schema_errors:
        log.error("Schema validation failed:")
        for error in schema_errors:
            log.error(error)
        log.error(f"Found {len(schema_errors)} validation error(s). Please fix the schema before exporting.")
        sys.exit(1)


def infer_output_format(output: Path) -> str:
    return "yaml" if output.suffix.lower() in {".yaml", ".yml"} else "json"


@click.group(context_settings={"auto_envvar_prefix": "gql2openapi"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.group()
def export() -> None:
    """Export a GraphQL schema to other API description formats."""
    pass


@click.group()
def stats() -> None:
    """Stats commands."""
    pass


# Export -> OpenAPI
# ----------
@export.command
@schema_option
@output_option
@operation_option
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or JSON file with assembly options (serverUrl, title, exampleValues, routeMap, ...)",
)
@click.option(
    "--example-values",
    "-e",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or JSON file mapping argument names to example values",
)
@click.option("--server-url", type=str, help="Server URL of the GraphQL endpoint [default: /graphql]")
@click.option("--title", type=str, help="Title of the API [default: GraphQL API]")
@click.option("--openapi-version", type=str, help="OpenAPI version of the document [default: 3.0.3]")
@click.option("--api-version", type=str, help="Version of the API [default: 1.0.0]")
@click.option("--summary", type=str, help="Short summary of the API")
@click.option("--description", type=str, help="Description of the API")
@click.option(
    "--operation-name",
    is_flag=True,
    default=False,
    help="Include operationName in the request examples",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    help="Output format, inferred from the output file suffix when omitted",
)
def openapi(
    schemas: list[Path],
    output: Path,
    operations: tuple[str, ...],
    config: Path | None,
    example_values: Path | None,
    server_url: str | None,
    title: str | None,
    openapi_version: str | None,
    api_version: str | None,
    summary: str | None,
    description: str | None,
    operation_name: bool,
    output_format: str | None,
) -> None:
    """Generate an OpenAPI document with one POST path per Query and Mutation field."""
    try:
        graphql_schema = load_schema(schemas)
        assert_correct_schema(graphql_schema)

        options = AssemblyOptions.from_mapping(load_mapping_file(config))

        overrides: dict[str, Any] = {
            "server_url": server_url,
            "title": title,
            "openapi": openapi_version,
            "version": api_version,
            "summary": summary,
            "description": description,
            "include_operation_name": operation_name or None,
        }
        update = {key: value for key, value in overrides.items() if value is not None}
        if example_values:
            update["example_values"] = {**options.example_values, **load_mapping_file(example_values)}
        if update:
            options = options.model_copy(update=update)

        document = transform(graphql_schema, options, operations or None)
        result = serialize_document(document, (output_format or infer_output_format(output)).lower())

        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(result)
        log.success(f"Successfully exported OpenAPI document to {output}")
        log.hint(f"{len(document['paths'])} path(s), serve it verbatim at /openapi.json or load it into Swagger UI")

    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except (GraphQLError, GraphQLFileSyntaxError) as e:
        log.error(f"Invalid schema: {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        log.error(f"Invalid YAML: {e}")
        sys.exit(1)
    except (TypeError, ValueError) as e:
        log.error(f"Invalid input: {e}")
        sys.exit(1)


# Stats -> GraphQL operations
# ----------
@stats.command(name="graphql")
@schema_option
@operation_option
def stats_graphql(schemas: list[Path], operations: tuple[str, ...]) -> None:
    """List the operations an OpenAPI export of the schema would expose."""
    graphql_schema = load_schema(schemas)
    examples = build_examples(graphql_schema, operation_kinds=operations or None)

    log.rule("GraphQL Schema Operations")
    for kind in OperationKind:
        names = [name for name, entry in examples.items() if entry.operation_kind == kind]
        log.key_value(kind.value, len(names))
        for name in names:
            log.list_item(escape(f"/{name}: {examples[name].value['query']}"))

    log.rule("GraphQL Schema Type Counts")
    log.print_dict(count_named_types(graphql_schema))


cli.add_command(export)
cli.add_command(stats)

if __name__ == "__main__":
    cli()
