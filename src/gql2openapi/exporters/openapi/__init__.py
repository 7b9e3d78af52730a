"""OpenAPI exporter module for gql2openapi."""

from .assembler import OpenAPIAssembler, assemble
from .classifier import classify, is_scalar_like
from .examples import ExampleEntry, OperationKind, build_examples
from .mocks import mock_response, mock_scalar
from .models import AssemblyOptions, RouteConfig, RouteTag
from .openapi import generate_openapi_schema, transform, translate_to_openapi

__all__ = [
    "AssemblyOptions",
    "ExampleEntry",
    "OpenAPIAssembler",
    "OperationKind",
    "RouteConfig",
    "RouteTag",
    "assemble",
    "build_examples",
    "classify",
    "generate_openapi_schema",
    "is_scalar_like",
    "mock_response",
    "mock_scalar",
    "transform",
    "translate_to_openapi",
]
