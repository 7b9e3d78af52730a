from gql2openapi.logger import get_logger

__author__ = """gql2openapi contributors"""
__version__ = "0.3.0"

log = get_logger("gql2openapi")
