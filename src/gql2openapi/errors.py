class InvalidSchemaError(ValueError):
    """Raised when a schema cannot be walked to produce a complete document.

    A root operation type that is present on the schema but does not expose a
    usable field map makes every downstream path and component suspect, so
    generation stops instead of emitting a partial document.
    """


class UnknownOperationKindError(ValueError):
    """Raised when an operation kind other than query or mutation is requested."""


# Error message constants for consistent messaging and testability
class ErrorMessages:
    """Standard error messages for gql2openapi exceptions."""

    ROOT_FIELDS_UNRESOLVABLE = "Root type '{type_name}' fields cannot be resolved: {error}"
    ROOT_FIELDS_NOT_MAPPING = "Root type '{type_name}' does not expose a field map"
    UNKNOWN_OPERATION_KIND = "Unknown operation kind '{kind}', expected one of: {expected}"
