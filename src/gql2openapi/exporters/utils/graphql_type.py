def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")


def is_operation_root_type(type_name: str) -> bool:
    return type_name in {
        "Query",
        "Mutation",
    }


def is_builtin_scalar_type(type_name: str) -> bool:
    return type_name in {
        "ID",
        "String",
        "Int",
        "Float",
        "Boolean",
    }
