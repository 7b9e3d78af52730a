import json
from pathlib import Path
from typing import Any, cast

import yaml

from gql2openapi import log


def load_mapping_file(path: Path | None) -> dict[str, Any]:
    """
    Load a YAML or JSON file whose root is a mapping.

    Used for assembly option files and example value files. A missing path,
    an empty file or an explicit null yield an empty mapping.

    Args:
        path: Path to a `.yaml`, `.yml` or `.json` file, or None

    Returns:
        dict[str, Any]: The loaded mapping

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        json.JSONDecodeError: If a `.json` file is not valid JSON.
        TypeError: If the root of the document is not a mapping.
    """
    if path is None:
        return {}

    raw: Any
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f) if path.suffix.lower() == ".json" else yaml.safe_load(f)

    log.debug("Loaded mapping file %s", path)

    if raw is None:
        return {}

    if not isinstance(raw, dict):
        raise TypeError(f"Root of {path.name} must be a mapping, got {type(raw).__name__}")

    return cast(dict[str, Any], raw)
