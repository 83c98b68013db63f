"""Loading of package ASTs serialized by the schema compiler front-end."""

import json
from typing import Any

from .errors import InputError
from .types import GenerationUnit


def _load_unit(data: Any) -> GenerationUnit:
    if not isinstance(data, dict):
        raise InputError(f"expected a generation unit object, got {type(data).__name__}")
    try:
        return GenerationUnit.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise InputError(f"invalid generation unit: {e}") from e


def load(text: str) -> list[GenerationUnit]:
    """Load generation units from a JSON document.

    The document is either a single unit or a list of units.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"invalid JSON at line {e.lineno}: {e.msg}") from e

    if isinstance(data, list):
        return [_load_unit(item) for item in data]
    return [_load_unit(data)]


def load_file(path: str) -> list[GenerationUnit]:
    """Load generation units from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return load(f.read())
