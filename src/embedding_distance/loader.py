"""
Load the input strings to compare.
"""

import json
from pathlib import Path

from .errors import InputFormatError


def parse_strings(value: str, delimiter: str = ",") -> list[str]:
    """Split a delimited command-line argument into strings."""
    return [item for item in value.split(delimiter) if item]


def load_strings(source: str | Path) -> list[str]:
    """
    Load input strings from a JSON file.

    The file must contain a single array of strings, e.g.
    ``["i love bananas", "good morning!"]``.

    Args:
        source: Path to the JSON file

    Returns:
        The strings, in file order
    """
    path = Path(source)

    if not path.exists():
        raise InputFormatError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise InputFormatError(f"Expected a JSON array of strings in {path}, got {type(data).__name__}")

    for i, item in enumerate(data):
        if not isinstance(item, str):
            raise InputFormatError(f"Item {i} in {path} is not a string: {item!r}")

    return data
