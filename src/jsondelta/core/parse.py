"""Input reading and JSON parsing ahead of the structural diff"""

import json
from pathlib import Path
from typing import Any


class InputParseError(ValueError):
    """Raised when an input cannot be read or is not valid JSON."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def read_input(path: Path) -> str:
    """Return the UTF-8 text of path, raising InputParseError if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputParseError(f"Cannot read {path}: {e}") from e


def parse_json(text: str, source: str = "<input>") -> Any:
    """Parse JSON text into Python values; NaN and Infinity are rejected."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InputParseError(f"Invalid JSON in {source}: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except ValueError as e:
        raise InputParseError(f"Invalid JSON in {source}: {e}") from e


def load_json_file(path: Path) -> Any:
    """Read and parse a JSON file."""
    return parse_json(read_input(path), source=str(path))
