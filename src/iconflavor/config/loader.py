"""TOML flavor file loading with depth-limited structural merge."""

import tomllib
from pathlib import Path
from typing import Any

TOMLDecodeError = tomllib.TOMLDecodeError


def _get_name(value: Any) -> str | None:
    if isinstance(value, dict):
        name = value.get("name")
        if isinstance(name, str):
            return name
    return None


def merge_toml_values(left: Any, right: Any, merge_depth: int) -> Any:
    """Merge ``right`` onto ``left``, returning a new value.

    Tables present on both sides are merged key by key, values from
    ``right`` winning. Arrays are merged as collections of entries keyed by
    their ``name`` field: a right entry replaces the matching left entry in
    place (merged recursively), everything else is appended in order.

    ``merge_depth`` is the number of nesting levels that get merge
    semantics. Once it reaches zero the right value replaces the left one
    wholesale, so nested arrays such as argument lists are overridden
    rather than spliced. Any other pairing of types also yields ``right``.
    """
    if isinstance(left, dict) and isinstance(right, dict):
        if merge_depth == 0:
            return right
        result = dict(left)
        for key, rvalue in right.items():
            if key in result:
                result[key] = merge_toml_values(result[key], rvalue, merge_depth - 1)
            else:
                result[key] = rvalue
        return result

    if isinstance(left, list) and isinstance(right, list):
        if merge_depth == 0:
            return right
        result_items = list(left)
        for rvalue in right:
            rname = _get_name(rvalue)
            pos = next(
                (i for i, lvalue in enumerate(result_items) if rname is not None and _get_name(lvalue) == rname),
                None,
            )
            if pos is None:
                result_items.append(rvalue)
            else:
                result_items[pos] = merge_toml_values(result_items[pos], rvalue, merge_depth - 1)
        return result_items

    return right


def parse_toml(data: bytes) -> dict[str, Any]:
    """Parse TOML bytes. Raises ``tomllib.TOMLDecodeError`` or ``UnicodeDecodeError``."""
    return tomllib.loads(data.decode("utf-8"))


def toml_names_in_dir(path: Path) -> list[str]:
    """Names of the TOML documents within a directory, empty if it cannot be read."""
    try:
        entries = list(path.iterdir())
    except OSError:
        return []
    return [entry.stem for entry in entries if entry.suffix == ".toml" and entry.stem and entry.is_file()]
