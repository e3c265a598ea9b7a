"""Dot-separated path access into decoded trees."""

from __future__ import annotations

from typing import Any

from loguru import logger

from yamlite.values import YamlValue


def split_path(path: str) -> list[str]:
    """Split *path* on dots, dropping empty segments."""
    return [segment for segment in path.split(".") if segment]


def get_path(data: YamlValue, path: str, default: Any = None) -> Any:
    """Resolve a dotted path such as ``"database.host"``.

    Only mappings are walked. The first missing key or non-mapping node ends
    the walk and *default* is returned; this function never raises.
    """
    current: Any = data
    for segment in split_path(path):
        if not isinstance(current, dict) or segment not in current:
            return default
        current = current[segment]
    return current


def set_path(data: YamlValue, path: str, value: YamlValue) -> YamlValue:
    """Assign *value* at a dotted path, creating mappings along the way.

    Intermediate segments holding anything other than a mapping are
    overwritten with a new empty mapping. *data* is modified in place and
    returned.

    Returns:
        The same *data* object.

    Raises:
        TypeError: If *data* is not a mapping.
    """
    if not isinstance(data, dict):
        msg = f"set_path needs a mapping root, got {type(data).__name__}"
        raise TypeError(msg)
    segments = split_path(path)
    if not segments:
        logger.debug("set_path called with empty path {!r}; nothing assigned", path)
        return data
    current = data
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value
    return data
