"""Tests for dotted path access."""

from __future__ import annotations

import pytest

from yamlite import get_path
from yamlite import set_path

_MISSING = object()


def test_get_nested_values() -> None:
    data = {"database": {"host": "localhost", "port": 5432}}
    assert get_path(data, "database.host") == "localhost"
    assert get_path(data, "database.port") == 5432


def test_get_missing_path_is_absent() -> None:
    assert get_path({"name": "x"}, "database.host") is None
    assert get_path({"name": "x"}, "database.host", _MISSING) is _MISSING


def test_get_distinguishes_null_from_absent() -> None:
    data = {"a": None}
    assert get_path(data, "a", _MISSING) is None
    assert get_path(data, "b", _MISSING) is _MISSING


def test_get_stops_at_non_mapping_nodes() -> None:
    data = {"a": "scalar", "items": [{"b": 1}]}
    assert get_path(data, "a.b", _MISSING) is _MISSING
    assert get_path(data, "items.b", _MISSING) is _MISSING
    assert get_path("text", "a", _MISSING) is _MISSING


def test_get_ignores_empty_segments() -> None:
    data = {"a": {"b": 1}}
    assert get_path(data, "a..b") == 1
    assert get_path(data, "") is data


def test_set_creates_intermediate_mappings() -> None:
    data: dict[str, object] = {}
    result = set_path(data, "a.b.c", 5)
    assert result is data
    assert data == {"a": {"b": {"c": 5}}}


def test_set_keeps_siblings() -> None:
    data = {"database": {"host": "localhost"}}
    set_path(data, "database.port", 5432)
    assert data == {"database": {"host": "localhost", "port": 5432}}


def test_set_replaces_scalar_intermediate() -> None:
    data = {"a": "scalar", "keep": 1}
    set_path(data, "a.b", 1)
    assert data == {"a": {"b": 1}, "keep": 1}


def test_set_replaces_sequence_intermediate() -> None:
    data = {"a": [1, 2]}
    set_path(data, "a.b.c", True)
    assert data == {"a": {"b": {"c": True}}}


def test_set_overwrites_leaf() -> None:
    data = {"a": {"b": {"c": 1}}}
    set_path(data, "a.b", None)
    assert data == {"a": {"b": None}}


def test_set_with_empty_path_is_noop() -> None:
    data = {"a": 1}
    assert set_path(data, "..", 2) == {"a": 1}


def test_set_requires_mapping_root() -> None:
    with pytest.raises(TypeError, match="mapping root"):
        set_path(["a"], "a.b", 1)
