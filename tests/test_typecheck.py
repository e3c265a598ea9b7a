"""Runtime type checking when the typecheck extra is installed."""

from __future__ import annotations

import pathlib

import pytest

import yamlite

roar = pytest.importorskip("beartype.roar")


def test_decode_and_encode_pass_runtime_checks() -> None:
    data = yamlite.loads("a:\n  - 1\n  - b: two\n")
    assert data == {"a": [1, {"b": "two"}]}
    assert yamlite.dumps(data) == "a:\n  - 1\n  -\n    b: two"
    assert yamlite.dumps({"t": ("x",), 1: "one"}) == '"1": one\nt:\n  - x'


def test_write_still_reports_unsupported_values(tmp_path: pathlib.Path) -> None:
    ok, err = yamlite.write(tmp_path / "bad.yaml", {"a": object()})
    assert ok is False
    assert err is not None
    assert "unsupported type" in err


def test_wrong_argument_type_is_rejected() -> None:
    with pytest.raises(roar.BeartypeCallHintParamViolation):
        yamlite.get_path({"a": 1}, 5)  # type: ignore[arg-type]
