from __future__ import annotations

import pytest

from yamlite import DEFAULT_OPTIONS
from yamlite import DumpOptions
from yamlite import YamlConfigError


def test_default_indent_width() -> None:
    assert DEFAULT_OPTIONS.indent_width == 2
    assert DumpOptions() == DEFAULT_OPTIONS


def test_custom_indent_width() -> None:
    assert DumpOptions.from_mapping({"indent_width": 4}).indent_width == 4


@pytest.mark.parametrize("width", [0, -2])
def test_invalid_indent_width(width: int) -> None:
    with pytest.raises(YamlConfigError, match="indent_width"):
        DumpOptions(indent_width=width)


@pytest.mark.parametrize("width", [0, True, 2.5, "2", None])
def test_invalid_indent_width_from_mapping(width: object) -> None:
    with pytest.raises(YamlConfigError, match="indent_width"):
        DumpOptions.from_mapping({"indent_width": width})


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(YamlConfigError, match="unknown dump option"):
        DumpOptions.from_mapping({"indent": 4})


def test_config_error_is_value_error() -> None:
    assert issubclass(YamlConfigError, ValueError)
