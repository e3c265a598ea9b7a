"""Dump configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import fields
from typing import Any

from yamlite.errors import YamlConfigError


@dataclass(frozen=True, slots=True)
class DumpOptions:
    """Options accepted by :func:`yamlite.dumps`.

    :param indent_width: Spaces added for each nesting level.
    :type indent_width: int
    """

    indent_width: int = 2

    def __post_init__(self) -> None:
        _check_indent_width(self.indent_width)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> DumpOptions:
        """Build options from a plain mapping of option names.

        Returns:
            A validated options instance.

        Raises:
            YamlConfigError: If an option name is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            msg = f"unknown dump option(s): {', '.join(unknown)}"
            raise YamlConfigError(msg)
        if "indent_width" in values:
            _check_indent_width(values["indent_width"])
        return cls(**values)


def _check_indent_width(width: object) -> None:
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        msg = f"indent_width must be a positive integer, got {width!r}"
        raise YamlConfigError(msg)


DEFAULT_OPTIONS: DumpOptions = DumpOptions()


def resolve_options(options: DumpOptions | Mapping[str, Any] | None) -> DumpOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, DumpOptions):
        return options
    return DumpOptions.from_mapping(options)
