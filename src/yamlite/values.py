"""Shared value tree type."""

from __future__ import annotations

type YamlValue = (
    None | bool | int | float | str | list[YamlValue] | dict[str, YamlValue]
)
