"""Deterministic encoder for the yamlite YAML subset."""

from __future__ import annotations

import re
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import Final

from yamlite.errors import YamlDumpError
from yamlite.options import DumpOptions
from yamlite.options import resolve_options

_NUMERIC_LOOKING: Final = re.compile(r"[0-9.]+")
_RESERVED_WORDS: Final = frozenset(
    {"", "~", "true", "false", "yes", "no", "on", "off", "null"},
)
_SPECIAL_CHARS: Final = frozenset(":#[]{}")
_ESCAPES: Final = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)
# Block bodies sit this many columns right of their key or dash.
_BLOCK_OFFSET: Final = 2


def dumps(
    data: Any,
    /,
    options: DumpOptions | Mapping[str, Any] | None = None,
) -> str:
    """Serialize a value tree into yamlite text.

    Mapping keys are emitted in ascending order of their string form.
    Scalars encode to their bare text; containers encode to newline-joined
    lines without a leading or trailing newline.

    Returns:
        The serialized text.

    Raises:
        YamlDumpError: If the tree holds a value of an unsupported type.
    """
    dumper = _Dumper(resolve_options(options))
    try:
        dumper.write_value(data, 0)
    except TypeError as exc:
        raise YamlDumpError(str(exc)) from exc
    return dumper.render()


def quote(value: str) -> str:
    """Return *value* as it appears in a scalar or key position."""
    if not _needs_quotes(value):
        return value
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


class _Dumper:
    def __init__(self, options: DumpOptions) -> None:
        super().__init__()
        self._width = options.indent_width
        self._parts: list[str] = []
        self._tasks: list[tuple[str, tuple[Any, ...]]] = []

    def write_value(self, value: Any, indent: int) -> None:
        self._tasks.append(("value", (indent, value)))
        while self._tasks:
            task, payload = self._tasks.pop()
            if task == "value":
                self._process_value(*payload)
            elif task == "seq":
                self._process_seq(*payload)
            elif task == "map":
                self._process_map(*payload)
            else:  # pragma: no cover - defensive
                msg = f"unknown dump task: {task}"
                raise YamlDumpError(msg)

    def render(self) -> str:
        return "".join(self._parts).removesuffix("\n")

    # Writers ----------------------------------------------------------------
    def _process_value(self, indent: int, value: Any) -> None:
        if _is_nested(value):
            self._push_container(value, indent)
            return
        self._write_inline(value, indent)

    def _process_seq(
        self,
        indent: int,
        seq: Sequence[Any],
        index: int,
    ) -> None:
        if index >= len(seq):
            return
        item = seq[index]
        prefix = " " * indent + "-"
        self._tasks.append(("seq", (indent, seq, index + 1)))
        if _is_nested(item):
            self._parts.append(prefix + "\n")
            self._push_container(item, indent + self._width)
            return
        self._parts.append(prefix + " ")
        self._write_inline(item, indent)

    def _process_map(
        self,
        indent: int,
        items: Sequence[tuple[Any, Any]],
        index: int,
    ) -> None:
        if index >= len(items):
            return
        key, value = items[index]
        prefix = " " * indent + quote(str(key)) + ":"
        self._tasks.append(("map", (indent, items, index + 1)))
        if _is_nested(value):
            self._parts.append(prefix + "\n")
            self._push_container(value, indent + self._width)
            return
        self._parts.append(prefix + " ")
        self._write_inline(value, indent)

    def _push_container(self, value: Any, indent: int) -> None:
        if isinstance(value, Mapping):
            items = sorted(value.items(), key=lambda item: str(item[0]))
            self._tasks.append(("map", (indent, items, 0)))
            return
        self._tasks.append(("seq", (indent, value, 0)))

    def _write_inline(self, value: Any, indent: int) -> None:
        if isinstance(value, (list, tuple)):
            self._parts.append("[]\n")
            return
        if isinstance(value, Mapping):
            self._parts.append("{}\n")
            return
        if isinstance(value, str) and _is_block(value):
            self._write_block(value, indent)
            return
        self._parts.append(_format_scalar(value) + "\n")

    def _write_block(self, value: str, indent: int) -> None:
        pad = " " * (indent + _BLOCK_OFFSET)
        self._parts.append("|\n")
        for line in value.split("\n"):
            self._parts.append(pad + line + "\n")


def _is_nested(value: object) -> bool:
    return isinstance(value, (list, tuple, Mapping)) and len(value) > 0


def _is_block(value: str) -> bool:
    return "\n" in value and not any(c in _SPECIAL_CHARS for c in value)


def _needs_quotes(value: str) -> bool:
    return bool(
        _NUMERIC_LOOKING.fullmatch(value)
        or value in _RESERVED_WORDS
        or any(c in _SPECIAL_CHARS for c in value)
        or value != value.strip()
        or "\n" in value,
    )


def _format_scalar(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return quote(value)
    msg = f"unsupported type for yamlite: {type(value).__name__}"
    raise TypeError(msg)
