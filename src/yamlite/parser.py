"""Lenient line-oriented decoder for the yamlite YAML subset.

The decoder never rejects input: lines it cannot place are skipped and the
document decodes to whatever could be recovered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from loguru import logger

from yamlite.values import YamlValue

_LINE_BREAK: Final = re.compile(r"\r\n|\r|\n")
_INT_LITERAL: Final = re.compile(r"[-+]?\d+")
_HEX_LITERAL: Final = re.compile(r"[-+]?0[xX][0-9a-fA-F]+")
_FLOAT_LITERAL: Final = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?")

_NULL_TOKENS: Final = frozenset({"null", "~", ""})
_TRUE_TOKENS: Final = frozenset({"true", "yes", "on"})
_FALSE_TOKENS: Final = frozenset({"false", "no", "off"})
_BLOCK_INDICATORS: Final = frozenset({"|", ">"})


@dataclass(slots=True)
class Line:
    indent: int
    content: str
    raw: str
    line_no: int


@dataclass(slots=True)
class _ParentRef:
    sequence: list[YamlValue] | None = None
    index: int | None = None
    mapping: dict[str, YamlValue] | None = None
    key: str | None = None

    def replace(self, value: YamlValue) -> None:
        if self.sequence is not None and self.index is not None:
            self.sequence[self.index] = value
            return
        if self.mapping is not None and self.key is not None:
            self.mapping[self.key] = value


@dataclass(slots=True)
class _Context:
    indent: int
    container: list[YamlValue] | dict[str, YamlValue]
    parent: _ParentRef | None = None
    # Opened by a key whose items sit at the key's own indentation.
    compact: bool = False


def loads(text: str, /) -> YamlValue:
    """Parse yamlite text into nested dict/list/scalar structures.

    Empty input yields an empty mapping. Malformed lines are ignored.

    Returns:
        The decoded value tree.
    """
    if not text:
        return {}
    return _Parser(text).parse()


def parse(text: str, /) -> tuple[YamlValue, str | None]:
    """Decode *text*, returning the tree paired with an error slot.

    Decoding has no failure path, so the error slot is always ``None``; the
    pair mirrors :func:`yamlite.read`.

    Returns:
        A ``(value, None)`` tuple.
    """
    return loads(text), None


class _Parser:
    def __init__(self, text: str) -> None:
        super().__init__()
        self.lines: list[Line] = self._preprocess(text)
        self.index = 0
        self.root: list[YamlValue] | dict[str, YamlValue] = {}

    # Public -----------------------------------------------------------------
    def parse(self) -> YamlValue:
        stack: list[_Context] = [_Context(indent=-1, container=self.root)]
        while self.index < len(self.lines):
            line = self.lines[self.index]
            self.index += 1
            if _is_skippable(line):
                continue
            self._unwind(stack, line)
            context = stack[-1]
            if _is_seq_item(line.content):
                self._process_seq_line(context, stack, line)
            elif ":" in line.content:
                self._process_map_line(context, stack, line)
            else:
                logger.debug(
                    "ignoring line {}: no key or sequence marker",
                    line.line_no,
                )
        return self.root

    # Line handlers -----------------------------------------------------------
    @staticmethod
    def _unwind(stack: list[_Context], line: Line) -> None:
        is_item = _is_seq_item(line.content)
        while len(stack) > 1:
            top = stack[-1]
            if top.indent < line.indent:
                break
            if top.compact and top.indent == line.indent and is_item:
                break
            stack.pop()

    def _process_seq_line(
        self,
        context: _Context,
        stack: list[_Context],
        line: Line,
    ) -> None:
        items = self._as_sequence(context, line)
        if items is None:
            return
        token = line.content[1:].strip()
        if token in _BLOCK_INDICATORS:
            items.append(self._parse_block_scalar(line.indent))
            return
        if not token:
            child = self._open_child(line.indent, allow_compact=False)
            if child is None:
                items.append(None)
                return
            container, _ = child
            items.append(container)
            stack.append(
                _Context(
                    indent=line.indent,
                    container=container,
                    parent=_ParentRef(sequence=items, index=len(items) - 1),
                ),
            )
            return
        if ":" in token and not _is_quoted(token):
            mapping: dict[str, YamlValue] = {}
            items.append(mapping)
            entry = _split_entry(token)
            if entry is None:
                logger.debug("empty key in sequence item (line {})", line.line_no)
                return
            stack.append(
                _Context(
                    indent=line.indent,
                    container=mapping,
                    parent=_ParentRef(sequence=items, index=len(items) - 1),
                ),
            )
            key, value_raw = entry
            self._assign_entry(mapping, stack, key, value_raw, line.indent + 2)
            return
        items.append(_parse_scalar(token))

    def _process_map_line(
        self,
        context: _Context,
        stack: list[_Context],
        line: Line,
    ) -> None:
        mapping = context.container
        if not isinstance(mapping, dict):
            logger.debug(
                "ignoring mapping entry on line {}: parent is a sequence",
                line.line_no,
            )
            return
        entry = _split_entry(line.content)
        if entry is None:
            logger.debug("ignoring line {}: empty key", line.line_no)
            return
        key, value_raw = entry
        self._assign_entry(mapping, stack, key, value_raw, line.indent)

    def _assign_entry(  # noqa: PLR0913, PLR0917
        self,
        mapping: dict[str, YamlValue],
        stack: list[_Context],
        key: str,
        value_raw: str,
        indent: int,
    ) -> None:
        if value_raw in _BLOCK_INDICATORS:
            mapping[key] = self._parse_block_scalar(indent)
            return
        if value_raw:
            mapping[key] = _parse_scalar(value_raw)
            return
        child = self._open_child(indent, allow_compact=True)
        if child is None:
            mapping[key] = None
            return
        container, compact = child
        mapping[key] = container
        stack.append(
            _Context(
                indent=indent,
                container=container,
                parent=_ParentRef(mapping=mapping, key=key),
                compact=compact,
            ),
        )

    def _as_sequence(self, context: _Context, line: Line) -> list[YamlValue] | None:
        container = context.container
        if isinstance(container, list):
            return container
        if container:
            logger.debug(
                "ignoring sequence item on line {}: parent is a mapping",
                line.line_no,
            )
            return None
        # An untouched mapping placeholder becomes a sequence in place.
        items: list[YamlValue] = []
        if context.parent is None:
            self.root = items
        else:
            context.parent.replace(items)
        context.container = items
        return items

    # Low-level helpers -------------------------------------------------------
    def _open_child(
        self,
        indent: int,
        *,
        allow_compact: bool,
    ) -> tuple[list[YamlValue] | dict[str, YamlValue], bool] | None:
        next_line = self._peek()
        if next_line is None:
            return None
        is_item = _is_seq_item(next_line.content)
        if next_line.indent > indent:
            return ([] if is_item else {}), False
        if allow_compact and is_item and next_line.indent == indent:
            return [], True
        return None

    def _peek(self) -> Line | None:
        idx = self.index
        while idx < len(self.lines):
            line = self.lines[idx]
            if not _is_skippable(line):
                return line
            idx += 1
        return None

    def _parse_block_scalar(self, indent: int) -> str:
        cut = indent + 2
        parts: list[str] = []
        while self.index < len(self.lines):
            line = self.lines[self.index]
            if line.indent <= indent:
                break
            parts.append(line.raw[cut:])
            self.index += 1
        logger.debug("block scalar with {} line(s)", len(parts))
        return "\n".join(parts)

    @staticmethod
    def _preprocess(text: str) -> list[Line]:
        lines: list[Line] = []
        for idx, raw in enumerate(_LINE_BREAK.split(text)):
            if not raw:
                continue
            indent = len(raw) - len(raw.lstrip(" "))
            lines.append(
                Line(indent=indent, content=raw.strip(), raw=raw, line_no=idx + 1),
            )
        return lines


def _is_skippable(line: Line) -> bool:
    return not line.content or line.content.startswith("#")


def _is_seq_item(content: str) -> bool:
    return content == "-" or content.startswith("- ")


def _split_entry(text: str) -> tuple[str, str] | None:
    key_raw, _, value_raw = text.partition(":")
    key = _strip_quotes(key_raw.strip())
    if not key:
        return None
    return key, value_raw.strip()


def _parse_scalar(raw: str) -> YamlValue:
    value = raw.strip()
    if value in _NULL_TOKENS:
        return None
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    number = _parse_number(value)
    if number is not None:
        return number
    literal = _empty_literal(value)
    if literal is not None:
        return literal
    return _strip_quotes(value)


def _parse_number(value: str) -> int | float | None:
    if _INT_LITERAL.fullmatch(value):
        return int(value)
    if _HEX_LITERAL.fullmatch(value):
        return int(value, 16)
    if _FLOAT_LITERAL.fullmatch(value):
        return float(value)
    return None


def _is_quoted(value: str) -> bool:
    min_quote_len: Final = 2
    return len(value) >= min_quote_len and value[0] == value[-1] and value[0] in "\"'"


def _strip_quotes(value: str) -> str:
    if _is_quoted(value):
        return value[1:-1]
    return value


def _empty_literal(token: str) -> YamlValue | None:
    if token == "[]":
        return []
    if token == "{}":
        return {}
    return None
