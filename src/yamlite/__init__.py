"""Read, write and edit a pragmatic subset of YAML as plain Python data."""

from __future__ import annotations

try:
    from beartype.claw import beartype_this_package

    beartype_this_package()
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pass

from loguru import logger

from yamlite.dumper import dumps
from yamlite.errors import MutatorError
from yamlite.errors import YamlConfigError
from yamlite.errors import YamlDumpError
from yamlite.errors import YamliteError
from yamlite.errors import YamlIOError
from yamlite.files import modify
from yamlite.files import read
from yamlite.files import write
from yamlite.options import DEFAULT_OPTIONS
from yamlite.options import DumpOptions
from yamlite.parser import loads
from yamlite.parser import parse
from yamlite.paths import get_path
from yamlite.paths import set_path
from yamlite.values import YamlValue

# Silent unless the application opts in with ``logger.enable("yamlite")``.
logger.disable("yamlite")

__all__ = [
    "DEFAULT_OPTIONS",
    "DumpOptions",
    "MutatorError",
    "YamlConfigError",
    "YamlDumpError",
    "YamlIOError",
    "YamlValue",
    "YamliteError",
    "dumps",
    "get_path",
    "loads",
    "modify",
    "parse",
    "read",
    "set_path",
    "write",
]
