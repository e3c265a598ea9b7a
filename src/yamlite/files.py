"""File collaborators: read, write and read-modify-write yamlite documents.

Every function here reports failure through its return value. A successful
call returns ``(result, None)``; a failed one returns ``(None, message)`` or
``(False, message)``.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from yamlite.dumper import dumps
from yamlite.errors import MutatorError
from yamlite.errors import YamlConfigError
from yamlite.errors import YamlDumpError
from yamlite.errors import YamlIOError
from yamlite.options import DumpOptions
from yamlite.parser import loads
from yamlite.values import YamlValue

type PathLike = str | Path
type Mutator = Callable[[YamlValue], Any]


def read(path: PathLike) -> tuple[YamlValue | None, str | None]:
    """Read and decode the document at *path*.

    Returns:
        ``(value, None)`` on success or ``(None, message)`` on I/O failure.
    """
    try:
        text = _read_text(path)
    except YamlIOError as exc:
        logger.warning("read failed for {}: {}", exc.path, exc.reason)
        return None, str(exc)
    return loads(text), None


def write(
    path: PathLike,
    data: Any,
    options: DumpOptions | Mapping[str, Any] | None = None,
) -> tuple[bool, str | None]:
    """Encode *data* and write it to *path*, truncating any existing file.

    Returns:
        ``(True, None)`` on success or ``(False, message)`` on failure.
    """
    try:
        text = dumps(data, options)
        _write_text(path, text)
    except (YamlConfigError, YamlDumpError, YamlIOError) as exc:
        logger.warning("write failed for {}: {}", path, exc)
        return False, str(exc)
    return True, None


def modify(
    path: PathLike,
    mutator: Mutator,
    options: DumpOptions | Mapping[str, Any] | None = None,
) -> tuple[bool, str | None]:
    """Load *path*, transform it with *mutator* and save the result.

    The mutator receives the decoded tree and returns the tree to write back;
    returning ``None`` or ``False`` aborts the operation without touching
    the file.

    Returns:
        ``(True, None)`` on success or ``(False, message)`` on failure.
    """
    data, err = read(path)
    if err is not None:
        return False, err
    try:
        modified = _apply(mutator, data)
    except MutatorError as exc:
        logger.warning("modify aborted for {}: {}", path, exc)
        return False, str(exc)
    return write(path, modified, options)


def _apply(mutator: Mutator, data: YamlValue) -> Any:
    modified = mutator(data)
    if modified is None or modified is False:
        msg = "Modifier function returned nothing"
        raise MutatorError(msg)
    return modified


def _read_text(path: PathLike) -> str:
    target = Path(path)
    try:
        with target.open("r", encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        msg = f"Failed to open file: {target}: {reason}"
        raise YamlIOError(msg, path=str(target), reason=reason) from exc
    except UnicodeDecodeError as exc:
        reason = str(exc)
        msg = f"Failed to read file: {target}: {reason}"
        raise YamlIOError(msg, path=str(target), reason=reason) from exc
    logger.debug("read {} character(s) from {}", len(text), target)
    return text


def _write_text(path: PathLike, text: str) -> None:
    target = Path(path)
    try:
        with target.open("w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        msg = f"Failed to open file for writing: {target}: {reason}"
        raise YamlIOError(msg, path=str(target), reason=reason) from exc
    except UnicodeEncodeError as exc:
        reason = str(exc)
        msg = f"Failed to write file: {target}: {reason}"
        raise YamlIOError(msg, path=str(target), reason=reason) from exc
    logger.debug("wrote {} character(s) to {}", len(text), target)
