"""
Path and config resolution against the server root.
"""

import os
import re

from loguru import logger

from ..models.tables import MimeEntry

UP_SEGMENT = "up"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_SEPARATORS = re.compile(r"[/\\:]")
_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def escape_path(raw: str) -> str:
    """Replace every `/`, `\\` and `:` with the platform separator."""
    return _SEPARATORS.sub(lambda _: os.sep, raw)


def resolve_local_path(root: str, relative_path: str) -> str:
    """
    Resolve a request-relative path to an absolute path under the root.

    Each `up` segment pops the segment before it. Nothing stops enough
    `up` segments from climbing above the root.

    Args:
        root: Absolute server root
        relative_path: Escaped path relative to the root

    Returns:
        Absolute local path
    """
    segments = root.split(os.sep) + relative_path.split(os.sep)
    resolved: list[str] = []
    for segment in segments:
        if segment == UP_SEGMENT:
            if resolved:
                resolved.pop()
        else:
            resolved.append(segment)
    return os.sep.join(resolved)


def join_root(root: str, folder: str) -> str:
    """Join a folder onto the root and normalize it."""
    return os.path.normpath(root + os.sep + folder)


def split_lines(text: str) -> list[str]:
    """Split on any line ending, dropping only trailing empty lines."""
    lines = _LINE_BREAK.split(text)
    while lines and len(lines[-1]) == 0:
        lines.pop()
    return lines


def _table_path(root: str, name: str) -> str:
    return os.path.join(root, name + ".txt")


def load_mime_table(root: str, name: str) -> dict[str, MimeEntry]:
    """
    Load the MIME table from `<root>/<name>.txt`.

    Records look like `ext=contentType,isBinary`. Malformed records are
    skipped and later duplicates win.

    Raises:
        OSError: If the file cannot be read
    """
    with open(_table_path(root, name), encoding="utf-8") as f:
        data = f.read()

    table: dict[str, MimeEntry] = {}
    for record in split_lines(data):
        fields = record.split("=")
        if len(fields) != 2:
            continue
        ext, info = fields
        info_fields = info.split(",")
        if len(info_fields) != 2:
            continue
        content_type, binary = info_fields
        table[ext] = MimeEntry(extension=ext, content_type=content_type, is_binary=(binary == "true"))

    logger.debug("Loaded MIME table", entries=len(table))
    return table


def _coerce(value: str) -> int | str:
    if _NUMBER.match(value):
        try:
            return int(float(value))
        except OverflowError:
            return value
    return value


def load_config(root: str, name: str) -> dict[str, int | str]:
    """
    Load the key/value config from `<root>/<name>.txt`.

    Numeric values become ints. A read failure is logged and whatever was
    parsed (usually nothing) is returned.
    """
    config: dict[str, int | str] = {}
    try:
        with open(_table_path(root, name), encoding="utf-8") as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Error: {e}")
        return config

    for line in split_lines(data):
        pair = line.split("=")
        if len(pair) == 2:
            key, value = pair
            config[key] = _coerce(value)

    logger.debug("Loaded config", keys=sorted(config))
    return config
