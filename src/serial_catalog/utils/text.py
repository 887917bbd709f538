"""Shared helpers for normalizing catalog field values."""

import re
from pathlib import PurePosixPath

from serial_catalog.core.errors import FieldFormatError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def clean(value: str | None) -> str:
    """Return `value` with surrounding whitespace removed.

    Args:
        value (str | None): Raw field value.

    Returns:
        str: Trimmed value, empty when `value` is `None`.
    """
    return (value or "").strip()


def parse_int(value: str | None, *, field: str, path: str) -> int:
    """Parse a decimal integer field.

    Args:
        value (str | None): Raw field value.
        field (str): Field name used in the error message.
        path (str): Node location used in the error message.

    Returns:
        int: Parsed integer.

    Raises:
        FieldFormatError: If the value is missing or not a decimal integer.
    """
    trimmed = clean(value)
    if not trimmed:
        raise FieldFormatError(f"missing {field}", path=path, field=field)
    if not _INTEGER_RE.fullmatch(trimmed):
        raise FieldFormatError(
            f"invalid {field} {trimmed!r}: expected an integer",
            path=path,
            field=field,
        )
    return int(trimmed)


def media_basename(src: str | None) -> str:
    """Return the trimmed base name of a media source path.

    Args:
        src (str | None): Source path as found in the catalog.

    Returns:
        str: File name without its directories.
    """
    # An empty or root-only src has no name and yields "".
    return clean(PurePosixPath(src or "").name)


def node_path(parent: str | None, kind: str, index: int) -> str:
    """Build a node location such as ``series[0]/season[2]``."""
    segment = f"{kind}[{index}]"
    if not parent:
        return segment
    return f"{parent}/{segment}"
