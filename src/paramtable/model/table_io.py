"""
Table File Reader/Writer
========================
Two interchangeable ways to store a SampleTable as text:

1. ``write_table`` / ``read_table``: format and parse each row by hand.
2. ``save_table`` / ``load_table``: delegate to ``np.savetxt`` / ``np.loadtxt``.

Both produce (and accept) the same layout: an optional ``#`` header line
naming the columns, then whitespace-separated numbers, one sample per line::

    # t y
        0.0000     0.0000
        0.1500     0.6846
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from paramtable.config import COMMENT_MARKER, DEFAULT_NUMPY_FORMAT, DEFAULT_ROW_FORMAT, ENCODING
from paramtable.errors import TableError, TableFormatError
from paramtable.model.table import SampleTable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _header_labels(line: str) -> Optional[tuple[str, str]]:
    """Column names from a comment line, if it holds exactly two words."""
    words = line.strip().lstrip(COMMENT_MARKER).split()
    if len(words) == 2:
        return words[0], words[1]
    return None


def _strip_comment(line: str) -> str:
    """Drop a trailing ``# ...`` comment, as ``np.loadtxt`` does."""
    return line.split(COMMENT_MARKER, 1)[0].strip()


def scan_header(lines: Iterable[str]) -> Optional[tuple[str, str]]:
    """
    Find the column labels of a table file.

    The labels come from the first comment line holding exactly two words
    that appears before the first data row. Both readers use this scan.
    """
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(COMMENT_MARKER):
            labels = _header_labels(stripped)
            if labels is not None:
                return labels
            continue
        return None
    return None


def check_format(fmt: str) -> None:
    """
    Reject a printf-style format that cannot format a single float.

    Raises:
        TableError: fmt is not usable for one value.
    """
    try:
        result = fmt % 1.0
    except (TypeError, ValueError, KeyError) as e:
        raise TableError(f"Invalid value format {fmt!r}: {e}") from None
    if not isinstance(result, str):
        raise TableError(f"Invalid value format {fmt!r}.")


# ---- HAND-WRITTEN ROWS ----

def write_table(
    table: SampleTable,
    path: PathLike,
    fmt: str = DEFAULT_ROW_FORMAT,
    header: bool = True,
) -> None:
    """
    Write the table one formatted row at a time.

    Args:
        table: Table to write.
        path: Output file.
        fmt: printf-style format applied to each value.
        header: Write a ``# x_label y_label`` line first.

    Raises:
        TableError: fmt is invalid; nothing is written in that case.
    """
    check_format(fmt)
    logger.info(f"Writing {len(table)} rows to: {path}")
    with open(path, "w", encoding=ENCODING) as f:
        if header:
            f.write(f"{COMMENT_MARKER} {table.header}\n")
        for x, y in table.rows():
            f.write(f"{fmt % x} {fmt % y}\n")


def parse_table(lines: Iterable[str], source: str = "<string>") -> SampleTable:
    """
    Parse table lines into a SampleTable.

    Raises:
        TableFormatError: a data line does not hold exactly two numbers.
    """
    lines = list(lines)
    labels = scan_header(lines)
    xs: list[float] = []
    ys: list[float] = []

    for lineno, line in enumerate(lines, start=1):
        data = _strip_comment(line)
        if not data:
            continue

        words = data.split()
        if len(words) != 2:
            raise TableFormatError(
                f"Expected 2 columns, found {len(words)}.", path=source, lineno=lineno
            )
        try:
            x, y = float(words[0]), float(words[1])
        except ValueError:
            raise TableFormatError(
                f"Non-numeric value in {data!r}.", path=source, lineno=lineno
            ) from None
        xs.append(x)
        ys.append(y)

    if labels is None:
        return SampleTable(x=np.array(xs), y=np.array(ys))
    return SampleTable(x=np.array(xs), y=np.array(ys), x_label=labels[0], y_label=labels[1])


def read_table(path: PathLike) -> SampleTable:
    """Read a table file line by line."""
    logger.info(f"Reading table from: {path}")
    with open(path, "r", encoding=ENCODING) as f:
        try:
            table = parse_table(f, source=str(path))
        except TableFormatError as e:
            logger.error(f"Failed to read table: {e}")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"Failed to read table: {path} is not valid {ENCODING} text.")
            raise TableFormatError(f"Not valid {ENCODING} text: {e.reason}.", path=str(path)) from e
    logger.debug(f"Read {len(table)} rows ({table.header}).")
    return table


# ---- NUMPY CONVENIENCE FUNCTIONS ----

def save_table(table: SampleTable, path: PathLike, fmt: str = DEFAULT_NUMPY_FORMAT) -> None:
    """Write the table with ``np.savetxt``."""
    check_format(fmt)
    logger.info(f"Saving {len(table)} rows with numpy to: {path}")
    try:
        np.savetxt(path, table.as_array(), fmt=fmt, header=table.header, comments=f"{COMMENT_MARKER} ")
    except ValueError as e:
        logger.error(f"Failed to save table: {e}")
        raise TableError(f"Invalid value format {fmt!r}: {e}") from e


def load_table(path: PathLike) -> SampleTable:
    """Read the table with ``np.loadtxt``; labels come from the header line."""
    logger.info(f"Loading table with numpy from: {path}")
    try:
        data = np.loadtxt(path, comments=COMMENT_MARKER, ndmin=2, encoding=ENCODING)
    except ValueError as e:
        logger.error(f"Failed to load table: {e}")
        raise TableFormatError(str(e), path=str(path)) from e

    if data.size == 0:
        data = data.reshape(0, 2)

    with open(path, "r", encoding=ENCODING) as f:
        labels = scan_header(f)
    if labels is None:
        return SampleTable.from_array(data)
    return SampleTable.from_array(data, x_label=labels[0], y_label=labels[1])
