"""
Parameter File Reader/Writer
============================
Reads and writes text files holding one ``name = value`` pair per line::

    v0 = 5.3
    g = 9.81
    t = [0.15, 0.3, 0.45]

Values are numeric literals or bracketed lists of numbers. Blank lines and
lines starting with ``#`` are ignored.
"""
from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from paramtable.config import ASSIGNMENT, COMMENT_MARKER, ENCODING
from paramtable.errors import (
    ParameterFileError,
    ParameterSyntaxError,
    ParameterValueError,
    UnknownParameterError,
)
from paramtable.model.parameters import (
    PARAMETER_NAMES,
    MotionParameters,
    ParameterValue,
    is_number,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_value(text: str) -> ParameterValue:
    """
    Convert the right-hand side of an assignment into a float or list of floats.

    Raises:
        ParameterValueError: text is not a numeric literal or a list of them.
    """
    try:
        value = ast.literal_eval(text)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        raise ParameterValueError(f"Cannot parse value {text!r}.") from None

    if is_number(value):
        items = [value]
    elif isinstance(value, (list, tuple)):
        if not all(is_number(v) for v in value):
            raise ParameterValueError(f"List value {text!r} must contain only numbers.")
        items = list(value)
    else:
        raise ParameterValueError(f"Value {text!r} is not a number or a list of numbers.")

    try:
        floats = [float(v) for v in items]
    except OverflowError:
        raise ParameterValueError(f"Value {text!r} is too large for a float.") from None

    return floats[0] if is_number(value) else floats


def parse_line(line: str) -> Optional[tuple[str, ParameterValue]]:
    """
    Parse one line of a parameter file.

    Splitting ``'v0 = 5.3'`` on the first ``=`` yields ``'v0 '`` and
    ``' 5.3'``; both sides are stripped before use.

    Returns:
        ``(name, value)``, or None for blank and comment lines.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_MARKER):
        return None

    if ASSIGNMENT not in stripped:
        raise ParameterSyntaxError(f"Expected 'name {ASSIGNMENT} value', got {stripped!r}.")

    name, _, raw_value = stripped.partition(ASSIGNMENT)
    name = name.strip()
    if not name:
        raise ParameterSyntaxError(f"Missing parameter name in {stripped!r}.")

    # trailing comment
    raw_value = raw_value.split(COMMENT_MARKER, 1)[0].strip()
    if not raw_value:
        raise ParameterSyntaxError(f"Missing value for parameter '{name}'.")

    return name, parse_value(raw_value)


def parse_parameters(
    lines: Iterable[str],
    strict: bool = True,
    source: str = "<string>",
) -> MotionParameters:
    """
    Build MotionParameters from an iterable of text lines.

    Args:
        lines: Lines of a parameter file.
        strict: Raise on unknown names instead of skipping them.
        source: Label used in error messages.

    Returns:
        The parsed parameters; names not present keep their defaults.
    """
    params = MotionParameters()
    seen: set[str] = set()

    for lineno, line in enumerate(lines, start=1):
        try:
            parsed = parse_line(line)
            if parsed is None:
                continue
            name, value = parsed

            if name not in PARAMETER_NAMES:
                if strict:
                    raise UnknownParameterError(
                        f"Unknown parameter '{name}'. Expected one of {PARAMETER_NAMES}."
                    )
                logger.warning(f"{source}:{lineno}: ignoring unknown parameter '{name}'.")
                continue

            if name in seen:
                logger.warning(f"{source}:{lineno}: parameter '{name}' assigned again, last value wins.")

            params.update(name, value)
            seen.add(name)
            logger.debug(f"{source}:{lineno}: {name} = {value!r}")

        except ParameterFileError as e:
            raise type(e)(e.reason, path=source, lineno=lineno) from None

    return params


def read_parameters(path: PathLike, strict: bool = True) -> MotionParameters:
    """Read a parameter file from disk."""
    logger.info(f"Reading parameters from: {path}")
    with open(path, "r", encoding=ENCODING) as f:
        try:
            params = parse_parameters(f, strict=strict, source=str(path))
        except ParameterFileError as e:
            logger.error(f"Failed to read parameters: {e}")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"Failed to read parameters: {path} is not valid {ENCODING} text.")
            raise ParameterFileError(f"Not valid {ENCODING} text: {e.reason}.", path=str(path)) from e
    logger.info(f"Read parameters v0={params.v0}, g={params.g}, {len(params.t)} sample times.")
    return params


def format_value(value: ParameterValue) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(repr(float(v)) for v in value) + "]"
    return repr(float(value))


def write_parameters(params: MotionParameters, path: PathLike) -> None:
    """Write one ``name = value`` line per parameter, in declaration order."""
    logger.info(f"Writing parameters to: {path}")
    data = params.to_dict()
    with open(path, "w", encoding=ENCODING) as f:
        for name in PARAMETER_NAMES:
            f.write(f"{name} {ASSIGNMENT} {format_value(data[name])}\n")


__all__ = [
    "parse_value",
    "parse_line",
    "parse_parameters",
    "read_parameters",
    "format_value",
    "write_parameters",
]
