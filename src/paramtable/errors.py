"""
Exception hierarchy for parameter and table files.
"""
from __future__ import annotations

from typing import Optional


class ParamTableError(Exception):
    """Base class for all errors raised by paramtable."""


class ParameterFileError(ParamTableError):
    """
    A line of a parameter file could not be turned into a parameter.

    Attributes:
        path: File (or source label) the line came from.
        lineno: 1-based line number, or None when not known.
    """

    def __init__(self, message: str, path: Optional[str] = None, lineno: Optional[int] = None) -> None:
        self.path = path
        self.lineno = lineno
        self.reason = message
        location = ""
        if path is not None and lineno is not None:
            location = f"{path}:{lineno}: "
        elif lineno is not None:
            location = f"line {lineno}: "
        elif path is not None:
            location = f"{path}: "
        super().__init__(f"{location}{message}")


class ParameterSyntaxError(ParameterFileError):
    """Line is not of the form ``name = value``."""


class ParameterValueError(ParameterFileError):
    """Value is not a number or a bracketed list of numbers."""


class UnknownParameterError(ParameterFileError):
    """Name is not one of the accepted parameter names."""


class TableError(ParamTableError):
    """Base class for table errors."""


class TableShapeError(TableError, ValueError):
    """Columns are not one-dimensional or do not have equal length."""


class TableFormatError(TableError):
    """A table file line could not be parsed as two numeric columns."""

    def __init__(self, message: str, path: Optional[str] = None, lineno: Optional[int] = None) -> None:
        self.path = path
        self.lineno = lineno
        location = ""
        if path is not None and lineno is not None:
            location = f"{path}:{lineno}: "
        elif path is not None:
            location = f"{path}: "
        super().__init__(f"{location}{message}")
