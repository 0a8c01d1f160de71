"""
Configuration & Constants
=========================
This module serves as the central registry for the file-format constants
shared by the readers and writers.

Why is this file needed?
------------------------
1. Consistency: the parameter reader and writer, and the hand-written and
   numpy table paths, must agree on markers and formats.
2. Versioning: archives record the installed package version.

Exports:
    COMMENT_MARKER (str): Character that starts a comment/header line.
    ASSIGNMENT (str): Separator between a parameter name and its value.
    DEFAULT_ROW_FORMAT (str): printf format used by the hand-written table writer.
    DEFAULT_NUMPY_FORMAT (str): printf format passed to ``np.savetxt``.
    DEFAULT_GRAVITY (float): Default value of ``g`` [m/s^2].
    ENCODING (str): Text encoding of every file we read or write.
    APP_VERSION (str): Installed package version.
"""
from importlib.metadata import version, PackageNotFoundError

COMMENT_MARKER: str = "#"
ASSIGNMENT: str = "="

DEFAULT_ROW_FORMAT: str = "%10.4f"
DEFAULT_NUMPY_FORMAT: str = "%.6e"

DEFAULT_GRAVITY: float = 9.81

ENCODING: str = "utf-8"

try:
    APP_VERSION: str = version("paramtable")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"
