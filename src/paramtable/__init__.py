"""Parameter files and two-column numeric tables."""
from paramtable.config import APP_VERSION as __version__
from paramtable.model.parameters import MotionParameters, PARAMETER_NAMES
from paramtable.model.params_io import read_parameters, write_parameters, parse_parameters
from paramtable.model.table import SampleTable
from paramtable.model.table_io import read_table, write_table, load_table, save_table
from paramtable.model.motion import Trajectory, VerticalThrow

__all__ = [
    "__version__",
    "MotionParameters",
    "PARAMETER_NAMES",
    "read_parameters",
    "write_parameters",
    "parse_parameters",
    "SampleTable",
    "read_table",
    "write_table",
    "load_table",
    "save_table",
    "Trajectory",
    "VerticalThrow",
]
