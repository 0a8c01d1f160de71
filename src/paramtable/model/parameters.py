"""
Motion Parameters
=================
Defines the fixed set of named values a parameter file may assign.

Classes:
    MotionParameters: Data class for ``v0``, ``g`` and the sample times ``t``.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
import numbers
from typing import Any, Dict, List, Union, TYPE_CHECKING

import numpy as np

from paramtable.config import DEFAULT_GRAVITY
from paramtable.errors import ParameterValueError, UnknownParameterError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

ParameterValue = Union[float, List[float]]


def is_number(value: object) -> bool:
    # bool is a subclass of int but never a valid parameter value
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def to_float(value: object, name: str) -> float:
    """
    Coerce one numeric value, rejecting non-numbers and integers too large for a float.

    Raises:
        ParameterValueError: value is not a real number or overflows a float.
    """
    if not is_number(value):
        raise ParameterValueError(f"Parameter '{name}' expects a number, got {value!r}.")
    try:
        return float(value)
    except OverflowError:
        raise ParameterValueError(f"Value for parameter '{name}' is too large for a float.") from None


@dataclass
class MotionParameters:
    v0: float = 0.0  # m/s
    g: float = DEFAULT_GRAVITY  # m/s^2
    t: List[float] = field(default_factory=list)  # s

    def update(self, name: str, value: Any) -> None:
        """
        Assign a single parameter, coercing it to the declared kind.

        Args:
            name: One of PARAMETER_NAMES.
            value: A number for scalar names, a list/tuple of numbers for ``t``.

        Raises:
            UnknownParameterError: name is not accepted.
            ParameterValueError: value has the wrong kind.
        """
        if name not in PARAMETER_NAMES:
            raise UnknownParameterError(
                f"Unknown parameter '{name}'. Expected one of {PARAMETER_NAMES}."
            )

        if name in LIST_PARAMETERS:
            if not isinstance(value, (list, tuple, np.ndarray)):
                raise ParameterValueError(f"Parameter '{name}' expects a list of numbers, got {value!r}.")
            setattr(self, name, [to_float(v, name) for v in value])
        else:
            if isinstance(value, (list, tuple, np.ndarray)):
                raise ParameterValueError(f"Parameter '{name}' expects a number, got {value!r}.")
            setattr(self, name, to_float(value, name))

    @property
    def times(self) -> npt.NDArray[np.float64]:
        return np.asarray(self.t, dtype=np.float64)

    def to_dict(self) -> Dict[str, ParameterValue]:
        return {"v0": self.v0, "g": self.g, "t": list(self.t)}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> MotionParameters:
        params = MotionParameters()
        for name, value in data.items():
            params.update(name, value)
        return params


PARAMETER_NAMES: tuple[str, ...] = tuple(f.name for f in fields(MotionParameters))
LIST_PARAMETERS: frozenset[str] = frozenset({"t"})
