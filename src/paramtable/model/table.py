"""
Sample Table (Data Model)
=========================
A two-column numeric table: an independent variable and a dependent
variable, one sample point per row.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

import numpy as np

from paramtable.errors import TableShapeError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class SampleTable:
    """
    Positionally aligned columns: row ``i`` is ``(x[i], y[i])``.
    """
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]
    x_label: str = "t"
    y_label: str = "y"

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=np.float64)
        self.y = np.asarray(self.y, dtype=np.float64)

        if self.x.ndim != 1 or self.y.ndim != 1:
            raise TableShapeError(
                f"Columns must be one-dimensional, got shapes {self.x.shape} and {self.y.shape}."
            )
        if self.x.shape != self.y.shape:
            raise TableShapeError(
                f"Columns must have equal length, got {self.x.size} and {self.y.size}."
            )
        for label in (self.x_label, self.y_label):
            if not label or any(c.isspace() for c in label):
                raise TableShapeError(f"Column label {label!r} must be a single non-empty word.")

    def __len__(self) -> int:
        return int(self.x.size)

    def rows(self) -> Iterator[tuple[float, float]]:
        for xi, yi in zip(self.x, self.y):
            yield float(xi), float(yi)

    @property
    def header(self) -> str:
        return f"{self.x_label} {self.y_label}"

    def as_array(self) -> npt.NDArray[np.float64]:
        """Stack the columns into an (n, 2) array."""
        return np.column_stack((self.x, self.y))

    @classmethod
    def from_array(cls, data: npt.ArrayLike, x_label: str = "t", y_label: str = "y") -> SampleTable:
        """
        Build a table from an (n, 2) array.

        A 1-D array of length 2 is taken as a single row.
        """
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim == 1 and arr.size == 2:
            arr = arr.reshape(1, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise TableShapeError(f"Expected an (n, 2) array, got shape {arr.shape}.")
        return cls(x=arr[:, 0].copy(), y=arr[:, 1].copy(), x_label=x_label, y_label=y_label)
