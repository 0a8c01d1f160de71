from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import numpy as np

from paramtable.model.table import SampleTable

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes

    from paramtable.model.parameters import MotionParameters


class Trajectory(ABC):
    """
    Abstract base class for one-dimensional trajectories.
    """
    NAME: str = "Trajectory"

    @abstractmethod
    def position(self, time: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Get the position at a given time.

        Args:
            time: Time in seconds.

        Returns:
            Position in metres.
        """
        pass

    def tabulate(self, times: npt.ArrayLike) -> SampleTable:
        """Evaluate the trajectory at each time and collect a t/y table."""
        t = np.asarray(times, dtype=np.float64)
        return SampleTable(x=t, y=np.asarray(self.position(t), dtype=np.float64), x_label="t", y_label="y")

    def plot(self, times: npt.ArrayLike, ax: Optional[Axes] = None) -> Axes:
        """
        Plot the trajectory.
        """
        import matplotlib.pyplot as plt

        t = np.asarray(times, dtype=np.float64)
        if ax is None:
            _, ax = plt.subplots(figsize=(7, 5), layout="constrained")

        ax.plot(t, self.position(t), 'b', lw=2)
        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.set_title(self.NAME)
        ax.set_xlabel("Time (s)")
        ax.set_ylabel("Height (m)")
        return ax


class VerticalThrow(Trajectory):
    """
    Ball thrown straight up: y = v0*t - 0.5*g*t**2.
    """
    NAME = "Vertical throw"

    def __init__(self, v0: float, g: float) -> None:
        self.v0 = float(v0)
        self.g = float(g)

    @classmethod
    def from_parameters(cls, params: MotionParameters) -> VerticalThrow:
        return cls(v0=params.v0, g=params.g)

    def position(self, time: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        if np.isscalar(time):
            t = float(time)
            return self.v0 * t - 0.5 * self.g * t ** 2
        t_array = np.asarray(time, dtype=np.float64)
        return self.v0 * t_array - 0.5 * self.g * t_array ** 2

    def __repr__(self) -> str:
        return f"VerticalThrow(v0={self.v0}, g={self.g})"
