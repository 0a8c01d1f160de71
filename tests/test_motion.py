from __future__ import annotations

import numpy as np
import pytest

from paramtable.model.motion import Trajectory, VerticalThrow
from paramtable.model.parameters import MotionParameters


def test_position_scalar_and_array():
    ball = VerticalThrow(v0=5.3, g=9.81)
    assert ball.position(0.15) == pytest.approx(0.6846375)
    assert isinstance(ball.position(0.15), float)
    np.testing.assert_allclose(ball.position(np.array([0.0, 1.0])), [0.0, 5.3 - 4.905])


def test_from_parameters_and_tabulate():
    params = MotionParameters(v0=10.0, g=10.0, t=[0.0, 1.0, 2.0])
    table = VerticalThrow.from_parameters(params).tabulate(params.times)
    assert table.header == "t y"
    np.testing.assert_allclose(table.y, [0.0, 5.0, 0.0])


def test_trajectory_is_abstract():
    with pytest.raises(TypeError):
        Trajectory()


def test_plot_returns_axes():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    ax = VerticalThrow(v0=5.0, g=9.81).plot(np.linspace(0.0, 1.0, 11))
    assert len(ax.lines) == 1
    plt.close(ax.figure)
