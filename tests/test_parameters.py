from __future__ import annotations

import numpy as np
import pytest

from paramtable.errors import ParameterValueError, UnknownParameterError
from paramtable.model.parameters import MotionParameters, PARAMETER_NAMES


def test_names_and_defaults():
    assert PARAMETER_NAMES == ("v0", "g", "t")
    params = MotionParameters()
    assert params.v0 == 0.0
    assert params.g == 9.81
    assert params.t == []


def test_update_coerces():
    params = MotionParameters()
    params.update("v0", 3)
    params.update("t", (1, 2))
    assert isinstance(params.v0, float)
    assert params.t == [1.0, 2.0]


def test_update_rejects_unknown_and_wrong_kind():
    params = MotionParameters()
    with pytest.raises(UnknownParameterError):
        params.update("mass", 1.0)
    with pytest.raises(ParameterValueError):
        params.update("g", [9.81])
    with pytest.raises(ParameterValueError):
        params.update("t", 1.0)


def test_dict_conversion():
    params = MotionParameters(v0=1.0, g=2.0, t=[0.1])
    assert MotionParameters.from_dict(params.to_dict()) == params
    with pytest.raises(UnknownParameterError):
        MotionParameters.from_dict({"mass": 1})


def test_times_array():
    params = MotionParameters(t=[0.0, 0.5])
    assert params.times.dtype == np.float64
    np.testing.assert_array_equal(params.times, [0.0, 0.5])


@pytest.mark.parametrize("value", ["abc", True, None, 10 ** 400])
def test_update_rejects_non_numeric_scalars(value):
    with pytest.raises(ParameterValueError):
        MotionParameters().update("v0", value)


def test_from_dict_rejects_bad_values():
    with pytest.raises(ParameterValueError):
        MotionParameters.from_dict({"v0": "abc"})
    with pytest.raises(ParameterValueError):
        MotionParameters.from_dict({"g": True})
    with pytest.raises(ParameterValueError):
        MotionParameters.from_dict({"t": [0.1, "x"]})


def test_update_accepts_numpy_scalars():
    params = MotionParameters()
    params.update("g", np.float64(1.62))
    params.update("t", np.array([0.0, 1.0]))
    assert params.g == 1.62
    assert params.t == [0.0, 1.0]
