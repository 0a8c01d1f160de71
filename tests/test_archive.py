from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("h5py")

from paramtable.model.io import ArchiveManager
from paramtable.model.parameters import MotionParameters
from paramtable.model.table import SampleTable


def test_save_and_load(tmp_path):
    params = MotionParameters(v0=5.3, g=9.81, t=[0.0, 0.5])
    table = SampleTable(x=[0.0, 0.5], y=[0.0, 1.42375])
    path = tmp_path / "run.h5"

    ArchiveManager.save(params, table, path)
    loaded_params, loaded_table = ArchiveManager.load(path)

    assert loaded_params == params
    assert loaded_table is not None
    assert loaded_table.header == "t y"
    np.testing.assert_array_equal(loaded_table.y, table.y)


def test_save_without_table(tmp_path):
    path = tmp_path / "params.h5"
    ArchiveManager.save(MotionParameters(v0=1.0), None, path)
    params, table = ArchiveManager.load(path)
    assert params.v0 == 1.0
    assert table is None


def test_load_rejects_non_hdf5(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("v0 = 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ArchiveManager.load(path)


def test_file_layout(tmp_path):
    import h5py

    params = MotionParameters(v0=2.0, g=9.81, t=[0.0, 0.1, 0.2])
    table = SampleTable(x=params.times, y=[0.0, 0.15095, 0.2038], x_label="time", y_label="height")
    path = tmp_path / "layout.h5"
    ArchiveManager.save(params, table, path)

    with h5py.File(path, "r") as f:
        assert "version" in f.attrs
        assert "created" in f.attrs
        assert f["parameters"].attrs["v0"] == 2.0
        assert f["parameters"].attrs["g"] == 9.81
        np.testing.assert_array_equal(f["parameters/t"][:], [0.0, 0.1, 0.2])
        assert f["table/x"].compression == "gzip"
        assert f["table/y"].compression == "gzip"
        assert f["table"].attrs["x_label"] == "time"
        assert f["table"].attrs["y_label"] == "height"
