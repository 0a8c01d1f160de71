from __future__ import annotations

import numpy as np
import pytest

from paramtable.errors import TableShapeError
from paramtable.model.table import SampleTable


def test_rows_are_positionally_aligned():
    table = SampleTable(x=[0.0, 1.0, 2.0], y=[5.0, 6.0, 7.0])
    assert len(table) == 3
    assert list(table.rows()) == [(0.0, 5.0), (1.0, 6.0), (2.0, 7.0)]
    assert table.header == "t y"


def test_unequal_columns_rejected():
    with pytest.raises(TableShapeError):
        SampleTable(x=[0.0, 1.0], y=[1.0])


def test_two_dimensional_column_rejected():
    with pytest.raises(ValueError):
        SampleTable(x=np.zeros((2, 2)), y=np.zeros((2, 2)))


def test_label_must_be_single_word():
    with pytest.raises(TableShapeError):
        SampleTable(x=[1.0], y=[2.0], x_label="time s")


def test_as_array_and_from_array():
    table = SampleTable(x=[0.0, 1.0], y=[2.0, 3.0], x_label="x", y_label="f")
    arr = table.as_array()
    assert arr.shape == (2, 2)
    back = SampleTable.from_array(arr, x_label="x", y_label="f")
    np.testing.assert_array_equal(back.x, table.x)
    np.testing.assert_array_equal(back.y, table.y)


def test_from_array_single_row_and_bad_shape():
    single = SampleTable.from_array(np.array([1.0, 2.0]))
    assert list(single.rows()) == [(1.0, 2.0)]
    with pytest.raises(TableShapeError):
        SampleTable.from_array(np.zeros((3, 3)))
