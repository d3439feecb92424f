import numpy as np
import pytest

from poromat import SampleTable, ValidationError, with_precision


def test_accessors(pc_table):
    assert len(pc_table) == 3
    assert pc_table.front == (0.0, 0.0)
    assert pc_table.back == (1.0, 3000.0)
    assert pc_table[1] == (0.5, 1000.0)
    assert pc_table.domain == (0.0, 1.0)
    assert list(pc_table) == [(0.0, 0.0), (0.5, 1000.0), (1.0, 3000.0)]


def test_columns_are_copied():
    x = np.array([0.0, 1.0])
    table = SampleTable(x=x, y=[0.0, 1.0])
    x[1] = 5.0
    assert table.back == (1.0, 1.0)


@pytest.mark.parametrize(
    "x, y",
    [
        ([0.0, 1.0], [0.0]),
        ([0.5], [1.0]),
        ([], []),
        ([0.0, 0.6, 0.4], [0.0, 1.0, 2.0]),
        ([0.0, 0.5, 0.5, 1.0], [0.0, 1.0, 2.0, 3.0]),
        ([0.5, 0.5], [0.0, 1.0]),
        ([0.0, np.nan, 1.0], [0.0, 1.0, 2.0]),
    ],
)
def test_invalid_tables_are_rejected(x, y):
    with pytest.raises(ValidationError):
        SampleTable(x=x, y=y)


def test_from_points_requires_points():
    with pytest.raises(ValidationError):
        SampleTable.from_points([])


def test_end_anchors_are_accepted():
    table = SampleTable(x=[0.0, 0.0, 0.5, 1.0, 1.0], y=[1.0, 0.9, 0.5, 0.1, 0.0])
    assert len(table) == 5


def test_precision_context():
    with with_precision(np.float32):
        table = SampleTable(x=[0.0, 1.0], y=[0.0, 1.0])
    assert table.x.dtype == np.float32
    assert SampleTable(x=[0.0, 1.0], y=[0.0, 1.0]).x.dtype == np.float64
