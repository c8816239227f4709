# test/test_dataset.py
import math

import numpy as np
import pytest

from plotexport.core import AxisKind, Datum, Dataset, Time
from plotexport.core import ConfigurationError, InvalidDatum, InvalidDataset


def _d(x, y, value=None):
    return Datum(x=x, y=y, value=y if value is None else value, receive_time=Time(0, 0))


def test_dataset_freezes_data_and_keeps_order():
    points = [_d(2, 20), _d(0, 0), _d(1, 10)]
    ds = Dataset(label="/topic.a", data=points)

    assert isinstance(ds.data, tuple)
    assert [d.x for d in ds] == [2, 0, 1]
    assert len(ds) == 3

    # Mutating the source list does not affect the snapshot
    points.append(_d(3, 30))
    assert len(ds) == 3


def test_dataset_numpy_views():
    ds = Dataset(data=[_d(0, 1.5), _d(1, 2.5)])
    x, y = ds.to_numpy()
    assert x.dtype == float
    assert np.allclose(x, [0.0, 1.0])
    assert np.allclose(y, [1.5, 2.5])


def test_empty_dataset():
    ds = Dataset()
    assert ds.is_empty
    assert ds.label is None
    assert ds.x.size == 0 and ds.y.size == 0


def test_dataset_rejects_bad_items():
    with pytest.raises(InvalidDataset):
        Dataset(data=[(0, 0)])  # type: ignore[list-item]
    with pytest.raises(InvalidDataset):
        Dataset(label=3)  # type: ignore[arg-type]
    with pytest.raises(InvalidDataset):
        Dataset(data="abc")  # type: ignore[arg-type]


def test_datum_validation():
    with pytest.raises(InvalidDatum):
        Datum(x="0", y=0, value=0, receive_time=Time(0))  # type: ignore[arg-type]
    with pytest.raises(InvalidDatum):
        Datum(x=True, y=0, value=0, receive_time=Time(0))
    with pytest.raises(InvalidDatum):
        Datum(x=0, y=0, value=0, receive_time=1.0)  # type: ignore[arg-type]
    with pytest.raises(InvalidDatum):
        Datum(x=0, y=0, value=0, receive_time=Time(0), header_stamp=2)  # type: ignore[arg-type]
    with pytest.raises(InvalidDatum):
        Datum(x=0, y=0, value=[1], receive_time=Time(0))  # type: ignore[arg-type]


def test_datum_allows_non_finite_coordinates_and_text_values():
    d = Datum(x=math.nan, y=math.inf, value="ERROR", receive_time=Time(1))
    assert math.isnan(d.x)
    assert d.value == "ERROR"


def test_axis_kind_parse():
    assert AxisKind.parse("index") is AxisKind.INDEX
    assert AxisKind.parse("currentCustom") is AxisKind.CURRENT_CUSTOM
    assert AxisKind.parse(AxisKind.TIMESTAMP) is AxisKind.TIMESTAMP

    with pytest.raises(ConfigurationError):
        AxisKind.parse("bogus")
    with pytest.raises(ValueError):
        AxisKind.parse("Index")
