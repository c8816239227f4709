# test/test_csv_writer.py
import csv
import io
import math

import pytest

from plotexport.core import AxisKind, ConfigurationError, Datum, Dataset, Time
from plotexport.io.csv_writer import csv_column_name, generate_csv

HEADER_TAIL = "receive time,header.stamp,topic,value"


def _datum(x, value, sec=1, nsec=0, stamp=None):
    return Datum(x=x, y=float(value) if not isinstance(value, str) else 0.0,
                 value=value, receive_time=Time(sec, nsec), header_stamp=stamp)


@pytest.mark.parametrize(
    "axis_kind, expected",
    [
        ("timestamp", "elapsed time"),
        ("index", "index"),
        ("custom", "x value"),
        ("currentCustom", "x value"),
        (AxisKind.INDEX, "index"),
    ],
)
def test_header_column_name(axis_kind, expected):
    assert csv_column_name(axis_kind) == expected
    assert generate_csv([], axis_kind) == f"{expected},{HEADER_TAIL}"


def test_unknown_axis_kind_raises():
    with pytest.raises(ConfigurationError):
        generate_csv([], "frequency")
    with pytest.raises(ConfigurationError):
        csv_column_name("")


def test_two_point_index_table():
    ds = Dataset(label="/imu.x", data=[
        Datum(x=0, y=0, value=0, receive_time=Time(10, 0)),
        Datum(x=10, y=10, value=10, receive_time=Time(11, 5), header_stamp=Time(11, 0)),
    ])
    out = generate_csv([ds], "index")
    lines = out.split("\n")

    assert lines[0] == "index,receive time,header.stamp,topic,value"
    assert len(lines) == 3
    assert [line.split(",")[0] for line in lines[1:]] == ["0", "10"]
    assert lines[1] == "0,10.000000000,,/imu.x,0"
    assert lines[2] == "10,11.000000005,11.000000000,/imu.x,10"


def test_rows_follow_dataset_then_point_order():
    a = Dataset(label="a", data=[_datum(2.0, 1), _datum(1.0, 2)])
    empty = Dataset(label="empty")
    b = Dataset(label="b", data=[_datum(0.0, 3), _datum(0.0, 3), _datum(5.0, 4)])

    lines = generate_csv([a, empty, b], AxisKind.TIMESTAMP).split("\n")
    assert len(lines) == 1 + len(a) + len(b)
    topics_and_x = [(row.split(",")[3], row.split(",")[0]) for row in lines[1:]]
    assert topics_and_x == [("a", "2"), ("a", "1"), ("b", "0"), ("b", "0"), ("b", "5")]


def test_missing_label_gives_empty_topic():
    out = generate_csv([Dataset(data=[_datum(1, 2)])], "custom")
    assert out.split("\n")[1] == "1,1.000000000,,,2"


def test_number_formatting():
    ds = Dataset(data=[
        _datum(0.25, 1.5),
        _datum(-3.0, "text"),
        _datum(math.nan, math.inf),
        _datum(1e22, -math.inf),
        _datum(1e-7, 0.00001),
        _datum(-2.5e-10, 1.5e300),
    ])
    rows = [r.split(",") for r in generate_csv([ds], "index").split("\n")[1:]]
    assert (rows[0][0], rows[0][4]) == ("0.25", "1.5")
    assert (rows[1][0], rows[1][4]) == ("-3", "text")
    assert (rows[2][0], rows[2][4]) == ("NaN", "Infinity")
    assert (rows[3][0], rows[3][4]) == ("1e+22", "-Infinity")
    assert (rows[4][0], rows[4][4]) == ("1e-7", "0.00001")
    assert (rows[5][0], rows[5][4]) == ("-2.5e-10", "1.5e+300")


def test_custom_time_formatter():
    ds = Dataset(label="t", data=[_datum(0, 1, sec=3, nsec=500_000_000, stamp=Time(2))])
    out = generate_csv([ds], "timestamp", format_time=lambda t: f"{t.to_seconds():.1f}")
    assert out.split("\n")[1] == "0,3.5,2.0,t,1"


def test_fields_with_delimiters_are_quoted():
    ds = Dataset(label="/a,b", data=[_datum(1, 'say "hi"\nbye')])
    out = generate_csv([ds], "index")

    rows = list(csv.reader(io.StringIO(out)))
    assert len(rows) == 2
    assert rows[1] == ["1", "1.000000000", "", "/a,b", 'say "hi"\nbye']
    assert '"/a,b"' in out


def test_no_trailing_newline():
    ds = Dataset(data=[_datum(1, 1)])
    assert not generate_csv([ds], "index").endswith("\n")
