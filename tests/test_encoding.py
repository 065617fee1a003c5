import math

import pytest

from app.schemas.stats import StatsResponse
from app.utils.encoding import encode_stats, format_float


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.3333333333333335, "3.3333333333333335"),
        (3.8, "3.8"),
        (0.0, "0"),
        (-0.0, "0"),
        (4.0, "4"),
        (-2.5, "-2.5"),
        (100.0, "100"),
        (1e16, "10000000000000000"),
        (0.00001, "0.00001"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.25e-10, "1.25e-10"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
    ],
)
def test_format_float(value, expected):
    assert format_float(value) == expected


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_float_rejects_non_finite(value):
    with pytest.raises(ValueError):
        format_float(value)


def test_encode_stats():
    assert encode_stats(StatsResponse(avg=3.3333333333333335, totalCount=210)) == (
        b'{"avg":3.3333333333333335,"totalCount":210}'
    )


def test_encode_empty_stats():
    assert encode_stats(StatsResponse(avg=0, totalCount=0)) == b'{"avg":0,"totalCount":0}'
