import math

import numpy as np
import pytest

from chromastate.conversions.numbers import (
    UnitFloat,
    clamp01,
    format_number,
    round_half_up,
    round_to,
    to_number,
)


@pytest.mark.parametrize("value, expected", [
    (0.25, 0.25),
    (2, 1.0),
    (-1, 0.0),
    ("0.5", 0.5),
    (" 0.75 ", 0.75),
    ("abc", 0.0),
    ("", 0.0),
    (None, 0.0),
    (True, 1.0),
    (float("nan"), 0.0),
    (float("inf"), 1.0),
    (np.float32(0.5), 0.5),
    ([1], 0.0),
])
def test_clamp01(value, expected):
    assert clamp01(value) == expected


def test_clamp01_has_no_negative_zero():
    assert math.copysign(1.0, clamp01(-0.0)) == 1.0


def test_to_number():
    assert to_number("3") == 3.0
    assert to_number(None) == 0.0
    assert math.isnan(to_number("1.2.3"))
    assert math.isnan(to_number(object()))


@pytest.mark.parametrize("value, expected", [
    (0.5, 1),
    (1.5, 2),
    (2.5, 3),
    (-0.5, 0),
    (127.5, 128),
    (0.49, 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_round_to():
    assert round_to(0.125, 2) == 0.13
    assert round_to(0.996, 2) == 1.0
    assert round_to(1 / 3, 2) == 0.33


def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(0.0) == "0"
    assert format_number(0.5) == "0.5"
    assert format_number(0.33) == "0.33"


def test_unit_float():
    assert UnitFloat(3) == 1.0
    assert UnitFloat(-2) == 0.0
    assert UnitFloat("0.4") == 0.4
    assert repr(UnitFloat(0.5)) == "UnitFloat(0.5)"
