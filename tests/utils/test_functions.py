import math

import pytest

from centerlines.exceptions import ConfigurationError
from centerlines.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(2.5, 0) == 3.
    assert round_half_up(3.5, 0) == 4.

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.55, 1) == -1.5


def test_check_positive():
    check_positive(a=1., b=0.001)

    with pytest.raises(ConfigurationError, match='b must be greater than zero'):
        check_positive(a=1., b=0.)

    for value in (-1., None, math.nan):
        with pytest.raises(ConfigurationError):
            check_positive(value=value)


def test_wrap_angle():
    assert wrap_angle(0.5) == 0.5
    assert wrap_angle(-0.5) == 0.5
    assert wrap_angle(math.pi) == math.pi
    assert wrap_angle(2 * math.pi - 0.1) == pytest.approx(0.1)
    assert wrap_angle(-(2 * math.pi - 0.1)) == pytest.approx(0.1)
