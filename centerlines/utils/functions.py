"""Module for miscellaneous multi-use functions"""

__all__ = [
    'check_positive', 'round_half_up', 'wrap_angle'
]

import math

from centerlines.exceptions import ConfigurationError


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def check_positive(**values: float) -> None:
    """
    Raise a ConfigurationError naming the first option that is not a
    strictly positive number.

    Args:
        **values:
            Option names mapped to their configured values

    Returns:
        None
    """
    for name, value in values.items():
        if value is None or not value > 0:
            raise ConfigurationError(f'{name} must be greater than zero, got {value!r}')


def wrap_angle(delta: float) -> float:
    """Folds an absolute bearing difference (radians) onto the shortest angle"""
    delta = abs(delta)
    if delta > math.pi:
        delta = 2 * math.pi - delta
    return delta
