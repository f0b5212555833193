"""Module for miscellaneous multi-use functions"""

__all__ = [
    'clamp', 'round_half_up', 'wrap', 'wrap_bounce', 'wrap_bound', 'wrap_cycle',
]

import math


def _check_bounds(minimum: float, maximum: float):
    if minimum > maximum:
        raise ValueError(
            f'Minimum value {minimum} cannot be greater than maximum value {maximum}.'
        )


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Restricts a value to the closed interval [minimum, maximum]"""
    return max(minimum, min(value, maximum))


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


def wrap_bound(value: float, minimum: float, maximum: float) -> float:
    """
    Saturates a value at the edges of [minimum, maximum].

    NaN values are returned unchanged.
    """
    _check_bounds(minimum, maximum)
    if math.isnan(value):
        return value

    return clamp(value, minimum, maximum)


def wrap_cycle(value: float, minimum: float, maximum: float) -> float:
    """
    Wraps a value cyclically into the half-open interval [minimum, maximum),
    e.g. 370 degrees of azimuth becomes 10 degrees.

    NaN and infinite values are returned unchanged.
    """
    _check_bounds(minimum, maximum)
    span = maximum - minimum
    if span == 0 or not math.isfinite(value):
        return value

    if minimum <= value < maximum:
        return value

    wrapped = minimum + (value - minimum) % span
    # Float modulo can land exactly on the open end
    if wrapped >= maximum:
        wrapped = minimum

    return wrapped


def wrap_bounce(value: float, minimum: float, maximum: float) -> float:
    """
    Reflects a value back into [minimum, maximum] at the edges, e.g. a
    latitude of 95 degrees becomes 85 degrees.

    NaN and infinite values are returned unchanged.
    """
    _check_bounds(minimum, maximum)
    span = maximum - minimum
    if not math.isfinite(value):
        return value

    if minimum <= value <= maximum:
        return value

    if span == 0:
        return minimum

    # Reflection is periodic over twice the span
    offset = (value - minimum) % (2 * span)
    if offset > span:
        offset = 2 * span - offset

    return minimum + offset


_WRAP_MODES = {
    'bound': wrap_bound,
    'cycle': wrap_cycle,
    'bounce': wrap_bounce,
}


def wrap(value: float, minimum: float, maximum: float, mode: str = 'bound') -> float:
    """
    Applies one of the wrapping policies by name.

    Args:
        value:
            The value to wrap

        minimum:
            The lower edge of the allowed range

        maximum:
            The upper edge of the allowed range

        mode:
            One of 'bound', 'cycle', 'bounce' or 'none'

    Returns:
        float
    """
    mode = mode.lower()
    if mode == 'none':
        return value

    if mode not in _WRAP_MODES:
        raise ValueError(
            f"Unrecognized wrap mode '{mode}'; must be one of "
            f"{', '.join(sorted(_WRAP_MODES))} or 'none'"
        )

    return _WRAP_MODES[mode](value, minimum, maximum)
