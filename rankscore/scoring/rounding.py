"""Half-up rounding at a fixed number of decimal places.

Used by the legacy rounded hot score. Rounding inspects the signed
fractional part of the scaled value, so negative values whose fraction is
non-zero always round toward negative infinity.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from .validation import validate_count, validate_fraction, validate_real, validate_real_array

# Largest places for which 10**places is a finite double
MAX_PLACES = 308


def round_half_up(value: float, round_on: float = 0.5, places: int = 7) -> float:
    """Round value to `places` decimals, rounding up from `round_on`.

    scaled = value * 10**places
    result = ceil(scaled) / 10**places   if frac(scaled) >= round_on
             floor(scaled) / 10**places  otherwise

    Args:
        value: Value to round
        round_on: Fraction at or above which the scaled value rounds up
        places: Number of decimal places to keep

    Returns:
        Rounded value; non-finite or overflowing values are returned unchanged

    Raises:
        ValidationError: If value is not a number, round_on is outside [0, 1]
            or places is outside [0, MAX_PLACES]
    """
    value = validate_real(value, "value")
    round_on = validate_fraction(round_on, "round_on")
    places = validate_count(places, "places", maximum=MAX_PLACES)

    scale = math.pow(10, places)
    scaled = scale * value
    if not math.isfinite(scaled):
        return value

    frac, _ = math.modf(scaled)
    if frac >= round_on:
        rounded = math.ceil(scaled)
    else:
        rounded = math.floor(scaled)
    return rounded / scale


def round_half_up_array(
    values: NDArray[np.float64],
    round_on: float = 0.5,
    places: int = 7,
) -> NDArray[np.float64]:
    """Element-wise round_half_up."""
    values = validate_real_array(values, "values")
    round_on = validate_fraction(round_on, "round_on")
    places = validate_count(places, "places", maximum=MAX_PLACES)

    scale = math.pow(10, places)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = scale * values
        frac, _ = np.modf(scaled)
        rounded = np.where(frac >= round_on, np.ceil(scaled), np.floor(scaled)) / scale
    return np.where(np.isfinite(scaled), rounded, values)


__all__ = ["MAX_PLACES", "round_half_up", "round_half_up_array"]
