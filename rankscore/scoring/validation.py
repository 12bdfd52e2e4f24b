"""Input validation for the score functions.

All validation happens BEFORE a value reaches a formula. Invalid input is
logged and rejected; nothing is clamped or coerced into range.

Rejected:
- None, bool and non-integral counts
- Negative counts
- Rating sums larger than the rating count
- Timestamps that are not datetimes
- NaN/Inf or mismatched shapes in array input
"""

from __future__ import annotations

import logging
import math
import operator
from datetime import datetime, timezone
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .types import ValidationError

logger = logging.getLogger(__name__)


def _reject(name: str, message: str) -> ValidationError:
    logger.debug("Rejected %s: %s", name, message)
    return ValidationError(message)


# ─────────────────────────────────────────────────────────────────────────────
# Scalars
# ─────────────────────────────────────────────────────────────────────────────


def validate_count(value: object, name: str = "count", maximum: int | None = None) -> int:
    """Validate a non-negative integer count.

    Accepts ``int`` and anything implementing ``__index__`` (NumPy integer
    scalars included). ``bool`` is rejected even though it subclasses int.

    Args:
        value: Raw count
        name: Name for error messages
        maximum: Optional inclusive upper bound

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not a non-negative integer or exceeds maximum
    """
    if value is None:
        raise _reject(name, f"{name} is None")
    if isinstance(value, (bool, np.bool_)):
        raise _reject(name, f"{name} must be an integer, got bool")

    try:
        count = operator.index(value)
    except TypeError:
        raise _reject(name, f"{name} must be an integer, got {type(value).__name__}") from None

    if count < 0:
        raise _reject(name, f"{name} must be >= 0, got {count}")
    if maximum is not None and count > maximum:
        raise _reject(name, f"{name} must be <= {maximum}, got {count}")
    return count


def validate_vote_counts(upvotes: object, downvotes: object) -> Tuple[int, int]:
    """Validate an (upvotes, downvotes) pair."""
    return validate_count(upvotes, "upvotes"), validate_count(downvotes, "downvotes")


def validate_rating_counts(rating_count: object, rating_sum: object) -> Tuple[int, int]:
    """Validate a (rating_count, rating_sum) pair.

    Raises:
        ValidationError: If either value is invalid or rating_sum > rating_count
    """
    n = validate_count(rating_count, "rating_count")
    s = validate_count(rating_sum, "rating_sum")
    if s > n:
        raise _reject("rating_sum", f"rating_sum {s} > rating_count {n}")
    return n, s


def validate_fraction(value: object, name: str = "fraction") -> float:
    """Validate a finite number in [0, 1]."""
    if value is None or isinstance(value, (bool, str, bytes)):
        raise _reject(name, f"{name} must be a number, got {value!r}")
    try:
        f = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise _reject(name, f"{name} must be a number, got {type(value).__name__}") from None

    if not math.isfinite(f):
        raise _reject(name, f"{name} is not finite")
    if not 0.0 <= f <= 1.0:
        raise _reject(name, f"{name} must be in [0, 1], got {f}")
    return f


def validate_positive(value: object, name: str = "value") -> float:
    """Validate a finite number > 0."""
    if value is None or isinstance(value, (bool, str, bytes)):
        raise _reject(name, f"{name} must be a number, got {value!r}")
    try:
        f = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise _reject(name, f"{name} must be a number, got {type(value).__name__}") from None

    if not math.isfinite(f):
        raise _reject(name, f"{name} is not finite")
    if f <= 0.0:
        raise _reject(name, f"{name} must be > 0, got {f}")
    return f


def validate_real(value: object, name: str = "value") -> float:
    """Validate a real number. NaN and infinities pass through."""
    if value is None or isinstance(value, (bool, str, bytes)):
        raise _reject(name, f"{name} must be a number, got {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise _reject(name, f"{name} must be a number, got {type(value).__name__}") from None


def validate_timestamp(value: object, name: str = "created_at") -> datetime:
    """Validate a creation timestamp and normalize it to UTC.

    Naive datetimes are interpreted as UTC. A bare ``date`` is rejected
    because it carries no time of day.

    Returns:
        Timezone-aware datetime in UTC
    """
    if not isinstance(value, datetime):
        raise _reject(name, f"{name} must be a datetime, got {type(value).__name__}")

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ─────────────────────────────────────────────────────────────────────────────
# Arrays
# ─────────────────────────────────────────────────────────────────────────────


def _as_float_array(values: ArrayLike, name: str, finite: bool = True) -> NDArray[np.float64]:
    arr = np.atleast_1d(np.asarray(values))
    # signed, unsigned or float only; bool and object arrays are rejected
    if arr.dtype.kind not in "iuf":
        raise _reject(name, f"{name} must be numeric, got dtype {arr.dtype}")

    out = arr.astype(np.float64)
    if finite and not np.all(np.isfinite(out)):
        raise _reject(name, f"{name} contains NaN or infinite values")
    return out


def validate_count_array(values: ArrayLike, name: str = "counts") -> NDArray[np.float64]:
    """Validate an array of non-negative integral counts.

    Whole-number floats such as 3.0 are accepted here, unlike validate_count:
    every array is converted to float64 before scoring, so a float array
    holding whole numbers carries the same counts as an int array.

    Returns:
        float64 array of the counts
    """
    arr = _as_float_array(values, name)
    if np.any(arr < 0):
        raise _reject(name, f"{name} contains negative counts")
    if np.any(arr != np.floor(arr)):
        raise _reject(name, f"{name} contains non-integral counts")
    return arr


def validate_timestamp_array(values: ArrayLike, name: str = "timestamps") -> NDArray[np.float64]:
    """Validate an array of Unix timestamps in seconds."""
    return _as_float_array(values, name)


def validate_real_array(values: ArrayLike, name: str = "values") -> NDArray[np.float64]:
    """Validate a numeric array. NaN and infinities pass through."""
    return _as_float_array(values, name, finite=False)


def validate_same_shape(**arrays: NDArray[np.float64]) -> None:
    """Require every keyword array to share one shape."""
    shapes = {name: arr.shape for name, arr in arrays.items()}
    if len(set(shapes.values())) > 1:
        detail = ", ".join(f"{name}={shape}" for name, shape in shapes.items())
        raise _reject("shape", f"array shapes differ: {detail}")


def validate_vote_arrays(
    upvotes: ArrayLike,
    downvotes: ArrayLike,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validate matching arrays of upvotes and downvotes."""
    up = validate_count_array(upvotes, "upvotes")
    down = validate_count_array(downvotes, "downvotes")
    validate_same_shape(upvotes=up, downvotes=down)
    return up, down


def validate_rating_arrays(
    rating_counts: ArrayLike,
    rating_sums: ArrayLike,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validate matching arrays of rating counts and rating sums."""
    n = validate_count_array(rating_counts, "rating_counts")
    s = validate_count_array(rating_sums, "rating_sums")
    validate_same_shape(rating_counts=n, rating_sums=s)
    if np.any(s > n):
        raise _reject("rating_sums", "rating_sums contains entries larger than rating_counts")
    return n, s


__all__ = [
    "validate_count",
    "validate_vote_counts",
    "validate_rating_counts",
    "validate_fraction",
    "validate_positive",
    "validate_real",
    "validate_timestamp",
    "validate_count_array",
    "validate_timestamp_array",
    "validate_real_array",
    "validate_same_shape",
    "validate_vote_arrays",
    "validate_rating_arrays",
]
