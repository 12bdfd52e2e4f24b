"""Wilson score confidence interval for approval ratios.

The lower bound of the Wilson interval ranks items by how confident we are
that the true upvote proportion is high, rather than by the raw ratio. Few
votes give a wide interval and pull the bound toward 0, so an item with
1 upvote and 0 downvotes ranks below one with 596 up and 18 down.

For n = upvotes + downvotes, phat = upvotes / n and z = 1.96:

    bounds = (phat + z²/2n ± z·sqrt((phat(1-phat) + z²/4n) / n)) / (1 + z²/n)

Pure-downvote items are scored as the negated bound of the mirrored counts
so that they sort below items with no votes at all.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankscore.config.ranking_params import get_ranking_params

from .types import WilsonInterval
from .validation import validate_vote_arrays, validate_vote_counts


def _wilson_bounds(successes, n, z: float) -> Tuple:
    """Lower and upper Wilson bounds. Works on floats and arrays; n must be > 0."""
    phat = successes / n
    z2 = z * z
    center = phat + z2 / (2 * n)
    spread = z * np.sqrt((phat * (1 - phat) + z2 / (4 * n)) / n)
    denom = 1 + z2 / n
    return (center - spread) / denom, (center + spread) / denom


def wilson_interval(upvotes: int, downvotes: int) -> WilsonInterval:
    """Compute the 95% Wilson interval for the upvote proportion.

    Unlike wilson_score, no sign mirroring is applied: the interval always
    describes the upvote proportion itself.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes

    Returns:
        WilsonInterval; (0.0, 1.0) when there are no votes
    """
    up, down = validate_vote_counts(upvotes, downvotes)
    n = up + down
    if n == 0:
        return WilsonInterval(lower=0.0, upper=1.0)

    z = get_ranking_params().wilson.z
    lower, upper = _wilson_bounds(float(up), float(n), z)
    return WilsonInterval(lower=float(lower), upper=float(upper))


def wilson_score(upvotes: int, downvotes: int) -> float:
    """Compute the Wilson lower-bound ranking score.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes

    Returns:
        0.0 with no votes, -wilson_score(downvotes, 0) with only downvotes,
        otherwise the lower Wilson bound in [0, 1]
    """
    up, down = validate_vote_counts(upvotes, downvotes)
    if up == 0 and down == 0:
        return 0.0
    if up == 0:
        return -wilson_score(down, up)

    z = get_ranking_params().wilson.z
    lower, _ = _wilson_bounds(float(up), float(up + down), z)
    return float(lower)


def wilson_scores(
    upvotes: ArrayLike,
    downvotes: ArrayLike,
) -> NDArray[np.float64]:
    """Compute Wilson lower-bound scores element-wise.

    Args:
        upvotes: Array of upvote counts
        downvotes: Array of downvote counts (same shape)

    Returns:
        Array of scores, matching wilson_score for each pair
    """
    up, down = validate_vote_arrays(upvotes, downvotes)
    if up.size == 0:
        return np.array([], dtype=np.float64)

    mirrored = (up == 0) & (down > 0)
    successes = np.where(mirrored, down, up)
    n = up + down

    z = get_ranking_params().wilson.z
    with np.errstate(divide="ignore", invalid="ignore"):
        lower, _ = _wilson_bounds(successes, n, z)

    lower = np.where(n > 0, lower, 0.0)
    return np.where(mirrored, -lower, lower)


__all__ = [
    "wilson_interval",
    "wilson_score",
    "wilson_scores",
]
