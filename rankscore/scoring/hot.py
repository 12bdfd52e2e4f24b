"""Time-decayed hot ranking.

Combines the order of magnitude of the net vote count with the creation
time, so that newer items outrank older ones with similar votes:

    s = upvotes - downvotes
    score = sign(s) * log10(max(|s|, 1)) + (epoch_seconds - 1134028003) / 45000

Every 45000 seconds (12.5 hours) of recency is worth as much as a tenfold
increase in net votes. The reference epoch 1134028003 is
2005-12-08T07:46:43Z; items created before it get a negative time term.

The raw score is the default. The rounded variant (7 decimal places,
half-up) is kept for callers that compare against scores stored by the
legacy implementation.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankscore.config.ranking_params import get_ranking_params

from .rounding import round_half_up, round_half_up_array
from .validation import (
    validate_same_shape,
    validate_timestamp,
    validate_timestamp_array,
    validate_vote_arrays,
    validate_vote_counts,
)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MICROSECONDS_PER_SECOND = 1_000_000


def epoch_seconds(created_at: datetime) -> int:
    """Whole seconds since 1970-01-01T00:00:00Z, truncated toward zero.

    Naive datetimes are interpreted as UTC.
    """
    ts = validate_timestamp(created_at)
    delta = ts - UNIX_EPOCH
    micros = (delta.days * 86400 + delta.seconds) * MICROSECONDS_PER_SECOND + delta.microseconds

    # Integer arithmetic only; // alone would floor pre-1970 timestamps
    seconds = abs(micros) // MICROSECONDS_PER_SECOND
    return seconds if micros >= 0 else -seconds


def hot_score(
    upvotes: int,
    downvotes: int,
    created_at: datetime,
    rounded: bool = False,
) -> float:
    """Compute the hot ranking score.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes
        created_at: Creation time of the item (naive means UTC)
        rounded: Round half-up to 7 decimal places (legacy behaviour)

    Returns:
        Unbounded score; higher is hotter
    """
    up, down = validate_vote_counts(upvotes, downvotes)
    params = get_ranking_params().hot

    s = float(up - down)
    order = math.log10(max(abs(s), 1.0))
    if s > 0:
        sign = 1.0
    elif s < 0:
        sign = -1.0
    else:
        sign = 0.0

    seconds = epoch_seconds(created_at) - params.epoch_offset_seconds
    score = sign * order + seconds / params.decay_seconds

    if rounded:
        return round_half_up(score, params.round_on, params.round_places)
    return score


def hot_scores(
    upvotes: ArrayLike,
    downvotes: ArrayLike,
    timestamps: ArrayLike,
    rounded: bool = False,
) -> NDArray[np.float64]:
    """Compute hot scores element-wise.

    Args:
        upvotes: Array of upvote counts
        downvotes: Array of downvote counts
        timestamps: Array of Unix creation timestamps in seconds
        rounded: Round half-up to 7 decimal places (legacy behaviour)

    Returns:
        Array of scores, matching hot_score for each item
    """
    up, down = validate_vote_arrays(upvotes, downvotes)
    ts = validate_timestamp_array(timestamps)
    validate_same_shape(upvotes=up, downvotes=down, timestamps=ts)
    if up.size == 0:
        return np.array([], dtype=np.float64)

    params = get_ranking_params().hot
    net = up - down
    order = np.log10(np.maximum(np.abs(net), 1.0))
    seconds = np.trunc(ts) - params.epoch_offset_seconds
    scores = np.sign(net) * order + seconds / params.decay_seconds

    if rounded:
        return round_half_up_array(scores, params.round_on, params.round_places)
    return scores


__all__ = [
    "UNIX_EPOCH",
    "epoch_seconds",
    "hot_score",
    "hot_scores",
]
