"""Bayesian lower-bound scores for binary votes and star ratings.

Votes are treated as draws from a Beta posterior with Laplace (+1)
smoothing. The score is the posterior mean minus 1.65 posterior standard
deviations, a normal approximation to a one-sided 95% lower bound:

    a = 1 + upvotes, b = 1 + downvotes
    score = a/(a+b) - 1.65 * sqrt(ab / ((a+b)²(a+b+1)))

The smoothing keeps the score finite with no votes at all. See "Bayesian
Methods for Hackers", chapter 4, for the derivation.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankscore.config.ranking_params import get_ranking_params

from .validation import (
    validate_positive,
    validate_rating_arrays,
    validate_rating_counts,
    validate_vote_arrays,
    validate_vote_counts,
)


def _beta_bound(a, b, confidence_factor: float):
    mu = a / (a + b)
    std_err = confidence_factor * np.sqrt((a * b) / ((a + b) ** 2 * (a + b + 1)))
    return mu - std_err


def beta_lower_bound(a: float, b: float) -> float:
    """Posterior mean minus scaled standard deviation of Beta(a, b).

    Args:
        a: Success pseudo-count (> 0)
        b: Failure pseudo-count (> 0)

    Returns:
        Lower-bound estimate of the success proportion
    """
    a = validate_positive(a, "a")
    b = validate_positive(b, "b")
    cf = get_ranking_params().bayesian.confidence_factor
    return float(_beta_bound(a, b, cf))


def vote_score(upvotes: int, downvotes: int) -> float:
    """Compute the Bayesian lower-bound score for up/down votes.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes

    Returns:
        Score in (-1, 1); about 0.0237 with no votes
    """
    up, down = validate_vote_counts(upvotes, downvotes)
    params = get_ranking_params().bayesian
    a = float(params.prior_successes + up)
    b = float(params.prior_failures + down)
    return float(_beta_bound(a, b, params.confidence_factor))


def star_score(rating_count: int, rating_sum: int) -> float:
    """Compute the Bayesian lower-bound score for accumulated ratings.

    rating_sum counts positive rating points and rating_count - rating_sum
    the negative ones, so star_score(n, s) == vote_score(s, n - s).

    Args:
        rating_count: Number of ratings (n)
        rating_sum: Accumulated positive rating points (s, 0 <= s <= n)

    Returns:
        Score in (-1, 1)
    """
    n, s = validate_rating_counts(rating_count, rating_sum)
    params = get_ranking_params().bayesian
    a = float(params.prior_successes + s)
    b = float(params.prior_failures + n - s)
    return float(_beta_bound(a, b, params.confidence_factor))


def vote_scores(
    upvotes: ArrayLike,
    downvotes: ArrayLike,
) -> NDArray[np.float64]:
    """Compute vote scores element-wise.

    Args:
        upvotes: Array of upvote counts
        downvotes: Array of downvote counts (same shape)

    Returns:
        Array of scores, matching vote_score for each pair
    """
    up, down = validate_vote_arrays(upvotes, downvotes)
    if up.size == 0:
        return np.array([], dtype=np.float64)

    params = get_ranking_params().bayesian
    a = params.prior_successes + up
    b = params.prior_failures + down
    return _beta_bound(a, b, params.confidence_factor)


def star_scores(
    rating_counts: ArrayLike,
    rating_sums: ArrayLike,
) -> NDArray[np.float64]:
    """Compute star scores element-wise."""
    n, s = validate_rating_arrays(rating_counts, rating_sums)
    if n.size == 0:
        return np.array([], dtype=np.float64)

    params = get_ranking_params().bayesian
    a = params.prior_successes + s
    b = params.prior_failures + (n - s)
    return _beta_bound(a, b, params.confidence_factor)


__all__ = [
    "beta_lower_bound",
    "vote_score",
    "star_score",
    "vote_scores",
    "star_scores",
]
