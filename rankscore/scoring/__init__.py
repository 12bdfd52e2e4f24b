"""Ranking score functions.

This package contains:
- Wilson score interval lower bound (confidence.py)
- Bayesian vote and star scores (bayesian.py)
- Time-decayed hot ranking (hot.py)
- Half-up rounding used by the legacy hot score (rounding.py)
- Input validation shared by all of the above (validation.py)
"""

from __future__ import annotations

from .bayesian import (
    beta_lower_bound,
    star_score,
    star_scores,
    vote_score,
    vote_scores,
)
from .confidence import wilson_interval, wilson_score, wilson_scores
from .hot import epoch_seconds, hot_score, hot_scores
from .rounding import round_half_up, round_half_up_array
from .types import ValidationError, WilsonInterval

__all__ = [
    "ValidationError",
    "WilsonInterval",
    "beta_lower_bound",
    "epoch_seconds",
    "hot_score",
    "hot_scores",
    "round_half_up",
    "round_half_up_array",
    "star_score",
    "star_scores",
    "vote_score",
    "vote_scores",
    "wilson_interval",
    "wilson_score",
    "wilson_scores",
]
