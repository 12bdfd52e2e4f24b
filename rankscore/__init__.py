# The MIT License (MIT)
# Copyright © 2025 Rankscore

# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the "Software"), to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO
# THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.

# Read version from pyproject.toml via importlib.metadata
try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("rankscore")
except Exception:
    __version__ = "0.0.0"

from .config import get_ranking_params
from .scoring import (
    ValidationError,
    WilsonInterval,
    beta_lower_bound,
    epoch_seconds,
    hot_score,
    hot_scores,
    round_half_up,
    star_score,
    star_scores,
    vote_score,
    vote_scores,
    wilson_interval,
    wilson_score,
    wilson_scores,
)

__all__ = [
    "__version__",
    "get_ranking_params",
    "ValidationError",
    "WilsonInterval",
    "beta_lower_bound",
    "epoch_seconds",
    "hot_score",
    "hot_scores",
    "round_half_up",
    "star_score",
    "star_scores",
    "vote_score",
    "vote_scores",
    "wilson_interval",
    "wilson_score",
    "wilson_scores",
]
