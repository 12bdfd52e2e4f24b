"""Ranking constants.

All formula constants live here so that every score function reads them
from one place. The models are frozen: the values are part of the ranking
contract and are not tuned at runtime.

IMPORTANT: Changing any of these values changes every stored score that
was computed with the previous value. Rankings mixing old and new scores
will be inconsistent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WilsonParams(BaseModel):
    """Wilson score interval parameters."""

    model_config = ConfigDict(frozen=True)

    z: float = Field(
        default=1.96,
        gt=0.0,
        description="Standard normal quantile. 1.96 gives a two-sided 95% confidence interval.",
    )


class BayesianParams(BaseModel):
    """Beta posterior parameters for vote and star scores."""

    model_config = ConfigDict(frozen=True)

    prior_successes: int = Field(
        default=1,
        ge=1,
        description="Pseudo-count added to upvotes (Laplace smoothing).",
    )
    prior_failures: int = Field(
        default=1,
        ge=1,
        description="Pseudo-count added to downvotes (Laplace smoothing).",
    )
    confidence_factor: float = Field(
        default=1.65,
        gt=0.0,
        description="Multiplier on the posterior standard deviation. 1.65 approximates a one-sided 95% bound.",
    )


class HotParams(BaseModel):
    """Time-decayed hot ranking parameters."""

    model_config = ConfigDict(frozen=True)

    epoch_offset_seconds: int = Field(
        default=1134028003,
        description="Reference epoch (2005-12-08T07:46:43Z) subtracted from the creation time.",
    )
    decay_seconds: float = Field(
        default=45000.0,
        gt=0.0,
        description="Seconds of recency worth one order of magnitude of net votes (12.5 hours).",
    )
    round_on: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Fraction at or above which the legacy rounded variant rounds up.",
    )
    round_places: int = Field(
        default=7,
        ge=0,
        le=15,
        description="Decimal places kept by the legacy rounded variant.",
    )


class RankingParams(BaseModel):
    """Master container for all ranking constants."""

    model_config = ConfigDict(frozen=True)

    wilson: WilsonParams = Field(default_factory=WilsonParams)
    bayesian: BayesianParams = Field(default_factory=BayesianParams)
    hot: HotParams = Field(default_factory=HotParams)


# Default instance for easy import
DEFAULT_RANKING_PARAMS = RankingParams()


def get_ranking_params() -> RankingParams:
    """Get the ranking constants."""
    return DEFAULT_RANKING_PARAMS


__all__ = [
    "WilsonParams",
    "BayesianParams",
    "HotParams",
    "RankingParams",
    "DEFAULT_RANKING_PARAMS",
    "get_ranking_params",
]
