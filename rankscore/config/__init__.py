from .ranking_params import (
    BayesianParams,
    DEFAULT_RANKING_PARAMS,
    HotParams,
    RankingParams,
    WilsonParams,
    get_ranking_params,
)

__all__ = [
    "BayesianParams",
    "DEFAULT_RANKING_PARAMS",
    "HotParams",
    "RankingParams",
    "WilsonParams",
    "get_ranking_params",
]
