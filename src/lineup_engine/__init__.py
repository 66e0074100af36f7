from src.lineup_engine.models import (
    Player,
    StrategyArchetype,
    StrategyScore,
    TeamStrengths,
)
from src.lineup_engine.power_score import compute_power_score
from src.lineup_engine.strategy import (
    STRATEGY_ARCHETYPES,
    compute_team_strengths,
    get_best_strategy,
    get_team_strategies,
    rank_strategies,
    recommend_strategies,
)

__all__ = [
    "Player",
    "STRATEGY_ARCHETYPES",
    "StrategyArchetype",
    "StrategyScore",
    "TeamStrengths",
    "compute_power_score",
    "compute_team_strengths",
    "get_best_strategy",
    "get_team_strategies",
    "rank_strategies",
    "recommend_strategies",
]
