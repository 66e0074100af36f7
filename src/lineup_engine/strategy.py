"""Tactical strategy recommendations.

Aggregates the selected players into six team strengths and scores each
strategy archetype against them:

* **Sector strengths** (defense, midfield, attack) come from the overall
  rating of the players whose position code belongs to that sector.
* **Attribute strengths** (speed, technique, physical) come from every
  player's finer attributes, falling back to a fixed share of the rating
  when an attribute is missing.

Both are weighted by position category and normalized by the total weight,
so the strengths stay on the rating scale.
"""

import logging
from typing import List, Optional, Tuple

from src.lineup_engine.config import (
    ATTRIBUTE_FALLBACK_RATIOS,
    CATEGORY_WEIGHTS,
    DEFAULT_RECOMMENDATION_COUNT,
    MAX_COMPATIBILITY_SCORE,
    MIN_PLAYERS_FOR_RECOMMENDATION,
    STRATEGY_SCORE_SCALE,
)
from src.lineup_engine.models import Player, StrategyArchetype, StrategyScore, TeamStrengths
from src.lineup_engine.positions import get_strength_sector, get_weighting_category
from src.lineup_engine.power_score import round_half_up

logger = logging.getLogger(__name__)

# Declaration order is the tie-break order of the ranking.
STRATEGY_ARCHETYPES: Tuple[StrategyArchetype, ...] = (
    StrategyArchetype(
        key="possession",
        name="Possession",
        description="Dominate the game with short passing and patient build-up play.",
        icon="📊",
        weights={"technique": 0.5, "midfield": 0.3, "physical": 0.2},
    ),
    StrategyArchetype(
        key="counter_attack",
        name="Counter-Attack",
        description="Absorb pressure and strike quickly through the pace of your forwards.",
        icon="⚡",
        weights={"speed": 0.5, "attack": 0.3, "defense": 0.2},
    ),
    StrategyArchetype(
        key="high_press",
        name="High Press",
        description="Press the opponent relentlessly to win the ball back in their half.",
        icon="🔄",
        weights={"physical": 0.4, "midfield": 0.4, "speed": 0.2},
    ),
    StrategyArchetype(
        key="low_block",
        name="Low Block",
        description="Hold a compact defensive shape and close the space between the lines.",
        icon="🛡️",
        weights={"defense": 0.5, "physical": 0.3, "midfield": 0.2},
    ),
    StrategyArchetype(
        key="offensive",
        name="Offensive Play",
        description="Create as many chances as possible with direct play and incisive wingers.",
        icon="⚔️",
        weights={"attack": 0.5, "technique": 0.3, "speed": 0.2},
    ),
    StrategyArchetype(
        key="balanced",
        name="Balanced",
        description="A versatile approach suited to almost every match situation.",
        icon="⚖️",
        weights={
            "defense": 0.2,
            "midfield": 0.2,
            "attack": 0.2,
            "technique": 0.2,
            "speed": 0.1,
            "physical": 0.1,
        },
    ),
)


def _attribute(player: Player, name: str) -> float:
    value = getattr(player, name)
    if value is None:
        return player.rating * ATTRIBUTE_FALLBACK_RATIOS[name]
    return value


def compute_team_strengths(players: List[Player]) -> TeamStrengths:
    """Aggregate the selected players into team strengths.

    Players with an unknown position code are weighted as midfielders and
    add nothing to the defense/midfield/attack sectors, but still count
    towards speed, technique, physical and the total weight.
    """
    if not players:
        return TeamStrengths()

    totals = dict.fromkeys(TeamStrengths().as_dict(), 0.0)
    total_weight = 0.0

    for player in players:
        weight = CATEGORY_WEIGHTS[get_weighting_category(player.position)]
        total_weight += weight

        sector = get_strength_sector(player.position)
        if sector is not None:
            totals[sector] += player.rating * weight
        else:
            logger.debug(
                "Player %s has unknown position %r; no sector contribution",
                player.player_id, player.position,
            )

        totals["speed"] += _attribute(player, "pace") * weight
        totals["technique"] += (
            (_attribute(player, "dribbling") + _attribute(player, "passing")) / 2 * weight
        )
        totals["physical"] += (
            (_attribute(player, "physical") + _attribute(player, "defending")) / 2 * weight
        )

    if total_weight <= 0:
        return TeamStrengths()

    return TeamStrengths(
        **{dim: round_half_up(value / total_weight) for dim, value in totals.items()}
    )


def score_strategy(archetype: StrategyArchetype, strengths: TeamStrengths) -> int:
    """Compatibility of *archetype* with *strengths*, clamped to 0-100."""
    values = strengths.as_dict()
    raw = sum(values[dim] * weight for dim, weight in archetype.weights.items())
    scaled = round_half_up(raw * STRATEGY_SCORE_SCALE)
    return min(MAX_COMPATIBILITY_SCORE, max(0, scaled))


def rank_strategies(strengths: TeamStrengths) -> List[StrategyScore]:
    """Score every archetype and sort by descending compatibility.

    The sort is stable, so equal scores keep the archetype declaration
    order.
    """
    scores = [
        StrategyScore(archetype=archetype, compatibility_score=score_strategy(archetype, strengths))
        for archetype in STRATEGY_ARCHETYPES
    ]
    return sorted(scores, key=lambda s: s.compatibility_score, reverse=True)


def get_team_strategies(players: List[Player]) -> List[StrategyScore]:
    """All archetypes ranked for the given players."""
    return rank_strategies(compute_team_strengths(players))


def get_best_strategy(players: List[Player]) -> Optional[StrategyScore]:
    """The highest ranked archetype for the given players."""
    strategies = get_team_strategies(players)
    return strategies[0] if strategies else None


def recommend_strategies(
    players: List[Player],
    top_n: int = DEFAULT_RECOMMENDATION_COUNT,
    min_players: int = MIN_PLAYERS_FOR_RECOMMENDATION,
) -> List[StrategyScore]:
    """Top ranked archetypes, or an empty list below *min_players*.

    Scores for small lineups are well defined but not meaningful, so the
    recommendation panel only shows them once enough players are placed.
    """
    if len(players) < min_players:
        logger.debug(
            "Skipping recommendations: %d players placed, %d required",
            len(players), min_players,
        )
        return []
    return get_team_strategies(players)[:top_n]
