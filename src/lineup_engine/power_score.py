"""Team power score.

The power score condenses a lineup into a single integer that reflects the
average quality of the selected players, how that quality is spread across
the position categories, and how complete the lineup is.
"""

import logging
import math
from typing import Dict, List

from src.lineup_engine.config import CATEGORY_WEIGHTS, FULL_SQUAD_SIZE
from src.lineup_engine.models import Player
from src.lineup_engine.positions import get_position_category

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def compute_power_score(players: List[Player]) -> int:
    """Compute the power score of the selected players.

    Formula::

        final_score = sum(category_mean * weight) / sum(weight)
        weight      = CATEGORY_WEIGHTS[category] * players_in_category
        power       = round(final_score * len(players) / 11)

    The completeness factor is not capped, so more than eleven players can
    push the score above 100.

    Args:
        players: The players currently bound to lineup slots (any order).

    Returns:
        The power score, 0 for an empty lineup.
    """
    if not players:
        return 0

    base_score = sum(p.rating for p in players) / len(players)

    by_category: Dict[str, List[int]] = {category: [] for category in CATEGORY_WEIGHTS}
    for player in players:
        category = get_position_category(player.position)
        if category is None:
            logger.debug(
                "Player %s has unknown position %r; excluded from category balance",
                player.player_id, player.position,
            )
            continue
        by_category[category].append(player.rating)

    weighted_score = 0.0
    total_weight = 0.0
    for category, ratings in by_category.items():
        if not ratings:
            continue
        position_rating = sum(ratings) / len(ratings)
        weight = CATEGORY_WEIGHTS[category] * len(ratings)
        weighted_score += position_rating * weight
        total_weight += weight

    final_score = weighted_score / total_weight if total_weight > 0 else base_score
    completeness_bonus = len(players) / FULL_SQUAD_SIZE

    return round_half_up(final_score * completeness_bonus)
