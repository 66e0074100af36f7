"""Side-by-side comparison of saved teams."""

import logging
from typing import Dict, List, Optional

import pandas as pd

from src.lineup_engine.config import MAX_COMPATIBILITY_SCORE
from src.lineup_engine.strategy import compute_team_strengths
from src.team_builder.config import COMPARISON_TEAM_LIMIT
from src.team_builder.lineup_state import SavedTeam
from src.team_builder.player_store import PlayerStore

logger = logging.getLogger(__name__)

STAT_NAMES = ("Attack", "Midfield", "Defense", "Chemistry")


def team_power_stats(team: SavedTeam, player_store: PlayerStore) -> List[Dict]:
    """Comparison bars for a saved team.

    Attack, Midfield and Defense come from the team strengths of the saved
    players; Chemistry is the power score captured when the team was saved.
    Each value is capped at 100.
    """
    strengths = compute_team_strengths(player_store.resolve(team.player_ids()))
    values = {
        "Attack": strengths.attack,
        "Midfield": strengths.midfield,
        "Defense": strengths.defense,
        "Chemistry": team.power_score,
    }
    return [
        {"name": name, "value": min(MAX_COMPATIBILITY_SCORE, values[name])}
        for name in STAT_NAMES
    ]


def compare_teams(
    teams: List[SavedTeam],
    player_store: PlayerStore,
    current: Optional[SavedTeam] = None,
    limit: int = COMPARISON_TEAM_LIMIT,
) -> pd.DataFrame:
    """Build the comparison table.

    Args:
        teams: Saved teams; the first *limit* are compared.
        player_store: Player lookup used to resolve the saved bindings.
        current: The lineup being edited, shown first when given.
        limit: Number of saved teams to include.

    Returns:
        DataFrame indexed by Formation, Power and the stat names, with one
        column per team (team names, suffixed with the id when repeated).
    """
    selected = ([current] if current is not None else []) + list(teams[:limit])

    columns: Dict[str, Dict] = {}
    for team in selected:
        column = team.name if team.name not in columns else f"{team.name} (#{team.team_id})"
        stats = {s["name"]: s["value"] for s in team_power_stats(team, player_store)}
        columns[column] = {"Formation": team.formation, "Power": team.power_score, **stats}

    index = ["Formation", "Power", *STAT_NAMES]
    table = pd.DataFrame(columns, index=index)
    logger.debug("Compared %d teams", len(selected))
    return table
