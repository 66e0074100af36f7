"""Build the best lineup for a formation and print its scores.

Usage:
    python -m src.team_builder.run_builder [formation] [players_json]

Examples:
    python -m src.team_builder.run_builder 4-3-3
    python -m src.team_builder.run_builder 3-5-2 data/processed/players_france.json
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.logging_config import setup_logging
from src.team_builder.config import DEFAULT_FORMATION
from src.team_builder.lineup_controller import LineupController
from src.team_builder.player_store import PlayerStore

logger = logging.getLogger(__name__)


def build_lineup(
    formation_name: str = DEFAULT_FORMATION,
    players_file: Optional[Path] = None,
) -> LineupController:
    """Auto-fill a lineup from the given (or built-in) player data."""
    store = PlayerStore.from_json(players_file) if players_file else PlayerStore.default()
    controller = LineupController(store, formation_name=formation_name)
    controller.auto_fill()
    return controller


def format_report(controller: LineupController) -> str:
    lines = [f"{controller.team_name} ({controller.lineup.formation_name})"]
    for slot in controller.lineup.slots:
        player = (
            controller.player_store.get_player_by_id(slot.player_id)
            if slot.is_filled else None
        )
        label = f"{player.name} ({player.rating})" if player else "-"
        lines.append(f"  {slot.slot_id:<5} {label}")

    lines.append(f"Power: {controller.power_score}/100")
    strengths = controller.get_team_strengths().as_dict()
    lines.append("Strengths: " + ", ".join(f"{k}={v}" for k, v in strengths.items()))
    for rank, strategy in enumerate(controller.get_recommended_strategies(), start=1):
        lines.append(
            f"  {rank}. {strategy.archetype.icon} {strategy.name} "
            f"{strategy.compatibility_score}%"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    setup_logging()

    formation = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_FORMATION
    players_file = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        print(format_report(build_lineup(formation, players_file)))
    except Exception:
        logger.exception("Lineup build failed")
        sys.exit(1)
