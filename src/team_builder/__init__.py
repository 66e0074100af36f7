from src.team_builder.formations import Formation, FormationSlot, get_formation
from src.team_builder.lineup_controller import LineupController
from src.team_builder.lineup_rules import LineupRules, ValidationError
from src.team_builder.lineup_state import Lineup, RosterSlot, SavedTeam
from src.team_builder.player_store import PlayerStore
from src.team_builder.team_comparison import compare_teams, team_power_stats
from src.team_builder.team_persistence import TeamPersistence
from src.team_builder.team_repository import TeamRepository

__all__ = [
    "Formation",
    "FormationSlot",
    "Lineup",
    "LineupController",
    "LineupRules",
    "PlayerStore",
    "RosterSlot",
    "SavedTeam",
    "TeamPersistence",
    "TeamRepository",
    "ValidationError",
    "compare_teams",
    "get_formation",
    "team_power_stats",
]
