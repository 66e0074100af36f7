from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Saved team storage
TEAMS_DIR = PROJECT_ROOT / "data" / "teams"

# Lineup defaults
DEFAULT_FORMATION = "4-3-3"
DEFAULT_TEAM_NAME = "My French XI"

# Which slot positions a player may fill, keyed by the player's own position
POSITION_COMPATIBILITY = {
    "GK": ["GK"],
    "CB": ["CB", "LB", "RB"],
    "LB": ["LB", "CB", "RB"],
    "RB": ["RB", "CB", "LB"],
    "CDM": ["CDM", "CM", "CAM"],
    "CM": ["CM", "CDM", "CAM"],
    "CAM": ["CAM", "CM", "CDM"],
    "LW": ["LW", "RW", "ST"],
    "RW": ["RW", "LW", "ST"],
    "ST": ["ST", "LW", "RW"],
}

# Number of saved teams shown next to the current lineup when comparing
COMPARISON_TEAM_LIMIT = 2
