from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

# Ratings export file name pattern (use .format(squad=...))
RATINGS_FILE_PATTERN = "{squad}_player_ratings.csv"
PLAYERS_OUTPUT_PATTERN = "players_{squad}.json"
LATEST_PLAYERS_FILE = "players_latest.json"
OUTPUT_FORMAT_VERSION = "1.0"

# Squad read when none is given on the command line
DEFAULT_SQUAD = "france"

# Columns every ratings export must provide
REQUIRED_COLUMNS = ["Name", "Position", "Club", "Rating"]

# Optional attribute columns -> player attribute names
ATTRIBUTE_COLUMNS = {
    "Pace": "pace",
    "Dribbling": "dribbling",
    "Passing": "passing",
    "Physical": "physical",
    "Defending": "defending",
}

IMAGE_COLUMN = "Image URL"

# Rating scale bounds
MIN_RATING = 0
MAX_RATING = 99
