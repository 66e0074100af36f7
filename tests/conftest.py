"""Shared fixtures for the lineup builder test suite."""

import pytest

from src.data_pipeline.cleaning import DataCleaner
from src.data_pipeline.transformation import DataTransformer
from src.team_builder.player_store import PlayerStore

RATINGS_CSV = """Name,Position,Club,Rating,Pace,Dribbling,Passing,Physical,Defending,Image URL
"Hugo Lloris",GK,"Tottenham Hotspur",88,,,,,,https://img.test/lloris.png
"Raphael Varane",CB,"Manchester United",86,78,65,70,82,87,
"Theo Hernandez",LWB,"AC Milan",85,93,84,76,80,76,
"N’Golo Kanté",DM,Chelsea,88,76,80,77,82,87,
"Antoine Griezmann",CAM,"Atletico Madrid",88,80,"87,0",86,72,58,
"Kylian Mbappé",LW,PSG,91,97,92,80,77,36,
"Karim Benzema",CF,"Real Madrid",89,76,86,81,77,38,
"Karim  Benzema",ST,"Real Madrid",84,70,80,75,70,30,
"Mystery Player",XY,Nowhere,75,,,,,,
"Unrated Player",CM,Somewhere,,,,,,,
"""


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def player_store():
    """The built-in French squad (ids 1-25)."""
    return PlayerStore.default()


@pytest.fixture(scope="module")
def cleaner():
    return DataCleaner()


@pytest.fixture(scope="module")
def transformer():
    return DataTransformer()


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

@pytest.fixture
def raw_dir(tmp_path):
    """Directory holding a small ``france_player_ratings.csv`` export."""
    data_dir = tmp_path / "raw"
    data_dir.mkdir()
    (data_dir / "france_player_ratings.csv").write_text(RATINGS_CSV, encoding="utf-8")
    return data_dir
