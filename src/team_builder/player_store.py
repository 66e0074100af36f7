"""Player reference store - read-only lookup over the selectable players."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from src.lineup_engine.models import Player

logger = logging.getLogger(__name__)

# (name, position, club, rating)
_FRANCE_SQUAD = [
    ("Hugo Lloris", "GK", "Tottenham Hotspur", 88),
    ("Mike Maignan", "GK", "AC Milan", 84),
    ("Lucas Hernandez", "LB", "Bayern Munich", 84),
    ("Theo Hernandez", "LB", "AC Milan", 85),
    ("Lucas Digne", "LB", "Aston Villa", 82),
    ("Raphael Varane", "CB", "Manchester United", 86),
    ("Dayot Upamecano", "CB", "Bayern Munich", 82),
    ("Presnel Kimpembe", "CB", "PSG", 83),
    ("William Saliba", "CB", "Arsenal", 80),
    ("Benjamin Pavard", "RB", "Bayern Munich", 82),
    ("Jules Koundé", "RB", "Barcelona", 84),
    ("N'Golo Kanté", "CDM", "Chelsea", 88),
    ("Aurélien Tchouaméni", "CDM", "Real Madrid", 82),
    ("Paul Pogba", "CM", "Juventus", 87),
    ("Adrien Rabiot", "CM", "Juventus", 83),
    ("Eduardo Camavinga", "CM", "Real Madrid", 80),
    ("Antoine Griezmann", "CAM", "Atletico Madrid", 88),
    ("Christopher Nkunku", "CAM", "RB Leipzig", 86),
    ("Kylian Mbappé", "LW", "PSG", 91),
    ("Kingsley Coman", "LW", "Bayern Munich", 85),
    ("Ousmane Dembélé", "RW", "Barcelona", 85),
    ("Moussa Diaby", "RW", "Bayer Leverkusen", 82),
    ("Karim Benzema", "ST", "Real Madrid", 89),
    ("Olivier Giroud", "ST", "AC Milan", 82),
    ("Marcus Thuram", "ST", "Borussia Mönchengladbach", 81),
]

_PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"


class PlayerStore:
    """In-memory player lookup keyed by player id."""

    def __init__(self, players: Iterable[Player]):
        self._players: Dict[int, Player] = {}
        for player in players:
            if player.player_id in self._players:
                raise ValueError(f"Duplicate player_id {player.player_id}")
            self._players[player.player_id] = player

    @classmethod
    def default(cls) -> "PlayerStore":
        """Store seeded with the built-in French squad (ids from 1)."""
        players = [
            Player(
                player_id=i,
                name=name,
                position=position,
                club=club,
                rating=rating,
                image_url=_PLACEHOLDER_IMAGE,
            )
            for i, (name, position, club, rating) in enumerate(_FRANCE_SQUAD, start=1)
        ]
        return cls(players)

    @classmethod
    def from_json(cls, path: Path) -> "PlayerStore":
        """Load players from a processed ``players_{squad}.json`` file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(
                f"No player data found at {path}. "
                "Run data pipeline first: "
                "python -m src.data_pipeline.run_update"
            )

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        try:
            players = [Player.from_dict(p) for p in data["players"]]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(
                f"Malformed player data file {path}: {e}. "
                "Re-run data pipeline to regenerate."
            ) from e

        logger.info("Loaded %d players from %s", len(players), path)
        return cls(players)

    def get_all_players(self) -> List[Player]:
        return list(self._players.values())

    def get_players_by_position(self, position: str) -> List[Player]:
        return [p for p in self._players.values() if p.position == position]

    def get_player_by_id(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def resolve(self, player_ids: Iterable[int]) -> List[Player]:
        """Players for the given ids, skipping ids that are not in the store."""
        players = []
        for pid in player_ids:
            player = self._players.get(pid)
            if player is None:
                logger.warning("Unknown player id %s skipped", pid)
                continue
            players.append(player)
        return players

    def __len__(self) -> int:
        return len(self._players)
