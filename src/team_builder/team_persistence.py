"""Team persistence - save and load saved teams to/from JSON files."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from src.team_builder.config import TEAMS_DIR
from src.team_builder.lineup_rules import validate_team_fields
from src.team_builder.lineup_state import SavedTeam

logger = logging.getLogger(__name__)


class TeamPersistence:
    """Stores each saved team as ``team_{id}.json`` in a directory."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = Path(storage_dir) if storage_dir is not None else TEAMS_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _team_path(self, team_id: int) -> Path:
        return self.storage_dir / f"team_{team_id}.json"

    def save_team(self, team: SavedTeam) -> Path:
        """Save a team to its JSON file.

        Args:
            team: The team to persist.

        Returns:
            Path to the saved file.
        """
        filepath = self._team_path(team.team_id)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self._team_to_dict(team), f, indent=2, ensure_ascii=False)

        logger.info(
            "Saved team %d (%s, %s, power %d) to %s",
            team.team_id, team.name, team.formation, team.power_score, filepath,
        )
        return filepath

    def load_team(self, team_id: int) -> Optional[SavedTeam]:
        """Load a team from its JSON file.

        Returns:
            SavedTeam if found and readable, None otherwise.
        """
        filepath = self._team_path(team_id)

        if not filepath.exists():
            logger.warning("Team file not found: %s", filepath)
            return None

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            return self._dict_to_team(data)
        except (ValueError, TypeError, KeyError, OSError) as e:
            logger.warning("Corrupt team file %s: %s", filepath, e)
            return None

    def load_all_teams(self) -> List[SavedTeam]:
        """Load every readable team file, ordered by team id."""
        teams = []
        for filepath in self.storage_dir.glob("team_*.json"):
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    teams.append(self._dict_to_team(json.load(f)))
            except (ValueError, TypeError, KeyError, OSError) as e:
                logger.warning("Skipping corrupt team file %s: %s", filepath, e)
                continue
        return sorted(teams, key=lambda t: t.team_id)

    def list_saved_teams(self) -> List[Dict]:
        """List saved teams with metadata, most recent first."""
        summaries = [
            {
                "team_id": team.team_id,
                "name": team.name,
                "formation": team.formation,
                "power_score": team.power_score,
                "created_at": team.created_at,
                "player_count": len(team.player_ids()),
            }
            for team in self.load_all_teams()
        ]
        return sorted(summaries, key=lambda x: x["created_at"], reverse=True)

    def delete_team(self, team_id: int) -> bool:
        """Delete a saved team file.

        Returns:
            True if deleted, False if not found.
        """
        filepath = self._team_path(team_id)
        if not filepath.exists():
            return False

        filepath.unlink()
        logger.info("Deleted team %d", team_id)
        return True

    def _team_to_dict(self, team: SavedTeam) -> Dict:
        """Convert SavedTeam to JSON-serializable dict."""
        return {
            "team_id": team.team_id,
            "name": team.name,
            "formation": team.formation,
            "players": [
                {"position_id": b["position_id"], "player_id": b.get("player_id")}
                for b in team.players
            ],
            "power_score": team.power_score,
            "notes": team.notes,
            "created_at": team.created_at,
        }

    def _dict_to_team(self, data: Dict) -> SavedTeam:
        """Reconstruct SavedTeam from dict.

        Raises:
            ValueError: If the record is not a valid saved team.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Team record must be an object, got {type(data).__name__}")

        team_id = data["team_id"]
        if isinstance(team_id, bool) or not isinstance(team_id, int):
            raise ValueError(f"Invalid team id {team_id!r}")
        if not isinstance(data["created_at"], str):
            raise ValueError(f"Invalid created_at for team {team_id}")

        fields = {k: data[k] for k in ("name", "formation", "players", "power_score")}
        fields["notes"] = data.get("notes", "")
        is_valid, error = validate_team_fields(fields)
        if not is_valid:
            raise ValueError(error)

        return SavedTeam(
            team_id=data["team_id"],
            name=data["name"],
            formation=data["formation"],
            players=data["players"],
            power_score=data["power_score"],
            notes=data.get("notes", ""),
            created_at=data["created_at"],
        )
