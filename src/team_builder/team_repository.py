"""Saved team repository - CRUD over named lineup snapshots."""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from src.team_builder.lineup_rules import ValidationError, validate_team_fields
from src.team_builder.lineup_state import SavedTeam
from src.team_builder.team_persistence import TeamPersistence

logger = logging.getLogger(__name__)


class TeamRepository:
    """In-memory store of saved teams.

    When a :class:`TeamPersistence` is supplied, existing team files are
    loaded at start-up and every create/update/delete is written through.
    """

    UPDATABLE_FIELDS = {"name", "formation", "players", "power_score", "notes"}

    def __init__(self, persistence: Optional[TeamPersistence] = None):
        self.persistence = persistence
        self._teams: Dict[int, SavedTeam] = {}

        if persistence is not None:
            for team in persistence.load_all_teams():
                self._teams[team.team_id] = team
            logger.info("Loaded %d saved teams", len(self._teams))

    def get_all_teams(self) -> List[SavedTeam]:
        return list(self._teams.values())

    def get_team_by_id(self, team_id: int) -> Optional[SavedTeam]:
        return self._teams.get(team_id)

    def create_team(
        self,
        name: str,
        formation: str,
        players: List[Dict],
        power_score: int,
        notes: str = "",
        team_id: Optional[int] = None,
    ) -> SavedTeam:
        """Create and store a saved team.

        Args:
            name: Team name (must not be blank).
            formation: Formation name, e.g. "4-3-3".
            players: Slot bindings ``[{"position_id": ..., "player_id": ...}]``.
            power_score: Power score captured at save time.
            notes: Free-form notes.
            team_id: Caller-supplied id; the next free id when omitted.

        Raises:
            ValidationError: If a field is invalid or *team_id* is taken.
        """
        fields = {
            "name": name,
            "formation": formation,
            "players": players,
            "power_score": power_score,
            "notes": notes,
        }
        is_valid, error = validate_team_fields(fields)
        if not is_valid:
            logger.warning("Invalid team rejected: %s", error)
            raise ValidationError(error)

        if team_id is None:
            team_id = self._next_team_id()
        elif team_id in self._teams:
            raise ValidationError(f"Team {team_id} already exists")

        team = SavedTeam(
            team_id=team_id,
            name=name.strip(),
            formation=formation,
            players=[dict(b) for b in players],
            power_score=power_score,
            notes=notes,
        )
        self._teams[team_id] = team
        if self.persistence is not None:
            self.persistence.save_team(team)

        logger.info("Created team %d: %s (power %d)", team_id, team.name, power_score)
        return team

    def update_team(self, team_id: int, **updates) -> Optional[SavedTeam]:
        """Apply a partial update; returns None when the team does not exist.

        Raises:
            ValidationError: On unknown fields or invalid values.
        """
        team = self._teams.get(team_id)
        if team is None:
            return None

        unknown = set(updates) - self.UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown team fields: {sorted(unknown)}")

        is_valid, error = validate_team_fields(updates)
        if not is_valid:
            logger.warning("Invalid update for team %d rejected: %s", team_id, error)
            raise ValidationError(error)

        if "name" in updates:
            updates["name"] = updates["name"].strip()
        if "players" in updates:
            updates["players"] = [dict(b) for b in updates["players"]]

        updated = replace(team, **updates)
        self._teams[team_id] = updated
        if self.persistence is not None:
            self.persistence.save_team(updated)

        logger.info("Updated team %d: %s", team_id, sorted(updates))
        return updated

    def delete_team(self, team_id: int) -> bool:
        if team_id not in self._teams:
            return False

        del self._teams[team_id]
        if self.persistence is not None:
            self.persistence.delete_team(team_id)

        logger.info("Deleted team %d", team_id)
        return True

    def _next_team_id(self) -> int:
        return max(self._teams, default=0) + 1
