"""Lineup rule enforcement and slot assignment validation."""

from typing import Dict, Optional, Tuple

from src.team_builder.config import POSITION_COMPATIBILITY
from src.team_builder.lineup_state import Lineup
from src.team_builder.player_store import PlayerStore


class ValidationError(Exception):
    """Raised when a lineup edit or a saved team violates the rules."""

    pass


def is_position_compatible(player_position: str, slot_position: str) -> bool:
    """Whether a player of *player_position* may fill a *slot_position* slot."""
    return slot_position in POSITION_COMPATIBILITY.get(player_position, [])


class LineupRules:
    """Enforces slot assignment rules for a lineup."""

    def __init__(self, lineup: Lineup, player_store: PlayerStore):
        self.lineup = lineup
        self.player_store = player_store

    def validate_assignment(
        self, slot_id: str, player_id: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a player may be placed in a slot.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Does the slot exist in this formation?
        slot = self.lineup.get_slot(slot_id)
        if slot is None:
            return (
                False,
                f"Slot {slot_id} does not exist in formation "
                f"{self.lineup.formation_name}",
            )

        # Check 2: Does the player exist?
        player = self.player_store.get_player_by_id(player_id)
        if player is None:
            return False, f"Player {player_id} not found in player database"

        # Check 3: Can the player play this position?
        if not is_position_compatible(player.position, slot.position):
            return (
                False,
                f"{player.name} ({player.position}) cannot play {slot.position}",
            )

        # Check 4: One slot per player
        current = self.lineup.find_player_slot(player_id)
        if current is not None and current.slot_id != slot_id:
            return (
                False,
                f"{player.name} is already placed in slot {current.slot_id}",
            )

        return True, None

    def validate_move(
        self, from_slot_id: str, to_slot_id: str
    ) -> Tuple[bool, Optional[str]]:
        """Validate moving the player in *from_slot_id* to *to_slot_id*."""
        from_slot = self.lineup.get_slot(from_slot_id)
        if from_slot is None:
            return False, f"Slot {from_slot_id} does not exist"
        if not from_slot.is_filled:
            return False, f"Slot {from_slot_id} is empty"

        to_slot = self.lineup.get_slot(to_slot_id)
        if to_slot is None:
            return False, f"Slot {to_slot_id} does not exist"

        player = self.player_store.get_player_by_id(from_slot.player_id)
        if player is None:
            return False, f"Player {from_slot.player_id} not found in player database"

        if not is_position_compatible(player.position, to_slot.position):
            return (
                False,
                f"{player.name} ({player.position}) cannot play {to_slot.position}",
            )

        return True, None


def validate_team_fields(fields: Dict) -> Tuple[bool, Optional[str]]:
    """
    Validate the saved team fields present in *fields*.

    Returns:
        (is_valid, error_message) - (True, None) if valid
    """
    if "name" in fields:
        name = fields["name"]
        if not isinstance(name, str) or not name.strip():
            return False, "Team name must be a non-empty string"

    if "formation" in fields:
        formation = fields["formation"]
        if not isinstance(formation, str) or not formation:
            return False, "Formation must be a non-empty string"

    if "power_score" in fields:
        score = fields["power_score"]
        if isinstance(score, bool) or not isinstance(score, int):
            return False, f"Power score must be an integer, got {score!r}"

    if "notes" in fields and not isinstance(fields["notes"], str):
        return False, "Notes must be a string"

    if "players" in fields:
        players = fields["players"]
        if not isinstance(players, list):
            return False, "Players must be a list of slot bindings"
        for binding in players:
            if not isinstance(binding, dict) or not isinstance(
                binding.get("position_id"), str
            ):
                return False, f"Invalid slot binding: {binding!r}"
            player_id = binding.get("player_id")
            if player_id is not None and (
                isinstance(player_id, bool) or not isinstance(player_id, int)
            ):
                return False, f"Invalid player id in binding: {binding!r}"

    return True, None
