"""Lineup state data models - slot bindings and saved teams."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from src.team_builder.formations import Formation, FormationSlot


@dataclass
class RosterSlot:
    """A formation slot, optionally bound to a player."""

    slot_id: str
    position: str
    left: str
    top: str
    player_id: Optional[int] = None

    @classmethod
    def from_formation_slot(cls, slot: FormationSlot) -> "RosterSlot":
        return cls(
            slot_id=slot.slot_id,
            position=slot.position,
            left=slot.left,
            top=slot.top,
        )

    @property
    def is_filled(self) -> bool:
        return self.player_id is not None


@dataclass
class Lineup:
    """The lineup being edited: team name, formation and slot bindings."""

    team_name: str
    formation_name: str
    slots: List[RosterSlot] = field(default_factory=list)

    @classmethod
    def create_new(cls, formation: Formation, team_name: str) -> "Lineup":
        """Factory method to create an empty lineup for a formation."""
        return cls(
            team_name=team_name,
            formation_name=formation.name,
            slots=[RosterSlot.from_formation_slot(s) for s in formation.slots],
        )

    def get_slot(self, slot_id: str) -> Optional[RosterSlot]:
        for slot in self.slots:
            if slot.slot_id == slot_id:
                return slot
        return None

    def find_player_slot(self, player_id: int) -> Optional[RosterSlot]:
        """Slot the player is bound to, if any."""
        for slot in self.slots:
            if slot.player_id == player_id:
                return slot
        return None

    def is_player_assigned(self, player_id: int) -> bool:
        return self.find_player_slot(player_id) is not None

    def assigned_player_ids(self) -> List[int]:
        """Player ids bound to slots, in slot order."""
        return [slot.player_id for slot in self.slots if slot.is_filled]

    def filled_count(self) -> int:
        return len(self.assigned_player_ids())

    def clear(self):
        for slot in self.slots:
            slot.player_id = None

    def to_bindings(self) -> List[Dict]:
        """Slot bindings in the saved-team format."""
        return [
            {"position_id": slot.slot_id, "player_id": slot.player_id}
            for slot in self.slots
        ]


@dataclass
class SavedTeam:
    """A named lineup snapshot; the power score is captured at save time."""

    team_id: int
    name: str
    formation: str
    players: List[Dict] = field(default_factory=list)
    power_score: int = 0
    notes: str = ""
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def player_ids(self) -> List[int]:
        return [b["player_id"] for b in self.players if b.get("player_id") is not None]
