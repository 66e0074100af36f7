"""Lineup controller - orchestrates slot edits and score updates."""

import logging
from typing import List, Optional

from src.lineup_engine.config import DEFAULT_RECOMMENDATION_COUNT
from src.lineup_engine.models import Player, StrategyScore, TeamStrengths
from src.lineup_engine.power_score import compute_power_score
from src.lineup_engine.strategy import (
    compute_team_strengths,
    rank_strategies,
    recommend_strategies,
)
from src.team_builder.config import DEFAULT_FORMATION, DEFAULT_TEAM_NAME
from src.team_builder.formations import get_formation
from src.team_builder.lineup_rules import LineupRules, ValidationError, is_position_compatible
from src.team_builder.lineup_state import Lineup, SavedTeam
from src.team_builder.player_store import PlayerStore
from src.team_builder.team_repository import TeamRepository

logger = logging.getLogger(__name__)


class LineupController:
    """Main controller for lineup editing.

    Coordinates between LineupRules (validation), Lineup (slot bindings)
    and the scoring engine. Scores are recomputed from the current
    bindings on every read; nothing is cached.
    """

    def __init__(
        self,
        player_store: PlayerStore,
        formation_name: str = DEFAULT_FORMATION,
        team_name: str = DEFAULT_TEAM_NAME,
    ):
        self.player_store = player_store
        self.lineup = Lineup.create_new(get_formation(formation_name), team_name)
        self.rules = LineupRules(self.lineup, player_store)

    # ------------------------------------------------------------------
    # Slot edits
    # ------------------------------------------------------------------

    def add_player_to_position(self, slot_id: str, player_id: int):
        """Bind a player to a slot, replacing any player already there.

        Raises:
            ValidationError: If the slot or player is unknown, the player
                cannot play the slot's position, or is already placed.
        """
        is_valid, error_msg = self.rules.validate_assignment(slot_id, player_id)
        if not is_valid:
            logger.warning("Invalid assignment attempted: %s", error_msg)
            raise ValidationError(error_msg)

        slot = self.lineup.get_slot(slot_id)
        slot.player_id = player_id
        logger.info("Placed player %d in slot %s", player_id, slot_id)

    def remove_player_from_position(self, slot_id: str) -> Optional[int]:
        """Clear a slot; returns the id of the removed player, if any."""
        slot = self.lineup.get_slot(slot_id)
        if slot is None:
            raise ValidationError(f"Slot {slot_id} does not exist")

        removed = slot.player_id
        slot.player_id = None
        if removed is not None:
            logger.info("Removed player %d from slot %s", removed, slot_id)
        return removed

    def move_player(self, from_slot_id: str, to_slot_id: str):
        """Move a player between slots; a player in the target slot is unbound.

        Raises:
            ValidationError: If either slot is unknown, the source is
                empty, or the player cannot play the target position.
        """
        is_valid, error_msg = self.rules.validate_move(from_slot_id, to_slot_id)
        if not is_valid:
            logger.warning("Invalid move attempted: %s", error_msg)
            raise ValidationError(error_msg)

        if from_slot_id == to_slot_id:
            return

        from_slot = self.lineup.get_slot(from_slot_id)
        to_slot = self.lineup.get_slot(to_slot_id)
        if to_slot.is_filled:
            logger.info("Player %d displaced from slot %s", to_slot.player_id, to_slot_id)

        to_slot.player_id = from_slot.player_id
        from_slot.player_id = None
        logger.info("Moved player %d from %s to %s", to_slot.player_id, from_slot_id, to_slot_id)

    def auto_fill(self):
        """Fill every slot with the best available compatible player.

        Slots are filled in formation order; each gets the highest-rated
        player not yet placed whose position is compatible with the slot.
        Slots with no candidate are left empty.
        """
        ranked = sorted(
            self.player_store.get_all_players(), key=lambda p: p.rating, reverse=True
        )
        assigned = set()

        for slot in self.lineup.slots:
            slot.player_id = None
            for player in ranked:
                if player.player_id in assigned:
                    continue
                if is_position_compatible(player.position, slot.position):
                    slot.player_id = player.player_id
                    assigned.add(player.player_id)
                    break

        logger.info(
            "Auto-filled %d/%d slots for %s",
            self.lineup.filled_count(), len(self.lineup.slots), self.lineup.formation_name,
        )

    def reset(self):
        """Clear every slot binding."""
        self.lineup.clear()
        logger.info("Lineup reset")

    def change_formation(self, formation_name: str):
        """Switch formation; slot bindings start over empty."""
        formation = get_formation(formation_name)
        self.lineup.formation_name = formation.name
        self.lineup.slots = Lineup.create_new(formation, self.lineup.team_name).slots
        logger.info("Formation changed to %s", formation.name)

    @property
    def team_name(self) -> str:
        return self.lineup.team_name

    @team_name.setter
    def team_name(self, name: str):
        self.lineup.team_name = name

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    def get_selected_players(self) -> List[Player]:
        """Players currently bound to slots."""
        return self.player_store.resolve(self.lineup.assigned_player_ids())

    @property
    def power_score(self) -> int:
        return compute_power_score(self.get_selected_players())

    def get_team_strengths(self) -> TeamStrengths:
        return compute_team_strengths(self.get_selected_players())

    def get_strategies(self) -> List[StrategyScore]:
        """All strategy archetypes ranked for the current lineup."""
        return rank_strategies(self.get_team_strengths())

    def get_recommended_strategies(
        self, top_n: int = DEFAULT_RECOMMENDATION_COUNT
    ) -> List[StrategyScore]:
        """Top strategies, empty until enough players are placed."""
        return recommend_strategies(self.get_selected_players(), top_n=top_n)

    # ------------------------------------------------------------------
    # Saved teams
    # ------------------------------------------------------------------

    def save_team(
        self,
        repository: TeamRepository,
        name: Optional[str] = None,
        notes: str = "",
    ) -> SavedTeam:
        """Save the current lineup with its current power score.

        Raises:
            ValidationError: If the team name is blank.
        """
        team_name = self.lineup.team_name if name is None else name
        if not team_name or not team_name.strip():
            raise ValidationError("Please enter a team name")

        return repository.create_team(
            name=team_name,
            formation=self.lineup.formation_name,
            players=self.lineup.to_bindings(),
            power_score=self.power_score,
            notes=notes,
        )

    def load_team(self, team: SavedTeam):
        """Restore a saved team's formation and slot bindings.

        Bindings to slots missing from the formation, to unknown players or
        to players already placed are skipped.
        """
        self.change_formation(team.formation)
        self.lineup.team_name = team.name

        for binding in team.players:
            player_id = binding.get("player_id")
            if player_id is None:
                continue
            slot = self.lineup.get_slot(binding["position_id"])
            if (
                slot is None
                or self.player_store.get_player_by_id(player_id) is None
                or self.lineup.is_player_assigned(player_id)
            ):
                logger.warning(
                    "Skipping binding %s -> %s for team %d",
                    binding["position_id"], player_id, team.team_id,
                )
                continue
            slot.player_id = player_id

        logger.info("Loaded team %d (%s)", team.team_id, team.name)
