"""
Participant Rules - Domain Service

Validation for creating a game and admitting participants. Rules are checked
in a fixed order and the first violation is returned.
"""

from typing import Collection, Hashable, Optional

from ..entities.game_phase import GamePhase
from ..entities.results import ValidationResult


class ParticipantRules:
    """
    Domain service for game membership rules.

    The creator is implicitly a participant: counts passed in here are totals
    that already include the creator exactly once.
    """

    MIN_PARTICIPANTS = 2
    MAX_PARTICIPANTS = 50

    def validate_game_creation(
        self,
        name: Optional[str],
        creator_id: Optional[Hashable],
        max_participants: int,
    ) -> ValidationResult:
        """Validate game creation parameters (name, creator, then capacity)"""
        if name is None or not name.strip():
            return ValidationResult.failure("Game name cannot be empty")
        if creator_id is None:
            return ValidationResult.failure("Game creator must be specified")
        if not self.MIN_PARTICIPANTS <= max_participants <= self.MAX_PARTICIPANTS:
            return ValidationResult.failure(
                f"Max participants must be between {self.MIN_PARTICIPANTS} and {self.MAX_PARTICIPANTS}"
            )
        return ValidationResult.success()

    def can_add_participant(
        self,
        phase: GamePhase,
        current_total: int,
        max_participants: int,
        candidate_id: Hashable,
        creator_id: Hashable,
        existing_participant_ids: Collection[Hashable],
    ) -> ValidationResult:
        """Check whether ``candidate_id`` may join the game.

        Args:
            phase: Current game phase
            current_total: Participants so far, including the creator
            max_participants: Game capacity
            candidate_id: User asking to join
            creator_id: Game creator
            existing_participant_ids: Participants other than the creator
        """
        if not phase.accepts_participants:
            return ValidationResult.failure("Cannot join a game that has already started")
        if candidate_id == creator_id:
            return ValidationResult.failure("Creator is automatically a participant")
        if candidate_id in existing_participant_ids:
            return ValidationResult.failure("User is already a participant")
        if current_total >= max_participants:
            return ValidationResult.failure("Game is full")
        return ValidationResult.success()

    def calculate_total_participants(self, explicit_participant_count: int, creator_already_in_list: bool) -> int:
        if creator_already_in_list:
            return explicit_participant_count
        return explicit_participant_count + 1

    def calculate_available_spots(self, max_participants: int, total_participants: int) -> int:
        return max(0, max_participants - total_participants)
