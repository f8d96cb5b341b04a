"""
Team Roster - Domain Service

Roster composition rules. Works on the active partition of a roster only:
callers filter out historical slots before calling in.
"""

from typing import Collection, Hashable, Iterable, Optional

from ..entities.results import ValidationResult


class TeamRoster:
    """Domain service for roster add/remove and position assignment"""

    DEFAULT_MAX_PLAYERS = 10

    def can_add_player(
        self,
        active_player_ids: Collection[Hashable],
        candidate_player_id: Optional[Hashable],
        occupied_positions: Collection[int],
        requested_position: int,
        max_roster_size: int = DEFAULT_MAX_PLAYERS,
    ) -> ValidationResult:
        """Check whether a player may join the roster at ``requested_position``.

        Order: missing id, duplicate, capacity, position range, position taken.
        """
        if candidate_player_id is None:
            return ValidationResult.failure("Player ID is required")
        if candidate_player_id in active_player_ids:
            return ValidationResult.failure("Player is already on the team")
        if len(active_player_ids) >= max_roster_size:
            return ValidationResult.failure(f"Team roster is full (max {max_roster_size})")
        if not self.is_valid_position(requested_position, len(active_player_ids)):
            return ValidationResult.failure(
                f"Position {requested_position} must be between 1 and {len(active_player_ids) + 1}"
            )
        if requested_position in occupied_positions:
            return ValidationResult.failure(f"Position {requested_position} is already taken")
        return ValidationResult.success()

    def validate_unique_positions(self, positions: Optional[Iterable[Optional[int]]]) -> ValidationResult:
        if not positions:
            return ValidationResult.success()

        seen = set()
        for position in positions:
            if position is None or position < 1:
                return ValidationResult.failure("All positions must be positive integers")
            if position in seen:
                return ValidationResult.failure(f"Duplicate position found: {position}")
            seen.add(position)
        return ValidationResult.success()

    def next_available_position(self, occupied_positions: Optional[Collection[int]]) -> int:
        """One past the highest occupied position; gaps are not refilled"""
        if not occupied_positions:
            return 1
        return max(occupied_positions) + 1

    def can_remove_player(
        self,
        active_player_ids: Collection[Hashable],
        player_id: Optional[Hashable],
        minimum_roster_size: int = 0,
    ) -> ValidationResult:
        if player_id is None:
            return ValidationResult.failure("Player ID is required")
        if player_id not in active_player_ids:
            return ValidationResult.failure("Player is not on the team")
        if len(active_player_ids) <= minimum_roster_size:
            return ValidationResult.failure(
                f"Cannot remove player - minimum roster size is {minimum_roster_size}"
            )
        return ValidationResult.success()

    def is_valid_position(self, position: int, current_roster_size: int) -> bool:
        """A position may fill any existing slot or the next new one"""
        return 1 <= position <= current_roster_size + 1
