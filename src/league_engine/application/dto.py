"""
Data Transfer Objects

Flat views of games and drafts for API responses and notifications.
"""

from dataclasses import dataclass
from typing import Optional

from ..domain.entities.draft import Draft
from ..domain.entities.game import Game


@dataclass
class GameSummaryDTO:
    """Game data for display"""
    game_id: str
    name: str
    phase: str  # GamePhase.value
    total_participants: int
    max_participants: int
    available_spots: int
    invitation_code: Optional[str] = None

    @property
    def is_full(self) -> bool:
        return self.available_spots == 0

    @classmethod
    def from_domain(cls, game: Game, available_spots: int) -> "GameSummaryDTO":
        """Convert from domain Game entity"""
        return cls(
            game_id=game.game_id,
            name=game.name,
            phase=game.phase.value,
            total_participants=game.total_participant_count,
            max_participants=game.max_participants,
            available_spots=available_spots,
            invitation_code=game.invitation_code,
        )


@dataclass
class DraftProgressDTO:
    """Draft progress for display"""
    draft_id: str
    game_id: str
    status: str  # DraftState.value
    round: int
    pick: int
    total_rounds: int
    participant_count: int
    remaining_picks: int
    is_complete: bool
    snake: bool
    current_picker_index: Optional[int] = None  # None once the draft is complete

    @property
    def total_picks(self) -> int:
        return self.total_rounds * self.participant_count

    @classmethod
    def from_domain(
        cls,
        draft: Draft,
        remaining_picks: int,
        is_complete: bool,
        current_picker_index: Optional[int],
    ) -> "DraftProgressDTO":
        """Convert from domain Draft entity"""
        return cls(
            draft_id=draft.draft_id,
            game_id=draft.game_id,
            status=draft.status.value,
            round=draft.current_round,
            pick=draft.current_pick,
            total_rounds=draft.total_rounds,
            participant_count=draft.participant_count,
            remaining_picks=remaining_picks,
            is_complete=is_complete,
            snake=draft.snake,
            current_picker_index=current_picker_index,
        )
