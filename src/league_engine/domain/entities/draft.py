"""
Draft Entity

Snapshot of a game's draft: run state plus the current round/pick cursor.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .draft_state import DraftState
from .pick_position import PickPosition


@dataclass
class Draft:
    """Draft of a single game"""
    game_id: str
    participant_count: int
    total_rounds: int
    draft_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: DraftState = DraftState.PENDING
    current_round: int = 1
    current_pick: int = 1
    snake: bool = True
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def position(self) -> PickPosition:
        return PickPosition(self.current_round, self.current_pick)

    def move_to(self, position: PickPosition) -> None:
        self.current_round = position.round
        self.current_pick = position.pick
