"""
Game Entity

Snapshot of a league game as read from persistence. The creator is always a
participant and is never stored twice in ``participant_ids``.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable, List, Optional

from .game_phase import GamePhase


@dataclass
class Game:
    """A league game that participants join and draft in"""
    name: str
    creator_id: Hashable
    max_participants: int
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    phase: GamePhase = GamePhase.CREATING
    participant_ids: List[Hashable] = field(default_factory=list)  # excludes the creator
    invitation_code: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def creator_in_participants(self) -> bool:
        return self.creator_id in self.participant_ids

    @property
    def total_participant_count(self) -> int:
        """Participants including the creator"""
        if self.creator_in_participants:
            return len(self.participant_ids)
        return len(self.participant_ids) + 1

    @property
    def draft_order(self) -> List[Hashable]:
        """Creator first, then participants in join order"""
        return [self.creator_id] + [p for p in self.participant_ids if p != self.creator_id]
