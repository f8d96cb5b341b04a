"""
Team Entity

A participant's roster for a season. Slots are soft-removed by stamping
``until``; only slots without it are active.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable, List, Optional, Set


@dataclass
class RosterSlot:
    """A player held at a 1-based roster position"""
    player_id: Hashable
    position: int
    until: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.until is None


@dataclass
class Team:
    """Represents a participant's roster"""
    owner_id: Hashable
    season: int
    team_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: Optional[str] = None
    slots: List[RosterSlot] = field(default_factory=list)
    completed_trades_count: int = 0

    @property
    def active_slots(self) -> List[RosterSlot]:
        return [slot for slot in self.slots if slot.is_active]

    @property
    def active_player_ids(self) -> Set[Hashable]:
        return {slot.player_id for slot in self.active_slots}

    @property
    def occupied_positions(self) -> Set[int]:
        return {slot.position for slot in self.active_slots}

    @property
    def roster_size(self) -> int:
        return len(self.active_slots)

    def get_active_slot(self, player_id: Hashable) -> Optional[RosterSlot]:
        for slot in self.active_slots:
            if slot.player_id == player_id:
                return slot
        return None
