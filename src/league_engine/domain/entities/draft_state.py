"""
Draft State Value Object

Run states of a draft with transition logic.
"""

from enum import Enum
from typing import List


class DraftState(Enum):
    """Run states of a draft"""
    PENDING = "pending"
    ACTIVE = "active"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    FINISHED = "finished"
    CANCELLED = "cancelled"

    @property
    def next_states(self) -> List["DraftState"]:
        """Get valid next states from current state"""
        transitions = {
            DraftState.PENDING: [DraftState.ACTIVE, DraftState.CANCELLED],
            DraftState.ACTIVE: [DraftState.PAUSED, DraftState.FINISHED, DraftState.CANCELLED],
            DraftState.IN_PROGRESS: [DraftState.PAUSED, DraftState.FINISHED, DraftState.CANCELLED],
            DraftState.PAUSED: [DraftState.ACTIVE, DraftState.CANCELLED],
            DraftState.FINISHED: [],
            DraftState.CANCELLED: [],
        }
        return transitions[self]

    def can_transition_to(self, target: "DraftState") -> bool:
        """Check if can transition to target state"""
        return target in self.next_states

    @property
    def is_running(self) -> bool:
        """ACTIVE and IN_PROGRESS are equivalent for pick purposes"""
        return self in (DraftState.ACTIVE, DraftState.IN_PROGRESS)
