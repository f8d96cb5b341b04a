"""
Game Phase Value Object

High-level phases of a league game with transition logic.
"""

from enum import Enum
from typing import List


class GamePhase(Enum):
    """Phases of a league game"""
    CREATING = "creating"
    DRAFTING = "drafting"
    ACTIVE = "active"
    FINISHED = "finished"
    CANCELLED = "cancelled"

    @property
    def next_states(self) -> List["GamePhase"]:
        """Get valid next phases from current phase"""
        transitions = {
            GamePhase.CREATING: [GamePhase.DRAFTING, GamePhase.CANCELLED],
            GamePhase.DRAFTING: [GamePhase.ACTIVE, GamePhase.CANCELLED],
            GamePhase.ACTIVE: [GamePhase.FINISHED],
            GamePhase.FINISHED: [],
            GamePhase.CANCELLED: [],
        }
        return transitions[self]

    def can_transition_to(self, target: "GamePhase") -> bool:
        """Check if can transition to target phase"""
        return target in self.next_states

    @property
    def is_terminal(self) -> bool:
        return not self.next_states

    @property
    def accepts_participants(self) -> bool:
        """Only games still being set up can be joined"""
        return self == GamePhase.CREATING
