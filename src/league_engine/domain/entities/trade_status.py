"""
Trade Status Value Object
"""

from enum import Enum
from typing import List


class TradeStatus(Enum):
    """Statuses of a trade proposal"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    COUNTERED = "countered"

    @property
    def next_states(self) -> List["TradeStatus"]:
        """Get valid next statuses from current status"""
        transitions = {
            TradeStatus.PENDING: [TradeStatus.ACCEPTED, TradeStatus.REJECTED, TradeStatus.CANCELLED, TradeStatus.COUNTERED],
            TradeStatus.ACCEPTED: [],
            TradeStatus.REJECTED: [],
            TradeStatus.CANCELLED: [],
            # A countered proposal is superseded by the counter-offer; it is not terminal
            # but has no transitions of its own.
            TradeStatus.COUNTERED: [],
        }
        return transitions[self]

    def can_transition_to(self, target: "TradeStatus") -> bool:
        return target in self.next_states
