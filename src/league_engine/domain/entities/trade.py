"""
Trade Entity

A proposal to swap players between two rosters.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Hashable, Optional

from .trade_status import TradeStatus


@dataclass
class Trade:
    """Offer of players from one team in exchange for players of another"""
    from_team_id: str
    to_team_id: str
    offered_player_ids: FrozenSet[Hashable]
    requested_player_ids: FrozenSet[Hashable]
    trade_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: TradeStatus = TradeStatus.PENDING
    original_trade_id: Optional[str] = None  # set on counter-offers
    proposed_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @property
    def is_counter_offer(self) -> bool:
        return self.original_trade_id is not None
