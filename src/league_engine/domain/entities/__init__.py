"""
Domain Entities

Value objects, result types and the snapshot entities handled by the application layer.
"""

from .draft import Draft
from .draft_state import DraftState
from .game import Game
from .game_phase import GamePhase
from .pick_position import PickPosition
from .results import TransitionResult, ValidationResult
from .team import RosterSlot, Team
from .trade import Trade
from .trade_status import TradeStatus

__all__ = [
    "Draft",
    "DraftState",
    "Game",
    "GamePhase",
    "PickPosition",
    "RosterSlot",
    "Team",
    "Trade",
    "TradeStatus",
    "TransitionResult",
    "ValidationResult",
]
