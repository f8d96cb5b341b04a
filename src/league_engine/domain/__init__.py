"""
Domain Layer - Pure League Rules

Contains value objects, snapshot entities, and the rule components for games,
drafts, rosters, trades and invitation codes.
No I/O and no external dependencies allowed in this layer.
"""

from .entities import (
    Draft,
    DraftState,
    Game,
    GamePhase,
    PickPosition,
    RosterSlot,
    Team,
    Trade,
    TradeStatus,
    TransitionResult,
    ValidationResult,
)
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateTransitionError,
    InvitationCodeGenerationError,
    LeagueError,
    ValidationError,
)
from .services import (
    DraftProgression,
    DraftStatus,
    GameLifecycle,
    InvitationCodeGenerator,
    ParticipantRules,
    TeamRoster,
    TradeRules,
)

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
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidStateTransitionError",
    "InvitationCodeGenerationError",
    "LeagueError",
    "ValidationError",
    "DraftProgression",
    "DraftStatus",
    "GameLifecycle",
    "InvitationCodeGenerator",
    "ParticipantRules",
    "TeamRoster",
    "TradeRules",
]
