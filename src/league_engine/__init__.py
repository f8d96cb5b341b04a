"""
League Engine - Hexagonal Architecture Implementation

Decision logic for a fantasy league: who may join a game, whose turn it is in
the draft, which game/draft/trade transitions are legal, roster legality, and
invitation codes.

The domain layer is pure and usable on its own; the application layer
applies its decisions to snapshot entities supplied by the caller.
"""

from .application import (
    DraftDomainFacade,
    GameDomainFacade,
    InvitationCodeService,
    TeamDomainFacade,
    TradeDomainFacade,
)
from .infrastructure import LeagueContainer, get_container, initialize_container

__all__ = [
    "DraftDomainFacade",
    "GameDomainFacade",
    "InvitationCodeService",
    "LeagueContainer",
    "TeamDomainFacade",
    "TradeDomainFacade",
    "get_container",
    "initialize_container",
]
