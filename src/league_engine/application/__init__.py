"""
Application Layer

Coordinates between domain and infrastructure layers.
Contains facades over the league rules, DTOs, and ports (interfaces).
"""

from .draft_facade import DraftDomainFacade
from .dto import DraftProgressDTO, GameSummaryDTO
from .game_facade import GameDomainFacade
from .invitation_code_service import InvitationCodeService
from .team_facade import TeamDomainFacade
from .trade_facade import TradeDomainFacade

__all__ = [
    "DraftDomainFacade",
    "DraftProgressDTO",
    "GameDomainFacade",
    "GameSummaryDTO",
    "InvitationCodeService",
    "TeamDomainFacade",
    "TradeDomainFacade",
]
