"""
Application Layer Interfaces (Ports)

Defines contracts between the application layer and infrastructure adapters.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


# Repository Interfaces
class IInvitationCodeRegistry(ABC):
    """Registry of invitation codes already handed out"""

    @abstractmethod
    async def code_exists(self, code: str) -> bool:
        """Check whether a code is already in use"""
        pass

    @abstractmethod
    async def reserve(self, code: str) -> None:
        """Mark a code as used"""
        pass

    async def release(self, code: str) -> None:
        """Free a code (e.g. when its game is cancelled)"""
        pass


# Configuration Interfaces
class ILeagueConfiguration(ABC):
    """Interface for league policy settings"""

    @abstractmethod
    def get_players_per_team(self) -> int:
        """Players each team drafts"""
        pass

    @abstractmethod
    def use_snake_draft(self) -> bool:
        """Whether draft order reverses every other round"""
        pass

    @abstractmethod
    def get_max_roster_size(self) -> int:
        pass

    @abstractmethod
    def get_min_roster_size(self) -> int:
        pass

    @abstractmethod
    def get_invitation_code_length(self) -> int:
        pass

    @abstractmethod
    def is_trading_enabled(self) -> bool:
        pass

    @abstractmethod
    def get_max_trades_per_team(self) -> int:
        pass

    @abstractmethod
    def get_max_players_per_trade_side(self) -> Optional[int]:
        """Cap on players per side of a trade, None for no cap"""
        pass

    @abstractmethod
    def get_trade_deadline(self) -> Optional[datetime]:
        pass
