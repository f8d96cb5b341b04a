"""
Dependency Injection Configuration

Central container that wires up all dependencies for the league engine.
"""

import random
from typing import Any, Dict, Optional

from ..application.draft_facade import DraftDomainFacade
from ..application.game_facade import GameDomainFacade
from ..application.interfaces import IInvitationCodeRegistry, ILeagueConfiguration
from ..application.invitation_code_service import InvitationCodeService
from ..application.team_facade import TeamDomainFacade
from ..application.trade_facade import TradeDomainFacade
from ..domain.services.invitation_code_generator import InvitationCodeGenerator
from .config_adapter import LeagueConfigurationAdapter
from .storage_adapter import MemoryInvitationCodeRegistry


class LeagueContainer:
    """
    Dependency injection container for the league engine.

    Services are created lazily and cached; pass a configuration, registry or
    seeded random source to override the defaults (useful in tests).
    """

    def __init__(
        self,
        configuration: Optional[ILeagueConfiguration] = None,
        code_registry: Optional[IInvitationCodeRegistry] = None,
        random_source: Optional[random.Random] = None,
    ):
        self._random_source = random_source
        self._services: Dict[str, Any] = {}
        self._services["configuration"] = configuration or LeagueConfigurationAdapter()
        self._services["code_registry"] = code_registry or MemoryInvitationCodeRegistry()

    def get_configuration(self) -> ILeagueConfiguration:
        return self._services["configuration"]

    def get_code_registry(self) -> IInvitationCodeRegistry:
        return self._services["code_registry"]

    def get_code_generator(self) -> InvitationCodeGenerator:
        if "code_generator" not in self._services:
            self._services["code_generator"] = InvitationCodeGenerator(
                self._random_source,
                self.get_configuration().get_invitation_code_length(),
            )
        return self._services["code_generator"]

    def get_invitation_code_service(self) -> InvitationCodeService:
        if "invitation_code_service" not in self._services:
            self._services["invitation_code_service"] = InvitationCodeService(
                self.get_code_generator(), self.get_code_registry()
            )
        return self._services["invitation_code_service"]

    def get_game_facade(self) -> GameDomainFacade:
        if "game_facade" not in self._services:
            self._services["game_facade"] = GameDomainFacade(self.get_code_generator())
        return self._services["game_facade"]

    def get_draft_facade(self) -> DraftDomainFacade:
        if "draft_facade" not in self._services:
            self._services["draft_facade"] = DraftDomainFacade(self.get_configuration())
        return self._services["draft_facade"]

    def get_team_facade(self) -> TeamDomainFacade:
        if "team_facade" not in self._services:
            self._services["team_facade"] = TeamDomainFacade(self.get_configuration())
        return self._services["team_facade"]

    def get_trade_facade(self) -> TradeDomainFacade:
        if "trade_facade" not in self._services:
            self._services["trade_facade"] = TradeDomainFacade(self.get_configuration(), self.get_team_facade())
        return self._services["trade_facade"]

    def cleanup(self) -> None:
        """Cleanup resources"""
        registry = self._services.get("code_registry")
        if hasattr(registry, "clear_all_codes"):
            registry.clear_all_codes()
        self._services.clear()


# Global container instance
_container: Optional[LeagueContainer] = None


def get_container() -> LeagueContainer:
    """Get global container instance"""
    global _container
    if _container is None:
        _container = LeagueContainer()
    return _container


def initialize_container(
    configuration: Optional[ILeagueConfiguration] = None,
    code_registry: Optional[IInvitationCodeRegistry] = None,
    random_source: Optional[random.Random] = None,
) -> LeagueContainer:
    """Initialize global container, replacing any existing one"""
    global _container
    _container = LeagueContainer(configuration, code_registry, random_source)
    return _container


def cleanup_container() -> None:
    """Cleanup global container"""
    global _container
    if _container:
        _container.cleanup()
        _container = None
