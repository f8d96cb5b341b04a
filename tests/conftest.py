import random
import uuid
from datetime import datetime, timezone

import pytest

from src.league_engine.application.draft_facade import DraftDomainFacade
from src.league_engine.application.game_facade import GameDomainFacade
from src.league_engine.application.team_facade import TeamDomainFacade
from src.league_engine.application.trade_facade import TradeDomainFacade
from src.league_engine.domain.entities.team import RosterSlot, Team
from src.league_engine.domain.services.invitation_code_generator import InvitationCodeGenerator
from src.league_engine.infrastructure.config_adapter import LeagueConfigurationAdapter
from src.league_engine.infrastructure.storage_adapter import MemoryInvitationCodeRegistry

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def config() -> LeagueConfigurationAdapter:
    """Default configuration, independent of the process environment"""
    return LeagueConfigurationAdapter(environ={})


@pytest.fixture
def seeded_generator() -> InvitationCodeGenerator:
    return InvitationCodeGenerator(random.Random(42), 8)


@pytest.fixture
def code_registry() -> MemoryInvitationCodeRegistry:
    return MemoryInvitationCodeRegistry()


@pytest.fixture
def game_facade(seeded_generator) -> GameDomainFacade:
    return GameDomainFacade(seeded_generator)


@pytest.fixture
def draft_facade(config) -> DraftDomainFacade:
    return DraftDomainFacade(config)


@pytest.fixture
def team_facade(config) -> TeamDomainFacade:
    return TeamDomainFacade(config)


@pytest.fixture
def trade_facade(config, team_facade) -> TradeDomainFacade:
    return TradeDomainFacade(config, team_facade)


@pytest.fixture
def creator_id() -> uuid.UUID:
    return uuid.uuid4()


def make_team(owner: str, players, season: int = 2026) -> Team:
    """Team with the given players at positions 1..n"""
    team = Team(owner_id=owner, season=season, name=f"{owner}'s team")
    team.slots = [RosterSlot(player_id=p, position=i) for i, p in enumerate(players, start=1)]
    return team


@pytest.fixture
def team_a() -> Team:
    return make_team("alice", ["p1", "p2", "p3"])


@pytest.fixture
def team_b() -> Team:
    return make_team("bob", ["p4", "p5", "p6"])
