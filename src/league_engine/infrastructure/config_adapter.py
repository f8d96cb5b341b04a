"""
League Configuration Adapter

Reads league policy from environment variables, falling back to the
standard defaults.
"""

import os
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from ..application.interfaces import ILeagueConfiguration
from ..domain.exceptions import ConfigurationError
from ..domain.services.invitation_code_generator import (
    DEFAULT_CODE_LENGTH,
    MAX_CODE_LENGTH,
    MIN_CODE_LENGTH,
)

DEFAULTS: Dict[str, Any] = {
    "LEAGUE_PLAYERS_PER_TEAM": 3,
    "LEAGUE_SNAKE_DRAFT": True,
    "LEAGUE_MAX_ROSTER_SIZE": 10,
    "LEAGUE_MIN_ROSTER_SIZE": 0,
    "LEAGUE_INVITATION_CODE_LENGTH": DEFAULT_CODE_LENGTH,
    "LEAGUE_TRADING_ENABLED": True,
    "LEAGUE_MAX_TRADES_PER_TEAM": 5,
    "LEAGUE_MAX_PLAYERS_PER_TRADE_SIDE": 5,
    "LEAGUE_TRADE_DEADLINE": None,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class LeagueConfigurationAdapter(ILeagueConfiguration):
    """
    Configuration adapter backed by environment variables.

    Values are parsed once at construction so a bad setting fails fast.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self.players_per_team = self._int(env, "LEAGUE_PLAYERS_PER_TEAM", minimum=1)
        self.snake_draft = self._bool(env, "LEAGUE_SNAKE_DRAFT")
        self.max_roster_size = self._int(env, "LEAGUE_MAX_ROSTER_SIZE", minimum=1)
        self.min_roster_size = self._int(env, "LEAGUE_MIN_ROSTER_SIZE", minimum=0)
        self.invitation_code_length = self._int(env, "LEAGUE_INVITATION_CODE_LENGTH", minimum=MIN_CODE_LENGTH)
        self.trading_enabled = self._bool(env, "LEAGUE_TRADING_ENABLED")
        self.max_trades_per_team = self._int(env, "LEAGUE_MAX_TRADES_PER_TEAM", minimum=0)
        self.max_players_per_trade_side = self._int(env, "LEAGUE_MAX_PLAYERS_PER_TRADE_SIDE", minimum=1)
        self.trade_deadline = self._datetime(env, "LEAGUE_TRADE_DEADLINE")

        if self.min_roster_size > self.max_roster_size:
            raise ConfigurationError(
                f"LEAGUE_MIN_ROSTER_SIZE ({self.min_roster_size}) exceeds "
                f"LEAGUE_MAX_ROSTER_SIZE ({self.max_roster_size})"
            )
        if self.invitation_code_length > MAX_CODE_LENGTH:
            raise ConfigurationError(
                f"LEAGUE_INVITATION_CODE_LENGTH must be between {MIN_CODE_LENGTH} and {MAX_CODE_LENGTH}"
            )

    def get_players_per_team(self) -> int:
        return self.players_per_team

    def use_snake_draft(self) -> bool:
        return self.snake_draft

    def get_max_roster_size(self) -> int:
        return self.max_roster_size

    def get_min_roster_size(self) -> int:
        return self.min_roster_size

    def get_invitation_code_length(self) -> int:
        return self.invitation_code_length

    def is_trading_enabled(self) -> bool:
        return self.trading_enabled

    def get_max_trades_per_team(self) -> int:
        return self.max_trades_per_team

    def get_max_players_per_trade_side(self) -> Optional[int]:
        return self.max_players_per_trade_side

    def get_trade_deadline(self) -> Optional[datetime]:
        return self.trade_deadline

    def as_dict(self) -> Dict[str, Any]:
        """Current settings keyed by environment variable name"""
        return {
            "LEAGUE_PLAYERS_PER_TEAM": self.players_per_team,
            "LEAGUE_SNAKE_DRAFT": self.snake_draft,
            "LEAGUE_MAX_ROSTER_SIZE": self.max_roster_size,
            "LEAGUE_MIN_ROSTER_SIZE": self.min_roster_size,
            "LEAGUE_INVITATION_CODE_LENGTH": self.invitation_code_length,
            "LEAGUE_TRADING_ENABLED": self.trading_enabled,
            "LEAGUE_MAX_TRADES_PER_TEAM": self.max_trades_per_team,
            "LEAGUE_MAX_PLAYERS_PER_TRADE_SIDE": self.max_players_per_trade_side,
            "LEAGUE_TRADE_DEADLINE": self.trade_deadline,
        }

    @staticmethod
    def _int(env: Mapping[str, str], key: str, minimum: int) -> int:
        raw = env.get(key)
        if raw is None or raw.strip() == "":
            return DEFAULTS[key]
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
        if value < minimum:
            raise ConfigurationError(f"{key} must be at least {minimum}, got {value}")
        return value

    @staticmethod
    def _bool(env: Mapping[str, str], key: str) -> bool:
        raw = env.get(key)
        if raw is None or raw.strip() == "":
            return DEFAULTS[key]
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")

    @staticmethod
    def _datetime(env: Mapping[str, str], key: str) -> Optional[datetime]:
        raw = env.get(key)
        if raw is None or raw.strip() == "":
            return DEFAULTS[key]
        try:
            value = datetime.fromisoformat(raw.strip())
        except ValueError:
            raise ConfigurationError(f"{key} must be an ISO-8601 datetime, got {raw!r}") from None
        # Deadlines without an offset are read as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
