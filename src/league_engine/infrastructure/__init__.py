"""
Infrastructure Layer

Adapters for configuration, storage and dependency wiring.
"""

from .config_adapter import LeagueConfigurationAdapter
from .container import LeagueContainer, cleanup_container, get_container, initialize_container
from .storage_adapter import MemoryInvitationCodeRegistry

__all__ = [
    "LeagueConfigurationAdapter",
    "LeagueContainer",
    "MemoryInvitationCodeRegistry",
    "cleanup_container",
    "get_container",
    "initialize_container",
]
