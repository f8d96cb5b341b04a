"""
Team Domain Facade

Applies roster rules to Team snapshots. Historical slots (``until`` set) are
filtered out here so the rules only ever see the active roster.
"""

import logging
from datetime import datetime, timezone
from typing import Hashable, Optional

from ..domain.entities.results import ValidationResult
from ..domain.entities.team import RosterSlot, Team
from ..domain.exceptions import ValidationError
from ..domain.services.team_roster import TeamRoster
from .interfaces import ILeagueConfiguration

logger = logging.getLogger(__name__)


class TeamDomainFacade:
    """Application facade for roster changes"""

    def __init__(self, configuration: ILeagueConfiguration):
        self._configuration = configuration
        self._roster = TeamRoster()

    def default_position(self, team: Team) -> int:
        """Next position after the highest, or the first gap if that is out of range"""
        occupied = team.occupied_positions
        position = self._roster.next_available_position(occupied)
        if self._roster.is_valid_position(position, team.roster_size):
            return position
        return next(p for p in range(1, team.roster_size + 2) if p not in occupied)

    def can_add_player(
        self, team: Team, player_id: Optional[Hashable], position: Optional[int] = None
    ) -> ValidationResult:
        if position is None:
            position = self.default_position(team)
        return self._roster.can_add_player(
            team.active_player_ids,
            player_id,
            team.occupied_positions,
            position,
            self._configuration.get_max_roster_size(),
        )

    def add_player(self, team: Team, player_id: Hashable, position: Optional[int] = None) -> RosterSlot:
        if position is None:
            position = self.default_position(team)
        result = self.can_add_player(team, player_id, position)
        if not result.valid:
            logger.debug(f"Rejected adding {player_id} to team {team.team_id}: {result.error_message}")
            raise ValidationError(result.error_message)

        slot = RosterSlot(player_id=player_id, position=position)
        team.slots.append(slot)
        logger.info(f"Player {player_id} added to team {team.team_id} at position {position}")
        return slot

    def can_remove_player(self, team: Team, player_id: Optional[Hashable]) -> ValidationResult:
        return self._roster.can_remove_player(
            team.active_player_ids, player_id, self._configuration.get_min_roster_size()
        )

    def remove_player(self, team: Team, player_id: Hashable, now: Optional[datetime] = None) -> RosterSlot:
        """Soft-remove a player by closing their active slot"""
        result = self.can_remove_player(team, player_id)
        if not result.valid:
            logger.debug(f"Rejected removing {player_id} from team {team.team_id}: {result.error_message}")
            raise ValidationError(result.error_message)

        slot = team.get_active_slot(player_id)
        slot.until = now or datetime.now(timezone.utc)
        logger.info(f"Player {player_id} removed from team {team.team_id}")
        return slot

    def validate_positions(self, team: Team) -> ValidationResult:
        return self._roster.validate_unique_positions([slot.position for slot in team.active_slots])
