"""
Draft Progression - Domain Service

Round/pick arithmetic for straight and snake drafts. Holds no state; the
caller stores the current position and feeds it back in.

Positions are 1-based: round 1 pick 1 is the first selection of the draft.
In a snake draft odd rounds run in join order and even rounds run in
reverse, so the last picker of one round is the first of the next.
"""

import math

from ..entities.pick_position import PickPosition
from ..exceptions import InvalidArgumentError


class DraftProgression:
    """Domain service for draft turn order"""

    DEFAULT_PLAYERS_PER_TEAM = 3

    def calculate_total_rounds(
        self,
        participant_count: int,
        players_per_team: int = DEFAULT_PLAYERS_PER_TEAM,
    ) -> int:
        """Number of rounds needed for every team to draft ``players_per_team`` players.

        Raises:
            InvalidArgumentError: If either count is not positive
        """
        if participant_count <= 0 or players_per_team <= 0:
            raise InvalidArgumentError("Participant count and players per team must be positive")
        # Total picks spread over participants; not simplified to players_per_team.
        return math.ceil((participant_count * players_per_team) / participant_count)

    def next_pick(self, current_round: int, current_pick: int, participant_count: int) -> PickPosition:
        """Position following ``(current_round, current_pick)``.

        Passing the last pick of a round wraps to pick 1 of the next round.
        """
        if participant_count <= 0:
            raise InvalidArgumentError("Participant count must be positive")

        next_round = current_round
        next_pick = current_pick + 1
        if next_pick > participant_count:
            next_round += 1
            next_pick = 1
        return PickPosition(next_round, next_pick)

    def is_draft_complete(self, current_round: int, total_rounds: int) -> bool:
        return current_round > total_rounds

    def remaining_picks(
        self,
        current_round: int,
        current_pick: int,
        total_rounds: int,
        participant_count: int,
    ) -> int:
        """Picks left in the draft, counting the current one"""
        if self.is_draft_complete(current_round, total_rounds):
            return 0
        total_picks = total_rounds * participant_count
        picks_made = (current_round - 1) * participant_count + current_pick - 1
        return max(0, total_picks - picks_made)

    def get_participant_for_pick(
        self,
        pick_number: int,
        round_number: int,
        participant_count: int,
        snake: bool,
    ) -> int:
        """0-based index into the draft order of whoever holds this pick.

        Raises:
            InvalidArgumentError: If pick_number is outside 1..participant_count
        """
        if pick_number < 1 or pick_number > participant_count:
            raise InvalidArgumentError("Pick number must be between 1 and participant count")

        if not snake or round_number % 2 == 1:
            return pick_number - 1
        return participant_count - pick_number
