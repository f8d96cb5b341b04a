"""
Game Domain Facade

Bridges Game snapshots and the participant/lifecycle rules: extracts the
primitive inputs, asks the rule component, and applies allowed results.
"""

import logging
from datetime import datetime, timezone
from typing import Hashable, Optional

from ..domain.entities.game import Game
from ..domain.entities.results import TransitionResult, ValidationResult
from ..domain.exceptions import ValidationError
from ..domain.services.game_lifecycle import GameLifecycle
from ..domain.services.invitation_code_generator import InvitationCodeGenerator
from ..domain.services.participant_rules import ParticipantRules
from .dto import GameSummaryDTO

logger = logging.getLogger(__name__)


class GameDomainFacade:
    """
    Application facade for game creation, membership and phase changes.

    ``try_*`` methods return the rule result and only mutate the game when
    the transition is allowed. Methods that perform an action raise
    ValidationError when the rules reject it.
    """

    def __init__(self, code_generator: Optional[InvitationCodeGenerator] = None):
        self._code_generator = code_generator or InvitationCodeGenerator()
        self._lifecycle = GameLifecycle()
        self._participant_rules = ParticipantRules()

    # ====================
    # Creation & Membership
    # ====================

    def validate_game_creation(
        self, name: Optional[str], creator_id: Optional[Hashable], max_participants: int
    ) -> ValidationResult:
        return self._participant_rules.validate_game_creation(name, creator_id, max_participants)

    def create_game(
        self,
        name: str,
        creator_id: Hashable,
        max_participants: int,
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Game:
        """Create a validated game snapshot in CREATING phase"""
        result = self.validate_game_creation(name, creator_id, max_participants)
        if not result.valid:
            raise ValidationError(result.error_message)

        game = Game(
            name=name.strip(),
            creator_id=creator_id,
            max_participants=max_participants,
            description=description,
            created_at=now or datetime.now(timezone.utc),
        )
        logger.info(f"Created game {game.game_id} '{game.name}' for creator {creator_id}")
        return game

    def can_add_participant(self, game: Game, user_id: Hashable) -> ValidationResult:
        existing = [p for p in game.participant_ids if p != game.creator_id]
        return self._participant_rules.can_add_participant(
            game.phase,
            self.get_total_participants(game),
            game.max_participants,
            user_id,
            game.creator_id,
            existing,
        )

    def add_participant(self, game: Game, user_id: Hashable) -> Game:
        result = self.can_add_participant(game, user_id)
        if not result.valid:
            logger.debug(f"Rejected participant {user_id} for game {game.game_id}: {result.error_message}")
            raise ValidationError(result.error_message)

        game.participant_ids.append(user_id)
        logger.info(f"User {user_id} joined game {game.game_id}")
        return game

    def get_total_participants(self, game: Game) -> int:
        explicit = len(game.participant_ids)
        return self._participant_rules.calculate_total_participants(explicit, game.creator_in_participants)

    def get_available_spots(self, game: Game) -> int:
        return self._participant_rules.calculate_available_spots(
            game.max_participants, self.get_total_participants(game)
        )

    # ====================
    # Phase Transitions
    # ====================

    def try_start_draft(self, game: Game) -> TransitionResult:
        return self._apply(game, self._lifecycle.can_start_draft(game.phase, self.get_total_participants(game)))

    def try_complete_draft(self, game: Game) -> TransitionResult:
        return self._apply(game, self._lifecycle.can_complete_draft(game.phase))

    def try_finish_game(self, game: Game, now: Optional[datetime] = None) -> TransitionResult:
        result = self._apply(game, self._lifecycle.can_finish_game(game.phase))
        if result.allowed:
            game.finished_at = now or datetime.now(timezone.utc)
        return result

    def try_cancel_game(self, game: Game) -> TransitionResult:
        return self._apply(game, self._lifecycle.can_cancel_game(game.phase))

    def _apply(self, game: Game, result: TransitionResult) -> TransitionResult:
        if result.allowed:
            logger.info(f"Game {game.game_id}: {game.phase.name} -> {result.new_phase.name}")
            game.phase = result.new_phase
        else:
            logger.debug(f"Game {game.game_id} transition rejected: {result.error_message}")
        return result

    # ====================
    # Invitation Codes
    # ====================

    def ensure_invitation_code(self, game: Game) -> str:
        """Assign a code if the game has none, without a uniqueness check.

        Use InvitationCodeService when codes must not collide.
        """
        if game.invitation_code is None:
            game.invitation_code = self._code_generator.generate()
        return game.invitation_code

    def is_valid_invitation_code(self, code: Optional[str]) -> bool:
        return InvitationCodeGenerator.is_valid_format(code)

    def describe(self, game: Game) -> GameSummaryDTO:
        return GameSummaryDTO.from_domain(game, self.get_available_spots(game))
