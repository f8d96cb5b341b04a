"""
Invitation Code Service

Produces invitation codes that are unique against the registry, retrying on
collision. The generator itself knows nothing about codes already issued.
"""

import logging

from ..domain.entities.game import Game
from ..domain.exceptions import InvalidArgumentError, InvitationCodeGenerationError
from ..domain.services.invitation_code_generator import InvitationCodeGenerator
from .interfaces import IInvitationCodeRegistry

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 100


class InvitationCodeService:
    """Application service for unique invitation codes"""

    def __init__(
        self,
        generator: InvitationCodeGenerator,
        registry: IInvitationCodeRegistry,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise InvalidArgumentError("max_attempts must be positive")
        self._generator = generator
        self._registry = registry
        self._max_attempts = max_attempts

    async def generate_unique_code(self) -> str:
        """Draw codes until one is unused, then reserve it.

        Raises:
            InvitationCodeGenerationError: If every attempt collided
        """
        for attempt in range(1, self._max_attempts + 1):
            code = self._generator.generate()
            if not await self._registry.code_exists(code):
                await self._registry.reserve(code)
                logger.info(f"Invitation code generated on attempt {attempt}")
                return code
            logger.debug(f"Invitation code {code} already in use, retrying")

        logger.error(f"Could not generate a unique invitation code after {self._max_attempts} attempts")
        raise InvitationCodeGenerationError(
            f"Could not generate a unique invitation code after {self._max_attempts} attempts"
        )

    async def assign_to(self, game: Game) -> str:
        """Give the game a unique code unless it already has one"""
        if game.invitation_code is None:
            game.invitation_code = await self.generate_unique_code()
        return game.invitation_code

    async def release(self, game: Game) -> None:
        if game.invitation_code is not None:
            await self._registry.release(game.invitation_code)
            game.invitation_code = None
