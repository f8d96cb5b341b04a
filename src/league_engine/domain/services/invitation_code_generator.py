"""
Invitation Code Generator - Domain Service

Produces short uppercase-alphanumeric join codes. The generator does not
check uniqueness; collision handling belongs to the caller.

Not safe to share between threads unless the random source is: give each
caller its own instance or guard ``generate`` with a lock.
"""

import random
import re
import string
from typing import Optional

from ..exceptions import InvalidArgumentError

ALPHABET = string.ascii_uppercase + string.digits
MIN_CODE_LENGTH = 4
MAX_CODE_LENGTH = 20
DEFAULT_CODE_LENGTH = 8

_CODE_PATTERN = re.compile(r"[A-Z0-9]+")


class InvitationCodeGenerator:
    """Generates invitation codes from an injected random source"""

    def __init__(self, random_source: Optional[random.Random] = None, length: int = DEFAULT_CODE_LENGTH) -> None:
        """
        Args:
            random_source: Anything with ``choice``; a seeded ``random.Random``
                makes output reproducible. Defaults to ``random.SystemRandom``.
            length: Code length, between 4 and 20

        Raises:
            InvalidArgumentError: If length is out of range
        """
        if not MIN_CODE_LENGTH <= length <= MAX_CODE_LENGTH:
            raise InvalidArgumentError(
                f"Code length must be between {MIN_CODE_LENGTH} and {MAX_CODE_LENGTH}, got {length}"
            )
        self._random = random_source if random_source is not None else random.SystemRandom()
        self.length = length

    def generate(self) -> str:
        return "".join(self._random.choice(ALPHABET) for _ in range(self.length))

    @staticmethod
    def is_valid_format(code: Optional[str]) -> bool:
        if not isinstance(code, str):
            return False
        if not MIN_CODE_LENGTH <= len(code) <= MAX_CODE_LENGTH:
            return False
        return _CODE_PATTERN.fullmatch(code) is not None
