"""
Pick Position Value Object
"""

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class PickPosition:
    """A position in the draft: round and pick within the round, both 1-based"""
    round: int
    pick: int

    def __post_init__(self):
        if self.round < 1 or self.pick < 1:
            raise InvalidArgumentError("Round and pick must be at least 1")
