"""
Result Value Objects

Outcomes returned by the rule components. A rejection carries a message naming
the violated condition; callers map it to their own error responses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation check"""
    valid: bool
    error_message: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True, None)

    @classmethod
    def failure(cls, error_message: str) -> "ValidationResult":
        return cls(False, error_message)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class TransitionResult:
    """Result of a state transition check"""
    allowed: bool
    new_status: Optional[Enum] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, new_status: Enum) -> "TransitionResult":
        return cls(True, new_status, None)

    @classmethod
    def failure(cls, error_message: str) -> "TransitionResult":
        return cls(False, None, error_message)

    @property
    def new_phase(self) -> Optional[Enum]:
        """Alias used for game phase transitions"""
        return self.new_status

    def __bool__(self) -> bool:
        return self.allowed
