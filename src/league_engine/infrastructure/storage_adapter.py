"""
Storage Adapter

In-memory implementation of the invitation code registry.
"""

from typing import Iterable, Optional, Set

from ..application.interfaces import IInvitationCodeRegistry


class MemoryInvitationCodeRegistry(IInvitationCodeRegistry):
    """In-memory registry of issued invitation codes"""

    def __init__(self, codes: Optional[Iterable[str]] = None):
        self._codes: Set[str] = set(codes or ())

    async def code_exists(self, code: str) -> bool:
        return code in self._codes

    async def reserve(self, code: str) -> None:
        self._codes.add(code)

    async def release(self, code: str) -> None:
        self._codes.discard(code)

    def get_code_count(self) -> int:
        """Get number of issued codes"""
        return len(self._codes)

    def clear_all_codes(self) -> None:
        """Clear all codes (for testing/cleanup)"""
        self._codes.clear()
