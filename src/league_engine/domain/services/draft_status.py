"""
Draft Status - Domain Service

Run-state machine of a draft. ACTIVE and IN_PROGRESS are treated alike:
both accept picks and both can be paused or finished.
"""

from ..entities.draft_state import DraftState
from ..entities.results import TransitionResult


class DraftStatus:
    """Domain service for draft run-state transitions"""

    def can_start(self, status: DraftState) -> TransitionResult:
        if status != DraftState.PENDING:
            return TransitionResult.failure(
                f"Draft can only be started from PENDING status (current: {status.name})"
            )
        return TransitionResult.success(DraftState.ACTIVE)

    def can_pause(self, status: DraftState) -> TransitionResult:
        if not status.is_running:
            return TransitionResult.failure(
                f"Draft can only be paused when ACTIVE or IN_PROGRESS (current: {status.name})"
            )
        return TransitionResult.success(DraftState.PAUSED)

    def can_resume(self, status: DraftState) -> TransitionResult:
        if status != DraftState.PAUSED:
            return TransitionResult.failure(
                f"Draft can only be resumed from PAUSED status (current: {status.name})"
            )
        return TransitionResult.success(DraftState.ACTIVE)

    def can_finish(self, status: DraftState, all_picks_complete: bool) -> TransitionResult:
        """Check whether the draft may finish.

        Outstanding picks are reported before the status check, so a paused
        draft with picks left is rejected for the picks.
        """
        if not all_picks_complete:
            return TransitionResult.failure("Draft cannot be finished - picks remaining")
        if not status.is_running:
            return TransitionResult.failure(
                f"Draft can only be finished when ACTIVE or IN_PROGRESS (current: {status.name})"
            )
        return TransitionResult.success(DraftState.FINISHED)

    def can_cancel(self, status: DraftState) -> TransitionResult:
        if status == DraftState.FINISHED:
            return TransitionResult.failure("Cannot cancel a draft that is already finished")
        if status == DraftState.CANCELLED:
            return TransitionResult.failure("Draft is already cancelled")
        return TransitionResult.success(DraftState.CANCELLED)

    def is_terminal(self, status: DraftState) -> bool:
        return not status.next_states

    def allows_picks(self, status: DraftState) -> bool:
        return status.is_running
