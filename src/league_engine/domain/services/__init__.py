"""
Domain Services

Stateless rule components. Each returns result values for business-rule
rejections and raises only for invalid arguments.
"""

from .draft_progression import DraftProgression
from .draft_status import DraftStatus
from .game_lifecycle import GameLifecycle
from .invitation_code_generator import InvitationCodeGenerator
from .participant_rules import ParticipantRules
from .team_roster import TeamRoster
from .trade_rules import TradeRules

__all__ = [
    "DraftProgression",
    "DraftStatus",
    "GameLifecycle",
    "InvitationCodeGenerator",
    "ParticipantRules",
    "TeamRoster",
    "TradeRules",
]
