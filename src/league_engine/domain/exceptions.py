"""
Domain Exceptions

Argument/precondition failures and errors raised by the application layer.
Business-rule rejections are returned as result values, not raised.
"""


class LeagueError(Exception):
    """Base exception for all league engine errors"""
    pass


class InvalidArgumentError(LeagueError, ValueError):
    """Raised when a call violates a precondition (bad length, count, pick number)"""
    pass


class ConfigurationError(InvalidArgumentError):
    """Raised when league configuration values are malformed"""
    pass


class ValidationError(LeagueError):
    """Raised when an action is performed that the league rules reject"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidStateTransitionError(ValidationError):
    """Raised when attempting a game, draft or trade transition that is not allowed"""
    pass


class InvitationCodeGenerationError(LeagueError):
    """Raised when no unused invitation code could be produced"""
    pass
