"""
Errors raised by SkillSwap services.

The CLI catches SkillSwapError, prints the message and keeps running.
"""


class SkillSwapError(Exception):
    """Raised when a SkillSwap operation is rejected."""
    pass


class ValidationError(SkillSwapError):
    """Raised when user input does not describe a valid record."""
    pass


class NotFoundError(SkillSwapError):
    """Raised when a referenced user or row does not exist."""
    pass


class PermissionDeniedError(SkillSwapError):
    """Raised when a user acts on a row they do not own."""
    pass


class InvalidStateError(SkillSwapError):
    """Raised when a row is not in a state that allows the operation."""
    pass
