"""Exceptions raised by the prototypal idioms."""


class PrototypalError(Exception):
    """Base class for errors raised by this package."""
    pass


class UnboundThisError(PrototypalError, TypeError):
    """Raised when a strict constructor is called without new()."""
    pass


class InvalidActionError(PrototypalError, ValueError):
    """Raised when a dispatcher cannot resolve the selected action name."""

    def __init__(self, action):
        super().__init__(f"Invalid action: {action!r}")
        self.action = action
