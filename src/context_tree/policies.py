from enum import Enum


class MissingContextsPolicy(str, Enum):
    """Policy for reporting required contexts that do not resolve."""

    RAISE = "raise"
    """Raise ``MissingRequiredContextsError`` naming every missing context."""

    LOG = "log"
    """Log a warning naming every missing context and return them to the caller."""
