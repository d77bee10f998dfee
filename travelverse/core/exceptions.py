"""
Validation errors raised by the scoring engine.

All of them signal caller misuse detected before any scoring math runs,
so none are retryable. The API layer maps them onto HTTP 422 responses.
"""


class ScoringError(ValueError):
    """Base class for scoring engine input errors."""


class InvalidProfile(ScoringError):
    """Raised when a traveler profile carries an unknown enum value."""


class InvalidGuide(ScoringError):
    """Raised when a photo guide carries an unknown category or difficulty."""


class InvalidInteraction(ScoringError):
    """Raised when an interaction action is not a tracked action."""


class EmptyCandidateSet(ScoringError):
    """Raised when destinations are ranked from an empty candidate list."""


class NoParticipants(ScoringError):
    """Raised when the swarm optimizer is called without participant positions."""
