"""Exception hierarchy for contextual-ai."""
from __future__ import annotations


class ContextualAIError(Exception):
    """Base class for all contextual-ai errors."""


class SessionCreationError(ContextualAIError):
    """A learning session could not be created from the engine snapshots."""


class ApiClientError(ContextualAIError):
    """The HTTP API returned an error envelope or an error status."""

    def __init__(self, message: str, status_code: int | None = None, fields: list[str] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.fields = fields or []
