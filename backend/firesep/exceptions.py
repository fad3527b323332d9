"""Custom exception hierarchy for firesep.

The compliance engine itself raises nothing; these cover the record store
and the HTTP surface around it.
"""

from __future__ import annotations


class FiresepError(Exception):
    """Base exception for all firesep errors."""


class RecordNotFoundError(FiresepError):
    """Raised when a project, wall or opening id is not in the store."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind.capitalize()} '{record_id}' not found")


class NotAssessableError(FiresepError):
    """Raised when an assessment is requested for a Class 10 project."""
