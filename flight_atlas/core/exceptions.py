"""Custom exception hierarchy for the Flight Atlas domain."""

from __future__ import annotations


class RenderError(RuntimeError):
    """Raised when flight data cannot be turned into a route map."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload
