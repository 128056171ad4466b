"""Errors raised by inventory operations."""

from collections.abc import Mapping


class InventoryError(Exception):
    """Base class for inventory errors surfaced to callers."""

    def __init__(
        self, message: str, details: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, object]:
        """Return a presentation-friendly payload."""
        payload: dict[str, object] = {"message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ValidationError(InventoryError):
    """Raised when input is rejected before any state changes."""


class NotFoundError(InventoryError):
    """Raised when no active ingredient matches a request."""
