"""Errors raised by the sports meet domain operations.

Every operation that raises leaves the stored document untouched.
"""
from __future__ import annotations


class SportsMeetError(Exception):
    """Base class for all sports meet failures."""

    code = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, object]:
        return {"detail": self.message, "code": self.code}


class ValidationError(SportsMeetError):
    """Input was missing or outside the allowed values."""

    code = "validation_error"
    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def to_response(self) -> dict[str, object]:
        payload = super().to_response()
        if self.field:
            payload["field"] = self.field
        return payload


class NotFoundError(SportsMeetError):
    """A referenced event does not exist."""

    code = "not_found"
    status_code = 404


class ConflictError(SportsMeetError):
    """The placement is already taken for the event."""

    code = "conflict"
    status_code = 409

    def __init__(self, placement: int):
        super().__init__(f"Position {placement} is already taken for this event.")
        self.placement = placement

    def to_response(self) -> dict[str, object]:
        payload = super().to_response()
        payload["placement"] = self.placement
        return payload


class StorageError(SportsMeetError):
    """The stored document could not be decoded."""

    code = "storage_error"
    status_code = 500
