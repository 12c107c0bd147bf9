"""
Domain exception hierarchy for the Campus Connect backend.

Every business-rule failure raised by entities, mutators, use cases and
repositories is one of these kinds. The API layer maps each kind to a single
HTTP status and the uniform response envelope.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure"""
    field: str
    message: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "message": self.message, "value": self.value}


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CampusConnectError(Exception):
    """Base exception for all Campus Connect errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Error kinds
# -----------------------------------------------------------------------------


class ValidationError(CampusConnectError, ValueError):
    """Raised when input is malformed, out of range, or breaks a cross-field invariant."""

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[FieldError]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.errors: List[FieldError] = list(errors or [])

    @classmethod
    def for_field(cls, field: str, message: str, value: Any = None) -> "ValidationError":
        return cls(message, [FieldError(field=field, message=message, value=value)])


class NotFoundError(CampusConnectError):
    """Raised when a well-formed identifier matches no entity."""
    pass


class ConflictError(CampusConnectError):
    """Raised when an operation would break a uniqueness or state invariant."""
    pass


class StorageError(CampusConnectError):
    """Raised when the document store fails in a way callers cannot fix."""
    pass
