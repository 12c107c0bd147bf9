"""
Field-level validation helpers shared by every domain entity.

Entities collect all of their field errors into a ``FieldValidator`` and raise
once, so a write request is rejected with the complete list of problems before
anything reaches the store.
"""

# Standard library imports
import math
import re
from typing import Any, Iterable, List, Optional, Sequence

# Local application imports
from .exceptions import FieldError, ValidationError


IMAGE_URL_PATTERN = re.compile(r"^https?://.+\.(jpg|jpeg|png|webp|gif)$", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

SEARCH_MIN_LENGTH = 2
SEARCH_MAX_LENGTH = 100


def is_valid_id(value: Any) -> bool:
    """Identifiers are 24-character hex strings (creation-time sortable)"""
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value))


def is_image_url(value: Any) -> bool:
    return isinstance(value, str) and bool(IMAGE_URL_PATTERN.match(value))


def normalize_search(term: Optional[str]) -> Optional[str]:
    """
    Normalize a free-text search term.

    Returns None for a missing or blank term.

    Raises:
        ValidationError: If the trimmed term is shorter than 2 or longer than 100 characters
    """
    if term is None or not term.strip():
        return None
    term = term.strip()
    if len(term) < SEARCH_MIN_LENGTH or len(term) > SEARCH_MAX_LENGTH:
        raise ValidationError.for_field(
            "search",
            f"Search query must be between {SEARCH_MIN_LENGTH} and {SEARCH_MAX_LENGTH} characters",
            term,
        )
    return term


class FieldValidator:
    """Collects field errors for one entity and raises them together"""

    def __init__(self) -> None:
        self.errors: List[FieldError] = []

    def add(self, field: str, message: str, value: Any = None) -> None:
        self.errors.append(FieldError(field=field, message=message, value=value))

    def has_errors_for(self, field: str) -> bool:
        return any(error.field == field for error in self.errors)

    def text(
        self,
        field: str,
        value: Optional[str],
        *,
        min_length: int = 0,
        max_length: Optional[int] = None,
        required: bool = False,
        label: Optional[str] = None,
    ) -> None:
        """Check presence and length bounds of a string field"""
        label = label or field
        if value is None:
            if required:
                self.add(field, f"{label} is required", value)
            return
        if not isinstance(value, str):
            self.add(field, f"{label} must be a string", value)
            return
        if required and not value.strip():
            self.add(field, f"{label} is required", value)
            return
        length = len(value)
        if length < min_length or (max_length is not None and length > max_length):
            if max_length is None:
                self.add(field, f"{label} must be at least {min_length} characters", value)
            elif min_length <= 1:
                self.add(field, f"{label} cannot exceed {max_length} characters", value)
            else:
                self.add(
                    field,
                    f"{label} must be between {min_length} and {max_length} characters",
                    value,
                )

    def image_url(self, field: str, value: Optional[str]) -> None:
        if value and not is_image_url(value):
            self.add(
                field,
                f"{field} must be a valid image URL (jpg, jpeg, png, webp, gif)",
                value,
            )

    def email(self, field: str, value: Optional[str]) -> None:
        if not value:
            self.add(field, "Email is required", value)
        elif not EMAIL_PATTERN.match(value):
            self.add(field, "Please enter a valid email", value)

    def reference(self, field: str, value: Optional[str], required: bool = True) -> None:
        if not value:
            if required:
                self.add(field, f"{field} is required", value)
            return
        if not is_valid_id(value):
            self.add(field, f"Invalid {field} format", value)

    def references(self, field: str, values: Sequence[str]) -> None:
        invalid = [value for value in values if not is_valid_id(value)]
        if invalid:
            self.add(field, f"Invalid {field} ID format", invalid)
        if len(set(values)) != len(values):
            self.add(field, f"{field} cannot contain duplicates", list(values))

    def number(
        self,
        field: str,
        value: Any,
        *,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        required: bool = True,
    ) -> None:
        """Check a finite number against inclusive bounds (NaN/Infinity rejected)"""
        if value is None:
            if required:
                self.add(field, f"{field} is required", value)
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            self.add(field, f"{field} must be a finite number", value)
            return
        if minimum is not None and value < minimum:
            self.add(field, f"{field} must be at least {minimum:g}", value)
        if maximum is not None and value > maximum:
            self.add(field, f"{field} must be at most {maximum:g}", value)

    def one_of(self, field: str, value: Any, allowed: Iterable[str]) -> None:
        allowed = list(allowed)
        if value not in allowed:
            self.add(field, f"{field} must be one of: {', '.join(allowed)}", value)

    def raise_if_invalid(self, message: str = "Validation failed") -> None:
        if self.errors:
            raise ValidationError(message, self.errors)
