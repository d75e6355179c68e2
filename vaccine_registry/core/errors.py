"""Error Hierarchy — typed, categorized exceptions for registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Categories collapse to three caller-facing reasons: not found, duplicate, invalid input
      (plus business_rule for an unbookable slot)
    - A raised RegistryError means the registry was NOT mutated
    - to_response() produces the envelope an outer layer can return as-is
    - A caller-supplied ErrorContext is copied, never mutated

Design Decisions:
    - Single hierarchy with RegistryError base: the service facade catches one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from vaccine_registry.core.domain_types import AvailabilityId


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE = "business_rule"


@dataclass
class ErrorContext:
    """Identifiers involved in the failed operation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    center_id: str | None = None
    availability_id: str | None = None
    vaccine_type: str | None = None
    dose_type: str | None = None
    debug_info: dict[str, Any] | None = None


def _with_ids(context: ErrorContext | None, **ids: str | None) -> ErrorContext:
    """Copy of the caller's context with the failing ids filled in."""
    return replace(context or ErrorContext(), **ids)


class RegistryError(Exception):
    """Base exception for all registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "center_id": self.context.center_id,
                    "availability_id": self.context.availability_id,
                    "vaccine_type": self.context.vaccine_type,
                    "dose_type": self.context.dose_type,
                },
            }
        }


# ─── Invalid Input ───────────────────────────────────────────────

class InvalidCenterError(RegistryError):
    """Center is missing, empty, or has no id."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid vaccine center: {reason}",
            "INVALID_CENTER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.reason = reason


class InvalidAvailabilityError(RegistryError):
    """Availability is missing or has no id to match on."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid vaccine availability: {reason}",
            "INVALID_AVAILABILITY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.reason = reason


# ─── Not Found ───────────────────────────────────────────────────

class CenterNotFoundError(RegistryError):
    def __init__(self, center_id: str | None, context: ErrorContext | None = None):
        ctx = _with_ids(context, center_id=center_id)
        super().__init__(
            f"Vaccine center '{center_id}' not found",
            "CENTER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


class AvailabilityNotFoundError(RegistryError):
    def __init__(
        self,
        center_id: str,
        availability_id: AvailabilityId,
        context: ErrorContext | None = None,
    ):
        ctx = _with_ids(context, center_id=center_id, availability_id=availability_id)
        super().__init__(
            f"Availability '{availability_id}' not found in center '{center_id}'",
            "AVAILABILITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


# ─── Duplicate ───────────────────────────────────────────────────

class DuplicateCenterError(RegistryError):
    def __init__(self, center_id: str, context: ErrorContext | None = None):
        ctx = _with_ids(context, center_id=center_id)
        super().__init__(
            f"Vaccine center '{center_id}' already registered",
            "DUPLICATE_CENTER", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx,
        )


class DuplicateAvailabilityError(RegistryError):
    def __init__(
        self,
        center_id: str,
        availability_id: AvailabilityId,
        context: ErrorContext | None = None,
    ):
        ctx = _with_ids(context, center_id=center_id, availability_id=availability_id)
        super().__init__(
            f"Availability '{availability_id}' already exists in center '{center_id}'",
            "DUPLICATE_AVAILABILITY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx,
        )


# ─── Business Rule ───────────────────────────────────────────────

class SlotUnavailableError(RegistryError):
    """No entry with stock left for the requested vaccine/dose pair."""
    def __init__(
        self,
        center_id: str,
        vaccine_type: str | None,
        dose_type: str | None,
        context: ErrorContext | None = None,
    ):
        ctx = _with_ids(
            context, center_id=center_id, vaccine_type=vaccine_type, dose_type=dose_type,
        )
        super().__init__(
            f"No {vaccine_type}/{dose_type} slot available at center '{center_id}'",
            "SLOT_UNAVAILABLE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.INFO, ctx,
        )
