"""Error Hierarchy tests — codes, categories and response envelope.

Tests cover:
    - Every concrete error is a RegistryError with a stable code
    - Categories collapse to not found / conflict / validation / business rule
    - Context carries the identifiers of the failed operation
    - to_response() envelope shape
"""

import pytest

from vaccine_registry.core.errors import (
    AvailabilityNotFoundError,
    CenterNotFoundError,
    DuplicateAvailabilityError,
    DuplicateCenterError,
    ErrorCategory,
    ErrorContext,
    InvalidAvailabilityError,
    InvalidCenterError,
    RegistryError,
    SlotUnavailableError,
)


@pytest.mark.parametrize("error, code, category", [
    (InvalidCenterError("center is empty"), "INVALID_CENTER", ErrorCategory.VALIDATION),
    (InvalidAvailabilityError("missing"), "INVALID_AVAILABILITY", ErrorCategory.VALIDATION),
    (CenterNotFoundError("c1"), "CENTER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND),
    (AvailabilityNotFoundError("c1", "a1"), "AVAILABILITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND),
    (DuplicateCenterError("c1"), "DUPLICATE_CENTER", ErrorCategory.CONFLICT),
    (DuplicateAvailabilityError("c1", "a1"), "DUPLICATE_AVAILABILITY", ErrorCategory.CONFLICT),
    (SlotUnavailableError("c1", "COVAXIN", "FIRST_DOSE"), "SLOT_UNAVAILABLE", ErrorCategory.BUSINESS_RULE),
])
def test_error_codes_and_categories(error, code, category):
    assert isinstance(error, RegistryError)
    assert error.code == code
    assert error.category == category


def test_not_found_context_carries_ids():
    error = AvailabilityNotFoundError("c1", "a1")
    assert error.context.center_id == "c1"
    assert error.context.availability_id == "a1"
    assert "a1" in error.message


def test_passed_context_is_copied_with_ids():
    ctx = ErrorContext(debug_info={"source": "import"})
    error = CenterNotFoundError("c9", context=ctx)
    assert error.context is not ctx
    assert error.context.center_id == "c9"
    assert error.context.debug_info == {"source": "import"}
    assert error.context.timestamp == ctx.timestamp
    assert ctx.center_id is None


def test_shared_context_does_not_leak_between_errors():
    ctx = ErrorContext()
    first = DuplicateAvailabilityError("c1", "a1", context=ctx)
    second = SlotUnavailableError("c2", "COVAXIN", "SECOND_DOSE", context=ctx)

    assert first.context.center_id == "c1"
    assert first.context.vaccine_type is None
    assert second.context.center_id == "c2"
    assert second.context.availability_id is None


def test_to_response_envelope():
    error = SlotUnavailableError("c1", "COVAXIN", "FIRST_DOSE")
    body = error.to_response()["error"]
    assert body["code"] == "SLOT_UNAVAILABLE"
    assert body["category"] == "business_rule"
    assert body["severity"] == "info"
    assert body["context"] == {
        "center_id": "c1",
        "availability_id": None,
        "vaccine_type": "COVAXIN",
        "dose_type": "FIRST_DOSE",
    }
    assert "timestamp" in body


def test_str_of_error_is_message():
    error = DuplicateCenterError("c1")
    assert str(error) == "Vaccine center 'c1' already registered"
