"""Center Registry — in-memory owner of vaccine centers and their availabilities.

Invariants:
    - Center ids are unique; a center is stored once and its id never changes
    - Availability ids are unique within a center; id is the only match key
    - Centers iterate in insertion order (search output depends on it)
    - Every failure raises a RegistryError BEFORE any mutation
    - A successful booking moves exactly one unit: available -1, booked +1

Design Decisions:
    - Insertion-ordered dict keyed by id: O(1) lookup, ordering for free
    - Owned instance, not a module-level list: one registry per service, fresh per test
    - Returns live objects: callers observe (and may mutate) registry state through them
    - Not thread-safe: a concurrent host must serialize calls externally
"""

from vaccine_registry.core.domain_types import AvailabilityId, CenterId
from vaccine_registry.core.errors import (
    AvailabilityNotFoundError,
    CenterNotFoundError,
    DuplicateAvailabilityError,
    DuplicateCenterError,
    ErrorContext,
    InvalidAvailabilityError,
    InvalidCenterError,
    SlotUnavailableError,
)
from vaccine_registry.schemas.center import VaccineAvailability, VaccineCenter


class CenterRegistry:
    """Registry of vaccine centers. Pure state, no IO."""

    def __init__(self) -> None:
        self._centers: dict[CenterId, VaccineCenter] = {}

    def __len__(self) -> int:
        return len(self._centers)

    def __contains__(self, center_id: object) -> bool:
        return center_id in self._centers

    @property
    def centers(self) -> tuple[VaccineCenter, ...]:
        """Registered centers in insertion order."""
        return tuple(self._centers.values())

    def get(self, center_id: str | None) -> VaccineCenter | None:
        if center_id is None:
            return None
        return self._centers.get(CenterId(center_id))

    def add(self, center: VaccineCenter | None) -> VaccineCenter:
        """Register a center. Rejects empty, id-less, and duplicate centers."""
        if center is None or center.is_empty:
            raise InvalidCenterError("center is empty")
        if not center.id:
            raise InvalidCenterError("center id is required")
        if self.get(center.id) is not None:
            raise DuplicateCenterError(center.id)

        self._centers[CenterId(center.id)] = center
        return center

    def add_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> VaccineAvailability:
        """Append an availability record; the new list replaces the old one."""
        center = self._require_center(center_id)
        availability_id = _require_availability_id(center_id, availability)

        existing = center.availabilities
        if _index_of(existing, availability_id) != -1:
            raise DuplicateAvailabilityError(center_id, availability_id)

        center.vaccine_availabilities = [*existing, availability]
        return availability

    def update_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> VaccineAvailability:
        """Replace the record with the same id, wholesale, at its position."""
        center = self._require_center(center_id)
        availability_id = _require_availability_id(center_id, availability)

        index = _index_of(center.availabilities, availability_id)
        if index == -1:
            raise AvailabilityNotFoundError(center_id, availability_id)

        center.vaccine_availabilities[index] = availability
        return availability

    def remove_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> VaccineAvailability:
        """Remove the record with the same id. Other input fields are ignored."""
        center = self._require_center(center_id)
        availability_id = _require_availability_id(center_id, availability)

        index = _index_of(center.availabilities, availability_id)
        if index == -1:
            raise AvailabilityNotFoundError(center_id, availability_id)

        return center.vaccine_availabilities.pop(index)

    def book_slot(
        self, center_id: str, vaccine_type: str | None, dose_type: str | None,
    ) -> VaccineAvailability:
        """Book one unit from the first matching record that still has stock."""
        center = self._require_center(center_id)

        for availability in center.availabilities:
            if (
                availability.offers(vaccine_type, dose_type)
                and (availability.available_quantity_count or 0) > 0
            ):
                availability.booked_quantity_count = (
                    (availability.booked_quantity_count or 0) + 1
                )
                availability.available_quantity_count -= 1
                return availability

        raise SlotUnavailableError(center_id, vaccine_type, dose_type)

    def _require_center(self, center_id: str | None) -> VaccineCenter:
        center = self.get(center_id)
        if center is None:
            raise CenterNotFoundError(center_id)
        return center


def _require_availability_id(
    center_id: str, availability: VaccineAvailability | None,
) -> AvailabilityId:
    if availability is None:
        raise InvalidAvailabilityError(
            "availability is missing", ErrorContext(center_id=center_id),
        )
    if not availability.id:
        raise InvalidAvailabilityError(
            "availability id is required", ErrorContext(center_id=center_id),
        )
    return AvailabilityId(availability.id)


def _index_of(
    availabilities: list[VaccineAvailability], availability_id: AvailabilityId,
) -> int:
    """Position of the record with this id, or -1."""
    for index, availability in enumerate(availabilities):
        if availability.id == availability_id:
            return index
    return -1
