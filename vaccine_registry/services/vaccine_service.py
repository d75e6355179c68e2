"""Vaccine Service — boolean operation surface over the center registry.

Invariants:
    - Mutations return True on success and False on ANY RegistryError (never raise)
    - A False return means registry state is unchanged
    - search/multi_search return live center references, not copies
    - Every rejected operation logged at WARNING with its error_code

Design Decisions:
    - Booleans kept for callers that only need success/failure;
      the typed reason is available by calling self.registry directly
    - One service owns one registry: instantiate per application or per test
"""

import logging
from collections.abc import Sequence

from vaccine_registry.core.center_registry import CenterRegistry
from vaccine_registry.core.errors import RegistryError
from vaccine_registry.core.search_centers import multi_search_centers, search_centers
from vaccine_registry.schemas.center import VaccineAvailability, VaccineCenter
from vaccine_registry.schemas.search import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)


class VaccineService:
    """Register centers, manage availabilities, book slots, search."""

    def __init__(self, registry: CenterRegistry | None = None):
        self._registry = registry if registry is not None else CenterRegistry()

    @property
    def registry(self) -> CenterRegistry:
        return self._registry

    def get(self, center_id: str | None) -> VaccineCenter | None:
        return self._registry.get(center_id)

    def add(self, center: VaccineCenter | None) -> bool:
        try:
            self._registry.add(center)
        except RegistryError as e:
            _log_rejected("add", e)
            return False
        logger.info(
            f"Registered vaccine center '{center.id}'",
            extra={"center_id": center.id},
        )
        return True

    def add_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> bool:
        try:
            self._registry.add_availability(center_id, availability)
        except RegistryError as e:
            _log_rejected("add_availability", e)
            return False
        logger.info(
            f"Added availability '{availability.id}' to center '{center_id}'",
            extra={"center_id": center_id, "availability_id": availability.id},
        )
        return True

    def update_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> bool:
        try:
            self._registry.update_availability(center_id, availability)
        except RegistryError as e:
            _log_rejected("update_availability", e)
            return False
        logger.info(
            f"Updated availability '{availability.id}' in center '{center_id}'",
            extra={"center_id": center_id, "availability_id": availability.id},
        )
        return True

    def remove_availability(
        self, center_id: str, availability: VaccineAvailability | None,
    ) -> bool:
        try:
            removed = self._registry.remove_availability(center_id, availability)
        except RegistryError as e:
            _log_rejected("remove_availability", e)
            return False
        logger.info(
            f"Removed availability '{removed.id}' from center '{center_id}'",
            extra={"center_id": center_id, "availability_id": removed.id},
        )
        return True

    def book_vaccine_slot(
        self, center_id: str, vaccine_type: str | None, dose_type: str | None,
    ) -> bool:
        """Book one slot; True if the center had stock for the pair."""
        try:
            booked = self._registry.book_slot(center_id, vaccine_type, dose_type)
        except RegistryError as e:
            _log_rejected("book_vaccine_slot", e)
            return False
        logger.info(
            f"Booked slot from availability '{booked.id}' "
            f"({booked.available_quantity_count} left)",
            extra={
                "center_id": center_id,
                "availability_id": booked.id,
                "vaccine_type": vaccine_type,
                "dose_type": dose_type,
            },
        )
        return True

    def search(
        self, vaccine_type: str | None, dose_type: str | None,
    ) -> SearchResponse:
        response = search_centers(self._registry.centers, vaccine_type, dose_type)
        logger.debug(
            "Search completed",
            extra={
                "vaccine_type": vaccine_type,
                "dose_type": dose_type,
                "result_count": response.total_count,
            },
        )
        return response

    def multi_search(self, requests: Sequence[SearchRequest]) -> SearchResponse:
        response = multi_search_centers(self._registry.centers, requests)
        logger.debug(
            f"Multi search over {len(requests)} request(s) completed",
            extra={"result_count": response.total_count},
        )
        return response


def _log_rejected(operation: str, error: RegistryError) -> None:
    logger.warning(
        f"{operation} rejected: {error.message}",
        extra={
            "error_code": error.code,
            "center_id": error.context.center_id,
            "availability_id": error.context.availability_id,
        },
    )
