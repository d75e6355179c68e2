"""Center Search — find centers offering a vaccine/dose pair.

Invariants:
    - Pure functions: no IO, no mutation of the centers passed in
    - A center matches iff ONE availability record has both the vaccine_type AND the dose_type
    - A missing criterion (None or empty) matches nothing
    - Results keep the order of the input centers
    - multi_search_centers concatenates per-request results in request order
      and does NOT deduplicate: a center matching two requests appears twice

Design Decisions:
    - Stock level ignored: a sold-out record still makes its center discoverable
    - Duplicates kept in multi-search: callers count matches per request
"""

from collections.abc import Iterable, Sequence

from vaccine_registry.schemas.center import VaccineCenter
from vaccine_registry.schemas.search import SearchRequest, SearchResponse


def center_offers(
    center: VaccineCenter, vaccine_type: str | None, dose_type: str | None,
) -> bool:
    """Check if any availability record of the center matches both criteria."""
    return any(
        availability.offers(vaccine_type, dose_type)
        for availability in center.availabilities
    )


def search_centers(
    centers: Iterable[VaccineCenter],
    vaccine_type: str | None,
    dose_type: str | None,
) -> SearchResponse:
    """Search centers by vaccine type and dose type (both required)."""
    if not vaccine_type or not dose_type:
        return SearchResponse(results=[])

    return SearchResponse(
        results=[c for c in centers if center_offers(c, vaccine_type, dose_type)],
    )


def multi_search_centers(
    centers: Iterable[VaccineCenter], requests: Sequence[SearchRequest],
) -> SearchResponse:
    """Search centers matching any request; results concatenated per request."""
    centers = tuple(centers)
    results: list[VaccineCenter] = []
    for request in requests:
        results.extend(
            search_centers(centers, request.vaccine_type, request.dose_type).results,
        )
    return SearchResponse(results=results)
