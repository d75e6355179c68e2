"""Search Schemas — query criteria and aggregated search results.

Invariants:
    - SearchResponse.total_count == len(results), always (computed, never stored)
    - results hold references to registry centers, in match order, duplicates allowed

Design Decisions:
    - computed_field for total_count: serializes like a plain field but cannot drift
"""

from pydantic import BaseModel, Field, computed_field

from vaccine_registry.schemas.center import VaccineCenter


class SearchRequest(BaseModel):
    """One (vaccine_type, dose_type) criterion. Both must be set to match anything."""
    vaccine_type: str | None = None
    dose_type: str | None = None


class SearchResponse(BaseModel):
    """Centers matching a search, in registry insertion order."""
    results: list[VaccineCenter] = Field(default_factory=list)

    @computed_field
    @property
    def total_count(self) -> int:
        return len(self.results)
