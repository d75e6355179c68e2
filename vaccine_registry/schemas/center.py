"""Center Schemas — Location, VaccineAvailability, VaccineCenter entity models.

Invariants:
    - All fields optional: a bare VaccineCenter() is constructible and is what
      the registry rejects as "empty"
    - Instances are mutable and stored by reference; the registry hands out
      the live object, never a copy
    - Equality is field-wise (pydantic), so two centers with the same data compare equal

Design Decisions:
    - vaccine_type / dose_type / cost_types typed as str, not the Enums:
      unknown values must be accepted and simply never match (no deep validation)
    - VaccineType/DoseType/CostType members still pass through, str Enums are str
"""

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Postal address of a vaccination center."""
    street: str | None = None
    district: str | None = None
    state: str | None = None
    pin_code: int | None = None


class VaccineAvailability(BaseModel):
    """Slot counts for one (vaccine_type, dose_type) pair at one center."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    vaccine_type: str | None = None
    dose_type: str | None = None
    available_quantity_count: int | None = None
    booked_quantity_count: int | None = None

    def offers(self, vaccine_type: str | None, dose_type: str | None) -> bool:
        return self.vaccine_type == vaccine_type and self.dose_type == dose_type


class VaccineCenter(BaseModel):
    """A registered vaccination center and its availability records."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    location: Location | None = None
    vaccine_types: list[str] | None = None
    dose_types: list[str] | None = None
    cost_types: list[str] | None = None
    vaccine_availabilities: list[VaccineAvailability] | None = Field(
        default=None,
        description="Ordered availability records; list order is booking order.",
    )

    @property
    def is_empty(self) -> bool:
        """True when every field is absent or falsy."""
        return not any((
            self.id,
            self.name,
            self.location,
            self.vaccine_types,
            self.dose_types,
            self.cost_types,
            self.vaccine_availabilities,
        ))

    @property
    def availabilities(self) -> list[VaccineAvailability]:
        return self.vaccine_availabilities or []
