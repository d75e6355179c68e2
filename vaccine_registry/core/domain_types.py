"""Domain Types — identity wrappers and known enum values for the registry.

Invariants:
    - CenterId is globally unique; AvailabilityId is unique within one center
    - VaccineType, DoseType, CostType list the known values only; the sets are
      open, the registry compares them as plain strings and never rejects unknown ones

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: members compare equal to their raw string value, so callers
      may pass either the member or the string
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CenterId = NewType("CenterId", str)
AvailabilityId = NewType("AvailabilityId", str)


# ─── Enums ───────────────────────────────────────────────────────

class VaccineType(str, Enum):
    """Vaccine brands a center can stock."""
    COVAXIN = "COVAXIN"
    COVISHIELD = "COVISHIELD"


class DoseType(str, Enum):
    """Dose position in the vaccination schedule."""
    FIRST_DOSE = "FIRST_DOSE"
    SECOND_DOSE = "SECOND_DOSE"


class CostType(str, Enum):
    """Whether a center charges for the dose."""
    FREE = "FREE"
