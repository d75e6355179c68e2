"""Service test fixtures — a fresh VaccineService per test.

Invariants:
    - Every test gets its own empty registry (no shared module state)
"""

import pytest

from vaccine_registry.services.vaccine_service import VaccineService


@pytest.fixture
def service() -> VaccineService:
    return VaccineService()
