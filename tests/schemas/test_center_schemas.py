"""Center & Search schema tests — optional fields, emptiness, computed count.

Invariants:
    - Bare instances are constructible (every field optional)
    - is_empty is True only when every field is falsy
    - total_count mirrors len(results), including after mutation
    - Nested centers are kept by reference in SearchResponse
"""

import pytest
from pydantic import ValidationError

from vaccine_registry.core.domain_types import DoseType, VaccineType
from vaccine_registry.schemas.center import Location, VaccineAvailability, VaccineCenter
from vaccine_registry.schemas.search import SearchRequest, SearchResponse


def test_bare_center_is_empty():
    assert VaccineCenter().is_empty


def test_center_with_only_empty_availability_list_is_empty():
    assert VaccineCenter(vaccine_availabilities=[]).is_empty


@pytest.mark.parametrize("fields", [
    {"id": "c1"},
    {"name": "Clinic"},
    {"location": Location(district="kolhapur")},
    {"vaccine_types": [VaccineType.COVAXIN]},
    {"dose_types": [DoseType.FIRST_DOSE]},
    {"cost_types": ["FREE"]},
    {"vaccine_availabilities": [VaccineAvailability(id="1")]},
])
def test_any_single_field_makes_center_non_empty(fields):
    assert not VaccineCenter(**fields).is_empty


def test_availabilities_defaults_to_empty_list():
    assert VaccineCenter(id="c1").availabilities == []


def test_centers_with_same_data_are_equal():
    a = VaccineCenter(id="c1", name="x", location=Location(pin_code=416115))
    b = VaccineCenter(id="c1", name="x", location=Location(pin_code=416115))
    assert a == b
    assert a is not b


def test_availability_offers_matches_both_fields():
    availability = VaccineAvailability(
        id="1", vaccine_type=VaccineType.COVAXIN, dose_type=DoseType.FIRST_DOSE,
    )
    assert availability.offers("COVAXIN", "FIRST_DOSE")
    assert not availability.offers("COVAXIN", "SECOND_DOSE")
    assert not availability.offers(None, None)


def test_unknown_vaccine_type_is_accepted():
    availability = VaccineAvailability(id="1", vaccine_type="MODERNA")
    assert availability.vaccine_type == "MODERNA"


def test_non_numeric_quantity_rejected():
    with pytest.raises(ValidationError):
        VaccineAvailability(id="1", available_quantity_count="many")


def test_search_request_defaults_to_no_criteria():
    request = SearchRequest()
    assert request.vaccine_type is None
    assert request.dose_type is None


def test_search_response_total_count_tracks_results():
    center = VaccineCenter(id="c1")
    response = SearchResponse(results=[center, center])
    assert response.total_count == 2
    response.results.append(center)
    assert response.total_count == 3


def test_search_response_keeps_center_references():
    center = VaccineCenter(id="c1")
    response = SearchResponse(results=[center])
    assert response.results[0] is center


def test_search_response_serializes_total_count():
    dumped = SearchResponse(results=[VaccineCenter(id="c1")]).model_dump()
    assert dumped["total_count"] == 1
    assert dumped["results"][0]["id"] == "c1"


def test_unlisted_cost_type_is_accepted():
    center = VaccineCenter(id="c1", cost_types=["PAID"])
    assert center.cost_types == ["PAID"]
