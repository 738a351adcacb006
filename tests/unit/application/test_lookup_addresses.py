"""Tests for the synchronous lookup use cases."""

import pytest

from app.application.use_cases.lookup_addresses import (
    FilterCitiesUseCase,
    MeasureDistanceUseCase,
)
from app.domain.exceptions import AddressNotFoundError

ORIGIN_GUID = "ed354fef-31d3-44a9-b92f-4a3bd7eb0408"
FAR_GUID = "17f4ceee-8270-4119-87c0-9c1ef946695e"


def test_filter_cities(address_store):
    cities = FilterCitiesUseCase(address_store).execute("excepteurus", True)
    assert [c.guid for c in cities] == [ORIGIN_GUID]


def test_measure_distance_regression(address_store):
    result = MeasureDistanceUseCase(address_store).execute(ORIGIN_GUID, FAR_GUID)
    assert result.origin.guid == ORIGIN_GUID
    assert result.destination.guid == FAR_GUID
    assert result.distance == 13376.38
    assert result.unit == "km"


def test_measure_distance_is_symmetric(address_store):
    uc = MeasureDistanceUseCase(address_store)
    assert uc.execute(ORIGIN_GUID, FAR_GUID).distance == uc.execute(FAR_GUID, ORIGIN_GUID).distance


def test_measure_distance_to_self(address_store):
    assert MeasureDistanceUseCase(address_store).execute(ORIGIN_GUID, ORIGIN_GUID).distance == 0.0


@pytest.mark.parametrize("from_guid, to_guid", [("nope", FAR_GUID), (ORIGIN_GUID, "nope")])
def test_measure_distance_unknown_guid(address_store, from_guid, to_guid):
    with pytest.raises(AddressNotFoundError):
        MeasureDistanceUseCase(address_store).execute(from_guid, to_guid)
