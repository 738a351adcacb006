"""Synchronous lookups: tag/status filter and pairwise distance."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.address_repo import AddressRepository
from app.domain.entities.address import Address
from app.domain.policies.distance import distance_km, round_distance

logger = logging.getLogger(__name__)

DISTANCE_UNIT = "km"


@dataclass(frozen=True)
class DistanceResult:
    origin: Address
    destination: Address
    distance: float
    unit: str = DISTANCE_UNIT


class FilterCitiesUseCase:
    def __init__(self, addresses: AddressRepository):
        self._addresses = addresses

    def execute(self, tag: str, is_active: bool) -> list[Address]:
        cities = self._addresses.filter_by_tag_and_status(tag, is_active)
        logger.debug("tag=%r isActive=%s matched %d addresses", tag, is_active, len(cities))
        return cities


class MeasureDistanceUseCase:
    def __init__(self, addresses: AddressRepository):
        self._addresses = addresses

    def execute(self, from_guid: str, to_guid: str) -> DistanceResult:
        """Distance between two known addresses, rounded to 3 decimals.

        Raises:
            AddressNotFoundError: if either guid is unknown.
        """
        origin = self._addresses.require(from_guid)
        destination = self._addresses.require(to_guid)
        return DistanceResult(
            origin=origin,
            destination=destination,
            distance=round_distance(distance_km(origin, destination)),
        )
