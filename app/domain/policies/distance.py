"""Distance policy: great-circle distance between two addresses."""

from __future__ import annotations

from app.domain.entities.address import Address

DISTANCE_DECIMALS = 3


def distance_km(a: Address, b: Address) -> float:
    """Haversine distance in km between two addresses, full precision."""
    return a.location.haversine_km(b.location)


def round_distance(km: float) -> float:
    """Round a distance for presentation (km with scale of 3)."""
    return round(km, DISTANCE_DECIMALS)
