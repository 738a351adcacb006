"""Domain -> JSON mapping for API responses."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities.address import Address


def serialize_address(a: Address) -> dict:
    """Address JSON shape used by every endpoint."""
    return {
        "guid": a.guid,
        "latitude": a.location.latitude,
        "longitude": a.location.longitude,
        "address": a.address,
        "tags": list(a.tags),
        "isActive": a.is_active,
    }


def serialize_cities(addresses: Iterable[Address]) -> dict:
    return {"cities": [serialize_address(a) for a in addresses]}
