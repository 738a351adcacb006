"""AreaSearchPolicy: every address within a radius of an origin."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities.address import Address
from app.domain.policies.distance import distance_km


def find_within_radius(
    origin: Address,
    candidates: Iterable[Address],
    radius_km: float,
) -> list[Address]:
    """Return candidates whose distance to *origin* is at most *radius_km*.

    The origin itself (matched by guid) is always excluded. The boundary is
    inclusive and the output keeps the iteration order of *candidates*.

    Raises:
        ValueError: if radius_km is negative.
    """
    if radius_km < 0:
        raise ValueError(f"Radius must not be negative: {radius_km}")

    return [
        candidate
        for candidate in candidates
        if candidate.guid != origin.guid and distance_km(origin, candidate) <= radius_km
    ]
