"""Address entity: one geolocated record of the dataset."""

from dataclasses import dataclass

from app.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class Address:
    guid: str
    location: GeoPoint
    address: str
    tags: tuple[str, ...]
    is_active: bool

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def matches(self, tag: str, is_active: bool) -> bool:
        """Exact tag membership and exact active-flag match."""
        return self.is_active is is_active and self.has_tag(tag)
