"""JSON loader: reads and validates the address dataset."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from app.adapters.json_loader.normalizer import (
    clean_string,
    parse_coordinate,
    parse_flag,
    parse_tags,
)
from app.domain.entities.address import Address
from app.domain.exceptions import AddressLoadError
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


def _read_json(file_path: Path, encoding: str = "utf-8-sig") -> Any:
    """Read and decode a JSON file (utf-8-sig strips a BOM automatically)."""
    try:
        with open(file_path, encoding=encoding) as f:
            return json.load(f)
    except OSError as e:
        raise AddressLoadError(f"Cannot read dataset {file_path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise AddressLoadError(f"Dataset {file_path} is not valid JSON: {e}") from e


def parse_address(raw: Any, position: int) -> Address:
    """Build an Address from one decoded dataset record.

    Expected keys: guid, latitude, longitude, address, tags, isActive.
    Unknown keys are ignored.

    Raises:
        AddressLoadError: if a required key is missing or malformed.
    """
    if not isinstance(raw, dict):
        raise AddressLoadError(f"Record #{position} is not an object")

    guid = clean_string(raw.get("guid"))
    if guid is None:
        raise AddressLoadError(f"Record #{position} has no guid")

    latitude = parse_coordinate(raw.get("latitude"))
    longitude = parse_coordinate(raw.get("longitude"))
    if latitude is None or longitude is None:
        raise AddressLoadError(f"Record {guid} has invalid coordinates")

    tags = parse_tags(raw.get("tags", []))
    if tags is None:
        raise AddressLoadError(f"Record {guid} has invalid tags")

    is_active = parse_flag(raw.get("isActive"))
    if is_active is None:
        raise AddressLoadError(f"Record {guid} has invalid isActive flag")

    address = raw.get("address", "")
    if not isinstance(address, str):
        raise AddressLoadError(f"Record {guid} has invalid address")

    try:
        location = GeoPoint(latitude=latitude, longitude=longitude)
    except ValueError as e:
        raise AddressLoadError(f"Record {guid}: {e}") from e

    return Address(
        guid=guid,
        location=location,
        address=address,
        tags=tags,
        is_active=is_active,
    )


def load_addresses(file_path: Path) -> list[Address]:
    """Load and validate the address dataset.

    Args:
        file_path: path to a JSON file holding an array of address records.

    Returns:
        Addresses in dataset order.

    Raises:
        AddressLoadError: if the file is unreadable or any record is malformed.
    """
    data = _read_json(file_path)
    if not isinstance(data, list):
        raise AddressLoadError(f"Dataset {file_path} must contain a JSON array")

    addresses = [parse_address(raw, position) for position, raw in enumerate(data)]
    logger.info("Loaded %d addresses from %s", len(addresses), file_path.name)
    return addresses
