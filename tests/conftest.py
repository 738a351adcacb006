"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.adapters.memory.address_store import InMemoryAddressStore
from app.config import Settings
from app.main import create_app

ACCESS_TOKEN = "dGhlc2VjcmV0dG9rZW4="


@pytest.fixture
def sample_records() -> list[dict]:
    """Five addresses around (-1.409358, -37.257104), in dataset order.

    Distances from the first record: far 13376.38 km, north 111.19 km,
    east 222.32 km, south 333.58 km.
    """
    return [
        {
            "index": 0,
            "guid": "ed354fef-31d3-44a9-b92f-4a3bd7eb0408",
            "latitude": -1.409358,
            "longitude": -37.257104,
            "address": "710 Dare Place, Sena, Georgia, 2405",
            "tags": ["excepteurus", "nulla"],
            "isActive": True,
        },
        {
            "index": 1,
            "guid": "17f4ceee-8270-4119-87c0-9c1ef946695e",
            "latitude": 61.112683,
            "longitude": 142.742896,
            "address": "466 Amity Street, Wollochet, Kansas, 5613",
            "tags": ["nulla"],
            "isActive": False,
        },
        {
            "index": 2,
            "guid": "b1a6c4de-6d2f-4a3c-9f0e-2a8a0f6a9f11",
            "latitude": -0.409358,
            "longitude": -37.257104,
            "address": "859 Cyrus Avenue, Devon, Missouri, 1642",
            "tags": ["excepteurus"],
            "isActive": False,
        },
        {
            "index": 3,
            "guid": "c2b7d5ef-7e30-4b4d-8a1f-3b9b1a7ba022",
            "latitude": -1.409358,
            "longitude": -35.257104,
            "address": "120 Dewitt Avenue, Brady, Ohio, 3311",
            "tags": ["nulla", "amet"],
            "isActive": True,
        },
        {
            "index": 4,
            "guid": "d3c8e6f0-8f41-4c5e-9b20-4cac2b8cb133",
            "latitude": -4.409358,
            "longitude": -37.257104,
            "address": "45 Gates Avenue, Ruckersville, Utah, 9087",
            "tags": ["amet"],
            "isActive": True,
        },
    ]


@pytest.fixture
def dataset_path(tmp_path: Path, sample_records: list[dict]) -> Path:
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps(sample_records, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def address_store(dataset_path: Path) -> InMemoryAddressStore:
    return InMemoryAddressStore.from_file(dataset_path)


@pytest.fixture
def settings(dataset_path: Path) -> Settings:
    return Settings(
        ACCESS_TOKEN_SECRET=ACCESS_TOKEN,
        ADDRESSES_PATH=str(dataset_path),
        STREAM_CHUNK_SIZE=64,
    )


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"bearer {ACCESS_TOKEN}"}
