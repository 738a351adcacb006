"""City endpoints: tag filter, pairwise distance, full dataset download."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import partial
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from app.application.use_cases.lookup_addresses import (
    FilterCitiesUseCase,
    MeasureDistanceUseCase,
)
from app.config import Settings
from app.infrastructure.api.dependencies import (
    get_filter_cities_uc,
    get_measure_distance_uc,
    get_settings,
)
from app.infrastructure.api.serializers import serialize_address, serialize_cities

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cities"])


@router.get("/cities-by-tag")
def cities_by_tag(
    tag: Annotated[str, Query()],
    is_active: Annotated[bool, Query(alias="isActive")],
    uc: Annotated[FilterCitiesUseCase, Depends(get_filter_cities_uc)],
):
    """Cities carrying *tag* whose active flag matches *isActive*."""
    return serialize_cities(uc.execute(tag, is_active))


@router.get("/distance")
def distance(
    from_guid: Annotated[str, Query(alias="from")],
    to_guid: Annotated[str, Query(alias="to")],
    uc: Annotated[MeasureDistanceUseCase, Depends(get_measure_distance_uc)],
):
    """Great-circle distance between two cities, km with scale of 3."""
    result = uc.execute(from_guid, to_guid)
    return {
        "from": serialize_address(result.origin),
        "to": serialize_address(result.destination),
        "distance": result.distance,
        "unit": result.unit,
    }


def _iter_file(path: Path, chunk_size: int) -> Iterator[bytes]:
    """Yield the file in chunks. Nothing is opened until the first chunk is pulled."""
    try:
        with open(path, "rb") as f:
            yield from iter(partial(f.read, chunk_size), b"")
    except OSError:
        # Headers are already sent; the only option left is to abort the body
        logger.exception("Stream of %s interrupted", path)
        raise


@router.get("/all-cities")
def all_cities(settings: Annotated[Settings, Depends(get_settings)]):
    """Stream the raw dataset file, chunk by chunk, without buffering it."""
    path = Path(settings.addresses_path)
    try:
        size = path.stat().st_size
    except OSError:
        logger.exception("Cannot stat dataset %s for streaming", path)
        raise HTTPException(status_code=500, detail="Server error")

    return StreamingResponse(
        _iter_file(path, settings.stream_chunk_size),
        media_type="application/json",
        headers={"Content-Length": str(size)},
    )
