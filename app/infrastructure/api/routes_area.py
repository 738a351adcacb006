"""Area endpoints: start an asynchronous radius search, poll its result."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from app.application.use_cases.area_search import AreaSearchUseCase
from app.domain.value_objects.enums import JobStatus
from app.infrastructure.api.dependencies import get_area_search_uc
from app.infrastructure.api.serializers import serialize_cities

router = APIRouter(tags=["area"])


@router.get("/area", status_code=status.HTTP_202_ACCEPTED)
def start_area_search(
    request: Request,
    background_tasks: BackgroundTasks,
    from_guid: Annotated[str, Query(alias="from")],
    radius_km: Annotated[float, Query(alias="distance", ge=0, allow_inf_nan=False)],
    uc: Annotated[AreaSearchUseCase, Depends(get_area_search_uc)],
):
    """Accept a radius search and return the URL to poll for its result.

    The search itself runs as a background task once this response is sent.
    """
    handle = uc.start(from_guid, radius_km)
    request.state.job_handle = handle
    background_tasks.add_task(uc.run, handle, from_guid, radius_km)
    return {"resultsUrl": str(request.url_for("get_area_result", handle=handle))}


@router.get("/area-result/{handle}", name="get_area_result")
def get_area_result(
    request: Request,
    handle: str,
    uc: Annotated[AreaSearchUseCase, Depends(get_area_search_uc)],
):
    """202 while pending, 200 with the cities once done, 500 if the search failed."""
    request.state.job_handle = handle
    job = uc.poll(handle)

    if job.status == JobStatus.PENDING:
        return JSONResponse(status_code=status.HTTP_202_ACCEPTED, content={})
    if job.status == JobStatus.FAILED:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": job.error, "status": job.status.value},
        )
    return serialize_cities(job.result)
