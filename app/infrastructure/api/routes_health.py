"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.application.ports.address_repo import AddressRepository
from app.application.ports.job_registry import JobRegistry
from app.infrastructure.api.dependencies import get_address_repo, get_job_registry

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(
    addresses: Annotated[AddressRepository, Depends(get_address_repo)],
    jobs: Annotated[JobRegistry, Depends(get_job_registry)],
):
    """Report dataset size and how many area-search jobs are being retained."""
    return {
        "status": "ok",
        "addresses": len(addresses),
        "jobs": len(jobs),
    }
