"""FastAPI dependency injection: wires app state into use cases, guards routes."""

from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.ports.address_repo import AddressRepository
from app.application.ports.job_registry import JobRegistry
from app.application.use_cases.area_search import AreaSearchUseCase
from app.application.use_cases.lookup_addresses import (
    FilterCitiesUseCase,
    MeasureDistanceUseCase,
)
from app.config import Settings

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_address_repo(request: Request) -> AddressRepository:
    return request.app.state.addresses


def get_job_registry(request: Request) -> JobRegistry:
    return request.app.state.jobs


def require_bearer_token(
    creds: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Missing token -> 401, wrong token -> 403, otherwise pass through."""
    if creds is None or not creds.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expected = settings.access_token_secret
    if not expected or not secrets.compare_digest(
        creds.credentials.encode(), expected.encode()
    ):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid bearer token")


def get_filter_cities_uc(
    addresses: Annotated[AddressRepository, Depends(get_address_repo)],
) -> FilterCitiesUseCase:
    return FilterCitiesUseCase(addresses)


def get_measure_distance_uc(
    addresses: Annotated[AddressRepository, Depends(get_address_repo)],
) -> MeasureDistanceUseCase:
    return MeasureDistanceUseCase(addresses)


def get_area_search_uc(
    addresses: Annotated[AddressRepository, Depends(get_address_repo)],
    jobs: Annotated[JobRegistry, Depends(get_job_registry)],
) -> AreaSearchUseCase:
    return AreaSearchUseCase(addresses=addresses, jobs=jobs)
