"""AreaSearchUseCase: start, run and poll asynchronous radius searches."""

from __future__ import annotations

import logging

from app.application.ports.address_repo import AddressRepository
from app.application.ports.job_registry import JobRegistry
from app.domain.entities.area_job import AreaJobView
from app.domain.exceptions import JobNotFoundError
from app.domain.policies.area_search import find_within_radius

logger = logging.getLogger(__name__)


class AreaSearchUseCase:
    """Orchestrates the polling protocol around the job registry.

    Protocol:
    1. start() validates the origin and registers a PENDING job.
    2. The caller answers the client with the handle, then schedules run().
    3. run() computes the result and completes the job, or fails it.
    4. poll() returns the job snapshot for a handle.
    """

    def __init__(self, addresses: AddressRepository, jobs: JobRegistry):
        self._addresses = addresses
        self._jobs = jobs

    def start(self, from_guid: str, radius_km: float) -> str:
        """Register a search and return its handle.

        Raises:
            AddressNotFoundError: if the origin guid is unknown.
        """
        self._addresses.require(from_guid)
        handle = self._jobs.create()
        logger.info("Area search %s queued: from=%s radius=%.3f km", handle, from_guid, radius_km)
        return handle

    def run(self, handle: str, from_guid: str, radius_km: float) -> None:
        """Compute the search for *handle* and record the outcome.

        Never raises for computation errors: they are logged and stored on
        the job as FAILED so pollers get an answer.
        """
        try:
            origin = self._addresses.require(from_guid)
            cities = find_within_radius(origin, self._addresses, radius_km)
        except Exception as e:
            logger.exception("Area search %s failed", handle)
            self._jobs.fail(handle, f"{type(e).__name__}: {e}")
            return

        self._jobs.complete(handle, cities)
        logger.info("Area search %s completed with %d addresses", handle, len(cities))

    def poll(self, handle: str) -> AreaJobView:
        """Raises JobNotFoundError for an unknown handle."""
        job = self._jobs.get(handle)
        if job is None:
            raise JobNotFoundError(handle)
        return job
