"""Tests for domain entities."""

import pytest

from app.domain.entities.address import Address
from app.domain.entities.area_job import AreaJob
from app.domain.exceptions import JobStateError
from app.domain.value_objects.enums import JobStatus
from app.domain.value_objects.geo_point import GeoPoint


def _address(guid="a-1", tags=("excepteurus",), is_active=True) -> Address:
    return Address(
        guid=guid,
        location=GeoPoint(latitude=10.0, longitude=20.0),
        address="1 Test Street",
        tags=tags,
        is_active=is_active,
    )


def test_address_matches_tag_and_status():
    a = _address(tags=("excepteurus", "nulla"), is_active=True)
    assert a.matches("nulla", True) is True
    assert a.matches("nulla", False) is False
    assert a.matches("amet", True) is False


def test_address_tag_match_is_exact():
    a = _address(tags=("excepteurus",))
    assert a.has_tag("excepteur") is False
    assert a.has_tag("EXCEPTEURUS") is False


def test_area_job_starts_pending():
    job = AreaJob(handle="h-1")
    view = job.snapshot()
    assert view.status == JobStatus.PENDING
    assert view.is_pending is True
    assert view.result is None
    assert view.finished_at is None


def test_area_job_complete():
    job = AreaJob(handle="h-1")
    job.complete((_address(),))
    view = job.snapshot()
    assert view.status == JobStatus.COMPLETED
    assert [a.guid for a in view.result] == ["a-1"]
    assert view.finished_at is not None


def test_area_job_fail():
    job = AreaJob(handle="h-1")
    job.fail("KeyError: 'latitude'")
    view = job.snapshot()
    assert view.status == JobStatus.FAILED
    assert view.error == "KeyError: 'latitude'"
    assert view.result is None


def test_area_job_finishes_only_once():
    job = AreaJob(handle="h-1")
    job.complete(())
    with pytest.raises(JobStateError):
        job.complete(())
    with pytest.raises(JobStateError):
        job.fail("late")


def test_snapshot_does_not_follow_later_changes():
    job = AreaJob(handle="h-1")
    before = job.snapshot()
    job.complete(())
    assert before.status == JobStatus.PENDING
