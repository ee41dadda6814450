"""
Shared test fixtures.

Everything here is in-memory and stateless: each test gets a fresh queue
or scheduler, so tests are fully isolated and run in milliseconds.
"""

import pytest

from scheduler.base import SchedulableJob
from scheduler.bucket_queue import BoundedPriorityQueue
from scheduler.bucket_priority import BucketPriorityScheduler
from scheduler.heap_priority import HeapPriorityScheduler


@pytest.fixture
def queue():
    """A fresh, empty bucket queue."""
    return BoundedPriorityQueue()


@pytest.fixture(params=[BucketPriorityScheduler, HeapPriorityScheduler], ids=["bucket", "heap"])
def any_scheduler(request):
    """Every priority policy — tests using this must pass for both."""
    return request.param()


@pytest.fixture
def make_job():
    """Factory for SchedulableJob with sensible defaults."""
    def _make_job(job_id: str, priority: int = 3, **kwargs) -> SchedulableJob:
        return SchedulableJob(
            job_id=job_id,
            job_type=kwargs.get("job_type", "sleep"),
            priority=priority,
            enqueued_at=kwargs.get("enqueued_at", 0.0),
            payload=kwargs.get("payload", {}),
        )
    return _make_job
