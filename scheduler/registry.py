"""
Scheduler factory — maps policy names to scheduler classes.

Instead of if/elif chains in the benchmark and CLI, there is ONE place
that knows how to create schedulers. Adding a policy = create the class,
add one line here.
"""

from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.bucket_priority import BucketPriorityScheduler
from scheduler.heap_priority import HeapPriorityScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.BUCKET: BucketPriorityScheduler,
    SchedulingPolicy.HEAP: HeapPriorityScheduler,
}


def create_scheduler(policy: Optional[SchedulingPolicy] = None) -> AbstractScheduler:
    """
    Create a scheduler instance for the given policy.

    Accepts the enum member or its string value ("bucket", "heap").
    With no argument, uses settings.DEFAULT_SCHEDULING_POLICY.
    Raises ValueError for anything else.
    """
    if policy is None:
        policy = settings.DEFAULT_SCHEDULING_POLICY

    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")
    return cls()
