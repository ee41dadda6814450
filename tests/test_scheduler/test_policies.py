"""
Tests shared by every priority policy.

Bucket and heap must be interchangeable: same dispatch order, same
cancel semantics, same priority validation. Each test runs once per
policy via the `any_scheduler` fixture.
"""

import pytest

from scheduler.exceptions import InvalidPriorityError


def test_dequeues_highest_priority_first(any_scheduler, make_job):
    """Core guarantee: lowest priority NUMBER = highest urgency = dequeued first."""
    any_scheduler.enqueue(make_job("low", 5))
    any_scheduler.enqueue(make_job("high", 0))
    any_scheduler.enqueue(make_job("medium", 3))

    assert any_scheduler.dequeue().job_id == "high"
    assert any_scheduler.dequeue().job_id == "medium"
    assert any_scheduler.dequeue().job_id == "low"


def test_equal_priority_preserves_insertion_order(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("first", 2))
    any_scheduler.enqueue(make_job("second", 2))
    any_scheduler.enqueue(make_job("third", 2))

    assert any_scheduler.dequeue().job_id == "first"
    assert any_scheduler.dequeue().job_id == "second"
    assert any_scheduler.dequeue().job_id == "third"


def test_dequeue_from_empty_returns_none(any_scheduler):
    assert any_scheduler.dequeue() is None
    assert any_scheduler.peek() is None


def test_peek_returns_next_without_removing(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("low", 4))
    any_scheduler.enqueue(make_job("high", 1))

    assert any_scheduler.peek().job_id == "high"
    assert any_scheduler.peek().job_id == "high"
    assert any_scheduler.size() == 2


def test_mixed_priority_ordering(any_scheduler, make_job):
    """Simulate a realistic mix of priorities."""
    any_scheduler.enqueue(make_job("report", 5))     # background
    any_scheduler.enqueue(make_job("payment", 0))    # critical
    any_scheduler.enqueue(make_job("email", 3))      # normal
    any_scheduler.enqueue(make_job("alert", 1))      # high

    assert [any_scheduler.dequeue().job_id for _ in range(4)] == [
        "payment", "alert", "email", "report",
    ]
    assert any_scheduler.size() == 0


def test_cancel_removes_queued_job(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("a", 2))
    any_scheduler.enqueue(make_job("b", 2))

    assert any_scheduler.cancel("a") is True
    assert any_scheduler.size() == 1
    assert any_scheduler.peek().job_id == "b"
    assert any_scheduler.dequeue().job_id == "b"
    assert any_scheduler.dequeue() is None


def test_cancel_twice_returns_false(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("a", 2))

    assert any_scheduler.cancel("a") is True
    assert any_scheduler.cancel("a") is False
    assert any_scheduler.size() == 0


def test_cancel_after_dispatch_returns_false(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("a", 2))
    any_scheduler.dequeue()

    assert any_scheduler.cancel("a") is False


def test_cancel_unknown_job_returns_false(any_scheduler):
    assert any_scheduler.cancel("missing") is False


def test_cancelled_head_is_skipped(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("urgent", 0))
    any_scheduler.enqueue(make_job("later", 4))

    any_scheduler.cancel("urgent")

    assert any_scheduler.peek().job_id == "later"
    assert any_scheduler.dequeue().job_id == "later"


def test_job_id_can_be_reused_after_dispatch(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("retry-me", 3))
    any_scheduler.dequeue()

    any_scheduler.enqueue(make_job("retry-me", 1))
    assert any_scheduler.dequeue().priority == 1


def test_duplicate_job_id_raises(any_scheduler, make_job):
    any_scheduler.enqueue(make_job("a", 2))

    with pytest.raises(ValueError, match="already queued"):
        any_scheduler.enqueue(make_job("a", 1))
    assert any_scheduler.size() == 1


@pytest.mark.parametrize("priority", [-1, 6, 10])
def test_out_of_range_priority_raises(any_scheduler, make_job, priority):
    with pytest.raises(InvalidPriorityError):
        any_scheduler.enqueue(make_job("bad", priority))
    assert any_scheduler.size() == 0
