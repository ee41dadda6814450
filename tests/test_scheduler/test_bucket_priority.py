"""
Tests specific to the bucket-backed scheduler: handle bookkeeping and logging.
"""

import logging

from scheduler.bucket_priority import BucketPriorityScheduler


def test_handles_are_released_on_dequeue(make_job):
    scheduler = BucketPriorityScheduler()
    scheduler.enqueue(make_job("a", 1))
    scheduler.enqueue(make_job("b", 2))

    scheduler.dequeue()
    scheduler.cancel("b")

    assert scheduler._handles == {}
    assert scheduler.size() == 0


def test_cancel_is_logged(make_job, caplog):
    scheduler = BucketPriorityScheduler()
    scheduler.enqueue(make_job("payment", 0))

    with caplog.at_level(logging.INFO, logger="scheduler.bucket_priority"):
        scheduler.cancel("payment")

    assert "Cancelled job payment (priority 0)" in caplog.text


def test_policy_name():
    assert BucketPriorityScheduler().policy_name == "bucket"
