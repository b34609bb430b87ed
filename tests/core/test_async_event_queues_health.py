"""Tests for the async event queues health indicator."""

from unittest.mock import Mock, PropertyMock

import pytest

from src.core.async_event_queues_health import (
    AsyncEventQueuesHealthIndicator,
    empty_if_unset,
    to_yes_no_string,
)
from src.ports.cache import AsyncEventQueueSnapshot, OrderPolicy
from src.ports.health import HealthBuilder, Status

__all__ = []

ATTRIBUTES = (
    "batch-conflation-enabled",
    "batch-size",
    "batch-time-interval",
    "disk-store-name",
    "disk-synchronous",
    "dispatcher-threads",
    "forward-expiration-destroy",
    "max-queue-memory",
    "order-policy",
    "parallel",
    "persistent",
    "primary",
    "size",
)


@pytest.fixture
def queues() -> list[AsyncEventQueueSnapshot]:
    """Two queues with opposite boolean settings."""
    return [
        AsyncEventQueueSnapshot(
            id="aeqOne",
            batch_conflation_enabled=True,
            batch_size=250,
            batch_time_interval=10000,
            disk_store_name="testDiskStoreOne",
            disk_synchronous=True,
            dispatcher_threads=16,
            forward_expiration_destroy=True,
            maximum_queue_memory=65536,
            order_policy=OrderPolicy.THREAD,
            parallel=True,
            persistent=True,
            primary=True,
            size=1024,
        ),
        AsyncEventQueueSnapshot(
            id="aeqTwo",
            batch_conflation_enabled=False,
            batch_size=100,
            batch_time_interval=1000,
            disk_store_name="testDiskStoreTwo",
            disk_synchronous=False,
            dispatcher_threads=8,
            forward_expiration_destroy=False,
            maximum_queue_memory=32768,
            order_policy=OrderPolicy.KEY,
            parallel=False,
            persistent=True,
            primary=False,
            size=8192,
        ),
    ]


def test_health_check_captures_details(queues) -> None:
    """Every queue attribute should be reported under its namespaced key."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = set(queues)

    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)
    health = builder.build()

    assert health.status is Status.UP
    assert len(health.details) == 26

    expected = {
        "geode.async-event-queue.aeqOne.batch-conflation-enabled": "Yes",
        "geode.async-event-queue.aeqOne.batch-size": 250,
        "geode.async-event-queue.aeqOne.batch-time-interval": 10000,
        "geode.async-event-queue.aeqOne.disk-store-name": "testDiskStoreOne",
        "geode.async-event-queue.aeqOne.disk-synchronous": "Yes",
        "geode.async-event-queue.aeqOne.dispatcher-threads": 16,
        "geode.async-event-queue.aeqOne.forward-expiration-destroy": "Yes",
        "geode.async-event-queue.aeqOne.max-queue-memory": 65536,
        "geode.async-event-queue.aeqOne.order-policy": OrderPolicy.THREAD,
        "geode.async-event-queue.aeqOne.parallel": "Yes",
        "geode.async-event-queue.aeqOne.persistent": "Yes",
        "geode.async-event-queue.aeqOne.primary": "Yes",
        "geode.async-event-queue.aeqOne.size": 1024,
        "geode.async-event-queue.aeqTwo.batch-conflation-enabled": "No",
        "geode.async-event-queue.aeqTwo.batch-size": 100,
        "geode.async-event-queue.aeqTwo.batch-time-interval": 1000,
        "geode.async-event-queue.aeqTwo.disk-store-name": "testDiskStoreTwo",
        "geode.async-event-queue.aeqTwo.disk-synchronous": "No",
        "geode.async-event-queue.aeqTwo.dispatcher-threads": 8,
        "geode.async-event-queue.aeqTwo.forward-expiration-destroy": "No",
        "geode.async-event-queue.aeqTwo.max-queue-memory": 32768,
        "geode.async-event-queue.aeqTwo.order-policy": OrderPolicy.KEY,
        "geode.async-event-queue.aeqTwo.parallel": "No",
        "geode.async-event-queue.aeqTwo.persistent": "Yes",
        "geode.async-event-queue.aeqTwo.primary": "No",
        "geode.async-event-queue.aeqTwo.size": 8192,
    }
    assert dict(health.details) == expected

    mock_cache.get_async_event_queues.assert_called_once_with()


def test_health_check_keeps_native_types(queues) -> None:
    """Integer and order policy details should not be converted to strings."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = queues[:1]

    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)
    details = builder.build().details

    assert type(details["geode.async-event-queue.aeqOne.batch-size"]) is int
    assert details["geode.async-event-queue.aeqOne.order-policy"] is OrderPolicy.THREAD


def test_health_check_with_no_queues_is_up() -> None:
    """An empty queue enumeration should report UP without details."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = []

    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)
    health = builder.build()

    assert health.status is Status.UP
    assert dict(health.details) == {}
    mock_cache.get_async_event_queues.assert_called_once_with()


def test_health_check_without_cache_is_unknown() -> None:
    """A missing cache should report UNKNOWN without details."""
    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(None).do_health_check(builder)
    health = builder.build()

    assert health.status is Status.UNKNOWN
    assert dict(health.details) == {}


def test_health_check_skips_none_queues(queues) -> None:
    """None entries in the enumeration should be ignored."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = [None, queues[1]]

    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)
    details = builder.build().details

    assert set(details) == {f"geode.async-event-queue.aeqTwo.{a}" for a in ATTRIBUTES}


def test_health_check_reports_unset_disk_store_as_empty() -> None:
    """An unset disk store name should be reported as an empty string."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = [AsyncEventQueueSnapshot(id="aeq")]

    builder = HealthBuilder()
    AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)

    assert builder.build().details["geode.async-event-queue.aeq.disk-store-name"] == ""


def test_health_check_propagates_cache_errors() -> None:
    """Errors raised by the cache should propagate from do_health_check."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.side_effect = RuntimeError("cache closed")

    with pytest.raises(RuntimeError, match="cache closed"):
        AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(HealthBuilder())


def test_health_check_aborts_on_unreadable_queue(queues) -> None:
    """A queue whose attribute cannot be read should fail the whole check."""
    broken_queue = Mock()
    broken_queue.id = "aeqBroken"
    type(broken_queue).batch_size = PropertyMock(side_effect=RuntimeError("unreadable"))

    mock_cache = Mock()
    mock_cache.get_async_event_queues.return_value = [queues[0], broken_queue]

    builder = HealthBuilder()
    with pytest.raises(RuntimeError, match="unreadable"):
        AsyncEventQueuesHealthIndicator(mock_cache).do_health_check(builder)

    assert builder.build().status is Status.UNKNOWN


def test_health_reports_down_on_cache_error() -> None:
    """health() should turn a failing check into a DOWN report."""
    mock_cache = Mock()
    mock_cache.get_async_event_queues.side_effect = RuntimeError("cache closed")

    health = AsyncEventQueuesHealthIndicator(mock_cache).health()

    assert health.status is Status.DOWN
    assert health.details["error"] == "builtins.RuntimeError: cache closed"


def test_to_yes_no_string() -> None:
    """Booleans should render as Yes/No."""
    assert to_yes_no_string(True) == "Yes"
    assert to_yes_no_string(False) == "No"


def test_empty_if_unset() -> None:
    """None should become an empty string; other values pass through."""
    assert empty_if_unset(None) == ""
    assert empty_if_unset("diskStore") == "diskStore"
