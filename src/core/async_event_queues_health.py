"""Health indicator reporting async event queue configuration."""

import logging
from typing import Any

from src.core.health_indicator import AbstractHealthIndicator
from src.ports.cache import AsyncEventQueue, CachePort
from src.ports.health import HealthBuilder

__all__ = [
    "AsyncEventQueuesHealthIndicator",
    "DETAIL_KEY_PREFIX",
    "async_event_queue_key",
    "empty_if_unset",
    "to_yes_no_string",
]

logger = logging.getLogger(__name__)

DETAIL_KEY_PREFIX = "geode.async-event-queue"


def to_yes_no_string(value: bool) -> str:
    """Render a boolean the way health dashboards expect it."""
    return "Yes" if value else "No"


def empty_if_unset(value: str | None) -> str:
    return value if value is not None else ""


def async_event_queue_key(queue_id: str, attribute: str) -> str:
    """Build the namespaced detail key for one queue attribute.

    Args:
        queue_id: Async event queue identifier.
        attribute: Kebab-case attribute name.

    Returns:
        Key of the form geode.async-event-queue.<id>.<attribute>.
    """
    return f"{DETAIL_KEY_PREFIX}.{queue_id}.{attribute}"


def _queue_details(queue: AsyncEventQueue) -> dict[str, Any]:
    """Extract the reported configuration of one queue.

    Boolean attributes become "Yes"/"No"; everything else keeps its type.
    """
    return {
        "batch-conflation-enabled": to_yes_no_string(queue.batch_conflation_enabled),
        "batch-size": queue.batch_size,
        "batch-time-interval": queue.batch_time_interval,
        "disk-store-name": empty_if_unset(queue.disk_store_name),
        "disk-synchronous": to_yes_no_string(queue.disk_synchronous),
        "dispatcher-threads": queue.dispatcher_threads,
        "forward-expiration-destroy": to_yes_no_string(queue.forward_expiration_destroy),
        "max-queue-memory": queue.maximum_queue_memory,
        "order-policy": queue.order_policy,
        "parallel": to_yes_no_string(queue.parallel),
        "persistent": to_yes_no_string(queue.persistent),
        "primary": to_yes_no_string(queue.primary),
        "size": queue.size,
    }


class AsyncEventQueuesHealthIndicator(AbstractHealthIndicator):
    """Reports the configuration and size of every async event queue in a cache.

    A single unreadable queue fails the whole check; there is no per-queue
    isolation.
    """

    def __init__(self, cache: CachePort | None) -> None:
        """Initialize indicator.

        Args:
            cache: Cache whose queues are reported; None if no cache is available.
        """
        self.cache = cache

    def do_health_check(self, builder: HealthBuilder) -> None:
        """Write one detail per queue attribute, then mark the check UP.

        Args:
            builder: Report sink for the current check.

        Notes:
            - Reports UNKNOWN without details when no cache is available.
            - Errors raised by the cache propagate unchanged.
        """
        if self.cache is None:
            logger.debug("No cache available, async event queue health is unknown")
            builder.unknown()
            return

        count = 0
        for queue in self.cache.get_async_event_queues():
            if queue is None:
                continue
            queue_id = queue.id
            for attribute, value in _queue_details(queue).items():
                builder.with_detail(async_event_queue_key(queue_id, attribute), value)
            count += 1

        logger.debug(f"Reported {count} async event queue(s)")
        builder.up()
