"""Cache port definition (interfaces and DTO)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

__all__ = ["AsyncEventQueue", "AsyncEventQueueSnapshot", "CachePort", "OrderPolicy"]


class OrderPolicy(str, Enum):
    """Dispatch ordering guarantee of a parallel async event queue."""

    KEY = "KEY"
    THREAD = "THREAD"
    PARTITION = "PARTITION"


class AsyncEventQueue(Protocol):
    """Read-only view of one async event queue owned by the cache.

    Only valid for the duration of the call that obtained it.
    """

    @property
    def id(self) -> str: ...

    @property
    def batch_conflation_enabled(self) -> bool: ...

    @property
    def batch_size(self) -> int: ...

    @property
    def batch_time_interval(self) -> int: ...

    @property
    def disk_store_name(self) -> str | None: ...

    @property
    def disk_synchronous(self) -> bool: ...

    @property
    def dispatcher_threads(self) -> int: ...

    @property
    def forward_expiration_destroy(self) -> bool: ...

    @property
    def maximum_queue_memory(self) -> int: ...

    @property
    def order_policy(self) -> OrderPolicy: ...

    @property
    def parallel(self) -> bool: ...

    @property
    def persistent(self) -> bool: ...

    @property
    def primary(self) -> bool: ...

    @property
    def size(self) -> int: ...


class CachePort(Protocol):
    """Handle to a cache instance that owns async event queues."""

    def get_async_event_queues(self) -> Iterable[AsyncEventQueue]:
        """Return the async event queues currently defined in the cache.

        Returns:
            Queues in no particular order.
        """
        ...


@dataclass(slots=True, frozen=True)
class AsyncEventQueueSnapshot:
    """Immutable copy of an async event queue's configuration.

    Attributes:
        id: Queue identifier.
        batch_conflation_enabled: True if events for the same key are coalesced.
        batch_size: Maximum number of events per dispatched batch.
        batch_time_interval: Maximum wait before dispatching a batch, in ms.
        disk_store_name: Disk store used for overflow/persistence; None if unset.
        disk_synchronous: True if disk writes are synchronous.
        dispatcher_threads: Number of dispatcher threads.
        forward_expiration_destroy: True if expiration destroys are forwarded.
        maximum_queue_memory: Memory limit in MB before overflowing to disk.
        order_policy: Dispatch ordering policy.
        parallel: True for a parallel (partitioned) queue.
        persistent: True if the queue is persisted to disk.
        primary: True if this member hosts the primary queue.
        size: Number of events currently queued.
    """

    id: str
    batch_conflation_enabled: bool = False
    batch_size: int = 100
    batch_time_interval: int = 5
    disk_store_name: str | None = None
    disk_synchronous: bool = True
    dispatcher_threads: int = 5
    forward_expiration_destroy: bool = False
    maximum_queue_memory: int = 100
    order_policy: OrderPolicy = OrderPolicy.KEY
    parallel: bool = False
    persistent: bool = False
    primary: bool = False
    size: int = 0
