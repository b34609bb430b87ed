"""Health port definition (interface, builder and DTO)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Protocol

__all__ = ["Health", "HealthBuilder", "HealthIndicatorPort", "Status"]


class Status(str, Enum):
    """Overall outcome of a health check."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Health:
    """Immutable result of a health check.

    Attributes:
        status: Overall status.
        details: Detail entries written by the indicator, in insertion order.
    """

    status: Status
    details: Mapping[str, Any] = field(default_factory=dict)


class HealthBuilder:
    """Accumulates health details and status for one check.

    Starts out UNKNOWN with no details. All mutators return the builder so
    calls can be chained.
    """

    def __init__(self, status: Status = Status.UNKNOWN) -> None:
        self._status = status
        self._details: dict[str, Any] = {}

    def with_detail(self, key: str, value: Any) -> HealthBuilder:
        """Record a single detail entry.

        Args:
            key: Detail name.
            value: Detail value.

        Returns:
            This builder.

        Raises:
            ValueError: If key or value is None.
        """
        if key is None:
            raise ValueError("Key must not be None")
        if value is None:
            raise ValueError("Value must not be None")
        self._details[key] = value
        return self

    def with_details(self, details: Mapping[str, Any]) -> HealthBuilder:
        """Record every entry of the given mapping."""
        for key, value in details.items():
            self.with_detail(key, value)
        return self

    def status(self, status: Status) -> HealthBuilder:
        self._status = status
        return self

    def up(self) -> HealthBuilder:
        return self.status(Status.UP)

    def unknown(self) -> HealthBuilder:
        return self.status(Status.UNKNOWN)

    def down(self, exc: BaseException | None = None) -> HealthBuilder:
        """Mark the check DOWN, optionally recording the cause.

        Args:
            exc: Exception that made the check fail; stored as the "error" detail.

        Returns:
            This builder.
        """
        if exc is not None:
            exc_type = type(exc)
            self.with_detail("error", f"{exc_type.__module__}.{exc_type.__qualname__}: {exc}")
        return self.status(Status.DOWN)

    def build(self) -> Health:
        return Health(status=self._status, details=MappingProxyType(dict(self._details)))


class HealthIndicatorPort(Protocol):
    """Interface for components contributing to the application's health."""

    def health(self) -> Health:
        """Run the check and return its result.

        Returns:
            Health snapshot.
        """
        ...
