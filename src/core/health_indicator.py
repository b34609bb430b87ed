"""Base class for health indicators."""

import logging
from abc import ABC, abstractmethod

from src.ports.health import Health, HealthBuilder, HealthIndicatorPort

__all__ = ["AbstractHealthIndicator"]

logger = logging.getLogger(__name__)


class AbstractHealthIndicator(HealthIndicatorPort, ABC):
    """Health indicator that turns a failing check into a DOWN report.

    Subclasses implement do_health_check() and let faults propagate; health()
    records them on the builder instead of raising.
    """

    def health(self) -> Health:
        """Run the check and build its result.

        Returns:
            Health as written by do_health_check(), or DOWN with an "error"
            detail if the check raised.
        """
        builder = HealthBuilder()
        try:
            self.do_health_check(builder)
        except Exception as e:
            logger.warning(f"{type(self).__name__} health check failed: {e}", exc_info=True)
            builder.down(e)
        return builder.build()

    @abstractmethod
    def do_health_check(self, builder: HealthBuilder) -> None:
        """Write details and status for this check into builder.

        Args:
            builder: Report sink for the current check.
        """
