"""Diagnostic endpoints: health probes plus latency and failure injection."""

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from testbed.errors import InternalError, ServiceUnavailableError
from testbed.models.dto import (
    HealthResponse,
    RandomResponse,
    ReadinessResponse,
    SlowResponse,
    VersionResponse,
)
from testbed.services.config_service import Settings

logger = logging.getLogger(__name__)


def _format_delay(seconds: float) -> str:
    """Render a delay in seconds, e.g. 3s or 0.5s."""
    return f"{seconds:g}s"


class DiagnosticsService:
    """
    Stateless diagnostics for external test harnesses.

    The clock and sleep functions are injectable so tests can pin the
    random endpoint to either branch and skip the slow endpoint's delay.
    """

    def __init__(
        self,
        settings: Settings,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings
        self._clock = clock
        self._sleep = sleep

    def _now(self) -> datetime:
        return datetime.fromtimestamp(self._clock(), tz=timezone.utc)

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            timestamp=self._now(),
            version=self.settings.version,
        )

    def readiness(self) -> ReadinessResponse:
        # No backing services; both checks are fixed.
        return ReadinessResponse(
            ready=True,
            timestamp=self._now(),
            checks={"database": True, "cache": True},
        )

    def version(self) -> VersionResponse:
        return VersionResponse(
            version=self.settings.version,
            build_date=self.settings.build_date,
            runtime_version=self.settings.runtime_version,
        )

    def slow(self) -> SlowResponse:
        """Block the calling thread for the configured delay, then answer."""
        delay = self.settings.slow_delay
        self._sleep(delay)
        return SlowResponse(
            message="This endpoint is intentionally slow",
            delay=_format_delay(delay),
        )

    def fail(self) -> None:
        """Always raises InternalError."""
        logger.warning("Error endpoint called")
        raise InternalError("This endpoint always returns an error")

    def random(self) -> RandomResponse:
        """Succeed on even Unix seconds, fail with 503 on odd ones.

        Deliberately tied to the wall clock rather than a random source so
        harnesses can predict the outcome.
        """
        now = int(self._clock())
        if now % 2 == 0:
            return RandomResponse(success=True, random=now)
        logger.warning("Random endpoint failing on odd second %d", now)
        raise ServiceUnavailableError("Random error occurred")
