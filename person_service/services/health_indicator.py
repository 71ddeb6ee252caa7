# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Liveness indicator driven by a free-memory reading.
UP when the reading is strictly above the threshold, DOWN otherwise.
"""

import os
from typing import Callable

from person_service.core.logging import get_logger
from person_service.models.domain import HealthReport

logger = get_logger(__name__)

DEFAULT_FREE_MEMORY_THRESHOLD = 20_000_000


def available_memory_bytes() -> int:
    """Available physical memory of the host in bytes, 0 when the platform cannot tell."""
    try:
        return os.sysconf("SC_AVPHYS_PAGES") * os.sysconf("SC_PAGE_SIZE")
    except (ValueError, OSError, AttributeError) as exc:
        logger.warning("Free memory reading unavailable: %s", exc)
        return 0


class FreeMemoryHealthIndicator:
    def __init__(self, threshold: int = DEFAULT_FREE_MEMORY_THRESHOLD,
                 reader: Callable[[], int] = available_memory_bytes):
        self._threshold = threshold
        self._reader = reader

    @property
    def threshold(self) -> int:
        return self._threshold

    def health(self) -> HealthReport:
        free = int(self._reader())
        status = "UP" if free > self._threshold else "DOWN"
        if status == "DOWN":
            logger.warning("Health DOWN freeMemory=%d threshold=%d", free, self._threshold)
        return HealthReport(status=status, details={"freeMemory": free})
