# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the repository, metrics and health indicator.
Everything here is built once at import, i.e. at process start.
"""

from prometheus_client import CollectorRegistry

from person_service.core.config import settings
from person_service.core.database import engine
from person_service.metrics import RequestMetrics
from person_service.repositories import (
    InMemoryPersonRepository,
    PersonRepository,
    SqlPersonRepository,
)
from person_service.services.health_indicator import FreeMemoryHealthIndicator


def _build_repository() -> PersonRepository:
    if settings.REPOSITORY_BACKEND == "memory":
        return InMemoryPersonRepository()
    if settings.REPOSITORY_BACKEND == "sql":
        return SqlPersonRepository(engine)
    raise ValueError(
        f"REPOSITORY_BACKEND must be 'sql' or 'memory', got {settings.REPOSITORY_BACKEND!r}"
    )


# ── Singletons ──
_repo = _build_repository()
_registry = CollectorRegistry()
_request_metrics = RequestMetrics(_registry)
_health_indicator = FreeMemoryHealthIndicator(
    threshold=settings.HEALTH_FREE_MEMORY_THRESHOLD,
)


# ── FastAPI dependency functions ──
def get_person_repo() -> PersonRepository:
    return _repo


def get_metrics_registry() -> CollectorRegistry:
    return _registry


def get_request_metrics() -> RequestMetrics:
    return _request_metrics


def get_health_indicator() -> FreeMemoryHealthIndicator:
    return _health_indicator
