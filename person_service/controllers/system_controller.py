# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
"""

from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import JSONResponse, Response

from person_service.core.dependencies import (
    get_health_indicator,
    get_metrics_registry,
    get_person_repo,
)
from person_service.repositories import PersonRepository
from person_service.schemas import HealthOut
from person_service.services.health_indicator import FreeMemoryHealthIndicator

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthOut,
            responses={503: {"model": HealthOut, "description": "Service DOWN"}})
def health_check(indicator: FreeMemoryHealthIndicator = Depends(get_health_indicator)):
    """Liveness probe: UP answers 200, DOWN answers 503, both with the reading."""
    report = indicator.health()
    return JSONResponse(
        status_code=200 if report.is_up else 503,
        content=report.model_dump(),
    )


@router.get("/health/ready")
def readiness_check(repo: PersonRepository = Depends(get_person_repo)):
    """Readiness probe — verifies the person store answers."""
    try:
        repo.verify_connection()
        return {"status": "ok", "database": "connected"}
    except Exception as exc:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc}")


@router.get("/metrics")
def prometheus_metrics(registry: CollectorRegistry = Depends(get_metrics_registry)):
    """Expose the service registry in Prometheus text format."""
    return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
