# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the person service."""
from person_service.metrics.prometheus import REQUESTS_METRIC_NAME, RequestMetrics

__all__ = ["REQUESTS_METRIC_NAME", "RequestMetrics"]
