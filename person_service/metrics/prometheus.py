# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — request counter bound to an injected registry.
The registry is created once at startup and shared with the /metrics endpoint.
"""

from prometheus_client import CollectorRegistry, Counter

# Prometheus names cannot contain dots; exported as demo_requests_total.
REQUESTS_METRIC_NAME = "demo.requests.total"


def _prometheus_name(name: str) -> str:
    base = name.replace(".", "_")
    # Counter appends the _total suffix itself
    return base[: -len("_total")] if base.endswith("_total") else base


class RequestMetrics:
    """Owns the ``demo.requests.total`` counter in the given registry."""

    def __init__(self, registry: CollectorRegistry):
        self._registry = registry
        self._requests = Counter(
            _prometheus_name(REQUESTS_METRIC_NAME),
            "Total requests counted by explicit callers",
            registry=registry,
        )

    def increment_requests(self) -> None:
        self._requests.inc()

    def requests_total(self) -> float:
        value = self._registry.get_sample_value(
            _prometheus_name(REQUESTS_METRIC_NAME) + "_total"
        )
        return value or 0.0
