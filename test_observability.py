"""
Health indicator, request metrics and request-id logging — unit tests.
"""
import json
import logging
import threading

from prometheus_client import CollectorRegistry, generate_latest

from person_service.core.logging import JSONFormatter, RequestIDFilter, request_id_ctx
from person_service.metrics import RequestMetrics
from person_service.services.health_indicator import (
    DEFAULT_FREE_MEMORY_THRESHOLD,
    FreeMemoryHealthIndicator,
    available_memory_bytes,
)


class TestFreeMemoryHealthIndicator:
    def test_default_threshold(self):
        assert FreeMemoryHealthIndicator().threshold == 20_000_000
        assert DEFAULT_FREE_MEMORY_THRESHOLD == 20_000_000

    def test_up_above_threshold(self):
        report = FreeMemoryHealthIndicator(reader=lambda: 20_000_001).health()
        assert report.status == "UP"
        assert report.is_up
        assert report.details == {"freeMemory": 20_000_001}

    def test_down_below_threshold_keeps_exact_reading(self):
        report = FreeMemoryHealthIndicator(reader=lambda: 1_234_567).health()
        assert report.status == "DOWN"
        assert not report.is_up
        assert report.details == {"freeMemory": 1_234_567}

    def test_custom_threshold(self):
        indicator = FreeMemoryHealthIndicator(threshold=100, reader=lambda: 101)
        assert indicator.health().status == "UP"

    def test_reader_is_polled_on_every_call(self):
        readings = iter([50_000_000, 10])
        indicator = FreeMemoryHealthIndicator(reader=lambda: next(readings))
        assert indicator.health().status == "UP"
        assert indicator.health().status == "DOWN"

    def test_host_reading_is_non_negative(self):
        assert available_memory_bytes() >= 0


class TestRequestMetrics:
    def test_counter_registered_at_zero(self):
        registry = CollectorRegistry()
        metrics = RequestMetrics(registry)
        assert metrics.requests_total() == 0.0
        assert registry.get_sample_value("demo_requests_total") == 0.0

    def test_increment(self):
        metrics = RequestMetrics(CollectorRegistry())
        for _ in range(3):
            metrics.increment_requests()
        assert metrics.requests_total() == 3.0

    def test_exposition_name(self):
        registry = CollectorRegistry()
        RequestMetrics(registry).increment_requests()
        assert b"demo_requests_total 1.0" in generate_latest(registry)

    def test_registries_are_independent(self):
        a = RequestMetrics(CollectorRegistry())
        b = RequestMetrics(CollectorRegistry())
        a.increment_requests()
        assert a.requests_total() == 1.0
        assert b.requests_total() == 0.0

    def test_concurrent_increments_are_not_lost(self):
        metrics = RequestMetrics(CollectorRegistry())

        def worker():
            for _ in range(1000):
                metrics.increment_requests()

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert metrics.requests_total() == 10_000.0


def _record(**extra):
    record = logging.LogRecord("person_service.test", logging.INFO, __file__, 1,
                               "Person created id=%s", (7,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestIdLogging:
    def test_in_flight_request_id_is_stamped(self):
        record = _record()
        token = request_id_ctx.set("req-7")
        try:
            RequestIDFilter().filter(record)
        finally:
            request_id_ctx.reset(token)
        line = json.loads(JSONFormatter().format(record))
        assert line["request_id"] == "req-7"
        assert line["message"] == "Person created id=7"

    def test_no_request_id_outside_a_request(self):
        record = _record()
        RequestIDFilter().filter(record)
        assert "request_id" not in json.loads(JSONFormatter().format(record))

    def test_explicit_request_id_wins(self):
        record = _record(request_id="explicit")
        token = request_id_ctx.set("ambient")
        try:
            RequestIDFilter().filter(record)
        finally:
            request_id_ctx.reset(token)
        assert json.loads(JSONFormatter().format(record))["request_id"] == "explicit"
