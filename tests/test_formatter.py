"""Tests for the SignalFx formatter facade."""

from __future__ import annotations

import json

import pytest

from sfx_metrics.errors import ValidationError
from sfx_metrics.models.config import FormatterConfig
from sfx_metrics.models.event import Event, LoggerContext
from sfx_metrics.services.formatter import SignalfxFormatter


@pytest.fixture
def formatter() -> SignalfxFormatter:
    return SignalfxFormatter(FormatterConfig(token="secret", environment="test"))


class TestSingleEvent:
    """Tests for formatting one event without aggregation."""

    def test_counter_payload(self, formatter):
        """Test a counter event only has a counter key."""
        data = json.loads(formatter.call({"metric": "/orders/create", "time": 1.5}))
        assert data == {
            "counter": [
                {
                    "metric": "Application.counter",
                    "timestamp": 1000,
                    "value": 1,
                    "dimensions": {"action": "create", "class": "orders", "environment": "test"},
                }
            ]
        }

    def test_gauge_payload_includes_counter(self, formatter):
        """Test a timed event yields a gauge and its counter."""
        context = LoggerContext(host="web-1")
        batch = formatter.format({"metric": "/orders/create", "time": 1.5, "duration": 20.5}, context)
        assert [r.value for r in batch.gauge] == [20.5]
        assert [r.value for r in batch.counter] == [1]
        assert batch.gauge[0].dimensions["host"] == "web-1"

    def test_explicit_dimensions_gauge_payload(self, formatter):
        """Test a timed event with explicit dimensions has no counter key."""
        event = Event(metric_path="/api/latency", time=1.5, duration=3, dimensions={"route": "/x"})
        data = formatter.format(event).to_dict()
        assert list(data) == ["gauge"]
        assert data["gauge"][0]["metric"] == "api.latency"
        assert data["gauge"][0]["dimensions"] == {"route": "/x", "environment": "test"}

    def test_invalid_event(self, formatter):
        """Test a malformed single event raises without an index."""
        with pytest.raises(ValidationError) as exc_info:
            formatter.call({"metric": "/x", "time": 1, "amount": "many"})
        assert exc_info.value.field == "amount"
        assert exc_info.value.index is None

    def test_token_passed_through(self, formatter):
        """Test the API token is available for delivery."""
        assert formatter.token == "secret"


class TestBatch:
    """Tests for formatting many events together."""

    def test_batch_json(self, formatter):
        """Test batch output is aggregated JSON."""
        events = [
            {"metric": "/orders/create", "time": 5.1, "duration": 10},
            {"metric": "/orders/create", "time": 5.9, "duration": 30},
        ]
        data = json.loads(formatter.batch(events))
        assert data["gauge"][0]["value"] == 20.0
        assert data["counter"][0]["value"] == 2
        assert data["gauge"][0]["timestamp"] == 5000

    def test_metric_amount_alias(self, formatter):
        """Test the amount can be given as metric_amount."""
        events = [
            {"metric": "/jobs/run", "time": 5, "metric_amount": 2},
            {"metric": "/jobs/run", "time": 5, "metric_amount": 5},
        ]
        batch = formatter.format_batch(events)
        assert batch.counter[0].value == 7

    def test_empty_batch_json(self, formatter):
        """Test an empty batch serializes to an empty object."""
        assert formatter.batch([]) == "{}"
