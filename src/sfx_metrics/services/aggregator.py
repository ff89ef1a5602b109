"""Batch aggregation of SignalFx metrics.

SignalFx has a minimum resolution of one second. Records of the same
category that share a timestamp (second), metric name and dimensions are
merged into one:

    counter  values are summed
    gauge    values are collected, then averaged once the batch is complete

The first record seen for a key keeps its position in the output.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog

from sfx_metrics.builders.base import BaseBuilder
from sfx_metrics.models.event import Event, LoggerContext
from sfx_metrics.models.metrics import Batch, Category, MetricRecord
from sfx_metrics.utils.utils import validate_event

logger = structlog.get_logger(__name__)


class BatchAggregator:
    """Merges the records of a sequence of events into a single Batch.

    State lives only for the duration of one ``aggregate`` call, so
    concurrent calls with different batches do not interfere.
    """

    def __init__(self, builder: BaseBuilder):
        self.builder = builder

    def aggregate(self, events: Iterable[Any], context: Optional[LoggerContext] = None) -> Batch:
        context = context or LoggerContext()
        batch = Batch()
        index: Dict[Category, Dict[tuple, MetricRecord]] = {
            Category.GAUGE: {},
            Category.COUNTER: {},
        }

        count = 0
        for position, item in enumerate(events):
            event = validate_event(item, index=position)
            count += 1
            for category, record in self.builder.build(event, context).records():
                if category is Category.GAUGE:
                    add_gauge(batch.gauge, index[category], record)
                else:
                    add_counter(batch.counter, index[category], record)

        for gauge in batch.gauge:
            average_value(gauge)

        logger.debug(
            f"Aggregated {count} events",
            gauges=len(batch.gauge),
            counters=len(batch.counter),
        )
        return batch


def add_gauge(gauges: List[MetricRecord], seen: Dict[tuple, MetricRecord], metric: MetricRecord) -> None:
    """Collect gauge values with the same time (second), name and dimensions."""
    key = metric.merge_key()
    existing = seen.get(key)
    if existing is None:
        seen[key] = metric
        gauges.append(metric)
    elif isinstance(existing.value, list):
        existing.value.append(metric.value)
    else:
        existing.value = [existing.value, metric.value]


def add_counter(counters: List[MetricRecord], seen: Dict[tuple, MetricRecord], metric: MetricRecord) -> None:
    """Sum counters with the same time (second), name and dimensions."""
    key = metric.merge_key()
    existing = seen.get(key)
    if existing is None:
        seen[key] = metric
        counters.append(metric)
    else:
        existing.value += metric.value


def average_value(gauge: MetricRecord) -> None:
    """Replace collected gauge values with their mean."""
    if not isinstance(gauge.value, list):
        return
    values = gauge.value
    gauge.value = float(sum(values)) / len(values)
