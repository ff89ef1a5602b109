from typing import Any, Iterable, Optional

import structlog

from sfx_metrics.builders.record import RecordBuilder
from sfx_metrics.models.config import FormatterConfig
from sfx_metrics.models.event import LoggerContext
from sfx_metrics.models.metrics import Batch
from sfx_metrics.services.aggregator import BatchAggregator
from sfx_metrics.utils.utils import validate_event

logger = structlog.get_logger(__name__)


class SignalfxFormatter:
    """Formats events as SignalFx gauge/counter payloads.

    Usage:
        formatter = SignalfxFormatter(FormatterConfig(token="..."))
        payload = formatter.batch(events, LoggerContext(host="web-1"))
    """

    def __init__(self, config: FormatterConfig):
        self.config = config
        self.builder = RecordBuilder(config)

    @property
    def token(self) -> str:
        return self.config.token

    def format(self, event: Any, context: Optional[LoggerContext] = None) -> Batch:
        """Payload for a single event, without any aggregation"""
        event = validate_event(event)
        batch = Batch()
        for category, record in self.builder.build(event, context or LoggerContext()).records():
            batch.records(category).append(record)
        return batch

    def call(self, event: Any, context: Optional[LoggerContext] = None) -> str:
        return self.format(event, context).to_json()

    def format_batch(self, events: Iterable[Any], context: Optional[LoggerContext] = None) -> Batch:
        return BatchAggregator(self.builder).aggregate(events, context)

    def batch(self, events: Iterable[Any], context: Optional[LoggerContext] = None) -> str:
        return self.format_batch(events, context).to_json()
