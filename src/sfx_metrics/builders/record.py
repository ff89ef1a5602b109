from typing import Any, Dict, Union

import structlog

from sfx_metrics.models.config import FormatterConfig
from sfx_metrics.models.event import Event, LoggerContext
from sfx_metrics.models.metrics import BuildResult, Category, MetricRecord
from sfx_metrics.utils.formatters import class_and_action, format_metric_name
from sfx_metrics.utils.time import to_second_timestamp
from sfx_metrics.utils.utils import stringify

from .base import BaseBuilder

logger = structlog.get_logger(__name__)


class RecordBuilder(BaseBuilder):
    """Builds SignalFx metric records from single events.

    Holds only the read-only config; every call works on its own record, so
    one builder can be shared between threads.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    def build(self, event: Event, context: LoggerContext) -> BuildResult:
        if event.dimensions is not None:
            name = format_metric_name(event.metric_path)
            dimensions = self._explicit_dimensions(event.dimensions)
        else:
            name = self.config.gauge_name if event.duration is not None else self.config.counter_name
            dimensions = class_and_action(event.metric_path)
            dimensions.update(self._tag_dimensions(event.named_tags))
        dimensions.update(self._context_dimensions(context))

        record = MetricRecord(
            metric=name,
            timestamp=to_second_timestamp(event.time),
            value=self._value(event),
            dimensions=dimensions,
        )

        if event.duration is None:
            logger.debug(f"Built counter {record.metric}", dimensions=record.dimensions)
            return BuildResult(metric=record, category=Category.COUNTER)

        # Timed measurements are also counted, unless the caller named the metric
        derived = None
        if event.dimensions is None:
            derived = record.copy(
                metric=self.config.counter_name,
                value=event.amount if event.amount is not None else 1,
            )
        logger.debug(
            f"Built gauge {record.metric}",
            dimensions=record.dimensions,
            derived_counter=derived is not None,
        )
        return BuildResult(metric=record, category=Category.GAUGE, derived_counter=derived)

    @staticmethod
    def _value(event: Event) -> Union[int, float]:
        if event.amount is not None:
            return event.amount
        if event.duration is not None:
            return event.duration
        return 1

    @staticmethod
    def _explicit_dimensions(explicit: Dict[str, Any]) -> Dict[str, str]:
        dimensions = {}
        for name, value in explicit.items():
            value = stringify(value)
            if value:
                dimensions[name] = value
        return dimensions

    def _tag_dimensions(self, named_tags: Dict[str, Any]) -> Dict[str, str]:
        dimensions = {}
        for name, value in named_tags.items():
            name = str(name)
            value = stringify(value)
            if value and self.config.allows(name):
                dimensions[name] = value
        return dimensions

    def _context_dimensions(self, context: LoggerContext) -> Dict[str, str]:
        dimensions = {}
        if self.config.log_host and context.host:
            dimensions["host"] = context.host
        if self.config.log_application and context.application:
            dimensions["application"] = context.application
        if self.config.environment:
            dimensions["environment"] = self.config.environment
        return dimensions
