from sfx_metrics.builders.record import RecordBuilder
from sfx_metrics.errors import ValidationError
from sfx_metrics.models.config import FormatterConfig
from sfx_metrics.models.event import Event, LoggerContext
from sfx_metrics.models.metrics import Batch, BuildResult, Category, MetricRecord
from sfx_metrics.services.aggregator import BatchAggregator
from sfx_metrics.services.formatter import SignalfxFormatter

__all__ = [
    "Batch",
    "BatchAggregator",
    "BuildResult",
    "Category",
    "Event",
    "FormatterConfig",
    "LoggerContext",
    "MetricRecord",
    "RecordBuilder",
    "SignalfxFormatter",
    "ValidationError",
]
