from abc import ABC, abstractmethod

from sfx_metrics.models.event import Event, LoggerContext
from sfx_metrics.models.metrics import BuildResult


class BaseBuilder(ABC):
    @abstractmethod
    def build(self, event: Event, context: LoggerContext) -> BuildResult:
        """Turn one event into its metric record(s)"""
        pass
