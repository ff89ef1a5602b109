import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class Category(Enum):
    GAUGE = "gauge"
    COUNTER = "counter"


@dataclass
class MetricRecord:
    metric: str
    timestamp: int
    value: Union[int, float, List[Union[int, float]]]
    dimensions: Dict[str, str] = field(default_factory=dict)

    def merge_key(self) -> tuple:
        """Hashable (timestamp, metric, dimensions) key; dimension order is ignored"""
        return (self.timestamp, self.metric, frozenset(self.dimensions.items()))

    def copy(self, **changes: Any) -> "MetricRecord":
        values = {
            "metric": self.metric,
            "timestamp": self.timestamp,
            "value": self.value,
            "dimensions": dict(self.dimensions),
        }
        values.update(changes)
        return MetricRecord(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "timestamp": self.timestamp,
            "value": self.value,
            "dimensions": dict(self.dimensions),
        }


@dataclass
class BuildResult:
    metric: MetricRecord
    category: Category
    derived_counter: Optional[MetricRecord] = None

    def records(self) -> List[tuple]:
        """(category, record) pairs in the order they are emitted"""
        pairs = [(self.category, self.metric)]
        if self.derived_counter is not None:
            pairs.append((Category.COUNTER, self.derived_counter))
        return pairs


@dataclass
class Batch:
    """Metric records per category, ready for serialization."""

    gauge: List[MetricRecord] = field(default_factory=list)
    counter: List[MetricRecord] = field(default_factory=list)

    def records(self, category: Category) -> List[MetricRecord]:
        return self.gauge if category is Category.GAUGE else self.counter

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        data = {}
        if self.gauge:
            data[Category.GAUGE.value] = [record.to_dict() for record in self.gauge]
        if self.counter:
            data[Category.COUNTER.value] = [record.to_dict() for record in self.counter]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
