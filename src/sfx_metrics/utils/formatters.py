import re
from typing import Dict, List

UNKNOWN_CLASS = "Unknown"

_LEADING_SLASHES = re.compile(r"\A/+")


def strip_leading_slashes(metric_path: str) -> str:
    return _LEADING_SLASHES.sub("", metric_path)


def format_metric_name(metric_path: str) -> str:
    """SignalFx friendly metric name: '/orders/create' -> 'orders.create'"""
    return strip_leading_slashes(metric_path).replace("/", ".")


def path_segments(metric_path: str) -> List[str]:
    names = strip_leading_slashes(metric_path).split("/")
    # Trailing separators do not start a new segment
    while names and not names[-1]:
        names.pop()
    return names


def class_and_action(metric_path: str) -> Dict[str, str]:
    """Split a metric path into class and action dimensions.

    The last segment is the action, everything before it is joined with '::'
    into the class. A single segment has an unknown class, and an empty path
    uses the raw metric path as the action.
    """
    names = path_segments(metric_path)
    if len(names) > 1:
        action = names.pop()
        return {"action": action, "class": "::".join(names)}
    return {"class": UNKNOWN_CLASS, "action": names[0] if names else metric_path}
