import math
from datetime import datetime


def to_second_timestamp(time: datetime) -> int:
    """Milliseconds since the epoch, truncated to the whole second.

    SignalFx resolves metrics to one second, so sub-second precision is
    dropped: 12.999s becomes 12000. Naive datetimes are taken as local time.
    """
    return math.floor(time.timestamp()) * 1000
