from typing import Optional


class ValidationError(ValueError):
    """Raised when an event handed over by the logging layer is malformed.

    Names the offending field and, for batches, the position of the event so
    the caller can find it. Nothing is coerced: a bad duration or time would
    otherwise corrupt the aggregation key.
    """

    def __init__(self, field: str, message: str, index: Optional[int] = None):
        self.field = field
        self.index = index
        self.message = message
        where = f"event {index}" if index is not None else "event"
        super().__init__(f"{where}: invalid '{field}': {message}")
