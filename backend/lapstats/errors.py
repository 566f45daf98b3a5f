class LapStatsError(Exception):
    """Base class for errors raised while aggregating an activity."""


class EmptyActivityError(LapStatsError, ValueError):
    """An aggregate needing at least one track point was asked of an empty activity."""

    def __init__(self, message: str = "Activity has no track points"):
        super().__init__(message)
