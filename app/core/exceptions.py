from typing import Optional


class StatsError(Exception):
    """Base class for errors raised while computing rating stats."""


class ParseError(StatsError):
    def __init__(self, label: str, reason: Optional[str] = None):
        self.label = label
        self.reason = reason or f'invalid syntax for integer: "{label}"'
        super().__init__(f"failed to convert rating {label} to int: {self.reason}")


class InvalidCountError(StatsError):
    def __init__(self, label: str, count: int, reason: str = "negative count"):
        self.label = label
        self.count = count
        self.reason = reason
        super().__init__(f"{reason} {count} for rating {label}")


class StatsClientError(StatsError):
    """Raised when the remote stats function cannot be reached or answers with an error."""
