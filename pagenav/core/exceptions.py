"""Exception classes for the pagination engine.

Only caller mistakes are exceptions here. An out-of-range page is a
regular state reported through callbacks and events.
"""


class PagerError(Exception):
    """Base exception for pagination errors."""

    pass


class DomainError(PagerError, ValueError):
    """Raised when a circular move gets a non-positive upper bound."""

    def __init__(self, upper_bound: int, message: str | None = None):
        """Initialize with the offending upper bound."""
        self.upper_bound = upper_bound
        super().__init__(
            message or f"Upper bound must be a positive integer, got {upper_bound}"
        )


class InvalidConfigurationError(PagerError, ValueError):
    """Raised when an option has a value the engine cannot work with."""

    def __init__(self, field: str, message: str):
        """Initialize with field and message."""
        self.field = field
        super().__init__(f"Invalid value for {field}: {message}")


class FetchStateError(PagerError):
    """Raised when a fetch is completed without having been started."""

    def __init__(self, message: str = "No fetch has been started"):
        """Initialize with message."""
        super().__init__(message)
