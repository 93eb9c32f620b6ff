"""Domain-specific exceptions for the expense tracker core services."""

class ValidationError(ValueError):
    """Raised when provided data does not meet validation requirements."""


class UsageError(ValidationError):
    """Raised when a command's flags are malformed or fail validation."""

    def __init__(self, usage: str, reason: str = "") -> None:
        super().__init__(reason or usage)
        self.usage = usage
        self.reason = reason


class RecordNotFoundError(LookupError):
    """Raised when an expense record cannot be located."""
