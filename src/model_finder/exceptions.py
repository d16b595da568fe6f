"""Exceptions raised by model finder lookups.

Errors from the database and the cache backend are translated into these
types with the original exception chained as ``__cause__``.
"""

from typing import Any


class ModelFinderError(Exception):
    """Base exception for all model finder errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ModelNotFoundError(ModelFinderError):
    """Raised when no row matches the search value."""

    def __init__(self, model: str, value: str, columns: list[str]) -> None:
        super().__init__(
            f"No {model} found matching '{value}'",
            details={"model": model, "value": value, "columns": columns},
        )
        self.model = model
        self.value = value


class MultipleRecordsFoundError(ModelFinderError):
    """Raised when more than one row matches the search value."""

    def __init__(self, model: str, value: str, columns: list[str]) -> None:
        super().__init__(
            f"Multiple {model} records found matching '{value}'",
            details={"model": model, "value": value, "columns": columns},
        )
        self.model = model
        self.value = value


class CacheUnavailableError(ModelFinderError):
    """Raised when the cache backend cannot be reached or fails."""

    def __init__(
        self,
        operation: str,
        key: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        details: dict[str, Any] = {"operation": operation}
        if key:
            details["key"] = key
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(f"Cache backend failed during '{operation}'", details=details)
        self.operation = operation
