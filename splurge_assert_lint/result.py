"""Result type for functional error handling.

File-level lint operations return an immutable ``Result[T]`` instead of
raising, so that a failure in one file (unreadable, too large, not
UTF-8) never stops the analysis of the remaining files. A result is a
success, a success with warnings, or an error.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResultStatus(Enum):
    """Enumerates possible statuses for a ``Result``."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable result value with structured errors and warnings.

    Use the ``success``, ``failure`` and ``warning`` constructors rather
    than building instances directly.
    """

    status: ResultStatus
    data: T | None = None
    error: Exception | None = None
    warnings: list[str] | None = None
    metadata: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        """Reject inconsistent combinations of status, data and error."""
        if self.status == ResultStatus.SUCCESS and self.error is not None:
            raise ValueError("Success results cannot have errors")
        if self.status == ResultStatus.ERROR and self.data is not None:
            raise ValueError("Error results cannot have data")
        if self.warnings is None:
            object.__setattr__(self, "warnings", [])
        if self.metadata is None:
            object.__setattr__(self, "metadata", {})

    @classmethod
    def success(cls, data: T, metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create a successful result.

        Args:
            data: Successful value.
            metadata: Optional metadata mapping.

        Returns:
            ``Result`` with ``status==SUCCESS``.
        """
        return cls(status=ResultStatus.SUCCESS, data=data, error=None, metadata=metadata or {})

    @classmethod
    def failure(cls, error: Exception, metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create an error result.

        Args:
            error: Exception instance describing the failure.
            metadata: Optional metadata mapping.

        Returns:
            ``Result`` with ``status==ERROR``.
        """
        return cls(status=ResultStatus.ERROR, error=error, metadata=metadata or {})

    @classmethod
    def warning(cls, data: T, warnings: list[str], metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create a result that produced data but also collected warnings.

        Args:
            data: Value produced by the operation.
            warnings: List of warning messages.
            metadata: Optional metadata mapping.

        Returns:
            ``Result`` with ``status==WARNING``.
        """
        return cls(status=ResultStatus.WARNING, data=data, warnings=warnings, metadata=metadata or {})

    def is_success(self) -> bool:
        """Return True when the result is a success."""
        return self.status == ResultStatus.SUCCESS

    def is_error(self) -> bool:
        """Check if result is an error."""
        return self.status == ResultStatus.ERROR

    def is_warning(self) -> bool:
        """Check if result has warnings."""
        return self.status == ResultStatus.WARNING

    def unwrap(self) -> T:
        """Return data or raise the stored error.

        Raises:
            Exception: The stored error when the result is an error.
            RuntimeError: When the result carries no data.
        """
        if self.is_error():
            raise self.error or RuntimeError("Result contains error")
        if self.data is None:
            raise RuntimeError("Result contains no data")
        return self.data

    def unwrap_or(self, default_value: T) -> T:
        """Return data when present, otherwise ``default_value``."""
        if not self.is_error() and self.data is not None:
            return self.data
        return default_value
