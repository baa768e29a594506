"""Outcome type returned by the translation store and service."""

from enum import Enum
from typing import Any, Callable, Optional


class ResultStatus(str, Enum):
    """Outcome categories surfaced to callers."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"


class Result:
    """Success value or an expected failure with its messages.

    Expected business outcomes (missing key, duplicate key, malformed input)
    are returned as a Result instead of being raised. Storage failures that
    cannot be classified are left to propagate as exceptions.
    """

    def __init__(self, status: ResultStatus, value: Any = None, errors: Optional[list[str]] = None):
        """Initialize the result.

        Args:
            status: Outcome category
            value: Payload of a successful result
            errors: Human-readable messages of a failed result
        """
        self.status = status
        self.value = value
        self.errors = list(errors or [])

    def __repr__(self):
        if self.is_success:
            return f"Result(status={self.status.value}, value={self.value!r})"
        return f"Result(status={self.status.value}, errors={self.errors!r})"

    @property
    def is_success(self) -> bool:
        """Whether the operation succeeded."""
        return self.status == ResultStatus.OK

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        """Successful result carrying value."""
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls, message: str) -> "Result":
        """The addressed key or translation does not exist."""
        return cls(ResultStatus.NOT_FOUND, errors=[message])

    @classmethod
    def conflict(cls, message: str) -> "Result":
        """The write collides with an existing entity."""
        return cls(ResultStatus.CONFLICT, errors=[message])

    @classmethod
    def invalid(cls, messages: list[str]) -> "Result":
        """The input failed validation; one message per violated rule."""
        return cls(ResultStatus.INVALID, errors=messages)

    def map(self, func: Callable[[Any], Any]) -> "Result":
        """Apply func to the value of a successful result; failures pass through unchanged."""
        if not self.is_success:
            return self
        return Result.success(func(self.value))
