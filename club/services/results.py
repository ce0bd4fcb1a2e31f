from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

ERROR_VALIDATION = "VALIDATION"
ERROR_NOT_FOUND = "NOT_FOUND"
ERROR_PERMISSION = "PERMISSION"

MSG_CATEGORY_NOT_FOUND = "Category does not exist"
MSG_TOPIC_NOT_FOUND = "Topic does not exist"
MSG_PERMISSION_DENIED = "Permission denied"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a mutation: either a value or a human-readable failure message."""

    value: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str, error: str) -> "OperationResult[T]":
        return cls(message=message, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def validation_failure() -> OperationResult:
    return OperationResult.failure(MSG_CATEGORY_NOT_FOUND, ERROR_VALIDATION)


def not_found_failure() -> OperationResult:
    return OperationResult.failure(MSG_TOPIC_NOT_FOUND, ERROR_NOT_FOUND)


def permission_failure() -> OperationResult:
    return OperationResult.failure(MSG_PERMISSION_DENIED, ERROR_PERMISSION)


@dataclass
class PagedResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    page_index: int = 1
    page_size: int = 20
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size
