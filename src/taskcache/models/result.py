"""Result type returned by fallible task reads.

Reads never raise for "not found" or backend failures; they return either
``Success(value)`` or ``Error(cause)`` and callers branch on the type::

    result = await store.get_task(task_id)
    if isinstance(result, Success):
        show(result.value)
    else:
        report(result.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A read that produced a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Error:
    """A read that failed, carrying the underlying exception."""

    cause: Exception

    @property
    def message(self) -> str:
        return str(self.cause) or type(self.cause).__name__


Result = Success[T] | Error
