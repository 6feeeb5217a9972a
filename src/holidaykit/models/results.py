"""
HolidayKit Construction Results

Explicit success/error values for construction functions. The ``try_*``
entry points return a BuildResult instead of raising, so callers decide
whether to propagate or handle the error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ..exceptions import HolidayKitError

T = TypeVar("T")


@dataclass(frozen=True)
class BuildResult(Generic[T]):
    """Outcome of a construction: either a value or a HolidayKitError."""
    value: Optional[T] = None
    error: Optional[HolidayKitError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("BuildResult needs exactly one of value or error")

    def __bool__(self) -> bool:
        return self.ok

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> BuildResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: HolidayKitError) -> BuildResult[T]:
        return cls(error=error)


def capture(factory: Callable[..., T], *args: Any, **kwargs: Any) -> BuildResult[T]:
    """
    Run a raising factory and wrap its outcome.

    Only HolidayKitError is captured; anything else is a bug and propagates.
    """
    try:
        return BuildResult.success(factory(*args, **kwargs))
    except HolidayKitError as e:
        return BuildResult.failure(e)
