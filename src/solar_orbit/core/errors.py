"""
Error taxonomy for the orbit core and a small result wrapper.

Strict functions raise these exceptions; the ``try_*`` functions wrap the
outcome in an :class:`OrbitResult`; the legacy fail-safe functions log the
error and return a fallback value instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OrbitError(Exception):
    """Base class for all orbit core failures."""
    kind: str = "orbit_error"


class InvalidInput(OrbitError, ValueError):
    """Non-finite or out-of-domain element or time values."""
    kind = "invalid_input"


class NonConvergence(OrbitError, RuntimeError):
    """Kepler solver exceeded its iteration bound."""
    kind = "non_convergence"


class DegenerateResult(OrbitError, ArithmeticError):
    """A computed position or path point is non-finite despite finite inputs."""
    kind = "degenerate_result"


@dataclass(frozen=True)
class OrbitResult(Generic[T]):
    """
    Outcome of a computation: either a value or the error that prevented it.
    """
    value: Optional[T] = None
    error: Optional[OrbitError] = None

    @classmethod
    def success(cls, value: T) -> "OrbitResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: OrbitError) -> "OrbitResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        """Failure kind, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]
