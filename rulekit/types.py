"""
Either projection of a rule.

``Rule.to_either()`` answers with ``Err(errors)`` when checks failed and
``Ok(value)`` otherwise; ``from_result()`` reads them back into a rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Right side: the checks passed, ``value`` is what the caller attached (``None`` by default)."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Left side: ``error`` holds every error of the failed rule, oldest first."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Either[T, E]: success side first
Either = Ok[T] | Err[E]
# field names and 0-based indexes, outermost first
Path = tuple[str | int, ...]
