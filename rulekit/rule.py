"""
The rule algebra.

A rule is the outcome of one or more checks: ``Valid`` when nothing is wrong,
``Invalid`` with every error found otherwise.

Usage:
    from rulekit import combine, ensure, invalid, valid

    rule = combine(
        ensure(user.name, "name.required"),
        ensure(user.age >= 0, "age.positive"),
    )
    rule.fold(report, lambda: save(user))
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import EmptyErrorsError
from .types import Either, Err, Ok

E = TypeVar("E")
E1 = TypeVar("E1")
A = TypeVar("A")


class _RuleOps(Generic[E]):
    """Combinators shared by both variants."""

    __slots__ = ()

    errors: tuple[E, ...]

    def get_errors(self) -> tuple[E, ...]:
        """All the errors of this rule, ``()`` when valid."""
        return self.errors

    def combine(self, other: Rule[E]) -> Rule[E]:
        """Alias of ``and_``."""
        return self.and_(other)  # type: ignore[attr-defined]

    def __and__(self, other: Rule[E]) -> Rule[E]:
        if not isinstance(other, (Valid, Invalid)):
            return NotImplemented
        return self.and_(other)  # type: ignore[attr-defined]

    def __or__(self, other: Rule[E]) -> Rule[E]:
        if not isinstance(other, (Valid, Invalid)):
            return NotImplemented
        return self.or_(other)  # type: ignore[attr-defined]

    async def combine_f(self, other: Awaitable[Rule[E]]) -> Rule[E]:
        """Alias of ``and_f``."""
        return await self.and_f(other)

    async def and_f(self, other: Awaitable[Rule[E]]) -> Rule[E]:
        """
        Combine with a rule that is still being computed.

        Errors of this rule come first, whatever the completion order.
        """
        return self.and_(await other)  # type: ignore[attr-defined]

    async def or_f(self, other: Awaitable[Rule[E]]) -> Rule[E]:
        """Fallback to a rule that is still being computed."""
        return self.or_(await other)  # type: ignore[attr-defined]

    async def and_then_f(self, other: Callable[[], Awaitable[Rule[E]]]) -> Rule[E]:
        """
        Chain an async check that only runs if this rule is valid.

        ``other`` is not called at all when this rule is invalid, so the
        computation is never started.
        """
        if self.is_invalid():  # type: ignore[attr-defined]
            return self  # type: ignore[return-value]
        return await other()


@dataclass(frozen=True, slots=True)
class Valid(_RuleOps[E]):
    """A rule without errors."""

    @property
    def errors(self) -> tuple[E, ...]:  # type: ignore[override]
        return ()

    def is_valid(self) -> bool:
        return True

    def is_invalid(self) -> bool:
        return False

    def and_(self, other: Rule[E]) -> Rule[E]:
        return other

    def or_(self, other: Rule[E]) -> Rule[E]:
        return self

    def and_then(self, other: Callable[[], Rule[E]]) -> Rule[E]:
        return other()

    def map_error(self, func: Callable[[E], E1]) -> Rule[E1]:
        return self  # type: ignore[return-value]

    def fold(self, on_error: Callable[[tuple[E, ...]], A], on_ok: Callable[[], A]) -> A:
        return on_ok()

    def to_either(self, ok: Any = None) -> Either[Any, tuple[E, ...]]:
        return Ok(ok)

    def __repr__(self) -> str:
        return "Valid()"


@dataclass(frozen=True, slots=True)
class Invalid(_RuleOps[E]):
    """A rule holding one or more errors, oldest first."""

    errors: tuple[E, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise EmptyErrorsError()

    def is_valid(self) -> bool:
        return False

    def is_invalid(self) -> bool:
        return True

    def and_(self, other: Rule[E]) -> Rule[E]:
        match other:
            case Invalid(errors=more):
                return Invalid(self.errors + more)
        return self

    def or_(self, other: Rule[E]) -> Rule[E]:
        match other:
            case Invalid(errors=more):
                return Invalid(self.errors + more)
        return other

    def and_then(self, other: Callable[[], Rule[E]]) -> Rule[E]:
        return self

    def map_error(self, func: Callable[[E], E1]) -> Rule[E1]:
        return Invalid(tuple(func(e) for e in self.errors))

    def fold(self, on_error: Callable[[tuple[E, ...]], A], on_ok: Callable[[], A]) -> A:
        return on_error(self.errors)

    def to_either(self, ok: Any = None) -> Either[Any, tuple[E, ...]]:
        return Err(self.errors)

    def __repr__(self) -> str:
        return f"Invalid(errors={self.errors!r})"


Rule = Union[Valid[E], Invalid[E]]

VALID: Valid[Any] = Valid()


def valid() -> Rule[Any]:
    """The rule without errors, identity of ``and_``."""
    return VALID


def invalid(*errors: E) -> Rule[E]:
    """
    A rule failing with the given errors, in argument order.

    Raises:
        EmptyErrorsError: if no error is given
    """
    return Invalid(errors)


def ensure(condition: Any, *errors: E) -> Rule[E]:
    """
    Valid if ``condition`` is truthy, else invalid with ``errors``.

    Usage:
        ensure(age >= 0, "age.positive")
    """
    if condition:
        return VALID
    return Invalid(errors)


def from_result(result: Ok[Any] | Err[E]) -> Rule[E]:
    """Lift an Ok/Err result: ``Err(e)`` becomes ``invalid(e)``."""
    match result:
        case Err(error=error):
            return Invalid((error,))
        case Ok():
            return VALID
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def combine(*rules: Rule[E]) -> Rule[E]:
    """Combine all rules together and accumulate the errors."""
    return combine_all(rules)


def combine_all(rules: Iterable[Rule[E]]) -> Rule[E]:
    """Same as ``combine`` for an iterable of rules."""
    acc: Rule[E] = VALID
    for rule in rules:
        acc = acc.and_(rule)
    return acc


async def combine_f(*rules: Awaitable[Rule[E]]) -> Rule[E]:
    """
    Await every rule, then combine them in argument order.

    All computations run to completion, none is skipped when another one
    fails.
    """
    return await combine_all_f(rules)


async def combine_all_f(rules: Iterable[Awaitable[Rule[E]]]) -> Rule[E]:
    """
    Same as ``combine_f`` for an iterable of awaitables.

    If some computations raise, the first exception in argument order is
    re-raised once every computation has finished.
    """
    done = await asyncio.gather(*rules, return_exceptions=True)
    for outcome in done:
        if isinstance(outcome, BaseException):
            raise outcome
    return combine_all(done)
