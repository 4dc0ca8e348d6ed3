"""
Context manager binding a structural validator for validate() calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation.structural import StructuralValidator

# Context variable for the bound validator
_validator: ContextVar[StructuralValidator | None] = ContextVar(
    "structural_validator", default=None
)


def current_validator() -> StructuralValidator | None:
    """The validator bound by the innermost validation_context, if any."""
    return _validator.get()


@contextmanager
def validation_context(*, validator: StructuralValidator) -> Iterator[None]:
    """
    Context manager binding the validator used by validate().

    Args:
        validator: Structural validator used when validate() is called
                   without an explicit one. Bindings nest and are restored
                   on exit; each asyncio task sees its own binding.

    Example:
        from rulekit.validation import StructuralValidator, validate
        from rulekit import validation_context

        lenient = StructuralValidator(strict=False)

        with validation_context(validator=lenient):
            validate(order)  # checked with coercion allowed
    """
    token = _validator.set(validator)
    try:
        yield
    finally:
        _validator.reset(token)
