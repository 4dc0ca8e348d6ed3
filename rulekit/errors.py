"""Exception hierarchy for rulekit.

Validation failures are values (``Invalid``), never exceptions. The classes
here cover misuse of the API and structural validator misconfiguration.
"""

from __future__ import annotations


class RulekitError(Exception):
    """Base exception for all rulekit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class EmptyErrorsError(RulekitError, ValueError):
    """An ``Invalid`` rule was built without any error."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid requires at least one error",
            hint="Use valid() for a rule without errors.",
        )


class ConfigurationError(RulekitError):
    """The structural validator cannot inspect a type or value."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        target: object | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.target = target
