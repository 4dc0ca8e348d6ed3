"""
Bridge between the structural validator and the rule algebra.
"""

from __future__ import annotations

import logging
from functools import cache
from typing import Any

from pydantic import ValidationError

from ..context import current_validator
from ..rule import Invalid, Rule, valid
from .structural import StructuralValidator
from .types import Violation

log = logging.getLogger(__name__)


@cache
def default_validator() -> StructuralValidator:
    """
    The validator used when none is given or bound.

    Built on first use with the default extractors, then reused.
    """
    return StructuralValidator()


def validate(obj: Any, validator: StructuralValidator | None = None) -> Rule[Violation]:
    """
    Validate an object graph and return a rule with one error per violation.

    Args:
        obj: A dataclass or pydantic model instance
        validator: Validator to use. Defaults to the one bound by
                   validation_context(), then to default_validator().

    Returns:
        valid() if no constraint is violated
        Invalid(violations) in the order the validator reported them

    Raises:
        ConfigurationError: if the validator cannot inspect ``obj``

    Usage:
        rule = validate(order).map_error(lambda v: (v.path_str(), v.render()))
    """
    if validator is None:
        validator = current_validator() or default_validator()

    violations = validator.validate(obj)
    log.debug("%s: %d violation(s)", type(obj).__name__, len(violations))

    if not violations:
        return valid()
    return Invalid(tuple(violations))


def from_validation_error(error: ValidationError) -> Rule[Violation]:
    """
    Lift a raised pydantic ValidationError into a rule.

    Usage:
        try:
            order = Order.model_validate(payload)
        except ValidationError as e:
            return from_validation_error(e)
    """
    violations = tuple(Violation.from_error(err) for err in error.errors(include_url=False))
    if not violations:
        return valid()
    return Invalid(violations)
