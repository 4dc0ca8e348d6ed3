import logging

from .context import current_validator, validation_context
from .errors import ConfigurationError, EmptyErrorsError, RulekitError
from .rule import (
    VALID,
    Invalid,
    Rule,
    Valid,
    combine,
    combine_all,
    combine_all_f,
    combine_f,
    ensure,
    from_result,
    invalid,
    valid,
)
from .types import Err, Ok

# Stay silent unless the application configures logging.
logging.getLogger("rulekit").addHandler(logging.NullHandler())

__all__ = [
    "Rule",
    "Valid",
    "Invalid",
    "VALID",
    "valid",
    "invalid",
    "ensure",
    "from_result",
    "combine",
    "combine_all",
    "combine_f",
    "combine_all_f",
    "Ok",
    "Err",
    "validation_context",
    "current_validator",
    "RulekitError",
    "EmptyErrorsError",
    "ConfigurationError",
]
