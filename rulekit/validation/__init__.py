"""
Rulekit Validation - lift structural validation into rules.

Usage:
    from rulekit.validation import StructuralValidator, validate

    @dataclass
    class Order:
        email: str
        quantity: Annotated[int, Gt(0)]
        lines: list[Line]

    rule = validate(order)
    rule.map_error(lambda v: f"{v.path_str()}: {v.render()}")
"""

from .core import default_validator, from_validation_error, validate
from .extractors import (
    DEFAULT_EXTRACTORS,
    OptionalExtractor,
    SequenceExtractor,
    ValueExtractor,
)
from .structural import StructuralValidator
from .types import Violation, format_path

__all__ = [
    # Bridge
    "validate",
    "from_validation_error",
    "default_validator",
    # Validator
    "StructuralValidator",
    "Violation",
    "format_path",
    # Extractors
    "ValueExtractor",
    "OptionalExtractor",
    "SequenceExtractor",
    "DEFAULT_EXTRACTORS",
]
