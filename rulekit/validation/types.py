"""
Type definitions for rulekit structural validation.

Provides the Violation record reported by the structural validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic_core import ErrorDetails
# not re-exported from the pydantic_core package root
from pydantic_core._pydantic_core import list_all_errors

from ..types import Path

# pydantic error type -> uninterpolated message template
_TEMPLATES: dict[str, str] = {
    info["type"]: info["message_template_python"] for info in list_all_errors()
}


def format_path(path: Path) -> str:
    """
    Render a path in dotted notation.

    Usage:
        format_path(("items", 0, "name"))  # "items[0].name"
    """
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif out:
            out += f".{segment}"
        else:
            out = str(segment)
    return out


@dataclass(frozen=True, slots=True)
class Violation:
    """
    One failed constraint found by the structural validator.

    The message is kept as a template plus its arguments. Call render() to
    interpolate it.
    """

    path: Path
    template: str
    args: dict[str, Any] = field(default_factory=dict, hash=False)
    type: str = "value_error"
    invalid_value: Any = field(default=None, hash=False)
    message: str | None = field(default=None, compare=False)

    def render(self) -> str:
        """
        Interpolate the template with its arguments.

        Some pydantic templates use placeholders computed at render time
        (plurals); those fall back to the message pydantic produced.
        """
        try:
            return self.template.format_map(self.args)
        except KeyError:
            if self.message is None:
                raise
            return self.message

    def path_str(self) -> str:
        return format_path(self.path)

    @classmethod
    def from_error(cls, error: ErrorDetails, prefix: Path = ()) -> Violation:
        """Build a violation from a pydantic error, under ``prefix``."""
        kind = error["type"]
        template = _TEMPLATES.get(kind)
        if template is None:
            # custom error types only carry the interpolated message
            template = error["msg"].replace("{", "{{").replace("}", "}}")
        return cls(
            path=(*prefix, *error["loc"]),
            template=template,
            args=dict(error.get("ctx") or {}),
            type=kind,
            invalid_value=error.get("input"),
            message=error["msg"],
        )
