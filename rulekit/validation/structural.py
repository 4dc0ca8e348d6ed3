"""
Structural validator: walk an object graph and check declared constraints.

Constraints are declared on dataclass or pydantic model fields with
``typing.Annotated`` metadata understood by pydantic (``annotated_types``,
``pydantic.Field``, validators). Field values are checked with pydantic
``TypeAdapter``s; nested dataclasses and models are visited recursively, and
containers are entered through the registered extractors.

Usage:
    @dataclass
    class Order:
        email: str
        quantity: Annotated[int, Gt(0)]
        lines: list[Line]

    StructuralValidator().validate(order)  # [Violation(...), ...]
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from functools import lru_cache
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from ..errors import ConfigurationError
from ..types import Path
from .extractors import DEFAULT_EXTRACTORS, ValueExtractor
from .types import Violation, format_path

log = logging.getLogger(__name__)


@lru_cache(maxsize=1024)
def _cached_adapter(hint: Any) -> TypeAdapter[Any]:
    log.debug("Building type adapter for %r", hint)
    return TypeAdapter(hint)


def _adapter(hint: Any) -> TypeAdapter[Any]:
    try:
        hash(hint)
    except TypeError:
        return TypeAdapter(hint)
    return _cached_adapter(hint)


def _split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Separate ``Annotated[T, *meta]`` into ``(T, meta)``."""
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        return base, tuple(metadata)
    return hint, ()


def _annotate(base: Any, metadata: tuple[Any, ...]) -> Any:
    if not metadata:
        return base
    return Annotated[(base, *metadata)]


def _is_structure(tp: Any) -> bool:
    return isinstance(tp, type) and (
        dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)
    )


def _field_hints(obj: Any) -> dict[str, Any]:
    """Declared field name -> hint (with constraint metadata) of a structure."""
    cls = type(obj)
    if isinstance(obj, BaseModel):
        return {
            name: _annotate(info.annotation, tuple(info.metadata))
            for name, info in cls.model_fields.items()
        }
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        raise ConfigurationError(
            f"Cannot resolve field annotations of {cls.__name__}: {e}",
            hint="Make forward references importable from the defining module.",
            target=cls,
        ) from e
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(obj)}


class StructuralValidator:
    """
    Immutable, thread-safe object graph validator.

    Args:
        extractors: Traversal adapters, tried in order for each field hint.
        strict: If True (default), values must already have the declared
                type ("1" is not an int). If False, pydantic's lax coercion
                rules apply before the constraints are checked.
    """

    __slots__ = ("_extractors", "_strict")

    def __init__(
        self,
        extractors: Sequence[ValueExtractor] = DEFAULT_EXTRACTORS,
        *,
        strict: bool = True,
    ) -> None:
        self._extractors = tuple(extractors)
        self._strict = strict
        log.debug(
            "Structural validator ready (strict=%s, extractors=%s)",
            strict,
            [type(e).__name__ for e in self._extractors],
        )

    @property
    def extractors(self) -> tuple[ValueExtractor, ...]:
        return self._extractors

    @property
    def strict(self) -> bool:
        return self._strict

    def validate(self, obj: Any) -> list[Violation]:
        """
        Check every declared constraint reachable from ``obj``.

        Returns:
            The violations in field declaration order, depth first. Empty
            when the graph is valid.

        Raises:
            ConfigurationError: if ``obj`` is not a dataclass or pydantic
                model instance, or a field type cannot be inspected
        """
        if not _is_structure(type(obj)):
            raise ConfigurationError(
                f"Expected a dataclass or pydantic model instance, got {type(obj).__name__}",
                target=obj,
            )
        violations: list[Violation] = []
        self._visit_structure(obj, (), set(), violations)
        return violations

    def _visit_structure(
        self, obj: Any, path: Path, ancestors: set[int], out: list[Violation]
    ) -> None:
        if id(obj) in ancestors:
            return
        ancestors.add(id(obj))
        try:
            for name, hint in _field_hints(obj).items():
                self._visit(getattr(obj, name, None), hint, (*path, name), ancestors, out)
        finally:
            ancestors.discard(id(obj))

    def _visit(
        self, value: Any, hint: Any, path: Path, ancestors: set[int], out: list[Violation]
    ) -> None:
        base, metadata = _split_annotated(hint)

        extractor = self._extractor_for(base)
        if extractor is not None:
            element = extractor.element_type(base)
            shell = extractor.container_type(base)
            if shell is None:
                element = _annotate(element, metadata)
            else:
                out.extend(self._check(value, _annotate(shell, metadata), path))
            if not extractor.accepts(value):
                return
            for segment, item in extractor.extract(value):
                item_path = path if segment is None else (*path, segment)
                self._visit(item, element, item_path, ancestors, out)
            return

        if _is_structure(base) and isinstance(value, base):
            self._visit_structure(value, path, ancestors, out)
            return

        out.extend(self._check(value, hint, path))

    def _extractor_for(self, hint: Any) -> ValueExtractor | None:
        for extractor in self._extractors:
            if extractor.handles(hint):
                return extractor
        return None

    def _check(self, value: Any, hint: Any, path: Path) -> list[Violation]:
        """Check a single value against a hint and its constraints."""
        try:
            _adapter(hint).validate_python(value, strict=self._strict)
        except ValidationError as e:
            return [Violation.from_error(err, path) for err in e.errors(include_url=False)]
        except PydanticUserError as e:
            raise ConfigurationError(
                f"Cannot validate field '{format_path(path)}' of type {hint!r}: {e}",
                hint="Use a type pydantic can build a schema for.",
                target=hint,
            ) from e
        return []
