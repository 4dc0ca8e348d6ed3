"""
Traversal adapters for the structural validator.

An extractor teaches the validator how to reach into one kind of container:
which hints it handles, what the contained values are checked against, and
which (segment, value) pairs to recurse into. A ``None`` segment keeps the
container's own path; an int appends an index.
"""

from __future__ import annotations

import collections.abc
import types
from collections.abc import Iterator
from typing import Any, Protocol, Union, get_args, get_origin

Segment = str | int | None

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
)


class ValueExtractor(Protocol):
    def handles(self, hint: Any) -> bool: ...

    def element_type(self, hint: Any) -> Any: ...

    def container_type(self, hint: Any) -> Any | None: ...

    def accepts(self, value: Any) -> bool: ...

    def extract(self, value: Any) -> Iterator[tuple[Segment, Any]]: ...


class OptionalExtractor:
    """
    Reach into ``X | None`` fields.

    A present value is checked against ``X`` under the same path. ``None``
    exposes nothing.
    """

    def handles(self, hint: Any) -> bool:
        return get_origin(hint) in (Union, types.UnionType) and type(None) in get_args(hint)

    def element_type(self, hint: Any) -> Any:
        inner = tuple(a for a in get_args(hint) if a is not type(None))
        if len(inner) == 1:
            return inner[0]
        return Union[inner]

    def container_type(self, hint: Any) -> None:
        # constraints on an optional apply to the contained value
        return None

    def accepts(self, value: Any) -> bool:
        return True

    def extract(self, value: Any) -> Iterator[tuple[Segment, Any]]:
        if value is not None:
            yield None, value


class SequenceExtractor:
    """
    Reach into ordered sequences: ``list[X]``, ``tuple[X, ...]``,
    ``Sequence[X]``.

    Each element is checked against ``X`` under its 0-based index. Strings and
    bytes are never treated as sequences.
    """

    def handles(self, hint: Any) -> bool:
        if hint is list:
            return True
        origin = get_origin(hint)
        if origin is tuple:
            args = get_args(hint)
            return len(args) == 2 and args[1] is Ellipsis
        return origin in _SEQUENCE_ORIGINS

    def element_type(self, hint: Any) -> Any:
        args = get_args(hint)
        return args[0] if args else Any

    def container_type(self, hint: Any) -> Any:
        origin = get_origin(hint) or hint
        if origin is tuple:
            return tuple[Any, ...]
        return origin[Any]

    def accepts(self, value: Any) -> bool:
        return isinstance(value, collections.abc.Sequence) and not isinstance(
            value, (str, bytes, bytearray)
        )

    def extract(self, value: Any) -> Iterator[tuple[Segment, Any]]:
        for index, element in enumerate(value):
            yield index, element


DEFAULT_EXTRACTORS: tuple[ValueExtractor, ...] = (OptionalExtractor(), SequenceExtractor())
