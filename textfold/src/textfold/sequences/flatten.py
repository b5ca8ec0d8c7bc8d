"""Flattening of nested list/tuple structures."""
from __future__ import annotations

from typing import Any, Iterable, List

from ..exceptions import InvalidInputError

_NESTED = (list, tuple)


def flatten(
    items: Iterable[Any],
    result: List[Any] | None = None,
    *,
    max_depth: int | None = None,
) -> List[Any]:
    """Append every non-``None`` scalar found in ``items`` to ``result``.

    Nested lists and tuples are walked depth-first in order; strings, bytes and
    mappings count as scalars. ``result`` is extended in place and returned, a
    new list is started when it is omitted.

    Without ``max_depth`` the input must be finite and acyclic. With it, more
    than ``max_depth`` levels of nesting (the outer list counting as one) raise
    :class:`InvalidInputError`.
    """

    if result is None:
        result = []
    if max_depth is not None and max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    return _flatten_into(items, result, max_depth, 1)


def _flatten_into(items: Iterable[Any], result: List[Any], max_depth: int | None, depth: int) -> List[Any]:
    if max_depth is not None and depth > max_depth:
        raise InvalidInputError(f"Nesting deeper than {max_depth} levels")
    for item in items:
        if isinstance(item, _NESTED):
            result = _flatten_into(item, result, max_depth, depth + 1)
        elif item is not None:
            result.append(item)
    return result


__all__ = ["flatten"]
