"""Depth-bounded flattening of nested array-like values."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from flatkit.domain.predicates import is_array_like, is_flattenable, to_list


def floor_depth(depth: float) -> float:
    """Floor *depth* to a whole number of levels.

    ``math.inf`` is kept as-is (unbounded); NaN and negative values
    collapse to 0.

    Examples:
        >>> floor_depth(2.7)
        2
        >>> floor_depth(-3)
        0
        >>> floor_depth(math.inf)
        inf
    """
    if isinstance(depth, int):
        return max(depth, 0)
    if math.isnan(depth):
        return 0
    if math.isinf(depth):
        return depth if depth > 0 else 0
    return max(math.floor(depth), 0)


def _walk(value: Any, max_depth: float) -> Iterator[Any]:
    """Yield leaves of *value* in depth-first, left-to-right order.

    Flattenable items above *max_depth* are descended into rather than
    yielded. A container already on the current path is yielded as a
    leaf, so self-referencing input terminates.
    """
    # Explicit stack of (iterator, level, container id) entries keeps deep
    # inputs off the interpreter call stack.
    stack: list[tuple[Iterator[Any], int, int]] = [(iter(to_list(value)), 0, id(value))]
    path = {id(value)}
    while stack:
        items, level, _key = stack[-1]
        for item in items:
            if level < max_depth and is_flattenable(item) and id(item) not in path:
                stack.append((iter(to_list(item)), level + 1, id(item)))
                path.add(id(item))
                break
            yield item
        else:
            path.discard(stack.pop()[2])


def flatten(value: Any, depth: float = 1) -> list[Any]:
    """Flatten *value* up to *depth* levels of nesting.

    Nested lists, plain tuples, and spreadable objects are hoisted into the
    result in depth-first, left-to-right order until *depth* levels have
    been collapsed; anything nested deeper is kept as-is. Input that is not
    array-like (``None``, numbers, mappings, ...) yields an empty list.

    Args:
        value: The sequence to flatten.
        depth: Number of nesting levels to collapse. Floored before use;
            ``0`` or less returns a shallow copy, ``math.inf`` flattens
            completely.

    Returns:
        A new list. The input is never modified.

    Examples:
        >>> flatten([1, [2, 3], [4, [5, 6]]])
        [1, 2, 3, 4, [5, 6]]
        >>> flatten([1, [2, 3], [4, [5, 6]]], 2)
        [1, 2, 3, 4, 5, 6]
        >>> flatten(None)
        []
    """
    if not is_array_like(value):
        return []
    return list(_walk(value, floor_depth(depth)))


def flatten_deep(value: Any) -> list[Any]:
    """Flatten *value* completely.

    Examples:
        >>> flatten_deep([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
    """
    return flatten(value, math.inf)


def nesting_depth(value: Any) -> int:
    """Return how many levels ``flatten`` needs to fully flatten *value*.

    A flat sequence has depth 0; non-array-like values also report 0.
    Empty nested sequences still count as a level.

    Examples:
        >>> nesting_depth([1, [2, [3]]])
        2
        >>> nesting_depth([])
        0
    """
    if not is_array_like(value):
        return 0
    deepest = 0
    stack: list[tuple[Iterator[Any], int, int]] = [(iter(to_list(value)), 0, id(value))]
    path = {id(value)}
    while stack:
        items, level, _key = stack[-1]
        for item in items:
            if is_flattenable(item) and id(item) not in path:
                deepest = max(deepest, level + 1)
                stack.append((iter(to_list(item)), level + 1, id(item)))
                path.add(id(item))
                break
        else:
            path.discard(stack.pop()[2])
    return deepest
