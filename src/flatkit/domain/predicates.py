"""Shape predicates — decide which values count as sequences for flattening.

Two distinct questions are answered here:

* Is a top-level value *array-like*?  Anything with ordered, integer-indexed
  access and a length qualifies, including strings and bytes.
* Is a nested value *flattenable*?  Only lists, tuples (the positional
  arguments container), and objects explicitly marked spreadable are
  hoisted into their parent. Strings stay intact at nested levels.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

SPREADABLE_ATTR = "__spreadable__"

T = TypeVar("T")


def is_length(value: Any) -> bool:
    """Return True if *value* is a valid sequence length.

    Examples:
        >>> is_length(3)
        True
        >>> is_length(-1)
        False
        >>> is_length(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= sys.maxsize


def is_array_like(value: Any) -> bool:
    """Return True if *value* exposes ordered, length-bounded indexed access.

    Mappings are excluded even though they define ``__len__`` and
    ``__getitem__``: their keys are not positions.

    Examples:
        >>> is_array_like([1, 2])
        True
        >>> is_array_like("abc")
        True
        >>> is_array_like({"a": 1})
        False
        >>> is_array_like(None)
        False
    """
    if value is None or callable(value) or isinstance(value, Mapping):
        return False
    if not isinstance(value, Sequence):
        if not (hasattr(value, "__len__") and hasattr(value, "__getitem__")):
            return False
    try:
        length = len(value)
    except (TypeError, ValueError):
        # e.g. zero-dimensional arrays, or __len__ returning garbage
        return False
    return is_length(length)


def is_spreadable(value: Any) -> bool:
    """Return True if *value* is explicitly marked for spreading.

    The mark lives on the class, so the class object itself also carries it;
    only instances count.
    """
    if isinstance(value, type):
        return False
    return bool(getattr(value, SPREADABLE_ATTR, False))


def is_arguments_like(value: Any) -> bool:
    """Return True for plain tuples — the container Python packs ``*args`` into.

    Named tuples are records rather than argument packs and are left alone.
    """
    return isinstance(value, tuple) and not hasattr(value, "_fields")


def is_flattenable(value: Any) -> bool:
    """Return True if a nested *value* should be hoisted into its parent."""
    if isinstance(value, list) or is_arguments_like(value):
        return True
    # A spreadable object that cannot be materialised stays a leaf.
    return is_spreadable(value) and (isinstance(value, Iterable) or is_array_like(value))


def spreadable(cls: type[T]) -> type[T]:
    """Class decorator marking instances as spreadable during flattening.

    Usage::

        @spreadable
        class Batch:
            def __init__(self, *items):
                self.items = items

            def __iter__(self):
                return iter(self.items)
    """
    setattr(cls, SPREADABLE_ATTR, True)
    return cls


def to_list(value: Any) -> list[Any]:
    """Materialise *value* as a new list of its elements.

    Array-likes are read by index, other iterables are drained, and
    anything else produces an empty list. An array-like whose indexed reads
    fail also produces an empty list.
    """
    if isinstance(value, (list, tuple, str, bytes)):
        return list(value)
    if is_array_like(value):
        try:
            return [value[i] for i in range(len(value))]
        except (LookupError, TypeError):
            return []
    if isinstance(value, Iterable):
        return list(value)
    return []
