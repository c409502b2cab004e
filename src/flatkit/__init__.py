"""flatkit — depth-bounded flattening of nested array-like values."""

from __future__ import annotations

from flatkit.domain.flatten import flatten, flatten_deep
from flatkit.domain.predicates import is_array_like, is_flattenable, spreadable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "flatten",
    "flatten_deep",
    "is_array_like",
    "is_flattenable",
    "spreadable",
]
