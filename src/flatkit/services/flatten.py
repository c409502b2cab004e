"""FlattenService — JSON text in, flattened ServiceResult out.

The domain functions never fail; the only thing that can go wrong here is
decoding the caller's input, which is reported as a failed result rather
than raised.
"""

from __future__ import annotations

import json
import logging
import math
import sys
import time
from typing import TYPE_CHECKING, Any

from flatkit.domain.flatten import flatten, flatten_deep, floor_depth, nesting_depth
from flatkit.domain.predicates import is_array_like
from flatkit.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from flatkit.config.settings import FlatkitSettings

logger = logging.getLogger(__name__)


class FlattenService:
    """Parse JSON input and run the flatten operations on it."""

    def __init__(self, settings: FlatkitSettings) -> None:
        self._settings = settings

    @staticmethod
    def _decode(op: str, text: str) -> tuple[Any, ServiceResult | None]:
        try:
            return json.loads(text), None
        except json.JSONDecodeError as exc:
            logger.debug("Rejected input for %s: %s", op, exc)
            return None, ServiceResult.failure(
                op,
                ErrorCode.INVALID_JSON,
                f"Input is not valid JSON: {exc.msg}",
                line=exc.lineno,
                column=exc.colno,
            )
        except RecursionError:
            # The json decoder recurses per nesting level.
            logger.debug("Rejected input for %s: nesting exceeds decoder limit", op)
            return None, ServiceResult.failure(
                op,
                ErrorCode.INPUT_TOO_DEEP,
                "Input is too deeply nested to decode",
                recursion_limit=sys.getrecursionlimit(),
            )

    def flatten(
        self,
        text: str,
        *,
        depth: float | None = None,
        deep: bool = False,
    ) -> ServiceResult:
        """Flatten the JSON array encoded in *text*.

        Args:
            text: JSON document holding the value to flatten.
            depth: Levels to collapse; defaults to ``[flatten] default_depth``.
            deep: Flatten completely, ignoring *depth*.
        """
        op = "flatten"
        start = time.perf_counter()
        value, failure = self._decode(op, text)
        if failure is not None:
            return failure

        if deep:
            levels = math.inf
            result = flatten_deep(value)
        else:
            levels = self._settings.flatten.default_depth if depth is None else depth
            result = flatten(value, levels)

        warnings: list[str] = []
        if not is_array_like(value):
            warnings.append(f"Input is not array-like ({type(value).__name__}); result is empty")

        floored = floor_depth(levels)
        size = _size(value)
        logger.debug("Flattened %d item(s) to %d at depth %s", size, len(result), floored)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "result": result,
                "depth": None if floored == math.inf else floored,
                "input_size": size,
                "output_size": len(result),
            },
            warnings=warnings,
            meta=_elapsed(start),
        )

    def inspect(self, text: str) -> ServiceResult:
        """Describe the shape of the JSON value encoded in *text*."""
        op = "inspect"
        start = time.perf_counter()
        value, failure = self._decode(op, text)
        if failure is not None:
            return failure

        array_like = is_array_like(value)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": type(value).__name__,
                "is_array_like": array_like,
                "length": len(value) if array_like else None,
                "nesting_depth": nesting_depth(value),
            },
            meta=_elapsed(start),
        )


def _size(value: Any) -> int:
    return len(value) if is_array_like(value) else 0


def _elapsed(start: float) -> dict[str, Any]:
    return {"duration_ms": round((time.perf_counter() - start) * 1000, 3)}
