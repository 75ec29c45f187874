"""
Value normalizer: dynamic input value -> canonical value tree.

Pure function of its input. Dispatch is over the closed Dyn* union; any
other runtime type is rejected with UnsupportedShape rather than guessed at.
"""

import logging
import math
from decimal import Decimal
from typing import List, Tuple

from .canonical import canonical_json_str
from .dynamic import (
    DynBool,
    DynList,
    DynMap,
    DynNull,
    DynNumber,
    DynSet,
    DynString,
    DynUnknown,
    DynValue,
    DynWrapper,
)
from .errors import PathElement, TooDeep, UnsupportedShape
from .limits import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, MAX_UNWRAP
from .values import ABSENT, CanonicalValue, ListNode, MapNode, Scalar, ScalarPayload

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def normalize_number(d: Decimal) -> ScalarPayload:
    """
    Pick the narrowest exact representation for a number.

    Order: int64, then float64, then the Decimal itself.
    """
    if d.is_nan():
        # float() refuses signaling NaNs
        return float("nan")
    if d.is_infinite():
        return float(d)
    if d == d.to_integral_value() and INT64_MIN <= d <= INT64_MAX:
        return int(d)
    f = float(d)
    if math.isfinite(f) and Decimal(f) == d:
        return f
    return d


def unwrap(value: DynWrapper, path: Tuple[PathElement, ...] = ()) -> DynValue:
    """
    Strip wrapper levels until a concrete value is reached.

    An empty wrapper unwraps to DynNull.

    Raises:
        TooDeep: If more than MAX_UNWRAP wrapper levels are stacked
    """
    current: DynValue = value
    for _ in range(MAX_UNWRAP):
        if not isinstance(current, DynWrapper):
            return current
        if current.underlying is None:
            return DynNull()
        current = current.underlying
    if isinstance(current, DynWrapper):
        raise TooDeep(MAX_UNWRAP, path)
    return current


def normalize(
    value: DynValue,
    max_depth: int = DEFAULT_MAX_DEPTH,
    sort_sets: bool = False,
) -> CanonicalValue:
    """
    Map a dynamic input value to a canonical value.

    Args:
        value: Host value (any Dyn* shape)
        max_depth: Maximum container nesting accepted
        sort_sets: Sort DynSet elements by canonical text instead of
            keeping the host's enumeration order

    Returns:
        Canonical value tree

    Raises:
        UnsupportedShape: Unknown value below the top level, or a non-Dyn type
        TooDeep: Nesting deeper than max_depth (capped at MAX_DEPTH_LIMIT)
    """
    return _normalize(value, (), 0, min(max_depth, MAX_DEPTH_LIMIT), sort_sets)


def _normalize(
    value: DynValue,
    path: Tuple[PathElement, ...],
    depth: int,
    max_depth: int,
    sort_sets: bool,
) -> CanonicalValue:
    if isinstance(value, DynWrapper):
        value = unwrap(value, path)

    if isinstance(value, DynNull):
        return ABSENT
    if isinstance(value, DynUnknown):
        # Top-level unknown is rejected by the function layer; below that
        # there is nothing sensible to emit.
        raise UnsupportedShape("unknown", path)
    if isinstance(value, DynString):
        return Scalar(value.value)
    if isinstance(value, DynBool):
        return Scalar(value.value)
    if isinstance(value, DynNumber):
        return Scalar(normalize_number(value.value))

    if isinstance(value, (DynList, DynSet, DynMap)):
        if depth >= max_depth:
            raise TooDeep(max_depth, path)

    if isinstance(value, DynList):
        return ListNode(
            tuple(
                _normalize(elem, path + (i,), depth + 1, max_depth, sort_sets)
                for i, elem in enumerate(value.elements)
            )
        )
    if isinstance(value, DynSet):
        items: List[CanonicalValue] = [
            _normalize(elem, path + (i,), depth + 1, max_depth, sort_sets)
            for i, elem in enumerate(value.elements)
        ]
        if sort_sets:
            items.sort(key=canonical_json_str)
        return ListNode(tuple(items))
    if isinstance(value, DynMap):
        return MapNode(
            {
                key: _normalize(elem, path + (key,), depth + 1, max_depth, sort_sets)
                for key, elem in value.elements.items()
            }
        )

    logger.debug("rejecting value of type %s at %s", type(value).__name__, path)
    raise UnsupportedShape(type(value).__name__, path)
