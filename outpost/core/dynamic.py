"""
Dynamic input values as handed over by the host.

The host (a configuration language runtime) gives us a tagged value whose
shape is only known at evaluation time. These frozen dataclasses form the
closed set of shapes the normalizer accepts. Callers own them; nothing in
this package mutates them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import PathElement, TooDeep, UnsupportedShape
from .limits import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


@dataclass(frozen=True)
class DynNull:
    """Explicit null. Distinct from empty strings or empty containers."""
    pass


@dataclass(frozen=True)
class DynUnknown:
    """Value not resolved yet (e.g. computed during apply)."""
    pass


@dataclass(frozen=True)
class DynString:
    value: str


@dataclass(frozen=True)
class DynBool:
    value: bool


@dataclass(frozen=True)
class DynNumber:
    """Arbitrary-precision number."""
    value: Decimal


@dataclass(frozen=True)
class DynList:
    """Ordered sequence (host list or tuple)."""
    elements: Tuple["DynValue", ...] = ()


@dataclass(frozen=True)
class DynSet:
    """
    Unordered collection.

    elements holds the host's enumeration order, which the host does not
    promise to keep stable between runs.
    """
    elements: Tuple["DynValue", ...] = ()


@dataclass(frozen=True)
class DynMap:
    """String-keyed mapping (host map or object)."""
    elements: Dict[str, "DynValue"] = field(default_factory=dict)


@dataclass(frozen=True)
class DynWrapper:
    """
    Dynamic value whose concrete shape is deferred.

    underlying is None when the wrapper carries nothing, which counts as null.
    """
    underlying: Optional["DynValue"] = None


DynValue = Union[
    DynNull,
    DynUnknown,
    DynString,
    DynBool,
    DynNumber,
    DynList,
    DynSet,
    DynMap,
    DynWrapper,
]

DYN_TYPES = (
    DynNull,
    DynUnknown,
    DynString,
    DynBool,
    DynNumber,
    DynList,
    DynSet,
    DynMap,
    DynWrapper,
)


def from_native(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> DynValue:
    """
    Build a dynamic value from plain Python data (as loaded from JSON/YAML).

    Mapping keys are converted with str(); keys that collide after conversion
    (YAML ``1:`` next to ``"1":``) are rejected. Existing Dyn* values pass
    through unchanged so native and host values can be mixed.

    Raises:
        UnsupportedShape: If obj (or anything inside it) has no dynamic shape
        TooDeep: If containers nest deeper than max_depth
    """
    return _from_native(obj, (), 0, min(max_depth, MAX_DEPTH_LIMIT))


def _from_native(obj: Any, path: Tuple[PathElement, ...], depth: int, max_depth: int) -> DynValue:
    if isinstance(obj, DYN_TYPES):
        return obj
    if obj is None:
        return DynNull()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return DynBool(obj)
    if isinstance(obj, (int, float, Decimal)):
        return DynNumber(Decimal(obj))
    if isinstance(obj, str):
        return DynString(obj)

    if isinstance(obj, (dict, list, tuple, set, frozenset)) and depth >= max_depth:
        raise TooDeep(max_depth, path)

    if isinstance(obj, dict):
        elements: Dict[str, DynValue] = {}
        for k, v in obj.items():
            key = str(k)
            if key in elements:
                raise UnsupportedShape(f"mapping with duplicate key {key!r}", path)
            elements[key] = _from_native(v, path + (key,), depth + 1, max_depth)
        return DynMap(elements)
    if isinstance(obj, (list, tuple)):
        return DynList(
            tuple(_from_native(x, path + (i,), depth + 1, max_depth) for i, x in enumerate(obj))
        )
    if isinstance(obj, (set, frozenset)):
        items: List[DynValue] = [
            _from_native(x, path + (i,), depth + 1, max_depth) for i, x in enumerate(obj)
        ]
        return DynSet(tuple(items))
    raise UnsupportedShape(type(obj).__name__, path)
