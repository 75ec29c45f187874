"""
Core encoding pipeline.

This module provides the two stages behind encode():
- Dynamic: closed set of host value shapes (Dyn*)
- Normalize: dynamic value -> canonical value tree
- Prune: bottom-up removal of nulls and emptied containers
- Render: pruned tree -> YAML text
- Errors: UnsupportedShape, TooDeep, EncodingError
"""

from .dynamic import (
    DynNull,
    DynUnknown,
    DynString,
    DynBool,
    DynNumber,
    DynList,
    DynSet,
    DynMap,
    DynWrapper,
    DynValue,
    from_native,
)
from .values import ABSENT, Absent, Scalar, ListNode, MapNode, CanonicalValue, to_native
from .normalize import normalize
from .limits import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, MAX_UNWRAP
from .prune import prune
from .render import render
from .canonical import canonical_json_str
from .errors import EncodeError, UnsupportedShape, TooDeep, EncodingError

__all__ = [
    "DynNull",
    "DynUnknown",
    "DynString",
    "DynBool",
    "DynNumber",
    "DynList",
    "DynSet",
    "DynMap",
    "DynWrapper",
    "DynValue",
    "from_native",
    "ABSENT",
    "Absent",
    "Scalar",
    "ListNode",
    "MapNode",
    "CanonicalValue",
    "to_native",
    "normalize",
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "MAX_UNWRAP",
    "prune",
    "render",
    "canonical_json_str",
    "EncodeError",
    "UnsupportedShape",
    "TooDeep",
    "EncodingError",
]
