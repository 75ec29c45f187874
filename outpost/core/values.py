"""
Canonical value tree.

Exactly four shapes: Absent, Scalar, ListNode, MapNode. Trees are built per
call by the normalizer and thrown away once rendered.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Tuple, Union

ScalarPayload = Union[str, bool, int, float, Decimal]


@dataclass(frozen=True)
class Absent:
    """Null/unset value."""
    pass


ABSENT = Absent()


@dataclass(frozen=True)
class Scalar:
    value: ScalarPayload


@dataclass(frozen=True)
class ListNode:
    """Ordered sequence; order is the input order."""
    items: Tuple["CanonicalValue", ...] = ()


@dataclass(frozen=True)
class MapNode:
    """String-keyed mapping. Key order carries no meaning."""
    entries: Dict[str, "CanonicalValue"] = field(default_factory=dict)


CanonicalValue = Union[Absent, Scalar, ListNode, MapNode]


def to_native(value: CanonicalValue) -> Any:
    """
    Convert a canonical tree into plain dict/list/scalar data.

    Absent becomes None. Used for rendering and for sort keys.
    """
    if isinstance(value, Absent):
        return None
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, ListNode):
        return [to_native(x) for x in value.items]
    if isinstance(value, MapNode):
        return {k: to_native(v) for k, v in value.entries.items()}
    raise TypeError(f"not a canonical value: {type(value).__name__}")
