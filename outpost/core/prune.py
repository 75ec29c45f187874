"""
Bottom-up removal of absence and emptiness.
"""

from typing import Dict, List, Optional

from .values import Absent, CanonicalValue, ListNode, MapNode, Scalar


def prune(value: CanonicalValue) -> Optional[CanonicalValue]:
    """
    Remove Absent nodes and containers left empty by their removal.

    Rules:
    - Absent -> None
    - Scalar -> unchanged (empty strings, 0 and false are kept)
    - ListNode -> surviving items in order, None if none survive
    - MapNode -> surviving pairs, None if none survive

    The result contains no Absent node and no empty container, so pruning
    it again returns an equal tree.
    """
    if isinstance(value, Absent):
        return None
    if isinstance(value, Scalar):
        return value
    if isinstance(value, ListNode):
        items: List[CanonicalValue] = []
        for item in value.items:
            cleaned = prune(item)
            if cleaned is not None:
                items.append(cleaned)
        if not items:
            return None
        return ListNode(tuple(items))
    if isinstance(value, MapNode):
        entries: Dict[str, CanonicalValue] = {}
        for key, item in value.entries.items():
            cleaned = prune(item)
            if cleaned is not None:
                entries[key] = cleaned
        if not entries:
            return None
        return MapNode(entries)
    raise TypeError(f"not a canonical value: {type(value).__name__}")
