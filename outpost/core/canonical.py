"""
Canonical text for canonical value trees.

Used wherever a stable, order-independent identity for a subtree is needed
(currently: sorting set elements when sort_sets is enabled).
"""

import json
from decimal import Decimal
from typing import Any

from .values import CanonicalValue, to_native


def _default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json_str(value: CanonicalValue) -> str:
    """
    Deterministic JSON string for a canonical tree.

    Guarantees:
    - sort_keys=True
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - Decimal payloads are written as their string form
    """
    return json.dumps(
        to_native(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_default,
    )
