"""
encode(): dynamic value -> YAML with nulls and emptied containers removed.
"""

import logging

from .core.dynamic import DynValue
from .core.limits import DEFAULT_MAX_DEPTH
from .core.normalize import normalize
from .core.prune import prune
from .core.render import render

logger = logging.getLogger(__name__)


def encode(
    value: DynValue,
    max_depth: int = DEFAULT_MAX_DEPTH,
    sort_sets: bool = False,
) -> str:
    """
    Normalize, prune and render a dynamic value.

    The caller must reject a top-level null or unknown before calling this.

    Returns:
        YAML document, or "" if the whole value prunes away

    Raises:
        UnsupportedShape, TooDeep: From normalization
        EncodingError: From rendering
    """
    tree = normalize(value, max_depth=max_depth, sort_sets=sort_sets)
    pruned = prune(tree)
    if pruned is None:
        logger.debug("input pruned to nothing")
        return ""
    return render(pruned)
