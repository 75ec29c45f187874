"""
Exception types for the values encoder.
"""

from typing import Sequence, Tuple, Union

PathElement = Union[str, int]


def format_path(path: Sequence[PathElement]) -> str:
    """Render a key/index chain as ``$.service.ports[0]``."""
    out = "$"
    for elem in path:
        if isinstance(elem, int):
            out += f"[{elem}]"
        else:
            out += f".{elem}"
    return out


class EncodeError(Exception):
    """Base class for all encode failures. Carries the path to the bad node."""

    def __init__(self, message: str, path: Sequence[PathElement] = ()) -> None:
        self.path: Tuple[PathElement, ...] = tuple(path)
        self.detail = message
        if self.path:
            message = f"{message} at {format_path(self.path)}"
        super().__init__(message)


class UnsupportedShape(EncodeError):
    """Raised when the input holds a runtime shape the normalizer cannot map."""

    def __init__(self, shape: str, path: Sequence[PathElement] = ()) -> None:
        self.shape = shape
        super().__init__(f"unsupported type: {shape}", path)


class TooDeep(EncodeError):
    """Raised when nesting (or wrapper unwrapping) exceeds the configured limit."""

    def __init__(self, limit: int, path: Sequence[PathElement] = ()) -> None:
        self.limit = limit
        super().__init__(f"nesting exceeds maximum depth of {limit}", path)


class EncodingError(EncodeError):
    """Raised when a pruned tree cannot be rendered as YAML."""
    pass
