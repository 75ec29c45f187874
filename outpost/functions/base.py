"""
Provider function interface.

Defines the contract between the host's function-invocation layer and the
functions this provider exposes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.dynamic import DynValue


@dataclass(frozen=True)
class Parameter:
    name: str
    description: str
    type: str = "dynamic"
    allow_null: bool = False
    allow_unknown: bool = False


@dataclass(frozen=True)
class FunctionDefinition:
    """Name, documentation and signature shown to configuration authors."""

    name: str
    summary: str
    description: str
    parameters: List[Parameter] = field(default_factory=list)
    return_type: str = "string"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "summary": self.summary,
            "description": self.description,
            "parameters": [
                {"name": p.name, "type": p.type, "description": p.description}
                for p in self.parameters
            ],
            "return": self.return_type,
        }


@dataclass(frozen=True)
class FunctionError:
    """
    User-facing function error.

    argument is the zero-based position of the offending argument, or None
    when the error is not tied to one argument.
    """

    message: str
    argument: Optional[int] = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.message
        return f"argument {self.argument}: {self.message}"


@dataclass(frozen=True)
class FunctionResult:
    """
    Outcome of a call. Exactly one of result / error is set.
    """

    result: Optional[str] = None
    error: Optional[FunctionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Function(ABC):
    """
    Abstract provider function.

    All implementations must be:
    - Deterministic (same arguments -> same result)
    - All-or-nothing (never a partial result alongside an error)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def definition(self) -> FunctionDefinition:
        ...

    @abstractmethod
    def run(self, arguments: Sequence[DynValue]) -> FunctionResult:
        """
        Run the function.

        Args:
            arguments: Positional arguments as supplied by the host

        Returns:
            FunctionResult with result text or error
        """
        ...
