"""
Outpost provider: registry of the functions it exposes to the host.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .config import Settings
from .core.dynamic import DynValue
from .functions import Function, FunctionResult, HelmValuesEncodeFunction

PROVIDER_TYPE_NAME = "outpost"
PROVIDER_DESCRIPTION = (
    "The Outpost provider provides utility functions for Terraform configurations, "
    "including YAML encoding with null value omission for Helm values files."
)


class UnknownFunctionError(KeyError):
    """Raised when a function name is not registered with the provider."""
    pass


@dataclass(frozen=True)
class ProviderMetadata:
    type_name: str
    version: str


class OutpostProvider:
    """
    Function registry.

    version is the release version, "dev" for local builds and "test" in tests.
    """

    def __init__(self, version: str = "dev", functions: Optional[List[Function]] = None):
        self.version = version
        if functions is None:
            functions = [HelmValuesEncodeFunction()]
        self._functions: Dict[str, Function] = {f.name: f for f in functions}

    @staticmethod
    def default(version: str = "dev", settings: Optional[Settings] = None) -> "OutpostProvider":
        return OutpostProvider(version, [HelmValuesEncodeFunction.from_settings(settings)])

    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(type_name=PROVIDER_TYPE_NAME, version=self.version)

    def schema(self) -> Dict[str, str]:
        return {"description": PROVIDER_DESCRIPTION}

    def functions(self) -> List[Function]:
        return [self._functions[name] for name in sorted(self._functions)]

    def function(self, name: str) -> Function:
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunctionError(name) from None

    def call(self, name: str, arguments: Sequence[DynValue]) -> FunctionResult:
        return self.function(name).run(arguments)

    def as_function_specs(self) -> List[Dict[str, Any]]:
        return [f.definition().to_dict() for f in self.functions()]
