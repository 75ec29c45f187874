"""
helm_values_encode: encode any value to YAML, omitting nulls.
"""

from typing import Optional, Sequence

from ..core.dynamic import DynNull, DynUnknown, DynValue
from ..core.errors import EncodingError, TooDeep, UnsupportedShape
from ..core.limits import DEFAULT_MAX_DEPTH
from ..encode import encode
from ..config import Settings
from ..logging_config import get_logger
from .base import Function, FunctionDefinition, FunctionError, FunctionResult, Parameter

FUNCTION_NAME = "helm_values_encode"


class HelmValuesEncodeFunction(Function):
    """
    Host function wrapping the normalize -> prune -> render pipeline.

    Argument checks (null / unknown input) happen here, before the core runs.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, sort_sets: bool = False) -> None:
        self.max_depth = max_depth
        self.sort_sets = sort_sets
        self.logger = get_logger(__name__, trace_id=FUNCTION_NAME)

    @staticmethod
    def from_settings(settings: Optional[Settings] = None) -> "HelmValuesEncodeFunction":
        settings = settings or Settings.from_env()
        return HelmValuesEncodeFunction(max_depth=settings.max_depth, sort_sets=settings.sort_sets)

    @property
    def name(self) -> str:
        return FUNCTION_NAME

    def definition(self) -> FunctionDefinition:
        return FunctionDefinition(
            name=FUNCTION_NAME,
            summary="Encode Terraform object to YAML with null omission",
            description=(
                "Takes any Terraform object and converts it to YAML format, recursively "
                "removing null values and empty containers that become empty after null "
                "removal. This utility function is provided by the Outpost Terraform "
                "Provider for generating clean YAML output from Terraform configurations."
            ),
            parameters=[
                Parameter(
                    name="input",
                    description=(
                        "The Terraform object to encode as YAML. Can be any valid Terraform "
                        "data type including objects, arrays, and primitives."
                    ),
                ),
            ],
            return_type="string",
        )

    def run(self, arguments: Sequence[DynValue]) -> FunctionResult:
        if len(arguments) != 1:
            return FunctionResult(
                error=FunctionError(f"Expected 1 argument, got {len(arguments)}")
            )

        value = arguments[0]
        if isinstance(value, DynNull):
            return FunctionResult(error=FunctionError("Input cannot be null", argument=0))
        if isinstance(value, DynUnknown):
            return FunctionResult(error=FunctionError("Input cannot be unknown", argument=0))

        try:
            text = encode(value, max_depth=self.max_depth, sort_sets=self.sort_sets)
        except (UnsupportedShape, TooDeep) as e:
            self.logger.warning("Failed to convert input: %s", e)
            return FunctionResult(error=FunctionError(f"Failed to convert input: {e}"))
        except EncodingError as e:
            self.logger.warning("Failed to encode YAML: %s", e)
            return FunctionResult(error=FunctionError(f"Failed to encode YAML: {e}"))

        return FunctionResult(result=text)
