"""
Functions exposed by the outpost provider.
"""

from .base import Function, FunctionDefinition, FunctionError, FunctionResult, Parameter
from .helm_values_encode import FUNCTION_NAME, HelmValuesEncodeFunction

__all__ = [
    "Function",
    "FunctionDefinition",
    "FunctionError",
    "FunctionResult",
    "Parameter",
    "FUNCTION_NAME",
    "HelmValuesEncodeFunction",
]
