"""
YAML rendering for pruned canonical trees.

Output is PyYAML's block style: sorted keys, two-space mapping indent,
list items at the parent key's column, unquoted strings unless quoting is
required, trailing newline.
"""

import logging
from decimal import Decimal
from typing import Optional

import yaml

from .errors import EncodingError
from .limits import MAX_INTEGER_DIGITS
from .values import CanonicalValue, Scalar, to_native

logger = logging.getLogger(__name__)

DOCUMENT_END = "...\n"


class ValuesDumper(yaml.SafeDumper):
    """SafeDumper that also knows how to write Decimal payloads."""
    pass


def _scientific(data: Decimal) -> str:
    """Write a finite Decimal as d.dddE+n, independent of its digit count."""
    sign, digits, _ = data.as_tuple()
    text = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = f"{text[0]}.{text[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{data.adjusted():+d}"


def _represent_decimal(dumper: yaml.SafeDumper, data: Decimal) -> yaml.ScalarNode:
    if data.is_nan():
        return dumper.represent_float(float("nan"))
    if data.is_infinite():
        return dumper.represent_float(float(data))
    if data == data.to_integral_value():
        if data.adjusted() < MAX_INTEGER_DIGITS:
            return dumper.represent_scalar(
                "tag:yaml.org,2002:int", format(data.to_integral_value(), "f")
            )
        return dumper.represent_scalar("tag:yaml.org,2002:float", _scientific(data))
    text = str(data)
    # The YAML 1.1 float pattern needs a dot in the mantissa ("1E-7" would be
    # read back as a string).
    if "." not in text:
        mantissa, _, exponent = text.partition("E")
        text = f"{mantissa}.0E{exponent}" if exponent else f"{mantissa}.0"
    return dumper.represent_scalar("tag:yaml.org,2002:float", text)


ValuesDumper.add_representer(Decimal, _represent_decimal)


def render(value: Optional[CanonicalValue]) -> str:
    """
    Render a pruned tree as a YAML document.

    Args:
        value: Result of prune(); None means everything was pruned away

    Returns:
        YAML text, or "" when value is None

    Raises:
        EncodingError: If PyYAML cannot represent or emit the tree
    """
    if value is None:
        return ""

    try:
        text = yaml.dump(
            to_native(value),
            Dumper=ValuesDumper,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
            width=float("inf"),
        )
    except (yaml.YAMLError, ValueError, ArithmeticError, RecursionError) as e:
        logger.debug("yaml emit failed: %s", e)
        raise EncodingError(str(e)) from e

    # Root plain scalars get an explicit document end marker; drop it so the
    # document is just the value and a newline.
    if isinstance(value, Scalar) and text.endswith("\n" + DOCUMENT_END):
        text = text[: -len(DOCUMENT_END)]
    return text
