"""
End-to-end tests for encode().

These pin the exact YAML text produced for representative values.
"""

from decimal import Decimal

import pytest

from outpost.core import DynList, DynMap, DynNull, DynNumber, DynString, DynWrapper, from_native
from outpost.encode import encode


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"name": "test", "enabled": True, "count": 3}, "count: 3\nenabled: true\nname: test\n"),
        ({"service": {"type": "ClusterIP", "port": 80}}, "service:\n  port: 80\n  type: ClusterIP\n"),
        ({"items": ["item1", "item2", "item3"]}, "items:\n- item1\n- item2\n- item3\n"),
        ({"a": None, "b": {"c": None}}, ""),
        ({"a": [None, None]}, ""),
        ({"a": [1, None, 2]}, "a:\n- 1\n- 2\n"),
    ],
)
def test_encode_scenarios(data, expected):
    """Reference documents encode to exact text."""
    assert encode(from_native(data)) == expected


def test_encode_helm_values_document():
    """Realistic values file: optional fields vanish, the rest is kept."""
    data = {
        "replicaCount": 2,
        "image": {"repository": "nginx", "tag": None, "pullPolicy": "IfNotPresent"},
        "ingress": {"enabled": False, "hosts": [], "tls": None},
        "resources": {"limits": {"cpu": None, "memory": None}},
        "service": {"ports": [{"name": "http", "port": 80, "nodePort": None}]},
    }

    out = encode(from_native(data))

    assert out == (
        "image:\n"
        "  pullPolicy: IfNotPresent\n"
        "  repository: nginx\n"
        "ingress:\n"
        "  enabled: false\n"
        "replicaCount: 2\n"
        "service:\n"
        "  ports:\n"
        "  - name: http\n"
        "    port: 80\n"
    )


def test_encode_keeps_falsy_scalars():
    """Only null is absence: false, 0 and "" survive."""
    out = encode(from_native({"a": False, "b": 0, "c": ""}))
    assert out == "a: false\nb: 0\nc: ''\n"


def test_encode_quotes_ambiguous_strings():
    """Strings that would read back as other types are quoted."""
    out = encode(from_native({"a": "true", "b": "3", "c": "null"}))
    assert out == "a: 'true'\nb: '3'\nc: 'null'\n"


def test_encode_unicode_not_escaped():
    out = encode(from_native({"key": "日本語"}))
    assert out == "key: 日本語\n"


def test_encode_long_string_not_folded():
    """Long plain strings stay on one line."""
    long = " ".join(["word"] * 40)
    assert encode(from_native({"a": long})) == f"a: {long}\n"


def test_encode_floats_and_decimals():
    out = encode(
        from_native(
            {
                "ratio": 1.5,
                "whole": Decimal("2.0"),
                "precise": Decimal("0.1"),
                "big": 10 ** 30 + 1,
            }
        )
    )
    assert out == (
        "big: 1000000000000000000000000000001\n"
        "precise: 0.1\n"
        "ratio: 1.5\n"
        "whole: 2\n"
    )


def test_encode_root_scalar_has_no_document_end_marker():
    assert encode(DynString("hello")) == "hello\n"
    assert encode(DynNumber(Decimal(3))) == "3\n"


def test_encode_root_list():
    assert encode(from_native(["a", None, "b"])) == "- a\n- b\n"


def test_encode_wrapped_input():
    """Wrappers around the root and nested values are transparent."""
    value = DynWrapper(DynMap({"a": DynWrapper(DynString("x")), "b": DynWrapper()}))
    assert encode(value) == "a: x\n"


def test_encode_full_collapse_returns_empty_string():
    """Any tree whose leaves are all null encodes to ""."""
    value = DynMap(
        {
            "a": DynList((DynMap({"b": DynNull()}), DynList(()))),
            "c": DynMap({}),
            "d": DynWrapper(DynNull()),
        }
    )
    assert encode(value) == ""


def test_encode_deterministic():
    """Same value must produce identical text across runs."""
    value = from_native({"z": [3, 1, 2], "a": {"y": None, "x": True}, "m": "v"})

    results = set(encode(value) for _ in range(100))

    assert len(results) == 1
