"""
Tests for canonical text of canonical value trees.
"""

from decimal import Decimal

from outpost.core import ListNode, MapNode, Scalar, canonical_json_str


def test_canonical_json_key_order():
    """Entry order must not affect canonical text."""
    a = MapNode({"z": Scalar(1), "a": Scalar(2)})
    b = MapNode({"a": Scalar(2), "z": Scalar(1)})

    assert canonical_json_str(a) == canonical_json_str(b)
    assert canonical_json_str(a) == '{"a":2,"z":1}'


def test_canonical_json_nested():
    value = MapNode({"l": ListNode((Scalar("日本語"), Scalar(Decimal("0.1")))), "b": Scalar(True)})
    assert canonical_json_str(value) == '{"b":true,"l":["日本語","0.1"]}'
