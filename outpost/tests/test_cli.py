"""
Tests for the outpost CLI.
"""

import json
import logging
import sys

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger against the runner's streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_encode_json_file(tmp_path):
    path = tmp_path / "values.json"
    path.write_text(json.dumps({"service": {"type": "ClusterIP", "port": 80, "nodePort": None}}))

    result = runner.invoke(app, ["encode", str(path)])

    assert result.exit_code == 0
    assert result.stdout == "service:\n  port: 80\n  type: ClusterIP\n"


def test_encode_json_keeps_decimal_precision(tmp_path):
    path = tmp_path / "values.json"
    path.write_text('{"ratio": 0.1, "big": 100000000000000000000000000001}')

    result = runner.invoke(app, ["encode", str(path)])

    assert result.exit_code == 0
    assert result.stdout == "big: 100000000000000000000000000001\nratio: 0.1\n"


def test_encode_yaml_stdin():
    result = runner.invoke(app, ["encode"], input="a:\n- 1\n- null\n- 2\nb: ~\n")

    assert result.exit_code == 0
    assert result.stdout == "a:\n- 1\n- 2\n"


def test_encode_full_collapse_prints_nothing():
    result = runner.invoke(app, ["encode", "-", "--format", "json"], input='{"a": [null, null]}')

    assert result.exit_code == 0
    assert result.stdout == ""


def test_encode_null_document_fails():
    result = runner.invoke(app, ["encode", "--format", "json"], input="null")

    assert result.exit_code == 1
    assert "Input cannot be null" in result.output


def test_encode_depth_limit():
    result = runner.invoke(app, ["encode", "--max-depth", "1"], input="a:\n  b: 1\n")

    assert result.exit_code == 1
    assert "maximum depth of 1" in result.output


def test_encode_invalid_input():
    result = runner.invoke(app, ["encode", "--format", "json"], input="{not json")

    assert result.exit_code == 2


def test_encode_missing_file(tmp_path):
    result = runner.invoke(app, ["encode", str(tmp_path / "missing.json")])

    assert result.exit_code == 2


def test_functions_json():
    result = runner.invoke(app, ["functions", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["functions"][0]["name"] == "helm_values_encode"


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "Outpost CLI" in result.stdout


def test_encode_deeply_nested_json_reports_depth():
    result = runner.invoke(app, ["encode", "--format", "json"], input="[" * 600 + "]" * 600)

    assert result.exit_code == 1
    assert "maximum depth of 64" in result.output
    assert not isinstance(result.exception, RecursionError)


def test_encode_parser_recursion_reports_depth():
    result = runner.invoke(app, ["encode", "--format", "json"], input="[" * 100000 + "]" * 100000)

    assert result.exit_code == 1
    assert "maximum depth" in result.output
    assert not isinstance(result.exception, RecursionError)


def test_encode_huge_exponent_number():
    result = runner.invoke(app, ["encode", "--format", "json"], input='{"n": 1e5000}')

    assert result.exit_code == 0
    assert result.stdout == "n: 1.0E+5000\n"


@pytest.mark.skipif(
    not hasattr(sys, "set_int_max_str_digits"), reason="no integer digit limit on this Python"
)
def test_encode_oversized_json_integer_is_invalid_input():
    result = runner.invoke(app, ["encode", "--format", "json"], input='{"n": ' + "9" * 5000 + "}")

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


@pytest.mark.parametrize("depth", ["0", "-1", "129"])
def test_encode_max_depth_out_of_range(depth):
    result = runner.invoke(app, ["encode", "--max-depth", depth], input="a: 1\n")

    assert result.exit_code == 2
