"""Test input sanitizing"""

import math
import pytest
from hilbertgen.constants import MAX_ORDER, DEFAULT_EDGE_LENGTH
from hilbertgen.curve_runtime import sanitize_inputs


def test_valid_inputs_pass_through(capsys):
    assert sanitize_inputs(5, 2.5) == (5, 2.5, [])
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("order", [0, -1, -100])
def test_low_order_clamped(order, capsys):
    clamped, _, warnings = sanitize_inputs(order, 1.0)
    assert clamped == 1
    assert len(warnings) == 1
    assert "The value has been set to 1." in capsys.readouterr().out


def test_high_order_clamped():
    clamped, _, warnings = sanitize_inputs(MAX_ORDER + 1, 1.0, verbose=False)
    assert clamped == MAX_ORDER
    assert f"lower or equal to {MAX_ORDER}" in warnings[0]


def test_custom_max_order():
    assert sanitize_inputs(12, 1.0, max_order=10, verbose=False)[0] == 10


@pytest.mark.parametrize("edge_length", [0, 0.0, -2.0, math.inf, math.nan, None, "wide"])
def test_bad_edge_length_replaced(edge_length):
    _, clamped, warnings = sanitize_inputs(3, edge_length, verbose=False)
    assert clamped == DEFAULT_EDGE_LENGTH
    assert len(warnings) == 1


def test_edge_length_converted_to_float():
    _, edge_length, _ = sanitize_inputs(3, 4, verbose=False)
    assert isinstance(edge_length, float)


def test_warning_prefix(capsys):
    sanitize_inputs(0, 0.0)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("Warning: ") for line in lines)


@pytest.mark.parametrize("order, truncated", [(2.9, 2), (3.5, 3)])
def test_fractional_order_truncated_with_warning(order, truncated):
    clamped, _, warnings = sanitize_inputs(order, 1.0, verbose=False)
    assert clamped == truncated
    assert len(warnings) == 1
    assert "must be an integer" in warnings[0]


@pytest.mark.parametrize("order", [3, 3.0, "3"])
def test_integral_order_has_no_warning(order):
    assert sanitize_inputs(order, 1.0, verbose=False) == (3, 1.0, [])


def test_fractional_order_below_one(capsys):
    clamped, _, warnings = sanitize_inputs(0.5, 1.0)
    assert clamped == 1
    assert len(warnings) == 2
    assert len(capsys.readouterr().out.splitlines()) == 2
