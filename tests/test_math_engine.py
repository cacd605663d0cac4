import logging
import math

import pytest

from calculator import MathEngine
from calculator.MathEngine import calculate, explain, format_result, result_line
from calculator.error import EvalError, InputError, LexError, MathError, ParseError

SETTINGS = {"max_expression_length": 1000}


@pytest.mark.parametrize("expression, expected", [
    ("2+3", 5.0),
    ("2*(3+4)", 14.0),
    ("2+3*1", 5.0),
    ("-5", -5.0),
    ("5+-2", 3.0),
    ("sqrt(9)", 3.0),
    ("log(100)", 2.0),
    ("ln(e)", 1.0),
    ("pow(2,3)", 8.0),
])
def test_basic_results(expression, expected):
    assert explain(expression).result == expected


def test_sin_of_half_pi():
    assert explain("sin(pi/2)").result == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("expression, expected", [
    ("2+3*4-5/2", 11.5),
    ("2^3^2", 512.0),
    ("(2+3)*(4-1)^2", 45.0),
    ("100/10/5", 2.0),
    ("2-3+4", 3.0),
    ("2*-3", -6.0),
    ("--2", 2.0),
    ("-3^2", 9.0),
    ("2^-2", 0.25),
    ("pow(2,-2)", 0.25),
    ("−5+2", -3.0),
    ("1.5 * .5", 0.75),
    ("sqrt(pow(3,2) + pow(4,2))", 5.0),
])
def test_precedence_and_associativity(expression, expected):
    assert explain(expression).result == pytest.approx(expected)


def test_negative_base_with_fractional_exponent_is_nan():
    assert math.isnan(explain("(-8)^(1/3)").result)


def test_overflow_gives_infinity():
    assert explain("10^400").result == math.inf


def test_division_by_zero_is_an_error_not_infinity():
    with pytest.raises(EvalError) as excinfo:
        explain("2/0")
    assert excinfo.value.reason == "Division by zero"


@pytest.mark.parametrize("expression", ["(2+3", "2+3)", "foo(1)", "1,2"])
def test_parse_errors_propagate(expression):
    with pytest.raises(ParseError):
        explain(expression)


def test_lex_errors_propagate():
    with pytest.raises(LexError):
        explain("2 $ 3")


@pytest.mark.parametrize("expression", ["2 3", "()", "+2", "pow(2)", "sqrt(9,1)", ""])
def test_malformed_expressions_never_return_a_number(expression):
    with pytest.raises(EvalError):
        explain(expression)


def test_explain_is_repeatable():
    first = explain("2*sin(pi/4)^2 + pow(2, -1)")
    second = explain("2*sin(pi/4)^2 + pow(2, -1)")
    assert first == second
    assert first.shunting_steps == second.shunting_steps
    assert first.eval_steps == second.eval_steps


def test_explanation_contents():
    info = explain("2*(3+4)")
    assert info.expression == "2*(3+4)"
    assert info.postfix_text == "2 3 4 + *"
    assert len(info.tokens) == 7
    assert info.eval_steps[-1] == "2.0 * 7.0 => 14.0"
    assert set(info.as_dict()) == {"result", "tokens", "postfix", "shunting_steps", "eval_steps"}
    assert info.as_dict()["result"] == 14.0


def test_calculate_strips_input():
    info = calculate("   2+3 \n", SETTINGS)
    assert info.result == 5.0
    assert info.expression == "2+3"


def test_calculate_rejects_empty_input():
    with pytest.raises(InputError) as excinfo:
        calculate("   ", SETTINGS)
    assert excinfo.value.code == "4000"


def test_calculate_rejects_long_input():
    with pytest.raises(InputError) as excinfo:
        calculate("1+" * 500 + "1", SETTINGS)
    assert excinfo.value.code == "4001"

    assert calculate("1+" * 499 + "1", SETTINGS).result == 500.0


def test_calculate_uses_default_limit_when_setting_missing():
    with pytest.raises(InputError):
        calculate("1" * 1001, {})


def test_calculate_attaches_expression_to_errors():
    with pytest.raises(EvalError) as excinfo:
        calculate(" 2/0 ", SETTINGS)
    assert excinfo.value.equation == "2/0"
    assert excinfo.value.code == "3001"
    assert excinfo.value.reason == "Division by zero"


def test_calculate_wraps_unexpected_errors(monkeypatch):
    def broken(expression):
        raise RuntimeError("boom")

    monkeypatch.setattr(MathEngine, "explain", broken)
    with pytest.raises(MathError) as excinfo:
        calculate("1+1", SETTINGS)
    assert excinfo.value.code == "9999"
    assert excinfo.value.message == "boom"
    assert excinfo.value.equation == "1+1"


def test_calculate_logs_rejected_input(caplog):
    caplog.set_level(logging.INFO, logger="calculator.MathEngine")
    with pytest.raises(ParseError):
        calculate("foo(1)", SETTINGS)
    assert "Unknown function: foo" in caplog.text


@pytest.mark.parametrize("value, decimal_places, expected", [
    (5.0, 10, ("5", False)),
    (-14.0, 10, ("-14", False)),
    (2.5, 10, ("2.5", False)),
    (1 / 3, 4, ("0.3333", True)),
    (0.1 + 0.2, 10, ("0.3", True)),
    (2.9999999999999, 4, ("3", True)),
    (float("nan"), 10, ("nan", False)),
    (float("inf"), 10, ("inf", False)),
    (float("-inf"), 10, ("-inf", False)),
])
def test_format_result(value, decimal_places, expected):
    assert format_result(value, decimal_places) == expected


def test_result_line():
    assert result_line(explain("2+3"), 10) == "= 5"
    assert result_line(explain("1/3"), 4) == "≈ 0.3333"
