import pytest

from calculator.ShuntingYard import to_postfix
from calculator.Tokenizer import tokenize
from calculator.error import ParseError
from calculator.tokens import Function, Number, Op, Operator, Symbol, render


def postfix_of(expression):
    postfix, _ = to_postfix(tokenize(expression))
    return render(postfix)


@pytest.mark.parametrize("expression, expected", [
    ("2+3*4", "2 3 4 * +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("2-3-4", "2 3 - 4 -"),
    ("8/4/2", "8 4 / 2 /"),
    ("2^3^2", "2 3 2 ^ ^"),
    ("2*3^2", "2 3 2 ^ *"),
    ("-5", "5 u-"),
    ("5+-2", "5 2 u- +"),
    ("2^-2", "2 2 u- ^"),
    ("--2", "2 u- u-"),
    ("-3^2", "3 u- 2 ^"),
    ("sqrt(9)", "9 sqrt"),
    ("pow(2,-2)", "2 2 u- pow"),
    ("pow(1+1, 3)", "1 1 + 3 pow"),
    ("sin(cos(0))", "0 cos sin"),
    ("2*sin(0)+1", "2 0 sin * 1 +"),
])
def test_postfix_order(expression, expected):
    assert postfix_of(expression) == expected


def test_output_token_types():
    postfix, _ = to_postfix(tokenize("-pow(2,3)"))
    assert postfix == [Number("2"), Number("3"), Function("pow"), Operator(Op.NEG)]


def test_unary_minus_after_comma_and_paren():
    assert postfix_of("pow(-2,-3)") == "2 u- 3 u- pow"
    assert postfix_of("(-2)") == "2 u-"


def test_binary_minus_after_closing_paren():
    assert postfix_of("(1)-2") == "1 2 -"


def test_steps_record_every_action():
    _, steps = to_postfix(tokenize("2*(3+4)"))
    assert steps == [
        "Push number 2",
        "Push operator *",
        "Push ( to stack",
        "Push number 3",
        "Push operator +",
        "Push number 4",
        "Pop + to output",
        "Resolve ) to output",
        "Pop * to output",
    ]


def test_steps_for_functions_and_precedence_pops():
    _, steps = to_postfix(tokenize("sin(1)*2-3"))
    assert steps == [
        "Push function sin",
        "Push ( to stack",
        "Push number 1",
        "Resolve ) to output",
        "Push operator *",
        "Push number 2",
        "Pop operator * to output",
        "Push operator -",
        "Push number 3",
        "Pop - to output",
    ]


@pytest.mark.parametrize("expression, reason", [
    ("(2+3", "Mismatched parentheses"),
    ("2+3)", "Mismatched parentheses"),
    (")", "Mismatched parentheses"),
    ("((1)", "Mismatched parentheses"),
    ("foo(1)", "Unknown function: foo"),
    ("x", "Unknown function: x"),
    ("1,2", "Misplaced comma"),
])
def test_parse_errors(expression, reason):
    with pytest.raises(ParseError) as excinfo:
        to_postfix(tokenize(expression))
    assert excinfo.value.reason == reason


def test_unknown_operator():
    with pytest.raises(ParseError) as excinfo:
        to_postfix([Number("1"), Symbol("%"), Number("2")])
    assert excinfo.value.reason == "Unknown operator: %"
    assert excinfo.value.code == "2001"


def test_same_tokens_give_same_result():
    tokens = tokenize("pow(2, 3) ^ -1")
    assert to_postfix(tokens) == to_postfix(tokens)
