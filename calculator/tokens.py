# tokens.py
"""""
Token types shared by the tokenizer, the shunting-yard converter and the evaluator.

Tokenizer output:   Number, Identifier, Symbol
Converter output:   Number, Operator, Function
"""""

from dataclasses import dataclass
from enum import Enum


SYMBOLS = "+-*/^(),"

# Recognized function identifiers and the number of arguments each one takes
FUNCTIONS = {
    "sin": 1,
    "cos": 1,
    "tan": 1,
    "sqrt": 1,
    "log": 1,
    "ln": 1,
    "pow": 2,
}


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    NEG = "u-"  # unary minus, never confused with binary '-'


@dataclass(frozen=True)
class OperatorInfo:
    precedence: int
    associativity: Associativity
    arity: int


OPERATORS = {
    Op.ADD: OperatorInfo(2, Associativity.LEFT, 2),
    Op.SUB: OperatorInfo(2, Associativity.LEFT, 2),
    Op.MUL: OperatorInfo(3, Associativity.LEFT, 2),
    Op.DIV: OperatorInfo(3, Associativity.LEFT, 2),
    Op.POW: OperatorInfo(4, Associativity.RIGHT, 2),
    Op.NEG: OperatorInfo(5, Associativity.RIGHT, 1),
}


@dataclass(frozen=True)
class Number:
    """Numeric literal, kept as its decimal text until evaluation."""
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Symbol:
    char: str

    def __str__(self):
        return self.char


@dataclass(frozen=True)
class Operator:
    op: Op

    @property
    def info(self):
        return OPERATORS[self.op]

    def __str__(self):
        return self.op.value


@dataclass(frozen=True)
class Function:
    name: str

    @property
    def arity(self):
        return FUNCTIONS[self.name]

    def __str__(self):
        return self.name


LEFT_PAREN = Symbol("(")


def lookup_operator(symbol):
    """Return the Op for an operator symbol ('+', '-', ..., 'u-') or None if unknown."""
    try:
        return Op(symbol)
    except ValueError:
        return None


def render(tokens):
    """Space separated rendering of a token sequence (e.g. '2 3 4 * +')."""
    return " ".join(str(token) for token in tokens)
