# ShuntingYard.py
"""""
Shunting-yard converter: token list (infix) -> postfix token list.

Besides operator precedence and associativity it handles
- function calls:  'sin ( x )'   -> 'x sin'
- argument lists:  'pow(2, 3)'   -> '2 3 pow'
- unary minus:     '-' is unary at the start, after '(' / ',' / an operator / a function name

Every action is recorded as a human readable step for the explanation view.
"""""

import logging

from . import error as E
from .tokens import (Associativity, FUNCTIONS, Function, Identifier, LEFT_PAREN, Number, Op,
                     OPERATORS, Operator, Symbol, lookup_operator, render)

logger = logging.getLogger(__name__)


def should_pop(current, top):
    """Shunting-yard pop condition for the incoming operator `current` against stack top `top`."""
    if current.associativity == Associativity.LEFT:
        return current.precedence <= top.precedence
    return current.precedence < top.precedence


def to_postfix(tokens):
    """Convert tokens to postfix order.

    Returns:
        (postfix, steps)
    Raises:
        ParseError for unknown functions/operators, a misplaced comma or mismatched parentheses.
    """
    output = []
    stack = []
    steps = []
    expect_unary = True  # At start, a leading '-' is unary

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
            steps.append(f"Push number {token.text}")
            expect_unary = False

        elif isinstance(token, Identifier):
            if token.name not in FUNCTIONS:
                raise E.ParseError(f"Unknown function: {token.name}", code="2000")
            stack.append(Function(token.name))
            steps.append(f"Push function {token.name}")
            expect_unary = True

        elif isinstance(token, Symbol) and token.char == ",":
            while stack and stack[-1] != LEFT_PAREN:
                popped = stack.pop()
                output.append(popped)
                steps.append(f"Pop {popped} to output")
            if not stack:
                raise E.ParseError("Misplaced comma", code="2002")
            steps.append("Argument separator ,")
            expect_unary = True

        elif isinstance(token, Symbol) and token.char == "(":
            stack.append(LEFT_PAREN)
            steps.append("Push ( to stack")
            expect_unary = True

        elif isinstance(token, Symbol) and token.char == ")":
            while stack and stack[-1] != LEFT_PAREN:
                popped = stack.pop()
                output.append(popped)
                steps.append(f"Pop {popped} to output")
            if not stack:
                raise E.ParseError("Mismatched parentheses", code="2003")
            stack.pop()  # discard '('
            # if the top is a function, this ')' closes its argument list
            if stack and isinstance(stack[-1], Function):
                output.append(stack.pop())
            steps.append("Resolve ) to output")
            expect_unary = False

        elif isinstance(token, Symbol):
            symbol = token.char
            if symbol == "-" and expect_unary:
                symbol = Op.NEG.value
            op = lookup_operator(symbol)
            if op is None:
                raise E.ParseError(f"Unknown operator: {symbol}", code="2001")
            current = OPERATORS[op]

            while stack and isinstance(stack[-1], Operator) and should_pop(current, stack[-1].info):
                popped = stack.pop()
                output.append(popped)
                steps.append(f"Pop operator {popped} to output")

            stack.append(Operator(op))
            steps.append(f"Push operator {op.value}")
            expect_unary = True

        else:
            raise E.ParseError(f"Unexpected token: {token}", code="2001")

    while stack:
        top = stack.pop()
        if top == LEFT_PAREN:
            raise E.ParseError("Mismatched parentheses", code="2003")
        output.append(top)
        steps.append(f"Pop {top} to output")

    logger.debug("Postfix: %s", render(output))
    return output, steps
