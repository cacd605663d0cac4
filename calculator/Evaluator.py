# Evaluator.py
"""""
Postfix (RPN) evaluator.

Walks the postfix sequence left to right with a value stack:
- Number     -> push float(text)
- Operator   -> pop arity operands (right operand first), push the result
- Function   -> pop its fixed number of arguments, push the result

A valid postfix sequence leaves exactly one value on the stack; anything else is an
EvalError, never a silently wrong number.
"""""

import logging

from . import ScientificEngine
from . import error as E
from .tokens import FUNCTIONS, Function, Number, Op, Operator

logger = logging.getLogger(__name__)


def apply_operator(op, left, right):
    if op == Op.ADD:
        return left + right
    elif op == Op.SUB:
        return left - right
    elif op == Op.MUL:
        return left * right
    elif op == Op.DIV:
        if right == 0.0:
            raise E.EvalError("Division by zero", code="3001")
        return left / right
    elif op == Op.POW:
        return ScientificEngine.power(left, right)
    raise E.EvalError(f"Unknown operator {op.value}", code="3005")


def pop_operands(stack, count, what):
    if len(stack) < count:
        raise E.EvalError(f"Not enough operands for {what}", code="3000")
    operands = stack[len(stack) - count:]
    del stack[len(stack) - count:]
    return operands


def evaluate(postfix):
    """Evaluate a postfix token sequence.

    Returns:
        (result, steps)
    """
    stack = []
    steps = []

    for token in postfix:
        if isinstance(token, Number):
            try:
                value = float(token.text)
            except ValueError:
                raise E.EvalError(f"Invalid number: {token.text}", code="3006")
            stack.append(value)
            steps.append(f"Push {value}")

        elif isinstance(token, Operator):
            if token.op == Op.NEG:
                (a,) = pop_operands(stack, 1, "unary -")
                result = -a
                steps.append(f"u- {a} => {result}")
            else:
                a, b = pop_operands(stack, 2, token.op.value)
                result = apply_operator(token.op, a, b)
                steps.append(f"{a} {token.op.value} {b} => {result}")
            stack.append(result)

        elif isinstance(token, Function):
            if token.name not in FUNCTIONS:
                raise E.EvalError(f"Unknown function {token.name}", code="3005")
            args = pop_operands(stack, token.arity, token.name)
            result = ScientificEngine.unknown_function(token.name, args)
            label = ScientificEngine.TRACE_NAMES.get(token.name, token.name)
            steps.append(f"{label}({','.join(str(arg) for arg in args)}) => {result}")
            stack.append(result)

        else:
            raise E.EvalError("Invalid token in RPN", code="3005")

    if len(stack) != 1:
        raise E.EvalError("Invalid expression", code="3004")

    logger.debug("Evaluated %d postfix tokens to %r", len(postfix), stack[0])
    return float(stack[0]), steps
