# ScientificEngine
"""""
Constants and scientific functions used by the evaluator.

All functions take and return floats. Domain errors that the calculator reports to the
user (negative square root, non-positive logarithm) raise EvalError; everything else
follows IEEE semantics and may return nan or inf.
"""""

import math

from . import error as E


def isPi(problem):
    if problem == "π" or problem.lower() == "pi":
        return math.pi
    else:
        return False


def isE(problem):
    if problem.lower() == "e":
        return math.e
    else:
        return False


def _is_odd_integer(value):
    return math.isfinite(value) and value == math.floor(value) and math.fmod(value, 2) != 0


def power(base, exponent):
    """Real exponentiation with C pow() semantics.

    math.pow raises where C returns a value: a negative base with a fractional
    exponent gives nan, overflow gives +/-inf, zero to a negative power gives inf.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def isSCT(name, value):  # Sin / Cos / Tan, radians
    if math.isinf(value):
        return math.nan
    if name == "sin":
        return math.sin(value)
    elif name == "cos":
        return math.cos(value)
    elif name == "tan":
        return math.tan(value)
    return False


def isLog(name, value):
    if value <= 0:
        label = "Log base10" if name == "log" else "Ln"
        raise E.EvalError(f"{label} of non-positive", code="3003")
    if name == "log":
        return math.log10(value)
    return math.log(value)


def isRoot(value):
    if value < 0:
        raise E.EvalError("Sqrt of negative", code="3002")
    return math.sqrt(value)


# Name shown in the evaluation trace when it differs from the function name
TRACE_NAMES = {"log": "log10"}


def unknown_function(name, args):
    """Apply the function called `name` to `args` (already popped from the value stack)."""

    if name in ("sin", "cos", "tan"):
        ergebnis = isSCT(name, args[0])

    elif name in ("log", "ln"):
        ergebnis = isLog(name, args[0])

    elif name == "sqrt":
        ergebnis = isRoot(args[0])

    elif name == "pow":
        ergebnis = power(args[0], args[1])

    else:
        raise E.EvalError(f"Unknown function {name}", code="3005")

    return ergebnis
