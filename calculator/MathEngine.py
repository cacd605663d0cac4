# MathEngine.py
"""""
Core calculation engine for the calculator.

Pipeline
--------
1) Tokenizer:      raw input string -> flat list of tokens
2) ShuntingYard:   tokens -> postfix (Reverse Polish) order
3) Evaluator:      postfix -> float
4) Formatter:      float -> display string (rounded to the configured decimal places)

`explain` runs 1-3 and returns the result together with every intermediate step.
It holds no state: the same input always gives the same Explanation.
`calculate` is what callers (the UI, the command line) use: it guards the input,
logs, and attaches the expression to any error raised on the way.
"""""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from . import Evaluator
from . import ShuntingYard
from . import Tokenizer
from . import config_manager
from . import error as E
from .tokens import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Explanation:
    """Result of one expression plus the trace of how it was computed."""
    expression: str
    result: float
    tokens: Tuple
    postfix: Tuple
    shunting_steps: Tuple[str, ...]
    eval_steps: Tuple[str, ...]

    def as_dict(self):
        return {
            "result": self.result,
            "tokens": list(self.tokens),
            "postfix": list(self.postfix),
            "shunting_steps": list(self.shunting_steps),
            "eval_steps": list(self.eval_steps),
        }

    @property
    def postfix_text(self):
        return render(self.postfix)


def explain(expression):
    """Tokenize, convert and evaluate `expression`.

    The first error raised by any stage aborts the remaining stages and propagates unchanged.
    """
    tokens = Tokenizer.tokenize(expression)
    postfix, shunting_steps = ShuntingYard.to_postfix(tokens)
    result, eval_steps = Evaluator.evaluate(postfix)
    return Explanation(
        expression=expression,
        result=result,
        tokens=tuple(tokens),
        postfix=tuple(postfix),
        shunting_steps=tuple(shunting_steps),
        eval_steps=tuple(eval_steps),
    )


# -----------------------------
# Result formatting
# -----------------------------

def format_result(ergebnis, decimal_places):
    """Render a float for display.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag tells the caller to show '≈' instead of '='.
    """
    if math.isnan(ergebnis):
        return "nan", False
    if math.isinf(ergebnis):
        return ("inf" if ergebnis > 0 else "-inf"), False

    if ergebnis.is_integer() and abs(ergebnis) < 1e15:
        # Integer result – drop the '.0' without rounding
        return str(int(ergebnis)), False

    gerundet = round(ergebnis, max(decimal_places, 0))
    rounding = gerundet != ergebnis
    if gerundet.is_integer() and abs(gerundet) < 1e15:
        return str(int(gerundet)), rounding
    return repr(gerundet), rounding


def result_line(explanation, decimal_places):
    """'= 5' or '≈ 0.3333333333' for the given explanation."""
    text, rounding = format_result(explanation.result, decimal_places)
    sign = "≈" if rounding else "="
    return f"{sign} {text}"


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem, settings=None):
    """Main API for callers: guard the input, explain it, attach the expression to errors."""
    if settings is None:
        settings = config_manager.load_setting_value("all")
    max_length = settings.get("max_expression_length", config_manager.DEFAULT_SETTINGS["max_expression_length"])

    problem = (problem or "").strip()
    try:
        if problem == "":
            raise E.InputError("Empty expression", code="4000")
        if len(problem) > max_length:
            raise E.InputError(f"Expression too long ({len(problem)} > {max_length} characters)", code="4001")

        explanation = explain(problem)
        logger.info("Calculated %r = %r", problem, explanation.result)
        return explanation

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        logger.info("Rejected %r: [%s] %s", problem, e.code, e.message)
        raise e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        logger.exception("Unexpected error while calculating %r", problem)
        raise E.MathError(message=str(e).strip(), code="9999", equation=problem) from e
