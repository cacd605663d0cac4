"""Shunting-yard calculator: tokenizer, postfix converter, evaluator and desktop UI."""

from .MathEngine import Explanation, calculate, explain
from .error import EvalError, InputError, LexError, MathError, ParseError

__version__ = "1.0.0"
