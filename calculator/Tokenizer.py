# Tokenizer.py
"""""
Tokenizer: converts a raw input string into a flat list of tokens.

Produces Number, Identifier and Symbol tokens. The constants 'pi' (also 'π') and 'e'
are resolved here and emitted as Number tokens; function names are left as Identifiers
and checked later by the shunting-yard converter.
"""""

import logging
import string

from . import ScientificEngine
from . import error as E
from .tokens import Number, Identifier, Symbol, SYMBOLS

logger = logging.getLogger(__name__)

UNICODE_MINUS = "−"


def is_digit(char):
    """ASCII digits only; other Unicode digits ('²', '٣') are not numbers here."""
    return char != "" and char in string.digits


def is_letter(char):
    return char != "" and char in string.ascii_letters


def normalize(expression):
    """Strip surrounding whitespace and rewrite the Unicode minus sign to ASCII '-'."""
    return expression.strip().replace(UNICODE_MINUS, "-")


def tokenize(expression):
    problem = normalize(expression)
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]
        next_char = problem[b + 1] if b + 1 < len(problem) else ""

        # --- Whitespace (ignored) ---
        if current_char.isspace():
            b += 1
            continue

        # --- Constant pi: exactly two characters, checked before identifiers ---
        if current_char in ("p", "P") and next_char in ("i", "I"):
            tokens.append(Number(repr(ScientificEngine.isPi("pi"))))
            b += 2
            continue

        if current_char == "π":
            tokens.append(Number(repr(ScientificEngine.isPi("π"))))
            b += 1
            continue

        # --- Numbers: digits and decimal separator ---
        if is_digit(current_char) or (current_char == "." and is_digit(next_char)):
            start = b
            has_dot = False
            while b < len(problem) and (is_digit(problem[b]) or problem[b] == "."):
                if problem[b] == ".":
                    if has_dot:
                        raise E.LexError(b, ".", message=f"More than one '.' in number at position {b}",
                                         code="1001")
                    has_dot = True
                b += 1
            tokens.append(Number(problem[start:b]))
            continue

        # --- Identifiers: letters, digits and '_', lower-cased ---
        if is_letter(current_char):
            start = b
            while b < len(problem) and (is_letter(problem[b]) or is_digit(problem[b]) or problem[b] == "_"):
                b += 1
            name = problem[start:b].lower()
            if name == "e":
                tokens.append(Number(repr(ScientificEngine.isE("e"))))
            else:
                tokens.append(Identifier(name))
            continue

        # --- Operators, parentheses and argument separator ---
        if current_char in SYMBOLS:
            tokens.append(Symbol(current_char))
            b += 1
            continue

        raise E.LexError(b, current_char)

    logger.debug("Tokenized %r into %d tokens", problem, len(tokens))
    return tokens
