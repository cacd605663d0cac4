"""Error types raised by the calculator engine and its callers.

Every error carries a four digit code (see ERROR_MESSAGES) so the UI can
show a short title next to the detailed reason.
"""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class LexError(MathError):
    """Invalid character (or malformed literal) found while tokenizing."""

    def __init__(self, position, char, message=None, code="1000", equation=None):
        if message is None:
            message = f"Unexpected character: {char}"
        super().__init__(message, code=code, equation=equation)
        self.position = position
        self.char = char


class ParseError(MathError):
    def __init__(self, reason, code="2000", equation=None):
        super().__init__(reason, code=code, equation=equation)
        self.reason = reason


class EvalError(MathError):
    def __init__(self, reason, code="3000", equation=None):
        super().__init__(reason, code=code, equation=equation)
        self.reason = reason


class InputError(MathError):
    pass


Error_Dictionary = {

    "1": "Lexer Error",
    "2": "Parser Error",
    "3": "Evaluation Error",
    "4": "Input Error",
    "5": "Configuration Error",
    "9": "Runtime Error"

}

# Error codes are structured in:
# 1. Digit: Main Error (see Error_Dictionary)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "1000": "Unexpected character.",
    "1001": "More than one '.' in one number.",

    "2000": "Unknown function.",
    "2001": "Unknown operator.",
    "2002": "Misplaced comma.",
    "2003": "Mismatched parentheses.",

    "3000": "Not enough operands.",
    "3001": "Division by zero.",
    "3002": "Square root of a negative number.",
    "3003": "Logarithm of a non-positive number.",
    "3004": "Invalid expression.",
    "3005": "Invalid token in postfix.",
    "3006": "Invalid number.",

    "4000": "Empty expression.",
    "4001": "Expression too long.",
    "4002": "Calculation already running!",
    "4003": "No result to reuse.",

    "5000": "Settings could not be saved.",

    "9999": "Unexpected Error: "
}
