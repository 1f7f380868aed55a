# error.py
"""""
Error types and the numbered error catalog shared by the engine and the solvers.

Every error carries a 4 digit code so callers can show a short catalog text
(ERROR_MESSAGES) next to the detailed message.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class LexError(MathError):
    pass

class ParseError(MathError):
    pass

class CalculationError(MathError):
    pass

class SolverError(MathError):
    pass



Error_Dictionary = {

    "2" : "Scientific Calculation Error",
    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "2000" : "Unknown function: ", # + name
    "2001" : "Function result is not a finite number: ", # + function

    "3000" : "Invalid character: ", # + character
    "3002" : "Unbalanced parentheses.",
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3005" : "Invalid operator sequence.",
    "3006" : "Insufficient operands for: ", # + operator
    "3007" : "Result is not a finite number: ", # + operator
    "3008" : "More than one '.' in one number.",
    "3010" : "Missing '(' after function: ", # + function
    "3011" : "Malformed expression.",
    "3012" : "Invalid equation: ", # + equation
    "3020" : "Right side must be a number.",
    "3021" : "Invalid term or coefficient: ", # + term
    "3022" : "One of the equation sides is empty.",
    "3023" : "Coefficient 'a' cannot be zero for a quadratic equation.",
    "3024" : "Empty expression.",
    "3025" : "Discriminant is not a finite number.",
    "3026" : "Number too big.",

    "5000" : "Settings could not be saved: ", # + path

    "9999" : "Unexpected Error: " #+error
}


def describe(error):
    """Render 'Error <code>: <catalog text>' for display."""
    code = getattr(error, "code", "9999")
    return f"Error {code}: {ERROR_MESSAGES.get(code, 'Unknown error')}"
