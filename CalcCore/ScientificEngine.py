# ScientificEngine.py
"""""
Constants and unary functions known to the calculator.

Both tables are built once at import and only read afterwards, so any number
of evaluations can use them at the same time.
"""""
import math

from . import error as E


def _round_half_up(value):
    # Matches the keypad's round(): 2.5 -> 3, -2.5 -> -2
    return float(math.floor(value + 0.5))


def _cbrt(value):
    wurzel = abs(value) ** (1.0 / 3.0)
    # Snap exact cubes: 27 ** (1/3) is 3.0000000000000004
    if math.isfinite(wurzel) and float(round(wurzel)) ** 3 == abs(value):
        wurzel = float(round(wurzel))
    return math.copysign(wurzel, value)


CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
    "phi": (1 + math.sqrt(5)) / 2,  # Golden ratio
}

FUNCTIONS = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "ln": math.log,
    "log": math.log10,
    "log2": math.log2,
    "sqrt": math.sqrt,
    "cbrt": _cbrt,
    "abs": math.fabs,
    "ceil": lambda value: float(math.ceil(value)),
    "floor": lambda value: float(math.floor(value)),
    "round": _round_half_up,
    "exp": math.exp,
}

# (description, example) pairs for the reference page
REFERENCE = {
    "sin": ("Sine of angle x (in radians)", "sin(pi/2) = 1"),
    "cos": ("Cosine of angle x (in radians)", "cos(0) = 1"),
    "tan": ("Tangent of angle x (in radians)", "tan(pi/4) = 1"),
    "asin": ("Inverse sine function", "asin(1) = pi/2"),
    "acos": ("Inverse cosine function", "acos(1) = 0"),
    "atan": ("Inverse tangent function", "atan(1) = pi/4"),
    "sinh": ("Hyperbolic sine", "sinh(0) = 0"),
    "cosh": ("Hyperbolic cosine", "cosh(0) = 1"),
    "tanh": ("Hyperbolic tangent", "tanh(0) = 0"),
    "ln": ("Logarithm base e", "ln(e) = 1"),
    "log": ("Logarithm base 10", "log(100) = 2"),
    "log2": ("Logarithm base 2", "log2(8) = 3"),
    "sqrt": ("Square root of x", "sqrt(16) = 4"),
    "cbrt": ("Cube root of x", "cbrt(27) = 3"),
    "abs": ("Absolute value of x", "abs(-5) = 5"),
    "ceil": ("Smallest integer >= x", "ceil(3.2) = 4"),
    "floor": ("Largest integer <= x", "floor(3.8) = 3"),
    "round": ("Round to nearest integer", "round(3.6) = 4"),
    "exp": ("e raised to the power x", "exp(1) = e"),
    "pi": ("Ratio of circumference to diameter", "~ 3.14159"),
    "e": ("Base of natural logarithm", "~ 2.71828"),
    "phi": ("Golden ratio (1 + sqrt(5)) / 2", "~ 1.61803"),
}


def isConstant(name):
    return name in CONSTANTS


def isFunction(name):
    return name in FUNCTIONS


def apply_function(name, value):
    """Apply the named function and insist on a finite float result.

    Host domain and overflow errors (sqrt(-1), exp(1000)) count as non-finite.
    """
    try:
        ergebnis = FUNCTIONS[name](value)
    except KeyError:
        raise E.LexError(f"Unknown function: {name}", code="2000")
    except (ValueError, OverflowError) as e:
        raise E.CalculationError(f"Mathematical error in function {name}: {e}", code="2001")

    if not math.isfinite(ergebnis):
        raise E.CalculationError(f"Mathematical error in function {name}", code="2001")
    return float(ergebnis)


def describe_symbol(name):
    """Return a 'name: description (example)' line for the reference page."""
    if name not in REFERENCE:
        raise E.LexError(f"Unknown function: {name}", code="2000")
    description, example = REFERENCE[name]
    return f"{name}: {description} ({example})"
