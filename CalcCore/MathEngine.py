# MathEngine.py
"""""
Core calculation engine of the calculator.

Pipeline
--------
1) Preprocessor: normalizes the raw text (whitespace, constants, implicit
   multiplication, unary minus).
2) Validation + Tokenizer: checks parentheses / characters / operator runs and
   converts the string into a flat list of tokens.
3) Parser (shunting-yard): reorders the tokens into postfix (reverse-Polish) order.
4) Evaluator: runs the postfix list on a single numeric stack.
5) Formatter: renders numbers for derivation steps (display rendering lives
   in Calculator.py).

Tokens are plain values: a float for a number, otherwise a string holding an
operator, a parenthesis or a function name.
"""""

import logging
import math
import re

from . import ScientificEngine
from . import error as E

logger = logging.getLogger(__name__)

# Supported operators (kept as simple lists/dicts for quick membership checks)
Operations = ["+", "-", "*", "/", "^"]
PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
RIGHT_ASSOCIATIVE = ["^"]
DIGITS = "0123456789"

# Display symbols translated before anything else; '**' must come first
ALIASES = [("**", "^"), ("π", "pi"), ("φ", "phi"), ("√", "sqrt"), ("×", "*"), ("÷", "/")]

_CHUNK = re.compile(r"[A-Za-z][A-Za-z0-9]*|[0-9]+\.?[0-9]*|\.[0-9]*|.", re.DOTALL)
_NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_NUMBER = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]*")
_INVALID_CHARACTER = re.compile(r"[^0-9a-zA-Z+\-*/^().]")
_OPERATOR_RUN = re.compile(r"[+\-*/^]{2,}")


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isOp(token):
    """Return True for one of the binary operator strings."""
    return isinstance(token, str) and token in Operations


def isNumber(token):
    return isinstance(token, float)


def _is_name(chunk):
    return _NAME.fullmatch(chunk) is not None


def _is_number(chunk):
    return _NUMBER.fullmatch(chunk) is not None


def format_number(value):
    """Render a float the way the calculator shows it: 3 instead of 3.0, shortest repr otherwise."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def apply_operator(operator, left_value, right_value):
    """Apply one binary operator; the result must be a finite float."""
    if operator == '+':
        ergebnis = left_value + right_value
    elif operator == '-':
        ergebnis = left_value - right_value
    elif operator == '*':
        ergebnis = left_value * right_value
    elif operator == '/':
        if right_value == 0:
            raise E.CalculationError("Division by zero", code="3003")
        ergebnis = left_value / right_value
    elif operator == '^':
        try:
            ergebnis = math.pow(left_value, right_value)
        except (ValueError, OverflowError) as e:
            raise E.CalculationError(f"Mathematical error: {left_value} ^ {right_value} ({e})", code="3007")
    else:
        raise E.CalculationError(f"Unknown operator: {operator}", code="3004")

    if not math.isfinite(ergebnis):
        raise E.CalculationError(f"Mathematical error: result of '{operator}' is not finite", code="3007")
    return ergebnis


# -----------------------------
# Preprocessor
# -----------------------------

def _substitute_constants(expression):
    for name in sorted(ScientificEngine.CONSTANTS, key=len, reverse=True):
        pattern = r"(?<![A-Za-z])" + name + r"(?![A-Za-z0-9])"
        value = "(" + repr(ScientificEngine.CONSTANTS[name]) + ")"
        expression = re.sub(pattern, value, expression)
    return expression


def _insert_implicit_multiplication(chunks):
    """Insert '*' for 2(…), (…)2, (…)(…), 2sin(…) and (…)sin(…)."""
    result = []
    for index, chunk in enumerate(chunks):
        if index > 0:
            vorgaenger = chunks[index - 1]
            links = _is_number(vorgaenger) or vorgaenger == ")"
            rechts = chunk == "(" or _is_name(chunk) or (_is_number(chunk) and vorgaenger == ")")
            if links and rechts:
                result.append("*")
        result.append(chunk)
    return result


def _group_end(chunks, start):
    """Index after the ')' matching the '(' at chunks[start] (end of input if unmatched)."""
    depth = 0
    for index in range(start, len(chunks)):
        if chunks[index] == "(":
            depth += 1
        elif chunks[index] == ")":
            depth -= 1
            if depth == 0:
                return index + 1
    return len(chunks)


def _atom_end(chunks, start):
    if start >= len(chunks):
        return None
    chunk = chunks[start]
    if _is_number(chunk):
        return start + 1
    if _is_name(chunk):
        if start + 1 < len(chunks) and chunks[start + 1] == "(":
            return _group_end(chunks, start + 1)
        return start + 1
    if chunk == "(":
        return _group_end(chunks, start)
    return None


def _operand_end(chunks, start):
    """Index after the operand of a unary minus: an atom plus any '^' chain."""
    end = _atom_end(chunks, start)
    if end is None:
        return None
    while end < len(chunks) and chunks[end] == "^":
        exponent = end + 1
        if exponent < len(chunks) and chunks[exponent] == "-":
            exponent += 1
        next_end = _atom_end(chunks, exponent)
        if next_end is None:
            break
        end = next_end
    return end


def _rewrite_unary_minus(chunks):
    """'-5' -> '0-5', '(-5)' -> '(0-5)', '2*-5' -> '2*(0-5)'."""
    closing = [0] * len(chunks)
    result = []
    previous = None
    for index, chunk in enumerate(chunks):
        if chunk == "-" and (previous is None or previous == "("):
            result.append("0")
        elif chunk == "-" and previous in Operations:
            end = _operand_end(chunks, index + 1)
            # Without an operand the '-' stays and validation rejects the run
            if end is not None:
                result.append("(0")
                closing[end - 1] += 1
        result.append(chunk)
        result.append(")" * closing[index])
        previous = chunk
    return result


def normalize(raw):
    """Textual normalization before lexing. Never raises; bad input fails later."""
    expression = re.sub(r"\s+", "", raw)
    for symbol, replacement in ALIASES:
        expression = expression.replace(symbol, replacement)

    expression = _substitute_constants(expression)

    chunks = _CHUNK.findall(expression)
    chunks = _insert_implicit_multiplication(chunks)
    normalized = "".join(_rewrite_unary_minus(chunks))
    logger.debug("normalize(%r) -> %r", raw, normalized)
    return normalized


# -----------------------------
# Validation / Tokenizer
# -----------------------------

def validate(expression):
    """Reject empty input, unbalanced parentheses, foreign characters and operator runs."""
    if not expression:
        raise E.ParseError("Empty expression.", code="3024")

    parenthesis_count = 0
    for char in expression:
        if char == "(":
            parenthesis_count += 1
        elif char == ")":
            parenthesis_count -= 1
        if parenthesis_count < 0:
            raise E.ParseError("Mismatched parentheses: missing '('", code="3002")
    if parenthesis_count != 0:
        raise E.ParseError("Mismatched parentheses: missing ')'", code="3002")

    invalid = _INVALID_CHARACTER.search(expression)
    if invalid:
        raise E.LexError(f"Invalid character: {invalid.group(0)}", code="3000")

    if _OPERATOR_RUN.search(expression):
        raise E.ParseError("Invalid operator sequence", code="3005")


def tokenize(expression):
    """Convert a normalized string into a flat token list (floats and strings)."""
    tokens = []
    b = 0

    while b < len(expression):
        current_char = expression[b]

        # --- Numbers: digits and decimal separator ---
        if current_char in DIGITS or current_char == ".":
            str_number = current_char
            hat_schon_komma = current_char == "."  # Only one dot allowed in a numeric literal

            while b + 1 < len(expression) and (expression[b + 1] in DIGITS or expression[b + 1] == "."):
                if expression[b + 1] == ".":
                    if hat_schon_komma:
                        raise E.LexError("More than one '.' in one number.", code="3008")
                    hat_schon_komma = True
                b += 1
                str_number += expression[b]

            if str_number == ".":
                raise E.LexError("Invalid number: '.'", code="3000")
            zahl = float(str_number)
            if not math.isfinite(zahl):
                raise E.LexError(f"Number too big: {str_number[:20]}...", code="3026")
            tokens.append(zahl)

        # --- Function names: a letter followed by letters/digits ---
        elif current_char.isascii() and current_char.isalpha():
            name = current_char
            while b + 1 < len(expression) and expression[b + 1].isascii() and expression[b + 1].isalnum():
                b += 1
                name += expression[b]

            if not ScientificEngine.isFunction(name):
                raise E.LexError(f"Unknown function: {name}", code="2000")
            tokens.append(name)

        # --- Operators / parentheses ---
        elif current_char in Operations or current_char in "()":
            tokens.append(current_char)

        else:
            raise E.LexError(f"Invalid character: {current_char}", code="3000")

        b += 1

    logger.debug("tokens: %s", tokens)
    return tokens


# -----------------------------
# Parser (shunting-yard)
# -----------------------------

def to_postfix(tokens):
    """Reorder infix tokens into postfix order honoring precedence and associativity."""
    output = []
    operators = []

    for index, token in enumerate(tokens):
        if isNumber(token):
            output.append(token)

        elif ScientificEngine.isFunction(token):
            if index + 1 >= len(tokens) or tokens[index + 1] != "(":
                raise E.ParseError(f"Missing '(' after function: {token}", code="3010")
            operators.append(token)

        elif token == "(":
            operators.append(token)

        elif token == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise E.ParseError("Mismatched parentheses: missing '('", code="3002")
            operators.pop()

            # A function waiting below the '(' owns this group
            if operators and ScientificEngine.isFunction(operators[-1]):
                output.append(operators.pop())

        elif isOp(token):
            while operators and operators[-1] != "(" and (
                    ScientificEngine.isFunction(operators[-1])
                    or PRECEDENCE[operators[-1]] > PRECEDENCE[token]
                    or (PRECEDENCE[operators[-1]] == PRECEDENCE[token] and token not in RIGHT_ASSOCIATIVE)):
                output.append(operators.pop())
            operators.append(token)

        else:
            raise E.ParseError(f"Unexpected token: {token}", code="3004")

    while operators:
        operator = operators.pop()
        if operator in ("(", ")"):
            raise E.ParseError("Mismatched parentheses: missing ')'", code="3002")
        output.append(operator)

    logger.debug("postfix: %s", output)
    return output


# -----------------------------
# Evaluator
# -----------------------------

def evaluate_postfix(tokens):
    """Run a postfix token list on one numeric stack and return the single result."""
    stack = []

    for token in tokens:
        if isNumber(token):
            stack.append(token)

        elif ScientificEngine.isFunction(token):
            if len(stack) < 1:
                raise E.CalculationError(f"Insufficient operands for function {token}", code="3006")
            stack.append(ScientificEngine.apply_function(token, stack.pop()))

        elif isOp(token):
            if len(stack) < 2:
                raise E.CalculationError(f"Insufficient operands for operator {token}", code="3006")
            right_value = stack.pop()
            left_value = stack.pop()
            stack.append(apply_operator(token, left_value, right_value))

        else:
            raise E.CalculationError(f"Unknown operator: {token}", code="3004")

    if len(stack) != 1:
        raise E.CalculationError(f"Invalid expression ({len(stack)} values left)", code="3011")

    return stack[0]


def evaluate(expression):
    """Main API: normalize -> validate -> tokenize -> postfix -> evaluate."""
    try:
        normalized = normalize(expression)
        validate(normalized)
        tokens = tokenize(normalized)
        postfix = to_postfix(tokens)
        return evaluate_postfix(postfix)

    except E.MathError as e:
        e.equation = expression
        raise

