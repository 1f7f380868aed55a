# EquationSolver.py
"""""
Closed-form solvers for one-variable linear equations and quadratics.

Both solvers compute the numbers first and then render the derivation steps
from exactly those values, so the steps can never disagree with the answer.

Linear grammar (whitespace is ignored):

    <term> {(+|-)+ <term>} = <number>
    <term> := <number> | [<number>][*]x

Variables on the right side are not supported.
"""""

import logging
import math
import re

from . import MathEngine
from . import ScientificEngine
from . import error as E

logger = logging.getLogger(__name__)

_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_TERM = re.compile(r"([+-]+)(" + _NUMBER + r")?(\*?x)?")
_LEFT_SIDE = re.compile(r"(?:[+-]+(?:" + _NUMBER + r"\*?x|x|" + _NUMBER + r"))+")
_PLAIN_NUMBER = re.compile(r"[+-]?" + _NUMBER)


class LinearSolution:
    """Result of solve_linear(): value is inf for identities and nan for contradictions."""
    def __init__(self, value, steps):
        self.value = value
        self.steps = steps

    def __repr__(self):
        return f"LinearSolution(value={self.value!r}, steps={self.steps!r})"


class QuadraticSolution:
    """Result of solve_quadratic(): 0, 1 or 2 real roots plus steps and factored form."""
    def __init__(self, roots, steps, factored_form, discriminant):
        self.roots = roots
        self.steps = steps
        self.factored_form = factored_form
        self.discriminant = discriminant

    def __repr__(self):
        return (f"QuadraticSolution(roots={self.roots!r}, factored_form={self.factored_form!r}, "
                f"discriminant={self.discriminant!r})")


def _signed(value):
    """'+ 3' or '- 3' for writing a term after another one."""
    if value < 0:
        return f"- {MathEngine.format_number(-value)}"
    return f"+ {MathEngine.format_number(value)}"


def _root_factor(root, spaced):
    """'x-3' / 'x+3' (or 'x - 3' / 'x + 3' when spaced)."""
    sign = "+" if root < 0 else "-"
    gap = " " if spaced else ""
    return f"x{gap}{sign}{gap}{MathEngine.format_number(abs(root))}"


# -----------------------------
# Linear solver
# -----------------------------

def _finite_number(text):
    zahl = float(text)
    if not math.isfinite(zahl):
        raise E.SolverError(f"Number too big: {text[:20]}...", code="3026")
    return zahl


def parse_linear_expression(expression):
    """Collect a left side like '2x + 3' or 'x - 5' into (coefficient, constant)."""
    s = re.sub(r"\s+", "", expression)
    if s and s[0] not in "+-":
        s = "+" + s
    if not _LEFT_SIDE.fullmatch(s):
        raise E.SolverError(f"Invalid term in '{expression}'", code="3021")

    coefficient = 0.0
    constant = 0.0
    for sign, number, variable in _TERM.findall(s):
        # Sign runs multiply out: "+-3" is -3, "--3" is 3
        vorzeichen = -1.0 if sign.count("-") % 2 else 1.0
        if variable:
            # Bare 'x' / '-x' means a coefficient of 1 / -1
            coefficient += vorzeichen * (_finite_number(number) if number else 1.0)
        else:
            constant += vorzeichen * _finite_number(number)

    if not (math.isfinite(coefficient) and math.isfinite(constant)):
        raise E.SolverError(f"Number too big in '{expression}'", code="3026")

    logger.debug("parse_linear_expression(%r) -> (%r, %r)", expression, coefficient, constant)
    return coefficient, constant


def solve_linear(equation):
    """Solve 'ax + b = c' for x and return the value with four derivation steps."""
    if equation.count("=") != 1:
        raise E.SolverError(f"Invalid equation format: {equation}. Use format: ax + b = c", code="3012",
                            equation=equation)

    left, right = (side.strip() for side in equation.split("="))
    if not left or not right:
        raise E.SolverError("One of the sides is empty: " + str(equation), code="3022", equation=equation)

    rechte_seite = re.sub(r"\s+", "", right)
    if not _PLAIN_NUMBER.fullmatch(rechte_seite):
        raise E.SolverError(f"Right side must be a number: {right}", code="3020", equation=equation)

    try:
        a, b = parse_linear_expression(left)
        rhs = _finite_number(rechte_seite)
        difference = MathEngine.apply_operator("-", rhs, b)
    except E.MathError as e:
        e.equation = equation
        raise

    steps = [
        f"Original equation: {equation}",
        f"Simplified form: {MathEngine.format_number(a)}x {_signed(b)} = {MathEngine.format_number(rhs)}",
    ]
    if b < 0:
        steps.append(f"Add {MathEngine.format_number(-b)} to both sides: "
                     f"{MathEngine.format_number(a)}x = {MathEngine.format_number(difference)}")
    else:
        steps.append(f"Subtract {MathEngine.format_number(b)} from both sides: "
                     f"{MathEngine.format_number(a)}x = {MathEngine.format_number(difference)}")

    if a == 0:
        if b == rhs:
            steps.append("Infinite solutions (identity)")
            return LinearSolution(math.inf, steps)
        steps.append("No solution (contradiction)")
        return LinearSolution(math.nan, steps)

    value = MathEngine.apply_operator("/", difference, a)
    steps.append(f"Divide both sides by {MathEngine.format_number(a)}: x = {MathEngine.format_number(value)}")
    return LinearSolution(value, steps)


# -----------------------------
# Quadratic solver
# -----------------------------

def parse_coefficient(text):
    """Parse one coefficient typed by the user; it must be a finite number."""
    try:
        value = float(str(text).strip())
    except ValueError:
        raise E.SolverError(f"Please enter a valid number, got: '{text}'", code="3021")
    if not math.isfinite(value):
        raise E.SolverError(f"Please enter a finite number, got: '{text}'", code="3021")
    return value


def _check_coefficients(a, b, c):
    for value in (a, b, c):
        if not math.isfinite(value):
            raise E.SolverError(f"Coefficients must be finite numbers: {a}, {b}, {c}", code="3021")
    if a == 0:
        raise E.SolverError("Coefficient 'a' cannot be zero for a quadratic equation", code="3023")


def _quadratic_roots(a, b, c):
    """Return (discriminant, roots) with roots ordered (+root, -root)."""
    discriminant = b * b - 4 * a * c
    if not math.isfinite(discriminant):
        raise E.SolverError(f"Discriminant is not a finite number for a={a}, b={b}, c={c}", code="3025")
    if discriminant < 0:
        return discriminant, []
    if discriminant == 0:
        return discriminant, [-b / (2 * a)]
    wurzel = ScientificEngine.apply_function("sqrt", discriminant)
    return discriminant, [(-b + wurzel) / (2 * a), (-b - wurzel) / (2 * a)]


def factor_quadratic(a, b, c):
    """Factored form of ax² + bx + c; the roots are recomputed on every call."""
    _check_coefficients(a, b, c)
    _, roots = _quadratic_roots(a, b, c)

    if not roots:
        return "Cannot factor (no real solutions)"
    if len(roots) == 1:
        return f"{MathEngine.format_number(a)}({_root_factor(roots[0], spaced=True)})²"
    r1, r2 = roots
    factors = f"({_root_factor(r1, spaced=False)})({_root_factor(r2, spaced=False)})"
    if a == 1:
        return factors
    return f"{MathEngine.format_number(a)}{factors}"


def solve_quadratic(a, b, c):
    """Solve ax² + bx + c = 0 over the reals."""
    _check_coefficients(a, b, c)
    discriminant, roots = _quadratic_roots(a, b, c)
    logger.debug("solve_quadratic(%r, %r, %r): discriminant=%r roots=%r", a, b, c, discriminant, roots)

    fa, fb, fc = (MathEngine.format_number(value) for value in (a, b, c))
    fd = MathEngine.format_number(discriminant)
    minus_b = MathEngine.format_number(-b)

    steps = [
        f"Quadratic equation: {fa}x² {_signed(b)}x {_signed(c)} = 0",
        f"Discriminant: Δ = b² - 4ac = ({fb})² - 4({fa})({fc}) = {fd}",
    ]

    if discriminant < 0:
        steps.append("Discriminant < 0: No real solutions")
    elif discriminant == 0:
        steps.append("Discriminant = 0: One solution")
        steps.append(f"x = -b/(2a) = {minus_b}/(2×{fa}) = {MathEngine.format_number(roots[0])}")
    else:
        steps.append("Discriminant > 0: Two solutions")
        steps.append(f"x₁ = (-b + √Δ)/(2a) = ({minus_b} + √{fd})/(2×{fa}) = {MathEngine.format_number(roots[0])}")
        steps.append(f"x₂ = (-b - √Δ)/(2a) = ({minus_b} - √{fd})/(2×{fa}) = {MathEngine.format_number(roots[1])}")

    return QuadraticSolution(roots, steps, factor_quadratic(a, b, c), discriminant)
