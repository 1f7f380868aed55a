# Calculator.py
"""""
Display layer on top of the engines: renders results with the user settings
and routes a typed problem to the evaluator or the linear solver.
"""""

import fractions
import math

from . import config_manager as config_manager
from . import EquationSolver
from . import MathEngine
from . import error as E

# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, settings=None):
    """Format a numeric result as fraction or rounded decimal depending on settings.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag tells whether the shown value differs from the result.
    """
    if settings is None:
        settings = config_manager.load_setting_value("all")
    rounding = False

    target_decimals = max(int(settings.get("decimal_places", 10)), 0)
    target_fractions = settings.get("fractions", False)

    if not math.isfinite(ergebnis) or ergebnis == int(ergebnis):
        # Integer result – return as-is without rounding
        return MathEngine.format_number(ergebnis), rounding

    if target_fractions:
        bruch = fractions.Fraction(ergebnis).limit_denominator(100000)
        rounding = float(bruch) != ergebnis
        vorzeichen = "-" if bruch < 0 else ""
        ganzzahl, rest_zaehler = divmod(abs(bruch.numerator), bruch.denominator)

        if bruch.denominator == 1:
            return f"{vorzeichen}{ganzzahl}", rounding
        if ganzzahl == 0:
            return f"{vorzeichen}{rest_zaehler}/{bruch.denominator}", rounding
        # Mixed fraction form (e.g., 3/2 -> "1 1/2")
        return f"{vorzeichen}{ganzzahl} {rest_zaehler}/{bruch.denominator}", rounding

    gerundetes_ergebnis = round(ergebnis, target_decimals)
    if gerundetes_ergebnis != ergebnis:
        rounding = True
    return MathEngine.format_number(gerundetes_ergebnis), rounding


# -----------------------------
# Public display entry point
# -----------------------------

def calculate(problem):
    """Display API: equations go to the linear solver, everything else to evaluate()."""
    settings = config_manager.load_setting_value("all")
    ungefaehr_zeichen = "\u2248"  # "≈"

    try:
        if "=" in problem:
            loesung = EquationSolver.solve_linear(problem)
            if math.isinf(loesung.value):
                return "Inf. Solutions"
            if math.isnan(loesung.value):
                return "No Solution"
            ausgabe_string, rounding = cleanup(loesung.value, settings)
            return f"x {ungefaehr_zeichen} {ausgabe_string}" if rounding else f"x = {ausgabe_string}"

        ergebnis = MathEngine.evaluate(problem)
        ausgabe_string, rounding = cleanup(ergebnis, settings)
        return f"{ungefaehr_zeichen} {ausgabe_string}" if rounding else f"= {ausgabe_string}"

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=str(e).strip(), code="9999", equation=problem) from e
