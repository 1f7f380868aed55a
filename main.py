# Main.py
""""" Entry point for the calculator core.

   Responsibilities:
   - Verify required files exist
   - Load configuration and set up logging
   - Dispatch one problem from the command line, or run an input loop

   Input forms:
   - "quad a b c"       -> quadratic solver (ax² + bx + c = 0)
   - "ref name"         -> reference entry for a function or constant
   - "... = number"     -> linear solver
   - anything else      -> expression evaluation

"""""
import logging
import sys
from pathlib import Path

from CalcCore import config_manager as config_manager
from CalcCore import Calculator, EquationSolver, MathEngine, ScientificEngine
from CalcCore import error as E

PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if engine files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "CalcCore"

    REQUIRED = [
        modules_dir / "MathEngine.py",
        modules_dir / "Calculator.py",
        modules_dir / "ScientificEngine.py",
        modules_dir / "EquationSolver.py",
        modules_dir / "config_manager.py",
        modules_dir / "error.py",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_problem(problem, settings):
    """Solve/evaluate one input line and return the lines to print."""
    problem = problem.strip()
    parts = problem.split()

    if parts and parts[0].lower() == "quad":
        if len(parts) != 4:
            raise E.SolverError("Usage: quad a b c", code="3012", equation=problem)
        a, b, c = (EquationSolver.parse_coefficient(value) for value in parts[1:])
        loesung = EquationSolver.solve_quadratic(a, b, c)
        lines = list(loesung.steps) if settings.get("show_steps", True) else []
        if loesung.roots:
            lines.append("Roots: " + ", ".join(MathEngine.format_number(r) for r in loesung.roots))
        else:
            lines.append("Roots: none")
        lines.append("Factored form: " + loesung.factored_form)
        return lines

    if parts and parts[0].lower() == "ref":
        names = parts[1:] or sorted(ScientificEngine.REFERENCE)
        return [ScientificEngine.describe_symbol(name) for name in names]

    if "=" in problem and settings.get("show_steps", True):
        return EquationSolver.solve_linear(problem).steps + [Calculator.calculate(problem)]

    return [Calculator.calculate(problem)]


def print_error(error):
    print(E.describe(error))
    print(f"Details: {error.message}")
    if error.equation:
        print(f"Equation: {error.equation}")


def main(argv=None):

    """
    Load configuration, then either answer the command line problem or loop on input().
    """

    argv = sys.argv[1:] if argv is None else argv
    all_settings = config_manager.load_setting_value("all")

    logging.basicConfig(level=logging.DEBUG if all_settings.get("debug") else logging.WARNING,
                        format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger(__name__).debug("Config loaded: %s", all_settings)

    if argv:
        try:
            for line in run_problem(" ".join(argv), all_settings):
                print(line)
        except E.MathError as e:
            print_error(e)
            return 1
        return 0

    while True:
        try:
            problem = input("> ")
        except EOFError:
            return 0
        if problem.strip().lower() in ("exit", "quit"):
            return 0
        if not problem.strip():
            continue
        try:
            for line in run_problem(problem, all_settings):
                print(line)
        except E.MathError as e:
            print_error(e)


if __name__ == "__main__":
    check_files_exist()
    sys.exit(main())
