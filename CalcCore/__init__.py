"""Calculator core: expression evaluator plus linear and quadratic solvers."""
from .MathEngine import evaluate
from .Calculator import calculate
from .EquationSolver import solve_linear, solve_quadratic, factor_quadratic
from .error import MathError, LexError, ParseError, CalculationError, SolverError

__all__ = [
    'evaluate', 'calculate',
    'solve_linear', 'solve_quadratic', 'factor_quadratic',
    'MathError', 'LexError', 'ParseError', 'CalculationError', 'SolverError',
]
