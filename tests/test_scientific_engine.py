import math

import pytest

from CalcCore import ScientificEngine
from CalcCore import error as E


def test_tables_hold_the_supported_names():
    assert set(ScientificEngine.CONSTANTS) == {"pi", "e", "phi"}
    assert set(ScientificEngine.FUNCTIONS) == {
        "sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh",
        "ln", "log", "log2", "sqrt", "cbrt", "abs", "ceil", "floor", "round", "exp",
    }
    # every name has a reference entry
    assert set(ScientificEngine.REFERENCE) == set(ScientificEngine.FUNCTIONS) | set(ScientificEngine.CONSTANTS)


def test_golden_ratio():
    phi = ScientificEngine.CONSTANTS["phi"]
    assert phi * phi == pytest.approx(phi + 1)


@pytest.mark.parametrize("name, value, expected", [
    ("log", 1000.0, 3),
    ("log2", 1024.0, 10),
    ("ln", math.e, 1),
    ("cbrt", 27.0, 3),
    ("cbrt", -64.0, -4),
    ("cbrt", 2.0, 2 ** (1 / 3)),
    ("round", 0.5, 1),
    ("round", -0.5, 0),
    ("round", 3.4, 3),
    ("ceil", -1.5, -1),
    ("floor", -1.5, -2),
    ("abs", -2.5, 2.5),
    ("tanh", 0.0, 0),
])
def test_apply_function(name, value, expected):
    ergebnis = ScientificEngine.apply_function(name, value)
    assert isinstance(ergebnis, float)
    assert ergebnis == pytest.approx(expected)


def test_cbrt_of_exact_cube_is_exact():
    assert ScientificEngine.apply_function("cbrt", 27.0) == 3.0


@pytest.mark.parametrize("name, value", [
    ("sqrt", -4.0),
    ("log", 0.0),
    ("acos", 1.5),
    ("cosh", 1000.0),
])
def test_apply_function_non_finite(name, value):
    with pytest.raises(E.CalculationError) as excinfo:
        ScientificEngine.apply_function(name, value)
    assert excinfo.value.code == "2001"


def test_apply_function_unknown_name():
    with pytest.raises(E.LexError) as excinfo:
        ScientificEngine.apply_function("sec", 1.0)
    assert excinfo.value.code == "2000"


def test_lookup_helpers():
    assert ScientificEngine.isFunction("sin")
    assert not ScientificEngine.isFunction("pi")
    assert ScientificEngine.isConstant("pi")
    assert not ScientificEngine.isConstant("sin")


def test_describe_symbol():
    assert ScientificEngine.describe_symbol("log2") == "log2: Logarithm base 2 (log2(8) = 3)"
    with pytest.raises(E.LexError):
        ScientificEngine.describe_symbol("nope")
