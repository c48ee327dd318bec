import pytest
from symmetric.variables import HalfIdempotentVariables, StandardVariables

def test_standard_arithmetic():
    a = StandardVariables([1, 2, 0])
    b = StandardVariables([0, 1, 3])
    assert a + b == (1, 3, 3)
    assert (a + b) - b == a
    assert a.degree() == 3
    assert b.divides(a + b)
    assert not b.divides(a)
    assert StandardVariables.name(0, 3) == "x_1"

def test_half_idempotent_clamps_on_construction():
    e = HalfIdempotentVariables([3, 1, 2, 5])
    assert e == (3, 1, 1, 1)
    assert HalfIdempotentVariables(e) == e
    assert e.degree() == 4

def test_half_idempotent_addition():
    a = HalfIdempotentVariables([1, 0, 1, 0])
    b = HalfIdempotentVariables([1, 1, 1, 1])
    assert a + b == (2, 1, 1, 1)
    assert (a + b).degree() == 3

@pytest.mark.parametrize("i, name", [(0, "x_1"), (1, "x_2"), (2, "y_1"), (3, "y_2")])
def test_half_idempotent_names(i, name):
    assert HalfIdempotentVariables.name(i, 4) == name

def test_permute_acts_on_both_halves():
    e = HalfIdempotentVariables([1, 2, 0, 1])
    assert e.permute((1, 0)) == (2, 1, 1, 0)
    assert StandardVariables([1, 2, 3]).permute((2, 0, 1)) == (2, 3, 1)

def test_limits():
    assert HalfIdempotentVariables.max_exponent(4, 3) == [3, 3, 1, 1]
    assert HalfIdempotentVariables.true_variables(6) == 3
    assert StandardVariables.zero(2) == (0, 0)
