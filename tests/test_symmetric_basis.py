from fractions import Fraction
import pytest
from symmetric.basis import PolynomialBasis
from symmetric.common import DecompositionError, PreconditionError, crc_hash
from symmetric.polynomials import Polynomial, symmetrize
from symmetric.symmetric_basis import ElementarySymmetricVariables, SymmetricBasis, staircase
from symmetric.variables import StandardVariables

def test_staircase():
    assert staircase([2, 1, 0]) == [1, 1, 0]
    assert staircase([3, 3, 1]) == [0, 2, 1]
    assert staircase([4]) == [4]

def test_elementary_symmetric_generators():
    basis = SymmetricBasis(3)
    assert len(basis) == 3
    assert len(basis.generators[0]) == 3
    assert len(basis.generators[1]) == 3
    assert len(basis.generators[2]) == 1
    assert all(g.is_symmetric() for g in basis.generators)
    assert basis.dimensions == [1, 2, 3]

def test_monomial_orbit_21():
    basis = SymmetricBasis(3)
    expected = basis.zero()
    expected.insert([1, 1, 0], 1)
    expected.insert([0, 0, 1], -3)
    decomposed = basis.decompose_monomial_orbit([2, 1, 0])
    assert decomposed == expected
    assert str(decomposed) == "-3*e_3 + e_1*e_2"

def test_power_sum():
    basis = SymmetricBasis(3)
    p = symmetrize(StandardVariables([2, 0, 0]))
    expected = basis.zero()
    expected.insert([2, 0, 0], 1)
    expected.insert([0, 1, 0], -2)
    assert basis(p) == expected
    assert basis(basis(p)) == p

@pytest.mark.parametrize("ordered", [True, False])
def test_round_trip(ordered):
    basis = SymmetricBasis(4, ordered=ordered, hasher=crc_hash)
    p = symmetrize(StandardVariables([3, 1, 1, 0]), ordered=ordered)
    p += symmetrize(StandardVariables([2, 2, 0, 0]), Fraction(-1, 3), ordered=ordered)
    p += symmetrize(StandardVariables([1, 0, 0, 0]), 5, ordered=ordered)
    p += 7
    assert basis.verify(p)
    q = basis.decompose(p)
    assert basis.decompose(basis.expand(q)) == q

def test_steps_strictly_decrease():
    basis = SymmetricBasis(3)
    p = symmetrize(StandardVariables([2, 1, 0])) + symmetrize(StandardVariables([3, 0, 0]))
    keys = [(lead.degree, lead.exponent) for lead, _, _ in basis.steps(p)]
    assert len(keys) > 1
    assert all(a > b for a, b in zip(keys, keys[1:]))
    assert all(a[0] >= b[0] for a, b in zip(keys, keys[1:]))

def test_non_symmetric_input():
    basis = SymmetricBasis(2)
    p = Polynomial.monomial(StandardVariables([1, 0]))
    with pytest.raises(DecompositionError):
        basis.decompose(p)

def test_zero_decomposes_to_zero():
    basis = SymmetricBasis(2)
    assert not basis.decompose(Polynomial(StandardVariables, 2))

def test_wrong_find_exponent_is_reported():
    generators = SymmetricBasis(2).generators
    basis = PolynomialBasis(generators, lambda exponent: [0, 0], ElementarySymmetricVariables)
    with pytest.raises(DecompositionError):
        basis.decompose(generators[0])

def test_power_is_a_copy_of_the_cache():
    basis = SymmetricBasis(2)
    cube = basis.power(0, 3)
    assert cube == basis.generators[0] ** 3
    cube += 1
    assert basis.power(0, 3) == basis.generators[0] ** 3
    assert basis.power(0, 3) is not basis.power(0, 3)
    assert basis.power(1, 0) == 1

def test_mismatched_types():
    basis = SymmetricBasis(2)
    with pytest.raises(PreconditionError):
        basis.expand(Polynomial.monomial(StandardVariables([1, 0])))
    with pytest.raises(PreconditionError):
        SymmetricBasis(0)

def test_hasher_reaches_results():
    basis = SymmetricBasis(3, ordered=False, hasher=crc_hash)
    p = symmetrize(StandardVariables([2, 1, 0]), ordered=False, hasher=crc_hash)
    q = basis.decompose(p)
    assert q.hasher is crc_hash
    assert basis.zero().hasher is crc_hash
    assert basis.power(0, 2).hasher is crc_hash
    assert basis.compute_product([1, 1, 0]).hasher is crc_hash
    expanded = basis.expand(q)
    assert expanded.hasher is crc_hash
    assert expanded == p
