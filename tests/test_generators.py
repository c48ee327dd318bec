import pytest
from symmetric.common import PreconditionError, binomial, boost_hash, crc_hash, weighted_degree
from symmetric.generators import (Combinations, DegreePolicy, Permutations, RelationsDegreePolicy,
                                  all_monomial_orbits, interpolate_size, max_in_orbit,
                                  monomial_basis, orbit, vector_interpolate)
from symmetric.relations import NoRelations
from symmetric.variables import HalfIdempotentVariables, StandardVariables

def test_combinations():
    c = Combinations(4, 2)
    assert len(c) == c.size() == 6
    assert list(c) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert list(c) == list(c)
    assert list(Combinations(3, 0)) == [()]
    with pytest.raises(PreconditionError):
        Combinations(2, 3)

def test_permutations():
    p = Permutations(3)
    assert len(p) == 6
    assert list(p)[0] == (0, 1, 2)
    assert list(p)[-1] == (2, 1, 0)

def test_binomial():
    assert binomial(5, 2) == 10
    assert binomial(5, 6) == 0
    assert binomial(0, 0) == 1

def test_vector_interpolate_first_entry_fastest():
    assert list(vector_interpolate([0, 0], [1, 1])) == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert interpolate_size([0, 0], [1, 2]) == 6
    assert list(vector_interpolate([], [])) == []

def test_degree_policy():
    policy = DegreePolicy(NoRelations, 2)
    assert policy([1, 0]) == 0
    assert policy([1, 1]) == 1
    assert policy([2, 1]) == -1
    found = list(vector_interpolate([0, 0, 0], [2, 2, 2], policy))
    assert sorted(found) == sorted([(2, 0, 0), (0, 2, 0), (0, 0, 2), (1, 1, 0), (1, 0, 1), (0, 1, 1)])

def test_relations_degree_policy():
    policy = RelationsDegreePolicy(2, [[2, 0], [1, 1]], [1, 1])
    assert policy.has_relation([3, 0])
    assert not policy.has_relation([0, 2])
    assert list(vector_interpolate([0, 0], [2, 2], policy)) == [(0, 2)]

def test_monomial_basis():
    assert set(monomial_basis(StandardVariables, 2, 2)) == {(2, 0), (1, 1), (0, 2)}
    # x-degree 0 leaves only the y's, each at most once.
    assert len(monomial_basis(HalfIdempotentVariables, 4, 0)) == 4
    assert all(type(e) is HalfIdempotentVariables for e in monomial_basis(HalfIdempotentVariables, 4, 1))

def test_orbits():
    assert set(orbit(HalfIdempotentVariables([1, 0, 0, 1]))) == {(1, 0, 0, 1), (0, 1, 1, 0)}
    assert max_in_orbit(StandardVariables([0, 1, 2])) == (2, 1, 0)
    assert set(all_monomial_orbits(StandardVariables, 3, 3)) == {(3, 0, 0), (2, 1, 0), (1, 1, 1)}
    assert set(all_monomial_orbits(HalfIdempotentVariables, 2, 1)) == {(1, 0), (1, 1)}

def test_weighted_degree():
    assert weighted_degree([1, 2, 3], [0, 1, 2]) == 8
    with pytest.raises(PreconditionError):
        weighted_degree([1, 2], [1])

def test_hashers_are_deterministic():
    assert boost_hash((1, 2, 3)) == boost_hash([1, 2, 3])
    assert boost_hash((1, 2)) != boost_hash((2, 1))
    assert crc_hash((1, 2)) != crc_hash((2, 1))
