from itertools import combinations, permutations
from .common import PreconditionError, binomial, factorial, weighted_degree

class Combinations:
    """Every k-subset of {0,...,n-1} as an ascending tuple, in lexicographic order.

    Restartable: each iteration starts from the first combination.
    """
    def __init__(self, total, choices):
        if choices < 0 or choices > total:
            raise PreconditionError(f"cannot choose {choices} out of {total}")
        self.total = total
        self.choices = choices

    def size(self):
        return binomial(self.total, self.choices)

    def __len__(self):
        return self.size()

    def __iter__(self):
        return combinations(range(self.total), self.choices)

class Permutations:
    """Every permutation of {0,...,n-1}, in lexicographic order."""
    def __init__(self, n):
        if n < 0:
            raise PreconditionError(f"cannot permute {n} letters")
        self.n = n

    def size(self):
        return factorial(self.n)

    def __len__(self):
        return self.size()

    def __iter__(self):
        return permutations(range(self.n))

def all_permutations(n):
    return list(Permutations(n))

def all_combinations(n, m):
    return list(Combinations(n, m))

# Policies return 1 when the vector is acceptable, 0 when it is not and -1
# when neither it nor any vector with a larger first entry is.

def always_true(values):
    return 1

class DegreePolicy:
    def __init__(self, relations, degree):
        self.relations = relations
        self.degree = degree

    def __call__(self, values):
        d = self.relations.compute_degree(values)
        if d > self.degree:
            return -1
        return 1 if d == self.degree else 0

class RelationsDegreePolicy:
    """Exact degree under a dimension table, and not divisible by any relation.

    A relation such as a_1^2*a_2 disqualifies [2,1,0,...] and every
    [v_1,v_2,...] with v_1 >= 2 and v_2 >= 1.
    """
    def __init__(self, degree, relations, dimensions):
        self.degree = degree
        self.relations = [tuple(r) for r in relations]
        self.dimensions = list(dimensions)

    def has_relation(self, values):
        return any(all(r <= v for r, v in zip(rel, values)) for rel in self.relations)

    def __call__(self, values):
        d = weighted_degree(values, self.dimensions)
        if d > self.degree:
            return -1
        if d < self.degree:
            return 0
        return 0 if self.has_relation(values) else 1

def vector_interpolate(minimum, maximum, policy=always_true):
    """Yield every vector between minimum and maximum accepted by policy.

    The first entry runs fastest.
    """
    length = len(minimum)
    if length == 0 or len(maximum) != length:
        return
    current = list(minimum)
    status = policy(current)
    while True:
        if status == 1:
            yield tuple(current)
        i = 0
        overshoot = status == -1
        while i < length and (current[i] >= maximum[i] or overshoot):
            overshoot = False
            current[i] = minimum[i]
            i += 1
        if i == length:
            return
        current[i] += 1
        status = policy(current)

def interpolate_size(minimum, maximum):
    if not minimum:
        return 0
    total = 1
    for lo, hi in zip(minimum, maximum):
        total *= hi - lo + 1
    return total

def monomial_basis(exponent_type, num_vars, degree):
    """All exponents of the given degree, respecting the type's relations."""
    maximum = exponent_type.max_exponent(num_vars, degree)
    policy = DegreePolicy(exponent_type.relations, degree)
    return [exponent_type(v) for v in vector_interpolate([0] * num_vars, maximum, policy)]

def orbit(exponent, perms=None):
    """Distinct images of exponent under perms, in order of first appearance."""
    if perms is None:
        perms = Permutations(type(exponent).true_variables(len(exponent)))
    seen = set()
    out = []
    for perm in perms:
        image = exponent.permute(perm)
        if image not in seen:
            seen.add(image)
            out.append(image)
    return out

def max_in_orbit(exponent):
    return max(orbit(exponent))

def all_monomial_orbits(exponent_type, num_vars, degree):
    """One representative, the largest, of each orbit of the given degree."""
    perms = all_permutations(exponent_type.true_variables(num_vars))
    seen = set()
    out = []
    for exponent in monomial_basis(exponent_type, num_vars, degree):
        if exponent in seen:
            continue
        members = orbit(exponent, perms)
        seen.update(members)
        out.append(max(members))
    return out
