from concurrent.futures import ProcessPoolExecutor
from functools import cache
from itertools import repeat
import logging
import sys
from .basis import PolynomialBasis
from .common import DecompositionError, PreconditionError, VerificationError
from .generators import Combinations, RelationsDegreePolicy, vector_interpolate
from .polynomials import Polynomial
from .symmetric_basis import staircase
from .variables import HalfIdempotentVariables, TwistedChernVariables

_logger = logging.getLogger(__name__)

class HalfIdempotentBasis(PolynomialBasis):
    """Invariants of Q[x_1..x_n, y_1..y_n]/(y_i^2 = y_i) under the diagonal
    action of the symmetric group, over the generators

        gamma_{s,j} = sum of x_X y_Y over disjoint X, Y with |X| = s, |Y| = j

    for 0 <= s <= n, 0 <= j <= n - s and (s, j) != (0, 0). gamma_{0,j} = a_j is
    elementary symmetric in the y's, gamma_{s,0} = c_s is elementary symmetric
    in the x's and the rest are the twisted Chern classes c_{s,j}. Generators
    are ordered lexicographically in (s, j) and gamma_{s,j} has dimension s.

    The leading monomial of gamma_{s,j} is x_1...x_s y_{s+1}...y_{s+j}.
    A leading monomial of an invariant is the largest in its orbit: the
    x-block is non-increasing and, among positions with equal x-exponent, the
    set y's come first. find_exponent peels such a monomial into generators
    whose leading monomials multiply back to it exactly:

    - if y_1 is set, the run y_1...y_r is a_r;
    - otherwise the last run y_{p+1}...y_{p+L} is gamma_{p,L}, which also
      takes one x from each of x_1...x_p;
    - once no y is left, the x-block goes to c_1...c_n by staircase
      differencing.
    """
    def __init__(self, n, ordered=True, hasher=None):
        if n < 1:
            raise PreconditionError(f"need at least one variable, got {n}")
        self.n = n
        self.hasher = hasher
        self.pairs = [(s, j) for s in range(n + 1) for j in range(n - s + 1) if (s, j) != (0, 0)]
        self._index = {pair: i for i, pair in enumerate(self.pairs)}
        generators = [self.create_generator(s, j) for s, j in self.pairs]
        super().__init__(generators, self.find_exponent, TwistedChernVariables,
                         names=[self.generator_name(s, j) for s, j in self.pairs],
                         dimensions=[s for s, _ in self.pairs], ordered=ordered, hasher=hasher)
        self._relations = self._enumerate_relations()
        _logger.debug("n=%d: %d generators, %d relations", n, len(self.pairs), len(self._relations))

    def index(self, s, j):
        try:
            return self._index[s, j]
        except KeyError:
            raise PreconditionError(f"no generator gamma_{{{s},{j}}} for n={self.n}") from None

    def generator(self, s, j):
        return self.generators[self.index(s, j)]

    def create_generator(self, s, j):
        n = self.n
        gen = Polynomial(HalfIdempotentVariables, 2 * n, hasher=self.hasher)
        for xs in Combinations(n, s):
            rest = [i for i in range(n) if i not in xs]
            for ys in Combinations(len(rest), j):
                exponent = [0] * (2 * n)
                for i in xs:
                    exponent[i] = 1
                for k in ys:
                    exponent[n + rest[k]] = 1
                gen.insert(exponent, 1)
        return gen

    @staticmethod
    def generator_name(s, j):
        if s == 0:
            return f"a_{j}"
        if j == 0:
            return f"c_{s}"
        return f"c_{{{s},{j}}}"

    def leading_exponent(self, s, j):
        n = self.n
        exponent = [0] * (2 * n)
        for i in range(s):
            exponent[i] = 1
        for i in range(s, s + j):
            exponent[n + i] = 1
        return HalfIdempotentVariables(exponent)

    def find_exponent(self, exponent):
        n = self.n
        x = list(exponent[:n])
        y = list(exponent[n:])
        out = [0] * len(self.pairs)
        while any(y):
            if y[0]:
                r = 0
                while r < n and y[r]:
                    y[r] = 0
                    r += 1
                out[self.index(0, r)] += 1
                continue
            end = n - 1
            while not y[end]:
                end -= 1
            start = end
            while y[start - 1]:
                start -= 1
            for i in range(start, end + 1):
                y[i] = 0
            for i in range(start):
                if x[i] == 0:
                    raise DecompositionError(f"{list(exponent)} is not the leading term of an invariant")
                x[i] -= 1
            out[self.index(start, end - start + 1)] += 1
        chern = staircase(x)
        if any(e < 0 for e in chern):
            raise DecompositionError(f"{list(exponent)} is not the leading term of an invariant")
        for s, e in enumerate(chern, 1):
            out[self.index(s, 0)] += e
        return out

    def _enumerate_relations(self):
        # gamma_{s,i} gamma_{t,j} with (s,i) <= (t,j), i, j >= 1 and t <= s + i:
        # exactly the pairs whose leading monomials multiply to a monomial
        # find_exponent does not split back into the same pair.
        twisted = [pair for pair in self.pairs if pair[1] >= 1]
        relations = []
        for k, (s, i) in enumerate(twisted):
            for t, j in twisted[k:]:
                if t > s + i:
                    continue
                exponent = [0] * len(self.pairs)
                exponent[self.index(s, i)] += 1
                exponent[self.index(t, j)] += 1
                relations.append(TwistedChernVariables(exponent))
        return relations

    def relations(self):
        return self._relations

    def standard_monomials(self, degree):
        """Generator monomials of the given dimension divisible by no relation.

        These span the invariants of that degree and are as many as the
        monomial orbits of that degree.
        """
        # a_j^2 is a relation, so dimension-0 generators appear at most once.
        maximum = [degree // d if d else 1 for d in self.dimensions]
        policy = RelationsDegreePolicy(degree, self._relations, self.dimensions)
        return [TwistedChernVariables(v)
                for v in vector_interpolate([0] * len(self.pairs), maximum, policy)]

def format_relation(lhs, rhs):
    return f"{lhs} = {rhs}"

def decompose_relation(basis, k):
    lhs = basis.monomial(basis.relations()[k])
    return lhs, basis.decompose(basis.expand(lhs))

@cache
def _cached_basis(n):
    return HalfIdempotentBasis(n)

def _relation_worker(n, k, verify):
    basis = _cached_basis(n)
    lhs, rhs = decompose_relation(basis, k)
    if not verify:
        return format_relation(lhs, rhs), None
    expected = basis.expand(lhs)
    actual = basis.expand(rhs)
    if actual == expected:
        return format_relation(lhs, rhs), None
    return format_relation(lhs, rhs), (str(expected), str(actual))

def print_half_idempotent_relations(n, print_relations=True, verify=False, verify_verbose=False, parallel=False):
    """Print every relation of the generators for n variables as LHS = RHS.

    With verify, each right hand side is expanded back into the x's and y's
    and compared with the left hand side; a mismatch raises VerificationError.
    """
    verify = verify or verify_verbose
    count = len(_cached_basis(n).relations())
    if parallel:
        with ProcessPoolExecutor() as pool:
            results = list(pool.map(_relation_worker, repeat(n), range(count), repeat(verify)))
    else:
        results = map(_relation_worker, repeat(n), range(count), repeat(verify))
    for line, failure in results:
        if print_relations:
            print(line)
        if failure is not None:
            print(f"Verification failed for {line}", file=sys.stderr)
            print(f"  expected: {failure[0]}", file=sys.stderr)
            print(f"  actual:   {failure[1]}", file=sys.stderr)
            raise VerificationError(line)
        if verify_verbose:
            print("Verification: True")
    return count
