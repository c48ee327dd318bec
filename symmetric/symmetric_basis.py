from .basis import PolynomialBasis
from .common import DecompositionError, PreconditionError
from .generators import Combinations
from .polynomials import Polynomial, symmetrize
from .variables import StandardVariables

class ElementarySymmetricVariables(StandardVariables):
    """Exponent over e_1,...,e_n, where e_i has degree i."""
    __slots__ = ()

    def degree(self):
        return sum((i + 1) * e for i, e in enumerate(self))

    @staticmethod
    def name(i, n):
        return f"e_{i + 1}"

def staircase(exponent):
    """[a_1 - a_2, ..., a_{n-1} - a_n, a_n]

    x_1^a_1 ... x_n^a_n with a_1 >= ... >= a_n is the leading monomial of
    e_1^(a_1-a_2) ... e_n^a_n.
    """
    out = [a - b for a, b in zip(exponent, exponent[1:])]
    out.append(exponent[-1])
    return out

class SymmetricBasis(PolynomialBasis):
    """Symmetric polynomials in x_1,...,x_n over the elementary symmetric ones."""
    def __init__(self, n, ordered=True, hasher=None):
        if n < 1:
            raise PreconditionError(f"need at least one variable, got {n}")
        self.n = n
        self.hasher = hasher
        generators = [self.elementary_symmetric(i) for i in range(1, n + 1)]
        super().__init__(generators, self.find_exponent, ElementarySymmetricVariables,
                         dimensions=list(range(1, n + 1)), ordered=ordered, hasher=hasher)

    @staticmethod
    def find_exponent(exponent):
        out = staircase(exponent)
        if any(e < 0 for e in out):
            raise DecompositionError(f"{list(exponent)} is not the leading term of a symmetric polynomial")
        return out

    def elementary_symmetric(self, k):
        e = Polynomial(StandardVariables, self.n, hasher=self.hasher)
        for subset in Combinations(self.n, k):
            exponent = [0] * self.n
            for i in subset:
                exponent[i] = 1
            e.insert(exponent, 1)
        return e

    def decompose_monomial_orbit(self, exponent):
        """Decompose the sum over the orbit of x^exponent (a monomial symmetric function)."""
        return self.decompose(symmetrize(StandardVariables(exponent), ordered=self.ordered))
