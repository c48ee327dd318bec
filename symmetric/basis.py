from fractions import Fraction
import logging
from .common import DecompositionError, PreconditionError
from .polynomials import Polynomial

_logger = logging.getLogger(__name__)

class PolynomialBasis:
    """Rewrites polynomials in terms of a family of generators and back.

    `find_exponent` maps a leading exponent of the original variables to the
    exponent over the generators whose product has exactly that leading
    exponent (with some nonzero coefficient). Decomposition repeatedly strips
    the highest term, so every leading term it visits is strictly smaller in
    (degree, exponent) than the previous one.
    """
    def __init__(self, generators, find_exponent, exponent_type, names=None, dimensions=None, ordered=True, hasher=None):
        if not generators:
            raise PreconditionError("a basis needs at least one generator")
        self._generators = list(generators)
        self.find_exponent = find_exponent
        self.exponent_type = exponent_type
        self.source_type = self._generators[0].exponent_type
        self.source_vars = self._generators[0].num_vars
        self._names = names
        self._dimensions = dimensions
        self.ordered = ordered
        self.hasher = hasher
        self._powers = [[self._source() + g] for g in self._generators]

    @property
    def generators(self):
        return self._generators

    @property
    def names(self):
        return self._names

    @property
    def dimensions(self):
        return self._dimensions

    def __len__(self):
        return len(self._generators)

    def _source(self):
        return Polynomial(self.source_type, self.source_vars, self.ordered, hasher=self.hasher)

    def zero(self):
        return Polynomial(self.exponent_type, len(self._generators), self.ordered,
                          self._dimensions, self._names, self.hasher)

    def monomial(self, exponent, coeff=1):
        poly = self.zero()
        poly.insert(exponent, coeff)
        return poly

    def power(self, i, e):
        """generators[i] ** e, as a fresh polynomial."""
        return self._power(i, e).copy()

    def _power(self, i, e):
        # Cached; callers must not modify the result.
        powers = self._powers[i]
        if e == 0:
            return self._source() + 1
        while len(powers) < e:
            powers.append(powers[-1] * powers[0])
        return powers[e - 1]

    def compute_product(self, exponent):
        res = self._source() + 1
        for i, e in enumerate(exponent):
            if e:
                res = res * self._power(i, e)
        return res

    def steps(self, a):
        """Yield (leading monomial, generator exponent, coefficient) per iteration.

        The remainder is updated after each yield, so consume the generator
        completely to finish the decomposition.
        """
        if a.exponent_type is not self.source_type:
            raise PreconditionError(
                f"cannot decompose a {a.exponent_type.__name__} polynomial "
                f"with generators over {self.source_type.__name__}")
        rem = a.convert(self.ordered)
        while rem:
            lead = rem.highest_term()
            exponent = self.exponent_type(self.find_exponent(lead.exponent))
            product = self.compute_product(exponent)
            term = product.highest_term()
            if term is None or term.exponent != lead.exponent:
                _logger.debug("leading term %r, generators %r give %r", lead, exponent, term)
                raise DecompositionError(
                    f"generator product {list(exponent)} does not lead with {list(lead.exponent)}")
            coeff = Fraction(lead.coeff) / term.coeff
            _logger.debug("%r -> %s * %r", lead, coeff, exponent)
            yield lead, exponent, coeff
            rem -= product * coeff

    def decompose(self, a):
        res = self.zero()
        for _, exponent, coeff in self.steps(a):
            res.insert(exponent, coeff)
        return res

    def expand(self, a):
        if a.exponent_type is not self.exponent_type:
            raise PreconditionError(
                f"cannot expand a {a.exponent_type.__name__} polynomial over these generators")
        res = self._source()
        for term in a:
            res += self.compute_product(term.exponent) * term.coeff
        return res

    def __call__(self, a):
        if a.exponent_type is self.exponent_type:
            return self.expand(a)
        return self.decompose(a)

    def verify(self, a):
        """True when decomposing and expanding again gives back a."""
        return self.expand(self.decompose(a)) == a.convert(self.ordered)
