from fractions import Fraction
from functools import total_ordering
import bisect
import numbers
import numpy as np
from .common import (DEFAULT_HASHER, MissingGradingError, MissingNamesError,
                     PreconditionError, weighted_degree)
from .generators import Permutations, orbit

SCALARS = numbers.Rational

def as_scalar(c):
    if isinstance(c, numbers.Integral):
        return int(c)
    return Fraction(c)

@total_ordering    # degree, then lexicographic on the exponent
class Monomial:
    __slots__ = ("coeff", "exponent", "degree")

    def __init__(self, coeff, exponent, degree):
        self.coeff = coeff
        self.exponent = exponent
        self.degree = degree

    @property
    def key(self):
        return self.degree, self.exponent

    def __eq__(self, other):
        return self.coeff == other.coeff and self.exponent == other.exponent

    def __hash__(self):
        return hash((self.coeff, self.exponent))

    def __lt__(self, other):
        return self.key < other.key

    def __neg__(self):
        return Monomial(-self.coeff, self.exponent, self.degree)

    def __mul__(self, other):
        if isinstance(other, SCALARS):
            return Monomial(self.coeff * as_scalar(other), self.exponent, self.degree)
        return Monomial(self.coeff * other.coeff, self.exponent + other.exponent,
                        self.degree + other.degree)

    __rmul__ = __mul__

    def __truediv__(self, other):
        # No check that other actually divides self outside of asserts.
        return Monomial(Fraction(self.coeff) / other.coeff, self.exponent - other.exponent,
                        self.degree - other.degree)

    def pretty(self, name):
        parts = []
        if self.coeff != 1 or not any(self.exponent):
            parts.append(str(self.coeff))
        for i, e in enumerate(self.exponent):
            if e > 1:
                parts.append(f"{name(i)}^{e}")
            elif e == 1:
                parts.append(name(i))
        return "*".join(parts)

    def __repr__(self):
        return f"Monomial({self.coeff}, {self.exponent!r})"

class OrderedTerms:
    """Coefficients in a dict plus the (degree, exponent) keys in sorted order.

    The highest term is the last key; iteration goes from lowest to highest.
    """
    __slots__ = ("coeffs", "keys")
    ordered = True

    def __init__(self):
        self.coeffs = {}
        self.keys = []

    def add(self, degree, exponent, coeff):
        old = self.coeffs.get(exponent)
        if old is None:
            if coeff != 0:
                self.coeffs[exponent] = coeff
                bisect.insort(self.keys, (degree, exponent))
            return
        new = old + coeff
        if new == 0:
            del self.coeffs[exponent]
            del self.keys[bisect.bisect_left(self.keys, (degree, exponent))]
        else:
            self.coeffs[exponent] = new

    def get(self, exponent):
        return self.coeffs.get(exponent, 0)

    def items(self):
        coeffs = self.coeffs
        for degree, exponent in self.keys:
            yield degree, exponent, coeffs[exponent]

    def sorted_items(self):
        return self.items()

    def highest(self):
        degree, exponent = self.keys[-1]
        return degree, exponent, self.coeffs[exponent]

    def scale(self, scalar):
        for exponent in self.coeffs:
            self.coeffs[exponent] *= scalar

    def mapping(self):
        return self.coeffs

    def copy(self):
        other = OrderedTerms()
        other.coeffs = self.coeffs.copy()
        other.keys = self.keys.copy()
        return other

    def __len__(self):
        return len(self.coeffs)

class HashedExponent:
    __slots__ = ("exponent", "degree", "hash")

    def __init__(self, exponent, degree, hasher):
        self.exponent = exponent
        self.degree = degree
        self.hash = hasher(exponent)

    def __eq__(self, other):
        return self.exponent == other.exponent

    def __hash__(self):
        return self.hash

class HashedTerms:
    """Coefficients keyed by exponent, hashed by an injected hasher.

    Inserts are cheap; the highest term costs a scan over every term.
    """
    __slots__ = ("coeffs", "hasher")
    ordered = False

    def __init__(self, hasher=None):
        self.coeffs = {}
        self.hasher = hasher or DEFAULT_HASHER

    def add(self, degree, exponent, coeff):
        key = HashedExponent(exponent, degree, self.hasher)
        old = self.coeffs.get(key)
        if old is None:
            if coeff != 0:
                self.coeffs[key] = coeff
            return
        new = old + coeff
        if new == 0:
            del self.coeffs[key]
        else:
            self.coeffs[key] = new

    def get(self, exponent):
        return self.coeffs.get(HashedExponent(exponent, None, self.hasher), 0)

    def items(self):
        for key, coeff in self.coeffs.items():
            yield key.degree, key.exponent, coeff

    def sorted_items(self):
        return sorted(self.items(), key=lambda item: (item[0], item[1]))

    def highest(self):
        key, coeff = max(self.coeffs.items(), key=lambda kv: (kv[0].degree, kv[0].exponent))
        return key.degree, key.exponent, coeff

    def scale(self, scalar):
        for key in self.coeffs:
            self.coeffs[key] *= scalar

    def mapping(self):
        return {key.exponent: coeff for key, coeff in self.coeffs.items()}

    def copy(self):
        other = HashedTerms(self.hasher)
        other.coeffs = self.coeffs.copy()
        return other

    def __len__(self):
        return len(self.coeffs)

class Polynomial:
    """A polynomial over a fixed number of variables of one exponent type.

    Terms are stored either ordered (highest term in O(1)) or hashed (cheaper
    inserts, highest term in O(n)). Zero coefficients are never stored.

    Degrees come from exponent_type.degree() when the type has one and from
    the `dimensions` table otherwise; names likewise from
    exponent_type.name(i, n) or the `names` table.
    """
    __slots__ = ("exponent_type", "num_vars", "dimensions", "names", "hasher", "_terms")
    # numpy scalars on the left defer to __rmul__ and friends
    __array_ufunc__ = None

    def __init__(self, exponent_type, num_vars, ordered=True, dimensions=None, names=None, hasher=None):
        self.exponent_type = exponent_type
        self.num_vars = num_vars
        self.dimensions = dimensions
        self.names = names
        self.hasher = hasher
        self._terms = OrderedTerms() if ordered else HashedTerms(hasher)

    @classmethod
    def constant(cls, exponent_type, num_vars, coeff=1, **kwargs):
        poly = cls(exponent_type, num_vars, **kwargs)
        poly.insert(exponent_type.zero(num_vars), coeff)
        return poly

    @classmethod
    def monomial(cls, exponent, coeff=1, **kwargs):
        poly = cls(type(exponent), len(exponent), **kwargs)
        poly.insert(exponent, coeff)
        return poly

    @property
    def ordered(self):
        return self._terms.ordered

    def _like(self, ordered=None):
        if ordered is None:
            ordered = self.ordered
        return Polynomial(self.exponent_type, self.num_vars, ordered,
                          self.dimensions, self.names, self.hasher)

    def degree_of(self, exponent):
        if self.exponent_type.degree is not None:
            return exponent.degree()
        if self.dimensions is not None:
            return weighted_degree(exponent, self.dimensions)
        raise MissingGradingError(
            f"{self.exponent_type.__name__} has no degree and no dimensions were given")

    def name_of(self, i):
        if self.names is not None:
            return self.names[i]
        if self.exponent_type.name is not None:
            return self.exponent_type.name(i, self.num_vars)
        raise MissingNamesError(
            f"{self.exponent_type.__name__} has no names and no names were given")

    def _check(self, other):
        if other.exponent_type is not self.exponent_type or other.num_vars != self.num_vars:
            raise PreconditionError(
                f"cannot combine polynomials on {self.num_vars} {self.exponent_type.__name__} "
                f"and {other.num_vars} {other.exponent_type.__name__}")

    def insert(self, exponent, coeff):
        if type(exponent) is not self.exponent_type:
            exponent = self.exponent_type(exponent)
        assert len(exponent) == self.num_vars, (exponent, self.num_vars)
        self._terms.add(self.degree_of(exponent), exponent, as_scalar(coeff))

    def coefficient(self, exponent):
        if type(exponent) is not self.exponent_type:
            exponent = self.exponent_type(exponent)
        return self._terms.get(exponent)

    def highest_term(self):
        if not self._terms:
            return None
        degree, exponent, coeff = self._terms.highest()
        return Monomial(coeff, exponent, degree)

    def __len__(self):
        return len(self._terms)

    def __bool__(self):
        return len(self._terms) > 0

    def __iter__(self):
        for degree, exponent, coeff in self._terms.items():
            yield Monomial(coeff, exponent, degree)

    def terms(self):
        return list(self)

    def copy(self):
        other = self._like()
        other._terms = self._terms.copy()
        return other

    def convert(self, ordered):
        if ordered == self.ordered:
            return self.copy()
        other = self._like(ordered)
        for degree, exponent, coeff in self._terms.items():
            other._terms.add(degree, exponent, coeff)
        return other

    def __iadd__(self, other):
        if isinstance(other, SCALARS):
            self.insert(self.exponent_type.zero(self.num_vars), as_scalar(other))
            return self
        self._check(other)
        for degree, exponent, coeff in list(other._terms.items()):
            self._terms.add(degree, exponent, coeff)
        return self

    def __isub__(self, other):
        if isinstance(other, SCALARS):
            self.insert(self.exponent_type.zero(self.num_vars), -as_scalar(other))
            return self
        self._check(other)
        for degree, exponent, coeff in list(other._terms.items()):
            self._terms.add(degree, exponent, -coeff)
        return self

    def __imul__(self, other):
        if isinstance(other, SCALARS):
            other = as_scalar(other)
            if other == 0:
                self._terms = self._like()._terms
            else:
                self._terms.scale(other)
            return self
        self._terms = (self * other)._terms
        return self

    def __add__(self, other):
        res = self.copy()
        res += other
        return res

    __radd__ = __add__

    def __sub__(self, other):
        res = self.copy()
        res -= other
        return res

    def __rsub__(self, other):
        return -self + other

    def __neg__(self):
        res = self.copy()
        res._terms.scale(-1)
        return res

    def __mul__(self, other):
        if isinstance(other, SCALARS):
            res = self.copy()
            res *= other
            return res
        self._check(other)
        res = self._like()
        add = res._terms.add
        if not self.exponent_type.relations.product_of_monomials_is_monomial:
            raise PreconditionError(
                f"products of {self.exponent_type.__name__} monomials are not monomials")
        for d1, e1, c1 in self._terms.items():
            for d2, e2, c2 in other._terms.items():
                add(d1 + d2, e1 + e2, c1 * c2)
        return res

    def __rmul__(self, other):
        return self * other

    def __pow__(self, p):
        if not isinstance(p, int) or p < 0:
            raise PreconditionError(f"cannot raise a polynomial to the power {p!r}")
        res = self._like()
        res.insert(self.exponent_type.zero(self.num_vars), 1)
        for _ in range(p):
            res = res * self
        return res

    def __eq__(self, other):
        if isinstance(other, SCALARS):
            if other == 0:
                return not self
            zero = self.exponent_type.zero(self.num_vars)
            return len(self) == 1 and self._terms.get(zero) == as_scalar(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        # Structural: an ordered and a hashed polynomial never compare equal.
        if self.ordered != other.ordered or self.exponent_type is not other.exponent_type:
            return False
        return self._terms.mapping() == other._terms.mapping()

    __hash__ = None

    def permute(self, perm):
        res = self._like()
        for degree, exponent, coeff in self._terms.items():
            res._terms.add(degree, exponent.permute(perm), coeff)
        return res

    def is_symmetric(self):
        n =self.exponent_type.true_variables(self.num_vars)
        return all(self.permute(perm) == self for perm in Permutations(n))

    def evaluate(self, point):
        """Value at `point`; with rational entries the result is exact.

        For idempotent variables the point should assign 0 or 1 to each y_i.
        """
        point = np.asarray(point, dtype=object)
        if point.shape != (self.num_vars,):
            raise PreconditionError(f"expected {self.num_vars} coordinates, got {point.shape}")
        total = 0
        for _, exponent, coeff in self._terms.items():
            total += coeff * np.prod(np.power(point, np.asarray(exponent, dtype=object)))
        return total

    def pretty(self, names=None):
        if not self._terms:
            return "0"
        if names is None:
            name = self.name_of
        elif callable(names):
            name = lambda i: names(i, self.num_vars)
        else:
            name = names.__getitem__
        return " + ".join(Monomial(c, e, d).pretty(name) for d, e, c in self._terms.sorted_items())

    def __str__(self):
        return self.pretty()

    def __repr__(self):
        return f"Polynomial({self.pretty()})"

def symmetrize(exponent, coeff=1, **kwargs):
    """Sum of the monomials in the orbit of exponent, each with coefficient coeff."""
    poly = Polynomial(type(exponent), len(exponent), **kwargs)
    for image in orbit(exponent):
        poly.insert(image, coeff)
    return poly
