from .relations import NoRelations, HalfIdempotent

class StandardVariables(tuple):
    """Exponent [a_1,...,a_n] of the monomial x_1^a_1 * ... * x_n^a_n.

    Exponents are tuples, so they hash and compare lexicographically. Adding
    two exponents multiplies the monomials; subtracting divides them and it is
    the caller's job to only divide by an actual factor.
    """
    __slots__ = ()
    relations = NoRelations

    def __new__(cls, values=()):
        values = list(values)
        cls.relations.apply(values)
        return super().__new__(cls, values)

    @classmethod
    def zero(cls, num_vars):
        return cls([0] * num_vars)

    @classmethod
    def max_exponent(cls, num_vars, degree):
        return cls.relations.max_exponent(num_vars, degree)

    @classmethod
    def true_variables(cls, num_vars):
        return cls.relations.true_variables(num_vars)

    def degree(self):
        return self.relations.compute_degree(self)

    @staticmethod
    def name(i, n):
        return f"x_{i + 1}"

    def __add__(self, other):
        assert len(self) == len(other), (self, other)
        return type(self)(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        assert len(self) == len(other), (self, other)
        out = [a - b for a, b in zip(self, other)]
        assert all(e >= 0 for e in out), (self, other)
        return type(self)(out)

    def divides(self, other):
        return all(a <= b for a, b in zip(self, other))

    def permute(self, perm):
        return type(self)(self.relations.permute(list(self), perm))

    def __repr__(self):
        return f"{type(self).__name__}({list(self)})"

class HalfIdempotentVariables(StandardVariables):
    """Exponent [a_1,...,a_n,b_1,...,b_n] of x_1^a_1...x_n^a_n y_1^b_1...y_n^b_n.

    The y-block is clamped to {0, 1} on construction, so addition is
    [a_i + a'_i, max(b_i, b'_i)] and subtraction (of a divisor) is
    [a_i - a'_i, b_i - b'_i].
    """
    __slots__ = ()
    relations = HalfIdempotent

    @staticmethod
    def name(i, num):
        n = num // 2
        if i < n:
            return f"x_{i + 1}"
        return f"y_{i - n + 1}"

class TwistedChernVariables(StandardVariables):
    """Exponent on the generators themselves, indexed by generator id.

    No relations are applied: the relations between generators are not
    monomial. Degrees and names come from the tables handed to the polynomial.
    """
    __slots__ = ()
    relations = NoRelations
    degree = None
    name = None
