from .common import apply_permutation, apply_permutation_pieces

# A relation policy tells the exponent vectors how to normalize themselves,
# how to grade themselves and how the symmetric group acts on them.

class NoRelations:
    # Polynomial multiplication refuses policies where this is False.
    product_of_monomials_is_monomial = True

    @staticmethod
    def compute_degree(exponent):
        return sum(exponent)

    @staticmethod
    def apply(values):
        pass

    @staticmethod
    def max_exponent(variables, degree):
        return [degree] * variables

    @staticmethod
    def permute(values, perm):
        return apply_permutation(values, perm)

    @staticmethod
    def true_variables(length):
        return length

class HalfIdempotent(NoRelations):
    """x_1,...,x_n,y_1,...,y_n with y_i^2 = y_i, |x_i| = 1 and |y_i| = 0."""
    product_of_monomials_is_monomial = True

    @staticmethod
    def compute_degree(exponent):
        return sum(exponent[:len(exponent) // 2])

    @staticmethod
    def apply(values):
        for i in range(len(values) // 2, len(values)):
            if values[i] > 1:
                values[i] = 1

    @staticmethod
    def max_exponent(variables, degree):
        half = variables // 2
        return [degree] * half + [1] * (variables - half)

    @staticmethod
    def permute(values, perm):
        return apply_permutation_pieces(values, 2, perm)

    @staticmethod
    def true_variables(length):
        return length // 2
