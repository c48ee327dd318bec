from symmetric.half_idempotent import HalfIdempotentBasis, print_half_idempotent_relations
from symmetric.polynomials import Polynomial
from symmetric.symmetric_basis import SymmetricBasis
from symmetric.variables import HalfIdempotentVariables, StandardVariables
import argparse
import logging

def symmetric_demo(n):
    basis = SymmetricBasis(n)
    for exponent in ([2, 1] + [0] * (n - 2), [2] + [0] * (n - 1)):
        if len(exponent) != n:
            continue
        p = basis.decompose_monomial_orbit(exponent)
        print(f"m{exponent} = {p}")
    p = Polynomial(StandardVariables, n)
    for i in range(n):
        p.insert([3 if k == i else 0 for k in range(n)], 1)
    print(f"{p} = {basis(p)}")

def half_idempotent_demo(n):
    basis = HalfIdempotentBasis(n)
    p = Polynomial(HalfIdempotentVariables, 2 * n)
    for i in range(n):
        p.insert([1 if k in (i, n + i) else 0 for k in range(2 * n)], 2)
    print(f"{p} = {basis(p)}")

def main():
    parser = argparse.ArgumentParser(description="Relations between the generators of half-idempotent symmetric polynomials")
    parser.add_argument("--verify", action="store_true", help="expand every relation back and compare")
    parser.add_argument("--verbose", action="store_true", help="print each verification and debug logging")
    parser.add_argument("--parallel", action="store_true", help="decompose relations in worker processes")
    parser.add_argument("--symmetric", action="store_true", help="decompose into elementary symmetric polynomials instead")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        n = int(input("n = "))
    except (ValueError, EOFError):
        n = 0
    if n < 1:
        print("n must be a positive integer")
        return

    if args.symmetric:
        symmetric_demo(n)
        return
    half_idempotent_demo(n)
    count = print_half_idempotent_relations(n, True, args.verify, args.verbose, args.parallel)
    print(f"{count} relations")

if __name__ == "__main__":
    main()
