import numpy as np
import zlib

class SymmetricError(Exception):
    pass

class PreconditionError(SymmetricError):
    pass

class MissingGradingError(PreconditionError):
    pass

class MissingNamesError(PreconditionError):
    pass

class DecompositionError(SymmetricError):
    pass

class VerificationError(SymmetricError):
    pass

def binomial(top, bot):
    if bot < 0 or bot > top:
        return 0
    if bot > top - bot:
        bot = top - bot
    result = 1
    for i in range(1, bot + 1):
        result = result * (top - bot + i) // i
    return result

def factorial(n):
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result

MASK = (1 << 64) - 1
GOLDEN_RATIO = 0x9e3779b97f4a7c15

def boost_hash(values):
    h = 0
    for v in values:
        h ^= (v + GOLDEN_RATIO + (h << 6) + (h >> 2)) & MASK
    return h

def crc_hash(values):
    # zlib's crc32 stands in for the SSE4.2 instruction
    h = 0
    for v in values:
        h = zlib.crc32(v.to_bytes(8, "little", signed=True), h)
    return h

DEFAULT_HASHER = boost_hash

def weighted_degree(exponent, dimensions):
    if len(exponent) != len(dimensions):
        raise PreconditionError(
            f"dimension table has {len(dimensions)} entries for {len(exponent)} variables")
    return int(np.dot(np.asarray(exponent, dtype=np.int64),
                      np.asarray(dimensions, dtype=np.int64)))

def apply_permutation(values, perm):
    out = [0] * len(values)
    for i, p in enumerate(perm):
        out[p] = values[i]
    return out

def apply_permutation_pieces(values, pieces, perm):
    """Apply perm to each of `pieces` consecutive blocks of values separately."""
    size = len(values) // pieces
    out = []
    for k in range(pieces):
        out.extend(apply_permutation(values[k*size:(k+1)*size], perm))
    return out
