"""Basis monomials of the exterior algebra as 32-bit masks.

Bit i of a monomial is set iff the generator e_i is a factor.  Monomials are
plain ints, so equality and hashing come for free.
"""
from __future__ import annotations

from typing import Iterable, Tuple

from extensor_coding.errors import EncodingOverflowError

Monomial = int

MAX_BASIS = 32


def from_indices(indices: Iterable[int]) -> Monomial:
    """Encode a set of basis indices in [0, MAX_BASIS) as a bitmask."""
    m = 0
    for i in indices:
        if i < 0 or i >= MAX_BASIS:
            raise EncodingOverflowError(
                f"basis index too large: {i} (max is {MAX_BASIS - 1})"
            )
        m |= 1 << i
    return m


def union(a: Monomial, b: Monomial) -> Monomial:
    return a | b


def intersect(a: Monomial, b: Monomial) -> Monomial:
    return a & b


def count(m: Monomial) -> int:
    """Number of generators in m."""
    return bin(m).count("1")


def ordered_indices(m: Monomial) -> Tuple[int, ...]:
    """Ascending tuple of the generator indices in m."""
    out = []
    while m:
        lsb = m & -m
        out.append(lsb.bit_length() - 1)
        m ^= lsb
    return tuple(out)


def shift(m: Monomial, k: int) -> Monomial:
    """Move every generator of m up by k positions."""
    shifted = m << k
    if shifted >> MAX_BASIS:
        raise EncodingOverflowError(
            f"basis index too large: shifting {ordered_indices(m)} by {k} "
            f"exceeds {MAX_BASIS - 1}"
        )
    return shifted


def compute_sign(a: Monomial, b: Monomial) -> int:
    """Sign of the permutation sorting indices(a) ++ indices(b).

    Both index lists are ascending, so inversions are counted with a merge:
    whenever the next index of b is smaller than the current index of a, it
    jumps over every remaining index of a.
    """
    ia = ordered_indices(a)
    ib = ordered_indices(b)
    inversions = 0
    i = j = 0
    while i < len(ia) and j < len(ib):
        if ia[i] <= ib[j]:
            i += 1
        else:
            inversions += len(ia) - i
            j += 1
    return 1 if inversions % 2 == 0 else -1
