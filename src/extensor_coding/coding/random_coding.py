"""Per-vertex extensor codings.

Both codings put a vector on the step generators e_1..e_k and lift it by k,
so each vertex carries a degree-2 element over e_1..e_2k.  The product of the
codings along a walk through k distinct vertices is det(M)^2 e_1∧...∧e_2k
(up to a sign fixed by k), where M stacks the k vectors; a repeated vertex
makes the product vanish.
"""
from __future__ import annotations

import random
from typing import List, Sequence

from extensor_coding.algebra.extensor import Extensor
from extensor_coding.algebra.monomial import MAX_BASIS
from extensor_coding.errors import EncodingOverflowError

SIGNS = (-1, 1)


def max_walk_length() -> int:
    """Largest k whose lifted coding still fits the monomial encoding."""
    return (MAX_BASIS - 1) // 2


def _step_bases(k: int) -> List[List[int]]:
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if k > max_walk_length():
        raise EncodingOverflowError(
            f"k={k} needs basis indices up to {2 * k}; max k is {max_walk_length()}"
        )
    return [[i] for i in range(1, k + 1)]


def lifted_vector(coeffs: Sequence[int]) -> Extensor:
    """sum_i coeffs[i] e_{i+1}, lifted by len(coeffs)."""
    k = len(coeffs)
    return Extensor.from_coefficients_and_bases(list(coeffs), _step_bases(k)).lift(k)


def bernoulli_coding(num_vertices: int, k: int, rng: random.Random) -> List[Extensor]:
    """
    Random coding: every vertex gets k independent uniform signs.

    With signs drawn this way E[det(M)^2] = k!, which makes the walk sum an
    unbiased estimator of k! times the number of k-vertex paths.
    """
    bases = _step_bases(k)
    coding = []
    for _v in range(num_vertices):
        signs = [rng.choice(SIGNS) for _ in range(k)]
        coding.append(Extensor.from_coefficients_and_bases(signs, bases).lift(k))
    return coding


def vandermonde_coding(num_vertices: int, k: int) -> List[Extensor]:
    """
    Deterministic coding: vertex v (1-based) gets (v^0, v^1, ..., v^(k-1)).

    Distinct vertices give a non-singular Vandermonde matrix, so a single
    k-path yields a non-zero walk sum.
    """
    bases = _step_bases(k)
    coding = []
    for v in range(1, num_vertices + 1):
        coeffs = [v ** i for i in range(k)]
        coding.append(Extensor.from_coefficients_and_bases(coeffs, bases).lift(k))
    return coding
