from __future__ import annotations

from typing import Sequence

from extensor_coding.algebra.extensor import Extensor, sum_extensors
from extensor_coding.matrix.sparse_coded import SparseCodedMatrix


def walk_sum_extensor(
    matrix: SparseCodedMatrix,
    coding: Sequence[Extensor],
    k: int,
) -> Extensor:
    """
    Extend the coding vector along k-1 edges and add up the result:

      f(G, ξ) = (1 1 ... 1) A_ξ^(k-1) (ξ(v_1), ..., ξ(v_n))^T

    Entry i of A_ξ^(t) ξ collects the coded walks with t edges that start
    at vertex i.
    """
    if k < 2:
        raise ValueError(f"walk sums need k >= 2, got {k}")
    current = matrix.multiply(coding)
    for _ in range(k - 2):
        current = matrix.multiply(current)
    return sum_extensors(current)


def compute_walk_sum(
    matrix: SparseCodedMatrix,
    coding: Sequence[Extensor],
    k: int,
) -> int:
    """Scalar walk sum: the coefficients of walk_sum_extensor added up."""
    return sum(walk_sum_extensor(matrix, coding, k).coefficients())
