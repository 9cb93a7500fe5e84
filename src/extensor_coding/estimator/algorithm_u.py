from __future__ import annotations

from extensor_coding.adjacency import AdjacencyMatrix
from extensor_coding.coding.random_coding import vandermonde_coding
from extensor_coding.matrix.sparse_coded import SparseCodedMatrix
from extensor_coding.walks.walk_sum import walk_sum_extensor


def has_k_path(adj: AdjacencyMatrix, k: int) -> bool:
    """
    Decide whether adj contains a path through k distinct vertices ("Algorithm U").

    Uses the deterministic Vandermonde coding: the rows of k distinct vertices
    are linearly independent, so each path contributes det^2 != 0 to the
    single top-degree coefficient, always with the same sign.
    """
    coding = vandermonde_coding(adj.num_cols, k)
    matrix = SparseCodedMatrix.build(adj.num_rows, adj.num_cols, adj.data, coding)
    return not walk_sum_extensor(matrix, coding, k).is_zero()
