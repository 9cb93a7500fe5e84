"""Tests for extensor_coding.walks."""
import random

import networkx as nx
import pytest

from extensor_coding.adjacency import AdjacencyMatrix
from extensor_coding.coding import bernoulli_coding, vandermonde_coding
from extensor_coding.matrix.sparse_coded import SparseCodedMatrix
from extensor_coding.walks import compute_walk_sum, count_paths_exact, walk_sum_extensor


def _path(n):
    return AdjacencyMatrix.from_edges(n, [(i, i + 1) for i in range(n - 1)])


def _walk_sum(adj, coding, k):
    m = SparseCodedMatrix.build(adj.num_rows, adj.num_cols, adj.data, coding)
    return walk_sum_extensor(m, coding, k)


def test_vandermonde_path10_nonzero():
    adj = _path(10)
    for k in (3, 5):
        assert not _walk_sum(adj, vandermonde_coding(10, k), k).is_zero()


def test_vandermonde_path3_k5_zero():
    adj = _path(3)
    assert _walk_sum(adj, vandermonde_coding(3, 5), 5).is_zero()


def test_single_edge_k2():
    # walks (0,1) and (1,0): 2 * x0 ∧ x1 = -2 det^2 e_1∧e_2∧e_3∧e_4
    adj = AdjacencyMatrix.from_edges(2, [(0, 1)])
    coding = vandermonde_coding(2, 2)
    # det [[1, 1], [1, 2]] = 1
    m = SparseCodedMatrix.build(2, 2, adj.data, coding)
    assert compute_walk_sum(m, coding, 2) == -2


def test_walk_sum_values_triangle_k3():
    # all 6 directed 3-paths of K3 share one det^2 in {0, 16}
    adj = AdjacencyMatrix.from_edges(3, [(0, 1), (1, 2), (0, 2)])
    rng = random.Random(3)
    for _ in range(20):
        coding = bernoulli_coding(3, 3, rng)
        m = SparseCodedMatrix.build(3, 3, adj.data, coding)
        assert abs(compute_walk_sum(m, coding, 3)) in (0, 6 * 16)


def test_walk_sum_no_edges():
    adj = AdjacencyMatrix.from_edges(4, [])
    coding = bernoulli_coding(4, 3, random.Random(0))
    m = SparseCodedMatrix.build(4, 4, adj.data, coding)
    assert compute_walk_sum(m, coding, 3) == 0


def test_walk_sum_requires_k2():
    adj = _path(3)
    coding = vandermonde_coding(3, 1)
    m = SparseCodedMatrix.build(3, 3, adj.data, coding)
    with pytest.raises(ValueError):
        compute_walk_sum(m, coding, 1)


def test_count_paths_exact_path():
    adj = _path(3)
    assert count_paths_exact(adj, 1) == 3
    assert count_paths_exact(adj, 2) == 4
    assert count_paths_exact(adj, 3) == 2
    assert count_paths_exact(adj, 4) == 0


def test_count_paths_exact_complete():
    adj = AdjacencyMatrix.from_networkx(nx.complete_graph(5))
    # ordered selections of k distinct vertices
    assert count_paths_exact(adj, 3) == 5 * 4 * 3
    assert count_paths_exact(adj, 5) == 120


def test_count_paths_exact_directed():
    adj = AdjacencyMatrix.from_edges(3, [(0, 1), (1, 2)], directed=True)
    assert count_paths_exact(adj, 3) == 1
