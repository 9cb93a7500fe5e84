"""
extensor_coding: exterior-algebra arithmetic and randomized k-path counting
by extensor coding (Brand, Dell and Husfeldt).
"""

from .errors import (
    ExtensorCodingError,
    EncodingOverflowError,
    ShapeMismatchError,
    GraphFormatError,
)
from .adjacency import AdjacencyMatrix
from .algebra import Extensor, compute_sign, from_indices, ordered_indices
from .matrix import SparseCodedMatrix
from .coding import bernoulli_coding, vandermonde_coding
from .walks import compute_walk_sum, walk_sum_extensor, count_paths_exact
from .estimator import (
    EstimateResult,
    estimate_walk_count,
    run_estimator,
    iteration_budget,
    has_k_path,
    t_value,
)
from .io import read_tsv, parse_tsv, read_graph6, graph6_to_adjacency

__all__ = [
    # Errors
    "ExtensorCodingError",
    "EncodingOverflowError",
    "ShapeMismatchError",
    "GraphFormatError",
    # Graph input
    "AdjacencyMatrix",
    "read_tsv",
    "parse_tsv",
    "read_graph6",
    "graph6_to_adjacency",
    # Algebra
    "Extensor",
    "compute_sign",
    "from_indices",
    "ordered_indices",
    # Matrix
    "SparseCodedMatrix",
    # Coding
    "bernoulli_coding",
    "vandermonde_coding",
    # Walks
    "compute_walk_sum",
    "walk_sum_extensor",
    "count_paths_exact",
    # Estimator
    "EstimateResult",
    "estimate_walk_count",
    "run_estimator",
    "iteration_budget",
    "has_k_path",
    "t_value",
]
