from .walk_sum import compute_walk_sum, walk_sum_extensor
from .exact import count_paths_exact

__all__ = [
    "compute_walk_sum",
    "walk_sum_extensor",
    "count_paths_exact",
]
