from .monomial import (
    MAX_BASIS,
    Monomial,
    compute_sign,
    count,
    from_indices,
    intersect,
    ordered_indices,
    shift,
    union,
)
from .extensor import Extensor, sum_extensors

__all__ = [
    "MAX_BASIS",
    "Monomial",
    "compute_sign",
    "count",
    "from_indices",
    "intersect",
    "ordered_indices",
    "shift",
    "union",
    "Extensor",
    "sum_extensors",
]
