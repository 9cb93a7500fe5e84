from .random_coding import (
    bernoulli_coding,
    lifted_vector,
    max_walk_length,
    vandermonde_coding,
)

__all__ = [
    "bernoulli_coding",
    "lifted_vector",
    "max_walk_length",
    "vandermonde_coding",
]
