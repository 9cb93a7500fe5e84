from __future__ import annotations


class ExtensorCodingError(ValueError):
    """Base class for every failure raised by extensor_coding."""


class EncodingOverflowError(ExtensorCodingError):
    """A basis index does not fit into the fixed-width monomial encoding."""


class ShapeMismatchError(ExtensorCodingError):
    """Two sequences (or a matrix and a vector) disagree in length."""


class GraphFormatError(ExtensorCodingError):
    """An adjacency file could not be read or parsed."""
