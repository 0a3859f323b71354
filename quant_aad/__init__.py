"""Quantitative-finance toolkit: reverse-mode adjoint differentiation engine."""

import logging

from .aad import (
    AADError,
    DomainError,
    Gradient,
    Graph,
    IndexOutOfRangeError,
    InvalidHandleError,
    MismatchedGraphError,
    Variable,
    accumulate,
    export_dot,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AADError",
    "DomainError",
    "Gradient",
    "Graph",
    "IndexOutOfRangeError",
    "InvalidHandleError",
    "MismatchedGraphError",
    "Variable",
    "accumulate",
    "export_dot",
]
