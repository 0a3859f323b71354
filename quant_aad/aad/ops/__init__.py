# aad/ops/__init__.py

# Importing the modules registers their primitives in the catalog
from . import arithmetic
from . import transcendental
from . import special

# Convenience re-exports so users can do: from aad.ops import mul, exp, ...
from .registry import Primitive, catalog
from .arithmetic import add, sub, mul, div, neg, recip, powi, powf
from .transcendental import (
    exp, exp2, ln, log, log10, log2, sqrt, cbrt,
    sin, cos, tan, asin, acos, atan, sinh, cosh, tanh,
)
from .special import min, max, abs, erf, norm_cdf

__all__ = [
    "Primitive", "catalog",
    "add", "sub", "mul", "div", "neg", "recip", "powi", "powf",
    "exp", "exp2", "ln", "log", "log10", "log2", "sqrt", "cbrt",
    "sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh",
    "min", "max", "abs", "erf", "norm_cdf",
]
