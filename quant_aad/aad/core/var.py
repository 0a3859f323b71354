# aad/core/var.py
from __future__ import annotations

import numbers
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import Graph
    from .engine import Gradient


class Variable:
    """
    Handle to one node of a Graph, returned by every graph operation.

    A Variable does not own anything: the Graph holds the node, the handle
    only remembers where it lives. It stays usable while its Graph is alive
    and has not been cleared since the handle was made.

    Attributes
    ----------
    graph : Graph
        The tape the node was recorded on.
    index : int
        Position of the node on that tape.
    value : float
        Forward (primal) value cached from the node.
    """

    __slots__ = ("graph", "index", "value", "_generation")

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, graph: "Graph", index: int, value: float, generation: int):
        self.graph = graph
        self.index = index
        self.value = value
        self._generation = generation

    @property
    def generation(self) -> int:
        return self._generation

    def __repr__(self):
        return f"Variable(index={self.index}, value={self.value!r})"

    def __float__(self):
        return float(self.value)

    def accumulate(self, seed: float = 1.0) -> "Gradient":
        """Run the reverse pass with this Variable as the output."""
        from .engine import accumulate
        return accumulate(self, seed=seed)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from ..ops.special import abs
        return abs(self)

    def __pow__(self, other):
        from ..ops.arithmetic import powf, powi
        # integral constant exponents are recorded as powi so negative bases work
        if not isinstance(other, Variable) and isinstance(other, numbers.Real):
            if isinstance(other, numbers.Integral):
                return powi(self, int(other))
            if float(other).is_integer():
                return powi(self, int(other))
        return powf(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import powf
        return powf(other, self)

    # Method forms of the catalog functions
    def recip(self):
        from ..ops.arithmetic import recip
        return recip(self)

    def powi(self, n: int):
        from ..ops.arithmetic import powi
        return powi(self, n)

    def powf(self, exponent):
        from ..ops.arithmetic import powf
        return powf(self, exponent)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def exp2(self):
        from ..ops.transcendental import exp2
        return exp2(self)

    def ln(self):
        from ..ops.transcendental import ln
        return ln(self)

    def log10(self):
        from ..ops.transcendental import log10
        return log10(self)

    def log2(self):
        from ..ops.transcendental import log2
        return log2(self)

    def sqrt(self):
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def cbrt(self):
        from ..ops.transcendental import cbrt
        return cbrt(self)

    def sin(self):
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self):
        from ..ops.transcendental import cos
        return cos(self)

    def tan(self):
        from ..ops.transcendental import tan
        return tan(self)

    def asin(self):
        from ..ops.transcendental import asin
        return asin(self)

    def acos(self):
        from ..ops.transcendental import acos
        return acos(self)

    def atan(self):
        from ..ops.transcendental import atan
        return atan(self)

    def sinh(self):
        from ..ops.transcendental import sinh
        return sinh(self)

    def cosh(self):
        from ..ops.transcendental import cosh
        return cosh(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def min(self, other):
        from ..ops.special import min
        return min(self, other)

    def max(self, other):
        from ..ops.special import max
        return max(self, other)

    def erf(self):
        from ..ops.special import erf
        return erf(self)

    def norm_cdf(self):
        from ..ops.special import norm_cdf
        return norm_cdf(self)
