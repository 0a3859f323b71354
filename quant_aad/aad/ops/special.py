# aad/ops/special.py
import numpy as np
from scipy.special import erf as scipy_erf, ndtr

from .registry import apply, primitive

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)
TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def norm_pdf(x):
    return np.exp(-0.5 * x * x) / SQRT_TWO_PI


def _min_partials(a, b):
    # ties select the first operand
    return (1.0, 0.0) if a <= b else (0.0, 1.0)


def _max_partials(a, b):
    return (1.0, 0.0) if a >= b else (0.0, 1.0)


def _abs_partial(a):
    return (1.0 if a >= 0.0 else -1.0,)


_MIN = primitive("min", 2, lambda a, b: a if a <= b else b, _min_partials)
_MAX = primitive("max", 2, lambda a, b: a if a >= b else b, _max_partials)
_ABS = primitive("abs", 1, np.abs, _abs_partial)
_ERF = primitive("erf", 1, scipy_erf, lambda a: (TWO_OVER_SQRT_PI * np.exp(-a * a),))
_NORM_CDF = primitive("norm_cdf", 1, ndtr, lambda a: (norm_pdf(a),))


def min(x, y): return apply(_MIN, x, y)
def max(x, y): return apply(_MAX, x, y)
def abs(x): return apply(_ABS, x)


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    return apply(_ERF, x)


def norm_cdf(x):
    """Standard normal CDF N(x); records local partial dN/dx = phi(x)."""
    return apply(_NORM_CDF, x)
