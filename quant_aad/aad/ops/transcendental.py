# aad/ops/transcendental.py
import numpy as np

from .registry import apply, primitive

LN_2 = np.log(2.0)
LN_10 = np.log(10.0)


def _positive(a):
    return None if a > 0.0 else "operand must be positive"


def _nonzero(a):
    return None if a != 0.0 else "derivative is unbounded at zero"


def _open_unit_interval(a):
    return None if -1.0 < a < 1.0 else "operand must lie strictly inside (-1, 1)"


def _cos_nonzero(a):
    return None if np.cos(a) != 0.0 else "tangent is undefined where cos(x) == 0"


def _exp_partial(a):
    return (np.exp(a),)


def _tanh_partial(a):
    t = np.tanh(a)
    return (1.0 - t * t,)


_EXP = primitive("exp", 1, np.exp, _exp_partial)
_EXP2 = primitive("exp2", 1, np.exp2, lambda a: (np.exp2(a) * LN_2,))
_LN = primitive("ln", 1, np.log, lambda a: (1.0 / a,), domain=_positive)
_LOG10 = primitive("log10", 1, np.log10, lambda a: (1.0 / (a * LN_10),), domain=_positive)
_LOG2 = primitive("log2", 1, np.log2, lambda a: (1.0 / (a * LN_2),), domain=_positive)
_SQRT = primitive("sqrt", 1, np.sqrt, lambda a: (0.5 / np.sqrt(a),), domain=_positive)
_CBRT = primitive("cbrt", 1, np.cbrt, lambda a: (1.0 / (3.0 * np.cbrt(a) ** 2),),
                  domain=_nonzero)
_SIN = primitive("sin", 1, np.sin, lambda a: (np.cos(a),))
_COS = primitive("cos", 1, np.cos, lambda a: (-np.sin(a),))
_TAN = primitive("tan", 1, np.tan, lambda a: (1.0 / np.cos(a) ** 2,), domain=_cos_nonzero)
_ASIN = primitive("asin", 1, np.arcsin, lambda a: (1.0 / np.sqrt(1.0 - a * a),),
                  domain=_open_unit_interval)
_ACOS = primitive("acos", 1, np.arccos, lambda a: (-1.0 / np.sqrt(1.0 - a * a),),
                  domain=_open_unit_interval)
_ATAN = primitive("atan", 1, np.arctan, lambda a: (1.0 / (1.0 + a * a),))
_SINH = primitive("sinh", 1, np.sinh, lambda a: (np.cosh(a),))
_COSH = primitive("cosh", 1, np.cosh, lambda a: (np.sinh(a),))
_TANH = primitive("tanh", 1, np.tanh, _tanh_partial)


def exp(x): return apply(_EXP, x)
def exp2(x): return apply(_EXP2, x)
def ln(x): return apply(_LN, x)
def log10(x): return apply(_LOG10, x)
def log2(x): return apply(_LOG2, x)
def sqrt(x): return apply(_SQRT, x)
def cbrt(x): return apply(_CBRT, x)
def sin(x): return apply(_SIN, x)
def cos(x): return apply(_COS, x)
def tan(x): return apply(_TAN, x)
def asin(x): return apply(_ASIN, x)
def acos(x): return apply(_ACOS, x)
def atan(x): return apply(_ATAN, x)
def sinh(x): return apply(_SINH, x)
def cosh(x): return apply(_COSH, x)
def tanh(x): return apply(_TANH, x)

# natural log under its usual Python name
log = ln
