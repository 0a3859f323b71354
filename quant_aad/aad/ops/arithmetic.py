# aad/ops/arithmetic.py
import numpy as np

from .registry import apply, primitive


def _nonzero_divisor(a, b):
    return None if b != 0.0 else "division by zero"


def _nonzero(a):
    return None if a != 0.0 else "reciprocal of zero"


def _powi_domain(a, n):
    return "zero raised to a negative power" if a == 0.0 and n < 0 else None


def _powi_partial(a, n):
    return (0.0 if n == 0 else n * np.power(a, float(n - 1)),)


def _powf_domain(a, b):
    """
    Real powers are defined for a > 0. At a == 0 only exponents >= 1 keep the
    local partials finite; negative bases go through powi.
    """
    if a > 0.0 or (a == 0.0 and b >= 1.0):
        return None
    return "real power needs a positive base"


def _powf_partials(a, b):
    y = np.power(a, b)
    dyda = b * np.power(a, b - 1.0)
    dydb = y * np.log(a) if a > 0.0 else 0.0
    return dyda, dydb


_ADD = primitive("add", 2, lambda a, b: a + b, lambda a, b: (1.0, 1.0))
_SUB = primitive("sub", 2, lambda a, b: a - b, lambda a, b: (1.0, -1.0))
_MUL = primitive("mul", 2, lambda a, b: a * b, lambda a, b: (b, a))
_DIV = primitive("div", 2, lambda a, b: np.float64(a) / b,
                 lambda a, b: (1.0 / np.float64(b), -a / np.square(b)),
                 domain=_nonzero_divisor)
_NEG = primitive("neg", 1, lambda a: -a, lambda a: (-1.0,))
_RECIP = primitive("recip", 1, lambda a: 1.0 / np.float64(a), lambda a: (-1.0 / np.square(a),),
                   domain=_nonzero)
_POWI = primitive("powi", 1, lambda a, n: np.power(a, float(n)), _powi_partial,
                  domain=_powi_domain)
_POWF = primitive("powf", 2, lambda a, b: np.power(a, b), _powf_partials, domain=_powf_domain)


def add(x, y): return apply(_ADD, x, y)
def sub(x, y): return apply(_SUB, x, y)
def mul(x, y): return apply(_MUL, x, y)
def div(x, y): return apply(_DIV, x, y)
def neg(x): return apply(_NEG, x)
def recip(x): return apply(_RECIP, x)


def powi(x, n):
    """
    Integer power x**n, n a plain int (not recorded as an operand).

    Local partial: n * x^(n-1). Valid for any base except 0 with n < 0.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"powi exponent must be an int, got {type(n)}")
    return apply(_POWI, x, n=int(n))


def powf(x, y):
    """
    Real power x**y; either side may be a Variable or a constant.

    Local partials:
      ∂out/∂x = y * x^(y-1)
      ∂out/∂y = x^y * log(x)        (taken as 0 at x == 0)
    """
    return apply(_POWF, x, y)
