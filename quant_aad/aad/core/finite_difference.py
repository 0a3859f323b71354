# aad/core/finite_difference.py
"""
Bump-and-revalue gradients, used to cross-check the reverse pass.

    ∂f/∂x_i ≈ [f(x + h e_i) - f(x - h e_i)] / (2h)

The step is scaled by max(1, |x_i|) so large inputs are bumped relative to
their size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import CheckConfig
from .graph import Graph
from .seeds import grads_list, value
from .var import Variable


@dataclass
class GradientCheck:
    analytic: np.ndarray
    numeric: np.ndarray
    max_abs_error: float
    max_rel_error: float
    passed: bool


def _evaluate(f: Callable[[List[Variable]], Variable], point: np.ndarray) -> float:
    with Graph(name="bump") as graph:
        return float(value(f(graph.variables(point))))


def central_difference(f: Callable[[List[Variable]], Variable],
                       xs: Sequence[float], step: float = 1e-5) -> np.ndarray:
    """Numerical gradient of `f` (written against Variables) at `xs`."""
    point = np.asarray(xs, dtype=np.float64)
    out = np.empty_like(point)
    for i in range(point.size):
        h = step * max(1.0, abs(point[i]))
        up = point.copy()
        up[i] += h
        down = point.copy()
        down[i] -= h
        out[i] = (_evaluate(f, up) - _evaluate(f, down)) / (2.0 * h)
    return out


def check_gradient(f: Callable[[List[Variable]], Variable],
                   xs: Sequence[float], config: Optional[CheckConfig] = None) -> GradientCheck:
    """
    Compare accumulated adjoints against central differences.

    A component passes when |analytic - numeric| <= abs_tol + rel_tol * max(|analytic|, |numeric|).
    """
    config = config or CheckConfig()
    analytic = np.asarray(grads_list(f, xs), dtype=np.float64)
    numeric = central_difference(f, xs, step=config.step)

    abs_err = np.abs(analytic - numeric)
    scale = np.maximum(np.abs(analytic), np.abs(numeric))
    rel_err = np.divide(abs_err, scale, out=np.zeros_like(abs_err), where=scale > 0.0)
    passed = bool(np.all(abs_err <= config.abs_tol + config.rel_tol * scale))

    return GradientCheck(
        analytic=analytic,
        numeric=numeric,
        max_abs_error=float(abs_err.max(initial=0.0)),
        max_rel_error=float(rel_err.max(initial=0.0)),
        passed=passed,
    )
