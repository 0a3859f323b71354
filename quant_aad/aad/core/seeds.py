# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Each helper builds its own Graph and closes it
# before returning, so nothing leaks between calls.
#-----------------------------------------------------------------------------
from __future__ import annotations

import numbers
from typing import Any, Callable, Dict, Iterable, List

from .engine import accumulate
from .graph import Graph
from .var import Variable


def value(x: Any) -> Any:
    """Return the numeric value of a Variable; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Variable) else x


def _check_output(y: Any, caller: str) -> bool:
    """True if `y` is a recorded Variable, False for a constant output."""
    if isinstance(y, Variable):
        return True
    if isinstance(y, numbers.Real):
        return False
    raise TypeError(f"{caller} expects a scalar output, got {type(y)}")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Variable], Variable], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one reverse pass within a fresh, isolated graph.
    """
    with Graph(name="grad") as graph:
        x = graph.variable(x0)
        y = f(x)
        if not _check_output(y, "grad(f, x0)"):
            return 0.0
        return accumulate(y).wrt(x)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Variable]], Variable],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar-output function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Variable} and returning a scalar Variable
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    with Graph(name="grads") as graph:
        xs = {k: graph.variable(v) for k, v in inputs.items()}
        y = f(xs)
        if not _check_output(y, "grads(f, inputs)"):
            return {k: 0.0 for k in inputs}
        g = accumulate(y)
        return {k: g.wrt(x) for k, x in xs.items()}


def grads_list(f: Callable[[List[Variable]], Variable],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with Graph(name="grads_list") as graph:
        xs = graph.variables(x0_list)
        y = f(xs)
        if not _check_output(y, "grads_list(f, x0_list)"):
            return [0.0] * len(xs)
        return accumulate(y).wrt(xs).tolist()
