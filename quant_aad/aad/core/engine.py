# aad/core/engine.py
from __future__ import annotations

import logging
from typing import Iterable, Union

import numpy as np

from .errors import IndexOutOfRangeError, InvalidHandleError
from .graph import Graph
from .var import Variable

logger = logging.getLogger(__name__)


class Gradient:
    """
    Adjoints produced by one reverse pass.

    Indexed by tape position; query it with the Variables of interest:

        g = accumulate(f)
        g.wrt(x)          # -> float
        g.wrt([x, y])     # -> np.ndarray, same order as requested
    """

    __slots__ = ("_graph", "_generation", "_adjoints")

    def __init__(self, graph: Graph, generation: int, adjoints: np.ndarray):
        self._graph = graph
        self._generation = generation
        self._adjoints = adjoints
        self._adjoints.setflags(write=False)

    def __repr__(self):
        return f"Gradient(nodes={len(self._adjoints)})"

    def __len__(self):
        return len(self._adjoints)

    def __getitem__(self, var: Variable) -> float:
        return self._adjoint(var)

    @property
    def graph(self) -> Graph:
        return self._graph

    def wrt(self, variables: Union[Variable, Iterable[Variable]]):
        """Adjoint(s) of the output with respect to `variables`, in the order given."""
        if isinstance(variables, Variable):
            return self._adjoint(variables)
        return np.array([self._adjoint(v) for v in variables], dtype=np.float64)

    def as_array(self) -> np.ndarray:
        """Copy of the full adjoint vector, one entry per node."""
        return self._adjoints.copy()

    def _adjoint(self, var: Variable) -> float:
        if not isinstance(var, Variable):
            raise TypeError(f"gradient queries take Variables, got {type(var)}")
        if var.graph is not self._graph:
            raise IndexOutOfRangeError(f"{var!r} was not recorded on the differentiated graph")
        self._graph.check_handle(var)
        if self._generation != self._graph.generation:
            raise InvalidHandleError("gradient was computed before its graph was cleared")
        if not 0 <= var.index < len(self._adjoints):
            raise IndexOutOfRangeError(
                f"{var!r} was recorded after this gradient ({len(self._adjoints)} nodes)"
            )
        return float(self._adjoints[var.index])


def accumulate(output: Variable, seed: float = 1.0) -> Gradient:
    """
    Run a single reverse pass from `output`.

    Args:
        output: scalar result whose derivatives are wanted.
        seed: adjoint planted at the output (dy/dy = 1 by default).

    Notes:
        - Walks node indices downwards in one explicit loop; parents always
          sit below their children, so no sort or recursion is needed.
        - For each node, we propagate: adj[p] += adj[node] * (∂node/∂p).
          A parent reached through several children collects every term.
        - The graph is only read; calls are independent of each other.
    """
    if not isinstance(output, Variable):
        raise TypeError(f"accumulate expects a Variable, got {type(output)}")
    graph = output.graph
    graph.check_handle(output)

    nodes = graph.nodes
    adjoints = [0.0] * len(nodes)
    adjoints[output.index] = float(seed)

    # nodes recorded after the output cannot feed into it
    for i in range(output.index, -1, -1):
        adj = adjoints[i]
        if adj == 0.0:
            continue  # nothing to propagate
        node = nodes[i]
        for p, local_partial in zip(node.parents, node.partials):
            adjoints[p] += adj * local_partial

    logger.debug("accumulated %d adjoints from node %d", len(nodes), output.index)
    return Gradient(graph, graph.generation, np.asarray(adjoints, dtype=np.float64))
