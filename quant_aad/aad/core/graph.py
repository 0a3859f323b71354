# aad/core/graph.py
from __future__ import annotations

import logging
import numbers
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import IndexOutOfRangeError, InvalidHandleError, MismatchedGraphError
from .node import Node, NodeKind
from .var import Variable

logger = logging.getLogger(__name__)


class Graph:
    """
    Append-only tape: records Nodes in forward order.

    Indices are handed out sequentially from 0 and every parent index is
    strictly smaller than the index of the node referencing it, so the
    recording order is already a topological order for the reverse pass.

    A Graph is used by one thread at a time. Separate Graphs share nothing
    and can be built on separate threads.

        with Graph() as g:
            x, y = g.variables([2.0, 3.0])
            f = x * y + x.exp()
            dfdx, dfdy = f.accumulate().wrt([x, y])
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self._nodes: List[Node] = []
        self._generation = 0
        self._alive = True

    def __repr__(self):
        state = "" if self._alive else ", closed"
        return f"Graph(name={self.name!r}, nodes={len(self._nodes)}{state})"

    def __len__(self):
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def generation(self) -> int:
        """Bumped by `clear()`; handles from an older generation are stale."""
        return self._generation

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Snapshot of the tape in creation order."""
        self._ensure_alive()
        return tuple(self._nodes)

    def node(self, index: int) -> Node:
        self._ensure_alive()
        if not 0 <= index < len(self._nodes):
            raise IndexOutOfRangeError(
                f"node index {index} out of range for graph of length {len(self._nodes)}"
            )
        return self._nodes[index]

    # ------------------------------------------------------------------ leaves
    def variable(self, value: float) -> Variable:
        """Record an independent input and return its handle."""
        if isinstance(value, Variable) or not isinstance(value, numbers.Real):
            raise TypeError(f"Graph.variable expects a real number, got {type(value)}")
        return self.push_node(op_tag="leaf", kind=NodeKind.LEAF, value=float(value))

    def variables(self, values: Iterable[float]) -> List[Variable]:
        return [self.variable(v) for v in values]

    # ----------------------------------------------------------------- appends
    def push_node(self, *, op_tag: str, kind: NodeKind, value: float,
                  parents: Sequence[int] = (), partials: Sequence[float] = ()) -> Variable:
        """
        Append one Node and return a Variable wrapping its index.

        `parents` are tape indices, `partials` the matching local derivatives.
        The tape is left untouched if any check fails.
        """
        self._ensure_alive()
        index = len(self._nodes)
        for p in parents:
            if not 0 <= p < index:
                raise IndexOutOfRangeError(
                    f"parent index {p} is not below new node index {index}"
                )
        node = Node(
            op_tag=op_tag,
            kind=kind,
            value=float(value),
            parents=tuple(int(p) for p in parents),
            partials=tuple(float(d) for d in partials),
        )
        self._nodes.append(node)
        return Variable(self, index, node.value, self._generation)

    # --------------------------------------------------------------- lifetime
    def check_handle(self, var: Variable) -> None:
        """
        Check that `var` is a live handle into this graph.

        Raises MismatchedGraphError if `var` was recorded on another graph,
        InvalidHandleError if this graph was closed or cleared since.
        """
        if var.graph is not self:
            raise MismatchedGraphError(f"{var!r} does not belong to {self!r}")
        if not self._alive:
            raise InvalidHandleError(f"{var!r} used after its graph was closed")
        if var.generation != self._generation:
            raise InvalidHandleError(f"{var!r} used after its graph was cleared")

    def clear(self) -> None:
        """Drop every node. Existing Variables become stale."""
        self._ensure_alive()
        logger.debug("clearing %r (generation %d)", self, self._generation)
        self._nodes = []
        self._generation += 1

    def close(self) -> None:
        """End the graph's lifetime; later use of its Variables fails."""
        if not self._alive:
            return
        logger.debug("closing %r", self)
        self._nodes = []
        self._alive = False

    def _ensure_alive(self) -> None:
        if not self._alive:
            raise InvalidHandleError(f"{self!r} has been closed")

    # ---------------------------------------------------------------- reverse
    def accumulate(self, output: Variable, seed: float = 1.0):
        """Gradient of `output` with respect to every node on this graph."""
        from .engine import accumulate
        if not isinstance(output, Variable):
            raise TypeError(f"accumulate expects a Variable, got {type(output)}")
        if output.graph is not self:
            raise MismatchedGraphError(f"{output!r} does not belong to {self!r}")
        return accumulate(output, seed=seed)
