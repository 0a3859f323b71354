# aad/core/__init__.py

"""
Core public API for the AAD package.

This module exposes the symbols users of the engine should import from
`aad.core`. Every Graph is created and passed around explicitly; there is
no ambient tape.

Exports:
    Graph            : Append-only tape owning every recorded node.
    Variable         : Non-owning handle to one node (index + cached value).
    Node, NodeKind   : The records stored on the tape.
    accumulate       : Run a single reverse pass and return a Gradient.
    Gradient         : Adjoints of one pass, queried with `wrt`.
    export_dot       : DOT text for external graph renderers.
    get_graph_stats  : Node/edge/fan-out statistics of a tape.
    grad, grads,
    grads_list       : Convenience: gradients of a Python function.
    value            : Convenience: primal value of a Variable.
    check_gradient   : Cross-check adjoints against central differences.
"""

from .errors import (
    AADError,
    DomainError,
    IndexOutOfRangeError,
    InvalidHandleError,
    MismatchedGraphError,
)
from .config import CheckConfig, ExportConfig
from .node import Node, NodeKind
from .var import Variable
from .graph import Graph
from .engine import Gradient, accumulate
from .graph_utils import analyze_graph_complexity, export_dot, get_graph_stats
from .seeds import grad, grads, grads_list, value
from .finite_difference import GradientCheck, central_difference, check_gradient

__all__ = [
    "AADError", "DomainError", "IndexOutOfRangeError",
    "InvalidHandleError", "MismatchedGraphError",
    "CheckConfig", "ExportConfig",
    "Node", "NodeKind", "Variable", "Graph",
    "Gradient", "accumulate",
    "analyze_graph_complexity", "export_dot", "get_graph_stats",
    "grad", "grads", "grads_list", "value",
    "GradientCheck", "central_difference", "check_gradient",
]
