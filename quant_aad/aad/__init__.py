# aad/__init__.py
# Automatic Adjoint Differentiation library

from .core.errors import (
    AADError,
    DomainError,
    IndexOutOfRangeError,
    InvalidHandleError,
    MismatchedGraphError,
)
from .core.config import CheckConfig, ExportConfig
from .core.var import Variable
from .core.graph import Graph
from .core.engine import Gradient, accumulate
from .core.graph_utils import export_dot, get_graph_stats, analyze_graph_complexity
from .core.seeds import grad, grads, grads_list, value
from .core.finite_difference import check_gradient, central_difference

# Registers every primitive of the catalog
from . import ops
from .ops import catalog

__all__ = [
    # Errors
    'AADError',
    'DomainError',
    'IndexOutOfRangeError',
    'InvalidHandleError',
    'MismatchedGraphError',
    # Config
    'CheckConfig',
    'ExportConfig',
    # Core
    'Variable',
    'Graph',
    'Gradient',
    'accumulate',
    # Diagnostics
    'export_dot',
    'get_graph_stats',
    'analyze_graph_complexity',
    # Convenience
    'grad',
    'grads',
    'grads_list',
    'value',
    'check_gradient',
    'central_difference',
    # Catalog
    'ops',
    'catalog',
]
