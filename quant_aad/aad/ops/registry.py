# aad/ops/registry.py
"""
Catalog of elementary operations.

Each entry pairs a forward formula with its analytic local partials and an
optional domain check. `apply` is the only code path that appends
non-leaf nodes, so supporting a new function means registering one more
entry; the graph and the accumulator never change.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from ..core.errors import DomainError, MismatchedGraphError
from ..core.node import NodeKind
from ..core.var import Variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Primitive:
    """
    One catalog entry.

    Attributes
    ----------
    name     : tag recorded on the node ("add", "exp", ...).
    arity    : number of operands, 1 or 2.
    forward  : f(*values, **params) -> float.
    partials : f(*values, **params) -> tuple of ∂out/∂operand, one per operand.
    domain   : f(*values, **params) -> error message, or None when valid.
    """
    name: str
    arity: int
    forward: Callable[..., float]
    partials: Callable[..., Tuple[float, ...]]
    domain: Optional[Callable[..., Optional[str]]] = None


_CATALOG: Dict[str, Primitive] = {}


def catalog() -> Mapping[str, Primitive]:
    """Read-only view of every registered primitive, keyed by name."""
    return MappingProxyType(_CATALOG)


def primitive(name: str, arity: int, forward, partials, domain=None) -> Primitive:
    """Register a new entry and return it."""
    if arity not in (1, 2):
        raise ValueError(f"primitive '{name}' must take 1 or 2 operands, got {arity}")
    if name in _CATALOG:
        raise ValueError(f"primitive '{name}' is already registered")
    entry = Primitive(name=name, arity=arity, forward=forward, partials=partials, domain=domain)
    _CATALOG[name] = entry
    return entry


def apply(entry: Primitive, *operands, **params) -> Variable:
    """
    Evaluate `entry` on `operands` and record one node.

    Operands are Variables or plain real constants. Constants get no parent
    slot, so a binary primitive with one constant operand records a unary
    node. Only registered entries are accepted, so every tag on a tape is
    listed by `catalog()`. Every check runs before the append: on failure
    the tape is unchanged.
    """
    if _CATALOG.get(entry.name) is not entry:
        raise ValueError(f"primitive '{entry.name}' is not registered in the catalog")
    if len(operands) != entry.arity:
        raise TypeError(f"{entry.name} takes {entry.arity} operand(s), got {len(operands)}")

    graph = None
    for op in operands:
        if isinstance(op, Variable):
            op.graph.check_handle(op)
            if graph is None:
                graph = op.graph
            elif op.graph is not graph:
                raise MismatchedGraphError(
                    f"{entry.name}: operands belong to different graphs"
                )
        elif not isinstance(op, numbers.Real):
            raise TypeError(f"{entry.name}: unsupported operand type {type(op)}")
    if graph is None:
        raise TypeError(f"{entry.name} needs at least one Variable operand")

    values = tuple(float(op.value) if isinstance(op, Variable) else float(op) for op in operands)
    if entry.domain is not None:
        problem = entry.domain(*values, **params)
        if problem is not None:
            logger.debug("rejected %s%s: %s", entry.name, values, problem)
            raise DomainError(entry.name, values, problem)

    value = entry.forward(*values, **params)
    partials = entry.partials(*values, **params)

    parents, local = [], []
    for op, d in zip(operands, partials):
        if isinstance(op, Variable):
            parents.append(op.index)
            local.append(d)
    kind = NodeKind.BINARY if len(parents) == 2 else NodeKind.UNARY
    return graph.push_node(op_tag=entry.name, kind=kind, value=value,
                           parents=parents, partials=local)
