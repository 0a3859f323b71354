# aad/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class NodeKind(Enum):
    LEAF = 0
    UNARY = 1
    BINARY = 2


@dataclass(frozen=True)
class Node:
    """
    One record on the tape, produced by a leaf or a primitive operation.

    Attributes
    ----------
    op_tag : str
        Operation name (e.g. "leaf", "add", "exp").
    kind : NodeKind
        Number of parents: none, one or two.
    value : float
        Forward (primal) value computed when the node was appended.
    parents : Tuple[int, ...]
        Tape indices of the operands, each strictly below this node's index.
    partials : Tuple[float, ...]
        Local partial ∂value/∂parent, one per parent and in the same order,
        evaluated at the operands' values at creation time.
    """
    op_tag: str
    kind: NodeKind
    value: float
    parents: Tuple[int, ...] = ()
    partials: Tuple[float, ...] = ()

    def __post_init__(self):
        if len(self.parents) != self.kind.value:
            raise ValueError(
                f"{self.kind.name.lower()} node '{self.op_tag}' needs "
                f"{self.kind.value} parent(s), got {len(self.parents)}"
            )
        if len(self.partials) != len(self.parents):
            raise ValueError(
                f"node '{self.op_tag}' has {len(self.parents)} parent(s) "
                f"but {len(self.partials)} partial(s)"
            )

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF
