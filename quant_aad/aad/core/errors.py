# aad/core/errors.py
"""Error types raised by the tape, the node catalog and the accumulator."""

from __future__ import annotations

from typing import Sequence


class AADError(Exception):
    """Base class for every engine failure."""


class MismatchedGraphError(AADError, ValueError):
    """A primitive received operands recorded on two different graphs."""


class DomainError(AADError, ValueError):
    """An elementary function was evaluated outside its mathematical domain."""

    def __init__(self, op_tag: str, operands: Sequence[float], message: str):
        self.op_tag = op_tag
        self.operands = tuple(float(v) for v in operands)
        self.message = message
        super().__init__(f"{op_tag}{self.operands}: {message}")


class IndexOutOfRangeError(AADError, IndexError):
    """A node index does not exist on the graph (or gradient) being queried."""


class InvalidHandleError(AADError, RuntimeError):
    """A Variable was used after its graph was cleared or closed."""
