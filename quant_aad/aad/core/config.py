# aad/core/config.py
"""
Settings objects for the diagnostic parts of the engine.

Both are plain dataclasses passed explicitly to the functions that use
them; there is no module-level mutable configuration.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExportConfig:
    """
    Options for `export_dot`.

    Attributes
    ----------
    name : Optional[str]
        Graph identifier written after `digraph`. Falls back to the graph's
        own name, then to an anonymous digraph.
    precision : int
        Significant digits used for node values in labels.
    wrap : bool
        Emit the surrounding `digraph { ... }` block. With `wrap=False` only
        the node and edge statements are produced.
    indent : str
        Prefix for every statement when wrapped.
    """
    name: Optional[str] = None
    precision: int = 6
    wrap: bool = True
    indent: str = "    "

    def __post_init__(self):
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")


@dataclass(frozen=True)
class CheckConfig:
    """Central-difference settings used by `check_gradient`."""
    step: float = 1e-5
    rel_tol: float = 1e-6
    abs_tol: float = 1e-6

    def __post_init__(self):
        if self.step <= 0.0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.rel_tol < 0.0 or self.abs_tol < 0.0:
            raise ValueError("tolerances must be non-negative")
