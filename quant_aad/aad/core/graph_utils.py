"""
Graph diagnostics: DOT export and tape statistics.

Everything here only reads the tape; exporting or summarising a graph never
changes what a later accumulate returns.
"""

from collections import Counter
from typing import Dict, List, Optional

import numpy as np

from .config import ExportConfig
from .graph import Graph


def _dot_id(name: str) -> str:
    if name.isidentifier():
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def export_dot(graph: Graph, config: Optional[ExportConfig] = None) -> str:
    """
    Serialise the tape as a directed graph in DOT syntax.

    Nodes are emitted in creation order, each node statement followed by one
    edge statement per parent:

        0 [label="leaf(2)"]
        1 [label="leaf(3)"]
        2 [label="mul(6)"]
        0 -> 2
        1 -> 2

    Args:
        graph: tape to describe.
        config: naming/formatting options, defaults to ExportConfig().

    Returns:
        The DOT text, newline-terminated.
    """
    config = config or ExportConfig()
    statements: List[str] = []
    for index, node in enumerate(graph.nodes):
        label = f"{node.op_tag}({node.value:.{config.precision}g})"
        statements.append(f'{index} [label="{label}"]')
        for parent in node.parents:
            statements.append(f"{parent} -> {index}")

    if not config.wrap:
        return "".join(s + "\n" for s in statements)

    name = config.name or graph.name
    header = f"digraph {_dot_id(name)} {{" if name else "digraph {"
    body = [config.indent + s for s in statements]
    return "\n".join([header, *body, "}"]) + "\n"


def get_graph_stats(graph: Graph) -> Dict:
    """
    Tape statistics (nothing is printed).

    Returns:
        dict with node/edge counts, fan-in and fan-out extremes and averages,
        and the number of nodes per operation tag.
    """
    nodes = graph.nodes
    if not nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(nodes)
    fan_ins = [len(node.parents) for node in nodes]
    n_edges = sum(fan_ins)

    fan_outs = [0] * n_nodes
    for node in nodes:
        for parent in node.parents:
            fan_outs[parent] += 1

    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def analyze_graph_complexity(graph: Graph) -> str:
    """Short text report on tape size, branching and the most common operations."""
    stats = get_graph_stats(graph)

    if stats['nodes'] == 0:
        return "Empty computation graph"

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Independent inputs: {stats['leaves']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
