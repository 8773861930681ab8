"""
Computation graph utilities.
Print and analyze the structure of the graph reachable from an output Value.
"""

from typing import Dict
from collections import Counter

import numpy as np

from .engine import topological_order


def get_graph_stats(root) -> Dict:
    """
    Collect statistics for the graph reachable from `root` (no printing).

    Returns:
        dict with node/edge counts, fan-out, depth and operation breakdown
    """
    order = topological_order(root)
    n_nodes = len(order)
    n_edges = sum(len(v.node.operands) for v in order)
    n_leaves = sum(1 for v in order if v.node.is_leaf)

    # Fan-out: how many operand slots each value fills
    fan_outs = Counter()
    for v in order:
        for p in v.node.operands:
            fan_outs[p.key] += 1
    counts = [fan_outs[v.key] for v in order]

    # Depth: longest operand chain from a leaf; post-order guarantees operands come first
    depth = {}
    for v in order:
        depth[v.key] = 1 + max((depth[p.key] for p in v.node.operands), default=-1)

    op_counter = Counter(v.node.op.value for v in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': n_leaves,
        'max_fan_out': max(counts),
        'avg_fan_out': float(np.mean(counts)),
        'depth': depth[root.key],
        'operations': dict(op_counter),
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output Value
        detailed: also list every node (graphs of up to 100 nodes)

    Returns:
        the same dict as get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST (root first)")
        print("="*70)
        for v in reversed(topological_order(root)):
            label = f" {v.name}" if v.name else ""
            if v.node.is_leaf:
                print(f"Node {v.id:4d}: {'leaf':6s} val={float(v.val):10.6f} "
                      f"grad={float(v.grad):10.6f}{label}")
            else:
                parent_info = ", ".join(f"Node{p.id}" for p in v.node.operands)
                print(f"Node {v.id:4d}: {v.node.op.value:6s} val={float(v.val):10.6f} "
                      f"grad={float(v.grad):10.6f} <- [{parent_info}]{label}")

    print("="*70 + "\n")

    return stats
