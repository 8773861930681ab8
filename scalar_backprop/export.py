"""
Graphviz DOT export of a computation graph.

Each Value reachable from the output becomes one record node showing its id,
value, gradient and producing operation. Each operand slot becomes one edge
from the operand to the result, labelled with the operation symbol.
"""

import os
from typing import Optional

from .config import ExportConfig
from .core.engine import topological_order


def _fmt(x, precision: int) -> str:
    return f"{float(x):.{precision}f}"


def _escape(text: str) -> str:
    # Characters with meaning inside a record label
    for ch in '\\"{}|<>':
        text = text.replace(ch, "\\" + ch)
    return text


def to_dot_string(root, config: Optional[ExportConfig] = None) -> str:
    """Generate DOT text for the graph rooted at `root`."""
    cfg = config or ExportConfig()
    order = topological_order(root)

    # Position in the order gives each node a unique DOT name, even across tapes
    dot_name = {v.key: f"N{i}" for i, v in enumerate(order)}

    lines = [f"digraph {cfg.graph_name} {{", f'  rankdir="{cfg.rankdir}";']
    for v in order:
        fields = [f"id={v.id}"]
        if v.name:
            fields.append(f"name={_escape(v.name)}")
        fields.append(f"data={_fmt(v.val, cfg.precision)}")
        fields.append(f"grad={_fmt(v.grad, cfg.precision)}")
        fields.append(f"op={v.node.op.value}")
        label = " | ".join(fields)
        lines.append(f'  {dot_name[v.key]} [shape={cfg.shape}, label="{{ {label} }}"];')

        for p in v.node.operands:
            lines.append(
                f'  {dot_name[p.key]} -> {dot_name[v.key]} [label="{v.node.op.symbol}"];'
            )

    lines.append("}")
    return "\n".join(lines) + "\n"


def export_graph(root, destination, config: Optional[ExportConfig] = None):
    """
    Write the DOT text for `root` to `destination`.

    Args:
        root: output Value
        destination: file path (str or os.PathLike) or a writable text stream
        config: optional ExportConfig

    Raises:
        OSError: when the destination cannot be written
    """
    dot = to_dot_string(root, config)
    if isinstance(destination, (str, os.PathLike)):
        with open(destination, "w", encoding="utf-8") as f:
            f.write(dot)
    else:
        destination.write(dot)
