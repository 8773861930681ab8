# scalar_backprop/core/engine.py
from __future__ import annotations
import numpy as np
from typing import List, Tuple

from .node import Op, OpRecord
from .value import Value


def topological_order(root: Value) -> List[Value]:
    """
    Post-order DFS over operand edges starting at `root`.

    Every Value reachable from `root` appears exactly once, after all of its
    operands. Reversed, the list starts at `root` and every Value comes after
    all Values that depend on it, which is the order the backward pass needs.

    Operands are explored left to right. The walk uses an explicit stack so
    long chains do not hit the interpreter recursion limit; the resulting
    order is the same as the recursive definition:

        visit(v):
            if v unseen: mark v; visit each operand; append v
    """
    order: List[Value] = []
    visited = {root.key}
    stack = [(root, iter(root.node.operands))]
    while stack:
        v, pending = stack[-1]
        for child in pending:
            if child.key not in visited:
                visited.add(child.key)
                stack.append((child, iter(child.node.operands)))
                break
        else:
            stack.pop()
            order.append(v)
    return order


def local_partials(record: OpRecord) -> Tuple:
    """
    Return (∂n/∂a, ∂n/∂b) for a binary record with operands (a, b),
    evaluated at the forward values stored on the operands.
    """
    op = record.op
    if op is Op.LEAF:
        raise ValueError("leaf values have no operands to differentiate against")
    a, b = record.operands
    if op is Op.ADD:
        return 1.0, 1.0
    elif op is Op.SUB:
        return 1.0, -1.0
    elif op is Op.MUL:
        return b.val, a.val
    elif op is Op.DIV:
        return 1.0 / b.val, -a.val / (b.val * b.val)
    raise ValueError(f"unsupported operation {op!r}")


def zero_grads(root: Value) -> List[Value]:
    """
    Set the gradient of every Value reachable from `root` to zero.
    Returns the topological order it computed, for reuse.
    """
    order = topological_order(root)
    for v in order:
        v.grad = np.float64(0.0)
    return order


def backward(root: Value, verbose: bool = False):
    """
    Run one reverse pass from `root`.

    Gradients of everything reachable from `root` are reset first, so running
    the pass twice gives the same result. Then `root.grad` is seeded with 1.0
    and, walking from the root toward the leaves, each Value pushes
    `n.grad * ∂n/∂operand` into both operands:

        a.grad += n.grad * ∂n/∂a
        b.grad += n.grad * ∂n/∂b

    Contributions are summed, which handles Values used more than once.
    Zero divisors are not special-cased: inf/nan flow through unchanged.
    """
    order = zero_grads(root)
    root.grad = np.float64(1.0)

    # Backward sweep
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for n in reversed(order):
            if n.node.is_leaf:
                continue  # nothing to propagate
            a, b = n.node.operands
            da, db = local_partials(n.node)
            a.grad = a.grad + n.grad * da
            b.grad = b.grad + n.grad * db

    if verbose:
        print(f"[backward] root id={root.id} val={float(root.val):.6g} "
              f"values={len(order)}")
