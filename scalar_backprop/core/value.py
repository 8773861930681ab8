# scalar_backprop/core/value.py
from __future__ import annotations
import numpy as np
from typing import Any, Optional

from .node import LEAF, OpRecord


class Value:
    """
    A scalar node in the computation graph.

    Attributes
    ----------
    val : np.float64
        Forward value. Stored as a NumPy scalar so division by zero yields
        inf/nan instead of raising.
    grad : np.float64
        Gradient accumulator. Zero at creation; written only by the backward pass.
    node : OpRecord
        How this value was produced (LEAF, or a binary op and its operands).
    id : int
        Sequential id issued by the owning tape.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    def __init__(self, val: Any, *, name: Optional[str] = None,
                 node: OpRecord = LEAF, tape=None):
        # Only plain real scalars are accepted
        if isinstance(val, (bool, np.bool_)) or \
                not isinstance(val, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"Value only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(val)}"
            )
        self.val = np.float64(val)
        self.grad = np.float64(0.0)
        self.node = node
        self.name = name

        if tape is None:
            from . import tape as tape_mod
            tape = tape_mod.global_tape
        self.id: int = -1
        self.tape_serial: int = -1
        tape.register(self)

    @property
    def key(self):
        """Identity used to visit each Value once during traversal."""
        return (self.tape_serial, self.id)

    @property
    def op(self):
        return self.node.op

    @property
    def operands(self):
        return self.node.operands

    def __repr__(self):
        return (f"Value(val={float(self.val)!r}, grad={float(self.grad)!r}, "
                f"op={self.node.op.value!r}, id={self.id}, name={self.name!r})")

    def backward(self, verbose: bool = False):
        """Run a backward pass with this value as the output."""
        from .engine import backward
        backward(self, verbose=verbose)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)
