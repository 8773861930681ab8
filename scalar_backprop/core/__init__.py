# scalar_backprop/core/__init__.py

"""
Core public API for the scalar_backprop package.

Exports:
    Value             : Scalar node of the computation graph.
    Op, OpRecord      : How a Value was produced (leaf or binary op + operands).
    Tape              : Arena issuing Value ids in creation order.
    global_tape       : The default tape.
    use_tape          : Context manager to temporarily switch the active tape.
    new_leaf          : Create a leaf Value on the active tape.
    topological_order : Post-order of everything reachable from an output.
    backward          : Run a reverse pass and accumulate gradients.
    zero_grads        : Reset gradients of everything reachable from an output.
    grad, grads       : Convenience: gradients of a function at a point.
    value, gradient   : Convenience: read the value / gradient of a Value.
"""

from .node import Op, OpRecord
from .value import Value
from .tape import Tape, global_tape, use_tape, new_leaf
from .engine import topological_order, backward, zero_grads, local_partials
from .seeds import value, gradient, grad, grads, grads_list
