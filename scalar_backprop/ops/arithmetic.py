# scalar_backprop/ops/arithmetic.py
import numpy as np
from ..core.node import Op
from ..core.value import Value
from ..core import tape as tape_mod  # Use module access for use_tape() compatibility


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a constant leaf on the active tape."""
    return x if isinstance(x, Value) else tape_mod.global_tape.new_leaf(x)


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - computes out.val = f(x.val, y.val)
      - records (op, x, y) on the active tape
    Local partials are not stored here; the engine derives them from `op`.
    Overflow and zero divisors give IEEE inf/nan without a warning.
    """
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = f(x.val, y.val)
    return tape_mod.global_tape.record(op, x, y, out)


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, Op.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)
def div(x, y): return _binary(x, y, lambda a, b: a / b, Op.DIV)
