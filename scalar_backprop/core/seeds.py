# scalar_backprop/core/seeds.py

# Functional entry points: build f on a private tape, run one backward pass,
# hand back plain gradients.
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .value import Value
from .tape import use_tape
from .engine import backward


def value(x: Any) -> Any:
    """Forward value of `x`, or `x` itself when it is already a number."""
    return x.val if isinstance(x, Value) else x


def gradient(x: Value):
    """Return the gradient accumulated on `x` by the last backward pass."""
    return x.grad


def _ensure_value(v: Any, *, name: str) -> Value:
    """Named input leaf for a plain number; existing Values are used as given."""
    return v if isinstance(v, Value) else Value(v, name=name)


def _as_output(y: Any) -> Value:
    # f may return a constant that does not depend on its inputs
    return y if isinstance(y, Value) else Value(y, name="y")


def grad(f: Callable[[Value], Value], x0: float):
    """
    Derivative of y=f(x) at x0 (single input).
    Runs one backward pass within a fresh, isolated tape.
    """
    with use_tape():
        x = _ensure_value(x0, name="x")
        y = _as_output(f(x))
        backward(y)
        return x.grad


def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, Any]:
    """
    Partials of y=f(inputs) for named inputs.
    Each input becomes a leaf named after its key; one backward pass fills them all.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a Value
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: gradient}, keyed and ordered like `inputs`
    """
    with use_tape():
        vars_v: Dict[str, Value] = {
            k: _ensure_value(v, name=k) for k, v in inputs.items()
        }
        y = _as_output(f(vars_v))
        backward(y)
        return {k: vars_v[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[Any]:
    """
    Positional form of grads(): leaves are named x0, x1, ... and the partials
    come back as a list aligned with `x0_list`.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs: List[Value] = [
            _ensure_value(v, name=f"x{i}") for i, v in enumerate(x0_list)
        ]
        y = _as_output(f(xs))
        backward(y)
        return [x.grad for x in xs]
