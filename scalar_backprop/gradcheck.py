"""
Finite-difference cross-check of reverse-mode gradients.

Formulas:
    ∂f/∂x_i ≈ [f(x + ε e_i) - f(x - ε e_i)] / (2ε)

Each bumped evaluation runs on its own fresh tape, so the check never adds
Values to the caller's graph.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import GradCheckConfig
from .core.seeds import grads_list, value
from .core.tape import use_tape
from .core.value import Value


@dataclass
class GradCheckResult:
    analytic: np.ndarray
    numeric: np.ndarray
    max_abs_err: float
    ok: bool


def _evaluate(f: Callable[[List[Value]], Value], xs: Sequence[float]) -> float:
    with use_tape():
        return float(value(f([Value(x) for x in xs])))


def numerical_grads(f: Callable[[List[Value]], Value], x0: Sequence[float],
                    eps: float = 1e-6) -> np.ndarray:
    """Central-difference gradient of f at x0, one pair of evaluations per input."""
    x0 = np.asarray(x0, dtype=np.float64)
    out = np.zeros_like(x0)
    for i in range(x0.size):
        x_up = x0.copy(); x_up[i] += eps
        x_dn = x0.copy(); x_dn[i] -= eps
        out[i] = (_evaluate(f, x_up) - _evaluate(f, x_dn)) / (2.0 * eps)
    return out


def check_grads(f: Callable[[List[Value]], Value], x0: Sequence[float],
                config: Optional[GradCheckConfig] = None,
                verbose: bool = False) -> GradCheckResult:
    """
    Compare the backward-pass gradient of f at x0 against central differences.

    Args:
        f: function taking a list of Values and returning the output Value
        x0: input point
        config: tolerances and bump size (GradCheckConfig defaults if omitted)
        verbose: print a per-input comparison table

    Returns:
        GradCheckResult with both gradients and whether they agree
    """
    cfg = config or GradCheckConfig()
    analytic = np.array([float(g) for g in grads_list(f, list(x0))], dtype=np.float64)
    numeric = numerical_grads(f, x0, eps=cfg.eps)
    err = np.abs(analytic - numeric)
    max_abs_err = float(err.max()) if err.size else 0.0
    ok = bool(np.allclose(analytic, numeric, rtol=cfg.rtol, atol=cfg.atol))

    if verbose:
        print(f"{'input':>6s} {'analytic':>14s} {'numeric':>14s} {'abs err':>10s}")
        for i, (a, n, e) in enumerate(zip(analytic, numeric, err)):
            print(f"{i:6d} {a:14.8f} {n:14.8f} {e:10.2e}")
        print(f"max abs err = {max_abs_err:.2e}  ->  {'OK' if ok else 'MISMATCH'}")

    return GradCheckResult(analytic=analytic, numeric=numeric,
                           max_abs_err=max_abs_err, ok=ok)
