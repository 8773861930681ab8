# scalar_backprop/ops/__init__.py

# Convenience re-exports so users can do: from scalar_backprop.ops import mul, ...
from .arithmetic import add, sub, mul, div

__all__ = ["add", "sub", "mul", "div"]
