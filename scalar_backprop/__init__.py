# scalar_backprop/__init__.py
# Reverse-mode automatic differentiation over scalar values

from .core.node import Op, OpRecord
from .core.value import Value
from .core.tape import Tape, global_tape, use_tape, new_leaf
from .core.engine import (
    topological_order,
    backward,
    zero_grads,
    local_partials,
)
from .core.seeds import value, gradient, grad, grads, grads_list
from .core.graph_utils import get_graph_stats, print_graph_summary

# Operators on Value dispatch here
from .ops.arithmetic import add, sub, mul, div

from .config import ExportConfig, GradCheckConfig
from .export import to_dot_string, export_graph
from .gradcheck import numerical_grads, check_grads, GradCheckResult

__all__ = [
    # Core
    'Value',
    'Op',
    'OpRecord',
    'Tape',
    'global_tape',
    'use_tape',
    'new_leaf',
    # Ops
    'add',
    'sub',
    'mul',
    'div',
    # Engine
    'topological_order',
    'backward',
    'zero_grads',
    'local_partials',
    # Seeds
    'value',
    'gradient',
    'grad',
    'grads',
    'grads_list',
    # Inspection / export
    'get_graph_stats',
    'print_graph_summary',
    'to_dot_string',
    'export_graph',
    'ExportConfig',
    # Gradient check
    'numerical_grads',
    'check_grads',
    'GradCheckResult',
    'GradCheckConfig',
]
