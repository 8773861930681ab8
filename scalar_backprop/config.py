"""
Configuration objects shared by the export and gradient-check helpers.
"""

from dataclasses import dataclass


@dataclass
class ExportConfig:
    """Layout of the Graphviz DOT text produced by `export.to_dot_string`."""
    graph_name: str = "G"
    rankdir: str = "LR"      # LR draws leaves on the left, output on the right
    precision: int = 4       # decimals for value and gradient in node labels
    shape: str = "record"


@dataclass
class GradCheckConfig:
    """
    Finite-difference cross-check settings.

    Attributes:
        eps: central-difference bump size
        rtol: relative tolerance passed to np.allclose
        atol: absolute tolerance passed to np.allclose
    """
    eps: float = 1e-6
    rtol: float = 1e-5
    atol: float = 1e-6
