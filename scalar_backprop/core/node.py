# scalar_backprop/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class Op(Enum):
    """Closed set of ways a Value can be produced."""
    LEAF = "leaf"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def arity(self) -> int:
        return 0 if self is Op.LEAF else 2


_SYMBOLS = {
    Op.LEAF: "",
    Op.ADD: "+",
    Op.SUB: "−",
    Op.MUL: "×",
    Op.DIV: "÷",
}


@dataclass(frozen=True, eq=False)
class OpRecord:
    """
    How a Value was produced.

    Attributes
    ----------
    op : Op
        Operation tag (LEAF for inputs and constants).
    operands : Tuple[Value, ...]
        Operand Values in the order the caller supplied them. Empty for LEAF,
        exactly two for the binary ops. Order matters for SUB and DIV.
    """
    op: Op
    operands: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.op, Op):
            raise ValueError(f"OpRecord.op must be an Op, got {self.op!r}")
        if len(self.operands) != self.op.arity:
            raise ValueError(
                f"{self.op.value} expects {self.op.arity} operand(s), "
                f"got {len(self.operands)}"
            )

    @property
    def is_leaf(self) -> bool:
        return self.op is Op.LEAF


LEAF = OpRecord(Op.LEAF)
