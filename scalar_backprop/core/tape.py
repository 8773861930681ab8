# scalar_backprop/core/tape.py
from __future__ import annotations
import itertools
from contextlib import contextmanager
from typing import Optional

from .node import Op, OpRecord


class Tape:
    """
    Arena that issues Value ids in creation order.

    The tape only counts the Values it issued; it holds no reference to them,
    so a graph is freed once the caller drops its last handle.

    Each tape owns its own id counter, so ids are sequential per tape. The
    `serial` distinguishes tapes from one another; together with the id it
    forms the identity key used during traversal.
    """
    _serials = itertools.count()

    def __init__(self):
        self.serial = next(Tape._serials)
        self._issued = 0
        self._ids = itertools.count()

    def __len__(self):
        return self._issued

    def __repr__(self):
        return f"Tape(serial={self.serial}, values={self._issued})"

    def reset(self):
        """Restart the issued count. Ids keep counting so old keys never collide."""
        self._issued = 0

    def register(self, v) -> int:
        """Stamp `v` with the next id and count it as issued."""
        v.id = next(self._ids)
        v.tape_serial = self.serial
        self._issued += 1
        return v.id

    def new_leaf(self, val, *, name: Optional[str] = None):
        from .value import Value  # local import to avoid cycles
        return Value(val, name=name, tape=self)

    def record(self, op: Op, a, b, val, *, name: Optional[str] = None):
        """
        Create the Value produced by the binary primitive `op` applied to (a, b).
        `val` is the already computed forward result.
        """
        from .value import Value
        return Value(val, name=name, node=OpRecord(op, (a, b)), tape=self)


# Global default tape
global_tape = Tape()


def new_leaf(val, *, name: Optional[str] = None):
    """Create a leaf Value on the active tape."""
    return global_tape.new_leaf(val, name=name)


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily use a fresh tape:
        with use_tape():
            ... build computation ...
            backward(y)
    """
    from . import tape as _tape_mod  # local import to avoid cycles
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape or Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
