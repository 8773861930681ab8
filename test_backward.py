"""
Reverse pass: seeding, chain rule and gradient accumulation.
"""

import math

import pytest

from scalar_backprop import Value, backward, gradient, local_partials, use_tape, value, zero_grads


def test_leaf_root_gradient_is_one():
    with use_tape():
        for v in (0.0, -2.5, 7.0):
            x = Value(v)
            backward(x)
            assert gradient(x) == 1.0


def test_add():
    with use_tape():
        x = Value(-3.0)
        w = Value(11.0)
        y = x + w
        backward(y)
        assert x.grad == 1.0
        assert w.grad == 1.0


def test_sub():
    with use_tape():
        x = Value(4.0)
        w = Value(9.0)
        y = x - w
        backward(y)
        assert x.grad == 1.0
        assert w.grad == -1.0


def test_mul():
    with use_tape():
        x = Value(3.0)
        w = Value(-4.0)
        y = x * w
        backward(y)
        assert x.grad == w.val
        assert w.grad == x.val


def test_div():
    with use_tape():
        a = Value(6.0)
        b = Value(3.0)
        c = a / b
        backward(c)
        assert a.grad == pytest.approx(1 / 3)
        assert b.grad == pytest.approx(-6 / 9)


def test_multi_use_accumulates():
    with use_tape():
        x = Value(5.0)
        y = x + x
        backward(y)
        assert x.grad == 2.0


def test_square_via_mul():
    with use_tape():
        x = Value(3.0)
        y = x * x
        backward(y)
        assert x.grad == 6.0


def test_chained():
    with use_tape():
        x = Value(5.0)
        w = Value(2.0)
        y = x + w
        z = y * 2.0
        backward(z)
        assert x.grad == 2.0
        assert w.grad == 2.0
        assert value(z) == 14.0
        assert y.grad == 2.0
        assert z.grad == 1.0


def test_diamond_path_summation():
    # z = (x*w) + (x/w); dz/dx = w + 1/w, dz/dw = x - x/w^2
    with use_tape():
        x = Value(2.0)
        w = Value(4.0)
        z = x * w + x / w
        backward(z)
        assert x.grad == pytest.approx(4.0 + 0.25)
        assert w.grad == pytest.approx(2.0 - 2.0 / 16.0)


def test_idempotent():
    with use_tape():
        x = Value(1.5)
        w = Value(-0.5)
        z = (x * w - x) / (w + 3.0)
        backward(z)
        first = (x.grad, w.grad)
        backward(z)
        assert (x.grad, w.grad) == first


def test_rerun_from_different_root_resets():
    with use_tape():
        x = Value(2.0)
        y = x * 3.0
        z = y + x
        backward(z)
        assert x.grad == 4.0
        backward(y)
        assert x.grad == 3.0
        assert y.grad == 1.0


def test_value_backward_method():
    with use_tape():
        x = Value(2.0)
        y = x * x * x
        y.backward()
        assert x.grad == 12.0


def test_zero_grads():
    with use_tape():
        x = Value(2.0)
        y = x * 5.0
        backward(y)
        order = zero_grads(y)
        assert all(v.grad == 0.0 for v in order)
        assert order[-1] is y


def test_division_by_zero_propagates():
    with use_tape():
        a = Value(1.0)
        b = Value(0.0)
        c = a / b
        backward(c)
        assert math.isinf(c.val)
        assert math.isinf(a.grad)
        assert math.isinf(b.grad) or math.isnan(b.grad)


def test_nan_flows_downstream():
    with use_tape():
        a = Value(0.0)
        b = Value(0.0)
        x = Value(2.0)
        n = a / b
        y = n * x
        backward(y)
        assert math.isnan(y.val)
        assert math.isnan(x.grad)


def test_local_partials_table():
    with use_tape():
        a = Value(6.0)
        b = Value(3.0)
        assert local_partials((a + b).node) == (1.0, 1.0)
        assert local_partials((a - b).node) == (1.0, -1.0)
        assert local_partials((a * b).node) == (3.0, 6.0)
        da, db = local_partials((a / b).node)
        assert da == pytest.approx(1 / 3)
        assert db == pytest.approx(-6 / 9)
        with pytest.raises(ValueError):
            local_partials(a.node)


def test_verbose_prints(capsys):
    with use_tape():
        x = Value(1.0)
        y = x + 2.0
        backward(y, verbose=True)
    out = capsys.readouterr().out
    assert "[backward]" in out and "values=3" in out


if __name__ == "__main__":
    test_leaf_root_gradient_is_one()
    test_add()
    test_mul()
    test_div()
    test_multi_use_accumulates()
    test_chained()
    test_idempotent()
    print("backward OK")
