import math

import numpy as np
import pytest

from quant_aad.aad import (
    Graph,
    IndexOutOfRangeError,
    InvalidHandleError,
    MismatchedGraphError,
    accumulate,
)


def test_scenario_sum_of_squares_plus_exp():
    g = Graph()
    x, y = g.variables([2.0, 3.0])
    f = x ** 2 + y ** 2 + (x * y).exp()

    e6 = math.exp(6.0)
    assert f.value == pytest.approx(4.0 + 9.0 + e6, rel=1e-12)

    dfdx, dfdy = accumulate(f).wrt([x, y])
    assert f.value == pytest.approx(416.428793, rel=1e-6)
    assert dfdx == pytest.approx(2.0 * 2.0 + 3.0 * e6, rel=1e-12)
    assert dfdy == pytest.approx(2.0 * 3.0 + 2.0 * e6, rel=1e-12)


def test_shared_subexpression_accumulates():
    g = Graph()
    x, y = g.variables([1.5, -0.25])
    z = x + y
    f = z * z
    grad = accumulate(f)
    assert grad.wrt(x) == pytest.approx(2.0 * (1.5 - 0.25))
    assert grad.wrt(y) == pytest.approx(2.0 * (1.5 - 0.25))
    assert grad.wrt(z) == pytest.approx(2.0 * (1.5 - 0.25))


def test_same_variable_on_both_sides():
    g = Graph()
    x = g.variable(3.0)
    f = x * x * x
    assert accumulate(f).wrt(x) == pytest.approx(27.0)


def test_unused_leaf_has_zero_gradient():
    g = Graph()
    x, unused, y = g.variables([1.0, 10.0, 2.0])
    f = x * y
    assert accumulate(f).wrt(unused) == 0.0


def test_leaf_gradient_of_itself_is_one():
    g = Graph()
    x = g.variable(5.0)
    assert accumulate(x).wrt(x) == 1.0


def test_repeated_accumulate_is_identical():
    g = Graph()
    x, y = g.variables([0.3, 0.7])
    f = (x * y).sin() + x / y
    first = accumulate(f).as_array()
    second = accumulate(f).as_array()
    np.testing.assert_array_equal(first, second)
    assert len(g) == 6


def test_accumulate_for_different_outputs_is_order_insensitive():
    g = Graph()
    x, y = g.variables([1.2, 0.4])
    u = x * y
    v = x + y.exp()
    u_first = accumulate(u).wrt([x, y])
    v_second = accumulate(v).wrt([x, y])
    v_first = accumulate(v).wrt([x, y])
    u_second = accumulate(u).wrt([x, y])
    np.testing.assert_array_equal(u_first, u_second)
    np.testing.assert_array_equal(v_first, v_second)
    assert list(u_first) == pytest.approx([0.4, 1.2])
    assert list(v_first) == pytest.approx([1.0, math.exp(0.4)])


def test_intermediate_output():
    g = Graph()
    x, y = g.variables([2.0, 3.0])
    inner = x * y
    outer = inner.exp()
    grad = accumulate(inner)
    assert len(grad) == 4
    assert grad.wrt([y, x]).tolist() == [2.0, 3.0]
    assert grad.wrt(outer) == 0.0


def test_wrt_preserves_requested_order():
    g = Graph()
    a, b, c = g.variables([1.0, 2.0, 3.0])
    f = a + 2.0 * b + 3.0 * c
    grad = accumulate(f)
    assert grad.wrt([c, a, b]).tolist() == [3.0, 1.0, 2.0]
    assert grad[b] == 2.0


def test_seed_scales_adjoints():
    g = Graph()
    x = g.variable(4.0)
    f = x.sqrt()
    assert accumulate(f, seed=2.0).wrt(x) == pytest.approx(0.5)


def test_accumulate_does_not_mutate_graph():
    g = Graph()
    x = g.variable(1.0)
    f = x.exp() * x
    before = g.nodes
    accumulate(f)
    assert g.nodes == before


def test_wrt_foreign_variable():
    g1, g2 = Graph(), Graph()
    x = g1.variable(1.0)
    other = g2.variable(1.0)
    grad = accumulate(x * 2.0)
    with pytest.raises(IndexOutOfRangeError):
        grad.wrt(other)


def test_wrt_variable_created_after_accumulate():
    g = Graph()
    x = g.variable(1.0)
    grad = accumulate(x + 1.0)
    later = g.variable(5.0)
    with pytest.raises(IndexOutOfRangeError):
        grad.wrt(later)
    with pytest.raises(IndexOutOfRangeError):
        grad.wrt([x, later])


def test_wrt_after_clear():
    g = Graph()
    x = g.variable(1.0)
    grad = accumulate(x * 3.0)
    g.clear()
    with pytest.raises(InvalidHandleError):
        grad.wrt(x)
    fresh = g.variable(2.0)
    with pytest.raises(InvalidHandleError):
        grad.wrt(fresh)


def test_graph_accumulate_checks_ownership():
    g1, g2 = Graph(), Graph()
    x = g1.variable(1.0)
    with pytest.raises(MismatchedGraphError):
        g2.accumulate(x)
    assert g1.accumulate(x).wrt(x) == 1.0


def test_gradient_array_is_read_only():
    g = Graph()
    x = g.variable(1.0)
    grad = accumulate(x * x)
    copy = grad.as_array()
    copy[0] = 100.0
    assert grad.wrt(x) == pytest.approx(2.0)


def test_deep_chain_needs_no_recursion():
    g = Graph()
    x = g.variable(1.0)
    y = x
    for _ in range(20000):
        y = y * 1.0001
    assert accumulate(y).wrt(x) == pytest.approx(1.0001 ** 20000, rel=1e-9)


def test_graph_accumulate_rejects_non_variables():
    g = Graph()
    g.variable(1.0)
    with pytest.raises(TypeError):
        g.accumulate(1.0)
    with pytest.raises(TypeError):
        accumulate(1.0)
