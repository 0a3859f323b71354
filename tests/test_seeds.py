import logging
import math

import numpy as np
import pytest

from quant_aad.aad import (
    CheckConfig,
    DomainError,
    Graph,
    central_difference,
    check_gradient,
    grad,
    grads,
    grads_list,
    value,
)
from quant_aad.aad.ops import exp, ln, norm_cdf, sqrt
from quant_aad.aad.ops import registry
from quant_aad.aad.ops.registry import Primitive, apply


def _norm_cdf(x):
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def _norm_pdf(x):
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def test_grad_single_input():
    assert grad(lambda x: x * x.sin(), 1.2) == pytest.approx(math.sin(1.2) + 1.2 * math.cos(1.2))


def test_grads_dict_keeps_key_order():
    result = grads(lambda v: v["s"] * ln(v["k"]), {"s": 2.0, "k": 3.0})
    assert list(result) == ["s", "k"]
    assert result["s"] == pytest.approx(math.log(3.0))
    assert result["k"] == pytest.approx(2.0 / 3.0)


def test_grads_list_example():
    f = lambda xs: xs[0] * xs[0] + 3 * xs[1]
    assert grads_list(f, [2.0, 4.0]) == [4.0, 3.0]


def test_constant_output_has_zero_gradient():
    assert grad(lambda x: 5.0, 1.0) == 0.0
    assert grads(lambda v: 2.0, {"a": 1.0, "b": 2.0}) == {"a": 0.0, "b": 0.0}
    assert grads_list(lambda xs: 1.0, [1.0, 2.0]) == [0.0, 0.0]


def test_vector_output_is_rejected():
    with pytest.raises(TypeError):
        grad(lambda x: [x, x], 1.0)


def test_value():
    g = Graph()
    assert value(g.variable(3.5)) == 3.5
    assert value(2.0) == 2.0


def test_black_scholes_call_greeks():
    s, k, r, sigma, t = 100.0, 95.0, 0.05, 0.2, 1.0

    def call(v):
        vol_sqrt_t = v["sigma"] * sqrt(v["t"])
        d1 = (ln(v["s"] / k) + (v["r"] + 0.5 * v["sigma"] * v["sigma"]) * v["t"]) / vol_sqrt_t
        d2 = d1 - vol_sqrt_t
        return v["s"] * norm_cdf(d1) - k * exp(-v["r"] * v["t"]) * norm_cdf(d2)

    greeks = grads(call, {"s": s, "r": r, "sigma": sigma, "t": t})

    d1 = (math.log(s / k) + (r + 0.5 * sigma ** 2) * t) / (sigma * math.sqrt(t))
    d2 = d1 - sigma * math.sqrt(t)
    assert greeks["s"] == pytest.approx(_norm_cdf(d1), rel=1e-10)
    assert greeks["sigma"] == pytest.approx(s * _norm_pdf(d1) * math.sqrt(t), rel=1e-10)
    assert greeks["r"] == pytest.approx(k * t * math.exp(-r * t) * _norm_cdf(d2), rel=1e-10)
    theta = -(s * _norm_pdf(d1) * sigma / (2.0 * math.sqrt(t))
              + r * k * math.exp(-r * t) * _norm_cdf(d2))
    assert -greeks["t"] == pytest.approx(theta, rel=1e-10)


def test_central_difference():
    numeric = central_difference(lambda v: v[0] * v[1], [2.0, 3.0])
    np.testing.assert_allclose(numeric, [3.0, 2.0], rtol=1e-8)


def test_check_gradient_scenario():
    f = lambda v: v[0] ** 2 + v[1] ** 2 + (v[0] * v[1]).exp()
    check = check_gradient(f, [2.0, 3.0])
    assert check.passed
    assert check.max_rel_error < 1e-6


def test_check_gradient_detects_wrong_partial(monkeypatch):
    wrong_sin = Primitive("wrong_sin", 1, np.sin, lambda a: (np.sin(a),))
    monkeypatch.setitem(registry._CATALOG, "wrong_sin", wrong_sin)
    check = check_gradient(lambda v: apply(wrong_sin, v[0]), [0.7])
    assert not check.passed
    assert check.analytic[0] == pytest.approx(math.sin(0.7))
    assert check.numeric[0] == pytest.approx(math.cos(0.7), rel=1e-6)


def test_check_config_validation():
    with pytest.raises(ValueError):
        CheckConfig(step=0.0)
    with pytest.raises(ValueError):
        CheckConfig(rel_tol=-1.0)


def test_domain_rejection_is_logged(caplog):
    g = Graph()
    x = g.variable(-1.0)
    with caplog.at_level(logging.DEBUG, logger="quant_aad"):
        with pytest.raises(DomainError):
            ln(x)
    assert any("rejected ln" in record.getMessage() for record in caplog.records)
