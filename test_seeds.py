"""
End-to-end drivers: evaluate, forward derivative, Jacobian and
reverse-mode gradient of the example expressions.
"""

from functools import partial

import numpy as np
import pytest
from scipy.optimize import approx_fprime

from catad.ad import expressions as ex
from catad.ad.seeds import derivative, gradient, jacobian, jvp, reverse_derivative, value
from catad.vector.linmap import LinMap


mag_sqr = ex.mag_sqr
cos_sin_prod = ex.cos_sin_prod
sum_sqr3 = partial(ex.sum_sqr, n=3)
exp_half = partial(ex.exp_scale, c=0.5)


def sin_of_product(k, s):
    """(x, y) -> sin(x * y)"""
    return k.compose(k.sin(s), k.mul_c(s))


def test_value():
    assert value(mag_sqr, (3.0, 4.0)) == 25.0
    assert value(ex.sqr, 3.0) == 9.0
    assert value(exp_half, 2.0) == pytest.approx(np.e)
    assert value(ex.neg_sin_plus_cos, 0.0) == pytest.approx(-1.0)


def test_derivative_and_jvp():
    y, d = derivative(ex.sqr, 3.0)
    assert y == 9.0
    assert isinstance(d, LinMap)
    assert d(1.0) == pytest.approx(6.0)
    y, t = jvp(mag_sqr, (3.0, 4.0), (1.0, 1.0))
    assert y == 25.0
    assert t == pytest.approx(14.0)
    y, t = jvp(exp_half, 2.0, 1.0)
    assert t == pytest.approx(0.5 * np.e)


def test_jacobian():
    x, y = 0.3, 2.0
    v, J = jacobian(cos_sin_prod, (x, y))
    assert J.shape == (2, 2)
    np.testing.assert_allclose(J, [[-np.sin(x * y) * y, -np.sin(x * y) * x],
                                   [np.cos(x * y) * y, np.cos(x * y) * x]])
    _, J = jacobian(sum_sqr3, (1.0, -1.0, 0.5))
    np.testing.assert_allclose(J, [[2.0, -2.0, 1.0]])


@pytest.mark.parametrize("mode", ["cont", "dual"])
def test_gradient_modes(mode):
    y, g = gradient(mag_sqr, (3.0, 4.0), mode=mode)
    assert y == 25.0
    assert g == pytest.approx((6.0, 8.0))
    _, g = gradient(ex.neg_sin_plus_cos, 0.4, mode=mode)
    assert g == pytest.approx(-(np.cos(0.4) - np.sin(0.4)))
    _, g = gradient(mag_sqr, (3.0, 4.0), mode=mode, seed=2.0)
    assert g == pytest.approx((12.0, 16.0))


def test_gradient_matches_forward_jacobian(rng):
    x = tuple(rng.normal(size=2))
    _, J = jacobian(mag_sqr, x)
    for mode in ("cont", "dual"):
        _, g = gradient(mag_sqr, x, mode=mode)
        np.testing.assert_allclose(np.array(g), J[0])


def test_indexed_gradient_needs_direct_pullbacks():
    _, g = gradient(sum_sqr3, (1.0, 2.0, 3.0), mode="dual")
    assert g == pytest.approx((2.0, 4.0, 6.0))
    # the CPS category has no indexed operators
    with pytest.raises(TypeError):
        gradient(sum_sqr3, (1.0, 2.0, 3.0), mode="cont")


def test_reverse_derivative_pullback():
    x, y = 0.3, 2.0
    for mode in ("cont", "dual"):
        v, back = reverse_derivative(cos_sin_prod, (x, y), mode=mode)
        assert v == pytest.approx((np.cos(x * y), np.sin(x * y)))
        assert back((0.0, 1.0)) == pytest.approx(
            (np.cos(x * y) * y, np.cos(x * y) * x))


def test_errors():
    with pytest.raises(ValueError, match="Unknown reverse mode"):
        reverse_derivative(mag_sqr, (1.0, 2.0), mode="tape")
    with pytest.raises(ValueError, match="expects scalar output"):
        gradient(cos_sin_prod, (1.0, 2.0))


@pytest.mark.parametrize("mode", ["cont", "dual"])
def test_gradient_matches_bumping(mode):
    x0 = np.array([0.4, -1.3])
    bumped = approx_fprime(x0, lambda x: value(sin_of_product, tuple(x)), 1e-7)
    _, g = gradient(sin_of_product, tuple(x0), mode=mode)
    np.testing.assert_allclose(np.array(g), bumped, rtol=1e-5, atol=1e-6)
    x, y = x0
    np.testing.assert_allclose(np.array(g), [np.cos(x * y) * y, np.cos(x * y) * x])
