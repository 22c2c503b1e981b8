
import pytest
import numpy as np

from refquad.quadrature import GaussLegendreQuadrature, PreconditionError, integrate
from refquad.quadrature.gauss_legendre import gauss_legendre

from quadrature_data import *


class TestGaussLegendreQuadrature:

    @pytest.mark.parametrize("data", line_data)
    def test_points_and_weights(self, data):
        qf = GaussLegendreQuadrature(data['order'])
        bcs, ws = qf.get_quadrature_points_and_weights()

        assert qf.GD == 1
        assert qf.number_of_quadrature_points() == data['order']
        np.testing.assert_allclose(bcs, data['points'], atol=1e-14)
        np.testing.assert_allclose(ws, data['weights'], atol=1e-14)

    @pytest.mark.parametrize("order", range(1, 12))
    def test_weight_sum(self, order):
        qf = GaussLegendreQuadrature(order)
        assert len(qf) == order
        assert qf.quadpts.shape == (order, 1)
        np.testing.assert_allclose(qf.weights.sum(), 2.0, rtol=1e-13)

    @pytest.mark.parametrize("order", range(1, 9))
    def test_exactness(self, order):
        qf = GaussLegendreQuadrature(order)
        for k in range(2*order):
            exact = 0.0 if k % 2 else 2/(k + 1)
            val = integrate(qf, lambda x: x[0]**k)
            np.testing.assert_allclose(val, exact, atol=1e-13)

    def test_nodes_ascending(self):
        x, w = gauss_legendre(6)
        assert np.all(np.diff(x) > 0)
        np.testing.assert_allclose(x, -x[::-1], atol=1e-15)
        np.testing.assert_allclose(w, w[::-1], atol=1e-15)

    def test_dtype(self):
        qf = GaussLegendreQuadrature(3, dtype=np.float32)
        assert qf.weights.dtype == np.float32
        assert qf.quadpts.dtype == np.float32

    @pytest.mark.parametrize("order", [0, -2, 1.5, '3', True])
    def test_invalid_order(self, order):
        with pytest.raises(PreconditionError):
            GaussLegendreQuadrature(order)
