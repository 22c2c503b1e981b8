
import pytest
import numpy as np

from refquad.quadrature import (
    GaussLegendreQuadrature,
    QuadrangleQuadrature,
    HexahedronQuadrature,
    TensorProductQuadrature,
    DataIntegrityError,
    integrate,
)

from quadrature_data import *


def monomial_integral(k):
    return 0.0 if k % 2 else 2/(k + 1)


class TestQuadrangleQuadrature:

    @pytest.mark.parametrize("data", square_data)
    def test_points_and_weights(self, data):
        qf = QuadrangleQuadrature(data['order'])
        bcs, ws = qf.get_quadrature_points_and_weights()
        np.testing.assert_allclose(bcs, data['points'], atol=1e-14)
        np.testing.assert_allclose(ws, data['weights'], atol=1e-14)

    @pytest.mark.parametrize("order", range(1, 8))
    def test_number_and_measure(self, order):
        qf = QuadrangleQuadrature(order)
        assert qf.GD == 2
        assert len(qf) == order**2
        np.testing.assert_allclose(qf.weights.sum(), 4.0, rtol=1e-13)

    @pytest.mark.parametrize("order", [1, 2, 3, 4])
    def test_exactness(self, order):
        qf = QuadrangleQuadrature(order)
        for a in range(2*order):
            for b in range(2*order):
                val = integrate(qf, lambda p: p[0]**a * p[1]**b)
                exact = monomial_integral(a)*monomial_integral(b)
                np.testing.assert_allclose(val, exact, atol=1e-12)


class TestHexahedronQuadrature:

    @pytest.mark.parametrize("data", cube_data)
    def test_points_and_weights(self, data):
        qf = HexahedronQuadrature(data['order'])
        bcs, ws = qf.get_quadrature_points_and_weights()
        np.testing.assert_allclose(bcs, data['points'], atol=1e-14)
        np.testing.assert_allclose(ws, data['weights'], atol=1e-14)

    @pytest.mark.parametrize("order", range(1, 7))
    def test_number_and_measure(self, order):
        qf = HexahedronQuadrature(order)
        assert qf.GD == 3
        assert len(qf) == order**3
        np.testing.assert_allclose(qf.weights.sum(), 8.0, rtol=1e-13)

    def test_last_axis_fastest(self):
        x = GaussLegendreQuadrature(3).quadpts[:, 0]
        ws = GaussLegendreQuadrature(3).weights
        qf = HexahedronQuadrature(3)
        for i in range(3):
            for j in range(3):
                for k in range(3):
                    n = 9*i + 3*j + k
                    np.testing.assert_array_equal(qf.quadpts[n], [x[i], x[j], x[k]])
                    np.testing.assert_allclose(qf.weights[n], ws[i]*ws[j]*ws[k], rtol=1e-15)

    def test_exactness(self):
        qf = HexahedronQuadrature(3)
        val = integrate(qf, lambda p: p[0]**4 * p[1]**2 * p[2]**5 + p[2]**2)
        np.testing.assert_allclose(val, 4*2/3, atol=1e-13)


class TestTensorProductQuadrature:

    def test_mixed_orders(self):
        q0 = GaussLegendreQuadrature(2)
        q1 = GaussLegendreQuadrature(3)
        qf = TensorProductQuadrature((q0, q1))
        assert qf.GD == 2
        assert len(qf) == 6
        np.testing.assert_allclose(qf.quadpts[:3, 0], q0.quadpts[0, 0])
        np.testing.assert_allclose(qf.quadpts[:3, 1], q1.quadpts[:, 0])
        np.testing.assert_allclose(qf.weights.sum(), 4.0, rtol=1e-14)

    def test_repeat(self):
        qf = TensorProductQuadrature(GaussLegendreQuadrature(4), n=2)
        assert qf == QuadrangleQuadrature(4)

    def test_not_one_dimensional(self):
        with pytest.raises(DataIntegrityError):
            TensorProductQuadrature((QuadrangleQuadrature(2), GaussLegendreQuadrature(2)))
