
import numpy as np
from scipy.special import roots_jacobi

from .quadrature import Quadrature


class StroudQuadrature(Quadrature):
    r"""Collapsed-coordinate Gauss rule on the reference triangle
    (0, 0)-(1, 0)-(0, 1), available for any order.

    The square [0, 1]^2 is mapped onto the triangle by the Duffy transform
    and integrated with a Gauss-Jacobi rule in the collapsed direction and a
    Gauss-Legendre rule in the other. The rule has index**2 points, is exact
    for polynomials of total degree up to 2*index - 1, and its weights sum
    to the reference area 1/2.
    """
    geo_dim = 2

    def make(self, index: int):
        d = 2
        points = []
        weights = []
        for i in range(1, d+1):
            p, w, s = roots_jacobi(index, d-i, 0, mu=True)
            points.append((p+1)/2)
            weights.append(w/s)
        points = np.meshgrid(*points, indexing='ij')
        weights = np.meshgrid(*weights, indexing='ij')

        points = np.array([p.flatten() for p in points]).T
        weights = np.prod([w.flatten() for w in weights], axis=0)
        bcs = self._to_simplex(points)
        return bcs[:, 1:].astype(self.dtype), 0.5*weights.astype(self.dtype)

    @staticmethod
    def _to_simplex(points):
        d = points.shape[-1]
        bcs = np.zeros(points.shape[:-1]+(d+1, ), dtype=np.float64)
        bcs[:, 0] = points[:, 0]
        for i in range(1, d):
            bcs[:, i] = points[:, i] * (1-bcs[:, :i].sum(axis=-1))
        bcs[:, d] = 1-bcs[:, :d].sum(axis=-1)
        return bcs
