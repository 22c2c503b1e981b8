
from typing import Tuple

import numpy as np

from ..typing import Array
from .quadrature import Quadrature, check_order


def gauss_legendre(order: int, dtype=None) -> Tuple[Array, Array]:
    """Nodes and weights of the `order`-point Gauss-Legendre rule on [-1, 1].

    The rule integrates polynomials of degree up to 2*order - 1 exactly.
    Nodes are returned in ascending order.
    """
    order = check_order(order)
    dtype = dtype if dtype else np.float64
    x, w = np.polynomial.legendre.leggauss(order)
    return x.astype(dtype), w.astype(dtype)


class GaussLegendreQuadrature(Quadrature):
    r"""Gauss-Legendre rule on the reference line [-1, 1].

    Points have shape (index, 1).
    """
    geo_dim = 1

    def make(self, index: int):
        x, ws = gauss_legendre(index, dtype=self.dtype)
        return x[:, None], ws
