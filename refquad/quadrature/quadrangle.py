
from .gauss_legendre import GaussLegendreQuadrature, gauss_legendre
from .tensor_product import outer_product


class QuadrangleQuadrature(GaussLegendreQuadrature):
    r"""Tensor-product Gauss-Legendre rule on the square [-1, 1]^2, with
    index**2 points."""
    geo_dim = 2

    def make(self, index: int):
        x, ws = gauss_legendre(index, dtype=self.dtype)
        return outer_product((x, x), (ws, ws))
