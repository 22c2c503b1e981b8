
from .gauss_legendre import GaussLegendreQuadrature, gauss_legendre
from .tensor_product import outer_product


class HexahedronQuadrature(GaussLegendreQuadrature):
    r"""Tensor-product Gauss-Legendre rule on the cube [-1, 1]^3, with
    index**3 points. The last coordinate varies fastest."""
    geo_dim = 3

    def make(self, index: int):
        x, ws = gauss_legendre(index, dtype=self.dtype)
        return outer_product((x, x, x), (ws, ws, ws))
