
from typing import Sequence, Tuple

import numpy as np

from ..typing import Array
from .exceptions import DataIntegrityError
from .quadrature import QuadratureRule


def outer_product(nodes: Sequence[Array], ws: Sequence[Array]) -> Tuple[Array, Array]:
    """Cartesian product of 1-D node and weight arrays.

    Points are enumerated lexicographically with the first axis varying
    slowest, so for three axes the point with index `(i, j, k)` sits at
    `i*n1*n2 + j*n2 + k`.
    """
    n = len(nodes)
    grids = np.meshgrid(*nodes, indexing='ij')
    quadpts = np.stack([g.reshape(-1) for g in grids], axis=-1)

    # 构造 einsum 运算字符串, 例如 'a, b, c->abc'
    s0 = 'abcdefghij'
    s = ', '.join(s0[:n]) + '->' + s0[:n]
    weights = np.einsum(s, *ws).reshape(-1)
    return quadpts, weights


class TensorProductQuadrature(QuadratureRule):
    r"""Tensor product of a sequence of 1-D quadrature rules.

    Parameters:
        qfs (QuadratureRule | Sequence[QuadratureRule]): The 1-D rules, one
            per axis. A single rule is repeated `n` times.
        n (int, optional): Number of axes when `qfs` is a single rule.
    """
    def __init__(self, qfs, n=None, *, dtype=None):
        if n is not None:
            qfs = n*(qfs, )
        nodes = []
        ws = []
        for qf in qfs:
            if qf.GD != 1:
                raise DataIntegrityError(f"expected 1-D rules, got a rule with GD={qf.GD}.")
            bcs, w = qf.get_quadrature_points_and_weights()
            nodes.append(bcs[:, 0])
            ws.append(w)
        quadpts, weights = outer_product(nodes, ws)
        super().__init__(weights, quadpts, GD=len(nodes), dtype=dtype)
