
from typing import Any

import numpy as np

from ..typing import Integrand
from .exceptions import PreconditionError
from .quadrature import QuadratureRule


def integrate(qf: QuadratureRule, f: Integrand, *, vectorized: bool=False) -> Any:
    r"""Approximate the integral of `f` over the domain of a quadrature rule.

    Computes $\sum_i w_i f(x_i)$. The values of `f` may be scalars or arrays
    of any shape; anything supporting multiplication by a float and addition
    works, since the sum is seeded with the first term.

    Parameters:
        qf (QuadratureRule): The quadrature rule, with at least one point.
        f (Callable): Called with a single point of shape (GD, ). With
            `vectorized=True` it is called once with all points, shape
            (NQ, GD), and must return values with a leading NQ axis; a
            scalar return value is taken as constant over the points.

    Returns:
        The weighted sum, of the type returned by `f`.

    Raises:
        PreconditionError: If the rule has no points, or a vectorized `f`
            returns values without a leading NQ axis.
    """
    bcs, ws = qf.get_quadrature_points_and_weights()
    NQ = ws.shape[0]
    if NQ == 0:
        raise PreconditionError("can not integrate with a quadrature rule of no points.")

    if vectorized:
        val = np.asarray(f(bcs))
        if val.ndim == 0:
            val = np.broadcast_to(val, (NQ, ))
        elif val.shape[0] != NQ:
            raise PreconditionError(f"vectorized integrand must return values of shape "
                                    f"(NQ, ...) with NQ={NQ}, got {val.shape}.")
        return np.einsum('q, q...->...', ws, val)

    val = ws[0] * f(bcs[0])
    for w, x in zip(ws[1:], bcs[1:]):
        val = val + w * f(x)
    return val
