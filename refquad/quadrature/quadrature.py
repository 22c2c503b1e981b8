
from typing import Iterator, Optional, Tuple

import numpy as np

from .. import logger
from ..typing import Array
from .exceptions import DataIntegrityError, PreconditionError


class QuadratureRule():
    r"""A set of paired quadrature points and weights on a reference domain.

    The rule is a read-only value: both arrays are copied on construction and
    flagged as non-writeable, and `weights[i]` always belongs to `points[i]`.

    Parameters:
        weights (ArrayLike): Weights of shape (NQ, ).
        points (ArrayLike): Points of shape (NQ, GD). A flat sequence of
            length NQ is read as the nodes of a 1-D rule.
        GD (int, optional): Expected width of the points. A rule whose
            points have another width is rejected.
        dtype (dtype, optional): Floating type of the arrays, float64 by default.
    """
    def __init__(self, weights, points, *, GD: Optional[int]=None, dtype=None) -> None:
        self.dtype = dtype if dtype else np.float64
        ws = np.array(weights, dtype=self.dtype)
        ps = np.array(points, dtype=self.dtype)

        if ws.ndim != 1:
            raise DataIntegrityError(f"weights must be one-dimensional, got shape {ws.shape}.")
        if ps.ndim == 1 and ps.size == 0 and GD is not None:
            ps = ps.reshape(0, GD)
        if ps.ndim == 1:
            ps = ps[:, None]
        if ps.ndim != 2:
            raise DataIntegrityError(f"points must have shape (NQ, GD), got {ps.shape}.")
        if ps.shape[0] != ws.shape[0]:
            raise DataIntegrityError(f"got {ws.shape[0]} weights but {ps.shape[0]} points.")
        if GD is not None and ps.shape[1] != GD:
            raise DataIntegrityError(f"expected points of width {GD}, got {ps.shape[1]}.")

        ws.flags.writeable = False
        ps.flags.writeable = False
        self._weights = ws
        self._quadpts = ps

    @property
    def weights(self) -> Array:
        return self._weights

    @property
    def quadpts(self) -> Array:
        return self._quadpts

    points = quadpts

    def geo_dimension(self) -> int:
        return self._quadpts.shape[1]

    GD = property(geo_dimension)

    def number_of_quadrature_points(self) -> int:
        return self._weights.shape[0]

    def __len__(self) -> int:
        return self.number_of_quadrature_points()

    def __getitem__(self, i: int) -> Tuple[Array, float]:
        return self.get_quadrature_point_and_weight(i)

    def __iter__(self) -> Iterator[Tuple[Array, float]]:
        return zip(self._quadpts, self._weights)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuadratureRule):
            return NotImplemented
        return (self.GD == other.GD
                and np.array_equal(self._weights, other._weights)
                and np.array_equal(self._quadpts, other._quadpts))

    __hash__ = None

    def __repr__(self) -> str:
        quadpts = getattr(self, "_quadpts", None)
        if quadpts is None:
            return f"{self.__class__.__name__}(index={getattr(self, 'index', None)})"
        return f"{self.__class__.__name__}(GD={quadpts.shape[1]}, NQ={quadpts.shape[0]})"

    def get_quadrature_points_and_weights(self) -> Tuple[Array, Array]:
        """Get all quadrature points and weights in the formula.

        Returns:
            (Tensor, Tensor): Quadrature points and weights.
        """
        return self._quadpts, self._weights

    def get_quadrature_point_and_weight(self, i: int) -> Tuple[Array, float]:
        """Get the i-th quadrature point and weight.

        Parameters:
            i (int): Index of the quadrature point.

        Returns:
            (Tensor, float): A quadrature point and weight.
        """
        return self._quadpts[i, :], self._weights[i]


class Quadrature(QuadratureRule):
    r"""Base class for quadrature generators.

    Subclasses set `geo_dim`, the width of their points, and implement
    `make(index)` returning the points and weights of the rule of order
    `index`.
    """
    geo_dim: Optional[int] = None

    def __init__(self, index: int, *, dtype=None) -> None:
        self.index = check_order(index)
        self.dtype = dtype if dtype else np.float64
        quadpts, ws = self.make(self.index)
        super().__init__(ws, quadpts, GD=self.geo_dim, dtype=self.dtype)
        logger.debug(f"{self.__class__.__name__} of order {self.index} "
                     f"built with {len(self)} points.")

    def make(self, index: int) -> Tuple[Array, Array]:
        raise NotImplementedError


def check_order(order) -> int:
    """Return `order` as an int, raising PreconditionError unless it is an
    integer no less than 1."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise PreconditionError(f"order must be an integer, got {order!r}.")
    if order < 1:
        raise PreconditionError(f"order must be at least 1, got {order}.")
    return int(order)


def weights(rule: QuadratureRule) -> Array:
    return rule.weights


def points(rule: QuadratureRule) -> Array:
    return rule.points
