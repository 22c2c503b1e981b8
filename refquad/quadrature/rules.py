
from enum import Enum
from threading import Lock
from types import MappingProxyType
from typing import Dict, Optional, Tuple, Type, Union

from .. import logger
from .quadrature import Quadrature, QuadratureRule, check_order
from .gauss_legendre import GaussLegendreQuadrature
from .quadrangle import QuadrangleQuadrature
from .hexahedron import HexahedronQuadrature
from .triangle import TriangleQuadrature
from .triangle_table import available_orders


__all__ = [
    'ReferenceShape', 'RuleCache', 'get_rule', 'default_cache',
    'make_linerule', 'make_quadrule', 'make_cuberule', 'make_trirule',
    'get_linerule', 'get_quadrule', 'get_cuberule', 'get_trirule',
]


class ReferenceShape(Enum):
    """Topology of a reference domain. `SQUARE` doubles as the generic
    hypercube tag and is accepted for dimensions 1, 2 and 3."""
    LINE = 'line'
    SQUARE = 'square'
    CUBE = 'cube'
    TRIANGLE = 'triangle'

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


ShapeLike = Union[ReferenceShape, str]

_BUILDERS: Dict[Tuple[int, ReferenceShape], Type[Quadrature]] = {
    (1, ReferenceShape.LINE): GaussLegendreQuadrature,
    (1, ReferenceShape.SQUARE): GaussLegendreQuadrature,
    (2, ReferenceShape.SQUARE): QuadrangleQuadrature,
    (3, ReferenceShape.SQUARE): HexahedronQuadrature,
    (3, ReferenceShape.CUBE): HexahedronQuadrature,
    (2, ReferenceShape.TRIANGLE): TriangleQuadrature,
}


def resolve_builder(dimension: int, shape: ShapeLike) -> Type[Quadrature]:
    """Select the rule generator for a (dimension, shape) pair.

    Raises:
        LookupError: If no generator handles the pair.
    """
    try:
        shape = ReferenceShape(shape)
    except ValueError:
        raise LookupError(f"unknown reference shape {shape!r}.") from None
    try:
        return _BUILDERS[(dimension, shape)]
    except (KeyError, TypeError):
        raise LookupError(f"no quadrature rule for shape {shape.value!r} "
                          f"in dimension {dimension!r}.") from None


class RuleCache():
    r"""Precomputed quadrature rules of the low orders.

    For every rule generator the rules of order 1 to `max_order` are built
    once, by `initialize`, and stored in tuples behind a read-only mapping.
    Triangle rules are only cached for the orders present in the bundled
    table. After initialization the cache is never modified, so concurrent
    lookups need no locking; the lock only guards the one-time build.

    Parameters:
        max_order (int): Highest cached order, 5 by default.
        dtype (dtype, optional): Floating type of the rules.
        eager (bool): Build the rules at construction time. Otherwise they
            are built by the first call to `initialize` or `get`.
    """
    def __init__(self, max_order: int=5, *, dtype=None, eager: bool=True) -> None:
        if isinstance(max_order, bool) or not isinstance(max_order, int) or max_order < 0:
            raise ValueError(f"max_order must be a non-negative integer, got {max_order!r}.")
        self.max_order = max_order
        self.dtype = dtype
        self._rules = None
        self._lock = Lock()
        if eager:
            self.initialize()

    @property
    def is_initialized(self) -> bool:
        return self._rules is not None

    def _cached_orders(self, builder: Type[Quadrature]) -> range:
        if builder is TriangleQuadrature:
            return range(1, min(self.max_order, max(available_orders())) + 1)
        return range(1, self.max_order + 1)

    def initialize(self) -> None:
        """Build the cached rules. Calling it again has no effect."""
        with self._lock:
            if self._rules is not None:
                return
            rules = {}
            for builder in dict.fromkeys(_BUILDERS.values()):
                rules[builder] = tuple(builder(i, dtype=self.dtype)
                                       for i in self._cached_orders(builder))
            self._rules = MappingProxyType(rules)
        logger.info(f"Quadrature rule cache initialized with orders up to "
                    f"{self.max_order} for {len(rules)} rule types.")

    def get(self, dimension: int, shape: ShapeLike, order: int) -> QuadratureRule:
        """Return the rule of `order` for the (dimension, shape) pair.

        Cached orders return the shared rule object. Higher orders are built
        on every call and not stored.
        """
        builder = resolve_builder(dimension, shape)
        order = check_order(order)
        if self._rules is None:
            self.initialize()
        rules = self._rules[builder]
        if order <= len(rules):
            return rules[order-1]
        logger.debug(f"Order {order} is not cached, building a new "
                     f"{builder.__name__}.")
        return builder(order, dtype=self.dtype)


default_cache = RuleCache()


def get_rule(dimension: int, shape: ShapeLike, order: int, *,
             cache: Optional[RuleCache]=None) -> QuadratureRule:
    """Get the quadrature rule for a reference domain.

    Parameters:
        dimension (int): Spatial dimension, 1, 2 or 3.
        shape (ReferenceShape | str): Reference shape of the domain.
        order (int): Number of Gauss points per axis for line, square and
            cube rules, or the order of the triangle rule.
        cache (RuleCache, optional): Cache to look up, the package default
            cache if omitted.

    Returns:
        QuadratureRule: The rule with points of width `dimension`.

    Raises:
        LookupError: If the (dimension, shape) pair is not supported, or the
            triangle table has no rule of this order.
        PreconditionError: If `order` is not an integer no less than 1.
    """
    cache = default_cache if cache is None else cache
    return cache.get(dimension, shape, order)


def make_linerule(order: int) -> QuadratureRule:
    return GaussLegendreQuadrature(order)


def make_quadrule(order: int) -> QuadratureRule:
    return QuadrangleQuadrature(order)


def make_cuberule(order: int) -> QuadratureRule:
    return HexahedronQuadrature(order)


def make_trirule(order: int) -> QuadratureRule:
    return TriangleQuadrature(order)


def get_linerule(order: int) -> QuadratureRule:
    return get_rule(1, ReferenceShape.LINE, order)


def get_quadrule(order: int) -> QuadratureRule:
    return get_rule(2, ReferenceShape.SQUARE, order)


def get_cuberule(order: int) -> QuadratureRule:
    return get_rule(3, ReferenceShape.CUBE, order)


def get_trirule(order: int) -> QuadratureRule:
    return get_rule(2, ReferenceShape.TRIANGLE, order)
