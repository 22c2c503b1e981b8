"""
Gauss quadrature data for the reference triangle (0, 0)-(1, 0)-(0, 1).

Each row is `(x, y, w)`, where `(x, y)` are the Cartesian coordinates of a
point (equivalently the barycentric coordinates of the second and third
vertices) and `w` is the weight normalized so the weights of an order sum
to 1. Rules of order `p` are the symmetric Dunavant rules exact for
polynomials of total degree `p`.
"""

from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..typing import Row


TRIANGLE_DATA: Dict[int, Tuple[Row, ...]] = {
    1: (
        (0.33333333333333333, 0.33333333333333333, 1.0),
    ),
    2: (
        (0.16666666666666667, 0.16666666666666667, 0.33333333333333333),
        (0.66666666666666667, 0.16666666666666667, 0.33333333333333333),
        (0.16666666666666667, 0.66666666666666667, 0.33333333333333333),
    ),
    3: (
        (0.33333333333333333, 0.33333333333333333, -0.5625),
        (0.2, 0.2, 0.52083333333333333),
        (0.6, 0.2, 0.52083333333333333),
        (0.2, 0.6, 0.52083333333333333),
    ),
    4: (
        (0.44594849091596489, 0.44594849091596489, 0.22338158967801147),
        (0.10810301816807023, 0.44594849091596489, 0.22338158967801147),
        (0.44594849091596489, 0.10810301816807023, 0.22338158967801147),
        (0.091576213509770743, 0.091576213509770743, 0.10995174365532187),
        (0.81684757298045851, 0.091576213509770743, 0.10995174365532187),
        (0.091576213509770743, 0.81684757298045851, 0.10995174365532187),
    ),
    5: (
        (0.33333333333333333, 0.33333333333333333, 0.225),
        (0.47014206410511509, 0.47014206410511509, 0.13239415278850619),
        (0.059715871789769820, 0.47014206410511509, 0.13239415278850619),
        (0.47014206410511509, 0.059715871789769820, 0.13239415278850619),
        (0.10128650732345634, 0.10128650732345634, 0.12593918054482714),
        (0.79742698535308732, 0.10128650732345634, 0.12593918054482714),
        (0.10128650732345634, 0.79742698535308732, 0.12593918054482714),
    ),
}


def lookup(order: int, table: Optional[Mapping[int, Sequence[Row]]]=None) -> Sequence[Row]:
    """Rows `(x, y, w)` of the triangle rule of the given order, taken from
    `table` if given and from the bundled data otherwise."""
    table = TRIANGLE_DATA if table is None else table
    try:
        return table[order]
    except KeyError:
        raise LookupError(f"no triangle quadrature data for order {order}, "
                          f"available orders are {sorted(table)}.") from None


def available_orders() -> Tuple[int, ...]:
    return tuple(sorted(TRIANGLE_DATA))
