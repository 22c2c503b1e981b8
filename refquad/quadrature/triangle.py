
import numpy as np

from .exceptions import DataIntegrityError
from .quadrature import Quadrature
from .triangle_table import lookup


class TriangleQuadrature(Quadrature):
    r"""Gauss quadrature on the reference triangle (0, 0)-(1, 0)-(0, 1).

    Points and weights come from a tabulated coefficient set. Table weights
    are normalized to a unit area and are scaled here by the reference area
    1/2, so the weights of every rule sum to 0.5.

    Parameters:
        index (int): Order of the rule; the bundled table covers 1 to 5.
        table (Mapping[int, Sequence[Row]], optional): Alternate coefficient
            table with rows `(x, y, w)`.

    Raises:
        LookupError: If the table has no rule of the requested order.
        DataIntegrityError: If the rows of the table are empty or do not all
            have three entries.
    """
    geo_dim = 2

    def __init__(self, index: int, *, table=None, dtype=None) -> None:
        self.table = table
        super().__init__(index, dtype=dtype)

    def make(self, index: int):
        rows = lookup(index, self.table)
        try:
            data = np.array(rows, dtype=self.dtype)
        except (ValueError, TypeError) as e:
            raise DataIntegrityError(f"triangle data of order {index} is not a "
                                     f"table of (x, y, w) rows.") from e
        if data.ndim != 2 or data.shape[1] != 3 or data.shape[0] < 1:
            raise DataIntegrityError(f"triangle data of order {index} must be a non-empty "
                                     f"table of (x, y, w) rows, got shape {data.shape}.")
        return data[:, :2], 0.5*data[:, 2]
