
from .exceptions import PreconditionError, DataIntegrityError
from .quadrature import QuadratureRule, Quadrature, weights, points

from .gauss_legendre import GaussLegendreQuadrature
from .tensor_product import TensorProductQuadrature
from .quadrangle import QuadrangleQuadrature
from .hexahedron import HexahedronQuadrature
from .triangle import TriangleQuadrature
from .stroud import StroudQuadrature
from .rules import (
    ReferenceShape,
    RuleCache,
    get_rule,
    default_cache,
    make_linerule, make_quadrule, make_cuberule, make_trirule,
    get_linerule, get_quadrule, get_cuberule, get_trirule,
)
from .integral import integrate
