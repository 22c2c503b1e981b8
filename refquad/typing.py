
import builtins
from typing import Any, Callable, Sequence, Tuple, Union

from numpy.typing import NDArray


### Types

Number = Union[builtins.int, builtins.float]
Array = NDArray[Any]
Point = Union[Sequence[Number], Array]
Integrand = Callable[..., Any]
Row = Tuple[float, float, float]
