from pathlib import Path
from typing import (Generator, Callable, Sequence, Any, Iterable, Iterator, Literal)

from numpy.typing import NDArray

NpVec = NDArray
NpMatrix = NDArray

NpPoint = NDArray

Coeffs = tuple[float, float, float, float, float, float]

PathLike = Path | str
