from dataclasses import dataclass
from enum import Enum


class ConicShape(Enum):
    HYPERBOLA = 'hyperbola'
    PARABOLA = 'parabola'
    ELLIPSE = 'ellipse'
    CIRCLE = 'circle'


class DegenerateConicShape(Enum):
    INTERSECTING_LINES = 'intersecting_lines'
    PARALLEL_LINES = 'parallel_lines'
    POINT = 'point'


@dataclass(frozen=True)
class Ok:
    """ non-degenerate classification """
    shape: ConicShape

    def __post_init__(self):
        if not isinstance(self.shape, ConicShape):
            raise TypeError(f"Ok() takes a ConicShape, got {self.shape!r}")

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    """ degenerate classification """
    shape: DegenerateConicShape

    def __post_init__(self):
        if not isinstance(self.shape, DegenerateConicShape):
            raise TypeError(f"Err() takes a DegenerateConicShape, got {self.shape!r}")

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Classification = Ok | Err
