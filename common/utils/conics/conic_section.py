import numpy as np
from dataclasses import dataclass, field
from common.utils import strtools
from common.utils.devtools import get_logger
from common.utils.linalg import det2, det3
from common.utils.conics import conic_coeffs
from common.utils.conics.config import ConicsConfig
from common.utils.conics.conic_coeffs import CenterUndefinedError, EccentricityDomainError
from common.utils.conics.conic_shapes import ConicShape, DegenerateConicShape, Ok, Err, Classification
from common.utils.typings import *

"""
classification of a x^2 + b xy + c y^2 + d x + e y + f = 0 by the determinants of its
quadratic-form matrix:
    full_det = det of the 3x3 matrix  -> degenerate iff |full_det| < eps
    sub_det  = det of the 2x2 quadratic part -> sign selects the shape
"""

DEFAULT_CONFIG = ConicsConfig.from_default()

# absolute tolerance, not scale-relative
EPSILON = DEFAULT_CONFIG.epsilon

logger = get_logger(__name__, DEFAULT_CONFIG.logging.level)


@dataclass(frozen=True)
class ConicSection:

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    config: ConicsConfig = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        for name, value in zip('abcdef', conic_coeffs.validate(self.coeffs)):
            object.__setattr__(self, name, value)
        if self.config is None:
            object.__setattr__(self, 'config', DEFAULT_CONFIG)

    @classmethod
    def from_coeffs(cls, coeffs, config: ConicsConfig = None):
        return cls(*conic_coeffs.validate(coeffs), config=config)

    @classmethod
    def from_json(cls, obj: dict, config: ConicsConfig = None):
        return cls(**{k: obj[k] for k in 'abcdef'}, config=config)

    def to_json(self) -> dict:
        return dict(zip('abcdef', self.coeffs))

    @property
    def coeffs(self) -> Coeffs:
        return self.a, self.b, self.c, self.d, self.e, self.f

    @property
    def eps(self) -> float:
        return self.config.epsilon

    def __str__(self):
        return f'{strtools.to_str(self.classify().shape)} [{strtools.to_str(self.to_json(), f=4)}]'

    # ---- matrix representation

    def matrix(self) -> NpMatrix:
        return conic_coeffs.matrix(self.coeffs)

    def quadratic_matrix(self) -> NpMatrix:
        return conic_coeffs.quadratic_matrix(self.coeffs)

    def determinants(self) -> tuple[float, float]:
        """ (sub_det, full_det) """
        return det2(self.quadratic_matrix()), det3(self.matrix())

    # ---- classification

    def classify(self) -> Classification:
        return self.classify_det()[0]

    def classify_det(self) -> tuple[Classification, float]:
        """ classification, and the full 3x3 determinant it was based on """
        sub_det, full_det = self.determinants()
        if abs(full_det) < self.eps:
            result = Err(self._degenerate_shape(sub_det))
        else:
            result = Ok(self._shape(sub_det))
        logger.debug(f"{self.coeffs}: sub_det={sub_det:g}, full_det={full_det:g} -> {result}")
        return result, full_det

    def _negative_bound(self) -> float:
        """ upper bound for a sub-determinant to count as negative """
        return self.eps if self.config.legacy_bounds else -self.eps

    def _degenerate_shape(self, sub_det: float) -> DegenerateConicShape:
        eps = self.eps
        if sub_det < self._negative_bound():
            return DegenerateConicShape.INTERSECTING_LINES
        elif sub_det > eps:
            return DegenerateConicShape.POINT
        else:
            return DegenerateConicShape.PARALLEL_LINES

    def _shape(self, sub_det: float) -> ConicShape:
        eps = self.eps
        if sub_det < self._negative_bound():
            return ConicShape.HYPERBOLA
        elif self._is_near_zero(sub_det):
            return ConicShape.PARABOLA
        elif abs(self.a - self.c) < eps and abs(self.b) < eps:
            return ConicShape.CIRCLE
        else:
            return ConicShape.ELLIPSE

    def _is_near_zero(self, sub_det: float) -> bool:
        if self.config.legacy_bounds:
            return -self.eps < sub_det < self.eps
        return abs(sub_det) <= self.eps

    # ---- derived quantities

    def center(self) -> NpPoint:
        denom = 4 * self.a * self.c - self.b ** 2
        if abs(denom) < self.eps:
            logger.debug(f"{self.coeffs}: no center, 4ac - b^2 = {denom:g}")
            raise CenterUndefinedError(f"Center is undefined for this conic. 4ac-b^2={denom}")
        x = (self.b * self.e - 2 * self.c * self.d) / denom
        y = (self.b * self.d - 2 * self.a * self.e) / denom
        return np.array([x, y], float)

    def eccentricity(self) -> float | None:
        """ eccentricity, or None for degenerate conics """
        match self.classify_det():
            case Ok(shape), full_det:
                return self.eccentricity_from(shape, full_det)
            case Err(_), _:
                return None

    def eccentricity_from(self, shape: ConicShape | DegenerateConicShape, full_det: float) -> float | None:
        """ eccentricity given an already computed shape and full determinant """
        match shape:
            case DegenerateConicShape():
                return None
            case ConicShape.PARABOLA:
                return 1.
            case ConicShape.CIRCLE:
                return 0.
        n = -1. if full_det > 0 else 1.
        root = np.sqrt((self.a - self.c) ** 2 + self.b ** 2)
        top = 2 * root
        bot = n * (self.a + self.c) + root
        if bot == 0 or top / bot < 0:
            logger.debug(f"{self.coeffs}: eccentricity ratio {top}/{bot} outside domain")
            raise EccentricityDomainError(
                f"Invalid value when computing eccentricity of {strtools.to_str(shape)}. top={top}, bot={bot}")
        ecc = float(np.sqrt(top / bot))
        if not np.isfinite(ecc):
            raise EccentricityDomainError(f"Non-finite eccentricity of {strtools.to_str(shape)}: {ecc}")
        return ecc

    # ---- coefficient transforms

    def evaluate(self, x, y):
        return conic_coeffs.evaluate(self.coeffs, x, y)

    def rotation_angle(self) -> float:
        """ angle of the major axis relative to x, in radians """
        return float(conic_coeffs.rotation_theta(self.coeffs))

    def rotated(self, theta: float):
        """ conic rotated by theta radians about the origin """
        return self._replace(conic_coeffs.rotate(self.coeffs, theta))

    def translated(self, delta):
        return self._replace(conic_coeffs.translate(self.coeffs, delta))

    def scaled(self, sx: float, sy: float = None):
        return self._replace(conic_coeffs.scale(self.coeffs, sx, sy))

    def multiplied(self, k: float):
        """ same curve, all coefficients multiplied by k """
        return self._replace(tuple(k * v for v in self.coeffs))

    def _replace(self, coeffs):
        return ConicSection.from_coeffs(coeffs, config=self.config)


if __name__ == "__main__":
    from common.utils.devtools import setup_logging
    setup_logging('debug')
    logger.setLevel('DEBUG')
    conic = ConicSection(2, -3, 4, 6, -3, -4)
    print(conic, strtools.to_str(conic.center()), conic.eccentricity())
