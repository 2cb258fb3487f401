from . conic_coeffs import ConicTypeError, CenterUndefinedError, EccentricityDomainError
from . conic_shapes import ConicShape, DegenerateConicShape, Ok, Err, Classification
from . config import ConicsConfig
from . conic_section import ConicSection, EPSILON


def classify(a, b, c, d, e, f) -> Classification:
    return ConicSection(a, b, c, d, e, f).classify()


def center(a, b, c, d, e, f):
    return ConicSection(a, b, c, d, e, f).center()


def eccentricity(a, b, c, d, e, f) -> float | None:
    return ConicSection(a, b, c, d, e, f).eccentricity()
