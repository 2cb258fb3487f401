import numpy as np
from common.utils.linalg import rotation_mtx, symmetric
from common.utils.typings import *


class ConicTypeError(Exception):
    pass


class CenterUndefinedError(ConicTypeError):
    pass


class EccentricityDomainError(ConicTypeError):
    pass


def validate(coeffs) -> Coeffs:
    if len(coeffs) != 6:
        raise ValueError(f"Expected 6 conic coefficients, got {len(coeffs)}")
    return tuple(float(v) for v in coeffs)


def matrix(coeffs) -> NpMatrix:
    """ 3x3 quadratic-form matrix """
    A, B, C, D, E, F = coeffs
    return symmetric([A, C, F], [B / 2, D / 2, E / 2])


def quadratic_matrix(coeffs) -> NpMatrix:
    """ 2x2 matrix of the quadratic part """
    A, B, C = coeffs[:3]
    return symmetric([A, C], [B / 2])


def evaluate(coeffs: Coeffs, x: np.ndarray | float, y: np.ndarray | float):
    """ value of the conic polynomial at (x, y), zero on the curve """
    A, B, C, D, E, F = coeffs
    return (A * x + B * y + D) * x + (C * y + E) * y + F


def rotation_theta(coeffs: Coeffs, relto: str = 'x') -> float:
    """ angle of the major axis relative to the x (or y) axis, in radians """
    assert relto in ('x', 'y')
    A, B, C = coeffs[:3]
    if A == C:
        # limit of the arctan branch as A - C -> 0
        theta = -np.sign(B) * np.pi / 4
    else:
        theta = .5 * np.arctan(B / (A - C))
    if abs(A) > abs(C):
        theta += np.pi / 2
    if relto == 'y':
        theta -= np.pi / 2
    return theta


def rotate(coeffs, theta: float) -> Coeffs:
    """ coefficients of the conic rotated by theta radians about the origin """
    A, B, C, D, E, F = coeffs
    R = rotation_mtx(theta)
    Q = R @ quadratic_matrix(coeffs) @ R.T
    L = R @ np.array([D, E])
    return float(Q[0, 0]), float(2 * Q[0, 1]), float(Q[1, 1]), float(L[0]), float(L[1]), float(F)


def translate(coeffs, delta) -> Coeffs:
    """ coefficients of the conic shifted by delta """
    dx, dy = -delta[0], -delta[1]
    A, B, C, D, E, F = coeffs
    D_ = D + 2 * A * dx + B * dy
    E_ = E + 2 * C * dy + B * dx
    F_ = F + A * dx * dx + B * dx * dy + C * dy * dy + D * dx + E * dy
    return A, B, C, D_, E_, F_


def scale(coeffs: Coeffs, sx: float, sy: float = None) -> Coeffs:
    """ coefficients of the conic stretched by sx along x and sy along y """
    sy = sx if sy is None else sy
    A, B, C, D, E, F = coeffs
    return A / sx ** 2, B / (sx * sy), C / sy ** 2, D / sx, E / sy, F
