import numpy as np

from common.utils.typings import *


def det2(M: NpMatrix) -> float:
    """ determinant of a 2x2 matrix """
    M = np.asarray(M, float)
    assert M.shape == (2, 2)
    return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])


def det3(M: NpMatrix) -> float:
    """ determinant of a 3x3 matrix, cofactor expansion along the first row """
    M = np.asarray(M, float)
    assert M.shape == (3, 3)
    return float(M[0, 0] * det2(M[1:, [1, 2]])
                 - M[0, 1] * det2(M[1:, [0, 2]])
                 + M[0, 2] * det2(M[1:, [0, 1]]))


def symmetric(diag: Sequence[float], upper: Sequence[float]) -> NpMatrix:
    """
    build a symmetric matrix from its diagonal and its upper triangle (row-major).
    e.g. symmetric([a, c], [h]) -> [[a, h], [h, c]]
    """
    n = len(diag)
    assert len(upper) == n * (n - 1) // 2
    M = np.diag(np.asarray(diag, float))
    M[np.triu_indices(n, k=1)] = upper
    return M + np.triu(M, k=1).T


def rotate_points(*args, **kwargs):
    return rotate(*args, **kwargs)


def rotate(x: np.ndarray | float, y: np.ndarray | float, rad: float = None, deg: float = None, ax=None):
    if hasattr(x, '__len__'):
        x = np.asarray(x, float)
        y = np.asarray(y, float)
    if deg is not None:
        assert rad is None
        rad = np.radians(deg)
    if ax is not None:
        x, y = x - ax[0], y - ax[1]
    c, s = np.cos(rad), np.sin(rad)
    x, y = c * x - s * y, s * x + c * y
    if ax is not None:
        x += ax[0]
        y += ax[1]
    return x, y


def rotation_mtx(rad: float) -> NpMatrix:
    c, s = np.cos(rad), np.sin(rad)
    return np.array([[c, -s], [s, c]])
