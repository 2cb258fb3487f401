import numpy as np

from common.utils.conics import conic_coeffs
from common.utils.typings import *


def random_rigid_motion(coeffs, seed: int = 0, max_shift: float = 5.) -> Coeffs:
    """ coefficients of the same curve after a random rotation and translation """
    rng = np.random.default_rng(seed)
    theta = rng.random() * np.pi
    delta = max_shift * (2 * rng.random(2) - 1)
    return conic_coeffs.translate(conic_coeffs.rotate(coeffs, theta), delta)


def random_conic_coeffs(seed: int, kind: str) -> Coeffs:
    """
    random conic of a given kind, in general position.
    Args:
        seed: random seed
        kind: 'ellipse', 'circle', 'hyperbola', 'parabola', 'intersecting_lines',
            'parallel_lines', or 'point'
    """

    rng = np.random.default_rng(seed)
    r1, r2 = np.sort(1 + 2 * rng.random(2))[::-1]

    match kind:
        case 'ellipse':
            coeffs = (1 / r1 ** 2, 0, 4 / r2 ** 2, 0, 0, -1)
        case 'circle':
            coeffs = (1, 0, 1, 0, 0, -r1 ** 2)
        case 'hyperbola':
            coeffs = (1 / r1 ** 2, 0, -1 / r2 ** 2, 0, 0, -1)
        case 'parabola':
            coeffs = (r1, 0, 0, 0, -1, 0)
        case 'intersecting_lines':
            coeffs = (r1 ** 2, 0, -r2 ** 2, 0, 0, 0)
        case 'parallel_lines':
            coeffs = (1, 0, 0, 0, 0, -r1 ** 2)
        case 'point':
            coeffs = (r1, 0, r2, 0, 0, 0)
        case _:
            raise ValueError("Unknown kind")

    return random_rigid_motion(coeffs, seed=seed)
