import unittest
import numpy as np
from common.utils.conics import conic_coeffs
from common.utils.linalg import rotate_points
from common.utils.testing_tools import random_conic_coeffs

ELLIPSE = (1 / 4, 0, 1, 0, 0, -1)


class TestConicCoeffs(unittest.TestCase):

    def setUp(self):
        t = np.linspace(0, 2 * np.pi, 20)
        self.x, self.y = 2 * np.cos(t), np.sin(t)

    def test_points_on_ellipse(self):
        np.testing.assert_array_almost_equal(conic_coeffs.evaluate(ELLIPSE, self.x, self.y), 0)

    def test_rotate(self):
        coeffs = conic_coeffs.rotate(ELLIPSE, .3)
        x, y = rotate_points(self.x, self.y, rad=.3)
        np.testing.assert_array_almost_equal(conic_coeffs.evaluate(coeffs, x, y), 0)

    def test_translate(self):
        coeffs = conic_coeffs.translate(ELLIPSE, (1, -2))
        np.testing.assert_array_almost_equal(conic_coeffs.evaluate(coeffs, self.x + 1, self.y - 2), 0)

    def test_scale(self):
        coeffs = conic_coeffs.scale(ELLIPSE, 3, .5)
        np.testing.assert_array_almost_equal(conic_coeffs.evaluate(coeffs, 3 * self.x, .5 * self.y), 0)

    def test_rotation_theta(self):
        self.assertAlmostEqual(conic_coeffs.rotation_theta(ELLIPSE), 0)
        self.assertAlmostEqual(conic_coeffs.rotation_theta((1, 0, 1 / 4, 0, 0, -1)), np.pi / 2)
        theta = conic_coeffs.rotation_theta(conic_coeffs.rotate(ELLIPSE, .3))
        self.assertAlmostEqual(theta % np.pi, .3)

    def test_rotation_theta_equal_diagonal(self):
        for B in (1., -1.):
            with self.subTest(B=B):
                coeffs = (1, B, 1, 0, 0, -1)
                theta = conic_coeffs.rotation_theta(coeffs)
                self.assertAlmostEqual(theta, -np.sign(B) * np.pi / 4)
                # continuous with A, C slightly apart
                nearby = conic_coeffs.rotation_theta((1, B, 1 + 1e-12, 0, 0, -1))
                self.assertAlmostEqual(theta % np.pi, nearby % np.pi)
                # major axis = direction of the smallest quadratic-form value
                u = np.array([np.cos(theta), np.sin(theta)])
                Q = conic_coeffs.quadratic_matrix(coeffs)
                self.assertAlmostEqual(u @ Q @ u, np.linalg.eigvalsh(Q).min())
                self.assertAlmostEqual(conic_coeffs.rotation_theta(coeffs, relto='y'), theta - np.pi / 2)
        self.assertEqual(conic_coeffs.rotation_theta((1, 0, 1, 0, 0, -1)), 0)

    def test_rotation_theta_relto_y(self):
        self.assertAlmostEqual(conic_coeffs.rotation_theta(ELLIPSE, relto='y'), -np.pi / 2)

    def test_matrix_determinants_preserved_by_rigid_motion(self):
        for seed in range(10):
            coeffs = random_conic_coeffs(seed, 'ellipse')
            moved = conic_coeffs.translate(conic_coeffs.rotate(coeffs, 2.), (3, 1))
            self.assertAlmostEqual(np.linalg.det(conic_coeffs.matrix(moved)),
                                   np.linalg.det(conic_coeffs.matrix(coeffs)))
            self.assertAlmostEqual(np.linalg.det(conic_coeffs.quadratic_matrix(moved)),
                                   np.linalg.det(conic_coeffs.quadratic_matrix(coeffs)))

    def test_validate(self):
        self.assertEqual(conic_coeffs.validate([1, 2, 3, 4, 5, 6]), (1., 2., 3., 4., 5., 6.))
        with self.assertRaises(ValueError):
            conic_coeffs.validate([1, 2, 3, 4, 5])

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(conic_coeffs.CenterUndefinedError, conic_coeffs.ConicTypeError))
        self.assertTrue(issubclass(conic_coeffs.EccentricityDomainError, conic_coeffs.ConicTypeError))


if __name__ == '__main__':
    unittest.main()
