import math
import unittest
import numpy as np
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'src'))
from frbasis.orthopoly import (
    legendre,
    d_legendre,
    legendre_table,
    eval_gamma,
    factorial,
    jacobi,
    grad_jacobi,
    gauss_legendre_rule,
)
from numpy.polynomial import legendre as npleg
from scipy.special import eval_jacobi, roots_jacobi


def _jacobi_norm(alpha, beta, n):
    # L2 norm of the classical P_n^(alpha, beta) under its weight
    return math.sqrt(
        2.0 ** (alpha + beta + 1) / (2 * n + alpha + beta + 1)
        * math.gamma(n + alpha + 1) * math.gamma(n + beta + 1)
        / (math.gamma(n + alpha + beta + 1) * math.factorial(n))
    )


class TestLegendre(unittest.TestCase):
    def test_matches_numpy(self):
        r = np.linspace(-1.0, 1.0, 11)
        for n in range(9):
            expected = npleg.Legendre.basis(n)(r)
            self.assertTrue(np.allclose(legendre(r, n), expected, atol=1e-14))

    def test_low_orders(self):
        r = np.array([-0.7, 0.1, 0.55])
        self.assertTrue(np.all(legendre(r, 0) == 1.0))
        self.assertTrue(np.all(legendre(r, 1) == r))
        self.assertTrue(np.all(legendre(r, -1) == 0.0))

    def test_endpoint_values(self):
        for n in range(12):
            self.assertAlmostEqual(float(legendre(1.0, n)), 1.0, places=13)
            self.assertAlmostEqual(float(legendre(-1.0, n)), (-1.0) ** n, places=13)

    def test_derivative_matches_numpy(self):
        r = np.linspace(-0.95, 0.95, 9)
        for n in range(9):
            expected = npleg.Legendre.basis(n).deriv()(r)
            self.assertTrue(np.allclose(d_legendre(r, n), expected, atol=1e-12))

    def test_derivative_endpoints(self):
        for n in range(1, 10):
            self.assertEqual(float(d_legendre(1.0, n)), 0.5 * n * (n + 1))
            self.assertEqual(float(d_legendre(-1.0, n)), (-1.0) ** (n - 1) * 0.5 * n * (n + 1))
            self.assertTrue(np.isfinite(d_legendre(np.array([-1.0, 1.0]), n)).all())
        self.assertEqual(float(d_legendre(1.0, 0)), 0.0)

    def test_derivative_finite_difference(self):
        h = 1e-5
        for r in (-0.83, -0.2, 0.35, 0.9):
            for n in range(7):
                fd = (legendre(r + h, n) - legendre(r - h, n)) / (2 * h)
                self.assertAlmostEqual(float(d_legendre(r, n)), float(fd), places=7)

    def test_table(self):
        r = np.linspace(-1.0, 1.0, 7).reshape(7, 1)
        table = legendre_table(5, r)
        self.assertEqual(table.shape, (6, 7, 1))
        for n in range(6):
            self.assertTrue(np.allclose(table[n], legendre(r, n), atol=1e-15))


class TestGamma(unittest.TestCase):
    def test_factorial_identity(self):
        for n in range(1, 11):
            self.assertEqual(eval_gamma(n), math.factorial(n - 1))
        self.assertEqual(eval_gamma(5), 24.0)
        self.assertEqual(factorial(0), 1.0)
        self.assertEqual(factorial(6), 720.0)

    def test_non_positive(self):
        with self.assertRaises(ValueError):
            eval_gamma(0)


class TestJacobi(unittest.TestCase):
    params = [(0, 0), (1, 0), (3, 0), (5, 0), (1, 1), (2, 3)]

    def test_orthonormal(self):
        for alpha, beta in self.params:
            x, w = roots_jacobi(12, alpha, beta)
            vals = np.array([jacobi(x, alpha, beta, n) for n in range(8)])
            gram = (vals * w) @ vals.T
            self.assertTrue(np.allclose(gram, np.eye(8), atol=1e-12), (alpha, beta))

    def test_matches_scipy_up_to_normalisation(self):
        r = np.linspace(-1.0, 1.0, 13)
        for alpha, beta in self.params:
            for n in range(7):
                expected = eval_jacobi(n, alpha, beta, r) / _jacobi_norm(alpha, beta, n)
                self.assertTrue(np.allclose(jacobi(r, alpha, beta, n), expected, atol=1e-11))

    def test_legendre_case(self):
        r = np.linspace(-1.0, 1.0, 9)
        for n in range(7):
            expected = np.sqrt((2 * n + 1) / 2.0) * legendre(r, n)
            self.assertTrue(np.allclose(jacobi(r, 0, 0, n), expected, atol=1e-13))

    def test_gradient(self):
        h = 1e-6
        r = np.array([-0.9, -0.3, 0.25, 0.8])
        for alpha, beta in self.params:
            self.assertTrue(np.all(grad_jacobi(r, alpha, beta, 0) == 0.0))
            for n in range(1, 7):
                fd = (jacobi(r + h, alpha, beta, n) - jacobi(r - h, alpha, beta, n)) / (2 * h)
                self.assertTrue(np.allclose(grad_jacobi(r, alpha, beta, n), fd, atol=1e-6))

    def test_scalar_input(self):
        val = jacobi(0.3, 1, 0, 3)
        self.assertEqual(np.shape(val), ())

    def test_negative_order(self):
        with self.assertRaises(ValueError):
            jacobi(0.0, 0, 0, -1)


class TestGaussLegendre(unittest.TestCase):
    def test_gauss_legendre_rule_matches_numpy(self):
        a, b = -1.0, 2.0
        n = 6
        x, w = gauss_legendre_rule(a, b, n)
        xn, wn = np.polynomial.legendre.leggauss(n)
        xn = 0.5 * (b - a) * xn + 0.5 * (b + a)
        wn = 0.5 * (b - a) * wn
        self.assertTrue(np.allclose(x, xn, atol=1e-14))
        self.assertTrue(np.allclose(w, wn, atol=1e-14))

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            gauss_legendre_rule(-1.0, 1.0, 0)


if __name__ == '__main__':
    unittest.main()
