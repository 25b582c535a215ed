"""Quadrature rules on the reference square and triangle.

The triangle rule uses the collapsed coordinates of
:func:`frbasis.dubiner.rs_to_ab`: Gauss--Legendre points in ``a`` times
Gauss--Jacobi points with weight ``(1 - b)`` in ``b``, so that the
Jacobian ``(1 - b) / 2`` of the collapse is absorbed by the rule.
"""

from __future__ import annotations

import numpy as np
import opt_einsum as oe
from numpy.typing import ArrayLike
from scipy.special import roots_jacobi

from .orthopoly import gauss_legendre_rule

__all__ = [
    "gauss_jacobi_rule",
    "square_rule",
    "triangle_rule",
    "gram_matrix",
]


def gauss_jacobi_rule(alpha: float, beta: float, n: int) -> tuple[np.ndarray, np.ndarray]:
    """n-point Gauss--Jacobi rule for the weight ``(1 - x)**alpha (1 + x)**beta``."""
    if n < 1:
        raise ValueError("n must be positive")
    x, w = roots_jacobi(n, alpha, beta)
    return x, w


def square_rule(n: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Tensor Gauss--Legendre rule on ``[-1, 1]^2`` with ``n * n`` points.

    Returns
    -------
    x, y, w : ndarray
        Flattened point coordinates and weights.
    """
    x1, w1 = gauss_legendre_rule(-1.0, 1.0, n)
    X, Y = np.meshgrid(x1, x1, indexing="ij")
    W = np.outer(w1, w1)
    return X.ravel(), Y.ravel(), W.ravel()


def triangle_rule(n: int, *, verbose: bool = False) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Collapsed-coordinate rule with ``n * n`` points on the reference triangle.

    The rule is exact for polynomials of total degree ``2n - 1`` in
    ``(r, s)``.  Its weights sum to 2, the area of the triangle.

    Returns
    -------
    r, s, w : ndarray
        Flattened point coordinates and weights.
    """
    a1, wa = gauss_legendre_rule(-1.0, 1.0, n)
    b1, wb = gauss_jacobi_rule(1.0, 0.0, n)
    A, B = np.meshgrid(a1, b1, indexing="ij")

    r = 0.5 * (1.0 + A) * (1.0 - B) - 1.0
    s = B
    w = 0.5 * np.outer(wa, wb)
    if verbose:
        print(f"triangle rule: {w.size} points, weight sum {w.sum():.15f}")
    return r.ravel(), s.ravel(), w.ravel()


def gram_matrix(values: ArrayLike, weights: ArrayLike) -> np.ndarray:
    """Discrete inner products ``G[i, j] = sum_q w_q phi_i(q) phi_j(q)``.

    Parameters
    ----------
    values : array_like
        Basis values at the quadrature points, shape ``(n_basis, n_points)``.
    weights : array_like
        Quadrature weights, shape ``(n_points,)``.
    """
    phi = np.asarray(values, dtype=float)
    w = np.asarray(weights, dtype=float)
    return oe.contract("iq,jq,q->ij", phi, phi, w, optimize=True)
