"""Legendre and normalized Jacobi polynomial families.

All recursions are evaluated bottom-up, carrying the two previous terms,
so that the call depth does not grow with the polynomial order.  The
evaluation point may be a scalar or any array; results broadcast with it.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike
from scipy.linalg import eigh_tridiagonal

__all__ = [
    "legendre",
    "d_legendre",
    "legendre_table",
    "eval_gamma",
    "factorial",
    "jacobi",
    "grad_jacobi",
    "gauss_legendre_rule",
]


def legendre(r: ArrayLike, n: int) -> np.ndarray:
    """Evaluate Legendre polynomial P_n at points r using recurrence."""
    r = np.asarray(r, dtype=float)
    if n < 0:
        return np.zeros_like(r)
    elif n == 0:
        return np.ones_like(r)
    elif n == 1:
        return r
    p_km2 = np.ones_like(r)
    p_km1 = r
    for k in range(2, n + 1):
        p_k = ((2 * k - 1) * r * p_km1 - (k - 1) * p_km2) / k
        p_km2, p_km1 = p_km1, p_k
    return p_k


def d_legendre(r: ArrayLike, n: int) -> np.ndarray:
    """First derivative of P_n.

    The general expression ``n (r P_n - P_{n-1}) / (r^2 - 1)`` is 0/0 at
    ``r = +-1``; there the closed forms ``n(n+1)/2`` and
    ``(-1)^(n-1) n(n+1)/2`` are used instead.
    """
    r = np.asarray(r, dtype=float)
    if n <= 0:
        return np.zeros_like(r)
    with np.errstate(divide="ignore", invalid="ignore"):
        dp = n * ((r * legendre(r, n)) - legendre(r, n - 1)) / (r * r - 1.0)
    dp = np.where(r == 1.0, 0.5 * n * (n + 1.0), dp)
    dp = np.where(r == -1.0, (-1.0) ** (n - 1) * 0.5 * n * (n + 1.0), dp)
    return dp


def legendre_table(n_max: int, r: ArrayLike) -> np.ndarray:
    """Return table of Legendre polynomials P_0 ... P_{n_max} on [-1, 1].

    Parameters
    ----------
    n_max : int
        Highest degree in the table.
    r : array_like
        Evaluation points.  May be any shape.

    Returns
    -------
    vals : np.ndarray
        Array of shape ``(n_max + 1, *r.shape)`` with
        ``vals[k] == P_k(r)``.
    """
    if n_max < 0:
        raise ValueError("n_max must be non-negative")

    r = np.asarray(r, dtype=float)
    vals = np.empty((n_max + 1,) + r.shape, dtype=float)
    vals[0] = 1.0
    if n_max == 0:
        return vals
    vals[1] = r
    for k in range(2, n_max + 1):
        vals[k] = ((2 * k - 1) * r * vals[k - 1] - (k - 1) * vals[k - 2]) / k
    return vals


def eval_gamma(n: int) -> float:
    """Gamma function of a positive integer, ``(n - 1)!``."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    gamma_val = 1.0
    for k in range(n - 1, 0, -1):
        gamma_val = gamma_val * k
    return gamma_val


def factorial(n: int) -> float:
    """``n!`` for non-negative integer n."""
    return eval_gamma(n + 1)


def _recursion_a(k: int, alpha: int, beta: int) -> float:
    # leading coefficient of the orthonormal three-term recursion
    h = 2 * k + alpha + beta
    num = k * (k + alpha + beta) * (k + alpha) * (k + beta)
    den = (h - 1) * (h + 1)
    return (2.0 / h) * math.sqrt(num / den)


def _recursion_b(k: int, alpha: int, beta: int) -> float:
    h = 2 * k + alpha + beta
    return -(alpha * alpha - beta * beta) / (h * (h + 2))


def jacobi(r: ArrayLike, alpha: int, beta: int, n: int) -> np.ndarray:
    """Normalized Jacobi polynomial of order n.

    The family is orthonormal on [-1, 1] with respect to the weight
    ``(1 - r)**alpha * (1 + r)**beta``.

    Parameters
    ----------
    r : array_like
        Evaluation points.
    alpha, beta : int
        Weight exponents.
    n : int
        Polynomial order, ``n >= 0``.

    Returns
    -------
    ndarray
        Values with the shape of ``r``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    r = np.asarray(r, dtype=float)

    p0 = math.sqrt(
        2.0 ** (-alpha - beta - 1)
        * (eval_gamma(alpha + beta + 2) / (eval_gamma(alpha + 1) * eval_gamma(beta + 1)))
    )
    if n == 0:
        return np.full_like(r, p0)

    p1 = (
        0.5
        * p0
        * math.sqrt((alpha + beta + 3) / ((alpha + 1) * (beta + 1)))
        * (r * (alpha + beta + 2) + (alpha - beta))
    )
    if n == 1:
        return p1

    p_km2 = np.full_like(r, p0)
    p_km1 = p1
    for k in range(2, n + 1):
        a_k = _recursion_a(k, alpha, beta)
        a_km1 = _recursion_a(k - 1, alpha, beta)
        b_km1 = _recursion_b(k - 1, alpha, beta)
        p_k = (1.0 / a_k) * (r * p_km1 - a_km1 * p_km2 - b_km1 * p_km1)
        p_km2, p_km1 = p_km1, p_k
    return p_k


def grad_jacobi(r: ArrayLike, alpha: int, beta: int, n: int) -> np.ndarray:
    """Derivative of :func:`jacobi`, itself a shifted Jacobi polynomial."""
    if n == 0:
        return np.zeros_like(np.asarray(r, dtype=float))
    return math.sqrt(1.0 * n * (n + alpha + beta + 1)) * jacobi(r, alpha + 1, beta + 1, n - 1)


def gauss_legendre_rule(a: float, b: float, n: int) -> tuple[np.ndarray, np.ndarray]:
    """Gauss--Legendre quadrature on [a, b] using Golub--Welsch."""
    if n < 1:
        raise ValueError("n must be positive")
    i = np.arange(1, n, dtype=float)
    beta = i / np.sqrt(4 * i * i - 1)
    nodes, vecs = eigh_tridiagonal(np.zeros(n), beta)
    weights = 2.0 * (vecs[0] ** 2)
    x = 0.5 * (b - a) * nodes + 0.5 * (b + a)
    w = 0.5 * (b - a) * weights
    return x, w
