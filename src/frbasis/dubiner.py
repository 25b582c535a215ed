"""Orthonormal Dubiner basis on the reference triangle.

The reference triangle has vertices ``(-1, -1)``, ``(1, -1)`` and
``(-1, 1)``.  Each mode ``(i, j)`` is built on the collapsed coordinates
``(a, b)`` as

    phi_ij(r, s) = sqrt(2) * J_i^(0,0)(a) * J_j^(2i+1,0)(b) * (1 - b)**i

with ``J`` the normalized Jacobi polynomials of :mod:`frbasis.orthopoly`.
The family is orthonormal over the triangle, so the constant mode is
``1 / sqrt(2)`` (the triangle has area 2).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .indexing import mode_to_indices
from .orthopoly import grad_jacobi, jacobi

__all__ = [
    "rs_to_ab",
    "dubiner2d",
    "d_dubiner2d_dr",
    "d_dubiner2d_ds",
]

SQRT2 = np.sqrt(2.0)


def rs_to_ab(r: ArrayLike, s: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Map triangle coordinates ``(r, s)`` to collapsed coordinates ``(a, b)``.

    ``a = 2 (1 + r) / (1 - s) - 1`` and ``b = s``.  The top edge collapses
    onto the apex ``s = 1``, where ``a`` is set to -1.
    """
    r = np.asarray(r, dtype=float)
    s = np.asarray(s, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        a = (2.0 * ((1.0 + r) / (1.0 - s))) - 1.0
    a = np.where(s == 1.0, -1.0, a)
    b = s * np.ones_like(r)
    return a, b


def dubiner2d(mode: int, rs: Sequence[ArrayLike], order: int) -> np.ndarray:
    """Value of the ``mode``-th Dubiner basis function at ``rs = (r, s)``."""
    i, j = mode_to_indices(mode, order, "tri")
    a, b = rs_to_ab(*rs)

    jacobi_0 = jacobi(a, 0, 0, i)
    jacobi_1 = jacobi(b, 2 * i + 1, 0, j)
    return SQRT2 * jacobi_0 * jacobi_1 * (1.0 - b) ** i


def d_dubiner2d_dr(mode: int, rs: Sequence[ArrayLike], order: int) -> np.ndarray:
    """Partial derivative in ``r`` of :func:`dubiner2d`."""
    i, j = mode_to_indices(mode, order, "tri")
    a, b = rs_to_ab(*rs)

    if i == 0:
        # constant in a, and (1 - b)**(i - 1) would be singular at the apex
        return np.zeros_like(a)

    jacobi_0 = grad_jacobi(a, 0, 0, i)
    jacobi_1 = jacobi(b, 2 * i + 1, 0, j)
    return 2.0 * SQRT2 * jacobi_0 * jacobi_1 * (1.0 - b) ** (i - 1)


def d_dubiner2d_ds(mode: int, rs: Sequence[ArrayLike], order: int) -> np.ndarray:
    """Partial derivative in ``s`` of :func:`dubiner2d`.

    Uses ``da/ds = (1 + a) / (1 - b)`` so that every term stays finite at
    the apex for ``i >= 1``; for ``i = 0`` only the ``b``-derivative of the
    second factor survives.
    """
    i, j = mode_to_indices(mode, order, "tri")
    a, b = rs_to_ab(*rs)

    jacobi_2 = jacobi(a, 0, 0, i)
    jacobi_3 = grad_jacobi(b, 2 * i + 1, 0, j) * (1.0 - b) ** i

    if i == 0:
        return SQRT2 * (jacobi_2 * jacobi_3)

    jacobi_0 = grad_jacobi(a, 0, 0, i)
    jacobi_1 = jacobi(b, 2 * i + 1, 0, j)
    jacobi_4 = jacobi_1 * i * (1.0 - b) ** (i - 1)
    return SQRT2 * (
        (jacobi_0 * jacobi_1 * (1.0 - b) ** (i - 1) * (1.0 + a))
        + (jacobi_2 * (jacobi_3 - jacobi_4))
    )
