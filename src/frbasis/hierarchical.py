"""Tensor-product Legendre basis on the reference square [-1, 1]^2."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .indexing import mode_indices, mode_to_indices, n_modes
from .orthopoly import legendre

__all__ = [
    "legendre2d_hierarchical",
    "exponential_filter",
    "filter_coefficients",
]


def legendre2d_hierarchical(mode: int, loc: Sequence[ArrayLike], order: int) -> np.ndarray:
    """Evaluate ``P_i(x) P_j(y)`` for the ``mode``-th pair ``(i, j)``.

    Parameters
    ----------
    mode : int
        Linear mode index, ``0 <= mode < (order + 1)**2``.
    loc : pair of array_like
        Coordinates ``(x, y)``; the two entries broadcast together.
    order : int
        Truncation order of the basis in each direction.
    """
    i, j = mode_to_indices(mode, order, "quad")
    x, y = loc
    return legendre(x, i) * legendre(y, j)


def exponential_filter(mode: int, order: int, exponent: float) -> float:
    """Modal damping coefficient ``exp(-eta**exponent)``.

    ``eta = (i + j) / (order + 1)**2``, so the coefficient is 1 for the
    constant mode and decreases with the total degree of the mode.
    """
    i, j = mode_to_indices(mode, order, "quad")
    eta = (i + j) / n_modes(order, "quad")
    return float(np.exp(-1 * eta ** exponent))


def filter_coefficients(order: int, exponent: float) -> np.ndarray:
    """Filter coefficients of every mode, in mode order."""
    n_dof = n_modes(order, "quad")
    eta = np.array([i + j for i, j in mode_indices(order, "quad")], dtype=float) / n_dof
    return np.exp(-1 * eta ** exponent)
