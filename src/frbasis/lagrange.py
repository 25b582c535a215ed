"""Nodal Lagrange interpolation polynomials on an arbitrary node set.

The mode-th polynomial is one at ``nodes[mode]`` and zero at every other
node.  Nodes must be distinct; a repeated abscissa is not detected and
shows up as inf/nan in the result.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
import numba as nb

from .errors import InvalidModeError

__all__ = [
    "lagrange",
    "d_lagrange",
    "dd_lagrange",
    "lagrange_table",
]


@nb.njit(cache=True, error_model="numpy")
def _lagrange(x_lag: np.ndarray, y: np.ndarray, mode: int) -> np.ndarray:
    out = np.empty(y.size)
    for q in range(y.size):
        lag = 1.0
        for i in range(x_lag.size):
            if i != mode:
                lag = lag * ((y[q] - x_lag[i]) / (x_lag[mode] - x_lag[i]))
        out[q] = lag
    return out


@nb.njit(cache=True, error_model="numpy")
def _d_lagrange(x_lag: np.ndarray, y: np.ndarray, mode: int) -> np.ndarray:
    out = np.empty(y.size)
    n = x_lag.size
    for q in range(y.size):
        d_lag = 0.0
        for i in range(n):
            if i != mode:
                num = 1.0
                den = 1.0
                for j in range(n):
                    if j != mode and j != i:
                        num = num * (y[q] - x_lag[j])
                    if j != mode:
                        den = den * (x_lag[mode] - x_lag[j])
                d_lag = d_lag + num / den
        out[q] = d_lag
    return out


@nb.njit(cache=True, error_model="numpy")
def _dd_lagrange(x_lag: np.ndarray, y: np.ndarray, mode: int) -> np.ndarray:
    out = np.empty(y.size)
    n = x_lag.size
    for q in range(y.size):
        dd_lag = 0.0
        for i in range(n):
            if i == mode:
                continue
            for j in range(n):
                if j == mode or j == i:
                    continue
                num = 1.0
                den = 1.0
                for k in range(n):
                    if k != mode:
                        if k != i and k != j:
                            num *= y[q] - x_lag[k]
                        den *= x_lag[mode] - x_lag[k]
                dd_lag = dd_lag + num / den
        out[q] = dd_lag
    return out


_KERNELS = (_lagrange, _d_lagrange, _dd_lagrange)


def _evaluate(kernel, nodes: ArrayLike, y: ArrayLike, mode: int) -> np.ndarray:
    x_lag = np.ascontiguousarray(nodes, dtype=np.float64).ravel()
    if not 0 <= mode < x_lag.size:
        raise InvalidModeError(
            f"Invalid mode {mode} for a Lagrange basis on {x_lag.size} nodes."
        )
    y = np.asarray(y, dtype=np.float64)
    vals = kernel(x_lag, np.ascontiguousarray(y).ravel(), int(mode))
    return vals.reshape(y.shape)


def lagrange(nodes: ArrayLike, y: ArrayLike, mode: int) -> np.ndarray:
    """Value of the ``mode``-th Lagrange polynomial at ``y``."""
    return _evaluate(_lagrange, nodes, y, mode)


def d_lagrange(nodes: ArrayLike, y: ArrayLike, mode: int) -> np.ndarray:
    """First derivative of the ``mode``-th Lagrange polynomial at ``y``."""
    return _evaluate(_d_lagrange, nodes, y, mode)


def dd_lagrange(nodes: ArrayLike, y: ArrayLike, mode: int) -> np.ndarray:
    """Second derivative of the ``mode``-th Lagrange polynomial at ``y``."""
    return _evaluate(_dd_lagrange, nodes, y, mode)


def lagrange_table(nodes: ArrayLike, y: ArrayLike, deriv: int = 0) -> np.ndarray:
    """Evaluate every Lagrange polynomial of ``nodes`` at the points ``y``.

    Parameters
    ----------
    nodes : array_like
        Interpolation nodes, shape ``(P,)``.
    y : array_like
        Evaluation points, any shape.
    deriv : int, optional
        Derivative order, 0, 1 or 2.

    Returns
    -------
    ndarray
        Array of shape ``(P, *y.shape)`` with ``table[m] = l_m^(deriv)(y)``.
        With ``y = nodes`` and ``deriv = 1`` the transpose is the nodal
        differentiation matrix.
    """
    if deriv not in (0, 1, 2):
        raise ValueError("deriv must be 0, 1 or 2")
    kernel = _KERNELS[deriv]
    x_lag = np.ascontiguousarray(nodes, dtype=np.float64).ravel()
    return np.stack([_evaluate(kernel, x_lag, y, m) for m in range(x_lag.size)])
