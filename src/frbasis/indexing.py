"""Diagonal mode enumeration shared by the 2-D modal bases.

Modes are numbered by sweeping the anti-diagonals ``k = i + j`` of the
``(i, j)`` degree lattice, ``j`` running fastest from 0 to ``k``.  A pair is
kept when it lies inside the truncated family:

* ``"quad"``: ``i <= order`` and ``j <= order``, ``(order + 1)**2`` modes;
* ``"tri"``: ``i + j <= order``, ``(order + 1) * (order + 2) / 2`` modes.

For order 2 on the square this gives
``(0,0), (1,0), (0,1), (2,0), (1,1), (0,2), (2,1), (1,2), (2,2)``.
"""

from __future__ import annotations

from typing import Iterator, Literal

from .errors import InvalidModeError

__all__ = ["n_modes", "mode_to_indices", "mode_indices"]

Shape = Literal["tri", "quad"]


def n_modes(order: int, shape: Shape) -> int:
    """Dimension of the degree-``order`` family on ``shape``."""
    if order < 0:
        raise ValueError("order must be non-negative")
    if shape == "tri":
        return ((order + 1) * (order + 2)) // 2
    if shape == "quad":
        return (order + 1) * (order + 1)
    raise ValueError(f"Unknown element shape: {shape!r}")


def _sweep(order: int, shape: Shape) -> Iterator[tuple[int, int]]:
    n_diag = order + 1 if shape == "tri" else 2 * order + 1
    for k in range(n_diag):
        for j in range(k + 1):
            i = k - j
            if i <= order and j <= order:
                yield i, j


def mode_to_indices(mode: int, order: int, shape: Shape) -> tuple[int, int]:
    """Return the degree pair ``(i, j)`` of the ``mode``-th basis function."""
    n_dof = n_modes(order, shape)
    if not 0 <= mode < n_dof:
        raise InvalidModeError(
            f"Invalid mode {mode} for a {shape} basis of order {order} ({n_dof} modes)."
        )
    for m, ij in enumerate(_sweep(order, shape)):
        if m == mode:
            return ij
    raise AssertionError("mode enumeration is shorter than n_modes")


def mode_indices(order: int, shape: Shape) -> list[tuple[int, int]]:
    """All ``(i, j)`` pairs of the family, in mode order."""
    n_modes(order, shape)
    return list(_sweep(order, shape))
