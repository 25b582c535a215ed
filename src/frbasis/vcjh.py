"""Vincent-Castonguay-Jameson-Huynh (VCJH) correction functions.

The left and right correction functions of order ``P`` are blends of the
Legendre polynomials ``P_{P-1}``, ``P_P`` and ``P_{P+1}`` controlled by a
single constant ``eta``:

    g_L = (-1)**P / 2 * (P_P - (eta P_{P-1} + P_{P+1}) / (1 + eta))
    g_R =         1 / 2 * (P_P + (eta P_{P-1} + P_{P+1}) / (1 + eta))

``g_L(-1) = 1``, ``g_L(1) = 0`` and ``g_R`` mirrors it.  ``eta = 0``
recovers the discontinuous Galerkin scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidSchemeError
from .orthopoly import d_legendre, factorial, legendre

__all__ = [
    "Scheme",
    "CPLUS_C1D",
    "SchemeParameter",
    "compute_eta",
    "vcjh1d",
    "d_vcjh1d",
]


class Scheme(IntEnum):
    """Members of the VCJH family, numbered by their input codes."""

    DG = 0
    SD = 1
    HU = 2
    CPLUS = 3

    @classmethod
    def coerce(cls, value: "Scheme | int | str") -> "Scheme":
        """Accept a member, its integer code or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls[value.strip().upper().replace("+", "PLUS")]
            return cls(value)
        except (KeyError, ValueError, TypeError):
            raise InvalidSchemeError(f"Invalid VCJH scheme: {value!r}") from None


# 1-D energy-stability constants of the C+ scheme, keyed by order
CPLUS_C1D = {
    2: 0.206,
    3: 3.80e-3,
    4: 4.67e-5,
    5: 4.28e-7,
}


def compute_eta(scheme: "Scheme | int | str", order: int, *, verbose: bool = False) -> float:
    """Blending constant ``eta`` of a VCJH scheme at polynomial order ``order``.

    Parameters
    ----------
    scheme : Scheme, int or str
        ``DG``, ``SD``, ``HU`` or ``CPLUS``.
    order : int
        Polynomial order of the solution, ``order >= 0``.
    verbose : bool, optional
        Print the selected constant.

    Returns
    -------
    float
        ``0`` for DG, ``P / (P + 1)`` for SD, ``(P + 1) / P`` for HU and
        ``c (2P + 1) / 2 (P! a_P)**2`` for C+, with
        ``a_P = (2P)! / (2**P (P!)**2)`` the leading coefficient of ``P_P``.

    Raises
    ------
    InvalidSchemeError
        For a non-DG scheme at order 0, a C+ scheme outside orders 2-5, or
        an unknown scheme.
    """
    scheme = Scheme.coerce(scheme)
    if order < 0:
        raise InvalidSchemeError(f"Polynomial order must be non-negative, got {order}.")
    if order == 0 and scheme != Scheme.DG:
        raise InvalidSchemeError("P=0 only compatible with DG. Set VCJH scheme type to 0!")

    if scheme == Scheme.DG:
        eta = 0.0
    elif scheme == Scheme.SD:
        eta = (1.0 * order) / (1.0 * (order + 1))
    elif scheme == Scheme.HU:
        eta = (1.0 * (order + 1)) / (1.0 * order)
    else:
        if order not in CPLUS_C1D:
            raise InvalidSchemeError(f"C_plus scheme not implemented for order {order}.")
        c_1d = CPLUS_C1D[order]
        ap = 1.0 / 2.0 ** order * factorial(2 * order) / (factorial(order) * factorial(order))
        eta = c_1d * (2 * order + 1) / 2 * (factorial(order) * ap) * (factorial(order) * ap)

    if verbose:
        print(f"VCJH {scheme.name}, P={order}: eta={eta:.6e}")
    return eta


def _check_side(side: int) -> None:
    if side not in (0, 1):
        raise ValueError(f"side must be 0 (left) or 1 (right), got {side}")


def vcjh1d(xi: ArrayLike, side: int, order: int, eta: float) -> np.ndarray:
    """Left (``side=0``) or right (``side=1``) correction function at ``xi``."""
    _check_side(side)
    blend = (eta * legendre(xi, order - 1) + legendre(xi, order + 1)) / (1.0 + eta)
    if side == 0:
        return (-1.0) ** order / 2.0 * (legendre(xi, order) - blend)
    return 0.5 * (legendre(xi, order) + blend)


def d_vcjh1d(xi: ArrayLike, side: int, order: int, eta: float) -> np.ndarray:
    """Derivative of :func:`vcjh1d` in ``xi``."""
    _check_side(side)
    if order == 0:
        # P_{-1} is not defined
        blend = d_legendre(xi, order + 1) / (1.0 + eta)
    else:
        blend = ((eta * d_legendre(xi, order - 1)) + d_legendre(xi, order + 1)) / (1.0 + eta)
    if side == 0:
        return 0.5 * (-1.0) ** order * (d_legendre(xi, order) - blend)
    return 0.5 * (d_legendre(xi, order) + blend)


@dataclass(frozen=True)
class SchemeParameter:
    """A VCJH scheme at a fixed polynomial order.

    The combination is validated on construction, so an instance always
    carries a usable ``eta``.
    """

    scheme: Scheme
    order: int
    eta: float = field(init=False)

    def __post_init__(self):
        scheme = Scheme.coerce(self.scheme)
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "eta", compute_eta(scheme, self.order))

    def correction(self, xi: ArrayLike, side: int) -> np.ndarray:
        return vcjh1d(xi, side, self.order, self.eta)

    def d_correction(self, xi: ArrayLike, side: int) -> np.ndarray:
        return d_vcjh1d(xi, side, self.order, self.eta)
