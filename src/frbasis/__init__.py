"""Polynomial and basis-function evaluation for Flux Reconstruction."""

from .errors import FRBasisError, InvalidModeError, InvalidSchemeError
from .lagrange import lagrange, d_lagrange, dd_lagrange, lagrange_table
from .orthopoly import (
    legendre,
    d_legendre,
    legendre_table,
    eval_gamma,
    factorial,
    jacobi,
    grad_jacobi,
    gauss_legendre_rule,
)
from .indexing import n_modes, mode_to_indices, mode_indices
from .hierarchical import legendre2d_hierarchical, exponential_filter, filter_coefficients
from .dubiner import rs_to_ab, dubiner2d, d_dubiner2d_dr, d_dubiner2d_ds
from .vcjh import Scheme, CPLUS_C1D, SchemeParameter, compute_eta, vcjh1d, d_vcjh1d
from .quadrature import gauss_jacobi_rule, square_rule, triangle_rule, gram_matrix

__all__ = [
    "FRBasisError",
    "InvalidModeError",
    "InvalidSchemeError",
    "lagrange",
    "d_lagrange",
    "dd_lagrange",
    "lagrange_table",
    "legendre",
    "d_legendre",
    "legendre_table",
    "eval_gamma",
    "factorial",
    "jacobi",
    "grad_jacobi",
    "gauss_legendre_rule",
    "n_modes",
    "mode_to_indices",
    "mode_indices",
    "legendre2d_hierarchical",
    "exponential_filter",
    "filter_coefficients",
    "rs_to_ab",
    "dubiner2d",
    "d_dubiner2d_dr",
    "d_dubiner2d_ds",
    "Scheme",
    "CPLUS_C1D",
    "SchemeParameter",
    "compute_eta",
    "vcjh1d",
    "d_vcjh1d",
    "gauss_jacobi_rule",
    "square_rule",
    "triangle_rule",
    "gram_matrix",
]
