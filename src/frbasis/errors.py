"""Exceptions raised on invalid basis or scheme requests."""

__all__ = ["FRBasisError", "InvalidModeError", "InvalidSchemeError"]


class FRBasisError(ValueError):
    """Base class for unrecoverable argument errors."""


class InvalidModeError(FRBasisError):
    """Mode index outside the truncated basis."""


class InvalidSchemeError(FRBasisError):
    """Correction scheme / polynomial order combination is not defined."""
