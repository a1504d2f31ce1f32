# gpexplorer/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpexplorer.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for (x, y, xq)
- Hyperparameter checks run before any matrix work
"""
import gpexplorer.num as gnp

from .errors import ConfigurationError, DimensionMismatch, GPExplorerError


def ensure_shapes_and_type(*, x=None, y=None, xq=None):
    """Validate and convert training / query inputs to 1D backend arrays.

    Parameters
    ----------
    x : array_like, optional
        Training inputs (n,).
    y : array_like, optional
        Training targets (n,).
    xq : array_like, optional
        Query points (m,).

    Returns
    -------
    tuple
        (x, y, xq) as 1D arrays (None where not given).

    Raises
    ------
    DimensionMismatch
        If an input is not 1D (a single column (n, 1) is accepted and
        flattened) or if x and y have different lengths.
    """
    if x is not None:
        x = _vector(x, "x")
    if y is not None:
        y = _vector(y, "y")
    if xq is not None:
        xq = _vector(xq, "xq")

    if x is not None and y is not None and x.shape[0] != y.shape[0]:
        raise DimensionMismatch(
            f"x and y must have the same length, got {x.shape[0]} and {y.shape[0]}"
        )

    return x, y, xq


def _vector(v, name):
    v = gnp.as_vector(v)
    if v.ndim != 1:
        raise DimensionMismatch(
            f"{name} must be a 1D sequence of scalars, got shape {tuple(v.shape)}"
        )
    if not bool(gnp.all(gnp.isfinite(v))):
        raise GPExplorerError(f"{name} contains non-finite values")
    return v


def check_noise_sigma(noise_sigma):
    if not gnp.is_finite_scalar(noise_sigma) or float(noise_sigma) < 0.0:
        raise ConfigurationError(
            f"noise_sigma must be a finite number >= 0, got {noise_sigma!r}"
        )
    return float(noise_sigma)


def check_kernel(kernel):
    """Check that `kernel` is a covariance function with valid hyperparameters."""
    if not (callable(getattr(kernel, "compute", None))
            and callable(getattr(kernel, "compute_matrix", None))):
        raise TypeError(
            f"kernel must implement compute and compute_matrix, got {type(kernel)}"
        )
    validate = getattr(kernel, "validate", None)
    if validate is not None:
        validate()
