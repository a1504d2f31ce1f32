# gpexplorer/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpexplorer.core modules.

This file isolates the regularizer applied to covariance matrices and
the inversion of the regularized training covariance, both built on
top of `gpexplorer.num as gnp`.
"""
import gpexplorer.num as gnp
from gpexplorer.config import get_logger

from .errors import NotInvertible

_logger = get_logger()

# Jitter added to covariance diagonals so that they stay positive definite
EPS = 1e-6


def regularize(K, noise_sigma=0.0, eps=EPS):
    """Return K + (noise_sigma + eps) I.

    Parameters
    ----------
    K : array_like, shape (n, n)
        Covariance matrix. Not modified.
    noise_sigma : float, optional
        Observation noise variance added to the diagonal (default 0).
    eps : float, optional
        Jitter (default EPS).

    Returns
    -------
    K_reg : array_like, shape (n, n)

    Notes
    -----
    The jitter is always added, whatever the noise level: with zero noise,
    duplicated or nearly coincident inputs make K singular or badly
    conditioned.
    """
    if K.ndim != 2 or K.shape[0] != K.shape[1]:
        raise ValueError(f"K must be a square matrix, got shape {tuple(K.shape)}")
    return K + (noise_sigma + eps) * gnp.eye(K.shape[0])


def invert(K):
    """Inverse of a regularized covariance matrix.

    A Cholesky-based inverse is tried first. If the factorization fails
    (K not positive definite, e.g. with a user kernel that is not a valid
    covariance), a general inverse is attempted.

    Parameters
    ----------
    K : array_like, shape (n, n)

    Returns
    -------
    Kinv : array_like, shape (n, n)

    Raises
    ------
    NotInvertible
        If no finite inverse could be computed.
    """
    n = K.shape[0]
    if n == 0:
        return gnp.zeros((0, 0))

    try:
        Kinv = gnp.cholesky_inv(K)
    except Exception as exc:
        if not gnp._is_linalg_exception(exc):
            raise
        _logger.debug("Cholesky inversion failed (%s), trying a general inverse", exc)
        Kinv = None

    if Kinv is None or not _all_finite(Kinv):
        try:
            Kinv = gnp.inv(K)
        except Exception as exc:
            if not gnp._is_linalg_exception(exc):
                raise
            raise NotInvertible(
                f"regularized covariance matrix ({n}x{n}) is not invertible: {exc}"
            ) from exc
        if not _all_finite(Kinv):
            raise NotInvertible(
                f"inverse of the regularized covariance matrix ({n}x{n}) is not finite"
            )
    return Kinv


def _all_finite(A):
    return bool(gnp.all(gnp.isfinite(A)))
