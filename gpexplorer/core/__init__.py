# gpexplorer/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpexplorer package.

This subpackage contains the exact GP regression model, the regularizer
and inversion of the training covariance, and the errors raised while
building a model.

Public API
----------
GaussianProcess : class
    Fitted GP model (construction is the fit), exposes predict.
EPS : float
    Jitter added to covariance diagonals.
GPExplorerError, DimensionMismatch, ConfigurationError, NotInvertible
    Error taxonomy.
"""

from .errors import (
    GPExplorerError,
    DimensionMismatch,
    ConfigurationError,
    NotInvertible,
)
from .linalg import EPS, regularize, invert
from .model import GaussianProcess

__all__ = [
    "GaussianProcess",
    "EPS",
    "regularize",
    "invert",
    "GPExplorerError",
    "DimensionMismatch",
    "ConfigurationError",
    "NotInvertible",
]
