# gpexplorer/core/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Errors raised while building a GP model.

All of them are recoverable by the caller, and all of them are also
``ValueError`` instances.
"""


class GPExplorerError(ValueError):
    """Base class of the errors raised by gpexplorer."""


class DimensionMismatch(GPExplorerError):
    """Training inputs and targets have different lengths (or are not 1D)."""


class ConfigurationError(GPExplorerError):
    """A hyperparameter is outside its domain."""


class NotInvertible(GPExplorerError):
    """The regularized training covariance matrix could not be inverted."""
