# gpexplorer/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for scalar-input Gaussian Processes.

Modules
-------
base
    CovarianceFunction interface and the amplitude / length-scale base class.
rbf
    Radial basis function (squared exponential) kernel.
exponential
    Exponential kernel.
matern
    Matérn 3/2 kernel.

Public API
-----------
CovarianceFunction, StationaryKernel, RbfKernel, ExponentialKernel,
Matern32Kernel
"""

from .base import CovarianceFunction, StationaryKernel
from .rbf import RbfKernel
from .exponential import ExponentialKernel
from .matern import Matern32Kernel

__all__ = [
    "CovarianceFunction",
    "StationaryKernel",
    "RbfKernel",
    "ExponentialKernel",
    "Matern32Kernel",
]
