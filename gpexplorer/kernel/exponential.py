# gpexplorer/kernel/exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp
import gpexplorer.num as gnp

from .base import StationaryKernel


class ExponentialKernel(StationaryKernel):
    """Exponential covariance.

    .. math::
        k(a, b) = \\sigma \\exp(-|a - b| / \\ell)
    """

    def compute(self, a: float, b: float) -> float:
        return self._sigma * exp(-abs(a - b) / self._length_scale)

    def compute_matrix(self, xs, ys):
        h = gnp.abs(self._distances(xs, ys)) / self._length_scale
        return self._sigma * gnp.exp(-h)
