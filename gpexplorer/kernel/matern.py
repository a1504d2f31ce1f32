# gpexplorer/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp, sqrt
import gpexplorer.num as gnp

from .base import StationaryKernel

_SQRT3 = sqrt(3.0)


class Matern32Kernel(StationaryKernel):
    """Matérn 3/2 covariance.

    .. math::
        k(a, b) = \\sigma (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h),
        \\quad h = |a - b| / \\ell

    Parameters
    ----------
    sigma : float
        Amplitude (>= 0).
    length_scale : float
        Length scale :math:`\\ell` (> 0).
    """

    def compute(self, a: float, b: float) -> float:
        t = _SQRT3 * abs(a - b) / self._length_scale
        return self._sigma * (1.0 + t) * exp(-t)

    def compute_matrix(self, xs, ys):
        t = _SQRT3 * gnp.abs(self._distances(xs, ys)) / self._length_scale
        return self._sigma * (1.0 + t) * gnp.exp(-t)
