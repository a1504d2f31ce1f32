# gpexplorer/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import exp
import gpexplorer.num as gnp

from .base import StationaryKernel


class RbfKernel(StationaryKernel):
    """Radial basis function (squared exponential) covariance.

    .. math::
        k(a, b) = \\sigma \\exp\\left(-\\frac{(a - b)^2}{2 \\ell^2}\\right)

    Parameters
    ----------
    sigma : float
        Amplitude (>= 0). k(a, a) == sigma.
    length_scale : float
        Length scale :math:`\\ell` (> 0).

    Raises
    ------
    ConfigurationError
        If sigma < 0 or length_scale <= 0.

    Examples
    --------
    >>> k = RbfKernel(sigma=1.0, length_scale=1.0)
    >>> round(k.compute(1.0, 2.0), 8)
    0.60653066
    """

    def compute(self, a: float, b: float) -> float:
        return self._sigma * exp(-0.5 * (a - b) ** 2 / self._length_scale**2)

    def compute_matrix(self, xs, ys):
        D = self._distances(xs, ys)
        return self._sigma * gnp.exp(-0.5 * D**2 / self._length_scale**2)
