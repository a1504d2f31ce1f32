"""
GP regression in 1D with user-defined covariance functions

Any object with a scalar `compute(a, b)` method can be used as the
covariance function of a GaussianProcess. Here a periodic covariance
is written by subclassing CovarianceFunction, and its posterior is
compared with the one obtained with the Matern 3/2 covariance shipped
with gpexplorer.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""

import math
import numpy as np
import gpexplorer.num as gnp
import gpexplorer as gpx
from gpexplorer.kernel import Matern32Kernel
from gpexplorer.plot import Figure


class PeriodicKernel(gpx.CovarianceFunction):
    """k(a, b) = sigma * exp(-2 sin^2(pi |a - b| / period) / length_scale^2)"""

    def __init__(self, sigma=1.0, length_scale=1.0, period=2.0):
        self.sigma = sigma
        self.length_scale = length_scale
        self.period = period

    @property
    def hyperparameters(self):
        return {
            "sigma": self.sigma,
            "length_scale": self.length_scale,
            "period": self.period,
        }

    def compute(self, a, b):
        s = math.sin(math.pi * abs(a - b) / self.period)
        return self.sigma * math.exp(-2.0 * s**2 / self.length_scale**2)


def main():
    xi = np.array([0.2, 0.9, 1.6, 2.7, 3.1, 4.4])
    zi = np.cos(np.pi * xi)
    xt = np.linspace(0.0, 8.0, 241)

    kernels = [
        ("periodic", PeriodicKernel(sigma=1.0, length_scale=1.0, period=2.0)),
        ("Matern 3/2", Matern32Kernel(sigma=1.0, length_scale=1.0)),
    ]

    fig = Figure(nrows=len(kernels), ncols=1, isinteractive=True)
    models = []
    for i, (name, kernel) in enumerate(kernels):
        model = gpx.GaussianProcess(gnp.asarray(xi), gnp.asarray(zi), kernel, 1e-3)
        zpm, zpv = model.predict(gnp.asarray(xt))
        fig.subplot(i + 1)
        fig.plotgp(xt, zpm, zpv, band="std")
        fig.plotdata(xi, zi)
        fig.title(name)
        models.append(model)
    fig.show(grid=True)

    return models


if __name__ == "__main__":
    main()
