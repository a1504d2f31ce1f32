"""
GP regression in 1D with a squared-exponential (RBF) covariance

A GP model is built on a handful of noisy observations of a smooth
function. The posterior mean and a 95% / 99% coverage band are drawn
on a regular grid, together with the function itself.

The hyperparameters of the covariance function are fixed by hand
(no parameter estimation is performed here).

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""

import numpy as np
import gpexplorer.num as gnp
import gpexplorer as gpx
from gpexplorer.plot import Figure


def generate_data(ni=8, noise_sigma=0.05, seed=0):
    """
    Data generation
    (xt, zt): target
    (xi, zi): noisy observations
    """
    rng = np.random.default_rng(seed)
    xt = np.linspace(0.0, 10.0, 201)
    zt = np.sin(xt) + 0.1 * xt

    xi = np.sort(rng.uniform(0.0, 10.0, ni))
    zi = np.sin(xi) + 0.1 * xi + np.sqrt(noise_sigma) * rng.standard_normal(ni)

    return xt, zt, xi, zi


def main():
    noise_sigma = 0.05
    xt, zt, xi, zi = generate_data(noise_sigma=noise_sigma)

    kernel = gpx.RbfKernel(sigma=1.0, length_scale=1.5)
    model = gpx.GaussianProcess(gnp.asarray(xi), gnp.asarray(zi), kernel, noise_sigma)
    print(model)

    zpm, zpv = model.predict(gnp.asarray(xt))

    fig = Figure(isinteractive=True)
    fig.plot(xt, zt, "k", linewidth=1, linestyle=(0, (5, 5)), label="truth")
    fig.plotgp(xt, zpm, zpv, band=[0.95, 0.99])
    fig.plotdata(xi, zi)
    fig.xylabels("$x$", "$z$")
    fig.title("Posterior GP")
    fig.show(grid=True, legend=True)

    return model


if __name__ == "__main__":
    main()
