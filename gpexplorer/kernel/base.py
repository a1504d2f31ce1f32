# gpexplorer/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance function interface.

A covariance function only has to provide the scalar operation
`compute(a, b)`. The batch operations `compute_matrix` and
`compute_diagonal` are derived from it and may be overridden by
concrete kernels with vectorized versions returning the same values.
"""
from abc import ABC, abstractmethod

import gpexplorer.num as gnp
from gpexplorer.core.errors import ConfigurationError


class CovarianceFunction(ABC):
    """Covariance function of a GP over scalar inputs.

    Subclasses implement :meth:`compute`. Implementations must be
    symmetric, free of side effects and defined for every real input.
    """

    @abstractmethod
    def compute(self, a: float, b: float) -> float:
        """Covariance between two scalar inputs."""

    def compute_matrix(self, xs, ys):
        """Covariance matrix between two collections of scalar inputs.

        Parameters
        ----------
        xs : array_like, shape (n,)
        ys : array_like, shape (m,)

        Returns
        -------
        K : array_like, shape (n, m)
            K[i, j] = compute(xs[i], ys[j]).
        """
        xs = gnp.to_np(gnp.as_vector(xs))
        ys = gnp.to_np(gnp.as_vector(ys))
        K = [[self.compute(float(a), float(b)) for b in ys] for a in xs]
        return gnp.asarray(K).reshape(xs.shape[0], ys.shape[0])

    def compute_diagonal(self, xs):
        """Prior variances compute(xs[i], xs[i]), shape (n,)."""
        xs = gnp.to_np(gnp.as_vector(xs))
        d = [self.compute(float(a), float(a)) for a in xs]
        return gnp.asarray(d).reshape(xs.shape[0])

    @property
    def hyperparameters(self) -> dict:
        return {}

    def validate(self):
        """Raise ConfigurationError if a hyperparameter is outside its domain."""

    def __repr__(self):
        params = ", ".join(f"{k}={v!r}" for k, v in self.hyperparameters.items())
        return f"{type(self).__name__}({params})"


class StationaryKernel(CovarianceFunction):
    """Base class for kernels parameterized by an amplitude and a length scale.

    Parameters
    ----------
    sigma : float
        Amplitude, variance-like scale. compute(a, a) == sigma. Must be >= 0.
    length_scale : float
        Length scale. Must be > 0.
    """

    def __init__(self, sigma: float = 1.0, length_scale: float = 1.0):
        check_amplitude(sigma)
        check_length_scale(length_scale)
        self._sigma = float(sigma)
        self._length_scale = float(length_scale)

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def length_scale(self) -> float:
        return self._length_scale

    @property
    def hyperparameters(self) -> dict:
        return {"sigma": self._sigma, "length_scale": self._length_scale}

    def validate(self):
        check_amplitude(self._sigma)
        check_length_scale(self._length_scale)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.hyperparameters == other.hyperparameters

    def __hash__(self):
        return hash((type(self).__name__, self._sigma, self._length_scale))

    def compute_diagonal(self, xs):
        # k(a, a) == sigma for every stationary kernel defined here
        xs = gnp.as_vector(xs)
        return gnp.full((xs.shape[0],), self._sigma)

    def _distances(self, xs, ys):
        xs = gnp.as_vector(xs)
        ys = gnp.as_vector(ys)
        return xs.reshape(-1, 1) - ys.reshape(1, -1)


def check_amplitude(sigma):
    if not gnp.is_finite_scalar(sigma) or float(sigma) < 0.0:
        raise ConfigurationError(f"sigma must be a finite number >= 0, got {sigma!r}")


def check_length_scale(length_scale):
    # the kernels divide by length_scale, zero is rejected
    if not gnp.is_finite_scalar(length_scale) or float(length_scale) <= 0.0:
        raise ConfigurationError(
            f"length_scale must be a finite number > 0, got {length_scale!r}"
        )
