# gpexplorer/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regression model.
"""
import gpexplorer.num as gnp
from gpexplorer.config import get_logger

from . import linalg
from . import utils

_logger = get_logger()


class GaussianProcess:
    """Gaussian Process (GP) regression over scalar inputs.

    Building an instance fits the model: the covariance matrix of the
    training inputs is assembled, regularized and inverted once, and the
    inverse is kept for all subsequent predictions. An instance is never
    modified afterwards; new data or new hyperparameters mean a new
    instance.

    Parameters
    ----------
    x : array_like, shape (n,)
        Training inputs.
    y : array_like, shape (n,)
        Training targets, y[i] observed at x[i].
    kernel : gpexplorer.kernel.CovarianceFunction
        Covariance function of the GP prior.
    noise_sigma : float, optional
        Observation noise variance added to the diagonal of the training
        covariance (>= 0, default 0).

    Raises
    ------
    ConfigurationError
        If noise_sigma < 0 or a kernel hyperparameter is out of its domain.
    DimensionMismatch
        If x and y are not 1D sequences of the same length.
    NotInvertible
        If the regularized training covariance cannot be inverted.

    Examples
    --------
    >>> from gpexplorer.kernel import RbfKernel
    >>> gp = GaussianProcess([1.0, 2.0, 6.0], [1.0, 1.0, -1.0],
    ...                      RbfKernel(sigma=1.0, length_scale=1.0), 0.1)
    >>> mean, variance = gp.predict([1.0, 2.0, 6.0])
    """

    def __init__(self, x, y, kernel, noise_sigma=0.0):
        noise_sigma = utils.check_noise_sigma(noise_sigma)
        utils.check_kernel(kernel)
        x, y, _ = utils.ensure_shapes_and_type(x=x, y=y)

        K = kernel.compute_matrix(x, x)
        Kinv = linalg.invert(linalg.regularize(K, noise_sigma))

        self._kernel = kernel
        self._x = gnp.copy(x)
        self._y = gnp.copy(y)
        self._noise_sigma = noise_sigma
        self._Kinv = Kinv
        self._alpha = gnp.matmul(Kinv, self._y)

        _logger.debug(
            "Fitted GP on %d points with %r, noise_sigma=%g",
            self.n,
            kernel,
            noise_sigma,
        )

    @classmethod
    def from_hyperparameters(
        cls, x, y, sigma=1.0, length_scale=1.0, noise_sigma=0.0, kernel_class=None
    ):
        """Fit a GP with a stationary kernel built from (sigma, length_scale).

        kernel_class defaults to gpexplorer.kernel.RbfKernel.
        """
        if kernel_class is None:
            from gpexplorer.kernel import RbfKernel

            kernel_class = RbfKernel
        kernel = kernel_class(sigma=sigma, length_scale=length_scale)
        return cls(x, y, kernel, noise_sigma)

    def __repr__(self):
        output = str("<gpexplorer.core.GaussianProcess object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Training points: {self.n}\n"
            f"  Covariance Function: {self._kernel!r}\n"
            f"  Noise sigma: {self._noise_sigma}"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def x(self):
        return gnp.copy(self._x)

    @property
    def y(self):
        return gnp.copy(self._y)

    @property
    def n(self):
        return self._x.shape[0]

    @property
    def kernel(self):
        return self._kernel

    @property
    def noise_sigma(self):
        return self._noise_sigma

    @property
    def inverse_covariance(self):
        """Inverse of K(x, x) + (noise_sigma + EPS) I."""
        return gnp.copy(self._Kinv)

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict(self, xq, return_type=0, include_noise=False):
        """Posterior mean and variance at query points.

        Parameters
        ----------
        xq : array_like, shape (m,)
            Query points.
        return_type : int, optional
            -1: no variance (None is returned in its place),
             0: posterior variances, shape (m,) (default),
             1: full posterior covariance, shape (m, m).
        include_noise : bool, optional
            Add noise_sigma to the variance, i.e. predict a new noisy
            observation instead of the latent function (default False).

        Returns
        -------
        mean : array_like, shape (m,)
            Posterior mean, in the order of xq.
        variance : array_like, shape (m,) or (m, m) or None
            Posterior variance (or covariance), EPS included.

        Notes
        -----
        With K(X, x*) of shape (n, m),

        .. math::
            \\mu(x^*) = K(X, x^*)^T K^{-1} y, \\qquad
            \\sigma^2(x^*) = k(x^*, x^*) - K(X, x^*)^T K^{-1} K(X, x^*)

        The subtraction can leave small negative values on the diagonal;
        returned variances are clamped at zero. The full covariance
        (return_type=1) is returned as computed.
        """
        _, _, xq = utils.ensure_shapes_and_type(xq=xq)

        Kit = self._kernel.compute_matrix(self._x, xq)
        Kti = gnp.transpose(Kit)
        zt_posterior_mean = gnp.matmul(Kti, self._alpha)

        if return_type == -1:
            return zt_posterior_mean, None

        # kriging weights, shape (n, m)
        lambda_t = gnp.matmul(self._Kinv, Kit)
        noise = self._noise_sigma if include_noise else 0.0

        if return_type == 0:
            zt_prior_variance = self._prior_variance(xq)
            zt_posterior_variance = (
                zt_prior_variance
                - gnp.einsum("ij,ij->j", lambda_t, Kit)
                + linalg.EPS
                + noise
            )
            zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
        elif return_type == 1:
            Ktt = self._kernel.compute_matrix(xq, xq)
            zt_posterior_variance = linalg.regularize(
                Ktt - gnp.matmul(Kti, lambda_t), noise
            )
        else:
            raise ValueError("return_type must be in {-1, 0, 1}")

        return zt_posterior_mean, zt_posterior_variance

    def _prior_variance(self, xq):
        compute_diagonal = getattr(self._kernel, "compute_diagonal", None)
        if compute_diagonal is None:
            return gnp.diag(self._kernel.compute_matrix(xq, xq))
        return compute_diagonal(xq)
