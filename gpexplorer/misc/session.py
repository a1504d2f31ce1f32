# gpexplorer/misc/session.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Editable GP session: training set, hyperparameters and current model.

A session is what an interactive front end manipulates. Every edit
(adding or removing a point, changing a hyperparameter) rebuilds the
model from scratch. The rebuilt model replaces the current one in a
single assignment, and only if the rebuild succeeded: readers always
see either the previous model or the new one, never a half-updated
model.
"""
import gpexplorer.num as gnp
from gpexplorer.config import get_logger
from gpexplorer.core import DimensionMismatch, GaussianProcess, GPExplorerError
from gpexplorer.kernel import RbfKernel

_logger = get_logger()

# Slider range offered to users, the model validates its own domains
HYPERPARAMETER_RANGE = (0.0, 10.0)
HYPERPARAMETER_NAMES = ("length_scale", "sigma", "noise_sigma")

DEFAULT_X = (1.0, 2.0, 6.0)
DEFAULT_Y = (1.0, 1.0, -1.0)
DEFAULT_HYPERPARAMETERS = {"length_scale": 1.0, "sigma": 1.0, "noise_sigma": 0.1}

DEFAULT_GRID = (0.0, 10.0, 101)

BAND_TYPES = ("variance", "std")


class Session:
    """Training set + hyperparameters + the GP fitted on them.

    Parameters
    ----------
    x, y : sequence of float, optional
        Training set. Defaults to x = [1, 2, 6], y = [1, 1, -1].
    length_scale, sigma, noise_sigma : float, optional
        RBF kernel hyperparameters and observation noise variance.
    kernel_class : type, optional
        Stationary kernel class built from (sigma, length_scale),
        RbfKernel by default.

    Raises
    ------
    DimensionMismatch
        If x and y have different lengths.
    GPExplorerError
        If a training value is not finite.

    Attributes
    ----------
    last_error : GPExplorerError or None
        Error of the last failed rebuild, None after a successful one.
    """

    def __init__(
        self,
        x=None,
        y=None,
        length_scale=DEFAULT_HYPERPARAMETERS["length_scale"],
        sigma=DEFAULT_HYPERPARAMETERS["sigma"],
        noise_sigma=DEFAULT_HYPERPARAMETERS["noise_sigma"],
        kernel_class=RbfKernel,
    ):
        self._x = [_finite(v, "x") for v in (DEFAULT_X if x is None else x)]
        self._y = [_finite(v, "y") for v in (DEFAULT_Y if y is None else y)]
        if len(self._x) != len(self._y):
            raise DimensionMismatch(
                f"x and y must have the same length, got {len(self._x)} and {len(self._y)}"
            )
        self.length_scale = float(length_scale)
        self.sigma = float(sigma)
        self.noise_sigma = float(noise_sigma)
        self.kernel_class = kernel_class
        self.last_error = None
        self._model = None
        self.rebuild()

    def __repr__(self):
        return (
            f"Session(n={len(self._x)}, length_scale={self.length_scale}, "
            f"sigma={self.sigma}, noise_sigma={self.noise_sigma})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def x(self):
        return list(self._x)

    @property
    def y(self):
        return list(self._y)

    @property
    def model(self):
        """Current fitted GaussianProcess, None if no rebuild ever succeeded."""
        return self._model

    @property
    def hyperparameters(self):
        return {
            "length_scale": self.length_scale,
            "sigma": self.sigma,
            "noise_sigma": self.noise_sigma,
        }

    def __len__(self):
        return len(self._x)

    # ------------------------------------------------------------------
    # Model (re)construction
    # ------------------------------------------------------------------
    def rebuild(self):
        """Fit a new model on the current state.

        Returns
        -------
        bool
            True if the new model replaced the current one. On failure the
            previous model stays in use and the error is kept in last_error.
        """
        try:
            model = GaussianProcess.from_hyperparameters(
                self._x,
                self._y,
                sigma=self.sigma,
                length_scale=self.length_scale,
                noise_sigma=self.noise_sigma,
                kernel_class=self.kernel_class,
            )
        except GPExplorerError as exc:
            self.last_error = exc
            _logger.warning("Model rebuild failed, keeping previous model: %s", exc)
            return False
        self._model = model
        self.last_error = None
        return True

    def add_point(self, x, y):
        """Append (x, y), GPExplorerError if either is not finite."""
        x, y = _finite(x, "x"), _finite(y, "y")
        self._x.append(x)
        self._y.append(y)
        return self.rebuild()

    def remove_point(self, index):
        """Remove the training pair at `index` (IndexError if out of range)."""
        n = len(self._x)
        if not -n <= index < n:
            raise IndexError(f"training point index {index} out of range for {n} points")
        del self._x[index]
        del self._y[index]
        return self.rebuild()

    def nearest_point(self, x, y):
        """Index of the training point closest to (x, y), None if there are none."""
        if not self._x:
            return None
        d2 = [(xi - x) ** 2 + (yi - y) ** 2 for xi, yi in zip(self._x, self._y)]
        return min(range(len(d2)), key=d2.__getitem__)

    def remove_nearest(self, x, y):
        """Remove the training point closest to (x, y).

        Returns the removed index, or None if the training set is empty.
        """
        index = self.nearest_point(x, y)
        if index is not None:
            self.remove_point(index)
        return index

    def clear(self):
        self._x.clear()
        self._y.clear()
        return self.rebuild()

    def set_hyperparameters(self, **kwargs):
        """Update any of length_scale, sigma, noise_sigma and rebuild."""
        unknown = set(kwargs) - set(HYPERPARAMETER_NAMES)
        if unknown:
            raise TypeError(f"unknown hyperparameters: {sorted(unknown)}")
        for name, value in kwargs.items():
            setattr(self, name, float(value))
        return self.rebuild()

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    @staticmethod
    def prediction_grid(start=DEFAULT_GRID[0], stop=DEFAULT_GRID[1], num=DEFAULT_GRID[2]):
        return gnp.linspace(start, stop, num)

    def predict_band(self, xq=None, band="variance"):
        """Posterior mean and band limits on a query grid.

        Parameters
        ----------
        xq : array_like, optional
            Query points, defaults to prediction_grid().
        band : {'variance', 'std'}
            Half-width of the band: the posterior variance itself, or the
            posterior standard deviation.

        Returns
        -------
        (xq, mean, lower, upper) or None if there is no model yet.
        """
        if band not in BAND_TYPES:
            raise ValueError(f"band must be one of {BAND_TYPES}, got {band!r}")
        model = self._model
        if model is None:
            return None
        if xq is None:
            xq = self.prediction_grid()
        xq = gnp.as_vector(xq)
        mean, variance = model.predict(xq)
        half_width = variance if band == "variance" else gnp.sqrt(variance)
        return xq, mean, mean - half_width, mean + half_width

    # ------------------------------------------------------------------
    # Persisted fields
    # ------------------------------------------------------------------
    def to_dict(self):
        """Fields that survive a restart; the fitted model is not one of them."""
        return {"x": self.x, "y": self.y, **self.hyperparameters}

    @classmethod
    def from_dict(cls, state, **kwargs):
        """Build a session from to_dict() output; missing fields take defaults."""
        params = dict(DEFAULT_HYPERPARAMETERS)
        params.update({k: state[k] for k in HYPERPARAMETER_NAMES if k in state})
        x = state.get("x", DEFAULT_X)
        y = state.get("y", DEFAULT_Y)
        return cls(x, y, **params, **kwargs)


def _finite(value, name):
    if not gnp.is_finite_scalar(value):
        raise GPExplorerError(f"{name} must be a finite number, got {value!r}")
    return float(value)
