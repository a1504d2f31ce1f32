## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive

import gpexplorer.num as gnp


class Figure:
    """Figures manager class.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
    axes : list of matplotlib.axes.Axes
    ax : matplotlib.axes.Axes
        Current axes.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(_np(x), _np(z), *args, **kargs)

    def plotdata(self, x, z, label="training points"):
        self.ax.plot(_np(x), _np(z), "o", color="#3DBF5A", markersize=7, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        else:
            self.ax.set_xlim(new_limits)
            return new_limits

    def ylim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_ylim()
        else:
            self.ax.set_ylim(new_limits)
            return new_limits

    def plotgp(
        self,
        x,
        mean,
        variance,
        band="variance",
        mean_label="mean",
        show_mean_label=True,
        **kwargs
    ):
        """Posterior mean and uncertainty band.

        Parameters
        ----------
        x, mean, variance : array_like, shape (m,)
        band : 'variance', 'std' or list of float
            'variance': mean +/- variance.
            'std': mean +/- one standard deviation.
            list of coverage levels (e.g. [0.95, 0.99]): Gaussian coverage
            intervals, norminv((1 + level) / 2) standard deviations wide.

        Returns
        -------
        list of (lower, upper) arrays, one per drawn band.
        """
        if not show_mean_label:
            mean_label = ""

        x = _np(x).flatten()
        mean = _np(mean).flatten()
        variance = np.maximum(_np(variance).flatten(), 0.0)

        if band == "variance":
            half_widths = [variance]
            labels = ["mean $\\pm$ variance"]
        elif band == "std":
            half_widths = [np.sqrt(variance)]
            labels = ["mean $\\pm$ std"]
        elif isinstance(band, str):
            raise ValueError(
                f"band must be 'variance', 'std' or a list of coverage levels, got {band!r}"
            )
        else:
            levels = sorted(band, reverse=True)
            delta0 = [stats.norm.ppf((1 + level) / 2) for level in levels]
            half_widths = [delta * np.sqrt(variance) for delta in delta0]
            labels = [f"CI {100 * level:g}%" for level in levels]

        fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"][-len(half_widths):]
        kwargs.setdefault("alpha", 0.8)
        kwargs.setdefault("linewidth", 0.5)

        limits = []
        for i, half_width in enumerate(half_widths):
            lower = mean - half_width
            upper = mean + half_width
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[i % len(fillcol)],
                label=labels[i],
                **kwargs
            )
            self.ax.plot(x, upper, color="#8EC9F0", linewidth=0.8)
            self.ax.plot(x, lower, color="#8EC9F0", linewidth=0.8)
            limits.append((lower, upper))

        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)
        return limits


def plot_session(session, fig=None, xq=None, band="variance"):
    """Draw a session: posterior mean, band and training points.

    Parameters
    ----------
    session : gpexplorer.misc.Session
    fig : Figure, optional
        Figure to draw on; its current axes are cleared first.
    xq : array_like, optional
        Query grid, defaults to session.prediction_grid().
    band : see Figure.plotgp

    Returns
    -------
    Figure
    """
    if fig is None:
        fig = Figure()
    else:
        fig.ax.clear()
        if fig.boxoff:
            fig.set_boxoff()

    model = session.model
    if model is not None:
        if xq is None:
            xq = session.prediction_grid()
        mean, variance = model.predict(xq)
        fig.plotgp(xq, mean, variance, band=band)
    fig.plotdata(session.x, session.y)
    fig.xylabels("$x$", "$y$")
    fig.title("Gaussian Process")
    fig.grid()
    return fig


def _np(a):
    return np.asarray(gnp.to_np(gnp.asarray(a)))
