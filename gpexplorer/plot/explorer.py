# gpexplorer/plot/explorer.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Interactive GP explorer.

A matplotlib window showing the posterior of a session, with sliders
for the hyperparameters, a button clearing the training set, and mouse
editing of the training points: a left click on an empty spot adds a
point, a left click on a training point removes it.
"""
import os

import numpy as np
from matplotlib.widgets import Button, Slider

from gpexplorer.config import get_logger
from gpexplorer.misc.persistence import load_state, save_state
from gpexplorer.misc.session import HYPERPARAMETER_RANGE, Session
from .plotutils import Figure, plot_session

_logger = get_logger()

# Where main() keeps the session between runs
DEFAULT_STATE_PATH = os.path.join(os.path.expanduser("~"), ".gpexplorer.json")

# Radius, in pixels, of the area around a training point where a click removes it
PICK_RADIUS = 8.0

_SLIDERS = (
    ("length_scale", "Kernel length scale"),
    ("sigma", "Kernel sigma"),
    ("noise_sigma", "Noise sigma"),
)


class Explorer:
    """Interactive view of a Session.

    Parameters
    ----------
    session : Session, optional
        Session to display and edit, a default session if omitted.
    band : {'variance', 'std'} or list of float
        Band drawn around the mean, see Figure.plotgp.
    state_path : str, optional
        If given, the session state is saved there when the window closes.
    """

    def __init__(self, session=None, band="variance", state_path=None, **kargs):
        self.session = Session() if session is None else session
        self.band = band
        self.state_path = state_path

        self.figure = Figure(**kargs)
        self.fig = self.figure.fig
        self.ax = self.figure.ax
        self.fig.subplots_adjust(bottom=0.32)

        vmin, vmax = HYPERPARAMETER_RANGE
        self.sliders = {}
        for i, (name, label) in enumerate(_SLIDERS):
            slider_ax = self.fig.add_axes([0.25, 0.17 - 0.05 * i, 0.6, 0.03])
            slider = Slider(
                slider_ax, label, vmin, vmax, valinit=getattr(self.session, name)
            )
            slider.on_changed(self._make_slider_callback(name))
            self.sliders[name] = slider

        button_ax = self.fig.add_axes([0.25, 0.01, 0.2, 0.04])
        self.clear_button = Button(button_ax, "Clear all points")
        self.clear_button.on_clicked(self._on_clear)

        self.fig.canvas.mpl_connect("button_press_event", self._on_click)
        if state_path is not None:
            self.fig.canvas.mpl_connect("close_event", self._on_close)
        self.redraw()

    # ------------------------------------------------------------------
    def redraw(self):
        xlim = self.ax.get_xlim() if self.ax.has_data() else None
        plot_session(self.session, self.figure, band=self.band)
        if xlim is not None:
            self.ax.set_xlim(xlim)
        if self.session.last_error is not None:
            self.ax.set_title(f"Gaussian Process (not updated: {self.session.last_error})")
        self.fig.canvas.draw_idle()

    def show(self):
        self.figure.show(legend=True)

    # ------------------------------------------------------------------
    def _make_slider_callback(self, name):
        def on_changed(value):
            self.session.set_hyperparameters(**{name: value})
            self.redraw()

        return on_changed

    def _on_clear(self, event=None):
        self.session.clear()
        self.redraw()

    def _on_close(self, event=None):
        save_state(self.session, self.state_path)

    def _on_click(self, event):
        if event.inaxes is not self.ax or event.button != 1:
            return
        if event.xdata is None or event.ydata is None:
            return
        index = self._hit_point(event.x, event.y)
        if index is not None:
            _logger.debug("Removing training point %d", index)
            self.session.remove_point(index)
        else:
            self.session.add_point(event.xdata, event.ydata)
        self.redraw()

    def _hit_point(self, px, py):
        """Index of the training point within PICK_RADIUS pixels of (px, py)."""
        if len(self.session) == 0:
            return None
        points = np.column_stack((self.session.x, self.session.y))
        pixels = self.ax.transData.transform(points)
        d2 = np.sum((pixels - np.array([px, py])) ** 2, axis=1)
        index = int(np.argmin(d2))
        if d2[index] <= PICK_RADIUS**2:
            return index
        return None


def main(state_path=DEFAULT_STATE_PATH):
    session = load_state(state_path)
    Explorer(session, state_path=state_path).show()


if __name__ == "__main__":
    main()
