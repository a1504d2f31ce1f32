# gpexplorer/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
gpexplorer plotting utilities.

Not imported by `import gpexplorer`, so that the core does not require
a matplotlib backend.
"""

from .plotutils import Figure, plot_session
from .explorer import Explorer

__all__ = ["Figure", "plot_session", "Explorer", "plotutils", "explorer"]

from . import plotutils
from . import explorer
