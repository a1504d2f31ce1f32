# gpexplorer/misc/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Session state and its persistence.
"""

from . import session
from . import persistence
from .session import Session
from .persistence import save_state, load_state
