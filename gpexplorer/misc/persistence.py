# gpexplorer/misc/persistence.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Save and restore a session between runs.

Only the training set and the hyperparameters are written. The fitted
model is rebuilt from them when the state is loaded.
"""
import json
import os

from gpexplorer.config import get_logger
from .session import Session

_logger = get_logger()

STATE_VERSION = 1


def save_state(session, path):
    """Write the persisted fields of `session` to `path` as JSON."""
    state = {"version": STATE_VERSION, **session.to_dict()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(state, f, indent=2)
    _logger.debug("Saved session state to %s", path)


def load_state(path, **kwargs):
    """Read a session saved by save_state.

    A missing file gives a default session. Fields absent from the file
    take their default values. Extra keyword arguments are passed to
    Session (e.g. kernel_class).
    """
    if not os.path.exists(path):
        _logger.info("No saved state at %s, starting from defaults", path)
        return Session(**kwargs)
    with open(path, "r", encoding="utf-8") as f:
        state = json.load(f)
    if not isinstance(state, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(state).__name__}")
    version = state.pop("version", STATE_VERSION)
    if version > STATE_VERSION:
        raise ValueError(f"{path}: unsupported state version {version}")
    return Session.from_dict(state, **kwargs)
