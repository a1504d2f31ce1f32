# gpexplorer/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend dispatcher for gpexplorer."""

from gpexplorer.config import init_backend

from . import shared as _shared

_gpexplorer_backend_ = init_backend()

if _gpexplorer_backend_ == "numpy":
    from . import numpy_backend as _backend
elif _gpexplorer_backend_ == "torch":
    from . import torch_backend as _backend
else:
    raise RuntimeError(
        "Please set the GPEXPLORER_BACKEND environment variable to 'numpy' or 'torch'."
    )

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
as_vector = _shared.as_vector
is_finite_scalar = _shared.is_finite_scalar
